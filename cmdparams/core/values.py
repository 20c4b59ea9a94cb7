"""Parameter value variant.

A :class:`ParamValue` holds exactly one value of one kind together with the
metadata the descriptor generator renders:

- ``tags``: child elements (description, label, longflag, flag, index, ...)
- ``attribs``: attributes of the parameter element (fileExtensions, ...)
- ``constraints``: children of the ``constraints`` element (minimum, ...)

All conversions go through the kind's :class:`~cmdparams.core.types.TypeSpec`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from cmdparams.core.types import TypeSpec, TypeTag, get_type_spec


@dataclass(eq=False)
class ParamValue:
    """A typed parameter value plus its descriptor metadata.

    Parameters
    ----------
    type_tag : TypeTag or str
        Kind of the value; fixed for the lifetime of this instance
    value : Any, optional
        Initial value, coerced into the kind's storage type. Defaults to the
        kind's empty value (``False``, ``0``, ``""``, ``[]`` ...)

    Examples
    --------
    >>> p = ParamValue(TypeTag.INTEGER_VECTOR)
    >>> p.set_string("1,2,3,4")
    >>> p.value
    [1, 2, 3, 4]
    >>> p.get_string()
    '1,2,3,4'
    """

    type_tag: TypeTag
    value: Any = None
    tags: dict[str, str] = field(default_factory=dict)
    attribs: dict[str, str] = field(default_factory=dict)
    constraints: dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        self.type_tag = TypeTag(self.type_tag)
        if self.value is None:
            self.value = self.spec.default()
        else:
            self.value = self.spec.coerce(self.value)

    @property
    def spec(self) -> TypeSpec:
        return get_type_spec(self.type_tag)

    def get_type(self) -> TypeTag:
        return self.type_tag

    def get_string(self) -> str:
        """Return the canonical string form of the current value."""
        return self.spec.format(self.value)

    def set_string(self, text: str) -> None:
        """Replace the value by parsing ``text``.

        Raises
        ------
        ParamValueError
            If ``text`` cannot be converted; the value is left unchanged.
        """
        self.value = self.spec.parse(text)

    def set_value(self, value: Any) -> None:
        self.value = self.spec.coerce(value)

    def __repr__(self) -> str:
        return f"ParamValue({self.type_tag.value}={self.get_string()!r})"
