"""Parameter declaration handles.

:func:`declare_param` is the single entry point for declaring a parameter.
It returns a :class:`ParamProxy` bound to ``(section, key)``; the proxy does
not hold the value, the registry does. Declaring the same pair again returns
a new proxy over the same stored value, so metadata accumulates.

Typical use::

    registry = ParamRegistry("Smoother", "Smooths a volume")
    declare_param(registry, "Input", "Volume", TypeTag.IMAGE) \\
        .set_file_extensions(".nrrd,.nii") \\
        .declare_index("Volume to smooth", 0) \\
        .set_channel(True)
    sigma = declare_param(registry, "Filter", "Sigma", TypeTag.DOUBLE) \\
        .declare("Kernel width", "s").set_range(0, 10).set_value(1.5)

The proxy's kind does not have to match the stored kind. Reading or writing
through a proxy of a different kind converts through the canonical string,
which may lose information (e.g. ``double`` -> ``integer``). A conversion
that fails is logged, never raised.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from cmdparams.config.exceptions import ParamValueError, UnsupportedMetadataError
from cmdparams.core.registry import ParamRegistry
from cmdparams.core.types import TypeSpec, TypeTag, format_number, get_type_spec
from cmdparams.core.values import ParamValue
from cmdparams.utils.logging import get_logger

logger = get_logger(__name__)


def normalized_name(section: str, key: str) -> str:
    """Long-flag name of a parameter: ``"Basic Types", "Bool Param"`` -> ``basic-types-bool-param``."""
    return f"{section}-{key}".lower().replace(" ", "-")


class ParamProxy:
    """Handle to one declared parameter.

    Creating a proxy for an undeclared pair stores a fresh value of the
    proxy's kind and binds its long flag (``--section-key``), so every
    parameter can be set from the command line. An existing value is reused
    as is; call :meth:`declare_type` to force the proxy's kind onto it.

    All metadata setters return the proxy for chaining.
    """

    def __init__(
        self,
        registry: ParamRegistry,
        section: str,
        key: str,
        type_tag: TypeTag | str = TypeTag.STRING,
    ):
        self.registry = registry
        self.section = section
        self.key = key
        self.type_tag = TypeTag(type_tag)

        if registry.get_param(section, key) is None:
            self.declare_type()

    @property
    def spec(self) -> TypeSpec:
        return get_type_spec(self.type_tag)

    @property
    def param(self) -> ParamValue:
        return self.registry.get_param(self.section, self.key)

    @property
    def name(self) -> str:
        return normalized_name(self.section, self.key)

    def declare_type(self) -> ParamProxy:
        """Store a value of this proxy's kind, keeping the old value's string."""
        self.registry.set_param(self.section, self.key, ParamValue(self.type_tag))
        return self.declare("")

    # ------------------------------------------------------------------
    # Command-line declaration
    # ------------------------------------------------------------------

    def declare(self, description: str, shortflag: str | int = "") -> ParamProxy:
        """Bind ``--section-key`` and, if given, a single-character ``-x`` flag.

        An integer ``shortflag`` declares a positional argument instead, see
        :meth:`declare_index`.
        """
        if isinstance(shortflag, int) and not isinstance(shortflag, bool):
            return self.declare_index(description, shortflag)

        tags = self.param.tags
        tags["longflag"] = self.name
        self.registry.set_flag(f"--{self.name}", self.section, self.key)
        tags["description"] = description
        if shortflag:
            self.registry.set_flag(f"-{shortflag}", self.section, self.key)
            tags["flag"] = shortflag
        return self

    def declare_index(self, description: str, index: int) -> ParamProxy:
        """Bind the ``index``-th bare command-line token to this parameter.

        The long flag stays bound, but the flag tags are dropped so the
        descriptor and the help text list the parameter as positional.
        """
        tags = self.param.tags
        tags.pop("flag", None)
        tags.pop("longflag", None)
        tags["index"] = str(index)
        tags["description"] = description
        self.registry.set_flag(str(index), self.section, self.key)
        return self

    # ------------------------------------------------------------------
    # Value access
    # ------------------------------------------------------------------

    def get_value(self) -> Any:
        """Return the value, converted through its string if the kinds differ.

        A stored string this proxy's kind cannot parse yields the kind's
        empty value (``0``, ``False``, ``[]`` ...) and a warning.
        """
        param = self.param
        if param.type_tag is self.type_tag:
            return param.value
        try:
            return self.spec.parse(param.get_string())
        except ParamValueError as e:
            logger.warning(
                f"[{self.section}] {self.key} read as {self.type_tag}: "
                f"{e.original_message}"
            )
            return self.spec.default()

    def set_value(self, value: Any) -> ParamProxy:
        """Assign ``value``; across kinds, an unparsable value is logged and dropped."""
        param = self.param
        if param.type_tag is self.type_tag:
            param.set_value(value)
            return self
        try:
            param.set_string(self.spec.format(self.spec.coerce(value)))
        except ParamValueError as e:
            logger.warning(
                f"[{self.section}] {self.key} kept its value "
                f"{param.get_string()!r}: {e.original_message}"
            )
        return self

    def get_string(self) -> str:
        return self.param.get_string()

    def set_string(self, text: str) -> ParamProxy:
        self.param.set_string(text)
        return self

    # ------------------------------------------------------------------
    # Descriptor metadata
    # ------------------------------------------------------------------

    def set_description(self, text: str) -> ParamProxy:
        self.param.tags["description"] = text
        return self

    def set_label(self, text: str) -> ParamProxy:
        self.param.tags["label"] = text
        return self

    def set_channel(self, is_input: bool) -> ParamProxy:
        self.param.tags["channel"] = "input" if is_input else "output"
        return self

    def set_range(self, minimum: float, maximum: float, step: float = 0.01) -> ParamProxy:
        """Declare slider bounds (integer, float and double only)."""
        if not self.spec.ranged:
            raise UnsupportedMetadataError(
                self.type_tag.value, "constraints", self.section, self.key
            )
        constraints = self.param.constraints
        constraints["minimum"] = format_number(minimum)
        constraints["maximum"] = format_number(maximum)
        constraints["step"] = format_number(step)
        return self

    def set_enumeration(self, values: str | Iterable[Any]) -> ParamProxy:
        """Declare the allowed values, as ``"a,b,c"`` or a sequence."""
        if not isinstance(values, str):
            values = ",".join(str(value) for value in values)
        return self._set_tag("enumeration", values)

    def set_file_extensions(self, extensions: str | Iterable[str]) -> ParamProxy:
        if not isinstance(extensions, str):
            extensions = ",".join(extensions)
        return self._set_attrib("fileExtensions", extensions)

    def set_type(self, text: str) -> ParamProxy:
        return self._set_attrib("type", text)

    def set_multiple(self, multiple: bool | str) -> ParamProxy:
        if isinstance(multiple, bool):
            multiple = "true" if multiple else "false"
        return self._set_attrib("multiple", multiple)

    def set_coordinate_system(self, text: str) -> ParamProxy:
        return self._set_attrib("coordinateSystem", text)

    def _set_tag(self, name: str, value: str) -> ParamProxy:
        if name not in self.spec.tags:
            raise UnsupportedMetadataError(self.type_tag.value, name, self.section, self.key)
        self.param.tags[name] = value
        return self

    def _set_attrib(self, name: str, value: str) -> ParamProxy:
        if name not in self.spec.attribs:
            raise UnsupportedMetadataError(self.type_tag.value, name, self.section, self.key)
        self.param.attribs[name] = value
        return self

    def __repr__(self) -> str:
        return f"ParamProxy([{self.section}] {self.key}: {self.type_tag.value})"


def declare_param(
    registry: ParamRegistry,
    section: str,
    key: str,
    type_tag: TypeTag | str = TypeTag.STRING,
    value: Any = None,
) -> ParamProxy:
    """Declare (or re-open) the parameter ``(section, key)`` of kind ``type_tag``.

    Parameters
    ----------
    registry : ParamRegistry
        Registry that stores the value
    section, key : str
        Parameter identity; also forms the long flag ``--section-key``
    type_tag : TypeTag or str
        Kind the proxy reads and writes
    value : Any, optional
        If given, assigned through the proxy after declaration

    Returns
    -------
    ParamProxy
    """
    proxy = ParamProxy(registry, section, key, type_tag)
    if value is not None:
        proxy.set_value(value)
    return proxy
