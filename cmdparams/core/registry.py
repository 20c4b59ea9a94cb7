"""Parameter Registry
==================

The application state shared by every consumer: the declared parameters
keyed by ``(section, key)``, the command-line token bindings and the
application-level descriptor tags.

One registry is created at program start and handed explicitly to the
proxies, the command-line parser, the ini codec and the descriptor
generator. It performs no locking; wrap it yourself before sharing it
between threads.

Examples
--------
>>> registry = ParamRegistry(title="Resampler", description="Resamples volumes")
>>> registry.set_param("Output", "Spacing", ParamValue(TypeTag.DOUBLE, 1.0))
ParamValue(double='1.0')
>>> registry.set_flag("--output-spacing", "Output", "Spacing")
>>> registry.lookup_flag("--output-spacing")
('Output', 'Spacing')
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from cmdparams.config.exceptions import ParamValueError
from cmdparams.core.values import ParamValue
from cmdparams.utils.logging import get_logger

logger = get_logger(__name__)

# Order in which application tags appear in the descriptor
APPLICATION_TAGS: tuple[str, ...] = (
    "category",
    "title",
    "description",
    "version",
    "documentation-url",
    "license",
    "contributor",
    "acknowledgements",
)


class _ApplicationTag:
    """Attribute access to one entry of ``ParamRegistry.tags``."""

    def __init__(self, tag: str):
        self.tag = tag

    def __get__(self, registry, owner=None):
        if registry is None:
            return self
        return registry.tags.get(self.tag, "")

    def __set__(self, registry, value):
        registry.tags[self.tag] = str(value)

    def __delete__(self, registry):
        registry.tags.pop(self.tag, None)


class ParamRegistry:
    """Owns every parameter value and the token -> parameter bindings.

    Parameters
    ----------
    title : str, optional
        Application title, used by the descriptor and the help text
    description : str, optional
        Application description
    """

    category = _ApplicationTag("category")
    title = _ApplicationTag("title")
    description = _ApplicationTag("description")
    version = _ApplicationTag("version")
    documentation_url = _ApplicationTag("documentation-url")
    license = _ApplicationTag("license")
    contributor = _ApplicationTag("contributor")
    acknowledgements = _ApplicationTag("acknowledgements")

    def __init__(self, title: str | None = None, description: str | None = None):
        self._params: dict[str, dict[str, ParamValue]] = {}
        self._flags: dict[str, tuple[str, str]] = {}
        self.tags: dict[str, str] = {}
        if title is not None:
            self.title = title
        if description is not None:
            self.description = description

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    def get_param(self, section: str, key: str) -> ParamValue | None:
        """Return the parameter at ``(section, key)`` or None if undeclared."""
        return self._params.get(section, {}).get(key)

    def set_param(self, section: str, key: str, new_value: ParamValue) -> ParamValue:
        """Install ``new_value`` at ``(section, key)``.

        If a parameter already exists there, its canonical string is carried
        over into ``new_value`` (when non-empty). The transfer is lossy when
        the new kind cannot parse the old string; the new value then keeps
        its own initial value.
        """
        params = self._params.setdefault(section, {})
        previous = params.get(key)
        params[key] = new_value

        if previous is None or previous is new_value:
            return new_value

        text = previous.get_string()
        logger.debug(
            f"Replacing [{section}] {key}: {previous.type_tag} -> {new_value.type_tag}"
        )
        if text:
            try:
                new_value.set_string(text)
            except ParamValueError as e:
                logger.warning(
                    f"Value {text!r} of [{section}] {key} could not be kept "
                    f"as {new_value.type_tag}: {e.original_message}"
                )
        return new_value

    def sections(self) -> list[str]:
        """Section names in sorted order."""
        return sorted(self._params)

    def params_in(self, section: str) -> list[tuple[str, ParamValue]]:
        """``(key, value)`` pairs of one section, sorted by key."""
        return sorted(self._params.get(section, {}).items())

    def keys_in(self, section: str) -> list[str]:
        return sorted(self._params.get(section, {}))

    def iter_params(self) -> Iterator[tuple[str, str, ParamValue]]:
        """Yield ``(section, key, value)`` for every parameter, sorted."""
        for section in self.sections():
            for key, param in self.params_in(section):
                yield section, key, param

    def __contains__(self, item) -> bool:
        section, key = item
        return self.get_param(section, key) is not None

    def __len__(self) -> int:
        return sum(len(params) for params in self._params.values())

    # ------------------------------------------------------------------
    # Command-line tokens
    # ------------------------------------------------------------------

    def set_flag(self, token: str, section: str, key: str) -> None:
        """Bind a flag (``-x``, ``--long``) or positional index (``"0"``)."""
        self._flags[token] = (section, key)

    def lookup_flag(self, token: str) -> tuple[str, str] | None:
        return self._flags.get(token)

    def param_for_token(self, token: str) -> ParamValue | None:
        """Resolve a command-line token straight to its parameter."""
        binding = self._flags.get(token)
        if binding is None:
            return None
        return self.get_param(*binding)

    @property
    def flags(self) -> Mapping[str, tuple[str, str]]:
        return MappingProxyType(self._flags)

    def __repr__(self) -> str:
        return (
            f"ParamRegistry(title={self.title!r}, parameters={len(self)}, "
            f"flags={len(self._flags)})"
        )
