"""Parameter model: value kinds, the variant value, the registry and proxies."""

from cmdparams.core.proxy import ParamProxy, declare_param, normalized_name
from cmdparams.core.registry import APPLICATION_TAGS, ParamRegistry
from cmdparams.core.types import TYPE_SPECS, TypeSpec, TypeTag, get_type_spec
from cmdparams.core.values import ParamValue

__all__ = [
    "APPLICATION_TAGS",
    "ParamProxy",
    "ParamRegistry",
    "ParamValue",
    "TYPE_SPECS",
    "TypeSpec",
    "TypeTag",
    "declare_param",
    "get_type_spec",
    "normalized_name",
]
