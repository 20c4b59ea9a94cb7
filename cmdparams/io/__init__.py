"""Serialization of the registry: ini persistence and the XML plugin descriptor."""

from cmdparams.io.descriptor import DescriptorGenerator
from cmdparams.io.ini_codec import DEFAULT_SECTION, IniCodec

__all__ = [
    "DEFAULT_SECTION",
    "DescriptorGenerator",
    "IniCodec",
]
