"""Plugin descriptor (XML) generation.

The descriptor tells a host application which parameters the tool takes so
it can build a GUI for it::

    <?xml version="1.0" encoding="utf-8"?>
    <executable>
      <category>Filtering</category>
      <title>Smoother</title>
      <parameters>
        <label>Filter</label>
        <description>Filter - Section</description>
        <double>
          <name>Sigma</name>
          <default>1.5</default>
          <description>Kernel width</description>
          <flag>s</flag>
          <longflag>filter-sigma</longflag>
          <constraints>
            <maximum>10</maximum>
            <minimum>0</minimum>
            <step>0.01</step>
          </constraints>
        </double>
      </parameters>
    </executable>

The ``default`` element holds the value the parameter has at generation
time. Output is deterministic: application tags follow
:data:`~cmdparams.core.registry.APPLICATION_TAGS`, everything else is sorted.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from cmdparams.core.registry import APPLICATION_TAGS, ParamRegistry
from cmdparams.core.types import split_vector
from cmdparams.core.values import ParamValue

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'


class DescriptorGenerator:
    """Serializes a registry into the XML plugin descriptor."""

    def __init__(self, registry: ParamRegistry, indent: str = "  "):
        self.registry = registry
        self.indent = indent

    def build(self) -> ET.Element:
        """Build the ``executable`` element tree."""
        root = ET.Element("executable")

        for tag in APPLICATION_TAGS:
            if tag in self.registry.tags:
                ET.SubElement(root, tag).text = self.registry.tags[tag]

        for section in self.registry.sections():
            block = ET.SubElement(root, "parameters")
            ET.SubElement(block, "label").text = section
            ET.SubElement(block, "description").text = f"{section} - Section"
            for key, param in self.registry.params_in(section):
                self._add_parameter(block, key, param)

        return root

    def _add_parameter(self, parent: ET.Element, key: str, param: ParamValue) -> None:
        attribs = {name: value for name, value in sorted(param.attribs.items()) if value}
        element = ET.SubElement(parent, param.type_tag.value, attribs)
        ET.SubElement(element, "name").text = key
        ET.SubElement(element, "default").text = param.get_string()

        for tag, value in sorted(param.tags.items()):
            if not value:
                continue
            if tag == "enumeration":
                items = split_vector(value)
                if items:
                    enumeration = ET.SubElement(element, "enumeration")
                    for item in items:
                        ET.SubElement(enumeration, "element").text = item
            else:
                ET.SubElement(element, tag).text = value

        if param.constraints:
            constraints = ET.SubElement(element, "constraints")
            for name, value in sorted(param.constraints.items()):
                ET.SubElement(constraints, name).text = value

    def generate(self) -> str:
        """Return the complete descriptor document as a string."""
        root = self.build()
        ET.indent(root, space=self.indent)
        return f"{XML_DECLARATION}\n{ET.tostring(root, encoding='unicode')}\n"
