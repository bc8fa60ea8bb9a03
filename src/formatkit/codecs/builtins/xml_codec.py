# formatkit/codecs/builtins/xml_codec.py
"""
XML via `xml.etree.ElementTree`.

Values are written as a typed element tree below a single root element:

    <formatkit>
      <object>
        <property name="a">
          <integer>1</integer>
        </property>
      </object>
    </formatkit>

Element names: object/property, array/item, string, integer, float, boolean,
null. Keys go in the `name` attribute, or in a leading `<key>` child when they
contain a tab or line break (attribute values lose those to whitespace
normalization). Carriage returns come back as line feeds because XML
parsers normalize line endings. Characters XML 1.0 cannot carry raise ValueError on
encode.

Decoding reverses the mapping; documents using other tags decode to their
text, their single child, or a list of their children.
"""

import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping

from formatkit.codecs.base import BaseCodec
from formatkit.codecs.decorators import builtin_codec

_DECLARATION = '<?xml version="1.0" ?>\n'

# Attribute values are whitespace-normalized by conforming parsers
_UNSAFE_IN_ATTRIBUTE = re.compile(r"[\t\n\r]")

_NOT_XML_CHAR = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


@builtin_codec
class XmlCodec(BaseCodec):
    """XML typed element tree, pretty-printed with 2 spaces."""

    name = "xml"

    def __init__(self, root_tag: str = "formatkit") -> None:
        super().__init__(root_tag=root_tag)

    @classmethod
    def from_settings(cls, settings):
        return cls(root_tag=settings.XML_ROOT_TAG)

    # --- encode ---

    def _text(self, value: str) -> str:
        match = _NOT_XML_CHAR.search(value)
        if match:
            raise ValueError(f"Character {match.group(0)!r} cannot be represented in XML 1.0")
        return value

    def _to_element(self, obj, parent: ET.Element) -> None:
        if obj is None:
            ET.SubElement(parent, "null")
        elif isinstance(obj, bool):
            elem = ET.SubElement(parent, "boolean")
            elem.text = "true" if obj else "false"
        elif isinstance(obj, int):
            elem = ET.SubElement(parent, "integer")
            elem.text = str(obj)
        elif isinstance(obj, float):
            elem = ET.SubElement(parent, "float")
            elem.text = repr(obj)
        elif isinstance(obj, str):
            elem = ET.SubElement(parent, "string")
            elem.text = self._text(obj)
        elif isinstance(obj, (list, tuple)):
            elem = ET.SubElement(parent, "array")
            for item in obj:
                self._to_element(item, ET.SubElement(elem, "item"))
        elif isinstance(obj, Mapping):
            elem = ET.SubElement(parent, "object")
            for key, value in obj.items():
                prop = ET.SubElement(elem, "property")
                key = self._text(str(key))
                if _UNSAFE_IN_ATTRIBUTE.search(key):
                    ET.SubElement(prop, "key").text = key
                else:
                    prop.set("name", key)
                self._to_element(value, prop)
        else:
            raise TypeError(f"Object of type {type(obj).__name__} is not XML serializable")

    def encode(self, value):
        root = ET.Element(self.root_tag)
        self._to_element(value, root)
        ET.indent(root, space="  ")
        return _DECLARATION + ET.tostring(root, encoding="unicode") + "\n"

    # --- decode ---

    def _property(self, prop: ET.Element):
        children = list(prop)
        if children and children[0].tag == "key":
            key = children.pop(0).text or ""
        else:
            key = prop.get("name")
        return key, self._from_element(children[0]) if children else None

    def _from_element(self, elem: ET.Element):
        tag = elem.tag
        if tag == "null":
            return None
        if tag == "boolean":
            return (elem.text or "").strip().lower() == "true"
        if tag == "integer":
            return int(elem.text)
        if tag == "float":
            return float(elem.text)
        if tag == "string":
            return elem.text or ""
        if tag == "array":
            return [self._from_element(item[0]) if len(item) else None for item in elem]
        if tag == "object":
            return dict(self._property(prop) for prop in elem if prop.tag == "property")
        # Untyped XML
        if len(elem) == 0:
            return elem.text
        if len(elem) == 1:
            return self._from_element(elem[0])
        return [self._from_element(child) for child in elem]

    def decode(self, text, reviver=None):
        root = ET.fromstring(text)
        if root.tag != self.root_tag:
            return self._from_element(root)
        children = list(root)
        if not children:
            return None
        return self._from_element(children[0])
