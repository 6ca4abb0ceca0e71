"""
XML backend (lxml).

Mapping between XML and plain data, element-per-field:
- a mapping becomes one child element per key
- a list becomes repeated elements sharing the key's tag
- booleans are written as "true"/"false"; None and "" as empty elements
- on read, attributes are merged into the element's mapping, repeated tags
  become lists, leaf text is stripped and empty leaves read as None
- text next to children/attributes is kept under "$value"

XML carries no types: without a `model` every scalar reads back as a string,
a one-item list as a bare item and an empty element as None. With a `model`,
its JSON schema restores what the markup lost before validation: a lone
element becomes a one-item list where an array is expected, an empty element
becomes "" where a string is expected and {} where an object is expected.
"""

from __future__ import annotations

from typing import Any, BinaryIO, Optional

from lxml import etree as ET
from pydantic import PydanticUserError

from configio.formats.base import READ_ERRORS, WRITE_ERRORS, FormatManager
from configio.types.formats import ContentFormat, Context
from configio.utils.utility import type_adapter, validate_as

ROOT_TAG = "config"
TEXT_KEY = "$value"


def _parser() -> ET.XMLParser:
    # Security: no entity expansion, no DTD loading, no network access
    return ET.XMLParser(
        remove_blank_text=True,
        resolve_entities=False,
        load_dtd=False,
        no_network=True,
    )


def _element_to_data(elem: ET._Element) -> Any:
    children = [child for child in elem if isinstance(child.tag, str)]
    text = (elem.text or "").strip()
    if not children and not elem.attrib:
        return text or None

    out: dict[str, Any] = dict(elem.attrib)
    for child in children:
        tag = ET.QName(child).localname
        value = _element_to_data(child)
        if tag not in out:
            out[tag] = value
        elif isinstance(out[tag], list):
            out[tag].append(value)
        else:
            out[tag] = [out[tag], value]
    if text:
        out[TEXT_KEY] = text
    return out


def _shape(data: Any, schema: dict[str, Any], defs: dict[str, Any]) -> Any:
    ref = schema.get("$ref")
    if ref is not None:
        return _shape(data, defs.get(ref.rsplit("/", 1)[-1], {}), defs)
    if len(schema.get("allOf", ())) == 1:
        return _shape(data, schema["allOf"][0], defs)

    branches = schema.get("anyOf") or schema.get("oneOf")
    if branches:
        options = [branch for branch in branches if branch.get("type") != "null"]
        if data is None and len(options) < len(branches):
            return None
        return _shape(data, options[0], defs) if len(options) == 1 else data

    kind = schema.get("type")
    if kind == "array":
        items = data if isinstance(data, list) else [data]
        item_schema = schema.get("items")
        if isinstance(item_schema, dict):
            return [_shape(item, item_schema, defs) for item in items]
        return items
    if kind == "object":
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        properties = schema.get("properties", {})
        extra = schema.get("additionalProperties")
        out = {}
        for key, value in data.items():
            sub = properties.get(key, extra if isinstance(extra, dict) else None)
            out[key] = value if sub is None else _shape(value, sub, defs)
        return out
    if kind == "string" and data is None:
        return ""
    return data


def _decode(root: ET._Element, model: Any) -> Any:
    data = _element_to_data(root)
    if model is Any:
        return data
    try:
        schema = type_adapter(model).json_schema()
    except PydanticUserError:
        # no JSON schema for this type; validate the mapping as read
        return validate_as(data, model)
    return validate_as(_shape(data, schema, schema.get("$defs", {})), model)


def _fill(elem: ET._Element, value: Any) -> None:
    if isinstance(value, dict):
        for key, item in value.items():
            if key == TEXT_KEY:
                _fill(elem, item)
            else:
                _append(elem, str(key), item)
    elif value is None:
        return
    elif isinstance(value, bool):
        elem.text = "true" if value else "false"
    else:
        elem.text = str(value)


def _append(parent: ET._Element, tag: str, value: Any) -> None:
    if isinstance(value, list):
        for item in value:
            _append(parent, tag, item)
        return
    _fill(ET.SubElement(parent, tag), value)


class XmlManager(FormatManager):
    format = ContentFormat.XML
    label = "XML"

    def read(self, stream: BinaryIO, context: Optional[Context] = None, *, model: Any = Any) -> Any:
        try:
            root = ET.parse(stream, _parser()).getroot()
            return _decode(root, model)
        except (ET.LxmlError, *READ_ERRORS) as err:
            raise self._read_error(err, context) from err

    def write(self, stream: BinaryIO, data: Any, context: Optional[Context] = None) -> None:
        try:
            plain = self._to_plain(data)
            if not isinstance(plain, dict):
                raise TypeError(f"XML document must be a mapping, got {type(plain).__name__}")
            root = ET.Element(ROOT_TAG)
            _fill(root, plain)
            stream.write(
                ET.tostring(root, encoding="utf-8", xml_declaration=True, pretty_print=True)
            )
        except (ET.LxmlError, *WRITE_ERRORS) as err:
            raise self._write_error(err, context) from err

    @classmethod
    def read_str(cls, content: str, context: Optional[Context] = None, *, model: Any = Any) -> Any:
        try:
            root = ET.fromstring(content.encode("utf-8"), _parser())
            return _decode(root, model)
        except (ET.LxmlError, *READ_ERRORS) as err:
            raise cls._content_error(err, context) from err
