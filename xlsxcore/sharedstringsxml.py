"""Reading and writing the shared string table part (sharedStrings.xml)."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from xml.sax.saxutils import escape

from .format import FontScript, FontUnderline, Format
from .formatbase import Color, Prop
from .richstring import RichString
from .sharedstrings import SharedStrings
from .utility import is_space_reserve_needed

SCHEMA_MAIN = "http://schemas.openxmlformats.org/spreadsheetml/2006/main"

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'

_UNDERLINE_NAMES = {
    FontUnderline.DOUBLE: "double",
    FontUnderline.SINGLE_ACCOUNTING: "singleAccounting",
    FontUnderline.DOUBLE_ACCOUNTING: "doubleAccounting",
}
_UNDERLINE_VALUES = {name: value for value, name in _UNDERLINE_NAMES.items()}


def _attr(value: str) -> str:
    return escape(value, {'"': "&quot;"})


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


def _to_int(text: str | None) -> int:
    try:
        return int(text or "")
    except ValueError:
        return 0


def _empty(name: str, val: str | None = None) -> str:
    if val is None:
        return f"<{name}/>"
    return f'<{name} val="{_attr(val)}"/>'


def _write_rpr(fmt: Format) -> str:
    parts: list[str] = []
    if fmt.font_bold():
        parts.append(_empty("b"))
    if fmt.font_italic():
        parts.append(_empty("i"))
    if fmt.font_strike_out():
        parts.append(_empty("strike"))
    if fmt.font_outline():
        parts.append(_empty("outline"))
    if fmt.bool_property(Prop.FONT_SHADOW):
        parts.append(_empty("shadow"))
    if fmt.has_property(Prop.FONT_UNDERLINE):
        underline = fmt.font_underline()
        if underline != FontUnderline.NONE:
            parts.append(_empty("u", _UNDERLINE_NAMES.get(underline)))
    if fmt.has_property(Prop.FONT_SCRIPT):
        script = fmt.font_script()
        if script != FontScript.NORMAL:
            name = "superscript" if script == FontScript.SUPER else "subscript"
            parts.append(_empty("vertAlign", name))
    if fmt.has_property(Prop.FONT_SIZE):
        parts.append(_empty("sz", str(fmt.font_size())))
    if fmt.has_property(Prop.FONT_COLOR):
        color = fmt.color_property(Prop.FONT_COLOR)
        if color.is_valid():
            parts.append(f'<color rgb="{color.to_argb_string()}"/>')
        else:
            parts.append("<color/>")
    if fmt.font_name():
        parts.append(_empty("rFont", fmt.font_name()))
    if fmt.has_property(Prop.FONT_FAMILY):
        parts.append(_empty("family", str(fmt.int_property(Prop.FONT_FAMILY))))
    if fmt.has_property(Prop.FONT_SCHEME):
        parts.append(_empty("scheme", fmt.string_property(Prop.FONT_SCHEME)))
    return "".join(parts)


def _write_text(text: str) -> str:
    space = ' xml:space="preserve"' if is_space_reserve_needed(text) else ""
    return f"<t{space}>{escape(text)}</t>"


def save_shared_strings(table: SharedStrings) -> bytes:
    """Serialise a shared string table as sharedStrings.xml."""
    strings = table.get_shared_strings()
    parts = [
        _XML_DECLARATION,
        f'<sst xmlns="{SCHEMA_MAIN}" count="{table.count()}" uniqueCount="{len(strings)}">',
    ]
    for string in strings:
        parts.append("<si>")
        if string.is_rich_string():
            for text, fmt in string:
                parts.append("<r>")
                if fmt.has_font_data():
                    parts.append(f"<rPr>{_write_rpr(fmt)}</rPr>")
                parts.append(_write_text(text))
                parts.append("</r>")
        else:
            parts.append(_write_text(string.to_plain_string()))
        parts.append("</si>")
    parts.append("</sst>")
    return "".join(parts).encode("utf-8")


def _read_color(element: ET.Element) -> Color | None:
    rgb = element.get("rgb")
    if rgb is None:
        return None
    try:
        return Color.from_argb_string(rgb)
    except ValueError:
        return None


def _read_rpr(element: ET.Element) -> Format:
    fmt = Format()
    for child in element:
        name = _local_name(child.tag)
        val = child.get("val")
        if name == "rFont":
            fmt.set_font_name(val or "")
        elif name == "charset":
            fmt.set_property(Prop.FONT_CHARSET, _to_int(val))
        elif name == "family":
            fmt.set_property(Prop.FONT_FAMILY, _to_int(val))
        elif name == "b":
            fmt.set_font_bold(True)
        elif name == "i":
            fmt.set_font_italic(True)
        elif name == "strike":
            fmt.set_font_strike_out(True)
        elif name == "outline":
            fmt.set_font_outline(True)
        elif name == "shadow":
            fmt.set_property(Prop.FONT_SHADOW, True)
        elif name == "condense":
            fmt.set_property(Prop.FONT_CONDENSE, _to_int(val))
        elif name == "extend":
            fmt.set_property(Prop.FONT_EXTEND, _to_int(val))
        elif name == "color":
            color = _read_color(child)
            if color is not None:
                fmt.set_property(Prop.FONT_COLOR, color)
        elif name == "sz":
            fmt.set_font_size(_to_int(val))
        elif name == "u":
            fmt.set_font_underline(_UNDERLINE_VALUES.get(val or "", FontUnderline.SINGLE))
        elif name == "vertAlign":
            if val == "superscript":
                fmt.set_font_script(FontScript.SUPER)
            elif val == "subscript":
                fmt.set_font_script(FontScript.SUB)
        elif name == "scheme":
            fmt.set_property(Prop.FONT_SCHEME, val or "")
    return fmt


def _element_text(element: ET.Element) -> str:
    return "".join(element.itertext())


def _read_string(element: ET.Element) -> RichString:
    rich = RichString()
    for child in element:
        name = _local_name(child.tag)
        if name == "t":
            rich.add_fragment(_element_text(child), Format())
        elif name == "r":
            text = ""
            fmt = Format()
            for part in child:
                part_name = _local_name(part.tag)
                if part_name == "rPr":
                    fmt = _read_rpr(part)
                elif part_name == "t":
                    text = _element_text(part)
            rich.add_fragment(text, fmt)
    return rich


def load_shared_strings(data: bytes) -> SharedStrings:
    """Parse sharedStrings.xml into a new table.

    Raises ValueError if the XML is malformed or the number of strings does
    not match the declared ``uniqueCount``.
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise ValueError(f"invalid shared strings XML: {exc}") from exc

    table = SharedStrings()
    expected = 0
    has_unique_count = True
    for element in root.iter():
        name = _local_name(element.tag)
        if name == "sst":
            unique = element.get("uniqueCount")
            has_unique_count = unique is not None
            if has_unique_count:
                expected = _to_int(unique)
        elif name == "si":
            table.append_loaded_string(_read_string(element))

    if has_unique_count and len(table) != expected:
        raise ValueError(
            f"shared string count mismatch: declared {expected}, found {len(table)}"
        )
    return table