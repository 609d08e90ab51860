"""Package parts kept as raw XML, including the workbook theme."""

from __future__ import annotations

from typing import BinaryIO


class SimpleXmlPart:
    """A part whose XML is stored and written back unchanged."""

    def __init__(self, xml_data: bytes = b"") -> None:
        self.xml_data = bytes(xml_data)

    def save_to_xml_data(self) -> bytes:
        return self.xml_data

    def load_from_xml_data(self, data: bytes) -> None:
        self.xml_data = bytes(data)

    def save_to_stream(self, stream: BinaryIO) -> None:
        """Write the part's XML to a binary stream."""
        stream.write(self.save_to_xml_data())

    def load_from_stream(self, stream: BinaryIO) -> None:
        """Read the whole stream as the part's XML."""
        self.load_from_xml_data(stream.read())


_CJK_FONTS = (
    ("Jpan", "\uff2d\uff33 \uff30\u30b4\u30b7\u30c3\u30af"),
    ("Hang", "\ub9d1\uc740 \uace0\ub515"),
    ("Hans", "\u5b8b\u4f53"),
    ("Hant", "\u65b0\u7d30\u660e\u9ad4"),
)


def _script_fonts(serif: str, khmer: str) -> tuple[tuple[str, str], ...]:
    return _CJK_FONTS + (
        ("Arab", serif),
        ("Hebr", serif),
        ("Thai", "Tahoma"),
        ("Ethi", "Nyala"),
        ("Beng", "Vrinda"),
        ("Gujr", "Shruti"),
        ("Khmr", khmer),
        ("Knda", "Tunga"),
        ("Guru", "Raavi"),
        ("Cans", "Euphemia"),
        ("Cher", "Plantagenet Cherokee"),
        ("Yiii", "Microsoft Yi Baiti"),
        ("Tibt", "Microsoft Himalaya"),
        ("Thaa", "MV Boli"),
        ("Deva", "Mangal"),
        ("Telu", "Gautami"),
        ("Taml", "Latha"),
        ("Syrc", "Estrangelo Edessa"),
        ("Orya", "Kalinga"),
        ("Mlym", "Kartika"),
        ("Laoo", "DokChampa"),
        ("Sinh", "Iskoola Pota"),
        ("Mong", "Mongolian Baiti"),
        ("Viet", serif),
        ("Uigh", "Microsoft Uighur"),
    )


def _font(tag: str, latin: str, serif: str, khmer: str) -> str:
    fonts = "".join(
        f'<a:font script="{script}" typeface="{face}"/>'
        for script, face in _script_fonts(serif, khmer)
    )
    return (
        f'<a:{tag}><a:latin typeface="{latin}"/><a:ea typeface=""/>'
        f'<a:cs typeface=""/>{fonts}</a:{tag}>'
    )


def _scheme_stop(pos: str, mods: str) -> str:
    return f'<a:gs pos="{pos}"><a:schemeClr val="phClr">{mods}</a:schemeClr></a:gs>'


def _shadow(dist: str, alpha: str) -> str:
    return (
        f'<a:outerShdw blurRad="40000" dist="{dist}" dir="5400000" rotWithShape="0">'
        f'<a:srgbClr val="000000"><a:alpha val="{alpha}"/></a:srgbClr>'
        "</a:outerShdw>"
    )


_SOLID_PH = '<a:solidFill><a:schemeClr val="phClr"/></a:solidFill>'

_COLOR_SCHEME = (
    '<a:clrScheme name="Office">'
    '<a:dk1><a:sysClr val="windowText" lastClr="000000"/></a:dk1>'
    '<a:lt1><a:sysClr val="window" lastClr="FFFFFF"/></a:lt1>'
    '<a:dk2><a:srgbClr val="1F497D"/></a:dk2>'
    '<a:lt2><a:srgbClr val="EEECE1"/></a:lt2>'
    '<a:accent1><a:srgbClr val="4F81BD"/></a:accent1>'
    '<a:accent2><a:srgbClr val="C0504D"/></a:accent2>'
    '<a:accent3><a:srgbClr val="9BBB59"/></a:accent3>'
    '<a:accent4><a:srgbClr val="8064A2"/></a:accent4>'
    '<a:accent5><a:srgbClr val="4BACC6"/></a:accent5>'
    '<a:accent6><a:srgbClr val="F79646"/></a:accent6>'
    '<a:hlink><a:srgbClr val="0000FF"/></a:hlink>'
    '<a:folHlink><a:srgbClr val="800080"/></a:folHlink>'
    "</a:clrScheme>"
)

_FONT_SCHEME = (
    '<a:fontScheme name="Office">'
    + _font("majorFont", "Cambria", "Times New Roman", "MoolBoran")
    + _font("minorFont", "Calibri", "Arial", "DaunPenh")
    + "</a:fontScheme>"
)

_FILL_STYLES = (
    "<a:fillStyleLst>"
    + _SOLID_PH
    + '<a:gradFill rotWithShape="1"><a:gsLst>'
    + _scheme_stop("0", '<a:tint val="50000"/><a:satMod val="300000"/>')
    + _scheme_stop("35000", '<a:tint val="37000"/><a:satMod val="300000"/>')
    + _scheme_stop("100000", '<a:tint val="15000"/><a:satMod val="350000"/>')
    + '</a:gsLst><a:lin ang="16200000" scaled="1"/></a:gradFill>'
    + '<a:gradFill rotWithShape="1"><a:gsLst>'
    + _scheme_stop("0", '<a:shade val="51000"/><a:satMod val="130000"/>')
    + _scheme_stop("80000", '<a:shade val="93000"/><a:satMod val="130000"/>')
    + _scheme_stop("100000", '<a:shade val="94000"/><a:satMod val="135000"/>')
    + '</a:gsLst><a:lin ang="16200000" scaled="0"/></a:gradFill>'
    + "</a:fillStyleLst>"
)

_LINE_STYLES = (
    "<a:lnStyleLst>"
    '<a:ln w="9525" cap="flat" cmpd="sng" algn="ctr">'
    '<a:solidFill><a:schemeClr val="phClr"><a:shade val="95000"/>'
    '<a:satMod val="105000"/></a:schemeClr></a:solidFill>'
    '<a:prstDash val="solid"/></a:ln>'
    '<a:ln w="25400" cap="flat" cmpd="sng" algn="ctr">'
    + _SOLID_PH
    + '<a:prstDash val="solid"/></a:ln>'
    '<a:ln w="38100" cap="flat" cmpd="sng" algn="ctr">'
    + _SOLID_PH
    + '<a:prstDash val="solid"/></a:ln>'
    "</a:lnStyleLst>"
)

_EFFECT_STYLES = (
    "<a:effectStyleLst>"
    "<a:effectStyle><a:effectLst>" + _shadow("20000", "38000") + "</a:effectLst></a:effectStyle>"
    "<a:effectStyle><a:effectLst>" + _shadow("23000", "35000") + "</a:effectLst></a:effectStyle>"
    "<a:effectStyle><a:effectLst>" + _shadow("23000", "35000") + "</a:effectLst>"
    "<a:scene3d>"
    '<a:camera prst="orthographicFront"><a:rot lat="0" lon="0" rev="0"/></a:camera>'
    '<a:lightRig rig="threePt" dir="t"><a:rot lat="0" lon="0" rev="1200000"/></a:lightRig>'
    "</a:scene3d>"
    '<a:sp3d><a:bevelT w="63500" h="25400"/></a:sp3d>'
    "</a:effectStyle>"
    "</a:effectStyleLst>"
)

_BG_FILL_STYLES = (
    "<a:bgFillStyleLst>"
    + _SOLID_PH
    + '<a:gradFill rotWithShape="1"><a:gsLst>'
    + _scheme_stop("0", '<a:tint val="40000"/><a:satMod val="350000"/>')
    + _scheme_stop(
        "40000", '<a:tint val="45000"/><a:shade val="99000"/><a:satMod val="350000"/>'
    )
    + _scheme_stop("100000", '<a:shade val="20000"/><a:satMod val="255000"/>')
    + "</a:gsLst>"
    + '<a:path path="circle"><a:fillToRect l="50000" t="-80000" r="50000" b="180000"/>'
    + "</a:path></a:gradFill>"
    + '<a:gradFill rotWithShape="1"><a:gsLst>'
    + _scheme_stop("0", '<a:tint val="80000"/><a:satMod val="300000"/>')
    + _scheme_stop("100000", '<a:shade val="30000"/><a:satMod val="200000"/>')
    + "</a:gsLst>"
    + '<a:path path="circle"><a:fillToRect l="50000" t="50000" r="50000" b="50000"/>'
    + "</a:path></a:gradFill>"
    + "</a:bgFillStyleLst>"
)

DEFAULT_THEME_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
    '<a:theme xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main"'
    ' name="Office \u4e3b\u9898">'
    "<a:themeElements>"
    + _COLOR_SCHEME
    + _FONT_SCHEME
    + '<a:fmtScheme name="Office">'
    + _FILL_STYLES
    + _LINE_STYLES
    + _EFFECT_STYLES
    + _BG_FILL_STYLES
    + "</a:fmtScheme>"
    + "</a:themeElements>"
    + "<a:objectDefaults/>"
    + "<a:extraClrSchemeLst/>"
    + "</a:theme>"
).encode("utf-8")


class Theme(SimpleXmlPart):
    """The workbook theme; an empty theme is saved as the default Office theme."""

    def save_to_xml_data(self) -> bytes:
        return self.xml_data if self.xml_data else DEFAULT_THEME_XML