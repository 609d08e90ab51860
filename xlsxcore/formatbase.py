"""Property storage, keys and style indices shared by cell formats."""

from __future__ import annotations

import copy
import enum
import string
from dataclasses import dataclass, field
from typing import Any


class Prop(enum.IntEnum):
    """Identifiers of the properties a format can hold.

    The hundreds digit names the group: number format, font, border, fill,
    alignment and protection.
    """

    NUMFMT_ID = 0
    NUMFMT_FORMAT_CODE = 1

    FONT_SIZE = 100
    FONT_ITALIC = 101
    FONT_STRIKE_OUT = 102
    FONT_COLOR = 103
    FONT_BOLD = 104
    FONT_SCRIPT = 105
    FONT_UNDERLINE = 106
    FONT_OUTLINE = 107
    FONT_SHADOW = 108
    FONT_NAME = 109
    FONT_FAMILY = 110
    FONT_CHARSET = 111
    FONT_SCHEME = 112
    FONT_CONDENSE = 113
    FONT_EXTEND = 114

    BORDER_LEFT_STYLE = 200
    BORDER_RIGHT_STYLE = 201
    BORDER_TOP_STYLE = 202
    BORDER_BOTTOM_STYLE = 203
    BORDER_DIAGONAL_STYLE = 204
    BORDER_LEFT_COLOR = 205
    BORDER_RIGHT_COLOR = 206
    BORDER_TOP_COLOR = 207
    BORDER_BOTTOM_COLOR = 208
    BORDER_DIAGONAL_COLOR = 209
    BORDER_DIAGONAL_TYPE = 210

    FILL_PATTERN = 300
    FILL_BG_COLOR = 301
    FILL_FG_COLOR = 302

    ALIGNMENT_ALIGN_H = 400
    ALIGNMENT_ALIGN_V = 401
    ALIGNMENT_WRAP = 402
    ALIGNMENT_ROTATION = 403
    ALIGNMENT_INDENT = 404
    ALIGNMENT_SHRINK_TO_FIT = 405

    PROTECTION_LOCKED = 500
    PROTECTION_HIDDEN = 501


_GROUP_NUMFMT = 0
_GROUP_FONT = 1
_GROUP_BORDER = 2
_GROUP_FILL = 3
_GROUP_ALIGNMENT = 4
_GROUP_PROTECTION = 5


def _group(prop: Prop) -> int:
    return int(prop) // 100


@dataclass(frozen=True)
class Color:
    """An ARGB colour; ``Color()`` is the invalid colour."""

    argb: int | None = None

    def __post_init__(self) -> None:
        if self.argb is not None and not 0 <= self.argb <= 0xFFFFFFFF:
            raise ValueError(f"ARGB value out of range: {self.argb!r}")

    @classmethod
    def from_argb_string(cls, text: str) -> Color:
        """Parse ``AARRGGBB`` or ``RRGGBB`` hex, optionally prefixed by ``#``."""
        digits = text.strip()
        if digits.startswith("#"):
            digits = digits[1:]
        if len(digits) == 6:
            digits = "FF" + digits
        if len(digits) != 8 or not all(c in string.hexdigits for c in digits):
            raise ValueError(f"invalid ARGB colour: {text!r}")
        return cls(int(digits, 16))

    def to_argb_string(self) -> str:
        """Return the colour as upper-case ``AARRGGBB``, or "" when invalid."""
        if self.argb is None:
            return ""
        return f"{self.argb:08X}"

    def is_valid(self) -> bool:
        return self.argb is not None


@dataclass
class _FormatData:
    properties: dict[Prop, Any] = field(default_factory=dict)
    dirty: bool = True
    format_key: bytes = b""
    font_dirty: bool = True
    font_index_valid: bool = False
    font_key: bytes = b""
    font_index: int = 0
    fill_dirty: bool = True
    fill_index_valid: bool = False
    fill_key: bytes = b""
    fill_index: int = 0
    border_dirty: bool = True
    border_index_valid: bool = False
    border_key: bytes = b""
    border_index: int = 0
    xf_index: int = -1
    xf_index_valid: bool = False
    dxf_index: int = -1
    dxf_index_valid: bool = False
    theme: int = 0

    def clone(self) -> _FormatData:
        other = copy.copy(self)
        other.properties = dict(self.properties)
        return other


def _normalise(value: Any) -> Any:
    if isinstance(value, enum.IntEnum):
        return int(value)
    return value


def _same(a: Any, b: Any) -> bool:
    return type(a) is type(b) and a == b


def _encode(items: Any) -> bytes:
    return "".join(
        f"{int(prop)}:{type(value).__name__}:{value!r};" for prop, value in items
    ).encode("utf-8")


class FormatBase:
    """Sparse property store for a cell format.

    Copies made with :func:`copy.copy` share their data until one of them
    changes a property; style indices are shared between such copies.
    """

    def __init__(self) -> None:
        self._d: _FormatData | None = None

    def __copy__(self) -> FormatBase:
        other = self.__class__.__new__(self.__class__)
        other.__dict__.update(self.__dict__)
        return other

    def copy(self) -> FormatBase:
        """Return a copy sharing this format's data."""
        return copy.copy(self)

    def __repr__(self) -> str:
        props = {} if self._d is None else {p.name: v for p, v in self._d.properties.items()}
        return f"{type(self).__name__}({props})"

    # -- properties -------------------------------------------------------

    def property(self, prop: int, default: Any = None) -> Any:
        if self._d is not None:
            key = Prop(prop)
            if key in self._d.properties:
                return self._d.properties[key]
        return default

    def set_property(
        self, prop: int, value: Any, clear_value: Any = None, detach: bool = True
    ) -> None:
        """Set a property; setting it to ``clear_value`` removes it."""
        key = Prop(prop)
        value = _normalise(value)
        clear_value = _normalise(clear_value)
        if self._d is None:
            self._d = _FormatData()

        if not _same(value, clear_value):
            if key in self._d.properties and _same(self._d.properties[key], value):
                return
            if detach:
                self._d = self._d.clone()
            self._d.properties[key] = value
        else:
            if key not in self._d.properties:
                return
            if detach:
                self._d = self._d.clone()
            del self._d.properties[key]

        d = self._d
        d.dirty = True
        d.xf_index_valid = False
        d.dxf_index_valid = False
        group = _group(key)
        if group == _GROUP_FONT:
            d.font_dirty = True
            d.font_index_valid = False
        elif group == _GROUP_BORDER:
            d.border_dirty = True
            d.border_index_valid = False
        elif group == _GROUP_FILL:
            d.fill_dirty = True
            d.fill_index_valid = False

    def clear_property(self, prop: int) -> None:
        self.set_property(prop, None)

    def has_property(self, prop: int) -> bool:
        return self._d is not None and Prop(prop) in self._d.properties

    def bool_property(self, prop: int, default: bool = False) -> bool:
        value = self.property(prop)
        return value if isinstance(value, bool) else default

    def int_property(self, prop: int, default: int = 0) -> int:
        value = self.property(prop)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return default

    def double_property(self, prop: int, default: float = 0.0) -> float:
        value = self.property(prop)
        return value if isinstance(value, float) else default

    def string_property(self, prop: int, default: str = "") -> str:
        value = self.property(prop)
        return value if isinstance(value, str) else default

    def color_property(self, prop: int, default: Color | None = None) -> Color:
        value = self.property(prop)
        if isinstance(value, Color):
            return value
        return default if default is not None else Color()

    def merge_format(self, modifier: FormatBase) -> None:
        """Apply every property of ``modifier`` on top of this format."""
        if not modifier.is_valid():
            return
        if not self.is_valid():
            self._d = modifier._d
            return
        for prop, value in list(modifier._d.properties.items()):
            self.set_property(prop, value)

    def is_valid(self) -> bool:
        return self._d is not None

    def is_empty(self) -> bool:
        return self._d is None or not self._d.properties

    # -- group membership -------------------------------------------------

    def _has_group(self, group: int) -> bool:
        return self._d is not None and any(_group(p) == group for p in self._d.properties)

    def has_num_fmt_data(self) -> bool:
        return self.has_property(Prop.NUMFMT_ID) or self.has_property(Prop.NUMFMT_FORMAT_CODE)

    def has_font_data(self) -> bool:
        return self._has_group(_GROUP_FONT)

    def has_fill_data(self) -> bool:
        return self._has_group(_GROUP_FILL)

    def has_border_data(self) -> bool:
        return self._has_group(_GROUP_BORDER)

    def has_alignment_data(self) -> bool:
        return self._has_group(_GROUP_ALIGNMENT)

    def has_protection_data(self) -> bool:
        return self.has_property(Prop.PROTECTION_HIDDEN) or self.has_property(
            Prop.PROTECTION_LOCKED
        )

    # -- keys -------------------------------------------------------------

    def _group_key(self, group: int) -> bytes:
        d = self._d
        return _encode(sorted((p, v) for p, v in d.properties.items() if _group(p) == group))

    def font_key(self) -> bytes:
        if self.is_empty():
            return b""
        if self._d.font_dirty:
            self._d.font_key = self._group_key(_GROUP_FONT)
            self._d.font_dirty = False
        return self._d.font_key

    def fill_key(self) -> bytes:
        if self.is_empty():
            return b""
        if self._d.fill_dirty:
            self._d.fill_key = self._group_key(_GROUP_FILL)
            self._d.fill_dirty = False
        return self._d.fill_key

    def border_key(self) -> bytes:
        if self.is_empty():
            return b""
        if self._d.border_dirty:
            self._d.border_key = self._group_key(_GROUP_BORDER)
            self._d.border_dirty = False
        return self._d.border_key

    def format_key(self) -> bytes:
        if self.is_empty():
            return b""
        if self._d.dirty:
            self._d.format_key = _encode(sorted(self._d.properties.items()))
            self._d.dirty = False
        return self._d.format_key

    # -- style indices ----------------------------------------------------

    def _data(self) -> _FormatData:
        if self._d is None:
            self._d = _FormatData()
        return self._d

    def font_index_valid(self) -> bool:
        return self.has_font_data() and self._d.font_index_valid

    def font_index(self) -> int:
        return self._d.font_index if self.font_index_valid() else 0

    def set_font_index(self, index: int) -> None:
        d = self._data()
        d.font_index = index
        d.font_index_valid = True

    def fill_index_valid(self) -> bool:
        return self.has_fill_data() and self._d.fill_index_valid

    def fill_index(self) -> int:
        return self._d.fill_index if self.fill_index_valid() else 0

    def set_fill_index(self, index: int) -> None:
        d = self._data()
        d.fill_index = index
        d.fill_index_valid = True

    def border_index_valid(self) -> bool:
        return self.has_border_data() and self._d.border_index_valid

    def border_index(self) -> int:
        return self._d.border_index if self.border_index_valid() else 0

    def set_border_index(self, index: int) -> None:
        d = self._data()
        d.border_index = index
        d.border_index_valid = True

    def xf_index_valid(self) -> bool:
        return self._d is not None and self._d.xf_index_valid

    def xf_index(self) -> int:
        return -1 if self._d is None else self._d.xf_index

    def set_xf_index(self, index: int) -> None:
        d = self._data()
        d.xf_index = index
        d.xf_index_valid = True

    def dxf_index_valid(self) -> bool:
        return self._d is not None and self._d.dxf_index_valid

    def dxf_index(self) -> int:
        return -1 if self._d is None else self._d.dxf_index

    def set_dxf_index(self, index: int) -> None:
        d = self._data()
        d.dxf_index = index
        d.dxf_index_valid = True

    def _theme(self) -> int:
        return 0 if self._d is None else self._d.theme

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FormatBase):
            return NotImplemented
        return self.format_key() == other.format_key()

    __hash__ = None  # type: ignore[assignment]