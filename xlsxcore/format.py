"""Cell formats: number format, font, alignment, border, fill and protection."""

from __future__ import annotations

import enum

from .formatbase import Color, FormatBase, Prop
from .numformat import is_date_time

_DEFAULT_FONT_NAME = "Calibri"


class FontScript(enum.IntEnum):
    NORMAL = 0
    SUPER = 1
    SUB = 2


class FontUnderline(enum.IntEnum):
    NONE = 0
    SINGLE = 1
    DOUBLE = 2
    SINGLE_ACCOUNTING = 3
    DOUBLE_ACCOUNTING = 4


class HorizontalAlignment(enum.IntEnum):
    GENERAL = 0
    LEFT = 1
    CENTER = 2
    RIGHT = 3
    FILL = 4
    JUSTIFY = 5
    MERGE = 6
    DISTRIBUTED = 7


class VerticalAlignment(enum.IntEnum):
    TOP = 0
    CENTER = 1
    BOTTOM = 2
    JUSTIFY = 3
    DISTRIBUTED = 4


class BorderStyle(enum.IntEnum):
    NONE = 0
    THIN = 1
    MEDIUM = 2
    DASHED = 3
    DOTTED = 4
    THICK = 5
    DOUBLE = 6
    HAIR = 7
    MEDIUM_DASHED = 8
    DASH_DOT = 9
    MEDIUM_DASH_DOT = 10
    DASH_DOT_DOT = 11
    MEDIUM_DASH_DOT_DOT = 12
    SLANT_DASH_DOT = 13


class DiagonalBorderType(enum.IntEnum):
    NONE = 0
    DOWN = 1
    UP = 2
    BOTH = 3


class FillPattern(enum.IntEnum):
    NONE = 0
    SOLID = 1
    MEDIUM_GRAY = 2
    DARK_GRAY = 3
    LIGHT_GRAY = 4
    DARK_HORIZONTAL = 5
    DARK_VERTICAL = 6
    DARK_DOWN = 7
    DARK_UP = 8
    DARK_GRID = 9
    DARK_TRELLIS = 10
    LIGHT_HORIZONTAL = 11
    LIGHT_VERTICAL = 12
    LIGHT_DOWN = 13
    LIGHT_UP = 14
    LIGHT_TRELLIS = 15
    GRAY125 = 16
    GRAY0625 = 17
    LIGHT_GRID = 18


_BORDER_STYLE_PROPS = {
    "left": Prop.BORDER_LEFT_STYLE,
    "right": Prop.BORDER_RIGHT_STYLE,
    "top": Prop.BORDER_TOP_STYLE,
    "bottom": Prop.BORDER_BOTTOM_STYLE,
    "diagonal": Prop.BORDER_DIAGONAL_STYLE,
}

_BORDER_COLOR_PROPS = {
    "left": Prop.BORDER_LEFT_COLOR,
    "right": Prop.BORDER_RIGHT_COLOR,
    "top": Prop.BORDER_TOP_COLOR,
    "bottom": Prop.BORDER_BOTTOM_COLOR,
    "diagonal": Prop.BORDER_DIAGONAL_COLOR,
}

_INDENT_ALIGNMENTS = frozenset(
    {
        HorizontalAlignment.GENERAL,
        HorizontalAlignment.LEFT,
        HorizontalAlignment.RIGHT,
        HorizontalAlignment.DISTRIBUTED,
    }
)
_NO_SHRINK_ALIGNMENTS = frozenset(
    {
        HorizontalAlignment.FILL,
        HorizontalAlignment.JUSTIFY,
        HorizontalAlignment.DISTRIBUTED,
    }
)


def _as_color(color: Color | str | None) -> Color:
    if color is None:
        return Color()
    if isinstance(color, str):
        return Color.from_argb_string(color)
    return color


def _side_prop(table: dict[str, Prop], side: str) -> Prop:
    try:
        return table[side]
    except KeyError:
        raise ValueError(f"unknown border side: {side!r}") from None


class Format(FormatBase):
    """Formatting properties of a cell; a new format is invalid and empty."""

    # -- number format ----------------------------------------------------

    def number_format_index(self) -> int:
        return self.int_property(Prop.NUMFMT_ID, 0)

    def set_number_format_index(self, index: int) -> None:
        """Use a built-in or custom number format by its id."""
        self.set_property(Prop.NUMFMT_ID, index)
        self.clear_property(Prop.NUMFMT_FORMAT_CODE)

    def number_format(self) -> str:
        """Return the format code; may be empty for built-in formats."""
        return self.string_property(Prop.NUMFMT_FORMAT_CODE)

    def set_number_format(self, code: str) -> None:
        """Use a number format code; its id is assigned later."""
        if not code:
            return
        self.set_property(Prop.NUMFMT_FORMAT_CODE, code)
        self.clear_property(Prop.NUMFMT_ID)

    def set_custom_number_format(self, index: int, code: str) -> None:
        """Set a custom number format code together with its id."""
        self.set_property(Prop.NUMFMT_ID, index)
        self.set_property(Prop.NUMFMT_FORMAT_CODE, code)

    def fix_number_format(self, index: int, code: str) -> None:
        """Fix the id and code in place, without detaching shared data."""
        self.set_property(Prop.NUMFMT_ID, index, 0, False)
        self.set_property(Prop.NUMFMT_FORMAT_CODE, code, "", False)

    def is_date_time_format(self) -> bool:
        """Return True if the number format probably shows a date or time."""
        if self.has_property(Prop.NUMFMT_FORMAT_CODE):
            return is_date_time(self.number_format())
        if self.has_property(Prop.NUMFMT_ID):
            idx = self.number_format_index()
            if 14 <= idx <= 22 or 45 <= idx <= 47:
                return True
            # Used in CHS, CHT, JPN and KOR locales.
            if 27 <= idx <= 36 or 50 <= idx <= 58:
                return True
        return False

    # -- font -------------------------------------------------------------

    def font_size(self) -> int:
        return self.int_property(Prop.FONT_SIZE)

    def set_font_size(self, size: int) -> None:
        self.set_property(Prop.FONT_SIZE, size, 0)

    def font_bold(self) -> bool:
        return self.bool_property(Prop.FONT_BOLD)

    def set_font_bold(self, bold: bool) -> None:
        self.set_property(Prop.FONT_BOLD, bool(bold), False)

    def font_italic(self) -> bool:
        return self.bool_property(Prop.FONT_ITALIC)

    def set_font_italic(self, italic: bool) -> None:
        self.set_property(Prop.FONT_ITALIC, bool(italic), False)

    def font_strike_out(self) -> bool:
        return self.bool_property(Prop.FONT_STRIKE_OUT)

    def set_font_strike_out(self, strike_out: bool) -> None:
        self.set_property(Prop.FONT_STRIKE_OUT, bool(strike_out), False)

    def font_outline(self) -> bool:
        return self.bool_property(Prop.FONT_OUTLINE)

    def set_font_outline(self, outline: bool) -> None:
        self.set_property(Prop.FONT_OUTLINE, bool(outline), False)

    def font_color(self) -> Color:
        if self.has_property(Prop.FONT_COLOR):
            return self.color_property(Prop.FONT_COLOR)
        return Color()

    def set_font_color(self, color: Color | str | None) -> None:
        self.set_property(Prop.FONT_COLOR, _as_color(color), Color())

    def font_script(self) -> FontScript:
        return FontScript(self.int_property(Prop.FONT_SCRIPT))

    def set_font_script(self, script: FontScript) -> None:
        self.set_property(Prop.FONT_SCRIPT, FontScript(script), FontScript.NORMAL)

    def font_underline(self) -> FontUnderline:
        return FontUnderline(self.int_property(Prop.FONT_UNDERLINE))

    def set_font_underline(self, underline: FontUnderline) -> None:
        self.set_property(Prop.FONT_UNDERLINE, FontUnderline(underline), FontUnderline.NONE)

    def font_name(self) -> str:
        return self.string_property(Prop.FONT_NAME, _DEFAULT_FONT_NAME)

    def set_font_name(self, name: str) -> None:
        self.set_property(Prop.FONT_NAME, name, _DEFAULT_FONT_NAME)

    # -- alignment --------------------------------------------------------

    def horizontal_alignment(self) -> HorizontalAlignment:
        return HorizontalAlignment(
            self.int_property(Prop.ALIGNMENT_ALIGN_H, HorizontalAlignment.GENERAL)
        )

    def set_horizontal_alignment(self, align: HorizontalAlignment) -> None:
        align = HorizontalAlignment(align)
        if self.has_property(Prop.ALIGNMENT_INDENT) and align not in _INDENT_ALIGNMENTS:
            self.clear_property(Prop.ALIGNMENT_INDENT)
        if (
            self.has_property(Prop.ALIGNMENT_SHRINK_TO_FIT)
            and align in _NO_SHRINK_ALIGNMENTS
        ):
            self.clear_property(Prop.ALIGNMENT_SHRINK_TO_FIT)
        self.set_property(Prop.ALIGNMENT_ALIGN_H, align, HorizontalAlignment.GENERAL)

    def vertical_alignment(self) -> VerticalAlignment:
        return VerticalAlignment(
            self.int_property(Prop.ALIGNMENT_ALIGN_V, VerticalAlignment.BOTTOM)
        )

    def set_vertical_alignment(self, align: VerticalAlignment) -> None:
        self.set_property(
            Prop.ALIGNMENT_ALIGN_V, VerticalAlignment(align), VerticalAlignment.BOTTOM
        )

    def text_wrap(self) -> bool:
        return self.bool_property(Prop.ALIGNMENT_WRAP)

    def set_text_wrap(self, wrap: bool) -> None:
        if wrap and self.has_property(Prop.ALIGNMENT_SHRINK_TO_FIT):
            self.clear_property(Prop.ALIGNMENT_SHRINK_TO_FIT)
        self.set_property(Prop.ALIGNMENT_WRAP, bool(wrap), False)

    def rotation(self) -> int:
        return self.int_property(Prop.ALIGNMENT_ROTATION)

    def set_rotation(self, rotation: int) -> None:
        """Set the text rotation, in [0, 180] or 255."""
        self.set_property(Prop.ALIGNMENT_ROTATION, rotation, 0)

    def indent(self) -> int:
        return self.int_property(Prop.ALIGNMENT_INDENT)

    def set_indent(self, indent: int) -> None:
        """Set the indentation level, at most 15."""
        if indent and self.has_property(Prop.ALIGNMENT_ALIGN_H):
            current = self.horizontal_alignment()
            if current not in (
                HorizontalAlignment.GENERAL,
                HorizontalAlignment.LEFT,
                HorizontalAlignment.RIGHT,
                HorizontalAlignment.JUSTIFY,
            ):
                self.set_horizontal_alignment(HorizontalAlignment.LEFT)
        self.set_property(Prop.ALIGNMENT_INDENT, indent, 0)

    def shrink_to_fit(self) -> bool:
        return self.bool_property(Prop.ALIGNMENT_SHRINK_TO_FIT)

    def set_shrink_to_fit(self, shrink: bool) -> None:
        if shrink and self.has_property(Prop.ALIGNMENT_WRAP):
            self.clear_property(Prop.ALIGNMENT_WRAP)
        if shrink and self.has_property(Prop.ALIGNMENT_ALIGN_H):
            if self.horizontal_alignment() in _NO_SHRINK_ALIGNMENTS:
                self.set_horizontal_alignment(HorizontalAlignment.LEFT)
        self.set_property(Prop.ALIGNMENT_SHRINK_TO_FIT, bool(shrink), False)

    # -- borders ----------------------------------------------------------

    def set_border_style(self, style: BorderStyle) -> None:
        """Set the left, right, bottom and top border styles."""
        for side in ("left", "right", "bottom", "top"):
            self.set_side_border_style(side, style)

    def set_border_color(self, color: Color | str | None) -> None:
        """Set the left, right, top and bottom border colours."""
        for side in ("left", "right", "top", "bottom"):
            self.set_side_border_color(side, color)

    def border_style(self, side: str) -> BorderStyle:
        """Return the style of the "left", "right", "top", "bottom" or "diagonal" border."""
        return BorderStyle(self.int_property(_side_prop(_BORDER_STYLE_PROPS, side)))

    def set_side_border_style(self, side: str, style: BorderStyle) -> None:
        self.set_property(
            _side_prop(_BORDER_STYLE_PROPS, side), BorderStyle(style), BorderStyle.NONE
        )

    def border_color(self, side: str) -> Color:
        return self.color_property(_side_prop(_BORDER_COLOR_PROPS, side))

    def set_side_border_color(self, side: str, color: Color | str | None) -> None:
        self.set_property(_side_prop(_BORDER_COLOR_PROPS, side), _as_color(color), Color())

    def diagonal_border_type(self) -> DiagonalBorderType:
        return DiagonalBorderType(self.int_property(Prop.BORDER_DIAGONAL_TYPE))

    def set_diagonal_border_type(self, border_type: DiagonalBorderType) -> None:
        self.set_property(
            Prop.BORDER_DIAGONAL_TYPE,
            DiagonalBorderType(border_type),
            DiagonalBorderType.NONE,
        )

    # -- fill -------------------------------------------------------------

    def fill_pattern(self) -> FillPattern:
        return FillPattern(self.int_property(Prop.FILL_PATTERN, FillPattern.NONE))

    def set_fill_pattern(self, pattern: FillPattern) -> None:
        self.set_property(Prop.FILL_PATTERN, FillPattern(pattern), FillPattern.NONE)

    def pattern_foreground_color(self) -> Color:
        return self.color_property(Prop.FILL_FG_COLOR)

    def set_pattern_foreground_color(self, color: Color | str | None) -> None:
        color = _as_color(color)
        if color.is_valid() and not self.has_property(Prop.FILL_PATTERN):
            self.set_fill_pattern(FillPattern.SOLID)
        self.set_property(Prop.FILL_FG_COLOR, color, Color())

    def pattern_background_color(self) -> Color:
        return self.color_property(Prop.FILL_BG_COLOR)

    def set_pattern_background_color(self, color: Color | str | None) -> None:
        color = _as_color(color)
        if color.is_valid() and not self.has_property(Prop.FILL_PATTERN):
            self.set_fill_pattern(FillPattern.SOLID)
        self.set_property(Prop.FILL_BG_COLOR, color, Color())

    # -- protection -------------------------------------------------------

    def locked(self) -> bool:
        return self.bool_property(Prop.PROTECTION_LOCKED)

    def set_locked(self, locked: bool) -> None:
        self.set_property(Prop.PROTECTION_LOCKED, bool(locked))

    def hidden(self) -> bool:
        return self.bool_property(Prop.PROTECTION_HIDDEN)

    def set_hidden(self, hidden: bool) -> None:
        self.set_property(Prop.PROTECTION_HIDDEN, bool(hidden))