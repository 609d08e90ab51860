import copy
import enum

import pytest

from xlsxcore.formatbase import Color, FormatBase, Prop


class _Level(enum.IntEnum):
    NONE = 0
    HIGH = 2


def test_new_format_is_invalid_and_empty():
    fmt = FormatBase()
    assert fmt.is_valid() is False
    assert fmt.is_empty() is True
    assert fmt.xf_index() == -1
    assert fmt.dxf_index() == -1
    assert fmt.format_key() == b""
    assert fmt.font_key() == b""


def test_set_and_clear_property():
    fmt = FormatBase()
    fmt.set_property(Prop.FONT_SIZE, 11, 0)
    assert fmt.is_valid()
    assert fmt.has_property(Prop.FONT_SIZE)
    assert fmt.int_property(Prop.FONT_SIZE) == 11
    fmt.set_property(Prop.FONT_SIZE, 0, 0)
    assert not fmt.has_property(Prop.FONT_SIZE)
    assert fmt.is_empty()
    assert fmt.is_valid()


def test_clear_property_removes_value():
    fmt = FormatBase()
    fmt.set_property(Prop.PROTECTION_LOCKED, True)
    fmt.clear_property(Prop.PROTECTION_LOCKED)
    assert fmt.property(Prop.PROTECTION_LOCKED, "missing") == "missing"


def test_typed_accessors_reject_wrong_types():
    fmt = FormatBase()
    fmt.set_property(Prop.FONT_NAME, "Arial")
    fmt.set_property(Prop.FONT_BOLD, True)
    fmt.set_property(Prop.ALIGNMENT_ROTATION, 45)
    assert fmt.int_property(Prop.FONT_NAME, 7) == 7
    assert fmt.bool_property(Prop.ALIGNMENT_ROTATION, False) is False
    assert fmt.int_property(Prop.FONT_BOLD, 3) == 3
    assert fmt.string_property(Prop.FONT_NAME) == "Arial"
    assert fmt.double_property(Prop.FONT_NAME, 1.5) == 1.5


def test_double_property():
    fmt = FormatBase()
    fmt.set_property(Prop.FONT_SIZE, 10.5)
    assert fmt.double_property(Prop.FONT_SIZE) == 10.5
    assert fmt.int_property(Prop.FONT_SIZE, 4) == 4


def test_color_property_round_trip_and_default():
    fmt = FormatBase()
    red = Color(0xFFFF0000)
    fmt.set_property(Prop.FONT_COLOR, red, Color())
    assert fmt.color_property(Prop.FONT_COLOR) == red
    assert fmt.color_property(Prop.FILL_FG_COLOR).is_valid() is False
    fmt.set_property(Prop.FONT_COLOR, Color(), Color())
    assert not fmt.has_property(Prop.FONT_COLOR)


def test_int_enum_values_are_stored_as_int():
    a = FormatBase()
    b = FormatBase()
    a.set_property(Prop.FONT_UNDERLINE, _Level.HIGH, _Level.NONE)
    b.set_property(Prop.FONT_UNDERLINE, 2, 0)
    assert a.int_property(Prop.FONT_UNDERLINE) == 2
    assert a == b
    a.set_property(Prop.FONT_UNDERLINE, _Level.NONE, _Level.NONE)
    assert not a.has_property(Prop.FONT_UNDERLINE)


def test_unknown_property_id_raises():
    with pytest.raises(ValueError):
        FormatBase().set_property(9999, 1)


def test_copies_detach_on_change():
    a = FormatBase()
    a.set_property(Prop.FONT_BOLD, True, False)
    b = copy.copy(a)
    b.set_property(Prop.FONT_ITALIC, True, False)
    assert not a.has_property(Prop.FONT_ITALIC)
    assert b.has_property(Prop.FONT_ITALIC)
    assert b.has_property(Prop.FONT_BOLD)


def test_no_detach_changes_shared_data():
    a = FormatBase()
    a.set_property(Prop.NUMFMT_ID, 3)
    b = a.copy()
    b.set_property(Prop.NUMFMT_FORMAT_CODE, "0.00", "", False)
    assert a.string_property(Prop.NUMFMT_FORMAT_CODE) == "0.00"


def test_indices_are_shared_between_copies():
    a = FormatBase()
    a.set_property(Prop.FONT_BOLD, True, False)
    b = a.copy()
    b.set_font_index(5)
    b.set_xf_index(2)
    assert a.font_index() == 5
    assert a.font_index_valid()
    assert a.xf_index() == 2


def test_font_index_invalidated_by_font_change_only():
    fmt = FormatBase()
    fmt.set_property(Prop.FONT_BOLD, True, False)
    fmt.set_property(Prop.FILL_PATTERN, 1, 0)
    fmt.set_font_index(4)
    fmt.set_fill_index(6)
    fmt.set_property(Prop.FILL_PATTERN, 2, 0)
    assert fmt.font_index_valid()
    assert fmt.font_index() == 4
    assert not fmt.fill_index_valid()
    assert fmt.fill_index() == 0


def test_index_needs_group_data():
    fmt = FormatBase()
    fmt.set_property(Prop.FONT_BOLD, True, False)
    fmt.set_border_index(3)
    assert fmt.border_index_valid() is False
    assert fmt.border_index() == 0


def test_xf_and_dxf_invalidated_on_change():
    fmt = FormatBase()
    fmt.set_xf_index(1)
    fmt.set_dxf_index(2)
    assert fmt.xf_index_valid() and fmt.dxf_index_valid()
    fmt.set_property(Prop.ALIGNMENT_WRAP, True, False)
    assert not fmt.xf_index_valid()
    assert not fmt.dxf_index_valid()


def test_unchanged_value_keeps_indices():
    fmt = FormatBase()
    fmt.set_property(Prop.FONT_BOLD, True, False)
    fmt.set_xf_index(1)
    fmt.set_property(Prop.FONT_BOLD, True, False)
    assert fmt.xf_index_valid()


def test_group_keys_depend_on_their_group():
    a = FormatBase()
    a.set_property(Prop.FONT_BOLD, True, False)
    font_key = a.font_key()
    a.set_property(Prop.FILL_PATTERN, 1, 0)
    assert a.font_key() == font_key
    assert a.fill_key() != b""
    b = FormatBase()
    b.set_property(Prop.FILL_PATTERN, 1, 0)
    assert b.fill_key() == a.fill_key()
    assert b.font_key() != a.font_key()
    assert b.border_key() == a.border_key()


def test_equality_by_key_independent_of_order():
    a = FormatBase()
    a.set_property(Prop.FONT_BOLD, True, False)
    a.set_property(Prop.ALIGNMENT_INDENT, 2, 0)
    b = FormatBase()
    b.set_property(Prop.ALIGNMENT_INDENT, 2, 0)
    b.set_property(Prop.FONT_BOLD, True, False)
    assert a == b
    b.set_property(Prop.FONT_BOLD, False, False)
    assert a != b
    assert FormatBase() == FormatBase()


def test_merge_into_invalid_shares_modifier():
    modifier = FormatBase()
    modifier.set_property(Prop.FONT_BOLD, True, False)
    target = FormatBase()
    target.merge_format(modifier)
    assert target == modifier
    assert target.bool_property(Prop.FONT_BOLD) is True


def test_merge_overrides_existing():
    target = FormatBase()
    target.set_property(Prop.FONT_SIZE, 11, 0)
    target.set_property(Prop.FONT_BOLD, True, False)
    modifier = FormatBase()
    modifier.set_property(Prop.FONT_SIZE, 14, 0)
    target.merge_format(modifier)
    assert target.int_property(Prop.FONT_SIZE) == 14
    assert target.bool_property(Prop.FONT_BOLD) is True
    target.merge_format(FormatBase())
    assert target.int_property(Prop.FONT_SIZE) == 14


def test_has_group_data():
    fmt = FormatBase()
    assert not fmt.has_num_fmt_data()
    fmt.set_property(Prop.NUMFMT_ID, 14)
    fmt.set_property(Prop.BORDER_LEFT_STYLE, 1, 0)
    fmt.set_property(Prop.PROTECTION_HIDDEN, True)
    assert fmt.has_num_fmt_data()
    assert fmt.has_border_data()
    assert fmt.has_protection_data()
    assert not fmt.has_font_data()
    assert not fmt.has_fill_data()
    assert not fmt.has_alignment_data()


def test_color_from_argb_string():
    assert Color.from_argb_string("FF00FF00") == Color(0xFF00FF00)
    assert Color.from_argb_string("#00FF00") == Color(0xFF00FF00)
    assert Color.from_argb_string("ff0000ff").to_argb_string() == "FF0000FF"


def test_color_invalid():
    assert Color().is_valid() is False
    assert Color().to_argb_string() == ""
    with pytest.raises(ValueError):
        Color.from_argb_string("xyz")
    with pytest.raises(ValueError):
        Color(-1)