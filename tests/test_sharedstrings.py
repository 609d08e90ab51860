import pytest

from xlsxcore.format import Format
from xlsxcore.richstring import RichString
from xlsxcore.sharedstrings import SharedStrings


def test_new_table_is_empty():
    table = SharedStrings()
    assert table.is_empty()
    assert table.count() == 0
    assert len(table) == 0


def test_add_assigns_indices_and_counts():
    table = SharedStrings()
    assert table.add_shared_string("a") == 0
    assert table.add_shared_string("b") == 1
    assert table.add_shared_string("a") == 0
    assert table.count() == 3
    assert len(table) == 2
    assert not table.is_empty()


def test_str_and_rich_string_share_entry():
    table = SharedStrings()
    index = table.add_shared_string(RichString("x"))
    assert table.add_shared_string("x") == index
    assert table.get_shared_string_index("x") == index
    assert table.get_shared_string_index(RichString("x")) == index


def test_rich_strings_distinct_by_format():
    table = SharedStrings()
    bold = Format()
    bold.set_font_bold(True)
    a = RichString()
    a.add_fragment("t", bold)
    a.add_fragment("u")
    b = RichString()
    b.add_fragment("t")
    b.add_fragment("u")
    assert table.add_shared_string(a) != table.add_shared_string(b)
    assert len(table) == 2


def test_missing_index_is_none():
    table = SharedStrings()
    table.add_shared_string("a")
    assert table.get_shared_string_index("zzz") is None


def test_get_shared_string():
    table = SharedStrings()
    table.add_shared_string("first")
    assert table.get_shared_string(0) == "first"
    assert table.get_shared_string(1).is_null()
    assert table.get_shared_string(-1).is_null()


def test_get_shared_strings_is_a_copy():
    table = SharedStrings()
    table.add_shared_string("a")
    strings = table.get_shared_strings()
    strings.clear()
    assert len(table) == 1
    assert [s.to_plain_string() for s in table.get_shared_strings()] == ["a"]


def test_remove_reindexes_later_strings():
    table = SharedStrings()
    for text in ("a", "b", "c"):
        table.add_shared_string(text)
    table.remove_shared_string("a")
    assert table.get_shared_string_index("a") is None
    assert table.get_shared_string_index("b") == 0
    assert table.get_shared_string_index("c") == 1
    assert table.count() == 2


def test_remove_keeps_string_with_remaining_references():
    table = SharedStrings()
    table.add_shared_string("a")
    table.add_shared_string("a")
    table.remove_shared_string("a")
    assert table.get_shared_string_index("a") == 0
    assert table.count() == 1


def test_remove_unknown_is_noop():
    table = SharedStrings()
    table.add_shared_string("a")
    table.remove_shared_string("nope")
    assert table.count() == 1
    assert len(table) == 1


def test_inc_ref_by_index():
    table = SharedStrings()
    table.add_shared_string("a")
    table.inc_ref_by_string_index(0)
    assert table.count() == 2
    assert len(table) == 1


@pytest.mark.parametrize("index", [-1, 1, 10])
def test_inc_ref_invalid_index_raises(index):
    table = SharedStrings()
    table.add_shared_string("a")
    with pytest.raises(IndexError):
        table.inc_ref_by_string_index(index)


def test_loaded_strings_start_unreferenced():
    table = SharedStrings()
    assert table.append_loaded_string("x") == 0
    assert table.append_loaded_string("y") == 1
    assert table.count() == 0
    assert table.add_shared_string("y") == 1
    assert table.count() == 1


def test_loaded_duplicates_kept_in_list():
    table = SharedStrings()
    table.append_loaded_string("d")
    table.append_loaded_string("d")
    assert len(table) == 2
    assert table.get_shared_string(0) == table.get_shared_string(1)


def test_remove_loaded_string_drops_it():
    table = SharedStrings()
    table.append_loaded_string("x")
    table.append_loaded_string("y")
    table.remove_shared_string("x")
    assert table.get_shared_string_index("y") == 0
    assert len(table) == 1