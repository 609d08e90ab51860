# xlsxcore

Building blocks for working with the parts of an `.xlsx` (Office Open XML
spreadsheet) package: cell formats, rich strings, the shared string table
and its XML, package relationships, raw XML parts with a default theme, and
small helpers for dates, sheet names and part paths. It uses only the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `xlsxcore.numformat` – `is_date_time(format_code)` guesses from the first
  section of a number format code whether it shows a date or time.
- `xlsxcore.utility` – `parse_xsd_boolean`, `xsd_boolean`, `split_path`,
  `get_rel_file_path`, `datetime_to_number`, `time_to_number`,
  `datetime_from_number` (gives a `time`, `date` or `datetime` depending on
  the serial number), `create_safe_sheet_name`, `escape_sheet_name`,
  `unescape_sheet_name` (both raise `ValueError` on names in the wrong form)
  and `is_space_reserve_needed`.
- `xlsxcore.mediafile` – `MediaFile` holds the bytes of a media part, its
  suffix and MIME type, an MD5 `hash_key` and an index set by `set_index`.
- `xlsxcore.relationships` – `Relationships` is an ordered collection of
  `Relationship` entries with generated `rIdN` ids; it serialises with
  `save_to_xml_data()` and parses with `load_from_xml_data(data)`, which
  raises `ValueError` on malformed XML.
- `xlsxcore.formatbase` – `FormatBase` is the sparse property store behind
  formats, keyed by the `Prop` enum, with font/fill/border/format keys and
  style indices; `Color` is an ARGB colour (`Color()` is invalid) with
  `from_argb_string` and `to_argb_string`.
- `xlsxcore.format` – `Format` adds number format, font, alignment, border,
  fill and protection accessors, with the enums `FontScript`,
  `FontUnderline`, `HorizontalAlignment`, `VerticalAlignment`,
  `BorderStyle`, `DiagonalBorderType` and `FillPattern`. Borders are
  addressed by side: `"left"`, `"right"`, `"top"`, `"bottom"`,
  `"diagonal"`.
- `xlsxcore.richstring` – `RichString` is text made of `(text, Format)`
  fragments; a one-fragment string compares equal to a `str` with the same
  text.
- `xlsxcore.sharedstrings` – `SharedStrings` is the shared string table with
  reference counting (`add_shared_string`, `remove_shared_string`,
  `get_shared_string_index`, which returns `None` for unknown strings, and
  more).
- `xlsxcore.sharedstringsxml` – `save_shared_strings(table)` writes
  `sharedStrings.xml` bytes; `load_shared_strings(data)` reads them back and
  raises `ValueError` on malformed XML or a `uniqueCount` mismatch.
- `xlsxcore.parts` – `SimpleXmlPart` keeps a part's XML unchanged; `Theme`
  saves the default Office theme (`DEFAULT_THEME_XML`) when it holds no XML.

## Example

```python
from xlsxcore.format import Format, FillPattern
from xlsxcore.richstring import RichString
from xlsxcore.sharedstrings import SharedStrings
from xlsxcore.sharedstringsxml import save_shared_strings, load_shared_strings
from xlsxcore.utility import escape_sheet_name

fmt = Format()
fmt.set_font_bold(True)
fmt.set_fill_pattern(FillPattern.SOLID)

text = RichString()
text.add_fragment("Total: ", fmt)
text.add_fragment("42", Format())

table = SharedStrings()
index = table.add_shared_string(text)
xml = save_shared_strings(table)
again = load_shared_strings(xml)
assert again.get_shared_string(index) == text

print(escape_sheet_name("My Sheet"))  # 'My Sheet'
```

## What it does not do

The package works on single parts only. It does not open or write whole
`.xlsx` zip archives, and it has no workbook, worksheet, cell or
`styles.xml` handling: formats carry their style indices, but nothing here
assigns them or writes a style sheet. There is no command-line tool.