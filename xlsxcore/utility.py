"""Helpers shared by the spreadsheet package parts."""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time, timedelta

_MS_PER_DAY = 1000 * 60 * 60 * 24.0
_EPOCH_1900 = datetime(1899, 12, 31)
_EPOCH_1904 = datetime(1904, 1, 1)

_INVALID_SHEET_CHARS = re.compile(r"[/\\?*\][:]")
_ESCAPE_NEEDED = re.compile(r"[ +\-,%^=<>'&]")
_MAX_SHEET_NAME = 31


def parse_xsd_boolean(value: str, default: bool = False) -> bool:
    """Parse an xsd:boolean value, falling back to ``default``."""
    if value in ("1", "true"):
        return True
    if value in ("0", "false"):
        return False
    return default


def xsd_boolean(value: bool) -> str:
    """Format a boolean as xsd:boolean."""
    return "1" if value else "0"


def split_path(path: str) -> tuple[str, str]:
    """Split a package path into directory and file name."""
    directory, sep, name = path.rpartition("/")
    if not sep:
        return ".", path
    return directory, name


def get_rel_file_path(file_path: str) -> str:
    """Return the path of the .rels part that belongs to ``file_path``."""
    directory, sep, name = file_path.rpartition("/")
    if not sep:
        return f"_rels/{file_path}.rels"
    return f"{directory}/_rels/{name}.rels"


def _epoch(is1904: bool) -> datetime:
    return _EPOCH_1904 if is1904 else _EPOCH_1900


def datetime_to_number(dt: datetime, is1904: bool = False) -> float:
    """Convert a wall-clock datetime to an Excel serial number."""
    naive = dt.replace(tzinfo=None)
    msecs = (naive - _epoch(is1904)) // timedelta(milliseconds=1)
    excel_time = msecs / _MS_PER_DAY
    if not is1904 and excel_time > 59:
        # Excel treats 1900 as a leap year.
        excel_time += 1
    return excel_time


def time_to_number(time: time) -> float:
    """Convert a time of day to a fraction of a day."""
    msecs = ((time.hour * 60 + time.minute) * 60 + time.second) * 1000
    msecs += time.microsecond // 1000
    return msecs / _MS_PER_DAY


def datetime_from_number(num: float, is1904: bool = False) -> datetime | date | time:
    """Convert an Excel serial number back to a time, date or datetime.

    Numbers below one give a time; whole numbers give a date.
    """
    if not is1904 and num > 60:
        num -= 1
    msecs = int(num * _MS_PER_DAY + 0.5)
    result = _epoch(is1904) + timedelta(milliseconds=msecs)
    fractional, _ = math.modf(num)
    if num < 1:
        return result.time()
    if fractional == 0.0:
        return result.date()
    return result


def create_safe_sheet_name(name_proposal: str) -> str:
    """Turn a proposal into a valid sheet name.

    Invalid characters and leading or trailing apostrophes become spaces, and
    the name is cut to 31 characters.
    """
    if not name_proposal:
        return ""
    name = name_proposal
    if len(name) > 2 and name.startswith("'") and name.endswith("'"):
        name = unescape_sheet_name(name)
    name = _INVALID_SHEET_CHARS.sub(" ", name)
    if name.startswith("'"):
        name = " " + name[1:]
    if name.endswith("'"):
        name = name[:-1] + " "
    return name[:_MAX_SHEET_NAME]


def escape_sheet_name(sheet_name: str) -> str:
    """Quote a sheet name for use in formulas when it needs quoting."""
    if sheet_name.startswith("'") or sheet_name.endswith("'"):
        raise ValueError(f"sheet name already escaped: {sheet_name!r}")
    if not _ESCAPE_NEEDED.search(sheet_name):
        return sheet_name
    return "'" + sheet_name.replace("'", "''") + "'"


def unescape_sheet_name(sheet_name: str) -> str:
    """Undo :func:`escape_sheet_name`."""
    if not (len(sheet_name) > 2 and sheet_name.startswith("'") and sheet_name.endswith("'")):
        raise ValueError(f"sheet name is not escaped: {sheet_name!r}")
    return sheet_name[1:-1].replace("''", "'")


def is_space_reserve_needed(s: str) -> bool:
    """Return True if the text starts or ends with whitespace."""
    spaces = " \t\n\r"
    return bool(s) and (s[0] in spaces or s[-1] in spaces)