"""Heuristics for number format codes."""

_DATE_TIME_LETTERS = frozenset("DdYyHhSsMm")
_ELAPSED_TIME_UNITS = frozenset("hms")


def is_date_time(format_code: str) -> bool:
    """Return True if the number format code probably formats a date or time.

    Only the first section of the code is examined, because dates and times
    can only be positive numbers.
    """
    length = len(format_code)
    i = 0
    while i < length:
        ch = format_code[i]
        if ch == "[":
            if i < length - 2 and format_code[i + 2] == "]":
                # [h], [m], [s] are elapsed time formats
                if format_code[i + 1].lower() in _ELAPSED_TIME_UNITS:
                    return True
                i += 2
            else:
                # condition or color block: skip to the closing bracket
                while i < length and format_code[i] != "]":
                    i += 1
        elif ch == '"':
            # quoted literal text: skip to the closing quote
            while i < length - 1:
                i += 1
                if format_code[i] == '"':
                    break
        elif ch == "\\":
            # escaped character
            if i < length - 1:
                i += 1
        elif ch in "#;":
            return False
        elif ch in _DATE_TIME_LETTERS:
            return True
        i += 1
    return False