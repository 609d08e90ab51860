"""The shared string table of a workbook."""

from __future__ import annotations

from dataclasses import dataclass

from .richstring import RichString


@dataclass
class _StringInfo:
    index: int
    count: int = 1


def _as_rich(string: str | RichString) -> RichString:
    return string if isinstance(string, RichString) else RichString(string)


class SharedStrings:
    """Unique strings referenced by cells, with reference counts.

    Strings loaded from an existing file may hold duplicates, so the list
    can be longer than the lookup table.
    """

    def __init__(self) -> None:
        self._table: dict[RichString, _StringInfo] = {}
        self._strings: list[RichString] = []
        self._count = 0

    def count(self) -> int:
        """Return the total number of references to shared strings."""
        return self._count

    def is_empty(self) -> bool:
        return not self._strings

    def __len__(self) -> int:
        """Return the number of entries in the string list."""
        return len(self._strings)

    def add_shared_string(self, string: str | RichString) -> int:
        """Add a reference to ``string`` and return its index."""
        rich = _as_rich(string)
        self._count += 1
        info = self._table.get(rich)
        if info is not None:
            info.count += 1
            return info.index
        index = len(self._strings)
        self._table[rich] = _StringInfo(index)
        self._strings.append(rich)
        return index

    def append_loaded_string(self, string: str | RichString) -> int:
        """Append a string read from a file, without counting a reference."""
        rich = _as_rich(string)
        index = len(self._strings)
        self._table[rich] = _StringInfo(index, 0)
        self._strings.append(rich)
        return index

    def remove_shared_string(self, string: str | RichString) -> None:
        """Drop one reference; the string goes when none are left."""
        rich = _as_rich(string)
        info = self._table.get(rich)
        if info is None:
            return
        self._count -= 1
        info.count -= 1
        if info.count <= 0:
            for later in self._strings[info.index + 1 :]:
                self._table[later].index -= 1
            del self._strings[info.index]
            del self._table[rich]

    def inc_ref_by_string_index(self, index: int) -> None:
        """Add a reference to the string at ``index``.

        Raises IndexError when the index is out of range.
        """
        if not 0 <= index < len(self._strings):
            raise IndexError(f"invalid shared string index: {index}")
        self.add_shared_string(self._strings[index])

    def get_shared_string_index(self, string: str | RichString) -> int | None:
        """Return the index of ``string``, or None if it is not shared."""
        info = self._table.get(_as_rich(string))
        return None if info is None else info.index

    def get_shared_string(self, index: int) -> RichString:
        """Return the string at ``index``, or a null string when out of range."""
        if 0 <= index < len(self._strings):
            return self._strings[index]
        return RichString()

    def get_shared_strings(self) -> list[RichString]:
        return list(self._strings)