"""Cell text made of formatted fragments."""

from __future__ import annotations

from typing import Iterator

from .format import Format

_RICH_KEY_PREFIX = b"@@XlsxRichString="


class RichString:
    """A string made of text fragments, each with its own font format.

    ``RichString()`` is the null string. ``RichString(text)`` is a plain
    string of one fragment with an empty format.
    """

    def __init__(self, text: str | None = None) -> None:
        self._texts: list[str] = []
        self._formats: list[Format] = []
        self._id_key = b""
        self._dirty = True
        if text is not None:
            self.add_fragment(text, Format())

    def __copy__(self) -> RichString:
        other = RichString()
        other._texts = list(self._texts)
        other._formats = [fmt.copy() for fmt in self._formats]
        return other

    def copy(self) -> RichString:
        """Return an independent copy of this string."""
        return self.__copy__()

    def is_rich_string(self) -> bool:
        """Return True if the string has more than one fragment."""
        return self.fragment_count() > 1

    def is_null(self) -> bool:
        """Return True if the string has no fragments at all."""
        return not self._texts

    def is_empty(self) -> bool:
        """Return True if every fragment's text is empty."""
        return all(not text for text in self._texts)

    def to_plain_string(self) -> str:
        """Return the text of all fragments joined together."""
        return "".join(self._texts)

    def fragment_count(self) -> int:
        return len(self._texts)

    def add_fragment(self, text: str, fmt: Format | None = None) -> None:
        """Append a fragment with the given text and format."""
        self._texts.append(text)
        self._formats.append(fmt if fmt is not None else Format())
        self._dirty = True

    def fragment_text(self, index: int) -> str:
        """Return the text of a fragment, or "" when out of range."""
        if 0 <= index < len(self._texts):
            return self._texts[index]
        return ""

    def fragment_format(self, index: int) -> Format:
        """Return the format of a fragment, or an invalid format when out of range."""
        if 0 <= index < len(self._formats):
            return self._formats[index]
        return Format()

    @property
    def fragments(self) -> list[tuple[str, Format]]:
        """The (text, format) pairs of this string, in order."""
        return list(zip(self._texts, self._formats))

    def __iter__(self) -> Iterator[tuple[str, Format]]:
        return iter(zip(self._texts, self._formats))

    def id_key(self) -> bytes:
        """Return the key that identifies this string for comparison."""
        if self._dirty:
            if len(self._texts) == 1:
                key = self._texts[0].encode("utf-8")
            else:
                parts = [_RICH_KEY_PREFIX]
                for text, fmt in zip(self._texts, self._formats):
                    parts.append(b"@Text")
                    parts.append(text.encode("utf-8"))
                    parts.append(b"@Format")
                    if fmt.has_font_data():
                        parts.append(fmt.font_key())
                key = b"".join(parts)
            self._id_key = key
            self._dirty = False
        return self._id_key

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return len(self._texts) == 1 and self._texts[0] == other
        if not isinstance(other, RichString):
            return NotImplemented
        if self.fragment_count() != other.fragment_count():
            return False
        return self.id_key() == other.id_key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RichString):
            return NotImplemented
        return self.id_key() < other.id_key()

    def __hash__(self) -> int:
        # Hash a plain string like its text so it matches equal str values.
        if len(self._texts) == 1:
            return hash(self._texts[0])
        return hash(self.id_key())

    def __str__(self) -> str:
        return self.to_plain_string()

    def __repr__(self) -> str:
        return f"RichString({self._texts!r})"