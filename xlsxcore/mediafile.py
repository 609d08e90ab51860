"""Media (image) parts stored in a spreadsheet package."""

from __future__ import annotations

import hashlib


class MediaFile:
    """Binary contents of a media part together with its package index."""

    def __init__(
        self,
        contents: bytes | None = None,
        suffix: str = "",
        mime_type: str = "",
        file_name: str = "",
    ) -> None:
        self.file_name = file_name
        self._contents = b""
        self._suffix = suffix
        self._mime_type = mime_type
        self._hash_key = b""
        self._index = 0
        self._index_valid = False
        if contents is not None:
            self.set(contents, suffix, mime_type)

    def set(self, contents: bytes, suffix: str, mime_type: str) -> None:
        """Replace the contents; the index becomes invalid."""
        self._contents = bytes(contents)
        self._suffix = suffix
        self._mime_type = mime_type
        self._hash_key = hashlib.md5(self._contents).digest()
        self._index_valid = False

    def set_index(self, index: int) -> None:
        """Assign the index of this media part in the package."""
        self._index = index
        self._index_valid = True

    @property
    def contents(self) -> bytes:
        return self._contents

    @property
    def suffix(self) -> str:
        return self._suffix

    @property
    def mime_type(self) -> str:
        return self._mime_type

    @property
    def hash_key(self) -> bytes:
        """MD5 digest of the contents, empty when no contents were set."""
        return self._hash_key

    @property
    def index(self) -> int:
        return self._index

    @property
    def index_valid(self) -> bool:
        return self._index_valid