"""Package relationship parts (.rels)."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Iterator
from xml.sax.saxutils import escape

SCHEMA_DOC = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
SCHEMA_MS_PACKAGE = "http://schemas.microsoft.com/office/2006/relationships"
SCHEMA_PACKAGE = "http://schemas.openxmlformats.org/package/2006/relationships"


@dataclass
class Relationship:
    """A single relationship entry."""

    id: str = ""
    type: str = ""
    target: str = ""
    target_mode: str | None = None


def _attr(value: str) -> str:
    return escape(value, {'"': "&quot;"})


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


class Relationships:
    """An ordered collection of relationships with generated ids."""

    def __init__(self) -> None:
        self._relationships: list[Relationship] = []

    def document_relationships(self, relative_type: str) -> list[Relationship]:
        return self.relationships(SCHEMA_DOC + relative_type)

    def add_document_relationship(self, relative_type: str, target: str) -> None:
        self.add_relationship(SCHEMA_DOC + relative_type, target)

    def ms_package_relationships(self, relative_type: str) -> list[Relationship]:
        return self.relationships(SCHEMA_MS_PACKAGE + relative_type)

    def add_ms_package_relationship(self, relative_type: str, target: str) -> None:
        self.add_relationship(SCHEMA_MS_PACKAGE + relative_type, target)

    def package_relationships(self, relative_type: str) -> list[Relationship]:
        return self.relationships(SCHEMA_PACKAGE + relative_type)

    def add_package_relationship(self, relative_type: str, target: str) -> None:
        self.add_relationship(SCHEMA_PACKAGE + relative_type, target)

    def worksheet_relationships(self, relative_type: str) -> list[Relationship]:
        return self.relationships(SCHEMA_DOC + relative_type)

    def add_worksheet_relationship(
        self, relative_type: str, target: str, target_mode: str | None = None
    ) -> None:
        self.add_relationship(SCHEMA_DOC + relative_type, target, target_mode)

    def relationships(self, rel_type: str) -> list[Relationship]:
        """Return all relationships of the given full type."""
        return [ship for ship in self._relationships if ship.type == rel_type]

    def add_relationship(
        self, rel_type: str, target: str, target_mode: str | None = None
    ) -> None:
        """Append a relationship with the next ``rIdN`` id."""
        rel_id = f"rId{len(self._relationships) + 1}"
        self._relationships.append(Relationship(rel_id, rel_type, target, target_mode))

    def save_to_xml_data(self) -> bytes:
        """Serialise the relationships as a .rels XML document."""
        parts = [
            '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>',
            f'<Relationships xmlns="{SCHEMA_PACKAGE}">',
        ]
        for ship in self._relationships:
            item = (
                f'<Relationship Id="{_attr(ship.id)}" Type="{_attr(ship.type)}"'
                f' Target="{_attr(ship.target)}"'
            )
            if ship.target_mode is not None:
                item += f' TargetMode="{_attr(ship.target_mode)}"'
            parts.append(item + "/>")
        parts.append("</Relationships>")
        return "".join(parts).encode("utf-8")

    def load_from_xml_data(self, data: bytes) -> None:
        """Replace the contents with those parsed from .rels XML.

        Raises ValueError if the data is not well-formed XML.
        """
        self.clear()
        try:
            root = ET.fromstring(data)
        except ET.ParseError as exc:
            raise ValueError(f"invalid relationships XML: {exc}") from exc
        for element in root.iter():
            if _local_name(element.tag) != "Relationship":
                continue
            self._relationships.append(
                Relationship(
                    id=element.get("Id", ""),
                    type=element.get("Type", ""),
                    target=element.get("Target", ""),
                    target_mode=element.get("TargetMode"),
                )
            )

    def get_relationship_by_id(self, rel_id: str) -> Relationship | None:
        """Return the relationship with the given id, or None."""
        return next((ship for ship in self._relationships if ship.id == rel_id), None)

    def clear(self) -> None:
        self._relationships.clear()

    def __len__(self) -> int:
        return len(self._relationships)

    def __iter__(self) -> Iterator[Relationship]:
        return iter(self._relationships)