"""Building blocks for Office Open XML spreadsheet parts: formats, rich strings,
shared strings, relationships, raw XML parts and helpers."""

__version__ = "0.1.0"