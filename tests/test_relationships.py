import pytest

from xlsxcore.relationships import (
    SCHEMA_DOC,
    SCHEMA_MS_PACKAGE,
    SCHEMA_PACKAGE,
    Relationship,
    Relationships,
)


@pytest.fixture
def rels():
    r = Relationships()
    r.add_document_relationship("/worksheet", "worksheets/sheet1.xml")
    r.add_document_relationship("/styles", "styles.xml")
    r.add_package_relationship("/metadata/core-properties", "docProps/core.xml")
    return r


def test_ids_are_sequential(rels):
    assert [ship.id for ship in rels] == ["rId1", "rId2", "rId3"]
    assert len(rels) == 3


def test_filter_by_type(rels):
    sheets = rels.document_relationships("/worksheet")
    assert sheets == [Relationship("rId1", SCHEMA_DOC + "/worksheet", "worksheets/sheet1.xml")]
    assert rels.worksheet_relationships("/styles")[0].target == "styles.xml"
    core = rels.package_relationships("/metadata/core-properties")
    assert core[0].type == SCHEMA_PACKAGE + "/metadata/core-properties"


def test_ms_package(rels):
    rels.add_ms_package_relationship("/ui/extensibility", "customUI/customUI.xml")
    found = rels.ms_package_relationships("/ui/extensibility")
    assert len(found) == 1
    assert found[0].type == SCHEMA_MS_PACKAGE + "/ui/extensibility"


def test_get_by_id(rels):
    assert rels.get_relationship_by_id("rId2").target == "styles.xml"
    assert rels.get_relationship_by_id("rId99") is None


def test_round_trip(rels):
    rels.add_worksheet_relationship("/hyperlink", "http://localhost/a?b=1&c=2", "External")
    loaded = Relationships()
    loaded.load_from_xml_data(rels.save_to_xml_data())
    assert list(loaded) == list(rels)


def test_target_mode_only_when_set(rels):
    data = rels.save_to_xml_data()
    assert b"TargetMode" not in data
    rels.add_worksheet_relationship("/hyperlink", "http://localhost/", "External")
    assert b'TargetMode="External"' in rels.save_to_xml_data()


def test_saved_header(rels):
    data = rels.save_to_xml_data()
    assert data.startswith(b'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>')
    assert SCHEMA_PACKAGE.encode() in data


def test_load_missing_target_mode():
    data = (
        b'<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">'
        b'<Relationship Id="rId7" Type="t" Target="x.xml"/></Relationships>'
    )
    rels = Relationships()
    rels.load_from_xml_data(data)
    assert list(rels) == [Relationship("rId7", "t", "x.xml", None)]


def test_load_replaces_existing(rels):
    rels.load_from_xml_data(b"<Relationships/>")
    assert len(rels) == 0


def test_load_invalid_raises(rels):
    with pytest.raises(ValueError):
        rels.load_from_xml_data(b"<Relationships><Relationship")
    assert len(rels) == 0


def test_clear(rels):
    rels.clear()
    assert len(rels) == 0
    rels.add_relationship("t", "x")
    assert rels.get_relationship_by_id("rId1").target == "x"