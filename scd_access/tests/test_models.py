"""Tests for the SCR data models."""

import pytest

from scd_access.core.models import (
    SCR,
    SCRNoId,
    Content,
    Geopose,
    Position,
    Quaternion,
    Reference,
)


def make_content(**kwargs):
    return Content(
        id="c1",
        type="3d",
        title="Statue",
        geopose=Geopose(
            position=Position(lon=2.2945, lat=48.8584, h=35.0),
            quaternion=Quaternion(x=0, y=0, z=0, w=1),
        ),
        **kwargs,
    )


class TestSerialization:
    """Test conversion to wire dictionaries."""

    def test_absent_fields_are_omitted(self):
        """Optional fields that were not provided must not appear as null."""
        data = SCRNoId(type="scr", content=make_content()).to_dict()

        assert set(data) == {"type", "content"}
        assert set(data["content"]) == {"id", "type", "title", "geopose"}

    def test_empty_values_are_kept(self):
        """Present-and-empty differs from absent."""
        data = make_content(description="", keywords=[]).to_dict()

        assert data["description"] == ""
        assert data["keywords"] == []

    def test_reference_uses_wire_names(self):
        ref = Reference(content_type="image/png", url="https://example.com/a.png")
        assert ref.to_dict() == {"contentType": "image/png", "url": "https://example.com/a.png"}

    def test_full_record_roundtrip(self, scr_doc):
        """from_dict followed by to_dict reproduces the document."""
        assert SCR.from_dict(scr_doc).to_dict() == scr_doc


class TestRecordIdentity:
    """Test moving between the two record shapes."""

    def test_with_id(self):
        record = SCRNoId(type="scr", content=make_content(), tenant="t1")
        scr = record.with_id("0123456789abcdef")

        assert scr.id == "0123456789abcdef"
        assert scr.without_id() == record

    def test_records_are_immutable(self):
        record = SCRNoId(type="scr", content=make_content())
        with pytest.raises(AttributeError):
            record.type = "other"

    def test_records_are_hashable(self, scr_doc):
        scr = SCR.from_dict(scr_doc)
        assert hash(scr) == hash(SCR.from_dict(scr_doc))
        assert isinstance(scr.content.refs, tuple)

    def test_lists_are_stored_as_tuples(self):
        content = make_content(keywords=["a", "b"])
        assert content.keywords == ("a", "b")
        assert content.to_dict()["keywords"] == ["a", "b"]
        assert hash(content)

    def test_unknown_keys_are_ignored(self, scr_doc):
        scr_doc["content"]["url"] = "https://example.com/legacy.glb"
        scr_doc["extra"] = True

        scr = SCR.from_dict(scr_doc)
        assert "url" not in scr.to_dict()["content"]
        assert "extra" not in scr.to_dict()
