"""Tests for JSON and MessagePack wire formats."""

from __future__ import annotations

import json
from datetime import datetime, timezone

import msgpack

from gravy import (
    CaseMode,
    ConversionOptions,
    Serializable,
    from_json,
    from_msgpack,
    to_json,
    to_msgpack,
)


class Photo(Serializable):
    caption: str
    taken_at: datetime
    thumbnail: bytes = b""


PHOTO = Photo(
    caption="Sunset",
    taken_at=datetime(2013, 1, 31, 18, 0, tzinfo=timezone.utc),
    thumbnail=b"\x89PNG",
)


class TestJson:
    """Test JSON text conversion."""

    def test_to_json(self):
        """Test JSON text carries the wire form."""
        text = to_json(PHOTO, ConversionOptions(case=CaseMode.TO_CAMEL), sort_keys=True)

        assert json.loads(text) == {
            "caption": "Sunset",
            "takenAt": "2013-01-31T18:00:00Z",
            "thumbnail": "iVBORw==",
        }
        assert text.index('"caption"') < text.index('"takenAt"')

    def test_round_trip(self):
        """Test JSON text decodes back into the model."""
        options = ConversionOptions(case=CaseMode.TO_CAMEL)
        assert from_json(to_json(PHOTO, options), Photo, options) == PHOTO

    def test_from_json_without_destination(self):
        """Test JSON text decodes to plain containers."""
        assert from_json('{"a": [1, 2]}') == {"a": [1, 2]}


class TestMsgpack:
    """Test MessagePack conversion."""

    def test_to_msgpack(self):
        """Test packed data carries the same wire form as JSON."""
        data = to_msgpack(PHOTO)
        assert msgpack.unpackb(data, raw=False) == json.loads(to_json(PHOTO))

    def test_round_trip(self):
        """Test packed data decodes back into the model."""
        assert from_msgpack(to_msgpack(PHOTO), Photo) == PHOTO
