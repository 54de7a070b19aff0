"""Tests for FlowKeyConverter (pagination cursor codec)."""

import base64

import pytest

from app.application.services import FlowKeyConverter
from app.domain.value_objects import FlowKey


@pytest.fixture
def converter() -> FlowKeyConverter:
    return FlowKeyConverter()


def test_bytes_round_trip_keeps_separator_like_characters(converter: FlowKeyConverter) -> None:
    """Components containing '!' or NUL decode back unchanged."""
    key = FlowKey("c1@dc!", "bob\x00", "app!id", "", 1_700_000_000)
    assert converter.from_bytes(converter.to_bytes(key)) == key


def test_cursor_is_standard_base64(converter: FlowKeyConverter) -> None:
    key = FlowKey("c1", "u", "a", "v1", 5)
    cursor = converter.encode_cursor(key)
    assert base64.b64decode(cursor, validate=True) == converter.to_bytes(key)
    assert converter.decode_cursor(cursor) == key


def test_run_id_is_big_endian_tail(converter: FlowKeyConverter) -> None:
    """Last eight bytes are the run id, big-endian."""
    data = converter.to_bytes(FlowKey("c", "u", "a", "v", 258))
    assert data[-8:] == (258).to_bytes(8, "big")


@pytest.mark.parametrize(
    "cursor",
    ["not base64!!", "", base64.b64encode(b"\x01\x00").decode(), base64.b64encode(b"\x09abc").decode()],
)
def test_decode_cursor_rejects_malformed(converter: FlowKeyConverter, cursor: str) -> None:
    with pytest.raises(ValueError):
        converter.decode_cursor(cursor)


def test_from_bytes_rejects_trailing_bytes(converter: FlowKeyConverter) -> None:
    data = converter.to_bytes(FlowKey("c", "u", "a", "v", 1)) + b"\x00"
    with pytest.raises(ValueError, match="wrong length"):
        converter.from_bytes(data)


def test_from_bytes_rejects_invalid_utf8(converter: FlowKeyConverter) -> None:
    data = b"\x01" + b"\x00\x01\xff" + b"\x00\x00" * 3 + (1).to_bytes(8, "big")
    with pytest.raises(ValueError, match="UTF-8"):
        converter.from_bytes(data)
