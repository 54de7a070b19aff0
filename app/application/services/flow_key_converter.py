"""Flow key <-> bytes codec used for pagination cursors.

Layout (big-endian):
    1 byte   format version (currently 1)
    4 x      [2-byte length][UTF-8 bytes] for cluster, user_name, app_id, version
    8 bytes  run_id (unsigned)

Length prefixes keep the encoding exact for any component text, so
to_bytes/from_bytes round-trip without separator escaping. Client-facing
cursors are the standard base64 form of these bytes.
"""

from __future__ import annotations

import base64
import binascii
import struct

from app.domain.value_objects import FlowKey

_FORMAT_VERSION = 1
_LENGTH = struct.Struct(">H")
_RUN_ID = struct.Struct(">Q")
_MAX_COMPONENT_BYTES = 0xFFFF


class FlowKeyConverter:
    """Encode and decode FlowKey values (IFlowKeyCodec)."""

    def to_bytes(self, key: FlowKey) -> bytes:
        """Encode key; raises ValueError if a component is too long."""
        parts = [bytes([_FORMAT_VERSION])]
        for component in (key.cluster, key.user_name, key.app_id, key.version):
            raw = component.encode("utf-8")
            if len(raw) > _MAX_COMPONENT_BYTES:
                raise ValueError("flow key component exceeds 65535 bytes")
            parts.append(_LENGTH.pack(len(raw)))
            parts.append(raw)
        parts.append(_RUN_ID.pack(key.run_id))
        return b"".join(parts)

    def from_bytes(self, data: bytes) -> FlowKey:
        """Decode bytes produced by to_bytes.

        Raises:
            ValueError: If data is truncated, has trailing bytes, an unknown
                format version, or components that are not valid UTF-8.
        """
        if not data:
            raise ValueError("empty flow key")
        if data[0] != _FORMAT_VERSION:
            raise ValueError(f"unsupported flow key format {data[0]}")
        offset = 1
        components: list[str] = []
        for _ in range(4):
            if offset + _LENGTH.size > len(data):
                raise ValueError("truncated flow key")
            (length,) = _LENGTH.unpack_from(data, offset)
            offset += _LENGTH.size
            end = offset + length
            if end > len(data):
                raise ValueError("truncated flow key")
            try:
                components.append(data[offset:end].decode("utf-8"))
            except UnicodeDecodeError as e:
                raise ValueError("flow key component is not valid UTF-8") from e
            offset = end
        if offset + _RUN_ID.size != len(data):
            raise ValueError("flow key has wrong length")
        (run_id,) = _RUN_ID.unpack_from(data, offset)
        cluster, user_name, app_id, version = components
        return FlowKey(cluster, user_name, app_id, version, run_id)

    def encode_cursor(self, key: FlowKey) -> str:
        """Return the printable (standard base64) cursor for key."""
        return base64.b64encode(self.to_bytes(key)).decode("ascii")

    def decode_cursor(self, cursor: str) -> FlowKey:
        """Decode a printable cursor; raises ValueError when malformed."""
        try:
            raw = base64.b64decode(cursor.encode("ascii"), validate=True)
        except (binascii.Error, UnicodeEncodeError) as e:
            raise ValueError("cursor is not valid base64") from e
        return self.from_bytes(raw)
