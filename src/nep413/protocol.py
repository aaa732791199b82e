"""Canonical binary encoding of NEP-413 messages.

Layout follows the Borsh rules wallets use when signing:

    tag(4, u32 LE) + message(string) + nonce(32, raw)
        + recipient(string) + callback_url(option<string>)

where ``string`` is a u32 little-endian byte length followed by the raw
UTF-8 bytes, and ``option<string>`` is 0x00 when absent or 0x01 followed
by a string. Field order is the schema; there are no names or separators.
"""

from __future__ import annotations
import copy
import struct
from dataclasses import fields
from typing import Optional

from nep413.constants import (
    MAX_U32,
    NEP413_TAG,
    NONCE_SIZE,
    OPTION_NONE,
    OPTION_SOME,
    U32_FORMAT,
    U32_SIZE,
)
from nep413.errors import EncodingError
from nep413.models import Nep413Message, Nep413SignatureResponse


# --- Primitives ---


def encode_u32(value: int) -> bytes:
    """Encode an unsigned 32-bit integer, little-endian."""
    if not isinstance(value, int) or not 0 <= value <= MAX_U32:
        raise EncodingError(f"Value out of u32 range: {value!r}")
    return struct.pack(U32_FORMAT, value)


def decode_u32(data: bytes, offset: int) -> tuple[int, int]:
    """Decode a u32 at ``offset``. Returns (value, new_offset)."""
    end = offset + U32_SIZE
    if len(data) < end:
        raise EncodingError(f"Truncated u32 at offset {offset}")
    return struct.unpack(U32_FORMAT, data[offset:end])[0], end


def encode_string(value: str) -> bytes:
    """Encode a string as u32 byte length + UTF-8 bytes."""
    if not isinstance(value, str):
        raise EncodingError(f"Expected str, got {type(value).__name__}")
    raw = value.encode("utf-8")
    return encode_u32(len(raw)) + raw


def decode_string(data: bytes, offset: int) -> tuple[str, int]:
    """Decode a length-prefixed string at ``offset``. Returns (value, new_offset)."""
    length, offset = decode_u32(data, offset)
    end = offset + length
    if len(data) < end:
        raise EncodingError(
            f"Truncated string: need {length} bytes, have {len(data) - offset}"
        )
    try:
        return data[offset:end].decode("utf-8"), end
    except UnicodeDecodeError as exc:
        raise EncodingError(f"Invalid UTF-8 in string at offset {offset}") from exc


def encode_option_string(value: Optional[str]) -> bytes:
    """Encode an optional string: 0x00 when absent, 0x01 + string when present.

    An empty string counts as absent.
    """
    if value is None or value == "":
        return OPTION_NONE
    return OPTION_SOME + encode_string(value)


def decode_option_string(data: bytes, offset: int) -> tuple[Optional[str], int]:
    """Decode an optional string at ``offset``. Returns (value, new_offset)."""
    if len(data) <= offset:
        raise EncodingError(f"Truncated option flag at offset {offset}")
    flag = data[offset:offset + 1]
    if flag == OPTION_NONE:
        return None, offset + 1
    if flag != OPTION_SOME:
        raise EncodingError(f"Invalid option flag: 0x{flag[0]:02x}")
    return decode_string(data, offset + 1)


def _encode_fixed(value: bytes, size: int) -> bytes:
    if not isinstance(value, (bytes, bytearray)) or len(value) != size:
        raise EncodingError(f"Expected {size} raw bytes")
    return bytes(value)


def _ensure_consumed(data: bytes, offset: int) -> None:
    if offset != len(data):
        raise EncodingError(f"Trailing bytes: {len(data) - offset} after offset {offset}")


# --- Message ---


def encode_message(message: Nep413Message) -> bytes:
    """Serialize a message to its canonical bytes.

    Field values are snapshotted (deep-copied) on entry and only the
    snapshot is encoded, so the result depends on the logical value alone.
    The tag is encoded as found; the verifier normalizes it beforehand.
    """
    snapshot = {f.name: copy.deepcopy(getattr(message, f.name)) for f in fields(message)}
    return (
        encode_u32(snapshot["tag"])
        + encode_string(snapshot["message"])
        + _encode_fixed(snapshot["nonce"], NONCE_SIZE)
        + encode_string(snapshot["recipient"])
        + encode_option_string(snapshot["callback_url"])
    )


def decode_message(data: bytes) -> Nep413Message:
    """Parse canonical bytes back into a message.

    Raises EncodingError on truncation, trailing bytes, bad UTF-8 or a
    tag other than the NEP-413 constant.
    """
    tag, offset = decode_u32(data, 0)
    if tag != NEP413_TAG:
        raise EncodingError(f"Unexpected tag: {tag} (expected {NEP413_TAG})")

    text, offset = decode_string(data, offset)

    end = offset + NONCE_SIZE
    if len(data) < end:
        raise EncodingError(f"Truncated nonce at offset {offset}")
    nonce = data[offset:end]
    offset = end

    recipient, offset = decode_string(data, offset)
    callback_url, offset = decode_option_string(data, offset)
    _ensure_consumed(data, offset)

    return Nep413Message(
        message=text,
        nonce=nonce,
        recipient=recipient,
        callback_url=callback_url,
    )


# --- Signature response ---


def encode_response(response: Nep413SignatureResponse) -> bytes:
    """Serialize a response: account_id + signature + public_key, all strings."""
    return (
        encode_string(response.account_id)
        + encode_string(response.signature)
        + encode_string(response.public_key)
    )


def decode_response(data: bytes) -> Nep413SignatureResponse:
    """Parse bytes produced by encode_response."""
    account_id, offset = decode_string(data, 0)
    signature, offset = decode_string(data, offset)
    public_key, offset = decode_string(data, offset)
    _ensure_consumed(data, offset)
    return Nep413SignatureResponse(
        account_id=account_id,
        signature=signature,
        public_key=public_key,
    )
