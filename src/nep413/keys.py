"""Decoding of NEAR-formatted public keys and base64 signatures."""

from __future__ import annotations
import base64
import binascii

import base58

from nep413.constants import ED25519_PUBLIC_KEY_SIZE, KEY_ALGORITHM, KEY_SEPARATOR
from nep413.errors import (
    InvalidKeyFormatError,
    InvalidKeyLengthError,
    KeyDecodeError,
    SignatureDecodeError,
    UnsupportedAlgorithmError,
)


def parse_public_key(text: str) -> bytes:
    """Turn ``ed25519:<base58>`` into 32 raw key bytes."""
    parts = text.split(KEY_SEPARATOR)
    if len(parts) != 2:
        raise InvalidKeyFormatError(
            f"Invalid public key format, expected {KEY_ALGORITHM}:base58_encoded_public_key"
        )

    algorithm, encoded = parts
    if algorithm != KEY_ALGORITHM:
        raise UnsupportedAlgorithmError(f"Unsupported key algorithm: {algorithm!r}")

    try:
        raw = base58.b58decode(encoded)
    except ValueError as exc:
        raise KeyDecodeError(f"Public key is not valid base58: {exc}") from exc

    if len(raw) != ED25519_PUBLIC_KEY_SIZE:
        raise InvalidKeyLengthError(
            f"Invalid public key length, expected {ED25519_PUBLIC_KEY_SIZE}, got {len(raw)}"
        )
    return raw


def parse_signature(text: str) -> bytes:
    """Decode a standard (padded) base64 signature.

    Length is left to the verification primitive.
    """
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise SignatureDecodeError(f"Signature is not valid base64: {exc}") from exc


def format_public_key(raw: bytes) -> str:
    """Format 32 raw key bytes as ``ed25519:<base58>``."""
    if len(raw) != ED25519_PUBLIC_KEY_SIZE:
        raise InvalidKeyLengthError(
            f"Invalid public key length, expected {ED25519_PUBLIC_KEY_SIZE}, got {len(raw)}"
        )
    return KEY_ALGORITHM + KEY_SEPARATOR + base58.b58encode(raw).decode("ascii")


def format_signature(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")
