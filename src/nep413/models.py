"""Value types for NEP-413 signed messages."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from nep413.constants import NEP413_TAG, NONCE_SIZE
from nep413.errors import EncodingError


def _to_nonce(value: Union[bytes, bytearray, Iterable[int]]) -> bytes:
    """Normalize a nonce to 32 immutable bytes."""
    nonce = bytes(value)
    if len(nonce) != NONCE_SIZE:
        raise EncodingError(f"Nonce must be {NONCE_SIZE} bytes, got {len(nonce)}")
    return nonce


@dataclass
class Nep413Message:
    """Payload the wallet signs.

    Encoded as tag, message, nonce, recipient, callback_url. ``tag`` is not
    a constructor argument; it always starts as the NEP-413 constant and the
    verifier resets it before encoding. ``callback_url`` is optional and
    travels as a Borsh ``Option<String>``.
    """

    message: str
    nonce: bytes
    recipient: str
    callback_url: Optional[str] = None
    tag: int = field(default=NEP413_TAG, init=False)

    def __post_init__(self):
        self.nonce = _to_nonce(self.nonce)
        # an empty callback is the same as none on the wire
        if self.callback_url == "":
            self.callback_url = None


@dataclass
class Nep413SignatureResponse:
    """What the wallet returns after signing.

    ``public_key`` looks like ``ed25519:8HnzkUaX21h99idPghFajoV3JZvy3SmJ4mqVwSVfLByg``.
    ``account_id`` is informational; nothing here ties it to the key.
    """

    signature: str
    public_key: str
    account_id: str = ""
