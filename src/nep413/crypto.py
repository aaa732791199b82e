"""NEP-413 signature verification and signing.

Wallets sign ``sha256(borsh(message))`` with ed25519. Verification rebuilds
that digest from the caller's message and checks it against the claimed
public key. See https://github.com/near/NEPs/blob/master/neps/nep-0413.md
"""

from __future__ import annotations
import copy
import logging
from typing import Callable, Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from nep413.constants import ED25519_SIGNATURE_SIZE, NEP413_TAG
from nep413.errors import Nep413Error, SignatureMismatchError
from nep413.keys import (
    format_public_key,
    format_signature,
    parse_public_key,
    parse_signature,
)
from nep413.models import Nep413Message, Nep413SignatureResponse
from nep413.protocol import encode_message

logger = logging.getLogger(__name__)

PayloadHook = Callable[[bytes], None]


def hash_payload(payload: bytes) -> bytes:
    """SHA-256 digest of a serialized payload."""
    digest = hashes.Hash(hashes.SHA256())
    digest.update(payload)
    return digest.finalize()


def message_digest(message: Nep413Message) -> bytes:
    """Digest a wallet signs for ``message``, without touching the argument."""
    snapshot = copy.deepcopy(message)
    snapshot.tag = NEP413_TAG
    return hash_payload(encode_message(snapshot))


def _verify_ed25519(public_key: bytes, digest: bytes, signature: bytes) -> None:
    if len(signature) != ED25519_SIGNATURE_SIZE:
        raise SignatureMismatchError(
            f"Signature must be {ED25519_SIGNATURE_SIZE} bytes, got {len(signature)}"
        )
    try:
        Ed25519PublicKey.from_public_bytes(public_key).verify(signature, digest)
    except (InvalidSignature, ValueError) as exc:
        raise SignatureMismatchError("Signature verification failed") from exc


def verify(message: Nep413Message, response: Nep413SignatureResponse,
           on_payload: Optional[PayloadHook] = None) -> None:
    """Verify a NEP-413 signature.

    Resets ``message.tag`` to the protocol constant, then checks
    ``response.signature`` against the canonical encoding of ``message``.
    Returns None on success and raises a Nep413Error subclass otherwise.
    ``on_payload`` receives the serialized message, for diagnostics only.
    """
    message.tag = NEP413_TAG

    public_key = parse_public_key(response.public_key)
    signature = parse_signature(response.signature)

    # Encode an independent copy, never the caller's object
    payload = encode_message(copy.deepcopy(message))
    if on_payload is not None:
        on_payload(payload)

    _verify_ed25519(public_key, hash_payload(payload), signature)


def is_valid(message: Nep413Message, response: Nep413SignatureResponse,
             on_payload: Optional[PayloadHook] = None) -> bool:
    """Return True if the signature verifies, False on any verification error."""
    try:
        verify(message, response, on_payload=on_payload)
    except Nep413Error as exc:
        logger.debug("NEP-413 verification failed: %s", exc,
                     extra={"account_id": response.account_id})
        return False
    return True


def sign_message(private_key: Ed25519PrivateKey, message: Nep413Message,
                 account_id: str = "") -> Nep413SignatureResponse:
    """Sign a message the way a NEAR wallet does.

    Returns a response carrying a base64 signature and NEAR-formatted key.
    """
    signature = private_key.sign(message_digest(message))
    raw_public = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )
    return Nep413SignatureResponse(
        signature=format_signature(signature),
        public_key=format_public_key(raw_public),
        account_id=account_id,
    )
