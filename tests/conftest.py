"""Shared pytest fixtures for nep413 tests."""

import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from nep413.models import Nep413Message, Nep413SignatureResponse

# Signature produced by a NEAR wallet for the idOS login challenge
KNOWN_NONCE = bytes([
    5, 233, 107, 175, 203, 182, 15, 111, 97, 146, 18, 10, 118, 80, 180, 9,
    186, 39, 255, 93, 36, 218, 196, 25, 72, 177, 237, 28, 173, 75, 17, 31,
])
KNOWN_SIGNATURE = (
    "Ni+rXvOtyzRr7X+qtvQ9+iJUu2e8L/e6cPjSzOYr+6W22chVnptTW0QqTUhFgKUbgPwd2tTcfB1D9Q+0Xb+sBg=="
)
KNOWN_PUBLIC_KEY = "ed25519:8HnzkUaX21h99idPghFajoV3JZvy3SmJ4mqVwSVfLByg"


@pytest.fixture
def known_message():
    return Nep413Message(
        message="idOS authentication",
        nonce=KNOWN_NONCE,
        recipient="idos.network",
    )


@pytest.fixture
def known_response():
    return Nep413SignatureResponse(
        signature=KNOWN_SIGNATURE,
        public_key=KNOWN_PUBLIC_KEY,
    )


@pytest.fixture
def private_key():
    """Fresh ed25519 signing key."""
    return Ed25519PrivateKey.generate()


@pytest.fixture
def message():
    return Nep413Message(
        message="Login to example.near",
        nonce=bytes(range(32)),
        recipient="example.near",
        callback_url="https://example.com/callback",
    )
