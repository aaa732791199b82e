"""Error types raised while decoding or verifying NEP-413 signatures.

Every error is terminal for the (message, response) pair that produced it.
All of them are ``ValueError`` subclasses so callers can treat any malformed
input the same way.
"""


class Nep413Error(ValueError):
    """Base class for all verification failures."""


class KeyFormatError(Nep413Error):
    """The claimed public key could not be turned into raw key bytes."""


class InvalidKeyFormatError(KeyFormatError):
    """Public key text is not of the form ``alg:data``."""


class UnsupportedAlgorithmError(KeyFormatError):
    """Public key prefix names an algorithm other than ed25519."""


class KeyDecodeError(KeyFormatError):
    """Base58 portion of the public key is not valid base58."""


class InvalidKeyLengthError(KeyFormatError):
    """Decoded public key is not 32 bytes."""


class SignatureDecodeError(Nep413Error):
    """Signature text is not valid base64."""


class EncodingError(Nep413Error):
    """A message or response could not be serialized or deserialized."""


class SignatureMismatchError(Nep413Error):
    """The signature does not verify against the message and public key."""
