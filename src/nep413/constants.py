"""Shared constants for NEP-413 message verification."""

# NEP-413 protocol tag: 2**31 + 413
NEP413_TAG = 2147484061

# Message layout
NONCE_SIZE = 32
U32_FORMAT = "<I"  # little-endian uint32 (tag and string length prefixes)
U32_SIZE = 4
MAX_U32 = 0xFFFFFFFF

# Keys and signatures
KEY_ALGORITHM = "ed25519"
KEY_SEPARATOR = ":"
ED25519_PUBLIC_KEY_SIZE = 32
ED25519_SIGNATURE_SIZE = 64
DIGEST_SIZE = 32  # SHA-256

# Borsh Option<T> presence flags
OPTION_NONE = b"\x00"
OPTION_SOME = b"\x01"
