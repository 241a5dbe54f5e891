"""Helper functions: hex and SHA-256 encodings."""

import hashlib


def sha256_digest(data) -> bytes:
    """Return the SHA-256 digest of data (str is UTF-8 encoded)."""
    if isinstance(data, str):
        data = data.encode('utf-8')
    return hashlib.sha256(data).digest()


def sha256_hex(data) -> str:
    """Return the hex-encoded SHA-256 digest of data."""
    return sha256_digest(data).hex()


def int_to_hex(value: int) -> str:
    """Encode a non-negative integer as lowercase hex without prefix."""
    if value < 0:
        raise ValueError("Negative integers cannot be hex encoded")
    return format(value, 'x')


def hex_to_int(value: str) -> int:
    """Decode a hex string (optional 0x prefix) to an integer."""
    return int(value, 16)
