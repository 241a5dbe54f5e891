"""PKCS#1 v1.5 / SHA-256 encoded-message checks on little-endian byte arrays."""

from rsaverify.crypto.bignum import FIXED_OVERHEAD, MIN_PS_LENGTH


DIGEST_LENGTH = 32

# DER DigestInfo prefix for SHA-256, 3031300d060960864801650304020105000420,
# stored in reverse to match the little-endian layout of the padded message.
SHA256_HASH_PREFIX = bytes([
    32, 4, 0, 5, 1, 2, 4, 3, 101, 1, 72, 134, 96, 9, 6, 13, 48, 49, 48,
])

PREFIX_START = DIGEST_LENGTH
SEPARATOR_INDEX = PREFIX_START + len(SHA256_HASH_PREFIX)
PS_START = SEPARATOR_INDEX + 1


def validate_padding(padded: bytes, digest: bytes, num_bytes: int = None) -> bool:
    """Check that padded is the PKCS#1 v1.5 encoding of a SHA-256 digest.

    padded is the little-endian byte form of s^e mod n, so from index 0
    upward it holds: the digest reversed, the reversed DigestInfo prefix,
    0x00, ps_len bytes of 0xFF, 0x01 and a final 0x00.

    Every byte is examined; the function does not stop at the first
    mismatch and does not report which byte failed.

    Args:
        padded: Encoded message, num_bytes long, little-endian
        digest: SHA-256 digest (32 bytes, natural order)
        num_bytes: Modulus byte width (default: len(padded))

    Returns:
        True if every byte matches, False otherwise
    """
    if num_bytes is None:
        num_bytes = len(padded)
    ps_len = num_bytes - FIXED_OVERHEAD
    if len(padded) != num_bytes or len(digest) != DIGEST_LENGTH or ps_len < MIN_PS_LENGTH:
        return False

    ok = True

    for i in range(DIGEST_LENGTH):
        ok &= padded[DIGEST_LENGTH - 1 - i] == digest[i]

    for i in range(PREFIX_START, SEPARATOR_INDEX):
        ok &= padded[i] == SHA256_HASH_PREFIX[i - PREFIX_START]

    ok &= padded[SEPARATOR_INDEX] == 0x00

    for i in range(PS_START, num_bytes):
        if i < PS_START + ps_len:
            ok &= padded[i] == 0xFF
        elif i == PS_START + ps_len:
            ok &= padded[i] == 0x01
        elif i == PS_START + ps_len + 1:
            ok &= padded[i] == 0x00
        else:
            # unreachable while num_bytes == ps_len + 54
            ok &= padded[i] == 0x00

    return ok


def encode_padded_message(digest: bytes, num_bytes: int) -> bytes:
    """Build the little-endian encoded message that validate_padding accepts.

    Args:
        digest: SHA-256 digest (32 bytes)
        num_bytes: Modulus byte width

    Returns:
        num_bytes-long encoded message

    Raises:
        ValueError if the digest length or num_bytes is invalid
    """
    if len(digest) != DIGEST_LENGTH:
        raise ValueError(f"SHA-256 digest must be {DIGEST_LENGTH} bytes, got {len(digest)}")
    ps_len = num_bytes - FIXED_OVERHEAD
    if ps_len < MIN_PS_LENGTH:
        raise ValueError(f"{num_bytes}-byte modulus is too small for PKCS#1 v1.5 / SHA-256")

    # big-endian: 00 01 FF..FF 00 DigestInfo digest
    encoded = (
        b'\x00\x01'
        + b'\xff' * ps_len
        + b'\x00'
        + SHA256_HASH_PREFIX[::-1]
        + bytes(digest)
    )
    return encoded[::-1]
