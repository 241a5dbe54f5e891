"""Tests for the PKCS#1 v1.5 / SHA-256 padding validator."""

import pytest

from rsaverify.common.utils import sha256_digest
from rsaverify.crypto.pkcs1 import (
    SHA256_HASH_PREFIX,
    SEPARATOR_INDEX,
    encode_padded_message,
    validate_padding,
)


DIGEST = sha256_digest("hello world")


def corrupt(data: bytes, index: int) -> bytes:
    mutated = bytearray(data)
    mutated[index] ^= 0x01
    return bytes(mutated)


def test_prefix_is_reversed_der_digest_info():
    der = bytes.fromhex("3031300d060960864801650304020105000420")
    assert SHA256_HASH_PREFIX == der[::-1]
    assert list(SHA256_HASH_PREFIX) == [
        32, 4, 0, 5, 1, 2, 4, 3, 101, 1, 72, 134, 96, 9, 6, 13, 48, 49, 48
    ]


@pytest.mark.parametrize("num_bytes", [128, 256])
def test_encoded_message_layout(num_bytes):
    padded = encode_padded_message(DIGEST, num_bytes)
    ps_len = num_bytes - 54

    assert len(padded) == num_bytes
    assert padded[:32] == DIGEST[::-1]
    assert padded[32:51] == SHA256_HASH_PREFIX
    assert padded[51] == 0x00
    assert padded[52:52 + ps_len] == b'\xff' * ps_len
    assert padded[52 + ps_len] == 0x01
    assert padded[53 + ps_len] == 0x00
    assert validate_padding(padded, DIGEST)


def test_big_endian_form_is_standard_emsa_pkcs1():
    padded = encode_padded_message(DIGEST, 128)
    em = padded[::-1]
    assert em.startswith(b'\x00\x01' + b'\xff' * 74 + b'\x00')
    assert em.endswith(bytes.fromhex("3031300d060960864801650304020105000420") + DIGEST)


@pytest.mark.parametrize("num_bytes", [128, 256])
def test_any_single_byte_corruption_rejected(num_bytes):
    padded = encode_padded_message(DIGEST, num_bytes)
    for index in range(num_bytes):
        assert not validate_padding(corrupt(padded, index), DIGEST), index


def test_digest_in_natural_order_rejected():
    padded = bytearray(encode_padded_message(DIGEST, 128))
    padded[:32] = DIGEST
    assert not validate_padding(bytes(padded), DIGEST)


def test_other_digest_rejected():
    padded = encode_padded_message(DIGEST, 256)
    assert not validate_padding(padded, sha256_digest("hello world!"))


def test_separator_must_be_zero():
    padded = bytearray(encode_padded_message(DIGEST, 128))
    padded[SEPARATOR_INDEX] = 0xFF
    assert not validate_padding(bytes(padded), DIGEST)


def test_length_mismatches_rejected():
    padded = encode_padded_message(DIGEST, 128)
    assert not validate_padding(padded, DIGEST, num_bytes=256)
    assert not validate_padding(padded[:-1], DIGEST, num_bytes=128)
    assert not validate_padding(padded, DIGEST[:31])
    assert not validate_padding(b'', DIGEST)


def test_padding_string_too_short_rejected():
    # 61 bytes would leave a 7-byte padding string
    padded = (b'\x00\x01' + b'\xff' * 7 + b'\x00' + SHA256_HASH_PREFIX[::-1] + DIGEST)[::-1]
    assert len(padded) == 61
    assert not validate_padding(padded, DIGEST)


def test_all_zero_and_all_ff_rejected():
    assert not validate_padding(bytes(128), DIGEST)
    assert not validate_padding(b'\xff' * 128, DIGEST)


def test_accepts_bytearray():
    padded = bytearray(encode_padded_message(DIGEST, 128))
    assert validate_padding(padded, bytearray(DIGEST))


def test_encode_rejects_bad_input():
    with pytest.raises(ValueError):
        encode_padded_message(DIGEST[:20], 128)
    with pytest.raises(ValueError):
        encode_padded_message(DIGEST, 61)
