"""End-to-end tests for RSA PKCS#1 v1.5 SHA-256 verification."""

import pytest

from rsaverify.common.utils import sha256_digest
from rsaverify.crypto.bignum import BigNumInstance
from rsaverify.crypto.keys import public_key_instance, sign_message_hash
from rsaverify.crypto.modexp import InvalidExponent
from rsaverify.crypto.verify import verify_message, verify_sha256_pkcs1v15


def sign_int(private_key, message: str) -> int:
    signature = sign_message_hash(sha256_digest(message), private_key)
    return int.from_bytes(signature, byteorder='big')


def test_valid_signature_accepted(signed):
    _, instance, exponent, digest, signature = signed
    assert verify_sha256_pkcs1v15(instance, digest, signature, exponent) is True


def test_accepts_plain_int_exponent(signed):
    _, instance, exponent, digest, signature = signed
    assert verify_sha256_pkcs1v15(instance, digest, signature, int(exponent))


@pytest.mark.parametrize("bits,exponent,message", [
    (1024, 65537, "hello world! test#123"),
    (2048, 65537, "Hello World! This is Noir-RSA"),
    (2048, 3, "hello world"),
])
def test_reference_messages(key_pairs, bits, exponent, message):
    private_key = key_pairs[(bits, exponent)]
    instance, _ = public_key_instance(private_key.public_key())
    signature = sign_int(private_key, message)
    assert verify_sha256_pkcs1v15(instance, sha256_digest(message), signature, exponent)
    assert verify_message(instance, message.encode('utf-8'), signature, exponent)


def test_digest_bit_flip_rejected(signed):
    _, instance, exponent, digest, signature = signed
    for byte_index in (0, 15, 31):
        for bit in (0, 7):
            tampered = bytearray(digest)
            tampered[byte_index] ^= 1 << bit
            assert not verify_sha256_pkcs1v15(instance, bytes(tampered), signature, exponent)


def test_tampered_signature_rejected(signed):
    _, instance, exponent, digest, signature = signed
    assert not verify_sha256_pkcs1v15(instance, digest, signature ^ 1, exponent)
    assert not verify_sha256_pkcs1v15(instance, digest, 0, exponent)
    assert not verify_sha256_pkcs1v15(instance, digest, 1, exponent)


def test_exponent_mismatch_rejected(signed):
    _, instance, exponent, digest, signature = signed
    other = 3 if exponent == 65537 else 65537
    assert not verify_sha256_pkcs1v15(instance, digest, signature, other)


def test_wrong_key_rejected(key_pairs):
    signer = key_pairs[(2048, 65537)]
    other_key = key_pairs[(2048, 3)]
    instance = BigNumInstance.from_modulus(other_key.public_key().public_numbers().n)
    signature = sign_int(signer, "hello world") % instance.modulus
    assert not verify_sha256_pkcs1v15(instance, sha256_digest("hello world"), signature, 65537)


@pytest.mark.parametrize("exponent", [17, 5, 65539, 0])
def test_invalid_exponent_raises(signed, exponent):
    _, instance, _, digest, signature = signed
    with pytest.raises(InvalidExponent):
        verify_sha256_pkcs1v15(instance, digest, signature, exponent)


def test_digest_length_checked(signed):
    _, instance, exponent, digest, signature = signed
    with pytest.raises(ValueError):
        verify_sha256_pkcs1v15(instance, digest[:31], signature, exponent)
    with pytest.raises(ValueError):
        verify_sha256_pkcs1v15(instance, digest + b'\x00', signature, exponent)


def test_invalid_exponent_checked_before_digest(signed):
    _, instance, _, digest, signature = signed
    with pytest.raises(InvalidExponent):
        verify_sha256_pkcs1v15(instance, digest[:5], signature, 17)


def test_deterministic(signed):
    _, instance, exponent, digest, signature = signed
    results = {verify_sha256_pkcs1v15(instance, digest, signature, exponent) for _ in range(3)}
    assert results == {True}
    tampered = bytes([digest[0] ^ 0xFF]) + digest[1:]
    results = {verify_sha256_pkcs1v15(instance, tampered, signature, exponent) for _ in range(3)}
    assert results == {False}
