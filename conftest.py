"""Shared pytest fixtures: real RSA key pairs for every supported shape."""

import pytest
from cryptography.hazmat.primitives.asymmetric import rsa

from rsaverify.crypto.keys import public_key_instance, sign_message_hash
from rsaverify.common.utils import sha256_digest


KEY_SHAPES = [(1024, 65537), (1024, 3), (2048, 65537), (2048, 3)]


@pytest.fixture(scope="session")
def key_pairs():
    """One private key per (bits, exponent), generated once per session."""
    return {
        (bits, e): rsa.generate_private_key(public_exponent=e, key_size=bits)
        for bits, e in KEY_SHAPES
    }


@pytest.fixture(params=KEY_SHAPES, ids=lambda shape: f"rsa{shape[0]}-e{shape[1]}")
def signed(request, key_pairs):
    """A (private_key, instance, exponent, digest, signature_int) tuple."""
    private_key = key_pairs[request.param]
    instance, exponent = public_key_instance(private_key.public_key())
    digest = sha256_digest(f"test message for {request.param}")
    signature = int.from_bytes(sign_message_hash(digest, private_key), byteorder='big')
    return private_key, instance, exponent, digest, signature
