"""RSA PKCS#1 v1.5 SHA-256 signature verification over a precomputed digest."""

import logging

from rsaverify.common.utils import sha256_digest
from rsaverify.crypto.bignum import BigNumInstance
from rsaverify.crypto.modexp import PublicExponent, modexp
from rsaverify.crypto.pkcs1 import DIGEST_LENGTH, validate_padding


logger = logging.getLogger(__name__)


def verify_sha256_pkcs1v15(
    instance: BigNumInstance,
    digest: bytes,
    signature: int,
    exponent
) -> bool:
    """Verify an RSA PKCS#1 v1.5 signature of a SHA-256 digest.

    Args:
        instance: Public modulus with reduction parameters
        digest: SHA-256 digest of the signed message (32 bytes)
        signature: Signature as an integer, 0 <= signature < n
        exponent: Public exponent, 3 or 65537

    Returns:
        True if the signature is valid, False otherwise

    Raises:
        InvalidExponent if exponent is not 3 or 65537
        ValueError if the digest is not 32 bytes or the signature is out of range
    """
    exponent = PublicExponent.parse(exponent)
    if len(digest) != DIGEST_LENGTH:
        raise ValueError(f"SHA-256 digest must be {DIGEST_LENGTH} bytes, got {len(digest)}")

    padded_int = modexp(instance, signature, exponent)
    padded = instance.to_le_bytes(padded_int)
    valid = validate_padding(padded, digest, instance.num_bytes)

    logger.debug(
        "RSA-%d e=%d signature %s",
        instance.params.modulus_bits, exponent.value, "accepted" if valid else "rejected"
    )
    return valid


def verify_message(instance: BigNumInstance, message: bytes, signature: int, exponent) -> bool:
    """Hash message with SHA-256 and verify the signature over the digest."""
    return verify_sha256_pkcs1v15(
        instance, sha256_digest(message), signature, exponent
    )
