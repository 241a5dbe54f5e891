"""Bridge between `cryptography` RSA key objects and the fixed-ladder verifier."""

from pathlib import Path
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa, padding
from cryptography.hazmat.primitives.asymmetric.utils import Prehashed
from cryptography.hazmat.backends import default_backend
from cryptography.exceptions import InvalidSignature

from rsaverify.crypto.bignum import BigNumInstance, params_for_bits
from rsaverify.crypto.modexp import PublicExponent
from rsaverify.crypto.pkcs1 import DIGEST_LENGTH
from rsaverify.crypto.verify import verify_sha256_pkcs1v15


class KeyLoadError(Exception):
    """Exception raised when key material cannot be loaded or is not RSA."""
    pass


def _require_rsa_public(public_key) -> rsa.RSAPublicKey:
    if not isinstance(public_key, rsa.RSAPublicKey):
        raise KeyLoadError("Key is not an RSA public key")
    return public_key


def load_private_key(key_path: str) -> rsa.RSAPrivateKey:
    """Load RSA private key from PEM file.

    Args:
        key_path: Path to private key file

    Returns:
        RSA private key object
    """
    try:
        with open(Path(key_path), "rb") as f:
            private_key = serialization.load_pem_private_key(
                f.read(),
                password=None,
                backend=default_backend()
            )
    except (OSError, ValueError, TypeError) as e:
        raise KeyLoadError(f"Failed to load private key {key_path}: {e}")

    if not isinstance(private_key, rsa.RSAPrivateKey):
        raise KeyLoadError(f"{key_path} does not contain an RSA private key")
    return private_key


def load_public_key(key_path: str) -> rsa.RSAPublicKey:
    """Load RSA public key from a PEM SubjectPublicKeyInfo file.

    Args:
        key_path: Path to public key file

    Returns:
        RSA public key object
    """
    try:
        with open(Path(key_path), "rb") as f:
            public_key = serialization.load_pem_public_key(
                f.read(),
                backend=default_backend()
            )
    except (OSError, ValueError) as e:
        raise KeyLoadError(f"Failed to load public key {key_path}: {e}")

    return _require_rsa_public(public_key)


def load_public_key_from_cert(cert_path: str) -> rsa.RSAPublicKey:
    """Load RSA public key from certificate file.

    Args:
        cert_path: Path to certificate file

    Returns:
        RSA public key object
    """
    try:
        with open(Path(cert_path), "rb") as f:
            cert_pem = f.read()
    except OSError as e:
        raise KeyLoadError(f"Failed to read certificate {cert_path}: {e}")
    return get_public_key_from_cert(cert_pem.decode('utf-8'))


def get_public_key_from_cert(cert_pem: str) -> rsa.RSAPublicKey:
    """Extract RSA public key from PEM certificate string."""
    try:
        cert = x509.load_pem_x509_certificate(
            cert_pem.encode('utf-8'),
            default_backend()
        )
    except ValueError as e:
        raise KeyLoadError(f"Failed to parse certificate: {e}")

    return _require_rsa_public(cert.public_key())


def public_key_instance(public_key: rsa.RSAPublicKey) -> tuple[BigNumInstance, PublicExponent]:
    """Convert a `cryptography` RSA public key for the fixed-ladder verifier.

    Args:
        public_key: RSA public key of 1024 or 2048 bits

    Returns:
        Tuple of (BigNumInstance, PublicExponent)

    Raises:
        ValueError if the key size is unsupported
        InvalidExponent if the key's exponent is not 3 or 65537
    """
    numbers = _require_rsa_public(public_key).public_numbers()
    params = params_for_bits(public_key.key_size)
    return BigNumInstance(numbers.n, params), PublicExponent.parse(numbers.e)


def verify_with_public_key(public_key: rsa.RSAPublicKey, digest: bytes, signature: bytes) -> bool:
    """Verify a big-endian signature over a SHA-256 digest with the fixed ladder.

    Args:
        public_key: RSA public key
        digest: SHA-256 digest (32 bytes)
        signature: Signature bytes, as produced by private_key.sign

    Returns:
        True if signature is valid, False otherwise
    """
    instance, exponent = public_key_instance(public_key)
    if len(signature) != instance.num_bytes:
        return False

    sig_int = int.from_bytes(signature, byteorder='big')
    if sig_int >= instance.modulus:
        return False

    return verify_sha256_pkcs1v15(instance, digest, sig_int, exponent)


def verify_with_cryptography(public_key: rsa.RSAPublicKey, digest: bytes, signature: bytes) -> bool:
    """Verify the same signature with the `cryptography` backend.

    Used as an independent reference for the fixed-ladder verifier.
    """
    if len(digest) != DIGEST_LENGTH:
        raise ValueError(f"SHA-256 digest must be {DIGEST_LENGTH} bytes, got {len(digest)}")
    try:
        public_key.verify(
            signature,
            digest,
            padding.PKCS1v15(),
            Prehashed(hashes.SHA256())
        )
        return True
    except InvalidSignature:
        return False


def sign_message_hash(message_hash: bytes, private_key: rsa.RSAPrivateKey) -> bytes:
    """Sign a pre-computed SHA-256 hash with PKCS#1 v1.5.

    Only used to produce signature vectors; verification never needs it.

    Args:
        message_hash: SHA-256 hash of the message (32 bytes)
        private_key: RSA private key

    Returns:
        Digital signature bytes (big-endian, modulus width)
    """
    if len(message_hash) != DIGEST_LENGTH:
        raise ValueError(f"SHA-256 digest must be {DIGEST_LENGTH} bytes, got {len(message_hash)}")
    return private_key.sign(
        message_hash,
        padding.PKCS1v15(),
        Prehashed(hashes.SHA256())
    )
