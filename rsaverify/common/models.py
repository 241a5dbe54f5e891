"""Pydantic models: signature vectors and verification reports."""

from typing import Optional
from pydantic import BaseModel, field_validator

from rsaverify.common.utils import hex_to_int
from rsaverify.crypto.bignum import BigNumInstance, params_for_bits
from rsaverify.crypto.pkcs1 import DIGEST_LENGTH


class SignatureVector(BaseModel):
    """A public key, digest and signature to be checked together."""
    name: str
    key_bits: int  # 1024 or 2048
    exponent: int  # 3 or 65537, checked by the verifier
    modulus: str  # Hex encoded modulus
    signature: str  # Hex encoded signature integer
    digest: str  # Hex encoded SHA-256 digest
    message: Optional[str] = None  # Signed text, if known

    @field_validator("digest")
    @classmethod
    def _check_digest(cls, value: str) -> str:
        try:
            raw = bytes.fromhex(value)
        except ValueError:
            raise ValueError("digest must be hex encoded")
        if len(raw) != DIGEST_LENGTH:
            raise ValueError(f"digest must be {DIGEST_LENGTH} bytes, got {len(raw)}")
        return value.lower()

    @field_validator("modulus", "signature")
    @classmethod
    def _check_hex_int(cls, value: str) -> str:
        try:
            hex_to_int(value)
        except ValueError:
            raise ValueError("value must be a hex encoded integer")
        return value.lower()

    @field_validator("key_bits")
    @classmethod
    def _check_key_bits(cls, value: int) -> int:
        params_for_bits(value)
        return value

    def digest_bytes(self) -> bytes:
        return bytes.fromhex(self.digest)

    def signature_int(self) -> int:
        return hex_to_int(self.signature)

    def instance(self) -> BigNumInstance:
        """Build the BigNum instance for this vector's modulus."""
        return BigNumInstance(hex_to_int(self.modulus), params_for_bits(self.key_bits))


class VerificationReport(BaseModel):
    """Outcome of checking one signature vector."""
    name: str
    valid: bool
    reference_valid: Optional[bool] = None  # Verdict of the cryptography backend
    error: Optional[str] = None
