"""Fixed-ladder modular exponentiation for the RSA public exponents 3 and 65537."""

import logging
from enum import IntEnum

from rsaverify.crypto.bignum import BigNumInstance


logger = logging.getLogger(__name__)


class InvalidExponent(ValueError):
    """Raised when a public exponent other than 3 or 65537 is requested."""

    def __init__(self, exponent):
        self.exponent = exponent
        super().__init__(
            f"Unsupported RSA public exponent: {exponent!r} (expected 3 or 65537)"
        )


class PublicExponent(IntEnum):
    """RSA public exponents accepted by the verifier."""
    E3 = 3
    E65537 = 65537

    @classmethod
    def parse(cls, value) -> "PublicExponent":
        """Convert an int to a PublicExponent.

        Args:
            value: Declared public exponent

        Returns:
            Matching PublicExponent member

        Raises:
            InvalidExponent if value is not 3 or 65537
        """
        if isinstance(value, bool):
            raise InvalidExponent(value)
        try:
            return cls(value)
        except (ValueError, TypeError):
            raise InvalidExponent(value) from None

    @property
    def ladder(self) -> tuple[bool, ...]:
        """Multiply flags for each bit after the leading one.

        3     = 0b11                -> (True,)
        65537 = 0b10000000000000001 -> (False,) * 15 + (True,)
        """
        return tuple(bit == "1" for bit in bin(self.value)[3:])

    @property
    def multiplications(self) -> int:
        """Number of modular multiplications the ladder performs."""
        return len(self.ladder) + sum(self.ladder)


def modexp(instance: BigNumInstance, signature: int, exponent) -> int:
    """Compute signature^exponent mod n with a square-and-multiply ladder.

    The sequence of squarings and multiplications is fixed by the exponent
    alone and does not depend on the bits of the signature.

    Args:
        instance: Modulus and reduction parameters
        signature: Signature as an integer, 0 <= signature < n
        exponent: 3 or 65537 (int or PublicExponent)

    Returns:
        signature^exponent mod n

    Raises:
        InvalidExponent if exponent is not 3 or 65537
    """
    exponent = PublicExponent.parse(exponent)

    acc = signature
    for multiply in exponent.ladder:
        acc = instance.mul(acc, acc)
        if multiply:
            acc = instance.mul(acc, signature)

    logger.debug(
        "modexp e=%d over %d-bit modulus: %d multiplications",
        exponent.value, instance.params.modulus_bits, exponent.multiplications
    )
    return acc
