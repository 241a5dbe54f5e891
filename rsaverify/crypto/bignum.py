"""Fixed-width big-integer arithmetic modulo an RSA public modulus (Barrett)."""

from dataclasses import dataclass, field


LIMB_BITS = 120

# sizes of DigestInfo prefix (19) + digest (32) + 0x00, 0x01, 0x00 markers
FIXED_OVERHEAD = 54
MIN_PS_LENGTH = 8


@dataclass(frozen=True)
class BigNumParams:
    """Shape of a big integer for one RSA key size.

    Attributes:
        modulus_bits: Bit width of the modulus (1024 or 2048)
        num_bytes: Byte width of the modulus (the padded message length)
        num_limbs: Number of 120-bit limbs needed to hold the modulus
        limb_bits: Bits per limb
    """
    modulus_bits: int
    num_bytes: int
    num_limbs: int
    limb_bits: int = LIMB_BITS

    def __post_init__(self):
        if self.num_bytes * 8 < self.modulus_bits:
            raise ValueError(
                f"{self.num_bytes} bytes cannot hold a {self.modulus_bits}-bit modulus"
            )
        if self.num_limbs * self.limb_bits < self.modulus_bits:
            raise ValueError(
                f"{self.num_limbs} limbs of {self.limb_bits} bits cannot hold "
                f"a {self.modulus_bits}-bit modulus"
            )
        if self.num_bytes - FIXED_OVERHEAD < MIN_PS_LENGTH:
            raise ValueError(
                f"{self.num_bytes}-byte modulus leaves less than {MIN_PS_LENGTH} "
                f"bytes of PKCS#1 padding"
            )

    @property
    def ps_length(self) -> int:
        """Length of the 0xFF padding string for this key size."""
        return self.num_bytes - FIXED_OVERHEAD


RSA1024 = BigNumParams(modulus_bits=1024, num_bytes=128, num_limbs=9)
RSA2048 = BigNumParams(modulus_bits=2048, num_bytes=256, num_limbs=18)

SUPPORTED_PARAMS = {
    1024: RSA1024,
    2048: RSA2048,
}


def params_for_bits(bits: int) -> BigNumParams:
    """Return the parameter set for a supported key size.

    Args:
        bits: Key size in bits

    Returns:
        Matching BigNumParams

    Raises:
        ValueError if the key size is not supported
    """
    try:
        return SUPPORTED_PARAMS[bits]
    except KeyError:
        raise ValueError(
            f"Unsupported RSA key size: {bits} bits "
            f"(supported: {', '.join(str(b) for b in SUPPORTED_PARAMS)})"
        ) from None


def from_limbs(limbs, params: BigNumParams) -> int:
    """Assemble an integer from little-endian 120-bit limbs.

    Args:
        limbs: Sequence of limb values, least significant first
        params: Parameter set fixing the limb count and width

    Returns:
        The integer value

    Raises:
        ValueError if the limb count or a limb value is out of range
    """
    limbs = list(limbs)
    if len(limbs) != params.num_limbs:
        raise ValueError(f"Expected {params.num_limbs} limbs, got {len(limbs)}")

    value = 0
    for i, limb in enumerate(limbs):
        if limb < 0 or limb >> params.limb_bits:
            raise ValueError(f"Limb {i} does not fit in {params.limb_bits} bits")
        value |= limb << (i * params.limb_bits)
    return value


def to_limbs(value: int, params: BigNumParams) -> list[int]:
    """Split an integer into little-endian 120-bit limbs."""
    if value < 0 or value.bit_length() > params.num_limbs * params.limb_bits:
        raise ValueError(f"Value does not fit in {params.num_limbs} limbs")
    mask = (1 << params.limb_bits) - 1
    return [(value >> (i * params.limb_bits)) & mask for i in range(params.num_limbs)]


@dataclass(frozen=True)
class BigNumInstance:
    """An RSA modulus together with its precomputed Barrett constant.

    Instances are immutable and may be shared freely between threads.
    """
    modulus: int
    params: BigNumParams
    redc_param: int = field(init=False, repr=False)

    def __post_init__(self):
        n = self.modulus
        if n < 3 or n % 2 == 0:
            raise ValueError("RSA modulus must be an odd integer greater than 2")
        if n.bit_length() > self.params.modulus_bits:
            raise ValueError(
                f"Modulus is {n.bit_length()} bits, wider than "
                f"{self.params.modulus_bits}-bit parameters"
            )
        # mu = floor(4^k / n)
        object.__setattr__(self, "redc_param", (1 << (2 * n.bit_length())) // n)

    @classmethod
    def from_modulus(cls, modulus: int, params: BigNumParams = None) -> "BigNumInstance":
        """Build an instance, inferring the key size from the modulus if needed.

        Args:
            modulus: RSA public modulus
            params: Parameter set (default: smallest supported size that fits)

        Returns:
            BigNumInstance
        """
        if params is None:
            for bits in sorted(SUPPORTED_PARAMS):
                if modulus.bit_length() <= bits:
                    params = SUPPORTED_PARAMS[bits]
                    break
            else:
                raise ValueError(
                    f"Unsupported RSA key size: {modulus.bit_length()} bits"
                )
        return cls(modulus, params)

    @classmethod
    def from_limbs(cls, modulus_limbs, params: BigNumParams) -> "BigNumInstance":
        """Build an instance from the modulus in 120-bit limb form."""
        return cls(from_limbs(modulus_limbs, params), params)

    @property
    def num_bytes(self) -> int:
        return self.params.num_bytes

    def _reduce(self, x: int) -> int:
        # Barrett reduction, valid for 0 <= x < n^2
        k = self.modulus.bit_length()
        q = ((x >> (k - 1)) * self.redc_param) >> (k + 1)
        r = x - q * self.modulus
        while r >= self.modulus:
            r -= self.modulus
        return r

    def mul(self, a: int, b: int) -> int:
        """Compute (a * b) mod n.

        Args:
            a: First operand, 0 <= a < n
            b: Second operand, 0 <= b < n

        Returns:
            Product reduced modulo n

        Raises:
            ValueError if an operand is outside [0, n)
        """
        for operand in (a, b):
            if operand < 0 or operand >= self.modulus:
                raise ValueError("Operand out of range for modulus")
        return self._reduce(a * b)

    def to_le_bytes(self, x: int) -> bytes:
        """Encode x as exactly num_bytes little-endian bytes."""
        try:
            return x.to_bytes(self.params.num_bytes, byteorder='little')
        except OverflowError:
            raise ValueError(
                f"Value does not fit in {self.params.num_bytes} bytes"
            ) from None
