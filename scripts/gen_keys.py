"""Create an RSA key pair (1024/2048 bits, e = 3 or 65537) using cryptography."""

import argparse
import os
from pathlib import Path
from dotenv import load_dotenv
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from rsaverify.crypto.bignum import SUPPORTED_PARAMS
from rsaverify.crypto.modexp import PublicExponent


def create_key_pair(name: str, bits: int = 2048, exponent: int = 65537, output_dir: str = "keys"):
    """Create an RSA key pair and write it as PEM files.

    Args:
        name: Base file name for the key pair
        bits: Modulus size in bits
        exponent: Public exponent
        output_dir: Directory to store the keys

    Returns:
        Tuple of (private key path, public key path)
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    private_key = rsa.generate_private_key(
        public_exponent=int(PublicExponent.parse(exponent)),
        key_size=bits,
    )

    key_path = output_path / f"{name}_key.pem"
    with open(key_path, "wb") as f:
        f.write(private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption()
        ))
    os.chmod(key_path, 0o600)  # Read-only for owner

    pub_path = output_path / f"{name}_pub.pem"
    with open(pub_path, "wb") as f:
        f.write(private_key.public_key().public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo
        ))

    print(f"✓ RSA-{bits} key pair created (e = {exponent})")
    print(f"  Private key: {key_path}")
    print(f"  Public key:  {pub_path}")
    return key_path, pub_path


def main():
    load_dotenv()
    parser = argparse.ArgumentParser(description="Generate an RSA key pair")
    parser.add_argument("--name", required=True, help="Base name for the key files")
    parser.add_argument("--bits", type=int, default=2048, choices=sorted(SUPPORTED_PARAMS), help="Key size")
    parser.add_argument("--exponent", type=int, default=65537, choices=[e.value for e in PublicExponent], help="Public exponent")
    parser.add_argument("--out", default=os.getenv("RSAVERIFY_KEYS_DIR", "keys"), help="Output directory")

    args = parser.parse_args()
    create_key_pair(args.name, args.bits, args.exponent, args.out)


if __name__ == "__main__":
    main()
