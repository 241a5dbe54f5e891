"""Sign SHA-256(message) with an RSA private key and store the signature vector."""

import argparse
import os
import sys
from dotenv import load_dotenv

from rsaverify.common.models import SignatureVector
from rsaverify.common.utils import int_to_hex, sha256_digest
from rsaverify.crypto.keys import KeyLoadError, load_private_key, sign_message_hash
from rsaverify.storage.vectors import VectorStore


def create_vector(key_path: str, message: str, name: str) -> SignatureVector:
    """Sign a message and describe the result as a signature vector.

    Args:
        key_path: Path to RSA private key (PEM)
        message: Text to sign (UTF-8)
        name: Vector name

    Returns:
        SignatureVector holding modulus, exponent, digest and signature
    """
    private_key = load_private_key(key_path)
    public_numbers = private_key.public_key().public_numbers()

    digest = sha256_digest(message)
    signature = sign_message_hash(digest, private_key)

    return SignatureVector(
        name=name,
        key_bits=private_key.key_size,
        exponent=public_numbers.e,
        modulus=int_to_hex(public_numbers.n),
        signature=signature.hex(),
        digest=digest.hex(),
        message=message,
    )


def main():
    load_dotenv()
    parser = argparse.ArgumentParser(description="Create a signature vector")
    parser.add_argument("--key", required=True, help="RSA private key (PEM)")
    parser.add_argument("--message", required=True, help="Message to sign")
    parser.add_argument("--name", required=True, help="Vector name")
    parser.add_argument(
        "--store",
        default=os.getenv("RSAVERIFY_VECTORS_PATH", "vectors/vectors.jsonl"),
        help="Vector store file"
    )

    args = parser.parse_args()
    try:
        vector = create_vector(args.key, args.message, args.name)
    except KeyLoadError as e:
        print(f"✗ {e}")
        sys.exit(1)

    VectorStore(args.store).append(vector)
    print(f"✓ Vector '{vector.name}' stored in {args.store}")
    print(f"  RSA-{vector.key_bits}, e = {vector.exponent}")
    print(f"  SHA-256: {vector.digest}")


if __name__ == "__main__":
    main()
