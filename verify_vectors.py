#!/usr/bin/env python3
"""Verify stored signature vectors and cross-check against cryptography."""

import argparse
import logging
import os
import sys
from dotenv import load_dotenv
from cryptography.hazmat.primitives.asymmetric import rsa

from rsaverify.common.models import SignatureVector, VerificationReport
from rsaverify.crypto.keys import verify_with_cryptography
from rsaverify.crypto.verify import verify_sha256_pkcs1v15
from rsaverify.storage.vectors import VectorStore, VectorStoreError


def check_vector(vector: SignatureVector) -> VerificationReport:
    """Verify one vector with the fixed-ladder verifier and the reference backend.

    Args:
        vector: Signature vector to check

    Returns:
        VerificationReport with both verdicts, or the configuration error
    """
    try:
        instance = vector.instance()
        signature = vector.signature_int()
        if signature >= instance.modulus:
            return VerificationReport(name=vector.name, valid=False, error="signature not below modulus")
        valid = verify_sha256_pkcs1v15(instance, vector.digest_bytes(), signature, vector.exponent)

        public_key = rsa.RSAPublicNumbers(vector.exponent, instance.modulus).public_key()
        sig_bytes = signature.to_bytes(instance.num_bytes, byteorder='big')
        reference = verify_with_cryptography(public_key, vector.digest_bytes(), sig_bytes)
    except ValueError as e:
        return VerificationReport(name=vector.name, valid=False, error=str(e))

    return VerificationReport(name=vector.name, valid=valid, reference_valid=reference)


def main():
    load_dotenv()
    logging.basicConfig(level=os.getenv("RSAVERIFY_LOG_LEVEL", "WARNING").upper())

    parser = argparse.ArgumentParser(description="Verify stored RSA signature vectors")
    parser.add_argument(
        "--store",
        default=os.getenv("RSAVERIFY_VECTORS_PATH", "vectors/vectors.jsonl"),
        help="Vector store file"
    )
    parser.add_argument("--name", help="Only verify the vector with this name")
    args = parser.parse_args()

    store = VectorStore(args.store)
    try:
        if args.name:
            vector = store.find(args.name)
            if vector is None:
                print(f"✗ No vector named '{args.name}' in {args.store}")
                sys.exit(1)
            vectors = [vector]
        else:
            vectors = store.load()
    except VectorStoreError as e:
        print(f"✗ {e}")
        sys.exit(1)

    print("=" * 60)
    print(f"RSA PKCS#1 v1.5 / SHA-256 verification: {len(vectors)} vector(s)")
    print("=" * 60)

    failures = 0
    for vector in vectors:
        report = check_vector(vector)
        if report.error:
            print(f"✗ {report.name}: {report.error}")
            failures += 1
        elif report.valid != report.reference_valid:
            print(f"✗ {report.name}: verdict {report.valid} disagrees with cryptography ({report.reference_valid})")
            failures += 1
        elif report.valid:
            print(f"✓ {report.name}: signature valid (RSA-{vector.key_bits}, e = {vector.exponent})")
        else:
            print(f"✗ {report.name}: signature rejected")
            failures += 1

    print("=" * 60)
    if failures:
        print(f"✗ {failures} of {len(vectors)} vector(s) failed")
        sys.exit(1)
    print("✓ All vectors verified")


if __name__ == "__main__":
    main()
