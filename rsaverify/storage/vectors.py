"""Append-only JSON-lines store of signature vectors."""

import logging
from pathlib import Path
from typing import Optional
from datetime import datetime, timezone

from pydantic import ValidationError

from rsaverify.common.models import SignatureVector


logger = logging.getLogger(__name__)


class VectorStoreError(Exception):
    """Exception raised when a stored vector cannot be parsed."""
    pass


class VectorStore:
    """Manages an append-only file of signature vectors, one JSON object per line."""

    def __init__(self, path: str = "vectors/vectors.jsonl"):
        """Initialize vector store.

        Args:
            path: Path of the JSON-lines file (created on first append)
        """
        self.path = Path(path)

    def append(self, vector: SignatureVector):
        """Append a vector to the store.

        Args:
            vector: Signature vector to persist
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        new_file = not self.path.exists()
        with open(self.path, "a") as f:
            if new_file:
                f.write(f"# Signature vectors, created {datetime.now(timezone.utc).isoformat()}\n")
            f.write(vector.model_dump_json() + "\n")
        logger.info("Stored vector %s in %s", vector.name, self.path)

    def load(self) -> list[SignatureVector]:
        """Read every vector in the store.

        Blank lines and lines starting with '#' are skipped.

        Returns:
            List of vectors in file order (empty if the file does not exist)

        Raises:
            VectorStoreError if a line is not a valid vector
        """
        if not self.path.exists():
            return []

        vectors = []
        with open(self.path, "r") as f:
            for lineno, line in enumerate(f, start=1):
                line = line.strip()
                if not line or line.startswith('#'):
                    continue
                try:
                    vectors.append(SignatureVector.model_validate_json(line))
                except ValidationError as e:
                    raise VectorStoreError(f"{self.path}:{lineno}: invalid vector: {e}")
        return vectors

    def find(self, name: str) -> Optional[SignatureVector]:
        """Return the last vector stored under name, or None."""
        found = None
        for vector in self.load():
            if vector.name == name:
                found = vector
        return found
