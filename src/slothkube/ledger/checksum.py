"""Content checksums for deployment change detection.

Two algorithms are available behind the ``ChecksumAlgorithm`` interface:

- ``sha256``: the checksum of record. Used for ``configChecksum``, the config
  version chain and the fingerprint inside ``stateSnapshotId``.
- ``legacy``: a positional polynomial hash kept for identifiers produced by
  older releases. It is not collision resistant and must not be used for
  change detection.
"""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod

from slothkube.lib.errors import LedgerError

_UINT64_MASK = (1 << 64) - 1


class ChecksumAlgorithm(ABC):
    """A named, deterministic text checksum."""

    name: str = ""

    @abstractmethod
    def checksum(self, content: str) -> str:
        """Return the checksum of ``content`` as a lowercase hex string."""


class Sha256Checksum(ChecksumAlgorithm):
    """SHA-256 over the UTF-8 encoding of the text."""

    name = "sha256"

    def checksum(self, content: str) -> str:
        """Return 64 lowercase hex characters."""
        return hashlib.sha256(content.encode("utf-8")).hexdigest()


class LegacyPositionalChecksum(ChecksumAlgorithm):
    """Positional polynomial hash: ``h = h * 31 + ord(c) + i``.

    ``i`` is the UTF-8 byte offset of ``c``, not its character index, so
    non-ASCII text hashes the same as in older releases. Accumulates in an
    unsigned 64-bit integer, so the value wraps. Empty input yields ``"0"``.
    """

    name = "legacy"

    def checksum(self, content: str) -> str:
        """Return the hash as unpadded lowercase hex."""
        value = 0
        offset = 0
        for char in content:
            value = (value * 31 + ord(char) + offset) & _UINT64_MASK
            offset += len(char.encode("utf-8", "surrogatepass"))
        return format(value, "x")


_ALGORITHMS: dict[str, ChecksumAlgorithm] = {
    algorithm.name: algorithm
    for algorithm in (Sha256Checksum(), LegacyPositionalChecksum())
}

DEFAULT_ALGORITHM = Sha256Checksum.name


def get_checksum_algorithm(name: str = DEFAULT_ALGORITHM) -> ChecksumAlgorithm:
    """Look up a checksum algorithm by name.

    Args:
        name: Algorithm name (``sha256`` or ``legacy``)

    Returns:
        The algorithm instance

    Raises:
        LedgerError: If the name is unknown
    """
    try:
        return _ALGORITHMS[name]
    except KeyError:
        raise LedgerError(
            operation="checksum",
            message=(
                f"Unknown checksum algorithm '{name}'. "
                f"Available: {', '.join(sorted(_ALGORITHMS))}"
            ),
        ) from None


def sha256_checksum(content: str) -> str:
    """Return the SHA-256 hex digest of ``content``."""
    return _ALGORITHMS["sha256"].checksum(content)


def legacy_checksum(content: str) -> str:
    """Return the legacy positional checksum of ``content``."""
    return _ALGORITHMS["legacy"].checksum(content)
