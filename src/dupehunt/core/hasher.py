"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/hasher.py
Pluggable digest functions and the full-content file hasher.

Each algorithm is a small stateless object exposing `hexdigest(data) -> str`.
One algorithm is selected by name at startup (`get_algorithm`) and shared
read-only by every worker thread for the whole run.
"""

import hashlib
import logging
import zlib
from enum import Enum
from typing import Dict, Type

import blake3
import xxhash

from dupehunt.core.interfaces import Hasher, HashAlgorithm

logger = logging.getLogger(__name__)


class HashAlgorithmName(str, Enum):
    CRC32 = "crc32"
    XXHASH = "xxhash"
    XXH3 = "xxh3"
    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"
    BLAKE3 = "blake3"

    @property
    def description(self) -> str:
        mapping = {
            HashAlgorithmName.CRC32: "CRC-32 checksum (fastest, 32-bit, collisions likely on big sets)",
            HashAlgorithmName.XXHASH: "xxHash64 (fast non-cryptographic, default)",
            HashAlgorithmName.XXH3: "xxHash3 64-bit (fast non-cryptographic)",
            HashAlgorithmName.MD5: "MD5 (cryptographic, 128-bit)",
            HashAlgorithmName.SHA1: "SHA-1 (cryptographic, 160-bit)",
            HashAlgorithmName.SHA256: "SHA-256 (cryptographic, 256-bit)",
            HashAlgorithmName.SHA512: "SHA-512 (cryptographic, 512-bit)",
            HashAlgorithmName.BLAKE3: "BLAKE3 (cryptographic, 256-bit)",
        }
        return mapping.get(self, self.value)


DEFAULT_HASH_ALGORITHM = HashAlgorithmName.XXHASH


# Use the same way to implement and use any other hashing algorithm
class Crc32AlgorithmImpl(HashAlgorithm):
    name = HashAlgorithmName.CRC32.value

    @staticmethod
    def hexdigest(data: bytes) -> str:
        return f"{zlib.crc32(data) & 0xFFFFFFFF:08x}"


class XXHashAlgorithmImpl(HashAlgorithm):
    name = HashAlgorithmName.XXHASH.value

    @staticmethod
    def hexdigest(data: bytes) -> str:
        return xxhash.xxh64(data).hexdigest()


class XXH3AlgorithmImpl(HashAlgorithm):
    name = HashAlgorithmName.XXH3.value

    @staticmethod
    def hexdigest(data: bytes) -> str:
        return xxhash.xxh3_64(data).hexdigest()


class _HashlibAlgorithm(HashAlgorithm):
    """Base for algorithms provided by hashlib."""
    name = ""

    def hexdigest(self, data: bytes) -> str:
        return hashlib.new(self.name, data).hexdigest()


class Md5AlgorithmImpl(_HashlibAlgorithm):
    name = HashAlgorithmName.MD5.value


class Sha1AlgorithmImpl(_HashlibAlgorithm):
    name = HashAlgorithmName.SHA1.value


class Sha256AlgorithmImpl(_HashlibAlgorithm):
    name = HashAlgorithmName.SHA256.value


class Sha512AlgorithmImpl(_HashlibAlgorithm):
    name = HashAlgorithmName.SHA512.value


class Blake3AlgorithmImpl(HashAlgorithm):
    name = HashAlgorithmName.BLAKE3.value

    @staticmethod
    def hexdigest(data: bytes) -> str:
        return blake3.blake3(data).hexdigest()


ALGORITHMS: Dict[HashAlgorithmName, Type[HashAlgorithm]] = {
    HashAlgorithmName.CRC32: Crc32AlgorithmImpl,
    HashAlgorithmName.XXHASH: XXHashAlgorithmImpl,
    HashAlgorithmName.XXH3: XXH3AlgorithmImpl,
    HashAlgorithmName.MD5: Md5AlgorithmImpl,
    HashAlgorithmName.SHA1: Sha1AlgorithmImpl,
    HashAlgorithmName.SHA256: Sha256AlgorithmImpl,
    HashAlgorithmName.SHA512: Sha512AlgorithmImpl,
    HashAlgorithmName.BLAKE3: Blake3AlgorithmImpl,
}

# Alternative spellings accepted on the command line
ALGORITHM_ALIASES: Dict[str, HashAlgorithmName] = {
    "xxh64": HashAlgorithmName.XXHASH,
    "xxhash64": HashAlgorithmName.XXHASH,
    "xxh3_64": HashAlgorithmName.XXH3,
    "sha-1": HashAlgorithmName.SHA1,
    "sha-256": HashAlgorithmName.SHA256,
    "sha-512": HashAlgorithmName.SHA512,
}


def resolve_algorithm_name(name: str) -> HashAlgorithmName:
    """
    Map a user-supplied identifier to a known algorithm.
    Unknown or empty names fall back to DEFAULT_HASH_ALGORITHM with a warning.
    """
    key = (name or "").strip().lower()
    if key in ALGORITHM_ALIASES:
        return ALGORITHM_ALIASES[key]
    try:
        return HashAlgorithmName(key)
    except ValueError:
        logger.warning(
            f"Unknown hash algorithm '{name}', falling back to {DEFAULT_HASH_ALGORITHM.value}"
        )
        return DEFAULT_HASH_ALGORITHM


def get_algorithm(name: str) -> HashAlgorithm:
    """Instantiate the algorithm selected by name (lenient, see resolve_algorithm_name)."""
    return ALGORITHMS[resolve_algorithm_name(name)]()


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    Reads the whole file before hashing; read errors propagate to the caller.
    """

    def __init__(self, algorithm: HashAlgorithm = None):
        self.algorithm = algorithm or XXHashAlgorithmImpl()

    @property
    def algorithm_name(self) -> str:
        return self.algorithm.name

    def compute_full_hash(self, path: str) -> str:
        """
        Computes the hex digest of the entire file.

        Raises:
            OSError: If the file cannot be opened or read
        """
        with open(path, 'rb') as f:
            data = f.read()
        return self.algorithm.hexdigest(data)
