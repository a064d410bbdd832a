"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements streaming content hashing with pluggable digest algorithms.

HasherImpl reads a file in fixed-size chunks and feeds each chunk into an
incremental digest, so memory stays bounded by the chunk size whatever the
file size is.
"""

import hashlib
import logging
from typing import Dict

import xxhash

from samehash.core.errors import FileReadError
from samehash.core.interfaces import HashAlgorithm, Digest
from samehash.core.models import ContentFingerprint, HashAlgorithmName, DEFAULT_CHUNK_SIZE

logger = logging.getLogger(__name__)


# Use the same way to implement and use any other hashing algorithm
class Sha256AlgorithmImpl(HashAlgorithm):
    name = HashAlgorithmName.SHA256.value

    def new(self) -> Digest:
        return hashlib.sha256()


class Blake2bAlgorithmImpl(HashAlgorithm):
    name = HashAlgorithmName.BLAKE2B.value

    def new(self) -> Digest:
        return hashlib.blake2b()


class XXHashAlgorithmImpl(HashAlgorithm):
    name = HashAlgorithmName.XXH64.value

    def new(self) -> Digest:
        return xxhash.xxh64()


ALGORITHMS: Dict[HashAlgorithmName, HashAlgorithm] = {
    HashAlgorithmName.SHA256: Sha256AlgorithmImpl(),
    HashAlgorithmName.BLAKE2B: Blake2bAlgorithmImpl(),
    HashAlgorithmName.XXH64: XXHashAlgorithmImpl(),
}


def get_algorithm(name: HashAlgorithmName) -> HashAlgorithm:
    return ALGORITHMS[name]


class HasherImpl:
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    Streams file content through the digest in chunks of `chunk_size` bytes.
    """

    def __init__(self, algorithm: HashAlgorithm = None, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.algorithm = algorithm or Sha256AlgorithmImpl()
        self.chunk_size = chunk_size
        self.bytes_read = 0

    def hash(self, path: str) -> ContentFingerprint:
        """
        Computes the lowercase hex fingerprint of the whole file.

        Raises:
            FileReadError: If the file cannot be opened or a read fails mid-stream.
        """
        digest = self.algorithm.new()
        try:
            with open(path, 'rb') as f:
                while True:
                    chunk = f.read(self.chunk_size)
                    if not chunk:
                        break
                    digest.update(chunk)
                    self.bytes_read += len(chunk)
        except OSError as e:
            raise FileReadError(path, e) from e

        fingerprint = digest.hexdigest()
        logger.debug(f"{self.algorithm.name} {fingerprint} {path}")
        return fingerprint
