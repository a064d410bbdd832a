"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Exception types and error records shared by the traversal engine.

Exceptions
----------
SameHashError             : Base class for every error raised by samehash
InvalidConfigurationError : Bad run configuration, fatal before traversal starts
FileReadError             : A single file could not be opened or read while hashing

Records
-------
EntryError     : Per-entry soft failure collected by the walker (entry skipped)
TraversalError : Per-directory failure collected by the orchestrator (directory skipped)
"""

from dataclasses import dataclass


class SameHashError(Exception):
    """Base class for samehash errors."""


class InvalidConfigurationError(SameHashError, ValueError):
    """Raised when RunConfig validation fails."""


class FileReadError(SameHashError, OSError):
    """Raised when a file cannot be opened or fails mid-stream while hashing."""

    def __init__(self, path: str, cause: BaseException):
        super().__init__(f"Failed to read {path}: {cause}")
        self.path = path
        self.cause = cause


@dataclass(frozen=True)
class EntryError:
    """A directory entry that was skipped because it vanished or could not be read."""
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass(frozen=True)
class TraversalError:
    """A directory that could not be listed."""
    path: str
    message: str

    def __str__(self) -> str:
        return f"error walking directory: `{self.path}` {self.message}"
