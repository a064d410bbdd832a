from samehash.core.models import HashAlgorithmName

ALGORITHM_ALIASES = {
    "sha256": HashAlgorithmName.SHA256,
    "sha-256": HashAlgorithmName.SHA256,
    "blake2b": HashAlgorithmName.BLAKE2B,
    "blake2": HashAlgorithmName.BLAKE2B,
    "xxh64": HashAlgorithmName.XXH64,
    "xxhash": HashAlgorithmName.XXH64,
}

ALGORITHM_CHOICES = list(ALGORITHM_ALIASES.keys())

ALGORITHM_HELP_TEXT = (
    "Digest used to fingerprint file content:\n"
    + "".join(
        f"  {name.value:<9}: {name.description}\n" for name in HashAlgorithmName
    )
    + "Example:\n"
    "  %(prog)s -p ~/Downloads -r --algorithm blake2b"
)

CHUNK_SIZE_HELP_TEXT = (
    "Read buffer size used while hashing (e.g., 4K, 64K, 1M). Default: 64K\n"
    "Memory use per file never exceeds this value."
)

EPILOG_TEXT = """
Examples:
  Find duplicates directly inside Downloads
  %(prog)s -p ~/Downloads

  Same as above, descending into every subdirectory
  %(prog)s -p ~/Downloads -r

  Include hidden files and directories (dotfiles, hidden attribute)
  %(prog)s -p ~/Downloads -r --include-hidden

  Follow symbolic links and show statistics
  %(prog)s -p ~/Downloads -r --follow-symlinks -v
"""
