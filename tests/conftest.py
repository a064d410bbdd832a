"""
Shared fixtures for traversal engine tests.
Creates isolated temporary directory trees with controlled file contents.
"""
import os
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'samehash' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


def dot_prefix_probe(path, stat_result=None) -> bool:
    """Platform-independent hidden probe used where tests create dotfiles."""
    return os.path.basename(path).startswith(".")


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_tree(temp_dir) -> Dict[str, Path]:
    """
    The reference scenario:
    - a.txt = "hello", b.txt = "hello", c.txt = "world" in the root
    - sub/d.txt = "hello" one level down
    """
    files = {"root": temp_dir}

    files["a"] = temp_dir / "a.txt"
    files["b"] = temp_dir / "b.txt"
    files["c"] = temp_dir / "c.txt"
    files["a"].write_bytes(b"hello")
    files["b"].write_bytes(b"hello")
    files["c"].write_bytes(b"world")

    sub = temp_dir / "sub"
    sub.mkdir()
    files["sub"] = sub
    files["d"] = sub / "d.txt"
    files["d"].write_bytes(b"hello")

    return files


@pytest.fixture
def deep_tree(temp_dir) -> Dict[str, Path]:
    """
    A tree with hidden entries and several depth levels:
    - top.bin, .hidden_top.bin (dotfile)
    - level1/one.bin, level1/level2/two.bin, level1/level2/level3/three.bin
    - .secret/inside.bin (hidden directory)
    All .bin files share the same content except three.bin.
    """
    content = b"same bytes" * 10
    files = {"root": temp_dir}

    files["top"] = temp_dir / "top.bin"
    files["top"].write_bytes(content)
    files["hidden_top"] = temp_dir / ".hidden_top.bin"
    files["hidden_top"].write_bytes(content)

    level3 = temp_dir / "level1" / "level2" / "level3"
    level3.mkdir(parents=True)
    files["one"] = temp_dir / "level1" / "one.bin"
    files["one"].write_bytes(content)
    files["two"] = temp_dir / "level1" / "level2" / "two.bin"
    files["two"].write_bytes(content)
    files["three"] = level3 / "three.bin"
    files["three"].write_bytes(b"different")

    secret = temp_dir / ".secret"
    secret.mkdir()
    files["inside"] = secret / "inside.bin"
    files["inside"].write_bytes(content)

    return files
