"""
Shared fixtures for fingerprint tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict

CONTENT_A = b"public class A { }"
CONTENT_A_REFORMATTED = b"public class A {\r\n}\n"
CONTENT_B = b"class B"


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for fingerprint scenarios:
    - 2 byte-identical .jar files (a, a_copy)
    - 1 .jar differing from them only in whitespace (a_reformatted)
    - 1 unique .jar (b)
    - 1 empty .jar
    - 1 .txt file (filtered by extension in most tests)
    - 1 byte-identical .jar in a subdirectory (nested)
    """
    files = {}

    files["a"] = temp_dir / "a.jar"
    files["a"].write_bytes(CONTENT_A)
    files["a_copy"] = temp_dir / "a_copy.jar"
    files["a_copy"].write_bytes(CONTENT_A)
    files["a_reformatted"] = temp_dir / "a_reformatted.jar"
    files["a_reformatted"].write_bytes(CONTENT_A_REFORMATTED)

    files["b"] = temp_dir / "b.jar"
    files["b"].write_bytes(CONTENT_B)

    files["empty"] = temp_dir / "empty.jar"
    files["empty"].write_bytes(b"")

    files["notes"] = temp_dir / "notes.txt"
    files["notes"].write_bytes(b"hello world")

    subdir = temp_dir / "nested"
    subdir.mkdir()
    files["nested"] = subdir / "a_nested.jar"
    files["nested"].write_bytes(CONTENT_A)

    return files
