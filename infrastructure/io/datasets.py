"""Coverage file loading utilities."""

from pathlib import Path

from infrastructure.io.fs import ensure_exists

SUPPORTED_SUFFIXES = (".csv", ".txt")


def read_coverage_text(path: Path) -> str:
    """
    Read a delimited coverage export as text.

    Decoded as UTF-8; a leading byte-order mark (spreadsheet exports) is dropped so it
    does not end up in the first header name.

    Args:
        path: Path to the CSV file

    Returns:
        File contents

    Raises:
        FileNotFoundError: If file does not exist
        ValueError: If file format is not supported
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    ensure_exists(path, "coverage file")

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported file format: {suffix}. Supported formats: {', '.join(SUPPORTED_SUFFIXES)}")

    return path.read_text(encoding="utf-8-sig")
