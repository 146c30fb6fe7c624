"""I/O utilities: filesystem operations and coverage file loading."""

from infrastructure.io.datasets import read_coverage_text
from infrastructure.io.fs import ensure_exists, write_json

__all__ = [
    "ensure_exists",
    "write_json",
    "read_coverage_text",
]
