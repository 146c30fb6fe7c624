"""
Logging setup with contextvars-based metadata injection.

- Adds run_tag and the current selection tag into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
- Tunes noisy third-party library loggers.
"""

import contextvars
import hashlib
import logging
from collections.abc import Sequence
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variables for dynamic log metadata
cv_run_tag = contextvars.ContextVar("run_tag", default="-")
cv_selection = contextvars.ContextVar("selection", default="-")

# Kept for metadata, not printed every line
cv_run_id_full = contextvars.ContextVar("run_id_full", default="-")
cv_input_file = contextvars.ContextVar("input_file", default="-")


def make_run_tag(run_id_full: str, length: int = 8) -> str:
    """
    Stable short tag derived from the full run_id.
    Uses BLAKE2s for collision resistance.
    """
    h = hashlib.blake2s(run_id_full.encode("utf-8"), digest_size=8).hexdigest()
    return h[:length]


def make_selection_tag(entities: Sequence[str]) -> str:
    """Short tag for a set of compared entities, e.g. 'n3:1a2b3c'."""
    joined = "|".join(entities)
    h = hashlib.blake2s(joined.encode("utf-8"), digest_size=4).hexdigest()
    return f"n{len(entities)}:{h[:6]}"


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run = cv_run_tag.get() or "-"
        record.sel = cv_selection.get() or "-"
        return True


def set_log_context(
    *,
    run_id_full: str | None = None,
    input_file: str | None = None,
    selection: Sequence[str] | None = None,
) -> None:
    """Update logging context (thread-safe via contextvars)."""
    if run_id_full is not None:
        cv_run_id_full.set(str(run_id_full))
        cv_run_tag.set(make_run_tag(str(run_id_full)))

    if input_file is not None:
        cv_input_file.set(str(input_file))

    if selection is not None:
        cv_selection.set(make_selection_tag([str(s) for s in selection]))


def get_log_context() -> dict[str, str]:
    """Return the current context in a convenient dict form (for JSON artifacts)."""
    return {
        "run_tag": str(cv_run_tag.get() or "-"),
        "run_id_full": str(cv_run_id_full.get() or "-"),
        "input_file": str(cv_input_file.get() or "-"),
        "selection": str(cv_selection.get() or "-"),
    }


def clear_selection_context() -> None:
    """Reset selection context to default (keep run info)."""
    cv_selection.set("-")


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure application logging with contextvars support.

    Args:
        log_file: Path to log file
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    # Clear existing handlers to avoid duplicate logs if called multiple times
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # keep root permissive; handlers enforce levels

    console_fmt = "%(asctime)s [%(levelname)s] r=%(run)s s=%(sel)s | %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | r=%(run)s s=%(sel)s | %(message)s"

    console_formatter = logging.Formatter(console_fmt, datefmt="%H:%M:%S")
    file_formatter = logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S")

    ctx_filter = ContextInjectFilter()

    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(console_formatter)
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(file_formatter)
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    logging.getLogger(__name__).info(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )
