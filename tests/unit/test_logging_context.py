import logging

from infrastructure.observability import (
    clear_selection_context,
    configure_logging,
    get_log_context,
    make_run_tag,
    set_log_context,
)
from infrastructure.observability.logging import ContextInjectFilter


def test_run_tag_is_stable_and_short() -> None:
    assert make_run_tag("20260101_000000_coverage") == make_run_tag("20260101_000000_coverage")
    assert len(make_run_tag("x")) == 8
    assert make_run_tag("a") != make_run_tag("b")


def test_context_injected_into_records() -> None:
    set_log_context(run_id_full="run-1", selection=["A", "B"])
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
    assert ContextInjectFilter().filter(record)
    assert record.run == make_run_tag("run-1")
    assert record.sel.startswith("n2:")

    clear_selection_context()
    ctx = get_log_context()
    assert ctx["selection"] == "-"
    assert ctx["run_id_full"] == "run-1"


def test_configure_logging_only_touches_root_handlers(tmp_path) -> None:
    log_file = tmp_path / "run.log"
    try:
        configure_logging(log_file=log_file, console_level=logging.WARNING)
        root = logging.getLogger()
        assert len(root.handlers) == 2
        assert logging.getLogger("matplotlib").level == logging.NOTSET
        logging.getLogger("coverage.test").info("hello")
        assert "hello" in log_file.read_text(encoding="utf-8")
    finally:
        root = logging.getLogger()
        for handler in list(root.handlers):
            handler.close()
            root.removeHandler(handler)
