import io
import logging
import textwrap
from concurrent.futures import ThreadPoolExecutor

from statement_ingest import parse_statement
from statement_ingest.logging_setup import configure_logging, get_logger, reset_logging

CSV_TEXT = textwrap.dedent(
    """\
    Date,Description,Amount
    01/15/2024,STARBUCKS STORE #1234,-4.85
    ,MISSING DATE,-1.00
    """
)


def test_library_is_silent_until_configured():
    get_logger("statement_ingest.test")
    pkg = logging.getLogger("statement_ingest")

    assert any(isinstance(h, logging.NullHandler) for h in pkg.handlers)


def test_configure_logging_debug_captures_pipeline_messages():
    buf = io.StringIO()
    configure_logging("DEBUG", fmt="%(name)s %(message)s", stream=buf)

    parse_statement(CSV_TEXT)

    out = buf.getvalue()
    assert "statement_ingest.delimiters delimiter scores=" in out
    assert "statement_ingest.headers header row=0" in out
    assert "dropped 1 structurally unusable rows" in out


def test_configure_logging_is_idempotent():
    first, second = io.StringIO(), io.StringIO()
    configure_logging("INFO", stream=first)
    configure_logging("DEBUG", stream=second)

    pkg = logging.getLogger("statement_ingest")
    assert len(pkg.handlers) == 1
    assert pkg.level == logging.INFO


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("STATEMENT_INGEST_LOG_LEVEL", "warning")
    configure_logging(stream=io.StringIO())

    assert logging.getLogger("statement_ingest").level == logging.WARNING


def test_unknown_level_name_falls_back_to_info():
    configure_logging("chatty", stream=io.StringIO())

    assert logging.getLogger("statement_ingest").level == logging.INFO


def test_no_header_warning_is_emitted():
    buf = io.StringIO()
    configure_logging("WARNING", stream=buf)

    assert parse_statement("foo,bar\n1,2") == []
    assert "no header row found" in buf.getvalue()


def test_parsing_is_safe_across_threads():
    reset_logging()
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(parse_statement, [CSV_TEXT] * 16))

    assert all(len(r) == 1 for r in results)
    assert results[0] == results[-1]


def test_numeric_level_string_is_accepted():
    configure_logging("10", stream=io.StringIO())

    assert logging.getLogger("statement_ingest").level == logging.DEBUG
