"""Tests for the graph_algos logger hierarchy and its helpers."""

import logging
import sys
from io import StringIO

import pytest

from graph_algos.algorithms.spf import dijkstra
from graph_algos.graph.digraph import Graph
from graph_algos.graph.io import parse_graph
from graph_algos.logging import (
    LOG_LEVEL_ENV_VAR,
    ROOT_LOGGER_NAME,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    level_from_env,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
    timed,
)


@pytest.fixture(autouse=True)
def _fresh_package_logger(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    reset_logging()
    yield
    reset_logging()
    setup_root_logger()


def _capture() -> StringIO:
    """Install a StringIO handler as the package handler and return its buffer."""
    buffer = StringIO()
    setup_root_logger(
        level=logging.INFO,
        format_string="%(levelname)s %(name)s: %(message)s",
        handler=logging.StreamHandler(buffer),
    )
    return buffer


def test_default_handler_writes_to_stdout():
    setup_root_logger()
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)

    assert package_logger.level == logging.INFO
    assert package_logger.propagate
    (handler,) = package_logger.handlers
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stdout

    record = logging.LogRecord(
        "graph_algos.cli", logging.INFO, __file__, 1, "loaded", None, None
    )
    assert handler.formatter is not None
    assert handler.format(record).endswith(" - graph_algos.cli - INFO - loaded")


def test_module_loggers_defer_to_package_level():
    spf_logger = get_logger("graph_algos.algorithms.spf")
    io_logger = get_logger("graph_algos.graph.io")

    assert spf_logger.level == logging.NOTSET
    assert spf_logger.handlers == []
    assert spf_logger.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert spf_logger.getEffectiveLevel() == logging.WARNING
    assert io_logger.getEffectiveLevel() == logging.WARNING
    assert get_logger("graph_algos.paths.path").getEffectiveLevel() == logging.WARNING
    for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
        assert handler.level == logging.WARNING


def test_debug_toggle_gates_algorithm_summaries():
    buffer = _capture()
    graph = Graph([("A", "B", 1), ("B", "C", 2)])

    dijkstra(graph, "A")
    assert "Dijkstra from" not in buffer.getvalue()

    enable_debug_logging()
    dijkstra(graph, "A")
    assert (
        "DEBUG graph_algos.algorithms.spf: Dijkstra from 'A' reached 3 of 3 nodes"
        in buffer.getvalue()
    )

    buffer.seek(0)
    buffer.truncate(0)
    disable_debug_logging()
    dijkstra(graph, "A")
    assert buffer.getvalue() == ""


def test_custom_format_reaches_module_records():
    buffer = _capture()
    set_global_log_level(logging.DEBUG)

    parse_graph("a:b\n")
    assert (
        "DEBUG graph_algos.graph.io: Parsed 1 adjacency lines: 2 nodes, 1 edges"
        in buffer.getvalue().splitlines()
    )


def test_setup_runs_once_until_reset():
    buffer = _capture()
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    (handler,) = package_logger.handlers

    setup_root_logger(level=logging.DEBUG)
    get_logger("graph_algos.cli")
    get_logger("graph_algos.cli")
    assert package_logger.handlers == [handler]
    assert package_logger.level == logging.INFO

    get_logger("graph_algos.cli").info("still one handler")
    assert buffer.getvalue().count("still one handler") == 1


def test_reset_logging_clears_handlers():
    setup_root_logger()
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert package_logger.handlers

    reset_logging()
    assert package_logger.handlers == []
    assert package_logger.level == logging.NOTSET


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("debug", logging.DEBUG),
        ("WARNING", logging.WARNING),
        (" error ", logging.ERROR),
        ("15", 15),
        ("chatty", logging.INFO),
        ("", logging.INFO),
    ],
)
def test_level_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)
    assert level_from_env() == expected


def test_setup_uses_env_level(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "WARNING")
    setup_root_logger(handler=logging.StreamHandler(StringIO()))
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.WARNING


def test_timed_logs_elapsed(caplog):
    logger = get_logger("graph_algos.test.timed")
    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
        with timed(logger, "relax"):
            pass
    assert any(
        r.getMessage().startswith("relax took ") and r.getMessage().endswith("s")
        for r in caplog.records
    )


def test_timed_silent_on_error(caplog):
    logger = get_logger("graph_algos.test.timed")
    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
        with pytest.raises(RuntimeError):
            with timed(logger, "boom"):
                raise RuntimeError("x")
    assert not any("boom took" in r.getMessage() for r in caplog.records)
