import logging

from mazesolver.logging_utils import format_log_line, get_logger, log_event


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


def _capture_logger(name, level=logging.INFO):
    logger = logging.getLogger(name)
    logger.handlers.clear()
    handler = _ListHandler()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger, handler


def test_format_log_line_serializes_fields():
    line = format_log_line(
        "info",
        "solve.done",
        request_id="abc123",
        found=True,
        path_length=17,
        previous=None,
        cell={"row": 1, "col": 2},
    )
    parts = line.split(" | ")
    assert parts[0].endswith("Z")
    assert parts[1:] == [
        "service=maze",
        "level=INFO",
        "event=solve.done",
        'request_id="abc123"',
        "found=true",
        "path_length=17",
        "previous=null",
        'cell={"row": 1, "col": 2}',
    ]


def test_log_event_routes_levels():
    logger, handler = _capture_logger("mazesolver.test.levels")
    log_event(logger, "INFO", "a")
    log_event(logger, "WARN", "b")
    log_event(logger, "ERROR", "c")
    assert [record.levelno for record in handler.records] == [
        logging.INFO,
        logging.WARNING,
        logging.ERROR,
    ]
    assert "event=b" in handler.records[1].getMessage()


def test_debug_events_respect_logger_level():
    logger, handler = _capture_logger("mazesolver.test.debug")
    log_event(logger, "DEBUG", "hidden")
    assert handler.records == []

    logger.setLevel(logging.DEBUG)
    log_event(logger, "DEBUG", "shown")
    assert len(handler.records) == 1


def test_get_logger_configures_once():
    first = get_logger()
    handlers = list(first.handlers)
    second = get_logger()
    assert first is second
    assert second.handlers == handlers
    assert not second.propagate
