import logging

import pytest

from astrelis.console import Console, ConsoleSink
from astrelis.log import Log, LogMode


@pytest.fixture(autouse=True)
def _logging_ready():
    Log.set_initialized(False)
    Log.init(LogMode.NONE, logging.DEBUG)
    yield
    Log.set_initialized(False)


def _record(msg, *args):
    return logging.makeLogRecord({"msg": msg, "args": args, "levelno": logging.INFO})


def test_sink_formats_payload():
    sink = ConsoleSink()
    sink.emit(_record("value %s", "x"))
    assert sink.messages == ["value x"]


def test_sink_keeps_newest_messages():
    sink = ConsoleSink(2)
    for text in ["a", "b", "c"]:
        sink.emit(_record(text))
    assert sink.messages == ["b", "c"]


def test_sink_rejects_negative_size():
    with pytest.raises(ValueError):
        ConsoleSink(-1)


def test_console_collects_client_messages():
    with Console(3) as console:
        for text in ["one", "two", "three", "four", "five"]:
            Log.client_logger().info(text)
        assert console.messages == ["three", "four", "five"]
        assert console.render() == "three\nfour\nfive"


def test_console_ignores_core_messages():
    with Console() as console:
        Log.core_logger().info("engine only")
        assert console.messages == []


def test_console_stops_after_close():
    console = Console()
    Log.client_logger().info("kept")
    console.close()
    Log.client_logger().info("dropped")
    console.close()
    assert console.messages == ["kept"]
    assert console.render() == "kept"