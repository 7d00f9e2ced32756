import inspect
import logging
from unittest.mock import patch

from planui.utils.custom_logger import CustomLogger


def delete_something(logger, actor):
    logger.warning("could not delete a.tif", extra={"file_path": "a.tif"})


def test_warning_carries_actor_caller_and_extra(caplog):
    class Actor:
        username = "planner_amy"

    logger = CustomLogger("planui.tests.custom_logger")
    with caplog.at_level(logging.WARNING, logger="planui.tests.custom_logger"):
        delete_something(logger, Actor())

    (record,) = caplog.records
    assert record.getMessage() == "could not delete a.tif"
    assert record.file_path == "a.tif"
    assert record.username == "planner_amy"
    assert record.caller_name == "delete_something"


def test_no_actor_on_the_stack(caplog):
    logger = CustomLogger("planui.tests.custom_logger")
    with caplog.at_level(logging.INFO, logger="planui.tests.custom_logger"):
        logger.info("plain %s", "message")

    (record,) = caplog.records
    assert record.getMessage() == "plain message"
    assert record.username == ""


def test_username_lookup_failure_still_formats(caplog, settings):
    """a failing stack walk is logged with every field the planui formatter needs"""
    real_stack = inspect.stack
    calls = []

    def failing_second_walk(*args):
        calls.append(1)
        if len(calls) == 2:
            raise RuntimeError("frame gone")
        return real_stack(*args)

    logger = CustomLogger("planui.tests.custom_logger")
    formatter = logging.Formatter(settings.LOGGING["formatters"]["planui"]["format"])
    with caplog.at_level(logging.INFO, logger="planui.tests.custom_logger"), patch(
        "planui.utils.custom_logger.inspect.stack", side_effect=failing_second_walk
    ):
        logger.info("created project 1")

    error_record, info_record = caplog.records
    assert error_record.levelno == logging.ERROR
    assert "frame gone" in error_record.getMessage()
    assert info_record.username == ""
    for record in (error_record, info_record):
        assert record.getMessage() in formatter.format(record)
