import logging

import pytest

from checkgate.core.utils.logging import log_structured


def test_log_structured_attaches_context(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("checkgate.tests.logging")

    with caplog.at_level(logging.INFO, logger=logger.name):
        log_structured(logger, "evaluation_completed", operation="evaluate", required_failures=2)

    record = caplog.records[-1]
    assert record.getMessage() == "evaluation_completed"
    assert record.levelno == logging.INFO
    assert record.operation == "evaluate"
    assert record.required_failures == 2


def test_log_structured_uses_requested_level(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("checkgate.tests.logging")

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        log_structured(logger, "rules_validated", level="warning", success=False)

    assert caplog.records[-1].levelno == logging.WARNING
    assert caplog.records[-1].success is False


def test_log_structured_unknown_level_falls_back_to_info(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("checkgate.tests.logging")

    with caplog.at_level(logging.INFO, logger=logger.name):
        log_structured(logger, "evaluation_completed", level="verbose")

    assert caplog.records[-1].levelno == logging.INFO
