import logging

import pytest

from jsontabledoc.core.logging_utils import log_skip
from jsontabledoc.errors import SkipReason


def test_log_skip_includes_reason(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("jsontabledoc.test")
    with caplog.at_level(logging.DEBUG, logger="jsontabledoc.test"):
        log_skip(logger, SkipReason.SCALAR_ARRAY, "skipped")

    assert any("[scalar_array] skipped" in record.message for record in caplog.records)
    assert all(record.levelno == logging.DEBUG for record in caplog.records)
