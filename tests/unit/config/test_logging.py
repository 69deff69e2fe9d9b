"""Tests for the loguru configuration."""

import json
import sys
from typing import Generator

from loguru import logger
import pytest

from linreg.config.logging import configure_logging
from linreg.settings import LinregSettings


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    yield
    logger.remove()
    logger.add(sys.stderr)


class DescribeConfigureLogging:
    def it_serializes_records_as_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(LinregSettings(log_json=True))

        logger.info("hello")

        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["record"]["message"] == "hello"

    def it_hides_debug_records_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(LinregSettings())

        logger.debug("hidden")
        logger.info("shown")

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err

    def it_shows_debug_records_in_debug_mode(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(LinregSettings(debug=True))

        logger.debug("visible")

        assert "visible" in capsys.readouterr().err
