import logging
from collections.abc import Generator

import pytest


@pytest.fixture(autouse=True)
def _configure_logging_for_tests() -> None:
    """
    Automatically configure logging for all unit tests to ensure
    consistent output and proper environment tagging.
    """
    from textops.core.common.logging_utils import (
        configure_logging_with_environment_tagging,
    )

    configure_logging_with_environment_tagging(level=logging.INFO)


@pytest.fixture(autouse=True)
def _clean_textops_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep developer environment settings out of config and console tests."""
    for name in (
        "NO_COLOR",
        "TEXTOPS_LOG_LEVEL",
        "TEXTOPS_LOG_FILE",
        "TEXTOPS_FILENAME_REPLACEMENT",
        "TEXTOPS_FILENAME_PLATFORM",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
