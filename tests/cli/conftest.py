import pytest

from tagvarint_cli.util import LoggingOptions, LoggingOutput, setup_logging


@pytest.fixture(autouse=True)
def silent_logging() -> None:
    setup_logging(logging_output=LoggingOutput.NULL, logging_options=LoggingOptions(debug=False))
