import pytest
from click.testing import CliRunner

from shopcart.infrastructure.logging_config import reset_logging


@pytest.fixture(autouse=True)
def _fresh_logging():
    # The CLI group configures logging on every invocation; handlers bound
    # to a previous runner's streams must not leak into the next test.
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
