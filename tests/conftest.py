import pytest
from click.testing import CliRunner

from tests.automation.mark import apply_pytest_hook


def pytest_generate_tests(metafunc: pytest.Metafunc):
    # Parametrizes all tests that are decorated with with_dataset
    apply_pytest_hook(metafunc)


@pytest.fixture
def runner() -> CliRunner:
    # stdout and stderr of an invocation are captured separately
    return CliRunner()
