from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner

from sleepbar.cli import sleepbar


@pytest.fixture()
def runner() -> CliRunner:
    try:
        return CliRunner(mix_stderr=False)
    except TypeError:  # click >= 8.2 always keeps stderr apart
        return CliRunner()


def test_cli(runner: CliRunner, sleep: MagicMock):
    result = runner.invoke(sleepbar, ['1.1'])
    assert result.exit_code == 0, result.stderr
    assert sleep.call_count == 5
    assert '5/5' in result.stdout
    assert 'Done' in result.stdout
    assert result.stderr == ''


def test_cli_zero(runner: CliRunner, sleep: MagicMock):
    result = runner.invoke(sleepbar, ['0'])
    assert result.exit_code == 0, result.stderr
    assert sleep.call_count == 0
    assert 'Done' in result.stdout


@pytest.mark.parametrize('args', [[], ['1', '2']])
def test_cli_usage(runner: CliRunner, sleep: MagicMock, args):
    result = runner.invoke(sleepbar, args)
    assert result.exit_code == 1
    assert 'Usage: sleepbar <seconds>' in result.stderr
    assert 'Example: sleepbar 5.5' in result.stderr
    assert result.stdout == ''
    assert sleep.call_count == 0


@pytest.mark.parametrize('value', ['abc', '1e308'])
def test_cli_invalid_number(runner: CliRunner, sleep: MagicMock, value: str):
    result = runner.invoke(sleepbar, [value])
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Error: '{}' is not a valid number".format(value) in result.stderr
    assert result.stdout == ''
    assert sleep.call_count == 0


@pytest.mark.parametrize('value', ['-3', '-0.5'])
def test_cli_negative(runner: CliRunner, sleep: MagicMock, value: str):
    result = runner.invoke(sleepbar, [value])
    assert result.exit_code == 1
    assert 'Error: Duration must be positive' in result.stderr
    assert result.stdout == ''  # no bar
    assert sleep.call_count == 0


def test_cli_help(runner: CliRunner):
    result = runner.invoke(sleepbar, ['--help'])
    assert result.exit_code == 0
    assert 'SECONDS' in result.stdout
    assert 'sleepbar 5.5' in result.stdout
