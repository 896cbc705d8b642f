import math
from typing import Sequence

from sleepbar.timer import STEP


class TimerError(Exception):
    """A fatal problem with the arguments. ``str()`` is the message to show."""


class UsageError(TimerError):
    def __init__(self, prog: str) -> None:
        super().__init__('Usage: {0} <seconds>\nExample: {0} 5.5'.format(prog))
        self.prog = prog


class InvalidNumberError(TimerError):
    def __init__(self, text: str) -> None:
        super().__init__("Error: '{}' is not a valid number".format(text))
        self.text = text


class NegativeDurationError(TimerError):
    def __init__(self, value: float) -> None:
        super().__init__('Error: Duration must be positive')
        self.value = value


def parse_duration(text: str) -> float:
    """
    Converts a command-line argument into a duration in seconds.

    The number must be finite, small enough to count in steps of
    :data:`~sleepbar.timer.STEP`, and non-negative. Python-only float
    spellings (surrounding blanks, ``1_000``) are refused as well.

    :raise InvalidNumberError: ``text`` is not a finite real number.
    :raise NegativeDurationError: ``text`` is a negative number.
    """
    if text != text.strip() or '_' in text:
        raise InvalidNumberError(text)
    try:
        value = float(text)
    except ValueError:
        raise InvalidNumberError(text) from None
    if not math.isfinite(value):
        raise InvalidNumberError(text)
    if value < 0:
        raise NegativeDurationError(value)
    if not math.isfinite(value / STEP):
        raise InvalidNumberError(text)
    return value + 0.0  # normalizes -0.0


def parse_args(args: Sequence[str], prog: str = 'sleepbar') -> float:
    """Gets the duration out of the arguments that follow the program name."""
    if len(args) != 1:
        raise UsageError(prog)
    return parse_duration(args[0])
