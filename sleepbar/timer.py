import logging
import math
import sys
from time import sleep

from tqdm import tqdm

from sleepbar.utils import Measurable

STEP = 0.25
"""Seconds slept between two updates of the bar."""

BAR_FORMAT = '[{elapsed}] [{bar:40}] {n_fmt:>7}/{total_fmt:7} ({remaining}) {desc}'
BAR_CHARS = '->#'
"""Pending, partial and done characters of the bar."""


def steps_for(duration: float) -> int:
    """How many :data:`STEP` are needed to cover ``duration`` seconds."""
    return math.ceil(duration / STEP)


class Timer(Measurable):
    """
    Waits ``duration`` seconds in steps of :data:`STEP`, advancing a
    progress bar after each one.

    The last step is slept in full even when it is longer than the
    time left, so a run never finishes before ``duration``.
    """

    def __init__(self, duration: float) -> None:
        super().__init__()
        self.duration = duration
        self.steps = steps_for(duration)
        self.position = 0

    def run(self, file=None) -> int:
        """Blocks until the duration has elapsed and returns the final position."""
        logging.debug('Waiting %s seconds in %s steps.', self.duration, self.steps)
        with self.measure(), tqdm(total=self.steps,
                                  file=file or sys.stdout,
                                  bar_format=BAR_FORMAT,
                                  ascii=BAR_CHARS) as bar:
            for i in range(self.steps):
                sleep(STEP)
                bar.update(1)
                self.position += 1
                if (i + 1) * STEP >= self.duration:
                    break
            bar.set_description_str('Done')
        logging.info('Slept %s steps in %s.', self.position, self.elapsed)
        return self.position
