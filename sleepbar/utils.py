import datetime
from contextlib import contextmanager


class Measurable:
    """A base class that allows measuring execution times."""

    def __init__(self) -> None:
        super().__init__()
        self.elapsed = None

    @contextmanager
    def measure(self):
        init = datetime.datetime.now(datetime.timezone.utc)
        try:
            yield
        finally:
            self.elapsed = datetime.datetime.now(datetime.timezone.utc) - init
