"""Sleep for a number of seconds while showing a progress bar."""

__version__ = '1.0.0'
