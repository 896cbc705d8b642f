from sleepbar.cli import sleepbar

sleepbar()
