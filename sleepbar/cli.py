import logging
import sys

import click
from colorama import Fore, Style

from sleepbar.config import TimerConfig
from sleepbar.duration import TimerError, parse_args
from sleepbar.timer import STEP, Timer

EPILOG = """\b
Ex. sleepbar 5.5

waits five and a half seconds, advancing the bar every {} seconds.
""".format(STEP)


@click.command(help='Wait SECONDS seconds while showing a progress bar.',
               epilog=EPILOG,
               context_settings={'ignore_unknown_options': True})
@click.argument('args', nargs=-1, type=click.UNPROCESSED, metavar='SECONDS')
@click.pass_context
def sleepbar(ctx: click.Context, args):
    logging.basicConfig(level=TimerConfig.LOG_LEVEL)
    try:
        duration = parse_args(args, prog=ctx.info_name or 'sleepbar')
    except TimerError as e:
        logging.debug('Invalid arguments %s', args)
        click.echo('{}{}{}'.format(Fore.RED, e, Style.RESET_ALL), err=True)
        ctx.exit(1)
    Timer(duration).run(file=sys.stdout)


if __name__ == '__main__':
    sleepbar()
