## profargs — Copyright © 2017, Andrei Pangin.  Licensed under Apache 2.0; see http://www.apache.org/licenses/LICENSE-2.0 ⚘
#
# profargs — Parser for the comma-separated option strings of a profiling agent.
#

import os
import sys
import logging
from dataclasses import dataclass

import click

from .errors import ArgumentsError
from .arguments import Arguments
from .formatting import write_without_ansi, format_arguments, format_reference, format_option_context


logger = logging.getLogger('profargs')


@dataclass(frozen=True)
class CliConfig:
    verbose: int
    plain: bool


class ArgumentsChecker:
    def __init__(self, config: CliConfig):
        self.config = config

        if config.plain:
            writer = write_without_ansi(sys.stdout.write)
            sys.stdout.write, sys.stderr.write = writer, writer

        level = logging.WARNING
        if config.verbose >= 2 or os.environ.get('PROFARGS_DEBUG'): level = logging.DEBUG
        elif config.verbose == 1: level = logging.INFO
        logging.basicConfig(level=level, stream=sys.stderr, format='%(levelname)s %(name)s: %(message)s')

    def _fatal_error(self, source: str, exc: ArgumentsError) -> int:
        header = f"{exc.message} (Exception: \033[33m{type(exc).__name__}\033[0m)"
        print(f'\033[30;43m INVALID ARGUMENTS. \033[0m {header}\n{format_option_context(source, exc.offset, exc.token)}\n', file=sys.stderr)
        return 1

    def check(self, source: str) -> int:
        args = Arguments()
        try:
            args.parse(source)
        except ArgumentsError as exc:
            return self._fatal_error(source, exc)

        logger.info("Parsed %d characters into %r.", len(source), args)
        with args:
            print(format_arguments(args))
        return 0


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.argument('options', nargs=-1)
@click.option('--verbose', '-v', default=0, count=True, help='Log parsing details; repeat for debug output.')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes and redirect stderr to stdout.')
@click.option('--reference', is_flag=True, help='List every recognized option and exit.')
@click.pass_context
def cli(ctx: click.Context, options: tuple[str, ...], verbose: int, plain: bool, reference: bool) -> None:
    """Parse an agent option string such as `start,event=cpu,file=out.html` and show the result."""
    checker = ArgumentsChecker(CliConfig(verbose=verbose, plain=plain))

    if reference:
        print(format_reference())
        ctx.exit(0)

    source = ','.join(options) if options else os.environ.get('PROFARGS_OPTIONS')
    if source is None:
        raise click.UsageError("Missing option string; pass one or set PROFARGS_OPTIONS.")
    ctx.exit(checker.check(source))


def main(argv: list[str] | None = None) -> None:
    cli.main(args=argv, prog_name='profargs')


if __name__ == "__main__":
    main()
