"""threadmatch — colour matching and palette reduction for needlework threads.

Usage: threadmatch <command> [colours...] [options]

Colours are hex ('#c62828', 'c62828', '#c22') or 'r,g,b' triples.
Commands are auto-discovered from threadmatch/commands/.
Each command module's docstring is its documentation.
Run `threadmatch help <command>` for full command docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, threadmatch looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import logging
import sys

from threadmatch import registry
from threadmatch.core.catalog_parser import CatalogError
from threadmatch.core.config import load_settings
from threadmatch.core.env import load_env
from threadmatch.core.palette import parse_colour
from threadmatch.core.report import format_json, format_text
from threadmatch.core.threads import ThreadBrand
from threadmatch.core.types import Algorithm, ColourSample, Report

logger = logging.getLogger('threadmatch')


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'threadmatch.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  threadmatch convert '#c62828' 12,34,56\n"
        "  threadmatch distance '#ff0000' '#fe0000' -a ciede2000\n"
        "  threadmatch match '#b87333' --brand kreinik -n 3\n"
        "  threadmatch match '#2e7d32' --catalog dmc.json --brand dmc --fail-on-delta=5\n"
        '  threadmatch reduce --image photo.png -k 12 --seed 7 --catalog dmc.json\n'
        "  threadmatch harmony '#c62828' '#1a4fa0' '#e8c800'\n"
        '  threadmatch threads --search gold\n'
        '  threadmatch help match\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  THREADMATCH_ALGORITHM   euclidean | weighted | cie76 | cie94 | ciede2000\n'
        '  THREADMATCH_CATALOG     catalog JSON files, path-separator separated\n'
        '  THREADMATCH_SEED        integer seed for reduce\n'
        '  THREADMATCH_LOG_LEVEL   DEBUG | INFO | WARNING | ERROR\n'
    )
    parser = argparse.ArgumentParser(
        prog='threadmatch',
        description='Colour matching and palette reduction for needlework threads.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging on stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        p.add_argument('colours', nargs='*', help="Colours: '#rrggbb', '#rgb' or 'r,g,b'")
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument(
            '-a',
            '--algorithm',
            default=None,
            help='euclidean | weighted | cie76 | cie94 | ciede2000 (default: ciede2000)',
        )
        p.add_argument(
            '--graphic-arts',
            action='store_true',
            help='Use CIE94 graphic-arts constants instead of textiles',
        )
        p.add_argument('-c', '--catalog', action='append', metavar='PATH', help='Thread catalog JSON (repeatable)')
        p.add_argument('-b', '--brand', action='append', help='Restrict to a thread brand (repeatable)')
        p.add_argument('-n', '--count', type=int, default=5, help='Matches per colour (default: 5)')
        p.add_argument('-k', '--target', type=int, default=8, help='Colours to reduce to (default: 8)')
        p.add_argument('-i', '--image', help='Image to sample colours from (reduce)')
        p.add_argument('-s', '--seed', type=int, default=None, help='Random seed for reduce')
        p.add_argument('--search', default=None, help='Search text for threads')
        p.add_argument('--lab', nargs=3, type=float, metavar=('L', 'A', 'B'), help='LAB triple to convert (convert)')
        p.add_argument(
            '-d',
            '--fail-on-delta',
            type=float,
            default=None,
            metavar='N',
            help='Exit 1 if any best-match distance exceeds N (CI gating)',
        )

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: threadmatch help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _resolve_options(args: argparse.Namespace) -> None:
    """Merge settings from the environment into args. Raises ValueError."""
    settings = load_settings()
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(settings.log_level)

    args.algorithm_explicit = args.algorithm is not None
    args.algorithm = Algorithm.parse(args.algorithm) if args.algorithm else settings.algorithm
    args.catalog = settings.catalogs + (args.catalog or [])
    args.brand = [ThreadBrand.parse(b) for b in args.brand] if args.brand else None
    if args.seed is None:
        args.seed = settings.seed
    if args.count < 0:
        raise ValueError(f'--count must be >= 0, got {args.count}')
    if args.target < 1:
        raise ValueError(f'--target must be >= 1, got {args.target}')


def _check_fail_on_delta(report: Report, threshold: float) -> bool:
    """Return True if any colour's best match was further than threshold."""
    if report.fail_count:
        print(f'\nFAIL: {report.fail_count} colour(s) exceeded delta threshold {threshold}')
        return True
    return False


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(format='%(levelname)s %(name)s: %(message)s', stream=sys.stderr)
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'threadmatch: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    try:
        _resolve_options(args)
        samples = [ColourSample(label=text, rgb=parse_colour(text)) for text in args.colours]
        uses_algorithm = args.command in ('match', 'reduce') or args.algorithm_explicit
        report = Report(command=args.command, algorithm=args.algorithm.value if uses_algorithm else None)
        logger.debug('running %s on %d colour(s)', args.command, len(samples))
        registry.get(args.command).execute(samples, report, args)
    except (CatalogError, ValueError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # CI gate runs after output so the report is visible on failure
    if args.fail_on_delta is not None and _check_fail_on_delta(report, args.fail_on_delta):
        sys.exit(1)


if __name__ == '__main__':
    main()
