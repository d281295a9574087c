"""Command-line interface for objdb"""
import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .config import Settings
from .engine import Repository
from .errors import ObjdbError
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='objdb')
    parser.add_argument('--log-level', help='logging level (default: OBJDB_LOG_LEVEL or INFO)')
    sub = parser.add_subparsers(dest='cmd')

    sub.add_parser('init', help='create an empty object store')
    sub.add_parser('commit', help='store the working tree and print its tree id')
    return parser


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as e:
        print(f'objdb: invalid configuration: {e}', file=sys.stderr)
        return 1
    setup_logging(args.log_level or settings.log_level)

    if args.cmd is None:
        parser.print_usage(sys.stderr)
        print('objdb: please pass a command', file=sys.stderr)
        return 1

    repo = Repository(Path.cwd(), settings=settings)
    try:
        if args.cmd == 'init':
            path = repo.initialize()
            print(f'Initialized empty objdb repository in {path}')
        elif args.cmd == 'commit':
            print(repo.commit())
    except ObjdbError as e:
        logger.error('error: %s', e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
