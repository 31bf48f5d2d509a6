"""Command-line interface for namematch."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..config import AppConfig
from ..errors import NameMatchError
from ..matching import MatchAlgorithm, NameMatcher, phonetic_key, search_names, standardize_name
from ..storage import JsonRecordStore, JsonUserStore

ALGORITHMS = [a.value for a in MatchAlgorithm]


def _config(args: argparse.Namespace) -> AppConfig:
    return AppConfig.from_env(data_dir=args.data_dir)


def standardize_command(args: argparse.Namespace) -> int:
    """Print the standardized form of each name."""
    for name in args.names:
        print(f"{name} -> {standardize_name(name)}")
    return 0


def compare_command(args: argparse.Namespace) -> int:
    """Score two names against each other.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    name1, name2 = args.name1, args.name2
    if not name1.strip() or not name2.strip():
        print("Error: Both names are required", file=sys.stderr)
        return 1

    algorithm = MatchAlgorithm.parse(args.algorithm)
    score = NameMatcher.score(name1, name2, algorithm)

    print("\n" + "=" * 60)
    print("NAME COMPARISON")
    print("=" * 60)
    print(f"Name 1:                 {name1}")
    print(f"Name 2:                 {name2}")
    print(f"Standardized 1:         {standardize_name(name1)}")
    print(f"Standardized 2:         {standardize_name(name2)}")
    print(f"Phonetic keys:          {phonetic_key(name1)!r} / {phonetic_key(name2)!r}")
    print(f"Phonetic match:         {NameMatcher.phonetic_match(name1, name2)}")
    print(f"Score ({algorithm.value}):".ljust(24) + f"{score * 100:.0f}%")
    print("=" * 60 + "\n")
    return 0


def search_command(args: argparse.Namespace) -> int:
    """Search the record store and print ranked matches.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    config = _config(args)
    store = JsonRecordStore(config.records_file)
    threshold = args.threshold if args.threshold is not None else config.default_threshold

    try:
        matches = search_names(args.query, store.get_records(), args.algorithm, threshold)
    except NameMatchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not matches:
        print(f"No matches for {args.query!r}")
        return 0

    print(f"\nMATCHES FOR {args.query!r} ({len(matches)}):")
    print("-" * 60)
    for i, match in enumerate(matches[:args.limit], start=1):
        print(f"{i}. {match.record} - {match.match_score * 100:.0f}%")
        if match.record.case_number:
            print(f"   Case: {match.record.case_number}")
    if len(matches) > args.limit:
        print(f"\n... and {len(matches) - args.limit} more matches")
    print("-" * 60 + "\n")
    return 0


def add_command(args: argparse.Namespace) -> int:
    """Add a name record to the store."""
    config = _config(args)
    store = JsonRecordStore(config.records_file)

    try:
        record = store.add_record(
            original_name=args.name,
            person_type=args.type,
            case_number=args.case,
            department=args.department,
        )
    except NameMatchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Added {record} as {record.standardized_name!r}")
    return 0


def setup_users_command(args: argparse.Namespace) -> int:
    """Create the demo user accounts."""
    config = _config(args)
    users = JsonUserStore(config.users_file).seed_demo_users()

    print(f"Created {len(users)} demo users in {config.users_file}")
    print("   Admin:    admin / admin123")
    print("   Officer1: officer1 / officer123")
    print("   Officer2: officer2 / officer123")
    return 0


def serve_command(args: argparse.Namespace) -> int:
    """Run the HTTP API with uvicorn."""
    import uvicorn
    from ..web.api.main import create_app

    config = _config(args)
    host = args.host or config.host
    port = args.port or config.port
    uvicorn.run(create_app(config), host=host, port=port)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='namematch',
        description='Fuzzy and phonetic search over recorded person names.',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--version',
        action='version',
        version='%(prog)s 0.1.0'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    parser.add_argument(
        '--data-dir',
        type=Path,
        default=None,
        help='Directory holding records.json and users.json'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands'
    )

    standardize_parser = subparsers.add_parser(
        'standardize',
        help='Show the standardized spelling of names'
    )
    standardize_parser.add_argument('names', nargs='+', help='Names to standardize')

    compare_parser = subparsers.add_parser(
        'compare',
        help='Score two names against each other'
    )
    compare_parser.add_argument('name1', help='First name')
    compare_parser.add_argument('name2', help='Second name')
    compare_parser.add_argument(
        '-a', '--algorithm',
        default='combined',
        help=f'Matching algorithm: {", ".join(ALGORITHMS)} (default: combined)'
    )

    search_parser = subparsers.add_parser(
        'search',
        help='Search recorded names'
    )
    search_parser.add_argument('query', help='Name to search for')
    search_parser.add_argument(
        '-a', '--algorithm',
        default='combined',
        help=f'Matching algorithm: {", ".join(ALGORITHMS)} (default: combined)'
    )
    search_parser.add_argument(
        '-t', '--threshold',
        type=float,
        default=None,
        help='Exclusive minimum score between 0 and 1 (default: 0.3)'
    )
    search_parser.add_argument(
        '-n', '--limit',
        type=int,
        default=20,
        help='Maximum number of matches to display (default: 20)'
    )

    add_parser = subparsers.add_parser(
        'add',
        help='Record a new name'
    )
    add_parser.add_argument('name', help='Name as entered')
    add_parser.add_argument('--type', required=True, help='Person type, e.g. suspect or witness')
    add_parser.add_argument('--case', default=None, help='Case number')
    add_parser.add_argument('--department', default=None, help='Owning department')

    subparsers.add_parser(
        'setup-users',
        help='Create the demo admin and officer accounts'
    )

    serve_parser = subparsers.add_parser(
        'serve',
        help='Run the HTTP API'
    )
    serve_parser.add_argument('--host', default=None, help='Bind address')
    serve_parser.add_argument('--port', type=int, default=None, help='Port')

    return parser


COMMANDS = {
    'standardize': standardize_command,
    'compare': compare_command,
    'search': search_command,
    'add': add_command,
    'setup-users': setup_users_command,
    'serve': serve_command,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    if not args.command:
        parser.print_help()
        return 0

    return COMMANDS[args.command](args)


if __name__ == '__main__':
    sys.exit(main())
