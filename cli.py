"""
pokeapi-csv command line interface.

Usage
-----
python cli.py fetch                          # every pokémon, move and ability
python cli.py fetch --lang fr                # French flavor / effect texts
python cli.py fetch --limit 151              # first page of 151 per endpoint
python cli.py fetch --output-dir out/        # write the CSVs somewhere else
python cli.py -v fetch --max-workers 32      # debug logging, capped fan-out
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from configs.constants import Constants
from utils.logger import logger, setup_logging


# ---------------------------------------------------------------------------
# Sub-command handlers
# ---------------------------------------------------------------------------


def cmd_fetch(args: argparse.Namespace) -> int:
    """Fetch all three endpoints, then write the five CSV files."""
    from src.fetcher.ability import AbilityReceiver
    from src.fetcher.base import ClientConfig
    from src.fetcher.errors import PokeCsvError
    from src.fetcher.moves import MovesReceiver
    from src.fetcher.pipeline import fetch_data, generate_csvs
    from src.fetcher.pokeapi import PokeAPIClient
    from src.fetcher.pokemon import PokemonReceiver

    # One pooled connection per concurrent fetch; at most `limit` run at once
    config = ClientConfig(
        base_url=args.base_url,
        timeout=args.timeout,
        pool_size=args.max_workers or max(args.limit, 1),
    )
    client = PokeAPIClient(config=config)
    pokemon = PokemonReceiver(client)
    moves = MovesReceiver(client)
    abilities = AbilityReceiver(client)

    try:
        fetch_data(
            args.limit,
            args.lang,
            pokemon,
            moves,
            abilities,
            max_workers=args.max_workers,
        )
    except PokeCsvError as exc:
        logger.error(f"Fetch aborted: {exc}")
        return 1
    finally:
        client.close()

    try:
        generate_csvs(pokemon, moves, abilities, output_dir=Path(args.output_dir))
    except PokeCsvError as exc:
        logger.critical(f"Could not write CSV output: {exc}")
        return 1

    logger.info(f"CSV files written to {args.output_dir}")
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    root = argparse.ArgumentParser(
        prog="pokeapi-csv",
        description="Export PokeAPI pokémon, moves and abilities to pipe-delimited CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    root.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = root.add_subparsers(dest="command", required=True)

    fetch_p = subparsers.add_parser("fetch", help="Fetch PokeAPI data and write CSVs")
    fetch_p.add_argument(
        "--limit",
        type=int,
        default=Constants.DEFAULT_LIMIT,
        help=f"Page size requested per endpoint (default: {Constants.DEFAULT_LIMIT})",
    )
    fetch_p.add_argument(
        "--lang",
        default=Constants.DEFAULT_LANG,
        help=f"Language of flavor and effect texts (default: {Constants.DEFAULT_LANG})",
    )
    fetch_p.add_argument("--output-dir", default=Constants.OUTPUT_DIR, metavar="DIR")
    fetch_p.add_argument("--base-url", default=Constants.POKEAPI_BASE_URL, metavar="URL")
    fetch_p.add_argument(
        "--timeout",
        type=float,
        default=Constants.REQUEST_TIMEOUT,
        help="Per-request timeout in seconds",
    )
    fetch_p.add_argument(
        "--max-workers",
        type=int,
        default=None,
        help="Cap on concurrent fetches (default: one thread per entity)",
    )
    fetch_p.set_defaults(func=cmd_fetch)

    return root


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
