"""
Script contains logger for the PokeAPI CSV exporter
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(name="pokeapi-csv")


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger once for command line runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
    # urllib3 logs every new pool connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.INFO)
