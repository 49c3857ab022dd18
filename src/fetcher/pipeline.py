"""
Fetch pipeline: list an endpoint, fan out one fetch thread per entity,
wait on the receiver, post-process, and finally write the CSV files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from configs.constants import Constants
from src.fetcher.ability import AbilityReceiver
from src.fetcher.csv_writer import create_file, to_csv
from src.fetcher.moves import MovesReceiver
from src.fetcher.pokemon import PokemonReceiver
from src.fetcher.receiver import APIReceiver
from utils.custom_threading import ThreadExecutor

LOGGER = logging.getLogger(__name__)


def get_api_data(
    recv: APIReceiver,
    limit: int,
    endpoint: str,
    lang: str,
    max_workers: Optional[int] = None,
) -> None:
    """
    Fill *recv* with every entity listed at *endpoint*.

    One thread is started per listed entity unless *max_workers* caps the
    pool.  Listing errors propagate; per-entity fetch errors are absorbed by
    the receiver.
    """
    count, urls = recv.client.list_resources(limit, endpoint)
    recv.init(count)

    urls = urls[:count]
    if len(urls) < count:
        LOGGER.warning(
            "%s: %d of %d entries listed; raise the limit to fetch the rest",
            endpoint, len(urls), count,
        )

    executor = ThreadExecutor(max_workers=max_workers or max(len(urls), 1))
    submitted = []
    try:
        for index, url in enumerate(urls):
            recv.add_worker()
            submitted.append(executor.submit(recv.fetch_entries, url, lang, index))
        recv.wait()
    finally:
        executor.shutdown()

    # FetchErrors never reach the future; anything here is a bug worth stopping for
    for future in submitted:
        exc = future.exception()
        if exc is not None:
            raise exc

    recv.post_process()


def fetch_data(
    limit: int,
    lang: str,
    *receivers: APIReceiver,
    max_workers: Optional[int] = None,
) -> None:
    """Run :func:`get_api_data` for each receiver in order, stopping at the first error."""
    total = len(receivers)
    for step, recv in enumerate(receivers, start=1):
        LOGGER.info("[%d/%d] Fetching %s …", step, total, recv.get_endpoint())
        get_api_data(recv, limit, recv.get_endpoint(), lang, max_workers=max_workers)


def generate_csvs(
    pr: PokemonReceiver,
    mr: MovesReceiver,
    ar: AbilityReceiver,
    output_dir: Union[str, Path] = Constants.OUTPUT_DIR,
) -> None:
    """
    Create the five output files in *output_dir* and write them in order:
    pokémon, moves, abilities, ability relations, move relations.
    """
    files = Constants.CSV_FILES
    pokemon_csv = create_file(output_dir, files["pokemon"])
    moves_csv = create_file(output_dir, files["moves"])
    ability_csv = create_file(output_dir, files["ability"])
    ability_rel_csv = create_file(output_dir, files["ability_relations"])
    move_rel_csv = create_file(output_dir, files["move_relations"])

    to_csv(pokemon_csv, pr.csv_entries())
    to_csv(moves_csv, mr.csv_entries())
    to_csv(ability_csv, ar.csv_entries())
    to_csv(ability_rel_csv, ar.get_csv_relations())
    to_csv(move_rel_csv, pr.get_csv_relations())
