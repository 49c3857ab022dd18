"""
Script contains text normalization and generation lookups used while
building records
"""

# Ignore pylint warnings
# pylint: disable=line-too-long

from __future__ import annotations

import re
from typing import Iterable, Optional, Sequence

from configs.constants import Constants
from src.fetcher.models import EffectEntry, FlavorTextEntry, LocalizedGenus

# ASCII digits only, so "1_0", " 7 " and non-Latin digits are not ids
_ID_SEGMENT = re.compile(r"[0-9]+")

# Applied in order after the newline / soft hyphen / apostrophe / hyphen fixes
_STAT_REPLACEMENTS = (
    ("SPCL. ATK", "Sp. Atk"),
    ("SPCL. DEF", "Sp. Def"),
    ("SPCL.ATK", "Sp. Atk"),
    ("SPCL.DEF", "Sp. Def"),
    ("SP. ATK", "Sp. Atk"),
    ("SP. DEF", "Sp. Def"),
    ("ATTACK", "Attack"),
    ("DEFENSE", "Defense"),
    ("SPEED", "Speed"),
    ("physi cal", "physical"),
    ("criti cal", "critical"),
)


def get_url_id(url: str) -> int:
    """Returns the id at the end of a PokeAPI url.

    Args:
        url (str): Resource url, e.g. ``https://pokeapi.co/api/v2/move/33/``.

    Returns:
        int: The numeric id, or -1 when the last segment is not a number.
    """
    segment = (url or "").rstrip("/").rsplit("/", 1)[-1]
    if not _ID_SEGMENT.fullmatch(segment):
        return Constants.UNKNOWN_ID
    return int(segment)


def resolve_version_group(url: str) -> int:
    """Resolves a PokeAPI version group url to a generation number (or -1).

    https://pokeapi.co/docs/v2#versiongroup
    """
    return Constants.VERSION_GROUP_GENERATIONS.get(
        get_url_id(url), Constants.UNKNOWN_GENERATION
    )


def resolve_version(url: str) -> int:
    """Resolves a PokeAPI game version url to a generation number (or -1).

    https://pokeapi.co/docs/v2#version
    """
    return Constants.VERSION_GENERATIONS.get(
        get_url_id(url), Constants.UNKNOWN_GENERATION
    )


def get_text_generation(text: FlavorTextEntry) -> int:
    """Generation a flavor text was written for.

    Move and ability texts name a version group, species texts a version.
    """
    if text.version_group is not None:
        return resolve_version_group(text.version_group.url)
    if text.version is not None:
        return resolve_version(text.version.url)
    return Constants.UNKNOWN_GENERATION


def get_generation(generation: str) -> int:
    """Maps ``generation-i`` .. ``generation-viii`` to 1..8, anything else to -1."""
    return Constants.GENERATION_NUMBERS.get(generation, Constants.UNKNOWN_GENERATION)


def get_origin_generation(pokemon_id: int) -> int:
    """Returns the generation a pokémon first appeared in, 0 if past the table."""
    for last_id, generation in Constants.ORIGIN_GENERATION_BREAKPOINTS:
        if pokemon_id <= last_id:
            return generation
    return Constants.UNKNOWN_ORIGIN_GENERATION


def sanitize_string(text: str) -> str:
    """Cleans up PokeAPI game text.

    Joins wrapped lines, drops soft hyphens, normalizes the typographic
    apostrophe, rejoins words split across lines with a hyphen and fixes
    the all-caps stat names of older games.

    Args:
        text (str): Raw text from the API.

    Returns:
        str: The cleaned text.
    """
    ret = text.replace("\n", " ")
    ret = ret.replace("\u00ad", "")
    ret = ret.replace("\u2019", "'")
    while "- " in ret:
        ret = ret.replace("- ", "-")
    for old, new in _STAT_REPLACEMENTS:
        ret = ret.replace(old, new)
    return ret


def _first_for_language(lang: str, entries: Iterable) -> Optional[object]:
    for entry in entries:
        if entry.language.name == lang:
            return entry
    return None


def get_default_flavor_text(lang: str, texts: Sequence[FlavorTextEntry]) -> str:
    entry = _first_for_language(lang, texts)
    return sanitize_string(entry.flavor_text) if entry is not None else ""


def get_flavor_text(generation: int, lang: str, texts: Sequence[FlavorTextEntry]) -> str:
    """Picks the flavor text for *lang* written for *generation*.

    Falls back to the first text in *lang* from any generation, then to an
    empty string.
    """
    for text in texts:
        if text.language.name == lang and get_text_generation(text) == generation:
            return sanitize_string(text.flavor_text)
    return get_default_flavor_text(lang, texts)


def get_genus(lang: str, genera: Sequence[LocalizedGenus]) -> str:
    """Returns the species category in *lang*, e.g. ``Seed Pokémon``."""
    entry = _first_for_language(lang, genera)
    return entry.genus if entry is not None else ""


def get_effect_text(lang: str, entries: Sequence[EffectEntry], effect_chance: Optional[int] = None) -> str:
    """Returns the short effect in *lang* with ``$effect_chance`` filled in."""
    entry = _first_for_language(lang, entries)
    if entry is None:
        return ""
    text = entry.short_effect or entry.effect
    if effect_chance is not None:
        text = text.replace("$effect_chance", str(effect_chance))
    return sanitize_string(text)
