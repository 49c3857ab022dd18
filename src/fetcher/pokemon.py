"""Pokémon records and the receiver that fetches ``/pokemon``.

Each fetch task reads two resources: the pokémon itself and its species,
which carries the localized genus and flavor texts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from configs.constants import Constants
from src.fetcher.helpers import (
    get_flavor_text,
    get_genus,
    get_origin_generation,
    get_url_id,
    resolve_version_group,
)
from src.fetcher.models import PokemonResponse, PokemonSpeciesResponse, decode
from src.fetcher.receiver import NOT_A_COLUMN, APIReceiver, CsvEntry

# PokeAPI stat name -> Pokemon field
STAT_FIELDS: Dict[str, str] = {
    "hp": "hp",
    "attack": "attack",
    "defense": "defense",
    "special-attack": "sp_atk",
    "special-defense": "sp_def",
    "speed": "speed",
}


@dataclass(frozen=True)
class MoveReference:
    """One way a pokémon learns a move in one version group."""

    move_id: int
    learn_method: str
    level: int
    generation: int


@dataclass
class PokemonMoveRelation(CsvEntry):
    pokemon_id: int
    move_id: int
    learn_method: str
    level: int
    generation: int


@dataclass
class Pokemon(CsvEntry):
    id: int
    name: str
    generation: int
    height: int
    weight: int
    base_experience: Optional[int]
    primary_type: str
    secondary_type: Optional[str]
    hp: int = 0
    attack: int = 0
    defense: int = 0
    sp_atk: int = 0
    sp_def: int = 0
    speed: int = 0
    sprite: Optional[str] = None
    genus: str = ""
    flavor_text: str = ""
    moves: List[MoveReference] = field(default_factory=list, repr=False, metadata=NOT_A_COLUMN)

    @classmethod
    def from_response(
        cls,
        data: PokemonResponse,
        species: Optional[PokemonSpeciesResponse] = None,
        lang: str = Constants.DEFAULT_LANG,
    ) -> "Pokemon":
        types = [slot.type.name for slot in sorted(data.types, key=lambda s: s.slot)]
        stats = {
            STAT_FIELDS[s.stat.name]: s.base_stat
            for s in data.stats
            if s.stat.name in STAT_FIELDS
        }
        moves = [
            MoveReference(
                move_id=get_url_id(entry.move.url),
                learn_method=detail.move_learn_method.name,
                level=detail.level_learned_at,
                generation=resolve_version_group(detail.version_group.url),
            )
            for entry in data.moves
            for detail in entry.version_group_details
        ]
        generation = get_origin_generation(data.id)
        texts = {}
        if species is not None:
            texts = {
                "genus": get_genus(lang, species.genera),
                "flavor_text": get_flavor_text(generation, lang, species.flavor_text_entries),
            }
        return cls(
            id=data.id,
            name=data.name,
            generation=generation,
            height=data.height,
            weight=data.weight,
            base_experience=data.base_experience,
            primary_type=types[0] if types else "",
            secondary_type=types[1] if len(types) > 1 else None,
            sprite=data.sprites.front_default,
            moves=moves,
            **texts,
            **stats,
        )


class PokemonReceiver(APIReceiver):
    """Fetches every pokémon; relations are the moves each one learns."""

    endpoint = Constants.ENDPOINTS["pokemon"]

    def build_record(self, payload: Any, lang: str, url: str) -> Pokemon:
        data = decode(PokemonResponse, payload, url)
        species = None
        if data.species is not None:
            species_url = data.species.url
            species = decode(PokemonSpeciesResponse, self.client.get(species_url), species_url)
        return Pokemon.from_response(data, species, lang)

    def derive_relations(self, entry: Pokemon) -> Iterable[PokemonMoveRelation]:
        for ref in entry.moves:
            yield PokemonMoveRelation(
                pokemon_id=entry.id,
                move_id=ref.move_id,
                learn_method=ref.learn_method,
                level=ref.level,
                generation=ref.generation,
            )
