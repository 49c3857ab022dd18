"""Ability records and the receiver that fetches ``/ability``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List

from configs.constants import Constants
from src.fetcher.helpers import get_effect_text, get_flavor_text, get_generation, get_url_id
from src.fetcher.models import AbilityResponse, decode
from src.fetcher.receiver import NOT_A_COLUMN, APIReceiver, CsvEntry


@dataclass(frozen=True)
class PokemonReference:
    pokemon_id: int
    is_hidden: bool
    slot: int


@dataclass
class AbilityRelation(CsvEntry):
    ability_id: int
    pokemon_id: int
    is_hidden: bool
    slot: int


@dataclass
class Ability(CsvEntry):
    id: int
    name: str
    generation: int
    is_main_series: bool
    effect: str
    flavor_text: str
    pokemon: List[PokemonReference] = field(default_factory=list, repr=False, metadata=NOT_A_COLUMN)

    @classmethod
    def from_response(cls, data: AbilityResponse, lang: str) -> "Ability":
        generation = get_generation(data.generation.name)
        return cls(
            id=data.id,
            name=data.name,
            generation=generation,
            is_main_series=data.is_main_series,
            effect=get_effect_text(lang, data.effect_entries),
            flavor_text=get_flavor_text(generation, lang, data.flavor_text_entries),
            pokemon=[
                PokemonReference(
                    pokemon_id=get_url_id(p.pokemon.url),
                    is_hidden=p.is_hidden,
                    slot=p.slot,
                )
                for p in data.pokemon
            ],
        )


class AbilityReceiver(APIReceiver):
    """Fetches every ability; relations link each ability to its pokémon."""

    endpoint = Constants.ENDPOINTS["abilities"]

    def build_record(self, payload: Any, lang: str, url: str) -> Ability:
        return Ability.from_response(decode(AbilityResponse, payload, url), lang)

    def derive_relations(self, entry: Ability) -> Iterable[AbilityRelation]:
        for ref in entry.pokemon:
            yield AbilityRelation(
                ability_id=entry.id,
                pokemon_id=ref.pokemon_id,
                is_hidden=ref.is_hidden,
                slot=ref.slot,
            )
