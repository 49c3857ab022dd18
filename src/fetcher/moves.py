"""Move records and the receiver that fetches ``/move``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from configs.constants import Constants
from src.fetcher.helpers import get_effect_text, get_flavor_text, get_generation
from src.fetcher.models import MoveResponse, decode
from src.fetcher.receiver import APIReceiver, CsvEntry


@dataclass
class Move(CsvEntry):
    id: int
    name: str
    generation: int
    type: str
    damage_class: Optional[str]
    power: Optional[int]
    accuracy: Optional[int]
    pp: Optional[int]
    priority: int
    effect_chance: Optional[int]
    target: Optional[str]
    effect: str
    flavor_text: str

    @classmethod
    def from_response(cls, data: MoveResponse, lang: str) -> "Move":
        generation = get_generation(data.generation.name)
        return cls(
            id=data.id,
            name=data.name,
            generation=generation,
            type=data.type.name,
            damage_class=data.damage_class.name if data.damage_class else None,
            power=data.power,
            accuracy=data.accuracy,
            pp=data.pp,
            priority=data.priority,
            effect_chance=data.effect_chance,
            target=data.target.name if data.target else None,
            effect=get_effect_text(lang, data.effect_entries, data.effect_chance),
            flavor_text=get_flavor_text(generation, lang, data.flavor_text_entries),
        )


class MovesReceiver(APIReceiver):
    endpoint = Constants.ENDPOINTS["moves"]

    def build_record(self, payload: Any, lang: str, url: str) -> Move:
        return Move.from_response(decode(MoveResponse, payload, url), lang)
