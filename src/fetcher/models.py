"""Pydantic models for the parts of the PokeAPI responses the exporter reads.

Only the fields that end up in a CSV column (or are needed to derive one)
are declared; everything else in the payload is ignored.
"""

from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel, Field, ValidationError

from src.fetcher.errors import DecodeError

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode(model: Type[ModelT], payload: Any, url: Optional[str] = None) -> ModelT:
    """Validate *payload* against *model*, raising DecodeError on mismatch."""
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(
            f"Unexpected {model.__name__} payload from {url or '<unknown>'}: "
            f"{exc.error_count()} validation error(s)",
            url=url,
        ) from exc


class NamedAPIResource(BaseModel):
    name: str = ""
    url: str


class APIResourceList(BaseModel):
    """Body of a paginated list endpoint."""

    count: int
    results: List[NamedAPIResource] = Field(default_factory=list)


class FlavorTextEntry(BaseModel):
    """One localized flavor text for one version group (or, for species, one version)."""

    flavor_text: str
    language: NamedAPIResource
    version_group: Optional[NamedAPIResource] = None
    version: Optional[NamedAPIResource] = None


class EffectEntry(BaseModel):
    effect: str = ""
    short_effect: str = ""
    language: NamedAPIResource


# ---------------------------------------------------------------------------
# /pokemon/{id}
# ---------------------------------------------------------------------------


class PokemonTypeSlot(BaseModel):
    slot: int
    type: NamedAPIResource


class PokemonStat(BaseModel):
    base_stat: int
    stat: NamedAPIResource


class MoveVersionGroupDetail(BaseModel):
    level_learned_at: int = 0
    move_learn_method: NamedAPIResource
    version_group: NamedAPIResource


class PokemonMove(BaseModel):
    move: NamedAPIResource
    version_group_details: List[MoveVersionGroupDetail] = Field(default_factory=list)


class PokemonSprites(BaseModel):
    front_default: Optional[str] = None


class PokemonResponse(BaseModel):
    id: int
    name: str
    height: int
    weight: int
    base_experience: Optional[int] = None
    types: List[PokemonTypeSlot] = Field(default_factory=list)
    stats: List[PokemonStat] = Field(default_factory=list)
    moves: List[PokemonMove] = Field(default_factory=list)
    sprites: PokemonSprites = Field(default_factory=PokemonSprites)
    species: Optional[NamedAPIResource] = None


# ---------------------------------------------------------------------------
# /pokemon-species/{id}
# ---------------------------------------------------------------------------


class LocalizedGenus(BaseModel):
    genus: str
    language: NamedAPIResource


class PokemonSpeciesResponse(BaseModel):
    id: int
    name: str
    genera: List[LocalizedGenus] = Field(default_factory=list)
    flavor_text_entries: List[FlavorTextEntry] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# /move/{id}
# ---------------------------------------------------------------------------


class MoveResponse(BaseModel):
    id: int
    name: str
    accuracy: Optional[int] = None
    power: Optional[int] = None
    pp: Optional[int] = None
    priority: int = 0
    effect_chance: Optional[int] = None
    type: NamedAPIResource
    damage_class: Optional[NamedAPIResource] = None
    target: Optional[NamedAPIResource] = None
    generation: NamedAPIResource
    effect_entries: List[EffectEntry] = Field(default_factory=list)
    flavor_text_entries: List[FlavorTextEntry] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# /ability/{id}
# ---------------------------------------------------------------------------


class AbilityPokemon(BaseModel):
    is_hidden: bool
    slot: int
    pokemon: NamedAPIResource


class AbilityResponse(BaseModel):
    id: int
    name: str
    is_main_series: bool = True
    generation: NamedAPIResource
    effect_entries: List[EffectEntry] = Field(default_factory=list)
    flavor_text_entries: List[FlavorTextEntry] = Field(default_factory=list)
    pokemon: List[AbilityPokemon] = Field(default_factory=list)
