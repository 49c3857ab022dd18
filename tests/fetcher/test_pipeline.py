import pytest

from src.fetcher.ability import AbilityReceiver
from src.fetcher.errors import EmptyInputError, NetworkError
from src.fetcher.moves import MovesReceiver
from src.fetcher.pipeline import fetch_data, generate_csvs, get_api_data
from src.fetcher.pokemon import PokemonReceiver
from src.fetcher.receiver import ReceiverState


def build_receivers(client):
    return PokemonReceiver(client), MovesReceiver(client), AbilityReceiver(client)


def test_get_api_data_fills_every_slot(fake_api):
    receiver = PokemonReceiver(fake_api)

    get_api_data(receiver, 3, "pokemon", "en")

    assert receiver.state is ReceiverState.POST_PROCESSED
    assert [entry.id for entry in receiver.csv_entries()] == [1, 2, 3]
    assert len(receiver.get_csv_relations()) == 9


def test_get_api_data_with_capped_pool(fake_api):
    receiver = MovesReceiver(fake_api)

    get_api_data(receiver, 3, "move", "en", max_workers=1)

    assert [entry.id for entry in receiver.csv_entries()] == [1, 2, 3]


def test_declared_count_sizes_slots_even_when_fewer_listed(fake_api):
    count, urls = fake_api.listings["ability"]
    fake_api.listings["ability"] = (5, urls)
    receiver = AbilityReceiver(fake_api)

    get_api_data(receiver, 5, "ability", "en")

    entries = receiver.get_entries()
    assert len(entries) == 5
    assert entries[3:] == [None, None]
    assert len(receiver.csv_entries()) == 3


def test_limit_bounds_fetched_entries(fake_api):
    receiver = MovesReceiver(fake_api)

    get_api_data(receiver, 2, "move", "en")

    assert len(receiver.csv_entries()) == 2
    assert len(fake_api.fetched) == 2


def test_unexpected_task_error_is_raised(fake_api):
    urls = fake_api.listings["pokemon"][1]
    del fake_api.details[urls[2]]

    with pytest.raises(KeyError):
        get_api_data(PokemonReceiver(fake_api), 3, "pokemon", "en")


def test_fetch_data_runs_receivers_in_order(fake_api):
    pokemon, moves, abilities = build_receivers(fake_api)

    fetch_data(3, "en", pokemon, moves, abilities)

    assert fake_api.listed == ["pokemon", "move", "ability"]
    assert len(pokemon.csv_entries()) == 3
    assert len(moves.csv_entries()) == 3
    assert len(abilities.get_csv_relations()) == 6


def test_fetch_data_stops_at_first_failing_receiver(fake_api):
    fake_api.listings["move"] = NetworkError("HTTP 503 fetching move list")
    pokemon, moves, abilities = build_receivers(fake_api)

    with pytest.raises(NetworkError):
        fetch_data(3, "en", pokemon, moves, abilities)

    assert fake_api.listed == ["pokemon", "move"]
    assert pokemon.state is ReceiverState.POST_PROCESSED
    assert moves.state is ReceiverState.UNINITIALIZED
    assert abilities.state is ReceiverState.UNINITIALIZED
    assert not any("/ability/" in url for url in fake_api.fetched)


def test_generate_csvs_writes_five_files(fake_api, tmp_path):
    pokemon, moves, abilities = build_receivers(fake_api)
    fetch_data(3, "en", pokemon, moves, abilities)
    output_dir = tmp_path / "data"

    generate_csvs(pokemon, moves, abilities, output_dir=output_dir)

    lines = {
        path.name: path.read_text(encoding="utf-8").splitlines()
        for path in output_dir.iterdir()
    }
    assert sorted(lines) == [
        "ability-relations.csv",
        "ability.csv",
        "move-relations.csv",
        "moves.csv",
        "pokemon.csv",
    ]
    assert len(lines["pokemon.csv"]) == 4
    assert len(lines["moves.csv"]) == 4
    assert len(lines["ability.csv"]) == 4
    assert len(lines["ability-relations.csv"]) == 7
    assert len(lines["move-relations.csv"]) == 10
    assert lines["ability-relations.csv"][:2] == ["ability_id|pokemon_id|is_hidden|slot", "1|1|false|1"]
    assert lines["move-relations.csv"][0] == "pokemon_id|move_id|learn_method|level|generation"
    assert lines["pokemon.csv"][0].startswith("id|name|generation|height|weight")


def test_generate_csvs_rejects_empty_collection(make_api, tmp_path):
    api = make_api()
    api.listings["move"] = (0, [])
    pokemon, moves, abilities = build_receivers(api)
    fetch_data(3, "en", pokemon, moves, abilities)

    with pytest.raises(EmptyInputError):
        generate_csvs(pokemon, moves, abilities, output_dir=tmp_path)

    assert (tmp_path / "pokemon.csv").read_text(encoding="utf-8").count("\n") == 4
    assert (tmp_path / "moves.csv").read_text(encoding="utf-8") == ""
