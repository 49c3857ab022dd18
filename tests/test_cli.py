import pytest

import cli
from configs.constants import Constants
from src.fetcher.errors import NetworkError


@pytest.fixture
def patched_client(monkeypatch, fake_api):
    def build(config=None):
        fake_api.config = config
        return fake_api

    monkeypatch.setattr("src.fetcher.pokeapi.PokeAPIClient", build)
    return fake_api


def test_parser_defaults():
    args = cli.build_parser().parse_args(["fetch"])

    assert args.limit == Constants.DEFAULT_LIMIT
    assert args.lang == "en"
    assert args.output_dir == Constants.OUTPUT_DIR
    assert args.max_workers is None
    assert args.verbose is False


def test_parser_requires_a_command():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


def test_fetch_writes_csvs(patched_client, tmp_path):
    exit_code = cli.main(["fetch", "--limit", "3", "--output-dir", str(tmp_path)])

    assert exit_code == 0
    assert sorted(p.name for p in tmp_path.iterdir()) == sorted(Constants.CSV_FILES.values())
    assert patched_client.closed


@pytest.mark.parametrize(
    "argv,pool_size",
    [
        (["fetch", "--limit", "3"], 3),
        (["fetch"], Constants.DEFAULT_LIMIT),
        (["fetch", "--limit", "3", "--max-workers", "2"], 2),
    ],
)
def test_connection_pool_matches_fan_out(patched_client, tmp_path, argv, pool_size):
    assert cli.main(argv + ["--output-dir", str(tmp_path)]) == 0

    assert patched_client.config.pool_size == pool_size


def test_fetch_listing_failure_exits_non_zero(patched_client, tmp_path):
    patched_client.listings["pokemon"] = NetworkError("HTTP 500 fetching pokemon list")

    exit_code = cli.main(["-v", "fetch", "--output-dir", str(tmp_path)])

    assert exit_code == 1
    assert list(tmp_path.iterdir()) == []
    assert patched_client.listed == ["pokemon"]


def test_fetch_output_failure_exits_non_zero(patched_client, tmp_path):
    blocker = tmp_path / "data"
    blocker.write_text("not a directory", encoding="utf-8")

    exit_code = cli.main(["fetch", "--output-dir", str(blocker)])

    assert exit_code == 1
