"""
Constants
"""

# Ignore pylint warnings
# pylint: disable = line-too-long


class Constants:
    """
    Constants configurations
    """

    POKEAPI_BASE_URL = "https://pokeapi.co/api/v2"
    USER_AGENT = "pokeapi-csv/1.0"

    DEFAULT_LIMIT = 2000
    DEFAULT_LANG = "en"
    REQUEST_TIMEOUT = 30
    POOL_SIZE = 64

    ENDPOINTS = {
        "pokemon": "pokemon",
        "moves": "move",
        "abilities": "ability",
    }

    OUTPUT_DIR = "./data/"
    CSV_DELIMITER = "|"
    CSV_FILES = {
        "pokemon": "pokemon.csv",
        "moves": "moves.csv",
        "ability": "ability.csv",
        "ability_relations": "ability-relations.csv",
        "move_relations": "move-relations.csv",
    }

    # https://pokeapi.co/docs/v2#versiongroup
    VERSION_GROUP_GENERATIONS = {
        1: 1, 2: 1,
        3: 2, 4: 2,
        5: 3, 6: 3, 7: 3, 12: 3, 13: 3,
        8: 4, 9: 4, 10: 4,
        11: 5, 14: 5,
        15: 6, 16: 6,
        17: 7, 18: 7, 19: 7,
        20: 8, 21: 8, 22: 8, 23: 8, 24: 8,
    }

    # https://pokeapi.co/docs/v2#version
    VERSION_GENERATIONS = {
        1: 1, 2: 1, 3: 1,
        4: 2, 5: 2, 6: 2,
        7: 3, 8: 3, 9: 3, 10: 3, 11: 3, 19: 3, 20: 3,
        12: 4, 13: 4, 14: 4, 15: 4, 16: 4,
        17: 5, 18: 5, 21: 5, 22: 5,
        23: 6, 24: 6, 25: 6, 26: 6,
        27: 7, 28: 7, 29: 7, 30: 7, 31: 7, 32: 7,
        33: 8, 34: 8,
    }

    GENERATION_NUMBERS = {
        "generation-i": 1,
        "generation-ii": 2,
        "generation-iii": 3,
        "generation-iv": 4,
        "generation-v": 5,
        "generation-vi": 6,
        "generation-vii": 7,
        "generation-viii": 8,
    }

    # Last national dex number of each generation (inclusive)
    # https://bulbapedia.bulbagarden.net/wiki/Generation
    ORIGIN_GENERATION_BREAKPOINTS = (
        (151, 1),
        (251, 2),
        (386, 3),
        (493, 4),
        (649, 5),
        (721, 6),
        (809, 7),
        (905, 8),
    )

    UNKNOWN_ID = -1
    UNKNOWN_GENERATION = -1
    UNKNOWN_ORIGIN_GENERATION = 0
