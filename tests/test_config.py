"""
Tests for settings loading
"""

import os

from blogql.config import Settings


def test_defaults():
    for key in [k for k in os.environ if k.startswith("BLOGQL_")]:
        del os.environ[key]

    loaded = Settings(_env_file=None)

    assert loaded.api_port == 4000
    assert loaded.graphiql is True
    assert loaded.seed_data is True


def test_prefixed_environment_variables():
    os.environ["BLOGQL_API_PORT"] = "4100"
    os.environ["blogql_seed_data"] = "false"
    os.environ["BLOGQL_GRAPHIQL"] = "0"

    loaded = Settings(_env_file=None)

    assert loaded.api_port == 4100
    assert loaded.seed_data is False
    assert loaded.graphiql is False


def test_unprefixed_variables_are_ignored():
    os.environ.pop("BLOGQL_API_PORT", None)
    os.environ["API_PORT"] = "9999"

    assert Settings(_env_file=None).api_port == 4000
