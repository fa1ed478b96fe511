import pytest

from engine.config import DEFAULT_PREFS_PATH, EngineConfig, config_from_env


def test_defaults_from_empty_env():
    cfg = config_from_env({})
    assert cfg == EngineConfig()
    assert cfg.prefs_path == DEFAULT_PREFS_PATH
    assert cfg.seed is None
    assert cfg.result_delay_seconds == 1.5


def test_values_from_env():
    cfg = config_from_env(
        {
            "NUMBER_GUESS_SEED": "42",
            "NUMBER_GUESS_RESULT_DELAY": "0",
            "NUMBER_GUESS_PREFS_PATH": "/tmp/p.json",
            "NUMBER_GUESS_LOG_LEVEL": "debug",
        }
    )
    assert (cfg.seed, cfg.result_delay_seconds, cfg.prefs_path, cfg.log_level) == (42, 0.0, "/tmp/p.json", "DEBUG")


@pytest.mark.parametrize(
    "env, name",
    [
        ({"NUMBER_GUESS_SEED": "abc"}, "NUMBER_GUESS_SEED"),
        ({"NUMBER_GUESS_RESULT_DELAY": "soon"}, "NUMBER_GUESS_RESULT_DELAY"),
        ({"NUMBER_GUESS_RESULT_DELAY": "-1"}, "NUMBER_GUESS_RESULT_DELAY"),
    ],
)
def test_bad_values_name_the_variable(env, name):
    with pytest.raises(ValueError, match=name):
        config_from_env(env)
