import dataclasses

import pytest

from core.levels import LEVELS, get_level, validate_level


def test_three_fixed_levels():
    assert list(LEVELS) == ["easy", "medium", "hard"]

    easy, medium, hard = LEVELS["easy"], LEVELS["medium"], LEVELS["hard"]
    assert (easy.min, easy.max, easy.max_attempts, easy.bonus_threshold) == (1, 50, 10, 5)
    assert (medium.min, medium.max, medium.max_attempts, medium.bonus_threshold) == (1, 75, 7, 4)
    assert (hard.min, hard.max, hard.max_attempts, hard.bonus_threshold) == (1, 100, 5, 3)
    for cfg in LEVELS.values():
        assert cfg.base_score == 10
        assert cfg.bonus_score == 5


def test_levels_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        LEVELS["easy"].max = 5  # type: ignore[misc]
    with pytest.raises(TypeError):
        LEVELS["extra"] = LEVELS["easy"]  # type: ignore[index]


def test_get_level_unknown_name():
    assert get_level("hard").name == "Hard"
    with pytest.raises(ValueError, match="Unknown level"):
        get_level("nightmare")


@pytest.mark.parametrize(
    "changes",
    [
        {"min": 10, "max": 5},
        {"max_attempts": 0},
        {"bonus_threshold": 11},
        {"bonus_threshold": 0},
        {"bonus_score": -1},
    ],
)
def test_validate_level_rejects_bad_config(changes):
    cfg = dataclasses.replace(LEVELS["easy"], **changes)
    with pytest.raises(ValueError):
        validate_level(cfg)
