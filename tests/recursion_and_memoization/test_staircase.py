from __future__ import annotations

import pytest

from exercises.recursion_and_memoization.staircase import (
    AlgorithmProfile,
    StaircaseInputError,
    main,
    profile_algorithms,
    stair_combinations_brute,
    stair_combinations_memoized,
)

KNOWN_COUNTS = {0: 0, 1: 1, 2: 2, 3: 4, 4: 7, 5: 13, 6: 24, 10: 274}


@pytest.mark.parametrize("steps, expected", sorted(KNOWN_COUNTS.items()))
def test_brute_force_matches_known_counts(steps: int, expected: int) -> None:
    assert stair_combinations_brute(steps) == expected


@pytest.mark.parametrize("steps, expected", sorted(KNOWN_COUNTS.items()))
def test_memoized_matches_known_counts(steps: int, expected: int) -> None:
    assert stair_combinations_memoized(steps) == expected


def test_solvers_agree_for_small_staircases() -> None:
    for steps in range(1, 21):
        assert stair_combinations_brute(steps) == stair_combinations_memoized(steps)


@pytest.mark.slow
@pytest.mark.parametrize("steps", range(21, 31))
def test_solvers_agree_for_large_staircases(steps: int) -> None:
    assert stair_combinations_brute(steps) == stair_combinations_memoized(steps)


def test_memoized_handles_long_staircases() -> None:
    assert stair_combinations_memoized(30) == 53798080


@pytest.mark.parametrize("solver", [stair_combinations_brute, stair_combinations_memoized])
def test_negative_steps_rejected(solver) -> None:
    with pytest.raises(StaircaseInputError):
        solver(-1)


@pytest.mark.parametrize("steps", [2.5, True, "3"])
def test_non_integer_steps_rejected(steps: object) -> None:
    with pytest.raises(TypeError):
        stair_combinations_memoized(steps)  # type: ignore[arg-type]


def test_profile_algorithms_reports_parity() -> None:
    brute, memoized = profile_algorithms(12)
    assert isinstance(brute, AlgorithmProfile)
    assert brute.name == "brute"
    assert memoized.name == "memoized"
    assert brute.result == memoized.result == 927
    assert brute.time_seconds >= 0.0
    assert "ways=927" in memoized.describe()


def test_cli_prints_profiles(capsys) -> None:
    assert main(["--steps", "5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("brute: steps=5 ways=13")
    assert lines[1].startswith("memoized: steps=5 ways=13")


def test_cli_rejects_negative_steps(capsys) -> None:
    assert main(["--steps", "-3"]) == 1
    assert capsys.readouterr().out == ""
