from __future__ import annotations

import pytest

from tivoliwheel.analysis.fairness import FairnessConfig, chi_square, run_fairness
from tivoliwheel.core import InvalidLabelCount


def test_fairness_run_is_deterministic() -> None:
    config = FairnessConfig(sectors=6, spins=600, seed=11)
    first = run_fairness(config)
    second = run_fairness(config)
    assert first.counts == second.counts
    assert sum(first.counts) == 600
    assert len(first.counts) == 6


def test_winners_spread_across_all_sectors() -> None:
    result = run_fairness(FairnessConfig(sectors=4, spins=2_000, seed=101))
    assert all(count > 0 for count in result.counts)
    # 3 degrees of freedom; 16.27 is the 0.1% critical value
    assert result.chi_square < 16.27
    assert result.max_deviation_pct < 20.0


def test_chi_square_of_even_counts_is_zero() -> None:
    assert chi_square([5, 5, 5]) == 0.0
    assert chi_square([]) == 0.0
    assert chi_square([10, 0]) == pytest.approx(10.0)


def test_fairness_validates_config() -> None:
    with pytest.raises(InvalidLabelCount):
        run_fairness(FairnessConfig(sectors=1))
    with pytest.raises(ValueError):
        run_fairness(FairnessConfig(spins=0))
