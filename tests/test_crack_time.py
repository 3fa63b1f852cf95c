import math

import pytest

from warden.analyzers.crack_time import (
    CRACK_PROFILES,
    DAY,
    HOUR,
    WEEK,
    YEAR,
    average_seconds,
    format_crack_time,
    format_duration,
    get_profile,
    probability_by_seconds,
    probability_heatmap,
    project,
)
from warden.core.models import CrackTime, CrackTimeKind


def test_average_seconds_is_half_the_keyspace():
    result = average_seconds(11, 1024)
    assert result.kind is CrackTimeKind.SECONDS
    assert math.isclose(result.seconds, 1.0)


def test_zero_bits_or_bad_rate_is_immediate():
    assert average_seconds(0, 1e9).kind is CrackTimeKind.IMMEDIATE
    assert average_seconds(-4, 1e9).kind is CrackTimeKind.IMMEDIATE
    assert average_seconds(40, 0).kind is CrackTimeKind.IMMEDIATE
    assert average_seconds(40, math.inf).kind is CrackTimeKind.IMMEDIATE


def test_huge_bits_are_intractable_not_infinite():
    assert average_seconds(5000, 1e9).kind is CrackTimeKind.INTRACTABLE
    assert average_seconds(math.inf, 1e9).kind is CrackTimeKind.INTRACTABLE
    assert average_seconds(5000, 1e9).seconds is None


def test_probability_bounds_and_monotonicity():
    p_hour = probability_by_seconds(40, 1e6, HOUR)
    p_day = probability_by_seconds(40, 1e6, DAY)
    p_week = probability_by_seconds(40, 1e6, WEEK)
    assert 0.0 <= p_hour <= p_day <= p_week <= 1.0


def test_probability_edge_cases():
    assert probability_by_seconds(0, 1e9, HOUR) == 0.0
    assert probability_by_seconds(40, 1e9, 0) == 0.0
    assert probability_by_seconds(10, 1e9, HOUR) == 1.0
    assert probability_by_seconds(2000, 1e9, YEAR) == 0.0


def test_probability_saturates_for_huge_horizons():
    assert probability_by_seconds(40, 1e6, 1e300) == 1.0
    assert probability_by_seconds(128, 1e9, 1e300) == 1.0
    assert probability_by_seconds(5000, 1e9, 1e300) == 0.0


@pytest.mark.parametrize("bits", [20, 40, 64, 128])
def test_probability_is_monotone_across_magnitudes(bits):
    values = [probability_by_seconds(bits, 1e6, 10.0 ** k) for k in range(-3, 301, 3)]
    assert all(0.0 <= p <= 1.0 for p in values)
    assert values == sorted(values)
    assert values[-1] == 1.0


def test_tiny_probability_keeps_precision():
    p = probability_by_seconds(60, 1, 1)
    assert p > 0
    assert math.isclose(p, 2.0 ** -60, rel_tol=1e-9)


def test_heatmap_scales_by_band():
    rows = probability_heatmap(20, 1.0, [HOUR, DAY], [0.5, 1.0, 10.0])
    assert len(rows) == 3
    assert all(len(row) == 2 for row in rows)
    assert rows[2][1] <= 1.0
    assert math.isclose(rows[0][0], rows[1][0] * 0.5)


def test_project_covers_every_profile():
    projections = project(40)
    assert [p.profile.key for p in projections] == [p.key for p in CRACK_PROFILES]
    for projection in projections:
        assert set(projection.probabilities) == {HOUR, DAY, WEEK, YEAR}


def test_get_profile():
    assert get_profile("gpu").guesses_per_second == 1e6
    with pytest.raises(KeyError):
        get_profile("quantum")


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0.0005, "0.001s"),
        (0.25, "0.250s"),
        (5, "5.0s"),
        (90, "1.5 min"),
        (7200, "2.0 hr"),
        (90061, "1.0 days"),
        (YEAR, "1 year"),
        (10 * YEAR, "10 years"),
        (5000 * YEAR, "5K years"),
        (2e6 * YEAR, "2M years"),
        (2e9 * YEAR, "> 1 billion years"),
    ],
)
def test_format_duration_buckets(seconds, expected):
    assert format_duration(seconds) == expected


def test_format_duration_unknown():
    assert format_duration(0) == "unknown"
    assert format_duration(-1) == "unknown"
    assert format_duration(math.nan) == "unknown"
    assert format_duration(math.inf) == "unknown"


def test_format_crack_time():
    assert format_crack_time(CrackTime.immediate()) == "instant"
    assert format_crack_time(CrackTime.intractable()) == "> 1 billion years"
    assert format_crack_time(CrackTime.of(90)) == "1.5 min"
