"""
Unit tests for the fishing conditions score.
"""
import pytest

from fishing_companion import scoring
from fishing_companion.schemas import WeatherObservation
from fishing_companion.scoring import describe_conditions, score_conditions, score_label


def obs(wind_speed, precipitation=0.0, **extra):
    return WeatherObservation(wind_speed=wind_speed, precipitation=precipitation, **extra)


@pytest.mark.parametrize("wind", [10, 12.5, 15, 20])
def test_moderate_wind_dry_scores_65(wind):
    """Test moderate wind and no rain leaves only the fixed bonuses."""
    assert score_conditions(obs(wind)) == 65


def test_other_fields_do_not_change_score():
    """Test temperature, pressure and humidity are ignored."""
    hot = obs(15, temperature=102, pressure=990, humidity=95, conditions="haze")
    cold = obs(15, temperature=20, pressure=1040, humidity=10)
    assert score_conditions(hot) == score_conditions(cold) == 65


def test_calm_wind_bonus():
    """Test wind under 10 mph adds the calm bonus."""
    assert score_conditions(obs(5)) == 75


def test_strong_wind_penalty():
    """Test wind over 20 mph costs 15 points."""
    assert score_conditions(obs(25)) == 50


def test_light_rain_bonus():
    """Test calm wind plus light rain is the best possible reading."""
    assert score_conditions(obs(5, 1.0)) == 80


def test_heavy_rain_penalty_starts_at_2mm():
    """Test 2 mm of rain is the heavy rain threshold."""
    assert score_conditions(obs(15, 2.0)) == 55
    assert score_conditions(obs(15, 1.99)) == 70


def test_worst_conditions():
    """Test strong wind and heavy rain give the lowest real score."""
    assert score_conditions(obs(30, 10)) == 40


def test_score_is_integer():
    """Test the score is always an int."""
    assert isinstance(score_conditions(obs(7.3, 0.4)), int)


def test_score_clamped_at_100(monkeypatch):
    """Test clamp holds when the raw sum overshoots."""
    monkeypatch.setattr(scoring, "BASELINE_SCORE", 200)
    assert score_conditions(obs(5, 1.0)) == 100


def test_score_clamped_at_0(monkeypatch):
    """Test clamp holds when the raw sum drops below zero."""
    monkeypatch.setattr(scoring, "BASELINE_SCORE", -200)
    assert score_conditions(obs(30, 10)) == 0


@pytest.mark.parametrize("score,label", [
    (100, "Excellent"),
    (80, "Excellent"),
    (79, "Good"),
    (60, "Good"),
    (59, "Average"),
    (40, "Average"),
    (39, "Below average"),
    (20, "Below average"),
    (19, "Poor"),
    (0, "Poor"),
])
def test_label_boundaries(score, label):
    """Test labels switch exactly at their thresholds."""
    assert score_label(score) == label


def test_labels_partition_score_range():
    """Test every score in range falls in exactly one label band."""
    bands = [
        (80, 101, "Excellent"),
        (60, 80, "Good"),
        (40, 60, "Average"),
        (20, 40, "Below average"),
        (0, 20, "Poor"),
    ]
    for score in range(0, 101):
        hits = [label for lo, hi, label in bands if lo <= score < hi]
        assert hits == [score_label(score)]


def test_describe_conditions():
    """Test the dashboard sentence for each label."""
    assert describe_conditions(85) == "Excellent fishing conditions today!"
    assert describe_conditions(65) == "Good fishing conditions today."
    assert describe_conditions(10) == "Poor fishing conditions today."
