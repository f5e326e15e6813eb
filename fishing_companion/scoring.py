"""
Fishing conditions score.

A simple heuristic over a single weather observation. The pressure and
temperature terms are fixed bonuses that do not yet look at the observed
values.
"""
from typing import List, Tuple

from .schemas import WeatherObservation

BASELINE_SCORE: int = 50
# TODO: replace with a pressure-trend term once forecasts carry pressure history
PRESSURE_BONUS: int = 10
# TODO: replace with a per-species water temperature term
TEMPERATURE_BONUS: int = 5

CALM_WIND_MPH: float = 10
STRONG_WIND_MPH: float = 20
HEAVY_RAIN_MM: float = 2

# Evaluated high to low; the first threshold the score reaches wins.
LABELS: List[Tuple[int, str]] = [
    (80, "Excellent"),
    (60, "Good"),
    (40, "Average"),
    (20, "Below average"),
    (0, "Poor"),
]


def score_conditions(weather: WeatherObservation) -> int:
    """
    Score fishing favorability from 0 to 100.

    Only wind speed and precipitation change the result; light wind and
    light rain help, strong wind and heavy rain hurt.
    """
    score = BASELINE_SCORE
    score += PRESSURE_BONUS
    score += TEMPERATURE_BONUS

    if weather.wind_speed < CALM_WIND_MPH:
        score += 10
    elif weather.wind_speed > STRONG_WIND_MPH:
        score -= 15

    if 0 < weather.precipitation < HEAVY_RAIN_MM:
        score += 5
    elif weather.precipitation >= HEAVY_RAIN_MM:
        score -= 10

    return max(0, min(100, score))


def score_label(score: int) -> str:
    for threshold, label in LABELS:
        if score >= threshold:
            return label
    return "Poor"


def describe_conditions(score: int) -> str:
    """Dashboard sentence for a score, e.g. 'Good fishing conditions today.'"""
    label = score_label(score)
    if label == "Excellent":
        return "Excellent fishing conditions today!"
    return f"{label} fishing conditions today."
