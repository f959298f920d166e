"""Shared test fixtures and sample readings."""

from __future__ import annotations

import pytest

from climate_risk import AirQualityReading, RiskEngine, WeatherReading

SAMPLE_DATE = "2024-07-15T12:00:00Z"

# HSI 72, CSI 57
SAMPLE_HOT_WEATHER = {
    "temperature": 38,
    "humidity": 65,
    "windSpeed": 12,
    "uvIndex": 9,
    "windChill": 38,
    "precipitation": 0,
}

# HSI 34, CSI 66
SAMPLE_COLD_WEATHER = {
    "temperature": -5,
    "humidity": 80,
    "windSpeed": 30,
    "uvIndex": 1,
    "windChill": -12,
    "precipitation": 2,
}

# AQRI 12, no confidence penalty
SAMPLE_AIR_QUALITY = {
    "pm25": 25,
    "pm10": 35,
    "no2": 40,
    "station": "Central Station",
    "distance": 10,
}

SAMPLE_NO_AIR_QUALITY = {
    "pm25": None,
    "pm10": None,
    "no2": None,
    "station": None,
    "distance": None,
}


@pytest.fixture
def engine() -> RiskEngine:
    return RiskEngine()


@pytest.fixture
def hot_weather() -> WeatherReading:
    return WeatherReading.model_validate(SAMPLE_HOT_WEATHER)


@pytest.fixture
def cold_weather() -> WeatherReading:
    return WeatherReading.model_validate(SAMPLE_COLD_WEATHER)


@pytest.fixture
def air_quality() -> AirQualityReading:
    return AirQualityReading.model_validate(SAMPLE_AIR_QUALITY)


@pytest.fixture
def no_air_quality() -> AirQualityReading:
    return AirQualityReading.model_validate(SAMPLE_NO_AIR_QUALITY)
