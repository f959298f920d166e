"""Tests for threshold alerts."""

from __future__ import annotations

from climate_risk import (
    AirQualityReading,
    RiskConfig,
    RiskEngine,
    RiskThresholds,
    WeatherReading,
    evaluate_alerts,
)
from tests.conftest import SAMPLE_DATE


class TestEvaluateAlerts:
    def test_heat_alert(
        self, engine: RiskEngine, hot_weather: WeatherReading, air_quality: AirQualityReading
    ) -> None:
        result = engine.calculate_complete_risk(hot_weather, air_quality, date=SAMPLE_DATE)
        alerts = evaluate_alerts(result, neighborhoods=["Downtown", "Riverside"])

        assert len(alerts) == 1
        alert = alerts[0]
        assert alert.type == "heat"
        assert alert.severity == "high"
        assert alert.neighborhoods == ["Downtown", "Riverside"]
        assert alert.message == "Extreme heat warning: Heat Stress Index at 72."
        assert alert.timestamp == SAMPLE_DATE
        assert alert.id == f"heat-{SAMPLE_DATE}"

    def test_cold_alert(
        self, engine: RiskEngine, cold_weather: WeatherReading, no_air_quality: AirQualityReading
    ) -> None:
        result = engine.calculate_complete_risk(cold_weather, no_air_quality, date=SAMPLE_DATE)
        alerts = evaluate_alerts(result)

        assert [a.type for a in alerts] == ["cold"]
        assert alerts[0].neighborhoods == []

    def test_nothing_breached(
        self, engine: RiskEngine, hot_weather: WeatherReading, air_quality: AirQualityReading
    ) -> None:
        result = engine.calculate_complete_risk(hot_weather, air_quality, date=SAMPLE_DATE)
        config = RiskConfig(thresholds=RiskThresholds(hsi=90, csi=90, aqri=90))
        assert evaluate_alerts(result, config) == []

    def test_threshold_is_inclusive(
        self, engine: RiskEngine, hot_weather: WeatherReading, air_quality: AirQualityReading
    ) -> None:
        result = engine.calculate_complete_risk(hot_weather, air_quality, date=SAMPLE_DATE)
        config = RiskConfig(thresholds=RiskThresholds(hsi=72, csi=58, aqri=12))
        assert [a.type for a in evaluate_alerts(result, config)] == ["heat", "air_quality"]

    def test_severity_follows_index(
        self, engine: RiskEngine, hot_weather: WeatherReading, air_quality: AirQualityReading
    ) -> None:
        result = engine.calculate_complete_risk(hot_weather, air_quality, date=SAMPLE_DATE)
        config = RiskConfig(thresholds=RiskThresholds(hsi=0, csi=0, aqri=0))
        alerts = evaluate_alerts(result, config)

        assert [(a.type, a.severity) for a in alerts] == [
            ("heat", "high"),
            ("cold", "high"),
            ("air_quality", "low"),
        ]
        assert alerts[2].message == "Poor air quality alert: Air Quality Risk Index at 12."
