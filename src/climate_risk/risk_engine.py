"""
Risk Engine Module

Converts weather and air-quality readings into heat stress (HSI), cold stress
(CSI) and air quality risk (AQRI) sub-indices, an aggregate risk score and a
data confidence value. Every calculation is pure: no I/O, no shared state.
"""

import logging
import math
from typing import Annotated, Any, Mapping, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from .config import DEFAULT_RISK_CONFIG, RiskConfig
from .exceptions import InvalidReadingError
from .models import (
    AirQualityReading,
    RawReadings,
    RiskIndices,
    RiskResult,
    WeatherReading,
)

logger = logging.getLogger(__name__)

WeatherInput = Union[WeatherReading, Mapping[str, Any]]
AirQualityInput = Union[AirQualityReading, Mapping[str, Any]]

_finite_float = TypeAdapter(Annotated[float, Field(allow_inf_nan=False)])


def normalize(value: float, min_value: float, max_value: float) -> float:
    """
    Linearly rescale value from [min_value, max_value] onto [0, 100]

    Values outside the range saturate to 0 or 100. A zero-width range
    returns 0. Non-numeric or non-finite input raises InvalidReadingError.
    """
    value = _finite(value, "value")
    if max_value == min_value:
        return 0.0
    normalized = ((value - min_value) / (max_value - min_value)) * 100
    return max(0.0, min(100.0, normalized))


def _finite(value, name: str) -> float:
    try:
        return _finite_float.validate_python(value)
    except ValidationError as e:
        raise InvalidReadingError(f"Invalid {name}: {e}") from e


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _to_index(value: float) -> int:
    return max(0, min(100, _round_half_up(value)))


def _coerce(model_cls, value) -> BaseModel:
    if isinstance(value, model_cls):
        return value
    try:
        return model_cls.model_validate(value)
    except ValidationError as e:
        raise InvalidReadingError(f"Invalid {model_cls.__name__}: {e}") from e


class RiskEngine:
    """Calculate climate health risk from weather and air quality"""

    # Heat stress components (fixed, not configurable through RiskConfig)
    HSI_WEIGHTS = {"temperature": 0.5, "humidity": 0.3, "anomaly": 0.2}
    TEMPERATURE_RANGE = (0, 45)  # °C
    HUMIDITY_RANGE = (0, 100)  # %
    ANOMALY_RANGE = (-3, 3)  # z-score

    # Cold stress components
    CSI_WEIGHTS = {"min_temp": 0.6, "wind_chill": 0.3, "snow": 0.1}
    COMFORT_BASELINE = 20  # °C
    MIN_TEMP_DEVIATION_RANGE = (0, 40)
    WIND_CHILL_RANGE = (0, 20)

    # Pollutant ranges and base weights
    POLLUTANT_RANGES = {"pm25": (0, 250), "pm10": (0, 350), "no2": (0, 200)}
    POLLUTANT_WEIGHTS = {"pm25": 0.5, "pm10": 0.3, "no2": 0.2}

    # Aggregate split between dominant temperature stress and air quality
    TEMP_STRESS_WEIGHT = 0.85
    AIR_QUALITY_WEIGHT = 0.15

    # Confidence penalties
    NO_POLLUTANT_PENALTY = 30
    MISSING_POLLUTANT_PENALTY = 10
    FAR_STATION_KM = 50
    FAR_STATION_PENALTY = 25
    DISTANT_STATION_KM = 25
    DISTANT_STATION_PENALTY = 15

    def __init__(self, config: Optional[RiskConfig] = None):
        """
        Initialize risk engine

        Args:
            config: Scoring configuration. If None, uses defaults. Its weights
                are reserved and do not affect the risk score.
        """
        self.config = config if config is not None else DEFAULT_RISK_CONFIG

    def calculate_heat_stress_index(
        self,
        weather: WeatherInput,
        temp_anomaly: float = 0
    ) -> int:
        """
        Calculate heat stress index (0-100)

        Based on:
        - Temperature
        - Relative humidity
        - Temperature anomaly z-score (0 when no historical baseline exists)
        """
        weather = _coerce(WeatherReading, weather)
        temp_anomaly = _finite(temp_anomaly, "temp_anomaly")

        temp_score = normalize(weather.temperature, *self.TEMPERATURE_RANGE)
        humidity_score = normalize(weather.humidity, *self.HUMIDITY_RANGE)
        anomaly_score = normalize(temp_anomaly, *self.ANOMALY_RANGE)

        hsi = (
            temp_score * self.HSI_WEIGHTS["temperature"]
            + humidity_score * self.HSI_WEIGHTS["humidity"]
            + anomaly_score * self.HSI_WEIGHTS["anomaly"]
        )

        return _to_index(hsi)

    def calculate_cold_stress_index(
        self,
        weather: WeatherInput,
        snow_cover_score: float = 0
    ) -> int:
        """
        Calculate cold stress index (0-100)

        Wind chill stands in for the minimum temperature: the first component
        measures how far wind chill sits from a 20 °C comfort baseline.
        snow_cover_score is expected on a 0-100 scale and is used as-is; the
        final index is still clamped to 0-100.
        """
        weather = _coerce(WeatherReading, weather)
        snow_cover_score = _finite(snow_cover_score, "snow_cover_score")

        min_temp_score = normalize(
            abs(weather.wind_chill - self.COMFORT_BASELINE),
            *self.MIN_TEMP_DEVIATION_RANGE
        )
        wind_chill_score = normalize(abs(weather.wind_chill), *self.WIND_CHILL_RANGE)
        snow_score = snow_cover_score

        csi = (
            min_temp_score * self.CSI_WEIGHTS["min_temp"]
            + wind_chill_score * self.CSI_WEIGHTS["wind_chill"]
            + snow_score * self.CSI_WEIGHTS["snow"]
        )

        return _to_index(csi)

    def calculate_air_quality_risk_index(self, air_quality: AirQualityInput) -> int:
        """
        Calculate air quality risk index (0-100)

        Only pollutants with data contribute; their base weights are
        renormalized so missing data does not pull the index towards 0.

        Returns:
            0 when no pollutant has data (unknown is not distinguished from
            no risk)
        """
        air_quality = _coerce(AirQualityReading, air_quality)

        present = {
            name: value
            for name, value in air_quality.pollutants().items()
            if value is not None
        }
        if not present:
            return 0

        total_weight = sum(self.POLLUTANT_WEIGHTS[name] for name in present)
        if total_weight == 0:
            return 0

        aqri = sum(
            normalize(value, *self.POLLUTANT_RANGES[name])
            * self.POLLUTANT_WEIGHTS[name] / total_weight
            for name, value in present.items()
        )

        return _to_index(aqri)

    def calculate_risk_score(self, indices: Union[RiskIndices, Mapping[str, Any]]) -> int:
        """
        Combine sub-indices into the aggregate risk score (0-100)

        The worse of heat and cold stress dominates so one direction cannot
        average away the other. config.weights is not consulted.
        """
        indices = _coerce(RiskIndices, indices)

        temp_stress = max(indices.hsi, indices.csi)
        risk_score = (
            temp_stress * self.TEMP_STRESS_WEIGHT
            + indices.aqri * self.AIR_QUALITY_WEIGHT
        )

        return _to_index(risk_score)

    def calculate_data_confidence(
        self,
        weather: WeatherInput,
        air_quality: AirQualityInput
    ) -> int:
        """
        Estimate how complete and relevant the input data is (0-100)

        Penalties:
        - No pollutant data at all: -30, otherwise -10 per missing pollutant
        - Station more than 50 km away: -25, more than 25 km: -15
        """
        _coerce(WeatherReading, weather)
        air_quality = _coerce(AirQualityReading, air_quality)

        confidence = 100

        if not air_quality.has_pollutant_data:
            confidence -= self.NO_POLLUTANT_PENALTY
        else:
            for value in air_quality.pollutants().values():
                if value is None:
                    confidence -= self.MISSING_POLLUTANT_PENALTY

        distance = air_quality.distance
        if distance is not None:
            if distance > self.FAR_STATION_KM:
                confidence -= self.FAR_STATION_PENALTY
            elif distance > self.DISTANT_STATION_KM:
                confidence -= self.DISTANT_STATION_PENALTY

        return max(0, confidence)

    def calculate_complete_risk(
        self,
        weather: WeatherInput,
        air_quality: AirQualityInput,
        temp_anomaly: float = 0,
        snow_cover_score: float = 0,
        *,
        date: str
    ) -> RiskResult:
        """
        Calculate all indices, the risk score and confidence for one reading pair

        Args:
            weather: Weather reading (model or mapping)
            air_quality: Air quality reading (model or mapping)
            temp_anomaly: Temperature anomaly z-score
            snow_cover_score: Snow cover on a 0-100 scale
            date: ISO-8601 timestamp the readings represent, stored verbatim

        Returns:
            RiskResult with the readings kept unchanged under raw
        """
        weather = _coerce(WeatherReading, weather)
        air_quality = _coerce(AirQualityReading, air_quality)
        temp_anomaly = _finite(temp_anomaly, "temp_anomaly")
        snow_cover_score = _finite(snow_cover_score, "snow_cover_score")

        hsi = self.calculate_heat_stress_index(weather, temp_anomaly)
        csi = self.calculate_cold_stress_index(weather, snow_cover_score)
        aqri = self.calculate_air_quality_risk_index(air_quality)

        risk_score = self.calculate_risk_score(RiskIndices(hsi=hsi, csi=csi, aqri=aqri))
        confidence = self.calculate_data_confidence(weather, air_quality)

        logger.debug(
            f"Risk for {date}: hsi={hsi} csi={csi} aqri={aqri} "
            f"score={risk_score} confidence={confidence}"
        )

        return RiskResult(
            hsi=hsi,
            csi=csi,
            aqri=aqri,
            risk_score=risk_score,
            raw=RawReadings(weather=weather, air_quality=air_quality),
            confidence=confidence,
            date=date,
        )


def calculate_complete_risk(
    weather: WeatherInput,
    air_quality: AirQualityInput,
    temp_anomaly: float = 0,
    snow_cover_score: float = 0,
    *,
    date: str,
    config: Optional[RiskConfig] = None
) -> RiskResult:
    """Calculate a complete RiskResult without keeping an engine around"""
    return RiskEngine(config).calculate_complete_risk(
        weather, air_quality, temp_anomaly, snow_cover_score, date=date
    )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    print("\n" + "=" * 60)
    print("CLIMATE HEALTH RISK ENGINE")
    print("=" * 60 + "\n")

    engine = RiskEngine()

    weather = WeatherReading(
        temperature=38,
        humidity=65,
        wind_speed=12,
        uv_index=9,
        wind_chill=38,
        precipitation=0,
    )
    air_quality = AirQualityReading(pm25=55, pm10=80, no2=None, station="Downtown", distance=30)

    result = engine.calculate_complete_risk(
        weather, air_quality, temp_anomaly=1.5, date="2024-07-15T12:00:00Z"
    )

    print("Sub-indices:")
    print(f"  Heat Stress Index:        {result.hsi}/100")
    print(f"  Cold Stress Index:        {result.csi}/100")
    print(f"  Air Quality Risk Index:   {result.aqri}/100")
    print(f"\nRisk Score:  {result.risk_score}/100 ({result.risk_level.value})")
    print(f"Confidence:  {result.confidence}/100")
    print(f"\n{result.to_json()}")
