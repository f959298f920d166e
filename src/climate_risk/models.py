"""
Data models for the climate health risk engine

Readings and results are frozen pydantic models. Python attributes are
snake_case; the JSON shape uses camelCase aliases (``riskScore``,
``raw.airQuality``, ``windChill``) so serialized results stay compatible
with existing consumers.
"""

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )


class WeatherReading(_FrozenModel):
    """Parsed weather observation for one location and day"""

    temperature: float  # °C
    humidity: float  # %, 0-100
    wind_speed: float  # km/h
    uv_index: float
    wind_chill: float  # °C
    precipitation: float  # mm


class AirQualityReading(_FrozenModel):
    """
    Parsed air-quality observation

    A pollutant set to None means the provider had no data for it, which is
    not the same as a measured zero.
    """

    pm25: Optional[float] = None
    pm10: Optional[float] = None
    no2: Optional[float] = None
    station: Optional[str] = None
    distance: Optional[float] = None  # km from sensor to point of interest

    def pollutants(self) -> Dict[str, Optional[float]]:
        return {"pm25": self.pm25, "pm10": self.pm10, "no2": self.no2}

    @property
    def has_pollutant_data(self) -> bool:
        return any(v is not None for v in self.pollutants().values())


class RiskIndices(_FrozenModel):
    hsi: int = Field(ge=0, le=100)
    csi: int = Field(ge=0, le=100)
    aqri: int = Field(ge=0, le=100)


class RawReadings(_FrozenModel):
    weather: WeatherReading
    air_quality: AirQualityReading


class RiskLevel(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    EXTREME = "Extreme"


def classify_risk_level(score: float) -> RiskLevel:
    """Map a 0-100 score onto a risk band"""
    if score >= 75:
        return RiskLevel.EXTREME
    elif score >= 50:
        return RiskLevel.HIGH
    elif score >= 25:
        return RiskLevel.MODERATE
    return RiskLevel.LOW


class RiskResult(_FrozenModel):
    """Output of a complete risk calculation"""

    hsi: int = Field(ge=0, le=100)
    csi: int = Field(ge=0, le=100)
    aqri: int = Field(ge=0, le=100)
    risk_score: int = Field(ge=0, le=100)
    raw: RawReadings
    confidence: int = Field(ge=0, le=100)
    date: str

    @property
    def indices(self) -> RiskIndices:
        return RiskIndices(hsi=self.hsi, csi=self.csi, aqri=self.aqri)

    @property
    def risk_level(self) -> RiskLevel:
        return classify_risk_level(self.risk_score)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, data: str) -> "RiskResult":
        return cls.model_validate_json(data)
