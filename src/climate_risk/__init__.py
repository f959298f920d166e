"""
Climate Health Risk Engine

Calculate heat stress, cold stress and air quality risk indices, a composite
risk score and data confidence from weather and air-quality readings.
"""

from .alerts import Alert, evaluate_alerts
from .batch import score_frame
from .config import (
    DEFAULT_RISK_CONFIG,
    RiskConfig,
    RiskThresholds,
    RiskWeights,
    load_config,
)
from .exceptions import ClimateRiskError, ConfigError, InvalidReadingError
from .models import (
    AirQualityReading,
    RawReadings,
    RiskIndices,
    RiskLevel,
    RiskResult,
    WeatherReading,
    classify_risk_level,
)
from .risk_engine import RiskEngine, calculate_complete_risk, normalize

__all__ = [
    "AirQualityReading",
    "Alert",
    "ClimateRiskError",
    "ConfigError",
    "DEFAULT_RISK_CONFIG",
    "InvalidReadingError",
    "RawReadings",
    "RiskConfig",
    "RiskEngine",
    "RiskIndices",
    "RiskLevel",
    "RiskResult",
    "RiskThresholds",
    "RiskWeights",
    "WeatherReading",
    "calculate_complete_risk",
    "classify_risk_level",
    "evaluate_alerts",
    "load_config",
    "normalize",
    "score_frame",
]

__version__ = "1.0.0"
