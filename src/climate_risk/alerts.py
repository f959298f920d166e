"""
Threshold alerts

Turns a RiskResult into alerts for every sub-index that reaches its
configured threshold.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

from .config import DEFAULT_RISK_CONFIG, RiskConfig
from .models import RiskResult, classify_risk_level

logger = logging.getLogger(__name__)

# (alert type, index attribute, display name)
ALERT_INDICES: Tuple[Tuple[str, str, str], ...] = (
    ("heat", "hsi", "Heat Stress Index"),
    ("cold", "csi", "Cold Stress Index"),
    ("air_quality", "aqri", "Air Quality Risk Index"),
)

ALERT_TITLES = {
    "heat": "Extreme heat warning",
    "cold": "Cold stress warning",
    "air_quality": "Poor air quality alert",
}


class Alert(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: str
    severity: str
    neighborhoods: List[str]
    message: str
    timestamp: str


def evaluate_alerts(
    result: RiskResult,
    config: Optional[RiskConfig] = None,
    neighborhoods: Sequence[str] = ()
) -> List[Alert]:
    """
    Build alerts for sub-indices at or above their thresholds

    Args:
        result: Output of RiskEngine.calculate_complete_risk
        config: Supplies thresholds. If None, uses defaults.
        neighborhoods: Areas the result applies to, copied into each alert

    Returns:
        Alerts in heat, cold, air quality order; empty if nothing is breached
    """
    config = config if config is not None else DEFAULT_RISK_CONFIG

    alerts = []
    for alert_type, attr, label in ALERT_INDICES:
        value = getattr(result, attr)
        threshold = getattr(config.thresholds, attr)

        if value < threshold:
            continue

        alerts.append(Alert(
            id=f"{alert_type}-{result.date}",
            type=alert_type,
            severity=classify_risk_level(value).value.lower(),
            neighborhoods=list(neighborhoods),
            message=f"{ALERT_TITLES[alert_type]}: {label} at {value}.",
            timestamp=result.date,
        ))

    if alerts:
        logger.info(f"{len(alerts)} threshold alert(s) for {result.date}")

    return alerts
