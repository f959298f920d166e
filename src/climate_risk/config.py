"""
Risk configuration

Weights are part of the configuration contract but are reserved: the
aggregate risk score uses a fixed 85/15 split and never reads them.
Thresholds drive the alerting in ``climate_risk.alerts``.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CLIMATE_RISK_CONFIG"


class _ConfigModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )


class RiskWeights(_ConfigModel):
    """Relative importance of heat, cold and air contributions (reserved)"""

    heat: float = Field(0.4, ge=0)
    cold: float = Field(0.3, ge=0)
    air: float = Field(0.3, ge=0)


class RiskThresholds(_ConfigModel):
    """Per-index alerting thresholds"""

    hsi: float = Field(70, ge=0, le=100)
    csi: float = Field(60, ge=0, le=100)
    aqri: float = Field(65, ge=0, le=100)


class RiskConfig(_ConfigModel):
    weights: RiskWeights = RiskWeights()
    thresholds: RiskThresholds = RiskThresholds()

    @field_validator("weights")
    @classmethod
    def _normalize_weights(cls, weights: RiskWeights) -> RiskWeights:
        total_weight = weights.heat + weights.cold + weights.air
        if total_weight == 0:
            raise ValueError("weights must not all be zero")

        # Validate weights sum to 1.0
        if not np.isclose(total_weight, 1.0):
            logger.warning(f"Weights sum to {total_weight:.2f}, normalizing to 1.0")
            weights = RiskWeights(
                heat=weights.heat / total_weight,
                cold=weights.cold / total_weight,
                air=weights.air / total_weight,
            )
        return weights


DEFAULT_RISK_CONFIG = RiskConfig()


def load_config(path: Optional[Union[str, Path]] = None) -> RiskConfig:
    """
    Load a risk configuration from a JSON file

    Args:
        path: JSON file to read. If None, the CLIMATE_RISK_CONFIG environment
            variable is consulted; if that is unset too, defaults are returned.

    Returns:
        RiskConfig (keys may be camelCase or snake_case; omitted sections
        keep their defaults)
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
        if not path:
            return DEFAULT_RISK_CONFIG

    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read risk config {path}: {e}") from e

    try:
        config = RiskConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid risk config {path}: {e}") from e

    logger.info(f"Loaded risk config from {path}")
    return config
