"""
Batch scoring over pandas DataFrames

Each row holds one location's readings and is scored independently; rows
are never combined.
"""

import logging
from typing import Optional

import numpy as np
import pandas as pd

from .config import RiskConfig
from .exceptions import InvalidReadingError
from .risk_engine import RiskEngine

logger = logging.getLogger(__name__)

WEATHER_COLUMNS = (
    "temperature",
    "humidity",
    "wind_speed",
    "uv_index",
    "wind_chill",
    "precipitation",
)
AIR_QUALITY_COLUMNS = ("pm25", "pm10", "no2", "station", "distance")
SCORE_COLUMNS = ("hsi", "csi", "aqri", "risk_score", "confidence", "risk_level")


def _cell(row: pd.Series, column: str):
    value = row.get(column)
    if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
        return None
    if isinstance(value, np.generic):
        return value.item()
    return value


def _format_date(value) -> str:
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def score_frame(
    df: pd.DataFrame,
    date: str,
    config: Optional[RiskConfig] = None
) -> pd.DataFrame:
    """
    Score every row of a DataFrame of readings

    Args:
        df: One row per location with weather columns (temperature, humidity,
            wind_speed, uv_index, wind_chill, precipitation) and air quality
            columns (pm25, pm10, no2, station, distance). Missing or NaN
            pollutant cells mean no data. Optional temp_anomaly,
            snow_cover_score and date columns override the defaults per row.
        date: ISO-8601 timestamp used for rows without their own date
        config: Scoring configuration. If None, uses defaults.

    Returns:
        Copy of df with hsi, csi, aqri, risk_score, confidence and risk_level
        columns. Rows with invalid readings get NaN scores.
    """
    engine = RiskEngine(config)

    records = []
    for index, row in df.iterrows():
        weather = {column: _cell(row, column) for column in WEATHER_COLUMNS}
        air_quality = {column: _cell(row, column) for column in AIR_QUALITY_COLUMNS}
        row_date = _cell(row, "date")

        try:
            result = engine.calculate_complete_risk(
                weather,
                air_quality,
                temp_anomaly=_cell(row, "temp_anomaly") or 0,
                snow_cover_score=_cell(row, "snow_cover_score") or 0,
                date=_format_date(row_date) if row_date is not None else date,
            )
        except InvalidReadingError as e:
            logger.warning(f"Skipping row {index}: {e}")
            records.append({column: np.nan for column in SCORE_COLUMNS})
            continue

        records.append({
            "hsi": result.hsi,
            "csi": result.csi,
            "aqri": result.aqri,
            "risk_score": result.risk_score,
            "confidence": result.confidence,
            "risk_level": result.risk_level.value,
        })

    scores = pd.DataFrame(records, index=df.index, columns=list(SCORE_COLUMNS))
    logger.info(f"Scored {len(df)} rows")

    return pd.concat([df.drop(columns=list(SCORE_COLUMNS), errors="ignore"), scores], axis=1)
