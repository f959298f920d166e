"""
Exceptions for the climate health risk engine
"""


class ClimateRiskError(Exception):
    """Base exception for all climate risk errors"""


class InvalidReadingError(ClimateRiskError, ValueError):
    """Raised when a weather or air-quality reading fails validation"""


class ConfigError(ClimateRiskError):
    """Raised when a risk configuration cannot be read or is invalid"""
