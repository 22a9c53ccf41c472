"""
Time series module для signaflo

Неизменяемый временной ряд и календарные фабрики для него.
"""

from signaflo.core.timeseries.config import (
    DEFAULT_CALENDAR_CONFIG,
    DEFAULT_ZONE_ID,
    MONTHS_PER_YEAR,
    QUARTERS_PER_YEAR,
    SeriesCalendarConfig,
    TimeUnit,
)
from signaflo.core.timeseries.factories import (
    new_monthly_series,
    new_monthly_series_from_day,
    new_quarterly_series,
)
from signaflo.core.timeseries.series import TimeSeries, add_months

__all__ = [
    # Config
    "DEFAULT_CALENDAR_CONFIG",
    "DEFAULT_ZONE_ID",
    "MONTHS_PER_YEAR",
    "QUARTERS_PER_YEAR",
    "SeriesCalendarConfig",
    "TimeUnit",
    # Model
    "TimeSeries",
    "add_months",
    # Factories
    "new_monthly_series",
    "new_monthly_series_from_day",
    "new_quarterly_series",
]
