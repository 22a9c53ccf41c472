"""
Calendar Series Factories — помесячные и поквартальные ряды

Фабрики строят TimeSeries с годовым циклом из года и месяца
(или месяца и дня, или квартала) первого наблюдения. Начальный момент —
полночь указанной даты в часовом поясе конфигурации
(по умолчанию America/Chicago).

Правила:
- start_month ∈ [1, 12], start_day ∈ [1, 31], start_quarter ∈ [1, 4]
- все поля даты — целые числа (float и bool → ValueError)
- квартал q начинается с месяца 3q - 2
- несуществующая дата (30 февраля) → ValueError из datetime
"""

import logging
from collections.abc import Iterable
from datetime import MAXYEAR, MINYEAR, datetime

from signaflo.core.math.numerical_safeguards import validate_in_range
from signaflo.core.timeseries.config import (
    DEFAULT_CALENDAR_CONFIG,
    MONTHS_PER_YEAR,
    QUARTERS_PER_YEAR,
    SeriesCalendarConfig,
)
from signaflo.core.timeseries.series import TimeSeries

logger = logging.getLogger(__name__)


def _validate_calendar_field(value: int, name: str, min_value: int, max_value: int) -> None:
    """
    Проверка поля даты: целое число (не bool) в диапазоне [min_value, max_value].

    Raises:
        ValueError: Если value не int или вне диапазона
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    validate_in_range(value, name, min_value, max_value)


def _new_series(
    start_year: int,
    start_month: int,
    start_day: int,
    observations_per_cycle: int,
    series: Iterable[float],
    config: SeriesCalendarConfig | None,
) -> TimeSeries:
    config = config or DEFAULT_CALENDAR_CONFIG
    start = datetime(start_year, start_month, start_day, tzinfo=config.zone())

    result = TimeSeries(
        cycle=config.cycle,
        observations_per_cycle=observations_per_cycle,
        start=start,
        observations=tuple(float(x) for x in series),
    )

    logger.debug(
        "Created time series: start=%s zone=%s observations_per_cycle=%d size=%d",
        start.isoformat(),
        config.zone_id,
        observations_per_cycle,
        len(result),
    )
    return result


def new_monthly_series(
    start_year: int,
    start_month: int,
    *series: float,
    config: SeriesCalendarConfig | None = None,
) -> TimeSeries:
    """
    Помесячный ряд с годовым циклом, начиная с первого дня месяца.

    Args:
        start_year: Год первого наблюдения
        start_month: Месяц первого наблюдения (1 — январь, 12 — декабрь)
        *series: Наблюдения
        config: Конфигурация календаря (default: DEFAULT_CALENDAR_CONFIG)

    Returns:
        TimeSeries с 12 наблюдениями за цикл

    Raises:
        ValueError: Если start_month не целое или вне [1, 12]

    Examples:
        >>> new_monthly_series(2017, 1, 1.0, 2.0, 3.0).observation_period_months
        1
    """
    _validate_calendar_field(start_year, "start_year", MINYEAR, MAXYEAR)
    _validate_calendar_field(start_month, "start_month", 1, MONTHS_PER_YEAR)
    return _new_series(start_year, start_month, 1, MONTHS_PER_YEAR, series, config)


def new_monthly_series_from_day(
    start_year: int,
    start_month: int,
    start_day: int,
    *series: float,
    config: SeriesCalendarConfig | None = None,
) -> TimeSeries:
    """
    Помесячный ряд с годовым циклом, начиная с указанного дня.

    Args:
        start_year: Год первого наблюдения
        start_month: Месяц первого наблюдения (1..12)
        start_day: День первого наблюдения (1..31)
        *series: Наблюдения
        config: Конфигурация календаря (default: DEFAULT_CALENDAR_CONFIG)

    Raises:
        ValueError: Если месяц или день вне диапазона, или дата не существует
    """
    _validate_calendar_field(start_year, "start_year", MINYEAR, MAXYEAR)
    _validate_calendar_field(start_month, "start_month", 1, MONTHS_PER_YEAR)
    _validate_calendar_field(start_day, "start_day", 1, 31)
    return _new_series(start_year, start_month, start_day, MONTHS_PER_YEAR, series, config)


def new_quarterly_series(
    start_year: int,
    start_quarter: int,
    *series: float,
    config: SeriesCalendarConfig | None = None,
) -> TimeSeries:
    """
    Поквартальный ряд с годовым циклом.

    Квартал q начинается первого числа месяца 3q - 2
    (1 → январь, 2 → апрель, 3 → июль, 4 → октябрь).

    Raises:
        ValueError: Если start_quarter не целое или вне [1, 4]
    """
    _validate_calendar_field(start_year, "start_year", MINYEAR, MAXYEAR)
    _validate_calendar_field(start_quarter, "start_quarter", 1, QUARTERS_PER_YEAR)
    start_month = 3 * start_quarter - 2
    return _new_series(start_year, start_month, 1, QUARTERS_PER_YEAR, series, config)
