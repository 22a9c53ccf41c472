"""
TimeSeries — неизменяемый ряд наблюдений с календарной привязкой

Immutable Pydantic модель: начальный момент (с часовым поясом), длина цикла
и последовательность вещественных наблюдений. Моменты наблюдений
вычисляются из начального момента шагом в целое число месяцев.
"""

import calendar
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from signaflo.core.timeseries.config import MONTHS_PER_YEAR, TimeUnit


def add_months(moment: datetime, months: int) -> datetime:
    """
    Сдвиг момента на целое число месяцев по настенному времени.

    День месяца ограничивается последним днём целевого месяца
    (31 января + 1 месяц → 28/29 февраля).

    Examples:
        >>> add_months(datetime(2017, 1, 31), 1)
        datetime.datetime(2017, 2, 28, 0, 0)
        >>> add_months(datetime(2017, 11, 1), 3)
        datetime.datetime(2018, 2, 1, 0, 0)
    """
    month_index = moment.month - 1 + months
    year = moment.year + month_index // MONTHS_PER_YEAR
    month = month_index % MONTHS_PER_YEAR + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


class TimeSeries(BaseModel):
    """
    Временной ряд с годовым циклом.

    Immutable модель (frozen=True): новые данные — новый экземпляр.
    """

    cycle: TimeUnit = Field(TimeUnit.YEARS, description="Единица длины цикла")
    observations_per_cycle: int = Field(
        ..., gt=0, description="Число наблюдений за цикл (12 — помесячно, 4 — поквартально)"
    )
    start: datetime = Field(..., description="Момент первого наблюдения (с часовым поясом)")
    observations: tuple[float, ...] = Field(default=(), description="Наблюдения")

    model_config = {"frozen": True}  # Immutable

    @field_validator("observations_per_cycle")
    @classmethod
    def validate_whole_months(cls, v: int) -> int:
        """Период наблюдения должен быть целым числом месяцев."""
        if MONTHS_PER_YEAR % v != 0:
            raise ValueError(
                f"observations_per_cycle {v} does not split a year into whole months"
            )
        return v

    @field_validator("start")
    @classmethod
    def validate_timezone_aware(cls, v: datetime) -> datetime:
        if v.tzinfo is None or v.utcoffset() is None:
            raise ValueError(f"start must be timezone aware, got naive {v.isoformat()}")
        return v

    @property
    def observation_period_months(self) -> int:
        return MONTHS_PER_YEAR // self.observations_per_cycle

    def __len__(self) -> int:
        return len(self.observations)

    def at(self, index: int) -> float:
        """Наблюдение по индексу (поддерживаются отрицательные индексы)."""
        return self.observations[index]

    def observation_times(self) -> list[datetime]:
        """Моменты всех наблюдений, начиная со start."""
        step = self.observation_period_months
        return [add_months(self.start, i * step) for i in range(len(self.observations))]

    def as_pairs(self) -> list[tuple[datetime, float]]:
        return list(zip(self.observation_times(), self.observations))
