"""
Конфигурация календаря для фабрик временных рядов.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final
from zoneinfo import ZoneInfo


class TimeUnit(str, Enum):
    """Единица длины цикла временного ряда"""

    YEARS = "years"


# Часовой пояс, в котором фиксируется полночь первого наблюдения
DEFAULT_ZONE_ID: Final[str] = "America/Chicago"

MONTHS_PER_YEAR: Final[int] = 12
QUARTERS_PER_YEAR: Final[int] = 4


@dataclass(frozen=True)
class SeriesCalendarConfig:
    """Конфигурация календаря.

    - zone_id: IANA идентификатор часового пояса для начального момента
    - cycle: единица цикла (сезонности) создаваемых рядов
    """

    zone_id: str = DEFAULT_ZONE_ID
    cycle: TimeUnit = TimeUnit.YEARS

    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.zone_id)


DEFAULT_CALENDAR_CONFIG: Final[SeriesCalendarConfig] = SeriesCalendarConfig()
