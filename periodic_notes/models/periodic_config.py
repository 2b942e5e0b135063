"""Granularity enumeration and per-granularity note configuration."""

from enum import Enum

from pydantic import BaseModel


class Granularity(str, Enum):
    """Unit of time a periodic note covers."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"


# Fixed ordering used when partitioning granularities
GRANULARITIES: list[Granularity] = [
    Granularity.DAY,
    Granularity.WEEK,
    Granularity.MONTH,
    Granularity.QUARTER,
    Granularity.YEAR,
]


class PeriodicConfig(BaseModel):
    """How notes of one granularity are created and located."""

    enabled: bool = False
    folder: str = ""
    format: str = ""
    template_path: str | None = None
