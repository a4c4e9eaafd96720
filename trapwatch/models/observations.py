"""
Observation models for trap check data.

An Observation is the validated boundary shape of a record fetched from the
record store. RatedObservation and DailyRatePoint are engine-owned, derived on
every call and never persisted.
"""

import datetime as dt
from typing import Any, Iterable, Iterator, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class Observation(BaseModel):
    """
    A dated trap check recording insects newly caught since the previous check.

    Attributes:
        id: Opaque identifier owned by the record store
        date: Calendar day of the check (no time-of-day semantics)
        count: Insects caught since the previous check (a delta)
        is_baseline: Trap setup/reset marker; carries no rate
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: Union[int, str] = Field(description="Record store identifier")
    date: dt.date = Field(description="Calendar day of the check")
    count: int = Field(ge=0, description="New insects since previous check")
    is_baseline: bool = Field(
        default=False,
        alias="isBaseline",
        description="Trap setup/reset event",
    )

    @field_validator("date", mode="before")
    @classmethod
    def truncate_to_day(cls, v: Any) -> Any:
        """Accept ISO timestamps and datetimes, keeping only the calendar day."""
        if isinstance(v, dt.datetime):
            return v.date()
        if isinstance(v, str) and "T" in v:
            return v.split("T", 1)[0]
        return v


class RatedObservation(Observation):
    """
    An Observation with its derived daily rate and coverage interval.

    ``coverage_start``/``coverage_end`` form the inclusive calendar-day
    interval the rate is attributed to. Both are None exactly when ``rate``
    is None.
    """

    days_since_previous: Optional[int] = Field(
        default=None,
        ge=0,
        description="Calendar days since the preceding observation",
    )
    rate: Optional[float] = Field(default=None, ge=0, description="Insects per day")
    coverage_start: Optional[dt.date] = Field(default=None)
    coverage_end: Optional[dt.date] = Field(default=None)

    @property
    def has_coverage(self) -> bool:
        return self.rate is not None and self.coverage_start is not None

    def covers(self, day: dt.date) -> bool:
        """True when ``day`` lies in this observation's coverage interval."""
        if not self.has_coverage:
            return False
        return self.coverage_start <= day <= self.coverage_end


class DailyRatePoint(BaseModel):
    """
    One calendar day of the continuous rate signal used by charts.

    Attributes:
        date: Calendar day
        timestamp: Epoch milliseconds at UTC midnight of ``date``
        rate: Rate of the covering observation, 0.0 when uncovered
        count: The observation's own count, only on observation days
        days_since_previous: Gap of the covering observation
        is_observation_day: True iff an observation falls on ``date``
    """

    model_config = ConfigDict(frozen=True)

    date: dt.date
    timestamp: int
    rate: float = Field(ge=0)
    count: Optional[int] = None
    days_since_previous: Optional[int] = None
    is_observation_day: bool = False

    @staticmethod
    def timestamp_for(day: dt.date) -> int:
        midnight = dt.datetime(day.year, day.month, day.day, tzinfo=dt.timezone.utc)
        return int(midnight.timestamp() * 1000)


_observation_list = TypeAdapter(list[Observation])


def parse_observations(records: Iterable[Any]) -> list[Observation]:
    """
    Validate raw record-store rows into Observations.

    Rows may be mappings using either ``is_baseline`` or ``isBaseline`` keys,
    or already-built Observation instances (passed through unchanged).

    Raises:
        pydantic.ValidationError: on negative counts, unparseable dates or
            missing fields
    """
    return _observation_list.validate_python(list(records))


def day_range(start: dt.date, end: dt.date) -> Iterator[dt.date]:
    """Yield every calendar day from start to end inclusive."""
    day = start
    while day <= end:
        yield day
        day += dt.timedelta(days=1)
