"""Pydantic models for the cookpit publication service payloads.

Field names follow Python conventions; the wire format uses kebab-case keys
(``facility-id``, ``day-of-week-array``, ...), mapped through an alias generator.
Optional fields mirror what the service actually omits: an absent
``opening-hour-array`` means the facility is closed that day, an absent
``meal`` means nothing is assigned to the station.
"""

from datetime import date, time

from pydantic import BaseModel, ConfigDict, Field


def _kebab(name: str) -> str:
    return name.replace("_", "-")


class CookpitModel(BaseModel):
    """Common configuration for all payload models."""

    model_config = ConfigDict(
        alias_generator=_kebab,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class Facility(CookpitModel):
    """A cafeteria or other catering location in the catalog."""

    facility_id: int
    facility_name: str
    facility_url: str | None = None

    building: str | None = None
    floor: str | None = None
    address_line_2: str | None = None
    address_line_3: str | None = None
    phone: str | None = None

    caterer_name: str | None = None
    caterer_url: str | None = None

    publication_type_code: int  # 1 = publicly listed
    publication_type_desc: str | None = None
    publication_type_desc_short: str | None = None

    @property
    def is_published(self) -> bool:
        return self.publication_type_code == 1


class MealPrice(CookpitModel):
    """Price of a meal for one customer group (students, staff, guests)."""

    price: float
    customer_group_code: int | None = None
    customer_group_position: int | None = None
    customer_group_desc: str | None = None
    customer_group_desc_short: str | None = None


class Meal(CookpitModel):
    name: str
    description: str = ""
    meal_price_array: list[MealPrice] = Field(default_factory=list)


class LineElement(CookpitModel):
    """A serving station, optionally with the meal it currently serves."""

    name: str
    meal: Meal | None = None


class TimeRange(CookpitModel):
    time_from: time
    time_to: time


class MealTime(TimeRange):
    """Named serving window (e.g. "Mittag") within an opening-hour block."""

    name: str
    line_array: list[LineElement] | None = None


class OpeningHour(TimeRange):
    meal_time_array: list[MealTime] | None = None


class DayOfWeek(CookpitModel):
    day_of_week_code: int  # ISO weekday, 1 = Monday
    day_of_week_desc: str | None = None
    day_of_week_desc_short: str | None = None
    opening_hour_array: list[OpeningHour] | None = None


class WeeklyRota(CookpitModel):
    """Weekly schedule of one facility, valid over a date interval."""

    weekly_rota_id: int
    facility_id: int
    valid_from: date
    valid_to: date | None = None  # open-ended when absent
    day_of_week_array: list[DayOfWeek] = Field(default_factory=list)

    def covers(self, day: date) -> bool:
        """Return True if ``day`` lies within the validity interval."""
        if self.valid_from > day:
            return False
        return self.valid_to is None or self.valid_to >= day


class FacilityCatalog(CookpitModel):
    """Envelope of the /facilities response."""

    facility_array: list[Facility] = Field(default_factory=list)


class WeeklyRotaCollection(CookpitModel):
    """Envelope of the /weeklyrotas response."""

    weekly_rota_array: list[WeeklyRota] = Field(default_factory=list)
