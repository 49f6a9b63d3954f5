"""Narrow a set of weekly rotas down to the line elements served on one day.

The upstream schedule is a deep tree::

    WeeklyRota -> DayOfWeek -> OpeningHour -> MealTime -> LineElement

Each step below picks exactly one node of the next level, or returns None
when that level is empty. ``resolve_menu`` threads the steps and turns the
first None into a NoDailyMeals error naming the step that failed.

Opening-hour blocks and meal-time slots are picked by a selection policy.
The default, ``first_entry``, takes the first one listed, which matches
what facilities publish in practice (a single block with a single slot).
Facilities with split hours would need a time-aware policy passed in instead.
"""

from collections.abc import Callable, Sequence
from datetime import date
from typing import TypeVar

from mensar.errors import NoDailyMeals
from mensar.logging import get_logger
from mensar.models import DayOfWeek, LineElement, MealTime, OpeningHour, WeeklyRota

log = get_logger(__name__)

T = TypeVar("T")

SelectionPolicy = Callable[[Sequence[T]], T | None]


def first_entry(entries: Sequence[T]) -> T | None:
    """Selection policy: the first entry, or None for an empty sequence."""
    return entries[0] if entries else None


def select_rota(
    rotas: Sequence[WeeklyRota], facility_id: int, target_date: date
) -> WeeklyRota | None:
    """First rota of the facility whose validity interval contains the date.

    Overlapping rotas are not an error; input order decides.
    """
    for rota in rotas:
        if rota.facility_id == facility_id and rota.covers(target_date):
            return rota
    return None


def select_day(rota: WeeklyRota, weekday: int) -> DayOfWeek | None:
    for day in rota.day_of_week_array:
        if day.day_of_week_code == weekday:
            return day
    return None


def select_opening_hour(
    day: DayOfWeek, policy: SelectionPolicy = first_entry
) -> OpeningHour | None:
    return policy(day.opening_hour_array or [])


def select_meal_time(
    opening_hour: OpeningHour, policy: SelectionPolicy = first_entry
) -> MealTime | None:
    return policy(opening_hour.meal_time_array or [])


def resolve_menu(
    rotas: Sequence[WeeklyRota],
    facility_id: int,
    target_date: date,
    target_weekday: int | None = None,
    *,
    facility_name: str | None = None,
    opening_hour_policy: SelectionPolicy = first_entry,
    meal_time_policy: SelectionPolicy = first_entry,
) -> list[LineElement]:
    """Return the line elements a facility serves on ``target_date``.

    Args:
        rotas: Weekly rotas as delivered by the service (all facilities).
        facility_id: Facility to look up.
        target_date: Day whose menu is wanted.
        target_weekday: ISO weekday (1 = Monday .. 7 = Sunday). Derived from
            ``target_date`` when omitted.
        facility_name: Name used in the error message (defaults to the id).
        opening_hour_policy: Picks one block out of a day's opening hours.
        meal_time_policy: Picks one slot out of a block's meal times.

    Returns:
        The selected slot's line elements, in published order.

    Raises:
        NoDailyMeals: If any level of the schedule is missing for that day.
    """
    if target_weekday is None:
        target_weekday = target_date.isoweekday()
    label = facility_name or str(facility_id)

    def closed(reason: str) -> NoDailyMeals:
        log.info(
            "no_daily_meals",
            facility=label,
            date=target_date.isoformat(),
            weekday=target_weekday,
            reason=reason,
        )
        return NoDailyMeals(label, reason)

    rota = select_rota(rotas, facility_id, target_date)
    if rota is None:
        raise closed("no_rota")
    log.debug("rota_selected", weekly_rota_id=rota.weekly_rota_id)

    day = select_day(rota, target_weekday)
    if day is None:
        raise closed("no_day")

    opening_hour = select_opening_hour(day, opening_hour_policy)
    if opening_hour is None:
        raise closed("no_opening_hours")

    meal_time = select_meal_time(opening_hour, meal_time_policy)
    if meal_time is None:
        raise closed("no_meal_times")

    if not meal_time.line_array:
        raise closed("no_lines")

    log.info(
        "menu_resolved",
        facility=label,
        meal_time=meal_time.name,
        lines=len(meal_time.line_array),
    )
    return list(meal_time.line_array)
