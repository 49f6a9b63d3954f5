"""Facility lookup by loose, case-insensitive name search."""

from collections.abc import Iterable, Sequence

from mensar.errors import FacilityNotFound
from mensar.logging import get_logger
from mensar.models import Facility

log = get_logger(__name__)


def resolve(facilities: Sequence[Facility], query: str) -> Facility:
    """Find the first facility whose name contains ``query``.

    Matching is case-insensitive (``str.casefold``) substring search, so
    "poly" matches "Polyterrasse". Ties go to the earliest entry in catalog
    order; hidden facilities are matched too.

    Args:
        facilities: Facility catalog in service order.
        query: User-supplied (partial) facility name.

    Returns:
        The first matching Facility.

    Raises:
        FacilityNotFound: If no facility name contains the query.
    """
    needle = query.casefold()
    for facility in facilities:
        if needle in facility.facility_name.casefold():
            log.info(
                "facility_resolved",
                query=query,
                facility_id=facility.facility_id,
                facility_name=facility.facility_name,
            )
            return facility

    log.info("facility_not_found", query=query, candidates=len(facilities))
    raise FacilityNotFound(query)


def list_published(facilities: Iterable[Facility]) -> list[str]:
    """Names of publicly listed facilities, in catalog order."""
    return [f.facility_name for f in facilities if f.is_published]
