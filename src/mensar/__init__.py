"""mensar: show today's menu of an ETH Zurich mensa in the terminal.

Fetches the facility catalog and weekly rotas from the cookpit publication
service, resolves the requested mensa and renders the menu for one day.
"""

__version__ = "0.3.0"

from mensar.errors import (
    ConfigError,
    DefaultsError,
    DeserializationError,
    FacilityNotFound,
    MensarError,
    NoDailyMeals,
    TransportError,
)
from mensar.models import Facility, LineElement, WeeklyRota
from mensar.navigator import resolve_menu
from mensar.render import render_menu
from mensar.resolver import list_published, resolve

__all__ = [
    "ConfigError",
    "DefaultsError",
    "DeserializationError",
    "Facility",
    "FacilityNotFound",
    "LineElement",
    "MensarError",
    "NoDailyMeals",
    "TransportError",
    "WeeklyRota",
    "list_published",
    "render_menu",
    "resolve",
    "resolve_menu",
]
