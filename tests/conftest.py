"""Shared payload builders for the cookpit service responses."""

import logging

import pytest
import structlog

from mensar.config import MensarConfig
from mensar.models import FacilityCatalog, WeeklyRotaCollection


def facility_payload(facility_id, name, publication_type_code=1):
    return {
        "facility-id": facility_id,
        "facility-name": name,
        "facility-url": f"https://ethz.ch/mensa/{facility_id}",
        "building": "MM",
        "floor": "B",
        "address-line-2": "Leonhardstrasse 34",
        "address-line-3": "8092 Zürich",
        "publication-type-code": publication_type_code,
        "publication-type-desc": "public" if publication_type_code == 1 else "internal",
        "publication-type-desc-short": "pub",
    }


def meal_payload(name, description="", prices=()):
    return {
        "name": name,
        "description": description,
        "meal-price-array": [
            {
                "price": price,
                "customer-group-code": position + 1,
                "customer-group-position": (position + 1) * 10,
                "customer-group-desc": ["students", "staff", "guests"][position % 3],
                "customer-group-desc-short": ["stud", "int", "ext"][position % 3],
            }
            for position, price in enumerate(prices)
        ],
    }


def line_payload(name, meal=None):
    payload = {"name": name}
    if meal is not None:
        payload["meal"] = meal
    return payload


def meal_time_payload(lines, name="Mittag", time_from="11:00", time_to="13:30"):
    payload = {"name": name, "time-from": time_from, "time-to": time_to}
    if lines is not None:
        payload["line-array"] = lines
    return payload


def opening_hour_payload(meal_times, time_from="11:00", time_to="14:00"):
    payload = {"time-from": time_from, "time-to": time_to}
    if meal_times is not None:
        payload["meal-time-array"] = meal_times
    return payload


def day_payload(code, opening_hours=None):
    names = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
    payload = {
        "day-of-week-code": code,
        "day-of-week-desc": names[code - 1],
        "day-of-week-desc-short": names[code - 1][:2],
    }
    if opening_hours is not None:
        payload["opening-hour-array"] = opening_hours
    return payload


def rota_payload(rota_id, facility_id, valid_from, days, valid_to=None):
    payload = {
        "weekly-rota-id": rota_id,
        "facility-id": facility_id,
        "valid-from": valid_from,
        "day-of-week-array": days,
    }
    if valid_to is not None:
        payload["valid-to"] = valid_to
    return payload


def soup_day(code=3):
    """A day with station A (no meal) and station B serving soup."""
    lines = [
        line_payload("A"),
        line_payload("B", meal_payload("Soup", "Tomato soup with basil", prices=(8.5, 12.0))),
    ]
    return day_payload(code, [opening_hour_payload([meal_time_payload(lines)])])


@pytest.fixture
def catalog_payload():
    return {
        "facility-array": [
            facility_payload(1, "Polyterrasse", 1),
            facility_payload(2, "Polybahn", 0),
            facility_payload(3, "Clausiusbar", 1),
        ]
    }


@pytest.fixture
def facilities(catalog_payload):
    return FacilityCatalog.model_validate(catalog_payload).facility_array


@pytest.fixture
def rotas_payload():
    return {"weekly-rota-array": [rota_payload(100, 1, "2024-01-01", [soup_day(3)])]}


@pytest.fixture
def rotas(rotas_payload):
    return WeeklyRotaCollection.model_validate(rotas_payload).weekly_rota_array


@pytest.fixture
def config(tmp_path):
    return MensarConfig(
        base_url="https://cookpit.test/v1",
        data_dir=tmp_path / "data",
        _env_file=None,
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo setup_logging so later tests do not write to a closed capture stream."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers = handlers
    root.setLevel(level)
