"""
Tests for mensar.resolver
"""

import pytest

from mensar.errors import FacilityNotFound
from mensar.resolver import list_published, resolve


def test_query_resolves_first_match_in_catalog_order(facilities):
    assert resolve(facilities, "poly").facility_id == 1


def test_match_is_case_insensitive_substring(facilities):
    assert resolve(facilities, "TERRASSE").facility_id == 1
    assert resolve(facilities, "usbar").facility_id == 3


def test_hidden_facilities_can_be_resolved(facilities):
    assert resolve(facilities, "polybahn").facility_id == 2


def test_unknown_query_raises(facilities):
    with pytest.raises(FacilityNotFound) as excinfo:
        resolve(facilities, "fusion")

    assert excinfo.value.query == "fusion"
    assert str(excinfo.value) == "could not find facility `fusion`"


def test_empty_catalog_raises():
    with pytest.raises(FacilityNotFound):
        resolve([], "poly")


def test_list_only_published_in_catalog_order(facilities):
    assert list_published(facilities) == ["Polyterrasse", "Clausiusbar"]
