"""Tests for the identifier codec."""

import pytest
from beanie import PydanticObjectId

from vehicle_inventory.core.exceptions import InvalidIdentifier
from vehicle_inventory.core.identifiers import normalize, to_external, to_internal


VALID_ID = "65a1f0c2e4b0a1b2c3d4e5f6"


def test_to_internal_returns_object_id():
    assert to_internal(VALID_ID) == PydanticObjectId(VALID_ID)


def test_round_trip_is_idempotent():
    first = to_internal(VALID_ID)
    assert to_internal(to_external(first)) == first


def test_to_external_is_plain_string():
    oid = PydanticObjectId()
    external = to_external(oid)
    assert isinstance(external, str)
    assert len(external) == 24


def test_normalize_lowercases_hex():
    assert normalize(VALID_ID.upper()) == VALID_ID


@pytest.mark.parametrize(
    "value",
    ["", "abc", "z" * 24, "65a1f0c2e4b0a1b2c3d4e5f", "twelve-chars", None, 12345],
)
def test_to_internal_rejects_malformed_values(value):
    with pytest.raises(InvalidIdentifier):
        to_internal(value)
