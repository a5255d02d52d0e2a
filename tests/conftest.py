"""Shared pytest fixtures for the coordinate normalizer test suite."""

import pytest

# ---------------------------------------------------------------------------
# Reference locations
# ---------------------------------------------------------------------------

# Melbourne CBD, as the maps SDK reports it
MELBOURNE_LAT = -37.8136
MELBOURNE_LON = 144.9631

# ---------------------------------------------------------------------------
# Record fixtures, one per upstream producer
# ---------------------------------------------------------------------------


@pytest.fixture()
def maps_sdk_record() -> dict[str, object]:
    """Record in the maps SDK ``{latitude, longitude}`` shape."""
    return {"name": "Acme Fabrication", "latitude": MELBOURNE_LAT, "longitude": MELBOURNE_LON}


@pytest.fixture()
def geojson_record() -> dict[str, object]:
    """Record from the GeoJSON-emitting backend (``[lon, lat]``)."""
    return {
        "name": "Geo Pty Ltd",
        "location": {"type": "Point", "coordinates": [MELBOURNE_LON, MELBOURNE_LAT]},
    }


@pytest.fixture()
def legacy_coord_record() -> dict[str, object]:
    """Record carrying the legacy backend ``coord`` field (``[lon, lat]``)."""
    return {"name": "Legacy Co", "coord": {"coordinates": [MELBOURNE_LON, MELBOURNE_LAT]}}


@pytest.fixture()
def spreadsheet_record() -> dict[str, object]:
    """Record from a spreadsheet export with comma decimal separators."""
    return {"name": "Export Row 17", "latitude": "-37,8136", "longitude": "144,9631"}


@pytest.fixture()
def swapped_record() -> dict[str, object]:
    """Record with latitude and longitude stored in each other's field."""
    return {"name": "Swapped Ltd", "latitude": 144.96, "longitude": -37.8}


@pytest.fixture()
def out_of_range_record() -> dict[str, object]:
    """Record whose latitude cannot be repaired by swapping."""
    return {"name": "Nowhere Inc", "latitude": -120, "longitude": 144.96}


@pytest.fixture()
def missing_record() -> dict[str, object]:
    """Record with no coordinate-bearing fields."""
    return {"name": "No Coords"}
