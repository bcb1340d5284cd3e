"""Tests for the station record."""

from radiofav.core.station import FavoriteStation


def test_create_and_accessors() -> None:
    st = FavoriteStation.create(101700, "Radio Record", color="#00f")

    assert st.frequency == 101700
    assert st.title == "Radio Record"
    assert st.to_json() == {"frequency": 101700, "title": "Radio Record", "color": "#00f"}


def test_from_json_copies_input() -> None:
    raw = {"frequency": "88300", "title": None}
    st = FavoriteStation.from_json(raw)
    raw["title"] = "changed"

    assert st.frequency == 88300
    assert st.title == ""


def test_bad_frequency_reads_as_none() -> None:
    assert FavoriteStation({"frequency": "fm"}).frequency is None
    assert FavoriteStation({}).frequency is None


def test_label() -> None:
    assert FavoriteStation.create(101700, "Record").label() == "101.7 MHz  Record"
    assert FavoriteStation.create(88300).label() == "88.3 MHz"
    assert FavoriteStation({"title": "web"}).label() == "web"
    assert FavoriteStation({}).label() == "Unknown"
