"""
Unit tests for trips, checklists and locations.
"""
import datetime

from fishing_companion.schemas import LocationIn, TripIn
from fishing_companion.storage import LOCATIONS_KEY, TRIPS_KEY
from fishing_companion.trips import DEFAULT_CHECKLIST, LocationService, TripService

TODAY = datetime.date(2025, 6, 15)
ONE_DAY = datetime.timedelta(days=1)


def test_add_trip_seeds_default_checklist(store):
    """Test a new trip gets the fifteen default items, all unchecked."""
    trip = TripService(store).add(TripIn(name="Opening day", date=TODAY))

    assert [i.name for i in trip.checklist] == DEFAULT_CHECKLIST
    assert len(trip.checklist) == 15
    assert not any(i.checked for i in trip.checklist)
    assert len({i.id for i in trip.checklist}) == 15


def test_add_then_get_by_id_round_trip(store):
    """Test the stored trip equals the submitted fields plus id and checklist."""
    svc = TripService(store)
    fields = TripIn(name="Lake day", date=TODAY, notes="early start")
    trip = svc.add(fields)

    loaded = svc.get_by_id(trip.id)
    assert loaded == trip
    assert loaded.model_dump(exclude={"id", "checklist"}) == fields.model_dump()


def test_get_by_id_missing_returns_none(store):
    """Test an unknown trip id returns None."""
    assert TripService(store).get_by_id("nope") is None


def test_get_all_keeps_insertion_order(store):
    """Test trips come back in the order they were added."""
    svc = TripService(store)
    names = ["a", "b", "c"]
    for name in names:
        svc.add(TripIn(name=name, date=TODAY))
    assert [t.name for t in svc.get_all()] == names


def test_stored_json_uses_camel_case(store):
    """Test records land in the store with browser-style field names."""
    LocationService(store).add(LocationIn(name="Pier", latitude=34.2, longitude=-77.8))
    raw = store.load(LOCATIONS_KEY, [])
    assert set(raw[0]) == {"id", "name", "latitude", "longitude", "notes"}


def test_get_upcoming_includes_today_sorted(store):
    """Test yesterday is dropped and today/tomorrow come back in date order."""
    svc = TripService(store)
    tomorrow = svc.add(TripIn(name="tomorrow", date=TODAY + ONE_DAY))
    svc.add(TripIn(name="yesterday", date=TODAY - ONE_DAY))
    today = svc.add(TripIn(name="today", date=TODAY))

    upcoming = svc.get_upcoming(today=TODAY)

    assert [t.id for t in upcoming] == [today.id, tomorrow.id]


def test_update_replaces_trip(store):
    """Test update replaces the stored trip."""
    svc = TripService(store)
    trip = svc.add(TripIn(name="old", date=TODAY))
    trip.name = "new"

    assert svc.update(trip) is not None
    assert svc.get_by_id(trip.id).name == "new"


def test_update_unknown_trip_is_noop(store):
    """Test updating an unknown id writes nothing."""
    svc = TripService(store)
    trip = svc.add(TripIn(name="kept", date=TODAY))
    ghost = trip.model_copy(update={"id": "ghost", "name": "ghost"})

    assert svc.update(ghost) is None
    assert [t.name for t in svc.get_all()] == ["kept"]


def test_delete_trip_discards_checklist(store):
    """Test deleting a trip removes it along with its checklist."""
    svc = TripService(store)
    trip = svc.add(TripIn(name="gone", date=TODAY))
    svc.delete(trip.id)

    assert svc.get_all() == []
    assert store.load(TRIPS_KEY, None) == []


def test_toggle_checklist_item(store):
    """Test toggling flips the checked flag and persists it."""
    svc = TripService(store)
    trip = svc.add(TripIn(name="t", date=TODAY))
    item = trip.checklist[0]

    assert svc.toggle_checklist_item(trip.id, item.id) is True
    assert svc.get_by_id(trip.id).checklist[0].checked is True
    assert svc.toggle_checklist_item(trip.id, item.id) is False


def test_toggle_unknown_item_returns_none(store):
    """Test toggling an unknown trip or item returns None."""
    svc = TripService(store)
    trip = svc.add(TripIn(name="t", date=TODAY))

    assert svc.toggle_checklist_item(trip.id, "missing") is None
    assert svc.toggle_checklist_item("missing", trip.checklist[0].id) is None


def test_add_and_remove_checklist_item(store):
    """Test a custom checklist item can be added and removed."""
    svc = TripService(store)
    trip = svc.add(TripIn(name="t", date=TODAY))

    item = svc.add_checklist_item(trip.id, "Waders")
    assert item.checked is False
    assert svc.get_by_id(trip.id).checklist[-1] == item

    svc.remove_checklist_item(trip.id, item.id)
    checklist = svc.get_by_id(trip.id).checklist
    assert item.id not in [i.id for i in checklist]
    assert len(checklist) == 15


def test_add_checklist_item_unknown_trip(store):
    """Test adding an item to an unknown trip returns None."""
    assert TripService(store).add_checklist_item("missing", "Waders") is None


def test_delete_location_clears_referencing_trips(store):
    """Test both referencing trips lose the location and others are untouched."""
    locations = LocationService(store)
    trips = TripService(store)
    river = locations.add(LocationIn(name="River", latitude=45.0, longitude=-93.0))
    lake = locations.add(LocationIn(name="Lake", latitude=46.0, longitude=-94.0))

    t1 = trips.add(TripIn(name="one", date=TODAY, location=river))
    t2 = trips.add(TripIn(name="two", date=TODAY, location=river))
    t3 = trips.add(TripIn(name="three", date=TODAY, location=lake))
    t4 = trips.add(TripIn(name="four", date=TODAY))

    locations.delete(river.id)

    assert locations.get_by_id(river.id) is None
    assert trips.get_by_id(t1.id).location is None
    assert trips.get_by_id(t2.id).location is None
    assert trips.get_by_id(t3.id).location == lake
    assert trips.get_by_id(t4.id) == t4
