"""
Trip planning: trips, their packing checklists, and saved locations.
"""
import datetime
from typing import List, Optional

from .repository import RecordCollection
from .schemas import Location, LocationIn, Trip, TripIn, TripItem
from .storage import KeyValueStore, LOCATIONS_KEY, TRIPS_KEY, generate_id

DEFAULT_CHECKLIST: List[str] = [
    "Fishing rod",
    "Fishing reel",
    "Tackle box",
    "Extra line",
    "Lures/bait",
    "Fishing net",
    "Pliers",
    "Fishing license",
    "Sunscreen",
    "Hat",
    "Polarized sunglasses",
    "Water/drinks",
    "Snacks/food",
    "First aid kit",
    "Camera/phone",
]


def default_checklist() -> List[TripItem]:
    return [TripItem(id=generate_id(), name=name, checked=False) for name in DEFAULT_CHECKLIST]


class TripService(RecordCollection[Trip]):
    def __init__(self, store: KeyValueStore):
        super().__init__(store, TRIPS_KEY, Trip)

    def add(self, fields: TripIn) -> Trip:
        """Create a trip with a fresh copy of the default checklist."""
        return super().add(fields, checklist=default_checklist())

    def get_upcoming(self, today: Optional[datetime.date] = None) -> List[Trip]:
        """Trips dated today or later, soonest first."""
        today = today or datetime.date.today()
        upcoming = self.filter(lambda t: t.date >= today)
        return sorted(upcoming, key=lambda t: t.date)

    def add_checklist_item(self, trip_id: str, name: str) -> Optional[TripItem]:
        item = TripItem(id=generate_id(), name=name, checked=False)
        trip = self.modify(trip_id, lambda t: t.checklist.append(item))
        return item if trip else None

    def remove_checklist_item(self, trip_id: str, item_id: str) -> None:
        def drop(trip: Trip) -> None:
            trip.checklist = [i for i in trip.checklist if i.id != item_id]

        self.modify(trip_id, drop)

    def toggle_checklist_item(self, trip_id: str, item_id: str) -> Optional[bool]:
        """Flip an item's checked flag; returns the new value, or None if not found."""
        trips = self.load()
        for trip in trips:
            if trip.id != trip_id:
                continue
            for item in trip.checklist:
                if item.id == item_id:
                    item.checked = not item.checked
                    self.save(trips)
                    return item.checked
            return None
        return None


class LocationService(RecordCollection[Location]):
    def __init__(self, store: KeyValueStore):
        super().__init__(store, LOCATIONS_KEY, Location)
        self.trips = TripService(store)

    def add(self, fields: LocationIn) -> Location:
        return super().add(fields)

    def delete(self, location_id: str) -> None:
        """Remove the location and clear it from every trip that used it."""
        super().delete(location_id)

        trips = self.trips.load()
        changed = False
        for trip in trips:
            if trip.location is not None and trip.location.id == location_id:
                trip.location = None
                changed = True
        if changed:
            self.trips.save(trips)
