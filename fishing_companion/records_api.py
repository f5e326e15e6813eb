"""
HTTP routes over the local record collections.

Each request builds its service around the store from ``get_store``;
unknown ids become 404s, everything else is whatever the service returns.
"""
import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from .gear import GearService
from .journal import JournalService
from .schemas import (
    CatchEntry, CatchEntryIn, CatchFilter, CatchStats, ChecklistItemIn,
    FishSpecies, FishSpeciesIn, GearCategory, GearItem, GearItemIn, GearSet,
    GearSetIn, Location, LocationIn, MaintenanceUpdate, QuantityUpdate, Trip,
    TripIn, TripItem,
)
from .species import SpeciesService
from .storage import get_store
from .trips import LocationService, TripService

router = APIRouter(prefix="/api")


def trip_service(store=Depends(get_store)) -> TripService:
    return TripService(store)


def location_service(store=Depends(get_store)) -> LocationService:
    return LocationService(store)


def gear_service(store=Depends(get_store)) -> GearService:
    return GearService(store)


def journal_service(store=Depends(get_store)) -> JournalService:
    return JournalService(store)


def species_service(store=Depends(get_store)) -> SpeciesService:
    return SpeciesService(store)


def found(record, what: str):
    if record is None:
        raise HTTPException(404, f"Unknown {what}")
    return record


# ---------- Trips ----------

@router.get("/trips", response_model=List[Trip])
def list_trips(svc: TripService = Depends(trip_service)):
    return svc.get_all()


@router.get("/trips/upcoming", response_model=List[Trip])
def upcoming_trips(limit: Optional[int] = None, svc: TripService = Depends(trip_service)):
    trips = svc.get_upcoming()
    return trips[:limit] if limit is not None else trips


@router.post("/trips", response_model=Trip)
def create_trip(payload: TripIn, svc: TripService = Depends(trip_service)):
    return svc.add(payload)


@router.get("/trips/{trip_id}", response_model=Trip)
def get_trip(trip_id: str, svc: TripService = Depends(trip_service)):
    return found(svc.get_by_id(trip_id), "trip")


@router.put("/trips/{trip_id}", response_model=Trip)
def update_trip(trip_id: str, payload: Trip, svc: TripService = Depends(trip_service)):
    return found(svc.update(payload.model_copy(update={"id": trip_id})), "trip")


@router.delete("/trips/{trip_id}")
def delete_trip(trip_id: str, svc: TripService = Depends(trip_service)):
    svc.delete(trip_id)
    return {"ok": True}


@router.post("/trips/{trip_id}/checklist", response_model=TripItem)
def add_checklist_item(trip_id: str, payload: ChecklistItemIn, svc: TripService = Depends(trip_service)):
    return found(svc.add_checklist_item(trip_id, payload.name), "trip")


@router.post("/trips/{trip_id}/checklist/{item_id}/toggle")
def toggle_checklist_item(trip_id: str, item_id: str, svc: TripService = Depends(trip_service)):
    checked = found(svc.toggle_checklist_item(trip_id, item_id), "checklist item")
    return {"checked": checked}


@router.delete("/trips/{trip_id}/checklist/{item_id}")
def remove_checklist_item(trip_id: str, item_id: str, svc: TripService = Depends(trip_service)):
    svc.remove_checklist_item(trip_id, item_id)
    return {"ok": True}


# ---------- Locations ----------

@router.get("/locations", response_model=List[Location])
def list_locations(svc: LocationService = Depends(location_service)):
    return svc.get_all()


@router.post("/locations", response_model=Location)
def create_location(payload: LocationIn, svc: LocationService = Depends(location_service)):
    return svc.add(payload)


@router.get("/locations/{location_id}", response_model=Location)
def get_location(location_id: str, svc: LocationService = Depends(location_service)):
    return found(svc.get_by_id(location_id), "location")


@router.put("/locations/{location_id}", response_model=Location)
def update_location(location_id: str, payload: Location, svc: LocationService = Depends(location_service)):
    return found(svc.update(payload.model_copy(update={"id": location_id})), "location")


@router.delete("/locations/{location_id}")
def delete_location(location_id: str, svc: LocationService = Depends(location_service)):
    svc.delete(location_id)
    return {"ok": True}


# ---------- Gear ----------

@router.get("/gear", response_model=List[GearItem])
def list_gear(category: Optional[GearCategory] = None, svc: GearService = Depends(gear_service)):
    if category:
        return svc.filter_by_category(category)
    return svc.get_all()


@router.get("/gear/maintenance", response_model=List[GearItem])
def gear_needing_maintenance(svc: GearService = Depends(gear_service)):
    return svc.get_items_needing_maintenance()


@router.post("/gear", response_model=GearItem)
def create_gear(payload: GearItemIn, svc: GearService = Depends(gear_service)):
    return svc.add(payload)


@router.get("/gear/{item_id}", response_model=GearItem)
def get_gear(item_id: str, svc: GearService = Depends(gear_service)):
    return found(svc.get_by_id(item_id), "gear item")


@router.put("/gear/{item_id}", response_model=GearItem)
def update_gear(item_id: str, payload: GearItem, svc: GearService = Depends(gear_service)):
    return found(svc.update(payload.model_copy(update={"id": item_id})), "gear item")


@router.put("/gear/{item_id}/quantity", response_model=GearItem)
def update_gear_quantity(item_id: str, payload: QuantityUpdate, svc: GearService = Depends(gear_service)):
    return found(svc.update_quantity(item_id, payload.quantity), "gear item")


@router.put("/gear/{item_id}/maintenance", response_model=GearItem)
def record_gear_maintenance(item_id: str, payload: MaintenanceUpdate, svc: GearService = Depends(gear_service)):
    return found(svc.update_maintenance_date(item_id, payload.date), "gear item")


@router.delete("/gear/{item_id}")
def delete_gear(item_id: str, svc: GearService = Depends(gear_service)):
    svc.delete(item_id)
    return {"ok": True}


# ---------- Gear sets ----------

@router.get("/gear-sets", response_model=List[GearSet])
def list_gear_sets(svc: GearService = Depends(gear_service)):
    return svc.sets.get_all()


@router.post("/gear-sets", response_model=GearSet)
def create_gear_set(payload: GearSetIn, svc: GearService = Depends(gear_service)):
    return svc.sets.add(payload)


@router.get("/gear-sets/{set_id}", response_model=GearSet)
def get_gear_set(set_id: str, svc: GearService = Depends(gear_service)):
    return found(svc.sets.get_by_id(set_id), "gear set")


@router.get("/gear-sets/{set_id}/items", response_model=List[GearItem])
def gear_set_items(set_id: str, svc: GearService = Depends(gear_service)):
    found(svc.sets.get_by_id(set_id), "gear set")
    return svc.get_set_items(set_id)


@router.put("/gear-sets/{set_id}", response_model=GearSet)
def update_gear_set(set_id: str, payload: GearSet, svc: GearService = Depends(gear_service)):
    return found(svc.sets.update(payload.model_copy(update={"id": set_id})), "gear set")


@router.delete("/gear-sets/{set_id}")
def delete_gear_set(set_id: str, svc: GearService = Depends(gear_service)):
    svc.sets.delete(set_id)
    return {"ok": True}


# ---------- Fish species ----------

@router.get("/species", response_model=List[FishSpecies])
def list_species(
    q: Optional[str] = None,
    habitat: Optional[str] = None,
    technique: Optional[str] = None,
    svc: SpeciesService = Depends(species_service),
):
    items = svc.init_species()
    if q:
        items = svc.search(q)
    if habitat or technique:
        keep = {s.id for s in svc.filter_species(habitat=habitat, technique=technique)}
        items = [s for s in items if s.id in keep]
    return items


@router.post("/species", response_model=FishSpecies)
def create_species(payload: FishSpeciesIn, svc: SpeciesService = Depends(species_service)):
    return svc.add(payload)


@router.get("/species/{species_id}", response_model=FishSpecies)
def get_species(species_id: str, svc: SpeciesService = Depends(species_service)):
    return found(svc.get_by_id(species_id), "species")


@router.put("/species/{species_id}", response_model=FishSpecies)
def update_species(species_id: str, payload: FishSpecies, svc: SpeciesService = Depends(species_service)):
    return found(svc.update(payload.model_copy(update={"id": species_id})), "species")


@router.delete("/species/{species_id}")
def delete_species(species_id: str, svc: SpeciesService = Depends(species_service)):
    svc.delete(species_id)
    return {"ok": True}


# ---------- Catch journal ----------

@router.get("/catches", response_model=List[CatchEntry])
def list_catches(
    species: Optional[str] = None,
    location: Optional[str] = None,
    technique: Optional[str] = None,
    start_date: Optional[datetime.date] = Query(None, alias="startDate"),
    end_date: Optional[datetime.date] = Query(None, alias="endDate"),
    svc: JournalService = Depends(journal_service),
):
    criteria = CatchFilter(
        species=species,
        location=location,
        technique=technique,
        start_date=start_date,
        end_date=end_date,
    )
    return svc.filter_entries(criteria)


@router.get("/catches/stats", response_model=CatchStats)
def catch_stats(svc: JournalService = Depends(journal_service)):
    return svc.stats()


@router.get("/catches/recent", response_model=List[CatchEntry])
def recent_catches(limit: int = 3, svc: JournalService = Depends(journal_service)):
    return svc.recent(limit)


@router.post("/catches", response_model=CatchEntry)
def create_catch(payload: CatchEntryIn, svc: JournalService = Depends(journal_service)):
    return svc.add(payload)


@router.get("/catches/{entry_id}", response_model=CatchEntry)
def get_catch(entry_id: str, svc: JournalService = Depends(journal_service)):
    return found(svc.get_by_id(entry_id), "catch entry")


@router.put("/catches/{entry_id}", response_model=CatchEntry)
def update_catch(entry_id: str, payload: CatchEntry, svc: JournalService = Depends(journal_service)):
    return found(svc.update(payload.model_copy(update={"id": entry_id})), "catch entry")


@router.delete("/catches/{entry_id}")
def delete_catch(entry_id: str, svc: JournalService = Depends(journal_service)):
    svc.delete(entry_id)
    return {"ok": True}
