"""
Fish species reference data.
"""
import logging
from typing import List, Optional

from .repository import RecordCollection
from .schemas import FishSpecies, FishSpeciesIn
from .storage import FISH_SPECIES_KEY, KeyValueStore

logger = logging.getLogger(__name__)

SAMPLE_SPECIES: List[FishSpecies] = [
    FishSpecies(
        id="1",
        common_name="Largemouth Bass",
        scientific_name="Micropterus salmoides",
        description=(
            "An olive-green to greenish-gray fish marked by a series of dark "
            "blotches forming a jagged horizontal stripe along each flank."
        ),
        habitat="Freshwater lakes, rivers, and ponds with vegetation and structure.",
        seasonality=["Spring", "Summer", "Fall"],
        techniques=["Plastic worms", "Topwater lures", "Crankbaits", "Spinnerbaits"],
        image_url="/images/largemouth-bass.jpg",
    ),
    FishSpecies(
        id="2",
        common_name="Rainbow Trout",
        scientific_name="Oncorhynchus mykiss",
        description=(
            "Distinguished by a pink stripe along the sides, a white underbelly, "
            "and small black spots on the back and fins."
        ),
        habitat="Cold, clear streams, rivers, and lakes.",
        seasonality=["Spring", "Fall"],
        techniques=["Fly fishing", "Spinners", "Bait fishing with worms or powerbait"],
        image_url="/images/rainbow-trout.jpg",
    ),
    FishSpecies(
        id="3",
        common_name="Walleye",
        scientific_name="Sander vitreus",
        description=(
            "Primarily olive and golden with a white belly; the olive back "
            "grades into a golden hue on the flanks."
        ),
        habitat="Large, turbid lakes and rivers.",
        seasonality=["Spring", "Fall", "Winter"],
        techniques=["Jig and minnow", "Trolling with crankbaits", "Bottom bouncers with crawler harnesses"],
        image_url="/images/walleye.jpg",
    ),
    FishSpecies(
        id="4",
        common_name="Northern Pike",
        scientific_name="Esox lucius",
        description=(
            "A carnivorous fish with an elongated body, a duckbill-like snout "
            "and sharp teeth."
        ),
        habitat="Vegetated lakes and slow rivers.",
        seasonality=["Spring", "Fall", "Winter"],
        techniques=["Spinners", "Spoons", "Large jerkbaits", "Dead baits in winter"],
        image_url="/images/northern-pike.jpg",
    ),
    FishSpecies(
        id="5",
        common_name="Bluegill",
        scientific_name="Lepomis macrochirus",
        description=(
            "A small freshwater fish with a bright blue edge on its gill plate "
            "and an olive-green to brown body."
        ),
        habitat="Ponds, lakes, and slow-moving streams with vegetation.",
        seasonality=["Spring", "Summer"],
        techniques=["Small jigs", "Worms", "Crickets", "Small flies"],
        image_url="/images/bluegill.jpg",
    ),
]


class SpeciesService(RecordCollection[FishSpecies]):
    def __init__(self, store: KeyValueStore):
        super().__init__(store, FISH_SPECIES_KEY, FishSpecies)

    def init_species(self) -> List[FishSpecies]:
        """Seed the sample species on first use; otherwise return what is stored."""
        existing = self.load()
        if existing:
            return existing
        logger.info("Seeding %d sample fish species", len(SAMPLE_SPECIES))
        seeded = [s.model_copy(deep=True) for s in SAMPLE_SPECIES]
        self.save(seeded)
        return seeded

    def add(self, fields: FishSpeciesIn) -> FishSpecies:
        return super().add(fields)

    def search(self, query: str) -> List[FishSpecies]:
        q = query.lower()
        return self.filter(
            lambda s: q in s.common_name.lower() or q in s.scientific_name.lower()
        )

    def filter_species(self, habitat: Optional[str] = None, technique: Optional[str] = None) -> List[FishSpecies]:
        def match(s: FishSpecies) -> bool:
            if habitat and habitat.lower() not in s.habitat.lower():
                return False
            if technique and not any(technique.lower() in t.lower() for t in s.techniques):
                return False
            return True

        return self.filter(match)
