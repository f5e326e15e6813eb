"""
Catch journal: logged catches, filtering and summary statistics.
"""
from typing import List, Optional

from .repository import RecordCollection
from .schemas import CatchEntry, CatchEntryIn, CatchFilter, CatchStats
from .storage import CATCH_JOURNAL_KEY, KeyValueStore


def _contains(text: str, query: Optional[str]) -> bool:
    return not query or query.lower() in text.lower()


def matches(entry: CatchEntry, criteria: CatchFilter) -> bool:
    if not _contains(entry.species, criteria.species):
        return False
    if not _contains(entry.location_name, criteria.location):
        return False
    if not _contains(entry.technique, criteria.technique):
        return False
    if criteria.start_date and entry.date < criteria.start_date:
        return False
    if criteria.end_date and entry.date > criteria.end_date:
        return False
    return True


def summarize(entries: List[CatchEntry]) -> CatchStats:
    """
    Totals over a list of catches.

    The biggest catch is the heaviest entry that has a weight; ties keep
    the earlier entry, and it is None when no entry was weighed.
    """
    biggest: Optional[CatchEntry] = None
    for entry in entries:
        if entry.weight is None:
            continue
        if biggest is None or entry.weight > biggest.weight:
            biggest = entry

    return CatchStats(
        total_catches=len(entries),
        species_count=len({e.species for e in entries}),
        locations=len({e.location_name for e in entries}),
        biggest_catch=biggest,
    )


class JournalService(RecordCollection[CatchEntry]):
    def __init__(self, store: KeyValueStore):
        super().__init__(store, CATCH_JOURNAL_KEY, CatchEntry)

    def add(self, fields: CatchEntryIn) -> CatchEntry:
        return super().add(fields)

    def filter_entries(self, criteria: CatchFilter) -> List[CatchEntry]:
        """Entries matching every given criterion; text matches ignore case."""
        return self.filter(lambda e: matches(e, criteria))

    def stats(self) -> CatchStats:
        return summarize(self.load())

    def recent(self, limit: int = 3) -> List[CatchEntry]:
        """Newest catches first."""
        entries = sorted(self.load(), key=lambda e: e.date, reverse=True)
        return entries[:limit]
