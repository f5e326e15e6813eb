"""
Gear inventory, maintenance tracking and gear sets.
"""
import datetime
import logging
from typing import List, Optional

from .repository import RecordCollection
from .schemas import GearCategory, GearItem, GearItemIn, GearSet, GearSetIn
from .storage import GEAR_INVENTORY_KEY, GEAR_SETS_KEY, KeyValueStore

logger = logging.getLogger(__name__)


def needs_maintenance(item: GearItem, today: Optional[datetime.date] = None) -> bool:
    """
    True once ``maintenance_interval`` whole days have passed since
    ``last_maintenance``. Items missing either field never need maintenance.
    """
    if not item.last_maintenance or not item.maintenance_interval:
        return False
    today = today or datetime.date.today()
    days_since = (today - item.last_maintenance).days
    return days_since >= item.maintenance_interval


class GearSetService(RecordCollection[GearSet]):
    def __init__(self, store: KeyValueStore):
        super().__init__(store, GEAR_SETS_KEY, GearSet)

    def add(self, fields: GearSetIn) -> GearSet:
        return super().add(fields)

    def remove_member(self, item_id: str) -> None:
        sets = self.load()
        changed = False
        for gear_set in sets:
            if item_id in gear_set.items:
                gear_set.items = [i for i in gear_set.items if i != item_id]
                changed = True
        if changed:
            self.save(sets)


class GearService(RecordCollection[GearItem]):
    def __init__(self, store: KeyValueStore):
        super().__init__(store, GEAR_INVENTORY_KEY, GearItem)
        self.sets = GearSetService(store)

    def add(self, fields: GearItemIn) -> GearItem:
        return super().add(fields)

    def delete(self, item_id: str) -> None:
        """Remove the item and drop it from every gear set."""
        super().delete(item_id)
        self.sets.remove_member(item_id)

    def update(self, record: GearItem) -> Optional[GearItem]:
        """Replace a stored item. A negative quantity leaves the stored item unchanged."""
        if record.quantity < 0:
            logger.debug("Ignoring update with negative quantity %s for gear item %s", record.quantity, record.id)
            return self.get_by_id(record.id)
        return super().update(record)

    def filter_by_category(self, category: GearCategory) -> List[GearItem]:
        return self.filter(lambda i: i.category == category)

    def needs_maintenance(self, item: GearItem, today: Optional[datetime.date] = None) -> bool:
        return needs_maintenance(item, today)

    def get_items_needing_maintenance(self, today: Optional[datetime.date] = None) -> List[GearItem]:
        today = today or datetime.date.today()
        return self.filter(lambda i: needs_maintenance(i, today))

    def update_maintenance_date(self, item_id: str, date: datetime.date) -> Optional[GearItem]:
        def stamp(item: GearItem) -> None:
            item.last_maintenance = date

        return self.modify(item_id, stamp)

    def update_quantity(self, item_id: str, quantity: int) -> Optional[GearItem]:
        """Set the on-hand count. Negative targets are ignored."""
        if quantity < 0:
            logger.debug("Ignoring negative quantity %s for gear item %s", quantity, item_id)
            return self.get_by_id(item_id)

        def recount(item: GearItem) -> None:
            item.quantity = quantity

        return self.modify(item_id, recount)

    def get_set_items(self, set_id: str) -> List[GearItem]:
        gear_set = self.sets.get_by_id(set_id)
        if not gear_set:
            return []
        members = set(gear_set.items)
        return self.filter(lambda i: i.id in members)
