from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .scanning.found_item import FoundItem

logger = logging.getLogger(__name__)


@dataclass
class OwnedSummary:
    """Owned totals for one item id, counted by stack size."""

    item_id: str
    name: str
    total: int = 0
    in_inventory: int = 0

    @property
    def in_world(self) -> int:
        return self.total - self.in_inventory


def count_owned(found: Iterable[FoundItem], item_id: str) -> Tuple[int, int]:
    """Count how many of an item the player owns.

    Returns:
        ``(total, in_inventory)``, both summed over stack sizes.
    """
    total = 0
    in_inventory = 0
    for entry in found:
        if entry.item.item_id != item_id:
            continue
        total += entry.count
        if entry.is_in_inventory:
            in_inventory += entry.count
    return total, in_inventory


def summarize(found: Iterable[FoundItem]) -> List[OwnedSummary]:
    """Group found items by id (or name, for items without an id), sorted by name."""
    rows: Dict[str, OwnedSummary] = {}
    for entry in found:
        key = entry.item.item_id or entry.item.name
        row = rows.get(key)
        if row is None:
            row = rows[key] = OwnedSummary(item_id=entry.item.item_id, name=entry.item.name)
        row.total += entry.count
        if entry.is_in_inventory:
            row.in_inventory += entry.count
    logger.debug("Summarized %d distinct item(s)", len(rows))
    return sorted(rows.values(), key=lambda r: (r.name.lower(), r.item_id))


def format_summary(rows: Iterable[OwnedSummary]) -> str:
    lines = [f"{'Item':<28} {'Total':>7} {'Carried':>8} {'World':>7}"]
    for row in rows:
        lines.append(f"{row.name:<28} {row.total:>7} {row.in_inventory:>8} {row.in_world:>7}")
    return "\n".join(lines)


__all__ = ["OwnedSummary", "count_owned", "summarize", "format_summary"]
