from .found_item import FoundItem
from .scanner import WorldItemScanner

__all__ = ["FoundItem", "WorldItemScanner"]
