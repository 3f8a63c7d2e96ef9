import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


@pytest.fixture
def world():
    """An empty world: no locations, empty inventory, no farm."""
    from world_items.game.world import World

    return World()


@pytest.fixture
def scanner(world):
    from world_items.scanning import WorldItemScanner

    return WorldItemScanner(world, world, world, world)
