"""Domain models for catalog items."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class ItemType(str, Enum):
    FRAME = "FRAME"
    BUBBLE = "BUBBLE"
    BACKGROUND = "BACKGROUND"


class Rarity(str, Enum):
    COMMON = "COMMON"
    RARE = "RARE"
    EPIC = "EPIC"
    LEGENDARY = "LEGENDARY"
    COSMIC = "COSMIC"
    AUTUMN_LEAVES = "AUTUMN_LEAVES"
    SAKURA_BREEZE = "SAKURA_BREEZE"
    DRAGON = "DRAGON"
    NEON_BURST = "NEON_BURST"
    BLACK_HOLE = "BLACK_HOLE"
    GROK_BLACK_HOLE = "GROK_BLACK_HOLE"
    MAGIC_BURST = "MAGIC_BURST"
    WATER_DISTORTION = "WATER_DISTORTION"
    ELECTRIC = "ELECTRIC"
    ELECTRIC_BLUE = "ELECTRIC_BLUE"


@dataclass(slots=True, frozen=True)
class CatalogItem:
    id: str
    name: str
    type: ItemType
    rarity: Rarity
    price: int
    description: Optional[str] = None
    attributes: dict[str, Any] = field(default_factory=dict, compare=False)


@dataclass(slots=True)
class CatalogItemInput:
    name: str
    type: ItemType
    price: int
    rarity: Rarity = Rarity.COMMON
    description: Optional[str] = None
    attributes: dict[str, Any] = field(default_factory=dict)
