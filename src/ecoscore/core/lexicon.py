"""Eco keyword lexicon used by the category scorer.

Each category lists phrases in three tiers. Matching is a case-insensitive
substring test against the combined review text, so a phrase counts at most
once per text regardless of how often it appears.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True)
class LexiconCategory:
    """Keyword tiers for one eco category."""
    high: Tuple[str, ...] = ()
    medium: Tuple[str, ...] = ()
    negative: Tuple[str, ...] = ()

    def all_keywords(self) -> Tuple[str, ...]:
        return self.high + self.medium + self.negative


ENERGY_EFFICIENCY = LexiconCategory(
    high=(
        "solar", "renewable energy", "led lights", "energy efficient", "energy saving",
        "smart thermostat", "green energy", "solar panels", "wind power", "geothermal",
        "energy star", "low energy", "power saving", "solar heating", "energy conservation",
    ),
    medium=(
        "efficient", "lighting", "heating", "cooling", "insulation", "windows",
        "temperature control", "natural light", "ventilation", "eco-friendly lighting",
    ),
    negative=(
        "energy waste", "high energy bills", "inefficient", "old heating system",
        "poor insulation", "energy hungry", "wasteful lighting",
    ),
)

WASTE_MANAGEMENT = LexiconCategory(
    high=(
        "recycling", "composting", "zero waste", "waste reduction", "reusable",
        "biodegradable", "waste sorting", "recycled materials", "compost bin",
        "minimal packaging", "no single use", "refillable", "upcycling",
    ),
    medium=(
        "reduce waste", "sustainable packaging", "less plastic", "eco packaging",
        "waste management", "recycling bins", "organic waste", "minimal waste",
    ),
    negative=(
        "lots of waste", "no recycling", "wasteful", "excessive packaging",
        "single use", "plastic waste", "poor waste management",
    ),
)

WATER_CONSERVATION = LexiconCategory(
    high=(
        "water saving", "low flow", "water conservation", "rainwater harvesting",
        "greywater", "water recycling", "drought resistant", "water efficient",
        "smart irrigation", "water reuse", "xeriscaping", "water wise",
    ),
    medium=(
        "efficient showers", "water management", "conservation", "efficient fixtures",
        "water conscious", "sustainable water", "water reduction",
    ),
    negative=(
        "water waste", "leaky faucets", "water wasteful", "high water usage",
        "poor water management", "wasteful water practices",
    ),
)

LOCAL_SOURCING = LexiconCategory(
    high=(
        "local produce", "farm to table", "locally sourced", "regional ingredients",
        "local farmers", "community supported", "local suppliers", "nearby farms",
        "seasonal menu", "local artisans", "regional cuisine", "local partnerships",
    ),
    medium=(
        "local", "regional", "seasonal", "fresh ingredients", "community",
        "local products", "nearby suppliers", "supporting local",
    ),
    negative=(
        "imported ingredients", "non-local", "shipped from far", "processed foods",
        "industrial food", "chain suppliers",
    ),
)

CARBON_FOOTPRINT = LexiconCategory(
    high=(
        "carbon neutral", "carbon offset", "bike friendly", "public transport",
        "electric vehicles", "carbon free", "low carbon", "green transportation",
        "walkable", "cycling", "ev charging", "carbon reduction", "net zero",
    ),
    medium=(
        "sustainable transport", "eco transport", "green travel", "efficient transport",
        "reduced emissions", "environmental transport", "clean energy",
    ),
    negative=(
        "high emissions", "car dependent", "poor transport", "carbon intensive",
        "no public transport", "environmentally unfriendly transport",
    ),
)


# Score field -> lexicon category, in record order
ECO_KEYWORDS: Mapping[str, LexiconCategory] = MappingProxyType({
    "energy_efficiency_score": ENERGY_EFFICIENCY,
    "waste_management_score": WASTE_MANAGEMENT,
    "water_conservation_score": WATER_CONSERVATION,
    "local_sourcing_score": LOCAL_SOURCING,
    "carbon_footprint_score": CARBON_FOOTPRINT,
})
