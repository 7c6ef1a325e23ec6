"""Nutrition domain models."""

from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class Energy:
    """Energy content in both kJ and kcal."""

    kj: float = 0.0
    kcal: float = 0.0


@dataclass(frozen=True)
class FatProfile:
    """Total fat and its breakdown, in grams."""

    total: float = 0.0
    saturated: float = 0.0
    trans: float = 0.0
    monounsaturated: float = 0.0
    polyunsaturated: float = 0.0


@dataclass(frozen=True)
class NutrientVector:
    """Complete numeric nutrition record.

    Grams for macronutrients and fiber, milligrams for cholesterol, sodium
    and potassium. Unparsed values are 0, never missing.
    """

    energy: Energy = field(default_factory=Energy)
    carbohydrates: float = 0.0
    sugar: float = 0.0
    protein: float = 0.0
    fat: FatProfile = field(default_factory=FatProfile)
    cholesterol: float = 0.0
    fiber: float = 0.0
    sodium: float = 0.0
    potassium: float = 0.0

    @classmethod
    def zero(cls) -> "NutrientVector":
        """Return the all-zero vector."""
        return cls()

    def as_dict(self) -> dict[str, object]:
        """Return a nested plain-dict representation."""
        return asdict(self)


@dataclass(frozen=True)
class NutritionFacts:
    """Nutrition facts parsed from a food detail page."""

    name: str
    serving_size: str
    nutrients: NutrientVector


@dataclass(frozen=True)
class SearchCandidate:
    """One search result row with coarse per-100g macros."""

    name: str
    url: str
    brand: str | None = None
    calories_per_100g: float = 0.0
    fat_per_100g: float = 0.0
    carbs_per_100g: float = 0.0
    protein_per_100g: float = 0.0
