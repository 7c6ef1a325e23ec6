"""Arithmetic over nutrient vectors."""

from collections.abc import Callable

from meal_analyzer.domain.nutrition import Energy, FatProfile, NutrientVector
from meal_analyzer.services.numbers import round_2


def scale_nutrients(vector: NutrientVector, multiplier: float) -> NutrientVector:
    """Multiply every field by ``multiplier`` and round each to 2 decimals."""
    return _map(vector, lambda value: round_2(value * multiplier))


def round_nutrients(vector: NutrientVector) -> NutrientVector:
    """Round every field to 2 decimals."""
    return _map(vector, round_2)


def add_nutrients(left: NutrientVector, right: NutrientVector) -> NutrientVector:
    """Add two vectors field by field without rounding."""
    return NutrientVector(
        energy=Energy(
            kj=left.energy.kj + right.energy.kj,
            kcal=left.energy.kcal + right.energy.kcal,
        ),
        carbohydrates=left.carbohydrates + right.carbohydrates,
        sugar=left.sugar + right.sugar,
        protein=left.protein + right.protein,
        fat=FatProfile(
            total=left.fat.total + right.fat.total,
            saturated=left.fat.saturated + right.fat.saturated,
            trans=left.fat.trans + right.fat.trans,
            monounsaturated=left.fat.monounsaturated + right.fat.monounsaturated,
            polyunsaturated=left.fat.polyunsaturated + right.fat.polyunsaturated,
        ),
        cholesterol=left.cholesterol + right.cholesterol,
        fiber=left.fiber + right.fiber,
        sodium=left.sodium + right.sodium,
        potassium=left.potassium + right.potassium,
    )


def _map(vector: NutrientVector, func: Callable[[float], float]) -> NutrientVector:
    return NutrientVector(
        energy=Energy(kj=func(vector.energy.kj), kcal=func(vector.energy.kcal)),
        carbohydrates=func(vector.carbohydrates),
        sugar=func(vector.sugar),
        protein=func(vector.protein),
        fat=FatProfile(
            total=func(vector.fat.total),
            saturated=func(vector.fat.saturated),
            trans=func(vector.fat.trans),
            monounsaturated=func(vector.fat.monounsaturated),
            polyunsaturated=func(vector.fat.polyunsaturated),
        ),
        cholesterol=func(vector.cholesterol),
        fiber=func(vector.fiber),
        sodium=func(vector.sodium),
        potassium=func(vector.potassium),
    )
