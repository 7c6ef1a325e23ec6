"""Tests for detail page extraction."""

import pytest

from meal_analyzer.services.detail_extraction import (
    extract_nutrients,
    extract_serving_context,
    extract_serving_options,
)


def _all_values(facts) -> list[float]:
    nutrients = facts.nutrients
    return [
        nutrients.energy.kj,
        nutrients.energy.kcal,
        nutrients.carbohydrates,
        nutrients.sugar,
        nutrients.protein,
        nutrients.fat.total,
        nutrients.fat.saturated,
        nutrients.fat.trans,
        nutrients.fat.monounsaturated,
        nutrients.fat.polyunsaturated,
        nutrients.cholesterol,
        nutrients.fiber,
        nutrients.sodium,
        nutrients.potassium,
    ]


def test_parses_fixture_page(food_page_html: str) -> None:
    facts = extract_nutrients(food_page_html, "Carne Moída")
    nutrients = facts.nutrients

    assert facts.name == "Carne Moída"
    assert facts.serving_size == "100 g"
    assert nutrients.energy.kj == 655
    assert nutrients.energy.kcal == 156
    assert nutrients.carbohydrates == 0
    assert nutrients.sugar == 0
    assert nutrients.protein == 20.7
    assert nutrients.fat.total == 7.5
    assert nutrients.fat.saturated == 3.154
    assert nutrients.fat.trans == 0.49
    assert nutrients.fat.monounsaturated == 3.294
    assert nutrients.fat.polyunsaturated == 0.284
    assert nutrients.cholesterol == 64
    assert nutrients.fiber == 0
    assert nutrients.sodium == 66
    assert nutrients.potassium == 334


def test_saturated_fat_does_not_match_mono_or_poly_rows() -> None:
    html = (
        '<div class="nutrition_facts">'
        '<div class="nutrient sub left">Gordura Monoinsaturada</div>'
        '<div class="nutrient tRight">4,2g</div>'
        '<div class="nutrient sub left">Gordura Poliinsaturada</div>'
        '<div class="nutrient tRight">1,1g</div>'
        "</div>"
    )

    nutrients = extract_nutrients(html, "x").nutrients

    assert nutrients.fat.saturated == 0
    assert nutrients.fat.monounsaturated == 4.2
    assert nutrients.fat.polyunsaturated == 1.1


def test_saturated_row_feeds_only_saturated() -> None:
    html = (
        '<div class="nutrition_facts">'
        '<div class="nutrient sub left">Gordura Saturada</div>'
        '<div class="nutrient tRight">2,5g</div>'
        "</div>"
    )

    nutrients = extract_nutrients(html, "x").nutrients

    assert nutrients.fat.saturated == 2.5
    assert nutrients.fat.monounsaturated == 0
    assert nutrients.fat.polyunsaturated == 0


def test_sub_rows_do_not_feed_main_nutrients() -> None:
    html = (
        '<div class="nutrition_facts">'
        '<div class="nutrient sub left">Gordura Trans</div>'
        '<div class="nutrient tRight">0,3g</div>'
        "</div>"
    )

    nutrients = extract_nutrients(html, "x").nutrients

    assert nutrients.fat.total == 0
    assert nutrients.fat.trans == 0.3


def test_value_requires_adjacent_tright_sibling() -> None:
    html = (
        '<div class="nutrition_facts">'
        '<div class="nutrient black left">Proteínas</div>'
        '<div class="nutrient black">12g</div>'
        "</div>"
    )

    assert extract_nutrients(html, "x").nutrients.protein == 0


def test_name_and_serving_fall_back() -> None:
    facts = extract_nutrients('<div class="nutrition_facts"></div>', "Arroz")

    assert facts.name == "Arroz"
    assert facts.serving_size == "100 g"


@pytest.mark.parametrize(
    "html",
    [
        "",
        "<html><body><p>Página não encontrada</p></body></html>",
        '<div class="nutrition_facts"><div class="nutrient left">Sódio',
        (
            '<div class="nutrition_facts">'
            '<div class="nutrient black left">Sódio</div>'
            '<div class="nutrient black tRight">-15mg</div>'
            '<div class="nutrient black left">Fibras</div>'
            '<div class="nutrient black tRight">n/d</div>'
            "</div>"
        ),
    ],
)
def test_malformed_pages_yield_non_negative_values(html: str) -> None:
    facts = extract_nutrients(html, "Fallback")

    assert facts.name == "Fallback"
    assert all(value >= 0 for value in _all_values(facts))


def test_serving_options_include_base_and_table_rows(food_page_html: str) -> None:
    options = extract_serving_options(food_page_html)

    assert options == [
        "Base: 100 g - 156 kcal",
        "100 g - 156 kcal",
        "1 porção (120 g) - 187 kcal",
        "1 xícara (225 g) - 351 kcal",
    ]


def test_serving_context_is_collapsed_and_bounded(food_page_html: str) -> None:
    context = extract_serving_context(food_page_html)

    assert context.startswith("Existem 156 calorias em Carne Moída (100 g).")
    assert "\n" not in context
    assert len(extract_serving_context(f'<div class="factPanel">{"a " * 600}</div>')) == 500
