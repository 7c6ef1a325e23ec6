"""Extraction of nutrition facts from a food detail page.

The nutrition panel lays nutrients out as label/value pairs: a ``.nutrient``
element with class ``left`` holds the label and its next sibling with class
``tRight`` holds the value. Nested rows (sugar under carbohydrates, the fat
breakdown under fat) additionally carry class ``sub``.
"""

import re
import unicodedata

from meal_analyzer.adapters.html_document import HtmlNode, joined_text, parse_html
from meal_analyzer.domain.nutrition import (
    Energy,
    FatProfile,
    NutrientVector,
    NutritionFacts,
)
from meal_analyzer.services.numbers import parse_locale_number

DEFAULT_SERVING_SIZE = "100 g"
SERVING_CONTEXT_LIMIT = 500

_BASE_SERVING = re.compile(
    r"Existem\s+([\d,]+)\s+calorias?\s+em\s+.+?\s+\(([^)]+)\)", re.IGNORECASE
)


def extract_nutrients(html: str, fallback_name: str) -> NutritionFacts:
    """Parse a detail page into per-serving nutrition facts.

    Never raises: anything that cannot be located or parsed is reported
    as 0.
    """
    document = parse_html(html)
    name = joined_text(document.select("h1")).strip() or fallback_name
    serving_size = (
        joined_text(document.select(".nutrition_facts .serving_size_value")).strip()
        or DEFAULT_SERVING_SIZE
    )
    nutrients = NutrientVector(
        energy=_extract_energy(document),
        carbohydrates=_find_main(document, "carboidrato"),
        sugar=_find_sub(document, "açúcar"),
        protein=_find_main(document, "proteína"),
        fat=FatProfile(
            total=_find_main(document, "gordura"),
            saturated=_find_sub(document, "saturada"),
            trans=_find_sub(document, "trans"),
            monounsaturated=_find_sub(document, "monoinsaturada"),
            polyunsaturated=_find_sub(document, "poliinsaturada"),
        ),
        cholesterol=_find_main(document, "colesterol"),
        fiber=_find_main(document, "fibra"),
        sodium=_find_main(document, "sódio"),
        potassium=_find_main(document, "potássio"),
    )
    return NutritionFacts(name=name, serving_size=serving_size, nutrients=nutrients)


def extract_serving_options(html: str) -> list[str]:
    """List the serving sizes a detail page declares, base serving first."""
    document = parse_html(html)
    options: list[str] = []
    for row in document.select("table.generic tr"):
        label = joined_text(row.select("a")).strip()
        cells = row.select("td")
        calories = cells[-1].text().strip() if cells else ""
        if not label or not calories:
            continue
        grams_info = joined_text(row.select(".smallText.greyText")).strip()
        if grams_info:
            options.append(f"{label} {grams_info} - {calories} kcal")
        else:
            options.append(f"{label} - {calories} kcal")

    match = _BASE_SERVING.search(joined_text(document.select(".factPanel")))
    if match:
        options.insert(0, f"Base: {match.group(2)} - {match.group(1)} kcal")
    return options


def extract_serving_context(html: str) -> str:
    """Return the page's serving summary text, whitespace-collapsed."""
    document = parse_html(html)
    text = " ".join(joined_text(document.select(".factPanel")).split())
    return text[:SERVING_CONTEXT_LIMIT]


def _extract_energy(document: HtmlNode) -> Energy:
    kj = 0.0
    kcal = 0.0
    for node in document.select(".nutrition_facts .tRight"):
        text = node.text()
        unit_text = text.lower()
        if "kj" in unit_text:
            kj = parse_locale_number(text)
        elif "kcal" in unit_text:
            kcal = parse_locale_number(text)
    return Energy(kj=kj, kcal=kcal)


def _find_main(document: HtmlNode, label: str) -> float:
    value = 0.0
    for node in document.select(".nutrition_facts .nutrient"):
        if not node.has_class("left") or node.has_class("sub"):
            continue
        if label in _normalize(node.text()):
            value = _sibling_value(node, value)
    return value


def _find_sub(document: HtmlNode, label: str) -> float:
    value = 0.0
    for node in document.select(".nutrition_facts .nutrient.sub.left"):
        if _sub_label_matches(_normalize(node.text()), label):
            value = _sibling_value(node, value)
    return value


def _sub_label_matches(text: str, label: str) -> bool:
    # "saturada" is a substring of "monoinsaturada" and "poliinsaturada".
    if label == "saturada":
        return text == "gordura saturada"
    return label in text


def _sibling_value(node: HtmlNode, current: float) -> float:
    sibling = node.next_sibling()
    if sibling is None or not sibling.has_class("tRight"):
        return current
    return parse_locale_number(sibling.text())


def _normalize(text: str) -> str:
    return " ".join(unicodedata.normalize("NFC", text).lower().split())
