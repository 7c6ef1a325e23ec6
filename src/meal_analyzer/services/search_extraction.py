"""Extraction of candidates from a food search results page."""

import re
from urllib.parse import urljoin

from meal_analyzer.adapters.html_document import HtmlNode, joined_text, parse_html
from meal_analyzer.domain.nutrition import SearchCandidate
from meal_analyzer.services.numbers import parse_locale_number

FOOD_SOURCE_BASE_URL = "https://www.fatsecret.com.br"
MAX_CANDIDATES = 10

_CALORIES = re.compile(r"Calorias:\s*([\d,]+)\s*kcal")
_FAT = re.compile(r"Gord:\s*([\d,]+)\s*g")
_CARBS = re.compile(r"Carbs:\s*([\d,]+)\s*g")
_PROTEIN = re.compile(r"Prot:\s*([\d,]+)\s*g")


def extract_candidates(
    html: str, base_url: str = FOOD_SOURCE_BASE_URL
) -> list[SearchCandidate]:
    """Parse search result rows into candidates, in document order.

    Rows without a primary food link (headers, ads) are skipped. At most
    ``MAX_CANDIDATES`` are returned.
    """
    document = parse_html(html)
    candidates: list[SearchCandidate] = []
    for row in document.select("table.searchResult tr"):
        candidate = _parse_row(row, base_url)
        if candidate is None:
            continue
        candidates.append(candidate)
        if len(candidates) >= MAX_CANDIDATES:
            break
    return candidates


def _parse_row(row: HtmlNode, base_url: str) -> SearchCandidate | None:
    link = row.select_one("a.prominent")
    if link is None:
        return None
    href = (link.attr("href") or "").strip()
    if not href:
        return None
    brand_node = row.select_one("a.brand")
    brand = _clean_brand(brand_node.text()) if brand_node is not None else None
    info = joined_text(row.select(".smallText.greyText"))
    return SearchCandidate(
        name=link.text().strip(),
        url=urljoin(base_url, href),
        brand=brand,
        calories_per_100g=_match_number(_CALORIES, info),
        fat_per_100g=_match_number(_FAT, info),
        carbs_per_100g=_match_number(_CARBS, info),
        protein_per_100g=_match_number(_PROTEIN, info),
    )


def _clean_brand(text: str) -> str | None:
    brand = re.sub(r"[()]", "", text).strip()
    return brand or None


def _match_number(pattern: re.Pattern[str], text: str) -> float:
    match = pattern.search(text)
    if match is None:
        return 0.0
    return parse_locale_number(match.group(1))
