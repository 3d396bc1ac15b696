from dataclasses import dataclass
from typing import Callable

from models.country import ProjectedCountry
from models.table import SUBTITLE_PREFIX, MenuItem, TableView
from services.country_service import CountryQueryEngine
from services.table_service import countries_to_table


class UnknownMenuItemError(LookupError):
    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Unknown menu item: {item_id}")


@dataclass(frozen=True)
class _Entry:
    label: str
    description: str
    query: Callable[[CountryQueryEngine], list[ProjectedCountry]]

    @property
    def subtitle(self) -> str:
        return f"{SUBTITLE_PREFIX} - {self.description}"


# Fixed filters shown after the per-language entries
_FILTERS: dict[str, _Entry] = {
    "population_100_000_000m": _Entry(
        "Population > 100M",
        "Population greater than 100 million",
        lambda engine: engine.get_by_population(100_000_000),
    ),
    "population_1m_2m": _Entry(
        "Population 1-2M",
        "Population between 1 and 2 million",
        lambda engine: engine.get_by_population(1_000_000, 2_000_000),
    ),
    "americas_1mkm": _Entry(
        "Americas > 1M Km2",
        "Area greater than 1 million Km2 in the Americas",
        lambda engine: engine.get_by_area_and_continent("Americas", 1_000_000),
    ),
    "asia_all": _Entry(
        "All of Asia",
        "All countries in Asia",
        lambda engine: engine.get_by_area_and_continent("Asia", 0),
    ),
}


def _language_entry(language: str) -> _Entry:
    return _Entry(
        language,
        f"Country names in {language}",
        lambda engine: engine.get_by_language(language),
    )


def _entries(engine: CountryQueryEngine) -> dict[str, _Entry]:
    entries = {lang.lower(): _language_entry(lang) for lang in engine.languages}
    entries.update(_FILTERS)
    return entries


def menu_items(engine: CountryQueryEngine) -> list[MenuItem]:
    return [
        MenuItem(id=item_id, label=entry.label, subtitle=entry.subtitle)
        for item_id, entry in _entries(engine).items()
    ]


def dispatch(engine: CountryQueryEngine, item_id: str) -> TableView:
    entry = _entries(engine).get(item_id)
    if entry is None:
        raise UnknownMenuItemError(item_id)
    return countries_to_table(entry.query(engine), entry.subtitle)
