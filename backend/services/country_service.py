import json
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError

from config import settings
from models.country import CountryRecord, ProjectedCountry

logger = logging.getLogger(__name__)

ENGLISH = "English"


class DatasetError(ValueError):
    """The country dataset is missing, unreadable or breaks an invariant."""


class UnsupportedLanguageError(LookupError):
    def __init__(self, language: str, supported: tuple[str, ...]):
        self.language = language
        self.supported = supported
        super().__init__(
            f"Unsupported language {language!r}; expected one of: {', '.join(supported)}"
        )


class CountryDataset:
    """Read-only handle over the raw country records.

    Validates uniqueness of codes and that every record carries the same
    language keys, then derives the supported languages once.
    """

    __slots__ = ("_records", "_languages", "_continents")

    def __init__(self, records):
        records = tuple(records)
        if not records:
            raise DatasetError("Country dataset is empty")

        seen: set[str] = set()
        for record in records:
            if record.code in seen:
                raise DatasetError(f"Duplicate country code: {record.code}")
            seen.add(record.code)

        languages = tuple(records[0].name)
        expected = set(languages)
        for record in records[1:]:
            if set(record.name) != expected:
                raise DatasetError(
                    f"Country {record.code} has languages {sorted(record.name)}, "
                    f"expected {sorted(expected)}"
                )

        self._records = records
        self._languages = languages
        self._continents = tuple(sorted({r.continent for r in records}))

    @property
    def records(self) -> tuple[CountryRecord, ...]:
        return self._records

    @property
    def languages(self) -> tuple[str, ...]:
        return self._languages

    @property
    def continents(self) -> tuple[str, ...]:
        return self._continents

    def __len__(self) -> int:
        return len(self._records)


def load_dataset(path: Path) -> CountryDataset:
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise DatasetError(f"Country dataset not found: {path}") from e
    except json.JSONDecodeError as e:
        raise DatasetError(f"Country dataset is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise DatasetError("Country dataset must be a JSON array")

    try:
        records = [CountryRecord.model_validate(c) for c in raw]
    except ValidationError as e:
        raise DatasetError(f"Invalid country record: {e}") from e

    dataset = CountryDataset(records)
    logger.info(
        "Loaded %d countries in %d languages from %s",
        len(dataset), len(dataset.languages), path,
    )
    return dataset


class CountryQueryEngine:
    """Pure queries over a CountryDataset. Every call returns a new list."""

    def __init__(self, dataset: CountryDataset):
        self._dataset = dataset

    @property
    def languages(self) -> tuple[str, ...]:
        return self._dataset.languages

    @property
    def continents(self) -> tuple[str, ...]:
        return self._dataset.continents

    def get_by_language(self, language: str) -> list[ProjectedCountry]:
        if language not in self._dataset.languages:
            raise UnsupportedLanguageError(language, self._dataset.languages)
        return [ProjectedCountry.from_record(r, language) for r in self._dataset.records]

    def get_by_population(
        self, min_population: int, max_population: int | None = None
    ) -> list[ProjectedCountry]:
        """Countries strictly above ``min_population``.

        When ``max_population`` is truthy the population must also be
        strictly below it. A max of 0 is treated as no upper bound.
        """
        countries = self.get_by_language(ENGLISH)
        if max_population:
            return [
                c for c in countries
                if min_population < c.population < max_population
            ]
        return [c for c in countries if c.population > min_population]

    def get_by_area_and_continent(
        self, continent: str, min_area: int
    ) -> list[ProjectedCountry]:
        return [
            c for c in self.get_by_language(ENGLISH)
            if c.continent == continent and c.area_in_km2 >= min_area
        ]


@lru_cache
def get_dataset() -> CountryDataset:
    return load_dataset(settings.data_path)


def get_engine() -> CountryQueryEngine:
    return CountryQueryEngine(get_dataset())
