from pydantic import BaseModel, ConfigDict, Field


class CountryRecord(BaseModel):
    """A raw dataset entry, with its name in every supported language."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: str = Field(min_length=2, max_length=2)
    continent: str
    area_in_km2: int = Field(alias="areaInKm2", ge=0)
    population: int = Field(ge=0)
    capital: str = ""
    name: dict[str, str]


class ProjectedCountry(BaseModel):
    """A country with its name resolved to one language.

    Field order is the table column order.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: str
    name: str
    continent: str
    area_in_km2: int = Field(alias="areaInKm2")
    population: int
    capital: str

    @classmethod
    def from_record(cls, record: CountryRecord, language: str) -> "ProjectedCountry":
        return cls(
            code=record.code,
            name=record.name[language],
            continent=record.continent,
            area_in_km2=record.area_in_km2,
            population=record.population,
            capital=record.capital,
        )
