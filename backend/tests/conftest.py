import pytest
from fastapi.testclient import TestClient

from models.country import CountryRecord
from services.country_service import CountryDataset, CountryQueryEngine, get_engine


def _record(code, continent, area, population, capital, english, french):
    return CountryRecord(
        code=code,
        continent=continent,
        areaInKm2=area,
        population=population,
        capital=capital,
        name={"English": english, "French": french},
    )


@pytest.fixture
def records():
    return [
        _record("CA", "Americas", 9984670, 36624199, "Ottawa", "Canada", "Canada"),
        _record("EE", "Europe", 45226, 1000000, "Tallinn", "Estonia", "Estonie"),
        _record("GA", "Africa", 267667, 1500000, "Libreville", "Gabon", "Gabon"),
        _record("BH", "Asia", 665, 2000000, "Manama", "Bahrain", "Bahreïn"),
        _record("MX", "Americas", 1000000, 112468855, "Mexico City", "Mexico", "Mexique"),
        _record("JP", "Asia", 377835, 127288000, "Tokyo", "Japan", "Japon"),
        _record("AQ", "Antarctica", 14000000, 0, "", "Antarctica", "Antarctique"),
    ]


@pytest.fixture
def dataset(records):
    return CountryDataset(records)


@pytest.fixture
def engine(dataset):
    return CountryQueryEngine(dataset)


@pytest.fixture
def client(engine):
    from main import app

    app.dependency_overrides[get_engine] = lambda: engine
    yield TestClient(app)
    app.dependency_overrides.clear()
