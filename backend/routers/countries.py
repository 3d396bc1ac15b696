from fastapi import APIRouter, Depends, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.country import ProjectedCountry
from services.country_service import (
    CountryQueryEngine,
    UnsupportedLanguageError,
    get_engine,
)

router = APIRouter(prefix="/countries", tags=["countries"])

limiter = Limiter(key_func=get_remote_address)


@router.get("", response_model=list[ProjectedCountry])
@limiter.limit(settings.rate_limit)
async def list_countries(
    request: Request,
    language: str = settings.default_language,
    engine: CountryQueryEngine = Depends(get_engine),
):
    try:
        return engine.get_by_language(language)
    except UnsupportedLanguageError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/languages", response_model=list[str])
async def list_languages(engine: CountryQueryEngine = Depends(get_engine)):
    return list(engine.languages)


@router.get("/continents", response_model=list[str])
async def list_continents(engine: CountryQueryEngine = Depends(get_engine)):
    return list(engine.continents)


@router.get("/population", response_model=list[ProjectedCountry])
@limiter.limit(settings.rate_limit)
async def countries_by_population(
    request: Request,
    min_population: int,
    max_population: int | None = None,
    engine: CountryQueryEngine = Depends(get_engine),
):
    return engine.get_by_population(min_population, max_population)


@router.get("/continent/{continent}", response_model=list[ProjectedCountry])
@limiter.limit(settings.rate_limit)
async def countries_by_continent(
    request: Request,
    continent: str,
    min_area: int = Query(...),
    engine: CountryQueryEngine = Depends(get_engine),
):
    return engine.get_by_area_and_continent(continent, min_area)
