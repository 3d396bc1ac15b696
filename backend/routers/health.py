import time
from fastapi import APIRouter, Depends

from services.country_service import CountryQueryEngine, get_engine

router = APIRouter()

_start_time = time.time()


@router.get("/health")
async def health_check(engine: CountryQueryEngine = Depends(get_engine)):
    return {
        "status": "ok",
        "uptime_seconds": round(time.time() - _start_time),
        "version": "0.1.0",
        "languages": len(engine.languages),
    }
