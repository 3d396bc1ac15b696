import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from config import settings
from routers import health, countries, menu
from services.country_service import get_dataset

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Country Atlas", version="0.1.0")

app.state.limiter = countries.limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(countries.router)
app.include_router(menu.router)


@app.get("/")
async def root():
    return {
        "name": "Country Atlas API",
        "version": "0.1.0",
        "endpoints": ["/health", "/countries", "/menu"],
    }


@app.on_event("startup")
async def startup():
    # Fail fast on a broken dataset rather than on the first request
    dataset = get_dataset()
    logger.info("Country Atlas API is running (%d countries)", len(dataset))
