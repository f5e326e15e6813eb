from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .logging_config import setup_logging
from .records_api import router as records_router
from .schemas import ConditionsReport, SunData, TideData
from .scoring import describe_conditions, score_conditions, score_label
from .storage import get_store
from . import weather

import datetime
import logging
from typing import List

logger = logging.getLogger(__name__)

app = FastAPI(title="Fishing Companion")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS, allow_methods=["*"], allow_headers=["*"],
)

@app.on_event("startup")
def startup():
    setup_logging(settings.LOG_LEVEL)
    get_store()
    logger.info("Fishing Companion API started (store: %s)", settings.STORE_URL)

@app.get("/api/test")
def api_test():
    return {"message": "Fishing Companion API is working!"}

# ---------- Weather / sun / tide proxy ----------
async def _upstream(call, what: str):
    try:
        return await call
    except weather.MissingApiKeyError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.warning("Failed to fetch %s data: %s", what, e)
        raise HTTPException(status_code=502, detail=f"Upstream {what} error: {e}")

@app.get("/api/weather/{lat}/{lon}")
async def current_weather(lat: float, lon: float):
    return await _upstream(weather.fetch_current(lat, lon), "weather")

@app.get("/api/forecast/{lat}/{lon}")
async def forecast(lat: float, lon: float):
    return await _upstream(weather.fetch_forecast(lat, lon), "forecast")

@app.get("/api/sun/{lat}/{lon}/{date}", response_model=SunData)
async def sun(lat: float, lon: float, date: datetime.date):
    return await _upstream(weather.fetch_sun(lat, lon, date), "sun")

@app.get("/api/tides/{lat}/{lon}/{date}", response_model=List[TideData])
def tides(lat: float, lon: float, date: datetime.date):
    # Inland locations get an empty list, not an error
    return weather.tides_for(lon)

@app.get("/api/conditions/{lat}/{lon}", response_model=ConditionsReport)
async def conditions(lat: float, lon: float):
    payload = await _upstream(weather.fetch_current(lat, lon), "weather")
    try:
        observation = weather.to_observation(payload)
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=502, detail=f"Upstream weather error: {e}")
    score = score_conditions(observation)
    return ConditionsReport(
        weather=observation,
        score=score,
        label=score_label(score),
        summary=describe_conditions(score),
    )

# ---------- Local records ----------
app.include_router(records_router)
