from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lp_analytics.api.errors import register_error_handlers
from lp_analytics.api.middlewares import powered_by_middleware
from lp_analytics.api.routers.health import router as health_router
from lp_analytics.api.routers.lp_statistics import router as lp_statistics_router
from lp_analytics.api.routers.pool_rankings import router as pool_rankings_router
from lp_analytics.shared.config import get_settings
from lp_analytics.shared.logging_config import configure_logging

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(title="LP Analytics API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allow_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(powered_by_middleware(settings.powered_by))
register_error_handlers(app)

app.include_router(health_router)
app.include_router(lp_statistics_router)
app.include_router(pool_rankings_router)
