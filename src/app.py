from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from src.api import routes
from src.config import settings
from src.services.portfolio_refresh_scheduler import PortfolioRefreshScheduler
from src.utils.formatting import format_inr, format_signed_percent, percent_bar_width

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

_PROJECT_ROOT = Path(__file__).resolve().parents[1]

app = FastAPI(
    title="sector_portfolio_tracker",
    description="Sector-grouped portfolio table with periodically refreshed live quotes",
    version="0.1.0",
    debug=settings.app_debug,
)
templates = Jinja2Templates(directory=str(_PROJECT_ROOT / "templates"))
templates.env.filters["inr"] = format_inr
templates.env.filters["signed_percent"] = format_signed_percent
templates.env.filters["bar_width"] = percent_bar_width

portfolio_refresh_scheduler = PortfolioRefreshScheduler(routes.portfolio_service)


@app.on_event("startup")
def startup_event() -> None:
    portfolio_refresh_scheduler.start()
    logging.info(
        "Portfolio tracker started",
        extra={"quote_provider": routes.portfolio_service.quote_service.provider_name},
    )


@app.on_event("shutdown")
def shutdown_event() -> None:
    portfolio_refresh_scheduler.stop()


app.include_router(routes.router)


@app.get("/", response_class=HTMLResponse)
def home(request: Request):
    snapshot = routes.portfolio_service.snapshot()
    return templates.TemplateResponse(
        request,
        "index.html",
        {"snapshot": snapshot, "sectors": snapshot.sectors},
    )


def main() -> None:
    import uvicorn

    uvicorn.run("src.app:app", host=settings.app_host, port=settings.app_port)
