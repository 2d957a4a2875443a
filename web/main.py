# web/main.py
# ---------------------------------------------------------------------------
# Web uygulamasının giriş noktası.
#
# İçermeli:
#   - FastAPI uygulama örneği, CORS middleware
#   - API router'larının /api altına mount edilmesi
#   - Tek sayfalık arayüzün (web/ui) servis edilmesi
#
# İçermemeli:
#   - Yanıt üretme mantığı (web/services tarafında)
#   - Sunucu başlatma (scripts/run_server.py); import edilince sunucu açılmaz
# ---------------------------------------------------------------------------

import logging
from pathlib import Path
from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from web import config
from web.api.example import router as example_router
from web.api.hello import router as hello_router

logger = logging.getLogger(__name__)


def add_cors(target: FastAPI, origins: List[str]) -> None:
    """CORS middleware ekler. Wildcard origin ile credentials birlikte kullanılamaz."""
    target.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )


app = FastAPI(title="Fullstack Starter")
add_cors(app, config.CORS_ORIGINS)

# GET /api/hello, GET /api/health
app.include_router(hello_router, prefix="/api", tags=["hello"])
# GET /api/example, GET /api/example/{example_id}
app.include_router(example_router, prefix="/api", tags=["example"])

_UI_DIR = Path(__file__).resolve().parent / "ui"
_UI_INDEX = _UI_DIR / "index.html"
_STATIC_DIR = _UI_DIR / "static"

app.mount("/static", StaticFiles(directory=str(_STATIC_DIR)), name="static")


@app.on_event("startup")
def _log_settings():
    logger.info(
        "Starting web app host=%s port=%s cors_origins=%s",
        config.HOST,
        config.PORT,
        config.CORS_ORIGINS,
    )


@app.get("/", include_in_schema=False)
def serve_ui():
    """Ana sayfa: sayaç butonu ve /api/hello yanıtını gösteren arayüz."""
    if _UI_INDEX.exists():
        return FileResponse(_UI_INDEX, media_type="text/html")
    return {"message": "UI not found"}
