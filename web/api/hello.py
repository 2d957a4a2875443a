# web/api/hello.py
# Selamlama ve sağlık kontrolü endpoint'leri. Yanıtlar services/greeting'te üretilir.

from fastapi import APIRouter

from web.schemas.responses import HealthResponse, HelloResponse
from web.services.greeting import build_health, build_hello

router = APIRouter()


@router.get(
    "/hello",
    response_model=HelloResponse,
    summary="Selamlama mesajı",
    responses={200: {"description": "Mesaj ve UTC zaman damgası"}},
)
async def hello():
    """message (HELLO_MESSAGE ile değiştirilebilir) ve istek anının ISO-8601 zaman damgası."""
    return build_hello()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Servis durumu",
    responses={200: {"description": "Servis ayakta"}},
)
async def health():
    return build_health()
