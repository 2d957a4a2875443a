# web/services/greeting.py
# /api/hello ve /api/health yanıtlarını üretir. HTTP detayı yok.

from datetime import datetime, timezone
from typing import Callable, Optional

from web.config import hello_message

HEALTH_STATUS_OK = "ok"
HEALTH_STATUS_ERROR = "error"


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """UTC ISO-8601, milisaniye hassasiyetinde, 'Z' sonekli (ör. 2026-10-19T14:00:00.123Z)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_hello(now: Optional[Callable[[], datetime]] = None) -> dict:
    """Selamlama mesajı ve istek anının zaman damgası."""
    clock = now or _utc_now
    return {
        "message": hello_message(),
        "timestamp": format_timestamp(clock()),
    }


def build_health() -> dict:
    """Servis ayakta mı kontrolü. Bağımlılık yok; süreç cevap veriyorsa 'ok'."""
    return {"status": HEALTH_STATUS_OK}
