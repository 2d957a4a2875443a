# web/config.py
# Ortam değişkenlerinden okunan sunucu ayarları. .env dosyası varsa önce o yüklenir.

import logging
import os
from typing import List

from dotenv import load_dotenv

load_dotenv()

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3001
DEFAULT_HELLO_MESSAGE = "Hello from FastAPI!"


class ConfigError(Exception):
    """Geçersiz ortam değişkeni değeri."""
    pass


def parse_origins(value: str) -> List[str]:
    """Virgülle ayrılmış origin listesini böler. Boşsa ["*"] döner."""
    origins = [o.strip() for o in (value or "").split(",") if o.strip()]
    return origins or ["*"]


def parse_port(value: str) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"PORT bir tamsayı olmalı. Gönderilen: {value!r}")
    if not 0 < port < 65536:
        raise ConfigError(f"PORT 1-65535 aralığında olmalı. Gönderilen: {port}")
    return port


def parse_log_level(value: str) -> str:
    """logging seviye adını büyük harfe çevirir; bilinmeyen adlar ConfigError verir."""
    level = (value or "").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"LOG_LEVEL geçersiz (DEBUG, INFO, WARNING, ERROR, CRITICAL). Gönderilen: {value!r}")
    return level


HOST = os.environ.get("HOST", DEFAULT_HOST)
PORT = parse_port(os.environ.get("PORT", str(DEFAULT_PORT)))
CORS_ORIGINS = parse_origins(os.environ.get("CORS_ORIGINS", "*"))
LOG_LEVEL = parse_log_level(os.environ.get("LOG_LEVEL", "INFO"))


def hello_message() -> str:
    """Selamlama mesajı; her istekte okunur, böylece HELLO_MESSAGE çalışırken değiştirilebilir."""
    return os.environ.get("HELLO_MESSAGE") or DEFAULT_HELLO_MESSAGE
