# web/api/
# ---------------------------------------------------------------------------
# HTTP API katmanı: route tanımları, response_model bağlama, hata eşleme.
#
# İçermeli:
#   - APIRouter tanımları (main.py /api önekiyle mount eder)
#   - Servis hatalarının HTTPException'a çevrilmesi
#
# İçermemeli:
#   - Yanıt üretme mantığı (services'e taşı)
#   - HTML/CSS/JS (ui/ tarafında)
# ---------------------------------------------------------------------------
