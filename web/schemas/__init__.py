# web/schemas/
# ---------------------------------------------------------------------------
# API yanıt şemaları (Pydantic). Route'lar response_model olarak kullanır.
#
# İçermeli:
#   - Request/response modelleri
#
# İçermemeli:
#   - İş mantığı veya route tanımları
# ---------------------------------------------------------------------------
