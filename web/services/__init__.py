# web/services/
# ---------------------------------------------------------------------------
# Yanıt üretme katmanı: route'ların döndürdüğü sözlükler burada oluşur.
#
# İçermeli:
#   - Sabit/türetilmiş payload üretimi, config okuma
#   - Kendi hata sınıfları (api/ bunları HTTP durum kodlarına çevirir)
#
# İçermemeli:
#   - HTTP/route detayları (api/ tarafında)
# ---------------------------------------------------------------------------
