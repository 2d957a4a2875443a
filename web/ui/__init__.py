# web/ui/
# ---------------------------------------------------------------------------
# Kullanıcı arayüzü - index.html ve static/ altındaki CSS/JS/logo dosyaları.
#
# İçermeli:
#   - HTML sayfası, statik CSS/JS
#   - Sayaç ve API yanıtı kartları
#
# İçermemeli:
#   - API endpoint tanımları (api/ tarafında)
#   - Backend iş mantığı (services/)
# ---------------------------------------------------------------------------
