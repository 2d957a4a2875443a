# web/services/examples.py
# Örnek route modülünün yanıtları. Yeni route grupları bu kalıpla eklenebilir.

EXAMPLE_ENDPOINTS = ["/api/example", "/api/example/:id"]


class ExampleError(Exception):
    """Örnek route hataları için temel sınıf."""
    pass


class InvalidExampleIdError(ExampleError):
    """id yol ayırıcı veya '..' içeremez."""
    pass


def list_examples() -> dict:
    return {"message": "Example route", "endpoints": list(EXAMPLE_ENDPOINTS)}


def get_example(example_id: str) -> dict:
    """
    Verilen id için örnek kaydı döner. Kayıt saklanmaz; id olduğu gibi geri yansıtılır.
    Raises:
        InvalidExampleIdError: id boş (veya sadece boşluk) ya da '/', '\\' veya '..' içeriyor.
    """
    if not example_id.strip() or "/" in example_id or "\\" in example_id or ".." in example_id:
        raise InvalidExampleIdError(f"Geçersiz id: {example_id!r}")
    return {"id": example_id, "message": f"Fetched example with id: {example_id}"}
