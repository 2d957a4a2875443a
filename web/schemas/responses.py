# web/schemas/responses.py
# API yanıt modelleri. Route'lar ve testler aynı sözleşmeyi kullanır.

from typing import List, Literal

from pydantic import BaseModel


class HelloResponse(BaseModel):
    message: str
    timestamp: str


class HealthResponse(BaseModel):
    status: Literal["ok", "error"]


class ExampleIndexResponse(BaseModel):
    message: str
    endpoints: List[str]


class ExampleItemResponse(BaseModel):
    id: str
    message: str
