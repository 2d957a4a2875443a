# web/api/example.py
# Modüler route örneği: GET /api/example ve GET /api/example/{example_id}.
# Yeni bir route grubu eklemek için bu dosyayı kopyalayıp main.py'de include_router çağırın.

from fastapi import APIRouter, HTTPException

from web.schemas.responses import ExampleIndexResponse, ExampleItemResponse
from web.services.examples import InvalidExampleIdError, get_example, list_examples

router = APIRouter(prefix="/example")


@router.get("", response_model=ExampleIndexResponse, summary="Örnek route listesi")
async def example_index():
    return list_examples()


@router.get(
    "/{example_id}",
    response_model=ExampleItemResponse,
    summary="id ile örnek kayıt",
    responses={
        200: {"description": "id geri yansıtılır"},
        400: {"description": "Geçersiz id"},
    },
)
async def example_item(example_id: str):
    try:
        return get_example(example_id)
    except InvalidExampleIdError as e:
        raise HTTPException(status_code=400, detail=str(e))
