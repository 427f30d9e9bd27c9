from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter(
    tags=["greeting"],
)


@router.get("/", response_class=PlainTextResponse)
async def read_greeting(request: Request) -> str:
    return request.app.state.settings.greeting
