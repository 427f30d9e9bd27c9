from typing import AsyncIterator

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from client.pages.interactive import InteractivePage
from client.pages.ssr import render_ssr

router = APIRouter(
    tags=["pages"],
)


async def get_http_client(request: Request) -> AsyncIterator[httpx.AsyncClient]:
    """One client per request, nothing is shared or cached between renders."""
    settings = request.app.state.settings
    async with httpx.AsyncClient(timeout=settings.api_timeout) as http:
        yield http


@router.get("/", response_class=HTMLResponse)
async def interactive_page(request: Request):
    page = InteractivePage(request.app.state.settings)
    return HTMLResponse(page.render())


@router.get("/ssr", response_class=HTMLResponse)
async def ssr_page(request: Request, http: httpx.AsyncClient = Depends(get_http_client)):
    return HTMLResponse(await render_ssr(request.app.state.settings, http))
