from fastapi import FastAPI
import uvicorn

from client.config.config import ClientSettings, load_client_settings
from client.routes import pages
from server.utils.logger import log_msg


def create_app(settings: ClientSettings) -> FastAPI:
    app = FastAPI(
        title="Full Stack Scaffold Client",
        description="Pages rendering data fetched from the scaffold API",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
    )
    app.state.settings = settings

    @app.on_event("startup")
    async def startup_event():
        log_msg(f"Client is running at http://localhost:{settings.port}")
        log_msg(f"Server-side renders fetch from {settings.api_internal_url}")

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    app.include_router(pages.router)

    return app


if __name__ == "__main__":
    settings = load_client_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)
