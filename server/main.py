import threading
import time
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from server.classes.api_classes import HealthRead
from server.config.config import Settings, load_settings
from server.routes import helloworld, users
from server.utils.logger import log_msg


class ServerStartupError(RuntimeError):
    """Raised when the API server could not bind its listening socket."""


def create_app(settings: Settings) -> FastAPI:
    app = FastAPI(
        title="Full Stack Scaffold API",
        description="Backend of a full stack scaffold: a greeting and a fixed user list",
        version="0.1.0",
    )
    app.state.settings = settings

    # credentials can't be combined with a wildcard origin
    allow_any = "*" in settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_any else settings.cors_origins,
        allow_credentials=not allow_any,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", response_model=HealthRead)
    async def health_check():
        '''
        A simple health check endpoint.
        '''
        return {"status": "ok"}

    app.include_router(helloworld.router)
    app.include_router(users.router)

    return app


class ServerHandle:
    """Owns a uvicorn server for one app and scopes its lifetime.

    start() serves from a background thread and only returns once the socket
    is bound. Each start() builds a fresh uvicorn server, so a stopped handle
    can be started again. run() serves in the calling thread; uvicorn exits
    the process if binding fails there.
    """

    def __init__(self, app: FastAPI, settings: Settings):
        self.app = app
        self.settings = settings
        self._server = self._new_server()
        self._thread: Optional[threading.Thread] = None
        self.exit_code: Optional[int] = None

    def _new_server(self) -> uvicorn.Server:
        return uvicorn.Server(
            uvicorn.Config(
                self.app,
                host=self.settings.host,
                port=self.settings.port,
                log_config=None,
            )
        )

    def _serve(self) -> None:
        try:
            self._server.run()
        except SystemExit as exc:
            # uvicorn exits when the socket can't be bound
            self.exit_code = exc.code

    @property
    def started(self) -> bool:
        return (
            self._thread is not None
            and self._thread.is_alive()
            and self._server.started
        )

    @property
    def port(self) -> int:
        """Bound port, which differs from settings.port when that is 0."""
        if self.started and self._server.servers:
            sockets = self._server.servers[0].sockets
            if sockets:
                return sockets[0].getsockname()[1]
        return self.settings.port

    def start(self, timeout: float = 10.0) -> None:
        if self._thread is not None and self._thread.is_alive():
            return
        self._server = self._new_server()
        self.exit_code = None
        self._thread = threading.Thread(
            target=self._serve, name="api-server", daemon=True
        )
        self._thread.start()

        deadline = time.monotonic() + timeout
        while not self._server.started:
            if not self._thread.is_alive():
                self._thread = None
                raise ServerStartupError(
                    f"Could not bind {self.settings.host}:{self.settings.port} "
                    f"(exit code {self.exit_code})"
                )
            if time.monotonic() > deadline:
                self.stop()
                raise ServerStartupError(
                    f"Server did not start within {timeout} seconds"
                )
            time.sleep(0.05)
        log_msg(f"Server is running at http://localhost:{self.port}")

    def stop(self, timeout: float = 10.0) -> None:
        if self._thread is None:
            return
        self._server.should_exit = True
        self._thread.join(timeout)
        if self._thread.is_alive():
            # still shutting down; a later stop() joins it again
            log_msg(f"Warning: server did not stop within {timeout} seconds")
            return
        self._thread = None

    def run(self) -> None:
        log_msg(f"Starting server on http://localhost:{self.settings.port}")
        self._server.run()


def create_server(settings: Settings) -> ServerHandle:
    return ServerHandle(create_app(settings), settings)


if __name__ == "__main__":
    create_server(load_settings()).run()
