import httpx

from client.classes.fetch_result import HttpError, NetworkError, Success, fetch_text
from client.config.config import ClientSettings
from client.pages.rendering import render_template

FETCH_ERROR_MESSAGE = "There has been a problem with your fetch operation"


class InteractivePage:
    """Page whose data is fetched after it has been shown.

    The ``GET /`` route sends the markup with ``data`` empty and the script
    in interactive.html runs the fetch in the browser; the app itself never
    calls ``load``. ``load`` is a Python mirror of that script (one fetch,
    body shown whatever the status, FETCH_ERROR_MESSAGE on a thrown error)
    for driving the page outside a browser. The script's URL and error text
    come from the same settings and constant.
    """

    def __init__(self, settings: ClientSettings):
        self.settings = settings
        self.data = ""

    async def load(self, http: httpx.AsyncClient) -> str:
        result = await fetch_text(http, self.settings.api_public_url)
        if isinstance(result, (Success, HttpError)):
            # the status code is not checked here, any body is shown
            self.data = result.body
        elif isinstance(result, NetworkError):
            self.data = FETCH_ERROR_MESSAGE
        else:
            raise TypeError(f"Unexpected fetch result: {result!r}")
        return self.data

    def render(self) -> str:
        return render_template(
            "interactive.html",
            data=self.data,
            api_url=self.settings.api_public_url,
            error_message=FETCH_ERROR_MESSAGE,
        )
