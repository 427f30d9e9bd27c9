import httpx

from client.classes.fetch_result import HttpError, NetworkError, Success, fetch_text
from client.config.config import ClientSettings
from client.pages.rendering import render_template
from server.utils.logger import log_msg

NOT_OK_MESSAGE = "Network response was not ok."
CATCH_MESSAGE = "Network response was not ok. in the Catch Block"
NO_DATA_MESSAGE = "We did Not Got The Data"
NO_ENVIRONMENT_MESSAGE = "We did Not Got The ENVIRONMENT"


async def load_ssr_data(settings: ClientSettings, http: httpx.AsyncClient) -> str:
    """Fetch the API root once and return the text to show.

    A non-2xx response yields NOT_OK_MESSAGE and its body is dropped.
    """
    result = await fetch_text(http, settings.api_internal_url)
    if isinstance(result, Success):
        return result.body
    if isinstance(result, HttpError):
        return NOT_OK_MESSAGE
    if isinstance(result, NetworkError):
        log_msg(result.cause)
        return CATCH_MESSAGE
    raise TypeError(f"Unexpected fetch result: {result!r}")


async def render_ssr(settings: ClientSettings, http: httpx.AsyncClient) -> str:
    data = await load_ssr_data(settings, http)
    return render_template(
        "ssr.html",
        data=data,
        no_data_message=NO_DATA_MESSAGE,
        environment=settings.environment,
        no_environment_message=NO_ENVIRONMENT_MESSAGE,
    )
