# catalog_service/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from . import __version__, config
from .errors import HostnameResolutionError
from .home import home_router


logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="Cloud Native Book Catalog",
    description=(
        "Catalog service front door: a welcome message, a personal "
        "greeting and a health check reporting the host it runs on."
    ),
    version=__version__,
)

app.include_router(home_router)


@app.exception_handler(HostnameResolutionError)
async def hostname_resolution_error_handler(request: Request, exc: HostnameResolutionError):
    logger.error("Health check failed on %s: %s", request.url.path, exc)
    return PlainTextResponse(
        "Unable to determine local hostname", status_code=500
    )
