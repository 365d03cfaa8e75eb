"""
Route definitions for the service root.

Endpoints:
- GET /                 : static welcome message
- GET /greeting/{name}  : personal greeting echoing ``name``
- GET /health           : host name and OS the service runs on

All responses are plain text.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from .host_info import get_host_info


logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to the Cloud Native Book Catalog!"
# Copy kept byte-for-byte, including the double comma and trailing space.
GREETING_TEMPLATE = "Hello {name}, welcome to the book catalog!,, I am yashwanth "
HEALTH_TEMPLATE = "Application is healthy and running on: {hostname} ({os_name})"

router = APIRouter(tags=["home"], default_response_class=PlainTextResponse)


@router.get("/")
def get_greeting() -> str:
    return WELCOME_MESSAGE


@router.get("/greeting/{name}")
def get_personal_greeting(name: str) -> str:
    # No validation: the name goes into the text as the router decoded it.
    return GREETING_TEMPLATE.format(name=name)


@router.get("/health")
def health() -> str:
    """Report the host this instance runs on.

    The host name is resolved on every call. A resolution failure raises
    ``HostnameResolutionError``, which the application turns into a 500.
    """
    info = get_host_info()
    logger.debug("Health check on %s (%s)", info.hostname, info.os_name)
    return HEALTH_TEMPLATE.format(hostname=info.hostname, os_name=info.os_name)
