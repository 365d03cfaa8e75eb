"""
Home package for the book catalog service.

Exposes the welcome, greeting and health routes served at the root of
the application. Everything here is stateless: each request is answered
from constants and a fresh lookup of the host the process runs on.
"""

from .router import router as home_router  # noqa: F401
