# catalog_service/errors.py
from typing import Optional


class HostnameResolutionError(RuntimeError):
    """Raised when the local machine's network name cannot be determined."""

    def __init__(self, hostname: Optional[str] = None, reason: str = ""):
        self.hostname = hostname or ""
        message = "Unable to determine local hostname"
        if self.hostname:
            message += f" ({self.hostname!r})"
        if reason:
            message += f": {reason}"
        super().__init__(message)
