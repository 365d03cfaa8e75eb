"""
Local host lookups for the health endpoint.

The health check reports the machine name and operating system the
service runs on. The name is taken from the local network stack and then
resolved through the system resolver (hosts file or DNS); a machine whose
own name does not resolve is considered unhealthy and
``HostnameResolutionError`` is raised. Nothing is cached: each call
queries the OS again so a renamed container or a fixed ``/etc/hosts`` is
picked up immediately.
"""

from __future__ import annotations

import logging
import platform
import socket
import sys

from ..errors import HostnameResolutionError
from .schemas import HostInfo


logger = logging.getLogger(__name__)


def resolve_hostname() -> str:
    """Return the local host name after checking that it resolves.

    Returns
    -------
    str
        The machine's network name.

    Raises
    ------
    HostnameResolutionError
        If the name is empty or the resolver cannot map it to an address.
    """
    hostname = ""
    try:
        hostname = socket.gethostname()
        if not hostname:
            raise HostnameResolutionError(reason="empty host name")
        address = socket.gethostbyname(hostname)
    except OSError as exc:
        raise HostnameResolutionError(hostname, str(exc)) from exc
    logger.debug("Resolved local host %s to %s", hostname, address)
    return hostname


def os_name() -> str:
    """Return the operating system name, e.g. ``Linux``."""
    return platform.system() or sys.platform


def get_host_info() -> HostInfo:
    return HostInfo(hostname=resolve_hostname(), os_name=os_name())
