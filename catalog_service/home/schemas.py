"""
Pydantic schema definitions for the home module.
"""

from pydantic import BaseModel


class HostInfo(BaseModel):
    """Where the service is running.

    ``hostname`` is the local machine name as known to the resolver and
    ``os_name`` is the operating system family (``Linux``, ``Darwin``,
    ``Windows``...). Both are looked up on every request.
    """

    hostname: str
    os_name: str
