import socket

import pytest
from fastapi.testclient import TestClient

from catalog_service.main import app


@pytest.fixture
def client():
    with TestClient(app) as client:
        yield client


@pytest.fixture
def fake_host(monkeypatch):
    """Pin the host lookups to a known, resolvable name."""
    monkeypatch.setattr(socket, "gethostname", lambda: "catalog-node-1")
    monkeypatch.setattr(socket, "gethostbyname", lambda name: "10.0.0.7")
    return "catalog-node-1"


@pytest.fixture
def broken_resolver(monkeypatch):
    def _fail(name):
        raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")

    monkeypatch.setattr(socket, "gethostname", lambda: "ghost-host")
    monkeypatch.setattr(socket, "gethostbyname", _fail)
