"""
Pytest configuration and shared fixtures.

The service runs against an in-memory SQLite database; the admin client
talks to it through FastAPI's TestClient, so screen tests cover the whole
round trip.
"""

import os

# Must be set before any heroslides module reads the settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ADMIN_EMAIL"] = "admin@example.com"
os.environ["ADMIN_PASSWORD"] = "s3cret"
os.environ["FALLBACK_IMAGE_URL"] = "/public/logo.png"

import pytest
from fastapi.testclient import TestClient

from heroslides.admin.api import AdminApiClient
from heroslides.admin.screen import HeroSlidesScreen
from heroslides.main import app
from heroslides.models.user import Base, SessionLocal, User, engine

ADMIN_AUTH = ("admin@example.com", "s3cret")


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def api(client):
    return AdminApiClient(http=client)


@pytest.fixture
def screen(api):
    return HeroSlidesScreen(api)


@pytest.fixture
def create_slide(client):
    """POST a slide straight to the service, bypassing the screen."""

    def _create(**fields):
        payload = {"title": "Slide", "imageUrl": "/public/slide.jpg"}
        payload.update(fields)
        response = client.post("/api/admin/hero-slides", json=payload, auth=ADMIN_AUTH)
        assert response.status_code == 200, response.text
        return response.json()

    return _create


@pytest.fixture
def regular_user(client):
    db = SessionLocal()
    try:
        db.add(User(email="shopper@example.com", password="pw", role="USER"))
        db.commit()
    finally:
        db.close()
    return ("shopper@example.com", "pw")


@pytest.fixture
def request_log(client):
    """Every request the TestClient sends, as (method, path)."""
    sent = []

    def record(request):
        sent.append((request.method, request.url.path))

    client.event_hooks = {"request": [record], "response": []}
    return sent
