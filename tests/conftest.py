"""
Pytest fixtures for the water poll tests.
"""

import json
import re

import pytest

from waterpoll import create_app
from waterpoll.config import TestConfig
from waterpoll.extensions import db


@pytest.fixture
def app():
    """Application bound to a fresh in-memory database."""
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def page_data(client):
    """Fetch the page and return the JSON embedded for the client script."""

    def _fetch(**kwargs):
        response = client.get("/", **kwargs)
        assert response.status_code == 200
        match = re.search(
            r'<script id="page-data" type="application/json">(.*?)</script>',
            response.get_data(as_text=True),
            re.S,
        )
        assert match, "page data block missing"
        return json.loads(match.group(1))

    return _fetch
