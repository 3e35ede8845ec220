"""
Tests for the vote and tally HTTP endpoints.
"""

import pytest

from waterpoll.extensions import db


def _vote_json(client, choice):
    return client.post("/vote", json={"choice": choice})


def _set_cookies(response):
    return response.headers.getlist("Set-Cookie")


class TestTallyEndpoint:
    def test_empty_tally(self, client):
        response = client.get("/api/tally")
        assert response.status_code == 200
        assert response.get_json() == {
            "yes": 0,
            "no": 0,
            "total": 0,
            "yes_percentage": 0,
            "no_percentage": 0,
        }

    def test_counts_and_percentages(self, client):
        for choice in ["yes", "yes", "yes", "no"]:
            assert _vote_json(client, choice).status_code == 201

        data = client.get("/api/tally").get_json()
        assert data["yes"] == 3
        assert data["no"] == 1
        assert data["total"] == 4
        assert data["yes_percentage"] == 75
        assert data["no_percentage"] == 25

    def test_store_failure_returns_error_envelope(self, app, client):
        db.drop_all()
        response = client.get("/api/tally")
        assert response.status_code == 500
        body = response.get_json()
        assert body["success"] is False
        assert body["error"]["code"] == "INTERNAL_SERVER_ERROR"
        assert body["request_id"] == response.headers["X-Request-Id"]


class TestJsonVote:
    def test_accepts_yes_and_no(self, client):
        response = _vote_json(client, "yes")
        assert response.status_code == 201
        assert response.get_json() == {"message": "Vote recorded", "choice": "yes"}

        response = _vote_json(client, "no")
        assert response.status_code == 201
        assert client.get("/api/tally").get_json()["no"] == 1

    def test_sets_has_voted_cookie(self, client):
        response = _vote_json(client, "no")
        assert any(c.startswith("has_voted=1") for c in _set_cookies(response))

    def test_duplicate_votes_are_not_blocked(self, client):
        # The has_voted cookie from the first vote is sent back with the second
        assert _vote_json(client, "yes").status_code == 201
        assert _vote_json(client, "yes").status_code == 201

        data = client.get("/api/tally").get_json()
        assert data["yes"] == 2
        assert data["no"] == 0

    @pytest.mark.parametrize("choice", ["", None, "maybe", "invalid", "YES"])
    def test_invalid_choice_is_rejected(self, client, choice):
        response = _vote_json(client, choice)
        assert response.status_code == 422

        body = response.get_json()
        assert body["success"] is False
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert "choice" in body["error"]["details"]
        assert not any(c.startswith("has_voted=") for c in _set_cookies(response))

        assert client.get("/api/tally").get_json()["total"] == 0

    def test_missing_choice_is_rejected(self, client):
        response = client.post("/vote", json={})
        assert response.status_code == 422
        assert response.get_json()["error"]["details"] == {
            "choice": ["Missing data for required field."]
        }

    def test_non_object_body_is_rejected(self, client):
        response = client.post("/vote", json=["yes"])
        assert response.status_code == 422

    def test_store_failure_returns_500(self, app, client):
        db.drop_all()
        response = _vote_json(client, "yes")
        assert response.status_code == 500
        assert response.get_json()["error"]["code"] == "INTERNAL_SERVER_ERROR"


class TestFormVote:
    def test_valid_vote_redirects_back_with_success(self, client):
        response = client.post("/vote", data={"choice": "yes"})
        assert response.status_code == 303
        assert response.headers["Location"].endswith("/#voting-section")
        assert any(c.startswith("has_voted=1") for c in _set_cookies(response))

        with client.session_transaction() as session:
            categories = [category for category, _ in session["_flashes"]]
        assert categories == ["success"]

        assert client.get("/api/tally").get_json()["yes"] == 1

    def test_invalid_vote_redirects_back_with_error(self, client):
        response = client.post("/vote", data={"choice": "maybe"})
        assert response.status_code == 303
        assert not any(c.startswith("has_voted=") for c in _set_cookies(response))

        with client.session_transaction() as session:
            categories = [category for category, _ in session["_flashes"]]
        assert categories == ["error"]

        assert client.get("/api/tally").get_json()["total"] == 0

    def test_empty_form_is_rejected(self, client):
        response = client.post("/vote", data={})
        assert response.status_code == 303
        assert client.get("/api/tally").get_json()["total"] == 0


class TestHttpPlumbing:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.get_json() == {"status": "ok"}

    def test_request_id_is_echoed(self, client):
        response = client.get("/health", headers={"X-Request-Id": "abc-123"})
        assert response.headers["X-Request-Id"] == "abc-123"

    def test_request_id_is_generated(self, client):
        response = client.get("/health")
        assert len(response.headers["X-Request-Id"]) == 36

    def test_oversized_request_id_is_replaced(self, client):
        response = client.get("/health", headers={"X-Request-Id": "x" * 200})
        assert response.headers["X-Request-Id"] != "x" * 200
        assert len(response.headers["X-Request-Id"]) == 36

    def test_unknown_route_uses_error_envelope(self, client):
        response = client.get("/does-not-exist")
        assert response.status_code == 404
        assert response.get_json()["error"]["code"] == "NOT_FOUND"

    def test_wrong_method_uses_error_envelope(self, client):
        response = client.get("/vote")
        assert response.status_code == 405
        assert response.get_json()["error"]["code"] == "METHOD_NOT_ALLOWED"

    def test_api_spec_documents_poll_endpoints(self, client):
        response = client.get("/apispec_1.json")
        assert response.status_code == 200
        paths = response.get_json()["paths"]
        assert "/api/tally" in paths
        assert "/vote" in paths
