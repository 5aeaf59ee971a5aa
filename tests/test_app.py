"""
tests/test_app.py
=================
HTTP tests for the FastAPI application through TestClient.
"""
from password_policy import PasswordValidator
from password_policy.rules import (
    TOO_SHORT_MESSAGE, FIRST_NAME_MESSAGE, PARTICULAR_WORD_MESSAGE, OLD_PASSWORD_MESSAGE,
)


class TestHealthAndRules:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == "1.0.0"

    def test_rules(self, client):
        response = client.get("/rules")
        assert response.status_code == 200
        rules = response.json()
        assert len(rules) == 9
        assert rules[3] == {
            "rule": "validateLength",
            "number": 4,
            "description": "Password should be 6 to 18 characters long",
        }

    def test_security_headers(self, client):
        response = client.get("/health")
        assert response.headers["Cache-Control"] == "no-store"
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"


class TestValidateEndpoint:

    def test_valid_password(self, client):
        response = client.post("/password/validate", json={"password": "Ab1!ef"})
        assert response.status_code == 200
        assert response.json() == {"valid": True, "errors": [], "violations": []}

    def test_invalid_password(self, client):
        response = client.post("/password/validate", json={"password": "password"})
        body = response.json()
        assert body["valid"] is False
        assert PARTICULAR_WORD_MESSAGE in body["errors"]
        assert {"rule": "validateParticularWords", "message": PARTICULAR_WORD_MESSAGE} in body["violations"]
        assert body["errors"] == PasswordValidator("password").validate()

    def test_user_info(self, client):
        response = client.post("/password/validate", json={
            "password": "johnsmith99",
            "user_info": {"first_name": "John"},
        })
        assert FIRST_NAME_MESSAGE in response.json()["errors"]

    def test_old_password(self, client):
        response = client.post("/password/validate", json={
            "password": "abcdef",
            "old_password": "abcdeg",
        })
        assert response.json()["errors"][-1] == OLD_PASSWORD_MESSAGE

    def test_rule_subset(self, client):
        response = client.post("/password/validate", json={
            "password": "abc",
            "rules": ["validateLength"],
        })
        assert response.json()["errors"] == [TOO_SHORT_MESSAGE]

    def test_unknown_rule(self, client):
        response = client.post("/password/validate", json={
            "password": "abc",
            "rules": ["validateNothing"],
        })
        assert response.status_code == 400
        assert "validateNothing" in response.json()["detail"]

    def test_missing_password(self, client):
        response = client.post("/password/validate", json={})
        assert response.status_code == 422

    def test_password_too_long_for_service(self, client):
        response = client.post("/password/validate", json={"password": "a" * 257})
        assert response.status_code == 422

    def test_request_too_large(self, client):
        response = client.post(
            "/password/validate",
            content=b" " * (65 * 1024),
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 413


class TestGenerateEndpoint:

    def test_default_generation(self, client):
        response = client.post("/password/generate", json={})
        assert response.status_code == 200
        body = response.json()
        assert 6 <= body["length"] <= 18
        assert len(body["password"]) == body["length"]
        assert PasswordValidator(body["password"]).validate() == []

    def test_fixed_length(self, client):
        response = client.post("/password/generate", json={"min_length": 12, "max_length": 12})
        assert response.json()["length"] == 12

    def test_custom_exclude(self, client):
        response = client.post("/password/generate", json={"exclude": "aeiouAEIOU"})
        assert response.status_code == 200
        assert not set(response.json()["password"]) & set("aeiouAEIOU")

    def test_exclude_must_be_a_string(self, client):
        response = client.post("/password/generate", json={"exclude": ["ab", "cd"]})
        assert response.status_code == 422

    def test_bad_alphabet(self, client):
        response = client.post("/password/generate", json={"characters": "abc"})
        assert response.status_code == 400

    def test_bad_length_range(self, client):
        response = client.post("/password/generate", json={"min_length": 12, "max_length": 8})
        assert response.status_code == 400
        assert "greater than" in response.json()["detail"]
