"""
Tests for the /api/v1/factorize JSON endpoint.
"""
from factorbot.services import messages
from factorbot.errors import ErrorKind


class TestFactorizeEndpoint:

    def test_multiple_numbers(self, client):
        response = client.post("/api/v1/factorize", json={"text": "12, 18"})

        assert response.status_code == 200
        data = response.json()
        assert data["numbers"] == [12, 18]
        assert data["entries"][0] == {
            "number": 12,
            "factors": [{"prime": 2, "exponent": 2}, {"prime": 3, "exponent": 1}],
            "is_prime": False,
            "error": None,
        }
        assert data["gcd"] == {
            "value": 6,
            "factors": [{"prime": 2, "exponent": 1}, {"prime": 3, "exponent": 1}],
        }
        assert data["lcm"]["value"] == 36
        assert data["error"] is None
        assert data["notice"] is None
        assert data["text"].endswith("LCM = 36 = 2² × 3²")

    def test_prime(self, client):
        data = client.post("/api/v1/factorize", json={"text": "13"}).json()
        assert data["entries"][0]["is_prime"] is True
        assert data["gcd"] is None
        assert data["text"] == "13 is prime"

    def test_no_numbers(self, client):
        data = client.post("/api/v1/factorize", json={"text": "hello"}).json()
        assert data["error"] == "no_numbers_found"
        assert data["entries"] == []
        assert data["text"] == messages.REQUEST_ERRORS[ErrorKind.NO_NUMBERS_FOUND]

    def test_single_number_too_large(self, client):
        data = client.post("/api/v1/factorize", json={"text": "9999999999999"}).json()
        assert data["error"] == "number_too_large"
        assert data["entries"][0]["error"] == "number_too_large"
        assert data["entries"][0]["factors"] == []

    def test_insufficient_operands_notice(self, client):
        data = client.post("/api/v1/factorize", json={"text": "1, 12"}).json()
        assert data["error"] is None
        assert data["notice"] == "insufficient_operands_for_reduction"
        assert data["entries"][0]["error"] == "number_too_small"

    def test_overflow_notice(self, client):
        data = client.post(
            "/api/v1/factorize", json={"text": "2147483647 2147483646 2147483645"}
        ).json()
        assert data["notice"] == "numeric_overflow"
        assert data["gcd"]["value"] == 1
        assert data["gcd"]["factors"] == []
        assert data["lcm"] is None

    def test_missing_text(self, client):
        response = client.post("/api/v1/factorize", json={})
        assert response.status_code == 422

    def test_text_too_long(self, client):
        response = client.post("/api/v1/factorize", json={"text": "1 " * 3000})
        assert response.status_code == 422
