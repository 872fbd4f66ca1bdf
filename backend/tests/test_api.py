"""
PhishGuard API Tests

HTTP endpoints exercised through the FastAPI test client.
"""

import pytest
from fastapi.testclient import TestClient

from phishguard.main import app


@pytest.fixture
def client():
    """Client with a freshly initialized engine per test."""
    with TestClient(app) as test_client:
        yield test_client


class TestHealthEndpoints:
    """Tests for health routes."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["name"] == "PhishGuard API"

    def test_health(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_readiness(self, client):
        data = client.get("/api/v1/health/ready").json()
        assert data["ready"] is True
        assert data["checks"]["detection_engine"]["rules_loaded"] == 7
        assert data["checks"]["threat_data"]["loaded"] is True


class TestAnalyzeEndpoints:
    """Tests for analysis routes."""

    def test_malformed_url(self, client):
        response = client.post("/api/v1/analyze", json={"url": "not a url"})
        assert response.status_code == 200
        data = response.json()
        assert data["risk_level"] == "unknown"
        assert data["explanations"] == []
        assert data["action"] == "allow"

    def test_safe_url(self, client):
        data = client.post("/api/v1/analyze", json={"url": "https://www.google.com/"}).json()
        assert data["risk_level"] == "safe"
        assert data["action"] == "allow"
        assert len(data["checks"]) == 7

    def test_medium_url_warns(self, client):
        data = client.post(
            "/api/v1/analyze",
            json={"url": "http://192.168.1.1/login?redirect=1"},
        ).json()
        assert data["risk_level"] == "medium"
        assert data["score"] == pytest.approx(52.0)
        assert data["action"] == "warn"

    def test_missing_url(self, client):
        response = client.post("/api/v1/analyze", json={})
        assert response.status_code == 422

    def test_prescreen(self, client):
        data = client.post("/api/v1/analyze/prescreen", json={"url": "http://10.0.0.1/"}).json()
        assert data == {"url": "http://10.0.0.1/", "risk_level": "high"}


class TestListEndpoints:
    """Tests for whitelist and blacklist routes."""

    def test_whitelist_round_trip(self, client):
        assert client.get("/api/v1/lists/whitelist").json()["domains"] == []

        response = client.post("/api/v1/lists/whitelist", json={"domain": "Example.com"})
        assert response.status_code == 201
        assert response.json()["domains"] == ["example.com"]

        data = client.post("/api/v1/analyze", json={"url": "http://login.example.com/"}).json()
        assert data["risk_level"] == "safe"
        assert data["whitelisted"] is True

        response = client.delete("/api/v1/lists/whitelist/example.com")
        assert response.status_code == 200
        assert response.json()["domains"] == []

        response = client.delete("/api/v1/lists/whitelist/example.com")
        assert response.status_code == 404

    def test_blacklisted_domain_blocked(self, client):
        client.post("/api/v1/lists/blacklist", json={"domain": "evil.com"})
        data = client.post("/api/v1/analyze", json={"url": "https://evil.com/"}).json()
        assert data["risk_level"] == "high"
        assert data["blacklisted"] is True
        assert data["action"] == "block"

    def test_invalid_domain(self, client):
        response = client.post("/api/v1/lists/blacklist", json={"domain": "not a domain"})
        assert response.status_code == 400

    def test_unknown_list(self, client):
        assert client.get("/api/v1/lists/graylist").status_code == 422


class TestThreatDataEndpoints:
    """Tests for threat database routes."""

    def test_status(self, client):
        data = client.get("/api/v1/threat-data").json()
        assert data["feed"] == "static"
        assert data["loaded"] is True
        assert data["phishing_domains"] == 6
        assert data["url_shorteners"] == 9

    def test_refresh(self, client):
        data = client.post("/api/v1/threat-data/refresh").json()
        assert data["refreshed"] is True
        assert data["last_refresh_error"] is None


class TestReportEndpoints:
    """Tests for phishing reports and activity statistics."""

    def test_report(self, client):
        response = client.post(
            "/api/v1/report",
            json={"url": "http://Paypal-Secure.com/login", "details": "Fake login form"},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["domain"] == "paypal-secure.com"
        assert data["details"] == "Fake login form"
        assert data["reported"] is False

    def test_report_without_host(self, client):
        response = client.post("/api/v1/report", json={"url": "not a url"})
        assert response.status_code == 400

    def test_statistics_start_empty(self, client):
        data = client.get("/api/v1/statistics").json()
        assert data["blocked_count"] == 0
        assert data["reports_count"] == 0
        assert data["scans_count"] == 0
        assert data["last_update"] is not None

    def test_analysis_recorded(self, client):
        client.post("/api/v1/lists/blacklist", json={"domain": "evil.com"})
        client.post("/api/v1/lists/whitelist", json={"domain": "example.com"})
        client.post("/api/v1/analyze", json={"url": "https://www.google.com/"})
        client.post("/api/v1/analyze", json={"url": "https://evil.com/"})
        client.post("/api/v1/analyze", json={"url": "not a url"})
        client.post("/api/v1/report", json={"url": "https://evil.com/"})

        data = client.get("/api/v1/statistics").json()
        assert data["scans_count"] == 2
        assert data["blocked_count"] == 1
        assert data["reports_count"] == 1
        assert data["whitelist_count"] == 1
