"""Integration tests for API routes."""

import base64

import pytest

T = 1700000000000


def _auth_header(username="admin", password="admin123"):
    """Create basic auth header."""
    credentials = base64.b64encode(f"{username}:{password}".encode()).decode()
    return {"Authorization": f"Basic {credentials}"}


class TestHealthRoutes:
    """Tests for health endpoints."""

    @pytest.mark.asyncio
    async def test_health_endpoint(self, client):
        """GET /health returns health status."""
        response = await client.get("/api/v1/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert {check["name"] for check in data["checks"]} == {"loop", "codec", "generator"}

    @pytest.mark.asyncio
    async def test_heartbeat_endpoint(self, client):
        """GET /heartbeat returns an encoded clock and uptime."""
        response = await client.get("/api/v1/heartbeat")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert len(data["tid"]) == 8
        assert "uptime_s" in data
        assert "draws" in data

    @pytest.mark.asyncio
    async def test_index(self, client):
        """GET / describes the service."""
        response = await client.get("/")
        assert response.status_code == 200
        assert response.json()["service"] == "timeid"


class TestIdRoutes:
    """Tests for identifier endpoints."""

    @pytest.mark.asyncio
    async def test_new_id_seeded(self, client):
        """Seeded app generates a known id."""
        response = await client.get("/api/v1/ids", params={"time": T})
        assert response.status_code == 200
        assert response.json()["ids"] == ["0OkFuMW0ZB0M0~KUGJxb"]

    @pytest.mark.asyncio
    async def test_new_ids_batch(self, client):
        """count ids share a timestamp and are distinct."""
        response = await client.get("/api/v1/ids", params={"count": 20, "length": 16, "delimiter": "-"})
        data = response.json()
        assert len(set(data["ids"])) == 20
        assert all(len(value) == 25 for value in data["ids"])
        assert data["suffix_length"] == 16

    @pytest.mark.asyncio
    async def test_new_ids_clamped(self, client):
        """Out-of-range lengths are clamped."""
        response = await client.get("/api/v1/ids", params={"length": 3})
        assert len(response.json()["ids"][0]) == 20

    @pytest.mark.asyncio
    async def test_new_ids_over_batch_limit(self, client):
        """count above max_batch is rejected."""
        response = await client.get("/api/v1/ids", params={"count": 51})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_new_ids_negative_time(self, client):
        """Negative times return the error with its id."""
        response = await client.get("/api/v1/ids", params={"time": -1})
        assert response.status_code == 400
        data = response.json()
        assert data["type"] == "InvalidInputError"
        assert data["error_id"]

    @pytest.mark.asyncio
    async def test_decode_id(self, client):
        """GET /ids/{value} splits the id."""
        response = await client.get("/api/v1/ids/0OkFuMW0-ZB0M0~KUGJxb", params={"delimiter": "-"})
        assert response.status_code == 200
        data = response.json()
        assert data["time"] == T
        assert data["randomness"] == "ZB0M0~KUGJxb"
        assert data["date"] == "2023-11-14T22:13:20+00:00"

    @pytest.mark.asyncio
    async def test_decode_id_wrong_delimiter(self, client):
        """Delimiter mismatch is a 404."""
        response = await client.get("/api/v1/ids/0OkFuMW0-ZB0M0~KUGJxb", params={"delimiter": "_"})
        assert response.status_code == 404


class TestTimestampRoutes:
    """Tests for timestamp endpoints."""

    @pytest.mark.asyncio
    async def test_encode(self, client):
        """GET /timestamps/encode encodes a time."""
        response = await client.get("/api/v1/timestamps/encode", params={"time": T})
        assert response.json() == {"encoded": "0OkFuMW0", "time": T, "encoded_time": T, "wrapped": False}

    @pytest.mark.asyncio
    async def test_encode_now(self, client):
        """Omitted time encodes now."""
        response = await client.get("/api/v1/timestamps/encode")
        assert len(response.json()["encoded"]) == 8

    @pytest.mark.asyncio
    async def test_encode_past_horizon(self, client):
        """Times past 48 bits report the wrapped value."""
        response = await client.get("/api/v1/timestamps/encode", params={"time": (1 << 48) + 5})
        assert response.json() == {"encoded": "00000005", "time": (1 << 48) + 5, "encoded_time": 5, "wrapped": True}

    @pytest.mark.asyncio
    async def test_encode_negative(self, client):
        """Negative times are a 400."""
        response = await client.get("/api/v1/timestamps/encode", params={"time": -5})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_decode(self, client):
        """GET /timestamps/{text} decodes the prefix."""
        response = await client.get("/api/v1/timestamps/0OkFuMW0_anything")
        assert response.status_code == 200
        assert response.json()["time"] == T

    @pytest.mark.asyncio
    async def test_decode_invalid(self, client):
        """Undecodable text is a 404."""
        response = await client.get("/api/v1/timestamps/short")
        assert response.status_code == 404


class TestStatsRoutes:
    """Tests for stats endpoint (requires basic auth)."""

    @pytest.mark.asyncio
    async def test_stats_requires_auth(self, client):
        """GET /stats requires authentication."""
        response = await client.get("/api/v1/stats")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_stats_wrong_password(self, client):
        """Wrong credentials are rejected."""
        response = await client.get("/api/v1/stats", headers=_auth_header(password="nope"))
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_stats(self, client, monkeypatch):
        """Stats count issued ids and draws."""
        monkeypatch.setenv("API_USERNAME", "ops")
        monkeypatch.setenv("API_PASSWORD", "s3cret")
        await client.get("/api/v1/ids", params={"count": 2})
        response = await client.get("/api/v1/stats", headers=_auth_header("ops", "s3cret"))
        assert response.status_code == 200
        generator = response.json()["generator"]
        assert generator["issued"] == 2
        assert generator["draws"] >= 6
        assert generator["seeded"] is True
