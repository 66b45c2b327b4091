"""Tests for the /health endpoint."""

import pytest


@pytest.mark.asyncio
async def test_health_check(client):
    """GET /health should return healthy status."""
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["pending"] == 0
    assert data["processed"] == 0


@pytest.mark.asyncio
async def test_health_reports_counts(client, scheduler):
    scheduler.add_job("a", 1)
    scheduler.add_job("b", 2)
    scheduler.process_next_job()

    data = (await client.get("/health")).json()
    assert data["pending"] == 1
    assert data["processed"] == 1
