"""Tests for GET /scheduler/status."""

import pytest


@pytest.mark.asyncio
async def test_status_empty(client):
    response = await client.get("/scheduler/status")

    assert response.status_code == 200
    assert response.json() == {
        "pending_count": 0,
        "processed_count": 0,
        "next_job_id": 1,
        "next_job": None,
    }


@pytest.mark.asyncio
async def test_status_shows_next_job_without_consuming(client, scheduler):
    scheduler.add_job("later", 6)
    scheduler.add_job("sooner", 2)
    scheduler.add_job("done", 1)
    scheduler.process_next_job()

    data = (await client.get("/scheduler/status")).json()

    assert data["pending_count"] == 2
    assert data["processed_count"] == 1
    assert data["next_job_id"] == 4
    assert data["next_job"]["name"] == "sooner"
    assert data["next_job"]["priority_band"] == "high"
    assert scheduler.pending_count == 2
