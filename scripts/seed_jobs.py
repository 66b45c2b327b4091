"""
Seed script: submits a variety of sample jobs for demo purposes.

Usage:
    python -m scripts.seed_jobs

This creates 5 jobs across the priority range (two share priority 2, to show
first-in-first-out ordering among equal priorities), then processes one so
the processed history isn't empty either.

Run this after `uvicorn api.main:app` to populate the system with demo data.
"""

import httpx

BASE_URL = "http://localhost:8000"

SAMPLE_JOBS = [
    {"name": "Generate monthly report", "priority": 8},
    {"name": "Build release artifacts", "priority": 2},
    {"name": "Run integration tests", "priority": 2},
    {"name": "Hotfix payment outage", "priority": 1},
    {"name": "Send newsletter", "priority": 5},
]


def seed(client: httpx.Client) -> dict:
    """Submit SAMPLE_JOBS, process one, return the processed job."""
    print(f"Submitting {len(SAMPLE_JOBS)} jobs...\n")

    for job in SAMPLE_JOBS:
        resp = client.post("/jobs/", json=job)
        resp.raise_for_status()
        data = resp.json()
        print(f"  [{data['status']}] #{data['id']} {data['name']} (P{data['priority']})")

    resp = client.post("/jobs/process")
    resp.raise_for_status()
    processed = resp.json()
    print(f"\nProcessed: #{processed['id']} {processed['name']}")

    return processed


if __name__ == "__main__":
    with httpx.Client(base_url=BASE_URL, timeout=10.0) as client:
        seed(client)
    print("Pending jobs:   curl http://localhost:8000/jobs/pending")
    print("Processed jobs: curl http://localhost:8000/jobs/processed")
