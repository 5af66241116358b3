"""
Seed script: registers a demo user and submits sample tasks.

Usage:
    python -m scripts.seed_tasks

This creates:
- a demo user (or logs in if it already exists)
- tasks across all three priority classes, one of them already completed

and then prints the scheduled order from GET /api/tasks/scheduled.
"""

import httpx

BASE_URL = "http://localhost:8000"

DEMO_USER = {
    "username": "demo",
    "email": "demo@example.com",
    "password": "demo-password",
}


def _login(client: httpx.Client) -> str:
    resp = client.post("/api/auth/register", json=DEMO_USER)
    if resp.status_code == 400:
        resp = client.post("/api/auth/login", json={
            "email": DEMO_USER["email"],
            "password": DEMO_USER["password"],
        })
    resp.raise_for_status()
    return resp.json()["token"]


def seed():
    client = httpx.Client(base_url=BASE_URL, timeout=10.0)
    token = _login(client)
    client.headers["Authorization"] = f"Bearer {token}"

    tasks = [
        {"title": "Fix production login bug", "priority": "high"},
        {"title": "Review pull requests", "priority": "medium"},
        {"title": "Update team wiki", "priority": "low"},
        {"title": "Prepare sprint demo", "priority": "high"},
        {"title": "Reply to vendor email", "priority": "medium",
         "description": "Quote for the new monitoring plan"},
        {"title": "Archive old tickets", "priority": "low", "status": "completed"},
    ]

    print(f"Submitting {len(tasks)} tasks to {BASE_URL}...\n")

    for task in tasks:
        resp = client.post("/api/tasks/", json=task)
        resp.raise_for_status()
        data = resp.json()["task"]
        print(f"  [{data['priority']:<6}] {data['title']} ({data['status']})")

    scheduled = client.get("/api/tasks/scheduled").json()
    print(f"\nScheduled order ({scheduled['count']} pending):")
    for i, task in enumerate(scheduled["scheduled_tasks"], start=1):
        print(f"  {i}. [{task['priority']:<6}] {task['title']}")


if __name__ == "__main__":
    seed()
