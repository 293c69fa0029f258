"""Locust load testing script for the Document Summarizer API."""

import random

from locust import HttpUser, between, task

SAMPLE_TEXT = (
    "Quarterly results exceeded expectations. Revenue grew twelve percent while "
    "operating costs stayed flat. The board approved expansion into two new markets "
    "and asked engineering to prioritise the reporting pipeline.\n"
) * 20

SUMMARY_TYPES = ["STANDARD", "EXECUTIVE", "TECHNICAL", "BULLET_POINTS"]


class DocSummarizerUser(HttpUser):
    """Simulated user uploading documents and browsing history."""

    wait_time = between(1, 3)  # Wait 1-3 seconds between tasks

    def on_start(self) -> None:
        """Sign in once with the credentials flow."""
        response = self.client.post(
            "/api/auth/callback/credentials",
            json={"email": f"load-{random.randint(1, 10_000)}@example.com", "password": "x"},
        )
        token = response.json().get("accessToken")
        if token:
            self.client.headers["Authorization"] = f"Bearer {token}"

    @task(3)
    def fetch_history(self) -> None:
        """Fetch summary history - most common operation."""
        self.client.get("/api/history")

    @task(1)
    def summarize_text_document(self) -> None:
        """Upload a plain-text document, then save the summary."""
        response = self.client.post(
            "/api/summarize",
            files={"file": ("report.txt", SAMPLE_TEXT.encode(), "text/plain")},
            data={"summaryType": random.choice(SUMMARY_TYPES)},
        )
        if response.status_code == 200:
            self.client.post("/api/history", json=response.json())

    @task(1)
    def export_markdown(self) -> None:
        """Export a small summary as Markdown."""
        self.client.post(
            "/api/export/markdown",
            json={"id": "bench", "title": "Bench", "content": SAMPLE_TEXT[:200]},
        )
