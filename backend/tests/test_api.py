"""
FlowBoard Backend: API Endpoint Tests
=====================================

What:  Every route through the full app (middleware, handlers, serialization)
       via HTTPX's ASGITransport; mail goes to the recording/failing doubles.

What we test:
    ✅ Exact success and error bodies for each endpoint
    ✅ Store side effects (and their absence on validation failures)
    ✅ Admin summary after mixed signups
    ✅ Health, stats, request ids, the single-page-app fallback
    ✅ Routing errors (405) use the same error body
"""

from datetime import datetime, timedelta, timezone

import pytest

from flowboard.routes.spa import resolve_static_file


def _parse_ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class TestStats:

    @pytest.mark.asyncio
    async def test_fixed_numbers(self, test_client):
        response = await test_client.get("/api/stats")
        assert response.status_code == 200
        assert response.json() == {
            "totalUsers": 12500,
            "projectsCompleted": 38500,
            "teamsUsing": 2400,
            "satisfactionRate": 98.5,
        }


class TestContact:

    @pytest.mark.asyncio
    async def test_success(self, test_client, message_store, recording_mailer):
        before = datetime.now(timezone.utc)
        response = await test_client.post(
            "/api/contact", json={"name": "Ana", "email": "a@x.com", "message": "Hi"}
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Message sent successfully"}
        assert message_store.size() == 1
        stored = message_store.slice()[0]
        assert stored.company == "Not specified"
        assert stored.status == "new"
        assert stored.timestamp >= before
        assert [to for to, _, _ in recording_mailer.sent] == ["ops@flowboard.test", "a@x.com"]

    @pytest.mark.asyncio
    async def test_dispatch_failure_still_stores(self, failing_client, message_store):
        response = await failing_client.post(
            "/api/contact", json={"name": "Ana", "email": "a@x.com", "message": "Hi"}
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to send message"}
        assert message_store.size() == 1

    @pytest.mark.asyncio
    async def test_missing_message(self, test_client, message_store, recording_mailer):
        response = await test_client.post("/api/contact", json={"name": "Ana", "email": "a@x.com"})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}
        assert message_store.size() == 0
        assert recording_mailer.sent == []

    @pytest.mark.asyncio
    async def test_no_body(self, test_client, message_store):
        response = await test_client.post("/api/contact")
        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}
        assert message_store.size() == 0

    @pytest.mark.asyncio
    async def test_malformed_json(self, test_client, message_store):
        response = await test_client.post(
            "/api/contact",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}
        assert message_store.size() == 0


    @pytest.mark.asyncio
    async def test_multiline_name_accepted(self, test_client, recording_mailer):
        response = await test_client.post(
            "/api/contact", json={"name": "Ana\nLima", "email": "a@x.com", "message": "Hi"}
        )
        assert response.status_code == 200
        assert recording_mailer.sent[0][1] == "New Contact Form Submission from Ana Lima"

    @pytest.mark.asyncio
    async def test_wrong_method_uses_error_body(self, test_client):
        response = await test_client.put("/api/contact", json={})
        assert response.status_code == 405
        assert response.json() == {"error": "Method Not Allowed"}
        assert "POST" in response.headers["Allow"]


class TestTrialSignup:

    @pytest.mark.asyncio
    async def test_success(self, test_client, lead_store):
        response = await test_client.post(
            "/api/signup/trial", json={"name": "Bo", "email": "bo@x.com", "teamSize": "6-20"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Trial account created successfully"

        lead = lead_store.slice()[0]
        assert lead.team_size == "6-20"
        assert lead.company == "Personal"
        trial_end = _parse_ts(body["trialEnd"])
        assert trial_end == lead.end_date
        assert trial_end - lead.start_date == timedelta(days=14)

    @pytest.mark.asyncio
    async def test_missing_email(self, test_client, lead_store, recording_mailer):
        response = await test_client.post("/api/signup/trial", json={"name": "Bo"})

        assert response.status_code == 400
        assert response.json() == {"error": "Name and email are required"}
        assert lead_store.size() == 0
        assert recording_mailer.sent == []

    @pytest.mark.asyncio
    async def test_dispatch_failure(self, failing_client, lead_store):
        response = await failing_client.post(
            "/api/signup/trial", json={"name": "Bo", "email": "bo@x.com"}
        )
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to create trial account"}
        assert lead_store.size() == 1


class TestDemoRequest:

    @pytest.mark.asyncio
    async def test_success(self, test_client, lead_store):
        response = await test_client.post(
            "/api/demo/request",
            json={"name": "Cy", "email": "cy@x.com", "preferredDate": "2025-03-04T15:30:00"},
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Demo request submitted successfully"}
        lead = lead_store.slice()[0]
        assert lead.preferred_date == "2025-03-04T15:30:00"
        assert lead.timezone == "UTC"

    @pytest.mark.asyncio
    async def test_missing_preferred_date(self, test_client, lead_store):
        response = await test_client.post(
            "/api/demo/request", json={"name": "Cy", "email": "cy@x.com"}
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Required fields missing"}
        assert lead_store.size() == 0

    @pytest.mark.asyncio
    async def test_dispatch_failure(self, failing_client, lead_store):
        response = await failing_client.post(
            "/api/demo/request",
            json={"name": "Cy", "email": "cy@x.com", "preferredDate": "tomorrow 10am"},
        )
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to submit demo request"}
        assert lead_store.size() == 1


class TestAdminLeads:

    @pytest.mark.asyncio
    async def test_empty(self, test_client):
        response = await test_client.get("/api/admin/leads")
        assert response.status_code == 200
        assert response.json() == {
            "totalLeads": 0,
            "trialUsers": 0,
            "demoRequests": 0,
            "recentLeads": [],
        }

    @pytest.mark.asyncio
    async def test_three_trials_two_demos(self, test_client):
        for name in ("T1", "T2", "T3"):
            await test_client.post("/api/signup/trial", json={"name": name, "email": f"{name}@x.com"})
        for name in ("D1", "D2"):
            await test_client.post(
                "/api/demo/request",
                json={"name": name, "email": f"{name}@x.com", "preferredDate": "2025-03-04"},
            )

        body = (await test_client.get("/api/admin/leads")).json()

        assert body["totalLeads"] == 5
        assert body["trialUsers"] == 3
        assert body["demoRequests"] == 2
        assert [lead["name"] for lead in body["recentLeads"]] == ["T1", "T2", "T3", "D1", "D2"]

        trial, demo = body["recentLeads"][0], body["recentLeads"][3]
        assert trial["plan"] == "trial"
        assert trial["teamSize"] == "1-5"
        assert {"startDate", "endDate"} <= set(trial)
        assert demo["preferredDate"] == "2025-03-04"
        assert demo["status"] == "pending"
        # Demo leads submitted without a company have no company key.
        assert "company" not in demo

    @pytest.mark.asyncio
    async def test_recent_leads_window(self, test_client):
        for i in range(12):
            await test_client.post("/api/signup/trial", json={"name": f"L{i}", "email": "l@x.com"})

        body = (await test_client.get("/api/admin/leads")).json()

        assert body["totalLeads"] == 12
        assert [lead["name"] for lead in body["recentLeads"]] == [f"L{i}" for i in range(2, 12)]


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy(self, test_client):
        response = await test_client.get("/api/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == "1.0.0"
        _parse_ts(body["timestamp"])

    @pytest.mark.asyncio
    async def test_healthy_after_failures(self, failing_client):
        await failing_client.post("/api/contact", json={"name": "A", "email": "a@x.com", "message": "m"})
        response = await failing_client.get("/api/health")
        assert response.json()["status"] == "healthy"


class TestRequestId:

    @pytest.mark.asyncio
    async def test_generated(self, test_client):
        response = await test_client.get("/api/stats")
        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_echoed(self, test_client):
        response = await test_client.get("/api/stats", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"


class TestSpaFallback:

    @pytest.mark.asyncio
    async def test_root_serves_index(self, test_client, static_site):
        response = await test_client.get("/")
        assert response.status_code == 200
        assert "FlowBoard SPA" in response.text

    @pytest.mark.asyncio
    async def test_unknown_path_serves_index(self, test_client, static_site):
        response = await test_client.get("/pricing/enterprise")
        assert response.status_code == 200
        assert "FlowBoard SPA" in response.text

    @pytest.mark.asyncio
    async def test_asset_served(self, test_client, static_site):
        response = await test_client.get("/app.js")
        assert response.status_code == 200
        assert "console.log" in response.text

    @pytest.mark.asyncio
    async def test_missing_index(self, test_client, static_site):
        (static_site / "index.html").unlink()
        response = await test_client.get("/pricing")
        assert response.status_code == 404
        assert response.json() == {"error": "Not found"}

    def test_traversal_falls_back_to_index(self, tmp_path):
        root = tmp_path / "public"
        root.mkdir()
        (tmp_path / "secret.txt").write_text("nope")
        assert resolve_static_file(root, "../secret.txt") == root.resolve() / "index.html"
