"""
End-to-end API tests over an in-memory SQLite database.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

from forge.api.app import create_app
from forge.api.dependencies import get_photo_storage
from forge.config.settings import settings
from forge.config.database import get_db_session
from forge.domain.entities.job import Job
from forge.domain.entities.plumber_profile import PlumberProfile
from forge.domain.value_objects.job_status import JobStatus
from forge.domain.value_objects.job_urgency import JobUrgency
from forge.domain.value_objects.user_role import UserRole
from forge.infrastructure.database.models.job import JobModel
from forge.infrastructure.database.repositories.job_repository import JobRepository
from forge.infrastructure.database.repositories.plumber_profile_repository import (
    PlumberProfileRepository,
)
from forge.infrastructure.database.repositories.user_repository import (
    UserRepository,
)
from forge.infrastructure.storage.local_storage import LocalPhotoStorage

API = "/api/v1"

QUOTE = {
    "good": {"title": "Patch", "description": "Patch the joint", "price": 120},
    "better": {"title": "Replace", "description": "Replace the section", "price": 260},
    "best": {"title": "Repipe", "description": "Repipe the run", "price": 900},
}


@pytest_asyncio.fixture
async def users(db_session, user_factory):
    """Persist one user per role and a plumber profile."""
    repo = UserRepository(db_session)
    seeded = {
        role: await repo.create(user_factory(role, phone="555-0100"))
        for role in UserRole
    }
    seeded["other_plumber"] = await repo.create(user_factory(UserRole.PLUMBER))
    await PlumberProfileRepository(db_session).create(
        PlumberProfile(user_id=seeded[UserRole.PLUMBER].id, forge_score=4.8)
    )
    await db_session.commit()
    return seeded


@pytest_asyncio.fixture
async def client(db_session, tmp_path):
    app = create_app()

    async def override_session():
        yield db_session

    async def override_storage():
        return LocalPhotoStorage(str(tmp_path), "/uploads")

    app.dependency_overrides[get_db_session] = override_session
    app.dependency_overrides[get_photo_storage] = override_storage

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def assigned_job(db_session, users):
    """A quoted job already assigned to the seeded plumber."""
    job = await JobRepository(db_session).create(
        Job(
            title="Water heater leak",
            description="Puddle under the tank",
            job_type="water_heater",
            address="9 Oak Avenue",
            urgency=JobUrgency.HIGH,
            created_by_id=users[UserRole.HOMEOWNER].id,
            assigned_to_id=users[UserRole.PLUMBER].id,
            status=JobStatus.QUOTED,
        )
    )
    await db_session.commit()
    return job


async def create_job(client, headers, **overrides):
    payload = {
        "title": "Clogged drain",
        "description": "Kitchen sink drains slowly",
        "job_type": "drain",
        "address": "4 Birch Road",
        "urgency": "EMERGENCY",
    }
    payload.update(overrides)
    return await client.post(f"{API}/jobs", json=payload, headers=headers)


class TestAuthentication:
    """Token and role checks."""

    @pytest.mark.asyncio
    async def test_missing_token(self, client, users):
        response = await create_job(client, headers={})

        assert response.status_code == 401
        assert response.json()["type"] == "missing_token"

    @pytest.mark.asyncio
    async def test_invalid_token(self, client, users):
        response = await create_job(
            client, headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 401
        assert response.json()["type"] == "invalid_token"

    @pytest.mark.asyncio
    async def test_wrong_role(self, client, users, headers_for):
        response = await create_job(client, headers_for(users[UserRole.PLUMBER]))

        assert response.status_code == 403
        assert response.json()["type"] == "role_not_allowed"


class TestJobEndpoints:
    """Job lifecycle endpoints."""

    @pytest.mark.asyncio
    async def test_create_job(self, client, users, headers_for):
        response = await create_job(client, headers_for(users[UserRole.HOMEOWNER]))

        assert response.status_code == 201
        job = response.json()["job"]
        assert job["status"] == "REQUESTED"
        assert job["urgency"] == "EMERGENCY"
        assert job["created_by"]["phone"] == "555-0100"
        assert job["assigned_to"] is None

    @pytest.mark.asyncio
    async def test_dispatcher_can_create_job(self, client, users, headers_for):
        response = await create_job(client, headers_for(users[UserRole.DISPATCHER]))

        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_create_job_missing_address(
        self, client, users, headers_for, db_session
    ):
        headers = headers_for(users[UserRole.HOMEOWNER])
        payload = {"title": "No address", "description": "x", "job_type": "leak"}

        response = await client.post(f"{API}/jobs", json=payload, headers=headers)

        assert response.status_code == 400
        body = response.json()
        assert body["type"] == "validation_error"
        assert "address" in body["message"]
        count = await db_session.scalar(select(func.count(JobModel.id)))
        assert count == 0

    @pytest.mark.asyncio
    async def test_quote_flow(self, client, users, headers_for, db_session):
        created = await create_job(client, headers_for(users[UserRole.HOMEOWNER]))
        job_id = created.json()["job"]["id"]
        plumber_headers = headers_for(users[UserRole.PLUMBER])

        response = await client.post(
            f"{API}/jobs/{job_id}/quote", json=QUOTE, headers=plumber_headers
        )

        assert response.status_code == 201
        quote = response.json()["quote"]
        assert quote["better"]["price"] == 260
        assert quote["status"] == "PENDING"

        resubmit = await client.post(
            f"{API}/jobs/{job_id}/quote", json=QUOTE, headers=plumber_headers
        )
        assert resubmit.status_code == 400
        assert resubmit.json()["type"] == "job_not_quotable"

    @pytest.mark.asyncio
    async def test_quoted_job_rejects_malformed_quote(self, client, users, headers_for):
        created = await create_job(client, headers_for(users[UserRole.HOMEOWNER]))
        job_id = created.json()["job"]["id"]
        plumber_headers = headers_for(users[UserRole.PLUMBER])
        first = await client.post(
            f"{API}/jobs/{job_id}/quote", json=QUOTE, headers=plumber_headers
        )
        assert first.status_code == 201

        response = await client.post(
            f"{API}/jobs/{job_id}/quote",
            json={"good": {"title": "x", "description": "y", "price": "abc"}},
            headers=plumber_headers,
        )

        assert response.status_code == 400
        assert response.json()["type"] == "job_not_quotable"

    @pytest.mark.asyncio
    async def test_quote_invalid_price(self, client, users, headers_for):
        created = await create_job(client, headers_for(users[UserRole.HOMEOWNER]))
        job_id = created.json()["job"]["id"]
        payload = {**QUOTE, "good": {**QUOTE["good"], "price": "abc"}}

        response = await client.post(
            f"{API}/jobs/{job_id}/quote",
            json=payload,
            headers=headers_for(users[UserRole.PLUMBER]),
        )

        assert response.status_code == 400
        assert response.json()["type"] == "invalid_price"

    @pytest.mark.asyncio
    async def test_quote_missing_tier(self, client, users, headers_for):
        created = await create_job(client, headers_for(users[UserRole.HOMEOWNER]))
        job_id = created.json()["job"]["id"]

        response = await client.post(
            f"{API}/jobs/{job_id}/quote",
            json={"good": QUOTE["good"], "best": QUOTE["best"]},
            headers=headers_for(users[UserRole.PLUMBER]),
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_quote_unknown_job(self, client, users, headers_for):
        response = await client.post(
            f"{API}/jobs/00000000-0000-0000-0000-000000000000/quote",
            json=QUOTE,
            headers=headers_for(users[UserRole.PLUMBER]),
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_full_lifecycle(self, client, users, headers_for, assigned_job):
        plumber = users[UserRole.PLUMBER]
        plumber_headers = headers_for(plumber)
        homeowner_headers = headers_for(users[UserRole.HOMEOWNER])
        status_url = f"{API}/jobs/{assigned_job.id}/status"

        scheduled = await client.post(
            status_url,
            json={"status": "SCHEDULED", "scheduled_at": "2026-10-20T09:00:00Z"},
            headers=plumber_headers,
        )
        assert scheduled.status_code == 200
        assert scheduled.json()["job"]["scheduled_at"].startswith("2026-10-20T09:00")

        in_progress = await client.post(
            status_url, json={"status": "IN_PROGRESS"}, headers=plumber_headers
        )
        assert in_progress.status_code == 200
        assert in_progress.json()["job"]["assigned_to"]["first_name"] == "Plumber"

        completed = await client.post(
            status_url, json={"status": "COMPLETED"}, headers=plumber_headers
        )
        assert completed.status_code == 200
        assert completed.json()["job"]["status"] == "COMPLETED"

        review_url = f"{API}/jobs/{assigned_job.id}/review"
        review = await client.post(
            review_url, json={"rating": 5, "comment": "Great"}, headers=homeowner_headers
        )
        assert review.status_code == 201
        assert review.json()["review"]["target_id"] == str(plumber.id)

        duplicate = await client.post(
            review_url, json={"rating": 4}, headers=homeowner_headers
        )
        assert duplicate.status_code == 409

        earning_payload = {
            "plumber_id": str(plumber.id),
            "job_id": str(assigned_job.id),
            "amount": "250.00",
        }
        admin_headers = headers_for(users[UserRole.ADMIN])
        earning = await client.post(
            f"{API}/plumber/earnings", json=earning_payload, headers=admin_headers
        )
        assert earning.status_code == 201
        assert earning.json()["earning"]["xp_awarded"] == 100
        assert earning.json()["xp"] == 100

        again = await client.post(
            f"{API}/plumber/earnings", json=earning_payload, headers=admin_headers
        )
        assert again.status_code == 409

        dashboard = await client.get(
            f"{API}/plumber/dashboard", headers=plumber_headers
        )
        assert dashboard.status_code == 200
        body = dashboard.json()
        assert body["jobs"]["completed"] == 1
        assert body["earnings"]["total"] == 250.0
        assert body["earnings"]["today"] == 250.0
        assert body["profile"]["xp"] == 100

    @pytest.mark.asyncio
    async def test_terminal_status_rejected(
        self, client, users, headers_for, assigned_job
    ):
        headers = headers_for(users[UserRole.HOMEOWNER])
        status_url = f"{API}/jobs/{assigned_job.id}/status"

        cancelled = await client.post(
            status_url, json={"status": "CANCELLED"}, headers=headers
        )
        assert cancelled.status_code == 200

        reopened = await client.post(
            status_url, json={"status": "REQUESTED"}, headers=headers
        )
        assert reopened.status_code == 400
        assert reopened.json()["type"] == "illegal_transition"

    @pytest.mark.asyncio
    async def test_status_by_outsider(self, client, users, headers_for, assigned_job):
        response = await client.post(
            f"{API}/jobs/{assigned_job.id}/status",
            json={"status": "SCHEDULED"},
            headers=headers_for(users["other_plumber"]),
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_unknown_status(self, client, users, headers_for, assigned_job):
        response = await client.post(
            f"{API}/jobs/{assigned_job.id}/status",
            json={"status": "DONE"},
            headers=headers_for(users[UserRole.PLUMBER]),
        )

        assert response.status_code == 400
        assert response.json()["type"] == "invalid_status"

    @pytest.mark.asyncio
    async def test_review_before_completion(
        self, client, users, headers_for, assigned_job
    ):
        response = await client.post(
            f"{API}/jobs/{assigned_job.id}/review",
            json={"rating": 5},
            headers=headers_for(users[UserRole.HOMEOWNER]),
        )

        assert response.status_code == 400
        assert response.json()["type"] == "job_not_completed"

    @pytest.mark.asyncio
    async def test_photo_upload(self, client, users, headers_for, assigned_job):
        response = await client.post(
            f"{API}/jobs/{assigned_job.id}/photo",
            files={"photo": ("leak.jpg", b"\xff\xd8\xff\xe0fake", "image/jpeg")},
            data={"caption": "Under the sink"},
            headers=headers_for(users[UserRole.HOMEOWNER]),
        )

        assert response.status_code == 201
        photo = response.json()["photo"]
        assert photo["url"].startswith("/uploads/photo-")
        assert photo["url"].endswith(".jpg")
        assert photo["caption"] == "Under the sink"

    @pytest.mark.asyncio
    async def test_photo_upload_rejects_text(
        self, client, users, headers_for, assigned_job
    ):
        response = await client.post(
            f"{API}/jobs/{assigned_job.id}/photo",
            files={"photo": ("notes.txt", b"hello", "text/plain")},
            headers=headers_for(users[UserRole.HOMEOWNER]),
        )

        assert response.status_code == 400
        assert response.json()["type"] == "invalid_file_type"

    @pytest.mark.asyncio
    async def test_photo_upload_too_large(
        self, client, users, headers_for, assigned_job, monkeypatch, tmp_path
    ):
        monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_BYTES", 1024)

        response = await client.post(
            f"{API}/jobs/{assigned_job.id}/photo",
            files={"photo": ("leak.jpg", b"\xff\xd8\xff" + b"0" * 4096, "image/jpeg")},
            headers=headers_for(users[UserRole.HOMEOWNER]),
        )

        assert response.status_code == 400
        assert response.json()["type"] == "file_too_large"
        assert list(tmp_path.iterdir()) == []

    @pytest.mark.asyncio
    async def test_photo_upload_without_file(
        self, client, users, headers_for, assigned_job
    ):
        response = await client.post(
            f"{API}/jobs/{assigned_job.id}/photo",
            data={"caption": "nothing attached"},
            headers=headers_for(users[UserRole.HOMEOWNER]),
        )

        assert response.status_code == 400
        assert response.json()["type"] == "missing_file"


class TestPlumberEndpoints:
    """Plumber profile endpoints."""

    @pytest.mark.asyncio
    async def test_available_jobs(self, client, users, headers_for):
        await create_job(client, headers_for(users[UserRole.HOMEOWNER]))

        response = await client.get(
            f"{API}/plumber/jobs", headers=headers_for(users[UserRole.PLUMBER])
        )

        assert response.status_code == 200
        jobs = response.json()["jobs"]
        assert len(jobs) == 1
        assert jobs[0]["created_by"]["first_name"] == "Homeowner"

    def test_dashboard_month_window_documented(self):
        schemas = create_app().openapi()["components"]["schemas"]
        month = schemas["EarningsSummarySchema"]["properties"]["month"]

        assert "start of the week" in month["description"]

    @pytest.mark.asyncio
    async def test_dashboard_requires_plumber(self, client, users, headers_for):
        response = await client.get(
            f"{API}/plumber/dashboard", headers=headers_for(users[UserRole.HOMEOWNER])
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_dashboard_without_profile(self, client, users, headers_for):
        response = await client.get(
            f"{API}/plumber/dashboard", headers=headers_for(users["other_plumber"])
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_availability_reflected_on_dashboard(
        self, client, users, headers_for
    ):
        headers = headers_for(users[UserRole.PLUMBER])

        response = await client.put(
            f"{API}/plumber/availability", json={"is_active": False}, headers=headers
        )
        assert response.status_code == 200
        assert response.json()["is_active"] is False

        dashboard = await client.get(f"{API}/plumber/dashboard", headers=headers)
        assert dashboard.json()["profile"]["is_active"] is False
        assert dashboard.json()["profile"]["next_level_xp"] == 2000

    @pytest.mark.asyncio
    async def test_availability_requires_boolean(self, client, users, headers_for):
        response = await client.put(
            f"{API}/plumber/availability",
            json={"is_active": "yes"},
            headers=headers_for(users[UserRole.PLUMBER]),
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_preferences(self, client, users, headers_for):
        response = await client.put(
            f"{API}/plumber/preferences",
            json={"preferred_job_types": ["drain"], "monday_start": "08:00"},
            headers=headers_for(users[UserRole.PLUMBER]),
        )

        assert response.status_code == 200
        preferences = response.json()["preferences"]
        assert preferences["preferred_job_types"] == ["drain"]
        assert preferences["max_distance_km"] == 50
        assert preferences["monday_start"] == "08:00"
        assert preferences["monday_end"] is None

    @pytest.mark.asyncio
    async def test_preferences_bad_time(self, client, users, headers_for):
        response = await client.put(
            f"{API}/plumber/preferences",
            json={"friday_end": "25:00"},
            headers=headers_for(users[UserRole.PLUMBER]),
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_earning_requires_admin(
        self, client, users, headers_for, assigned_job
    ):
        response = await client.post(
            f"{API}/plumber/earnings",
            json={
                "plumber_id": str(users[UserRole.PLUMBER].id),
                "job_id": str(assigned_job.id),
                "amount": "10.00",
            },
            headers=headers_for(users[UserRole.PLUMBER]),
        )

        assert response.status_code == 403


class TestHealthEndpoints:
    """Health and metrics endpoints."""

    @pytest.mark.asyncio
    async def test_liveness(self, client):
        response = await client.get(f"{API}/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    @pytest.mark.asyncio
    async def test_metrics(self, client):
        await client.get(f"{API}/health/live")

        response = await client.get(f"{API}/health/metrics")

        assert response.status_code == 200
        assert "api_requests_total" in response.text

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, client):
        response = await client.get(
            f"{API}/health/live", headers={"X-Request-ID": "abc-123"}
        )

        assert response.headers["X-Request-ID"] == "abc-123"
        assert "X-Process-Time" in response.headers
