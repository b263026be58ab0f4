"""
Integration tests for the time tracking endpoints.
"""

import pytest

from tests.conftest import auth_headers, register


def entry_payload(day="2024-01-10", start="09:00", end="17:00", **extra):
    payload = {
        "date": day,
        "startTime": f"{day}T{start}:00",
        "endTime": f"{day}T{end}:00",
    }
    payload.update(extra)
    return payload


@pytest.fixture
def headers(worker_token):
    return auth_headers(worker_token)


@pytest.fixture
def other_headers(client):
    response = register(client, username="bob", employee_id="EMP-002", position="rider")
    return auth_headers(response.json()["token"])


class TestCreateTimeEntry:
    """Test cases for POST /api/time."""

    def test_overtime_entry_then_overlap(self, client, headers):
        created = client.post("/api/time", json=entry_payload(
            end="22:00", overtimeReason="Company Request", responsiblePerson="Maria",
        ), headers=headers)

        assert created.status_code == 201
        body = created.json()
        assert body["hours"] == 13.0
        assert body["is_overtime"] is True
        assert body["status"] == "Overtime"
        assert body["username"] == "alice"
        assert body["overtime_reason"] == "Company Request"

        conflict = client.post("/api/time", json=entry_payload(start="20:00", end="23:00"), headers=headers)

        assert conflict.status_code == 409
        assert conflict.json()["code"] == "OVERLAP_CONFLICT"
        assert len(client.get("/api/time/my-entries", headers=headers).json()) == 1

    def test_adjacent_entries_are_allowed(self, client, headers):
        client.post("/api/time", json=entry_payload(start="06:00", end="09:00"), headers=headers)

        response = client.post("/api/time", json=entry_payload(start="09:00", end="12:00"), headers=headers)

        assert response.status_code == 201

    def test_notification_is_sent(self, client, headers, notifier):
        client.post("/api/time", json=entry_payload(), headers=headers)

        assert len(notifier.messages) == 1
        assert "User: alice" in notifier.messages[0]
        assert "Time: 09:00 - 17:00" in notifier.messages[0]

    def test_notifier_failure_does_not_affect_creation(self, client, headers, notifier):
        notifier.fail = True

        response = client.post("/api/time", json=entry_payload(), headers=headers)

        assert response.status_code == 201
        assert len(client.get("/api/time/my-entries", headers=headers).json()) == 1

    def test_missing_field(self, client, headers):
        response = client.post("/api/time", json={"date": "2024-01-10", "startTime": "2024-01-10T09:00:00"},
                               headers=headers)

        assert response.status_code == 400
        assert response.json()["code"] == "INCOMPLETE_INPUT"
        assert response.json()["message"] == "All fields are required"

    def test_bad_timestamp(self, client, headers):
        response = client.post("/api/time", json=entry_payload() | {"startTime": "soon"}, headers=headers)

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_FORMAT"
        assert response.json()["message"] == "Invalid date format"

    def test_end_before_start(self, client, headers):
        response = client.post("/api/time", json=entry_payload(start="17:00", end="09:00"), headers=headers)

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_TIME_RANGE"

    def test_requires_token(self, client):
        response = client.post("/api/time", json=entry_payload())

        assert response.status_code == 401
        assert response.json()["code"] == "MISSING_TOKEN"


class TestUpdateAndDeleteTimeEntry:
    """Test cases for PUT and DELETE /api/time/{id}."""

    @pytest.fixture
    def entry_id(self, client, headers):
        return client.post("/api/time", json=entry_payload(), headers=headers).json()["id"]

    def test_owner_updates(self, client, headers, entry_id):
        response = client.put(f"/api/time/{entry_id}", json=entry_payload(start="08:00", end="21:00"),
                              headers=headers)

        assert response.status_code == 200
        assert response.json()["id"] == entry_id
        assert response.json()["is_overtime"] is True

    def test_non_owner_update_is_forbidden_whatever_the_fields(self, client, other_headers, entry_id):
        valid = client.put(f"/api/time/{entry_id}", json=entry_payload(), headers=other_headers)
        empty = client.put(f"/api/time/{entry_id}", json={}, headers=other_headers)

        assert valid.status_code == 403
        assert empty.status_code == 403
        assert valid.json()["code"] == "FORBIDDEN"

    def test_update_unknown_entry(self, client, headers):
        response = client.put("/api/time/999", json=entry_payload(), headers=headers)

        assert response.status_code == 404

    def test_update_into_overlap(self, client, headers, entry_id):
        other = client.post("/api/time", json=entry_payload(start="18:00", end="20:00"), headers=headers)

        response = client.put(f"/api/time/{other.json()['id']}", json=entry_payload(start="16:00", end="20:00"),
                              headers=headers)

        assert response.status_code == 409

    def test_owner_deletes(self, client, headers, entry_id):
        response = client.delete(f"/api/time/{entry_id}", headers=headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Time entry deleted"}
        assert client.get("/api/time/my-entries", headers=headers).json() == []

    def test_non_owner_delete_looks_absent(self, client, headers, other_headers, entry_id):
        response = client.delete(f"/api/time/{entry_id}", headers=other_headers)

        assert response.status_code == 404
        assert len(client.get("/api/time/my-entries", headers=headers).json()) == 1


class TestListTimeEntries:
    """Test cases for the listing endpoints."""

    def test_my_entries_only_mine(self, client, headers, other_headers):
        client.post("/api/time", json=entry_payload(day="2024-01-09"), headers=headers)
        client.post("/api/time", json=entry_payload(day="2024-01-11"), headers=headers)
        client.post("/api/time", json=entry_payload(day="2024-01-10"), headers=other_headers)

        entries = client.get("/api/time/my-entries", headers=headers).json()

        assert [e["date"] for e in entries] == ["2024-01-11", "2024-01-09"]

    def test_daily_and_weekly(self, client, headers):
        for day in ("2024-01-08", "2024-01-10", "2024-01-15"):
            client.post("/api/time", json=entry_payload(day=day), headers=headers)

        daily = client.get("/api/time/daily/2024-01-10", headers=headers).json()
        weekly = client.get("/api/time/weekly/2024-01-08", headers=headers).json()

        assert [e["date"] for e in daily] == ["2024-01-10"]
        assert [e["date"] for e in weekly] == ["2024-01-08", "2024-01-10"]

    def test_daily_bad_date(self, client, headers):
        response = client.get("/api/time/daily/not-a-date", headers=headers)

        assert response.status_code == 400

    def test_all_entries_admin_only(self, client, headers, admin_token):
        client.post("/api/time", json=entry_payload(), headers=headers)

        forbidden = client.get("/api/time/all", headers=headers)
        allowed = client.get("/api/time/all", headers=auth_headers(admin_token))

        assert forbidden.status_code == 403
        assert allowed.status_code == 200
        assert allowed.json()[0]["username"] == "alice"

    def test_all_entries_without_token(self, client):
        response = client.get("/api/time/all")

        assert response.status_code == 401
        assert response.json()["code"] == "MISSING_TOKEN"
