from datetime import datetime, timezone

from tripmate.services.planning.dates import to_calendar_day

API = "/api/v1"


class TestMySchedules:
    def test_upsert_creates_then_updates(self, client, alice):
        resp = client.put(f"{API}/me/schedules", json={"day": "2025-07-01", "status": "WORKING", "shift_code": "A"}, headers=alice.headers)
        assert resp.status_code == 200
        first = resp.json()
        assert first["status"] == "WORKING"
        assert first["shift_code"] == "A"

        resp = client.put(f"{API}/me/schedules", json={"day": "2025-07-01", "status": "OFF"}, headers=alice.headers)
        assert resp.json()["id"] == first["id"]
        assert resp.json()["status"] == "OFF"
        assert resp.json()["shift_code"] is None

        entries = client.get(f"{API}/me/schedules", headers=alice.headers).json()
        assert len(entries) == 1

    def test_shift_code_only_on_working_days(self, client, alice):
        resp = client.put(f"{API}/me/schedules", json={"day": "2025-07-01", "status": "OFF", "shift_code": "A"}, headers=alice.headers)
        assert resp.status_code == 400

    def test_invalid_status(self, client, alice):
        resp = client.put(f"{API}/me/schedules", json={"day": "2025-07-01", "status": "MAYBE"}, headers=alice.headers)
        assert resp.status_code == 422

    def test_bulk_last_entry_wins(self, client, alice):
        payload = {"entries": [
            {"day": "2025-07-03", "status": "WORKING"},
            {"day": "2025-07-01", "status": "WORKING"},
            {"day": "2025-07-03", "status": "OFF"},
        ]}
        resp = client.post(f"{API}/me/schedules/bulk", json=payload, headers=alice.headers)
        assert resp.status_code == 200
        assert [(e["day"], e["status"]) for e in resp.json()] == [("2025-07-01", "WORKING"), ("2025-07-03", "OFF")]

    def test_list_range(self, client, alice):
        payload = {"entries": [{"day": f"2025-07-0{d}", "status": "WORKING"} for d in range(1, 6)]}
        client.post(f"{API}/me/schedules/bulk", json=payload, headers=alice.headers)
        resp = client.get(f"{API}/me/schedules", params={"start_date": "2025-07-02", "end_date": "2025-07-04"}, headers=alice.headers)
        assert [e["day"] for e in resp.json()] == ["2025-07-02", "2025-07-03", "2025-07-04"]

    def test_delete(self, client, alice):
        client.put(f"{API}/me/schedules", json={"day": "2025-07-01", "status": "WORKING"}, headers=alice.headers)
        assert client.delete(f"{API}/me/schedules/2025-07-01", headers=alice.headers).status_code == 204
        assert client.delete(f"{API}/me/schedules/2025-07-01", headers=alice.headers).status_code == 404

    def test_entries_are_private(self, client, alice, bob):
        client.put(f"{API}/me/schedules", json={"day": "2025-07-01", "status": "WORKING"}, headers=alice.headers)
        assert client.get(f"{API}/me/schedules", headers=bob.headers).json() == []


class TestGroupSchedules:
    def test_shared_calendar(self, client, alice, bob, group_of_two, make_user):
        client.put(f"{API}/me/schedules", json={"day": "2025-07-02", "status": "WORKING", "shift_code": "B"}, headers=bob.headers)
        client.put(f"{API}/me/schedules", json={"day": "2025-07-01", "status": "OFF"}, headers=alice.headers)
        outsider = make_user("mallory")
        client.put(f"{API}/me/schedules", json={"day": "2025-07-01", "status": "WORKING"}, headers=outsider.headers)

        resp = client.get(f"{API}/groups/{group_of_two}/schedules", headers=alice.headers)
        assert resp.status_code == 200
        assert [(e["day"], e["username"], e["status"], e["shift_code"]) for e in resp.json()] == [
            ("2025-07-01", "alice", "OFF", None),
            ("2025-07-02", "bob", "WORKING", "B"),
        ]

    def test_range_filter(self, client, alice, group_of_two):
        client.put(f"{API}/me/schedules", json={"day": "2025-07-01", "status": "OFF"}, headers=alice.headers)
        client.put(f"{API}/me/schedules", json={"day": "2025-08-01", "status": "OFF"}, headers=alice.headers)
        resp = client.get(f"{API}/groups/{group_of_two}/schedules", params={"start_date": "2025-07-15"}, headers=alice.headers)
        assert [e["day"] for e in resp.json()] == ["2025-08-01"]

    def test_reversed_range(self, client, alice, group_of_two):
        resp = client.get(
            f"{API}/groups/{group_of_two}/schedules",
            params={"start_date": "2025-07-15", "end_date": "2025-07-01"},
            headers=alice.headers,
        )
        assert resp.status_code == 400

    def test_today(self, client, alice, bob, group_of_two):
        today = to_calendar_day(datetime.now(timezone.utc)).isoformat()
        client.put(f"{API}/me/schedules", json={"day": today, "status": "WORKING"}, headers=bob.headers)
        client.put(f"{API}/me/schedules", json={"day": "2000-01-01", "status": "WORKING"}, headers=alice.headers)
        resp = client.get(f"{API}/groups/{group_of_two}/schedules/today", headers=alice.headers)
        assert [(e["username"], e["day"]) for e in resp.json()] == [("bob", today)]

    def test_non_member(self, client, group_of_two, make_user):
        outsider = make_user("mallory")
        assert client.get(f"{API}/groups/{group_of_two}/schedules", headers=outsider.headers).status_code == 403


class TestWorkPattern:
    def test_empty_by_default(self, client, alice):
        body = client.get(f"{API}/me/work-pattern", headers=alice.headers).json()
        assert body == {"pattern_name": None, "shifts": []}

    def test_replace(self, client, alice):
        payload = {
            "pattern_name": "Three shifts",
            "shifts": [
                {"shift_name": "Day", "shift_code": "A", "start_time": "06:00", "end_time": "14:00"},
                {"shift_name": "Evening", "shift_code": "B", "start_time": "14:00", "end_time": "22:00"},
            ],
        }
        resp = client.put(f"{API}/me/work-pattern", json=payload, headers=alice.headers)
        assert resp.status_code == 200
        assert [s["shift_code"] for s in resp.json()["shifts"]] == ["A", "B"]

        payload = {"pattern_name": "Nights", "shifts": [{"shift_name": "Night", "shift_code": "C"}]}
        client.put(f"{API}/me/work-pattern", json=payload, headers=alice.headers)
        body = client.get(f"{API}/me/work-pattern", headers=alice.headers).json()
        assert body["pattern_name"] == "Nights"
        assert [s["shift_code"] for s in body["shifts"]] == ["C"]

    def test_duplicate_codes(self, client, alice):
        payload = {"pattern_name": "P", "shifts": [
            {"shift_name": "Day", "shift_code": "A"},
            {"shift_name": "Also day", "shift_code": "A"},
        ]}
        assert client.put(f"{API}/me/work-pattern", json=payload, headers=alice.headers).status_code == 400

    def test_empty_name(self, client, alice):
        payload = {"pattern_name": " ", "shifts": []}
        assert client.put(f"{API}/me/work-pattern", json=payload, headers=alice.headers).status_code == 400
