def test_list_barbers_returns_seeded_barbers(client):
    response = client.get("/api/barbers")

    assert response.status_code == 200
    barbers = response.json()
    assert [b["name"] for b in barbers] == ["James 'The Blade'", "Sarah Styles"]
    assert barbers[0]["availability"] == {
        "days": [1, 2, 3, 4, 5, 6],
        "hours": {"start": "09:00", "end": "18:00"},
    }


def test_get_unknown_barber_is_404(client):
    response = client.get("/api/barbers/42")

    assert response.status_code == 404
    assert response.json() == {"message": "Barber not found"}


def test_create_barber(client, admin_headers, barber_payload):
    response = client.post("/api/barbers", json=barber_payload, headers=admin_headers)

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 3
    assert body["specialties"] == ["Fades", "Beards"]
    assert body["availability"] == barber_payload["availability"]


def test_create_barber_without_specialties(client, admin_headers, barber_payload):
    barber_payload.pop("specialties")

    response = client.post("/api/barbers", json=barber_payload, headers=admin_headers)

    assert response.status_code == 201
    assert response.json()["specialties"] is None


def test_create_barber_rejects_invalid_weekday(client, admin_headers, barber_payload):
    barber_payload["availability"]["days"] = [1, 7]

    response = client.post("/api/barbers", json=barber_payload, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["field"] == "availability.days"


def test_create_barber_rejects_bad_hours(client, admin_headers, barber_payload):
    barber_payload["availability"]["hours"]["end"] = "5pm"

    response = client.post("/api/barbers", json=barber_payload, headers=admin_headers)

    assert response.status_code == 400
    assert response.json() == {
        "message": "Time must be in HH:MM format",
        "field": "availability.hours.end",
    }


def test_create_barber_requires_admin(client, barber_payload):
    assert client.post("/api/barbers", json=barber_payload).status_code == 401


def test_update_barber(client, admin_headers):
    response = client.put(
        "/api/barbers/2",
        json={"specialties": ["Beard Trims"], "availability": {"days": [5, 5, 0], "hours": {"start": "08:00", "end": "12:00"}}},
        headers=admin_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Sarah Styles"
    assert body["specialties"] == ["Beard Trims"]
    assert body["availability"]["days"] == [0, 5]


def test_update_unknown_barber_is_404(client, admin_headers):
    response = client.put("/api/barbers/99", json={"name": "Nobody"}, headers=admin_headers)

    assert response.status_code == 404


def test_delete_barber_is_idempotent(client, admin_headers):
    assert client.delete("/api/barbers/1", headers=admin_headers).status_code == 204
    assert client.delete("/api/barbers/1", headers=admin_headers).status_code == 204
    assert [b["id"] for b in client.get("/api/barbers").json()] == [2]


def test_update_barber_clears_specialties_with_null(client, admin_headers):
    response = client.put("/api/barbers/1", json={"specialties": None}, headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["specialties"] is None
    assert client.get("/api/barbers/1").json()["specialties"] is None


def test_update_barber_rejects_null_required_fields(client, admin_headers):
    response = client.put("/api/barbers/1", json={"availability": None}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json() == {"message": "Availability cannot be null", "field": "availability"}
    assert client.get("/api/barbers/1").json()["availability"]["days"] == [1, 2, 3, 4, 5, 6]


def test_non_numeric_barber_id_is_unknown(client, admin_headers):
    assert client.get("/api/barbers/abc").status_code == 404
    assert client.put("/api/barbers/abc", json={"name": "X"}, headers=admin_headers).status_code == 404
    assert client.delete("/api/barbers/abc", headers=admin_headers).status_code == 204
    assert len(client.get("/api/barbers").json()) == 2
