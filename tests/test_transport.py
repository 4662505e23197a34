REQUEST = {
    "pickupLocation": "Ludhiana, Punjab",
    "deliveryLocation": "Azadpur Mandi, Delhi",
    "cargoType": "grain",
    "cargoWeight": 1200,
    "estimatedDistance": 310,
    "offeredPrice": 9000,
    "pickupDate": "2024-11-05",
}


def test_create_and_list_transport_requests(client, signup, auth_headers):
    token, farmer = signup("farmer", name="Rajesh")

    response = client.post("/api/v1/transport", json=REQUEST, headers=auth_headers(token))
    assert response.status_code == 201
    body = response.json()
    assert body["requester_id"] == farmer["id"]
    assert body["status"] == "open"
    assert body["provider_id"] is None

    listing = client.get("/api/v1/transport").json()
    assert listing["pagination"]["total"] == 1
    assert listing["items"][0]["requester_name"] == "Rajesh"

    assert client.get("/api/v1/transport", params={"pickup_location": "punjab"}).json()["pagination"]["total"] == 1
    assert client.get("/api/v1/transport", params={"delivery_location": "mumbai"}).json()["items"] == []


def test_transport_request_requires_locations(client, signup, auth_headers):
    token, _ = signup("farmer")
    response = client.post("/api/v1/transport", json={"cargoType": "grain"}, headers=auth_headers(token))
    assert response.status_code == 400


def test_transport_provider_accepts_open_request(client, signup, auth_headers):
    farmer_token, _ = signup("farmer")
    provider_token, provider = signup("transport_provider")
    request_id = client.post("/api/v1/transport", json=REQUEST, headers=auth_headers(farmer_token)).json()["id"]

    response = client.post(f"/api/v1/transport/{request_id}/accept", headers=auth_headers(farmer_token))
    assert response.status_code == 403

    response = client.post(f"/api/v1/transport/{request_id}/accept", headers=auth_headers(provider_token))
    assert response.status_code == 200
    assert response.json()["status"] == "accepted"
    assert response.json()["provider_id"] == provider["id"]

    # Accepted requests leave the open board and cannot be taken twice
    assert client.get("/api/v1/transport").json()["items"] == []
    response = client.post(f"/api/v1/transport/{request_id}/accept", headers=auth_headers(provider_token))
    assert response.status_code == 400

    response = client.post("/api/v1/transport/missing/accept", headers=auth_headers(provider_token))
    assert response.status_code == 404
