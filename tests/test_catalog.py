from agrihub.models.equipment import Equipment
from agrihub.models.produce import Produce

TRACTOR = {
    "name": "John Deere 5310 Tractor",
    "type": "tractor",
    "description": "55 HP 4WD",
    "specifications": {"horsepower": "55 HP"},
    "baseRatePerDay": 1500,
    "location": "Karnal, Haryana",
}


def test_create_equipment_as_provider(client, signup, auth_headers):
    token, user = signup("equipment_provider")

    response = client.post("/api/v1/equipment", json=TRACTOR, headers=auth_headers(token))
    assert response.status_code == 201
    body = response.json()
    assert body["id"]
    assert body["created_at"]
    assert body["owner_id"] == user["id"]
    assert body["availability_status"] == "available"
    assert body["base_rate_per_day"] == 1500
    assert body["specifications"] == {"horsepower": "55 HP"}


def test_create_equipment_rejects_other_roles(client, signup, auth_headers, db):
    for role in ("farmer", "consumer", "input_supplier", "transport_provider", "admin"):
        token, _ = signup(role)
        response = client.post("/api/v1/equipment", json=TRACTOR, headers=auth_headers(token))
        assert response.status_code == 403
        assert response.json() == {"error": "Insufficient permissions"}

    assert db.query(Equipment).count() == 0


def test_create_equipment_requires_fields(client, signup, auth_headers):
    token, _ = signup("equipment_provider")

    response = client.post(
        "/api/v1/equipment", json={"name": "Plough"}, headers=auth_headers(token)
    )
    assert response.status_code == 400
    assert "error" in response.json()


def test_equipment_listing_filters_and_owner_details(client, signup, auth_headers, db):
    token, user = signup("equipment_provider", name="Priya", location="Haryana")
    client.post("/api/v1/equipment", json=TRACTOR, headers=auth_headers(token))
    client.post(
        "/api/v1/equipment",
        json={"name": "Kubota Harvester", "type": "harvester", "baseRatePerDay": 2500, "location": "Ludhiana, Punjab"},
        headers=auth_headers(token),
    )
    response = client.post(
        "/api/v1/equipment",
        json={"name": "Old Tractor", "type": "tractor", "baseRatePerDay": 800, "location": "Karnal"},
        headers=auth_headers(token),
    )
    rented = db.query(Equipment).filter(Equipment.id == response.json()["id"]).one()
    rented.availability_status = "rented"
    db.commit()

    response = client.get("/api/v1/equipment")
    assert response.status_code == 200
    body = response.json()
    assert body["pagination"] == {"page": 1, "limit": 10, "total": 2}
    assert all(item["availability_status"] == "available" for item in body["items"])
    assert body["items"][0]["owner_name"] == "Priya"
    assert body["items"][0]["owner_location"] == "Haryana"

    response = client.get("/api/v1/equipment", params={"type": "tractor"})
    assert [item["name"] for item in response.json()["items"]] == ["John Deere 5310 Tractor"]

    response = client.get("/api/v1/equipment", params={"location": "punjab"})
    assert [item["name"] for item in response.json()["items"]] == ["Kubota Harvester"]


def test_equipment_pagination(client, signup, auth_headers):
    token, _ = signup("equipment_provider")
    for i in range(3):
        client.post(
            "/api/v1/equipment",
            json={**TRACTOR, "name": f"Tractor {i}"},
            headers=auth_headers(token),
        )

    response = client.get("/api/v1/equipment", params={"page": 2, "limit": 2})
    body = response.json()
    assert len(body["items"]) == 1
    assert body["pagination"] == {"page": 2, "limit": 2, "total": 3}

    assert client.get("/api/v1/equipment", params={"page": 0}).status_code == 400


def test_read_equipment_item(client, signup, auth_headers):
    token, _ = signup("equipment_provider")
    created = client.post("/api/v1/equipment", json=TRACTOR, headers=auth_headers(token)).json()

    response = client.get(f"/api/v1/equipment/{created['id']}")
    assert response.status_code == 200
    assert response.json()["name"] == TRACTOR["name"]

    response = client.get("/api/v1/equipment/missing")
    assert response.status_code == 404
    assert response.json() == {"error": "Equipment not found"}


def test_create_produce_is_farmer_only(client, signup, auth_headers, db):
    produce = {"name": "Tomatoes", "category": "vegetables", "pricePerKg": 45.5, "stockKg": 500}

    consumer_token, _ = signup("consumer")
    response = client.post("/api/v1/produce", json=produce, headers=auth_headers(consumer_token))
    assert response.status_code == 403
    assert db.query(Produce).count() == 0

    farmer_token, farmer = signup("farmer")
    response = client.post(
        "/api/v1/produce",
        json={**produce, "harvestDate": "2024-10-15", "organic": True},
        headers=auth_headers(farmer_token),
    )
    assert response.status_code == 201
    body = response.json()
    assert body["farmer_id"] == farmer["id"]
    assert body["price_per_kg"] == 45.5
    assert body["harvest_date"] == "2024-10-15"
    assert body["organic"] is True


def test_produce_listing_hides_sold_out_stock(client, signup, auth_headers):
    token, _ = signup("farmer", name="Rajesh", location="Punjab")
    headers = auth_headers(token)
    client.post("/api/v1/produce", json={"name": "Tomatoes", "category": "vegetables", "pricePerKg": 45.5, "stockKg": 500, "organic": True}, headers=headers)
    client.post("/api/v1/produce", json={"name": "Rice", "category": "grains", "pricePerKg": 120, "stockKg": 1000}, headers=headers)
    client.post("/api/v1/produce", json={"name": "Onions", "category": "vegetables", "pricePerKg": 30, "stockKg": 0}, headers=headers)

    body = client.get("/api/v1/produce").json()
    names = {item["name"] for item in body["items"]}
    assert names == {"Tomatoes", "Rice"}
    assert all(item["stock_kg"] > 0 for item in body["items"])
    assert body["items"][0]["farmer_name"] == "Rajesh"

    body = client.get("/api/v1/produce", params={"category": "vegetables"}).json()
    assert [item["name"] for item in body["items"]] == ["Tomatoes"]

    body = client.get("/api/v1/produce", params={"organic": "false"}).json()
    assert [item["name"] for item in body["items"]] == ["Rice"]


def test_products_are_listed_by_input_suppliers(client, signup, auth_headers):
    product = {"name": "Urea 45kg", "category": "fertilizer", "pricePerUnit": 266.5, "unit": "bag", "stockQuantity": 40}

    farmer_token, _ = signup("farmer")
    response = client.post("/api/v1/products", json=product, headers=auth_headers(farmer_token))
    assert response.status_code == 403

    token, supplier = signup("input_supplier", name="Sunita")
    response = client.post("/api/v1/products", json=product, headers=auth_headers(token))
    assert response.status_code == 201
    assert response.json()["supplier_id"] == supplier["id"]
    client.post(
        "/api/v1/products",
        json={**product, "name": "Hybrid Maize Seed", "category": "seed", "stockQuantity": 0},
        headers=auth_headers(token),
    )

    body = client.get("/api/v1/products").json()
    assert [item["name"] for item in body["items"]] == ["Urea 45kg"]
    assert body["items"][0]["supplier_name"] == "Sunita"

    body = client.get("/api/v1/products", params={"search": "urea"}).json()
    assert body["pagination"]["total"] == 1
