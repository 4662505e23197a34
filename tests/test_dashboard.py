def stats(client, auth_headers, token):
    response = client.get("/api/v1/dashboard/stats", headers=auth_headers(token))
    assert response.status_code == 200
    return response.json()


def test_farmer_stats(client, signup, auth_headers):
    token, _ = signup("farmer")
    for name in ("Tomatoes", "Rice"):
        client.post(
            "/api/v1/produce",
            json={"name": name, "category": "vegetables", "pricePerKg": 10, "stockKg": 5},
            headers=auth_headers(token),
        )

    assert stats(client, auth_headers, token) == {
        "totalProduce": 2,
        "activeBookings": 0,
        "totalRevenue": 0,
        "activeListings": 2,
    }


def test_equipment_provider_stats(client, signup, auth_headers):
    provider_token, _ = signup("equipment_provider")
    farmer_token, _ = signup("farmer")
    equipment = client.post(
        "/api/v1/equipment",
        json={"name": "Tractor", "type": "tractor", "baseRatePerDay": 1000},
        headers=auth_headers(provider_token),
    ).json()
    client.post(
        "/api/v1/bookings",
        json={"equipmentId": equipment["id"], "startDate": "2024-11-01", "endDate": "2024-11-01"},
        headers=auth_headers(farmer_token),
    )

    assert stats(client, auth_headers, provider_token) == {
        "totalEquipment": 1,
        "totalBookings": 1,
        "totalRevenue": 0,
        "activeListings": 1,
    }


def test_consumer_and_supplier_stats(client, signup, auth_headers):
    supplier_token, supplier = signup("input_supplier")
    consumer_token, _ = signup("consumer")
    product = client.post(
        "/api/v1/products",
        json={"name": "Urea", "category": "fertilizer", "pricePerUnit": 250, "unit": "bag", "stockQuantity": 5},
        headers=auth_headers(supplier_token),
    ).json()
    client.post(
        "/api/v1/orders",
        json={"items": [{"type": "product", "itemId": product["id"], "quantity": 1, "sellerId": supplier["id"]}]},
        headers=auth_headers(consumer_token),
    )

    assert stats(client, auth_headers, consumer_token)["totalOrders"] == 1
    assert stats(client, auth_headers, supplier_token) == {
        "totalProducts": 1,
        "totalOrders": 1,
        "totalRevenue": 0,
        "activeListings": 1,
    }


def test_transport_provider_stats(client, signup, auth_headers):
    farmer_token, _ = signup("farmer")
    provider_token, _ = signup("transport_provider")
    client.post(
        "/api/v1/transport",
        json={"pickupLocation": "A", "deliveryLocation": "B", "cargoType": "grain"},
        headers=auth_headers(farmer_token),
    )

    assert stats(client, auth_headers, provider_token) == {
        "totalTrips": 0,
        "openRequests": 1,
        "totalRevenue": 0,
        "activeListings": 0,
    }


def test_admin_gets_zeroed_stats(client, signup, auth_headers):
    token, _ = signup("admin")
    assert stats(client, auth_headers, token) == {
        "totalOrders": 0,
        "totalBookings": 0,
        "totalRevenue": 0,
        "activeListings": 0,
    }
