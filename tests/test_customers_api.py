"""API tests for the customer directory."""


def test_create_and_read_customer(client):
    response = client.post(
        "/customers",
        json={
            "name": "  Aminah  ",
            "email": "aminah@kacangparpu.my",
            "phone": "+60 12-345 6789",
            "address": "Jalan Ampang, Kuala Lumpur",
        },
    )

    assert response.status_code == 201
    customer = response.json()
    assert customer["name"] == "Aminah"
    assert customer["email"] == "aminah@kacangparpu.my"
    assert customer["total_purchases"] == 0
    assert customer["created_at"]

    fetched = client.get(f"/customers/{customer['id']}").json()
    assert fetched == customer


def test_list_customers_by_name(client):
    for name in ["Siti", "Ahmad", "Mei Ling"]:
        client.post("/customers", json={"name": name})

    names = [c["name"] for c in client.get("/customers").json()]

    assert names == ["Ahmad", "Mei Ling", "Siti"]


def test_update_customer_keeps_omitted_fields(client):
    customer = client.post(
        "/customers",
        json={"name": "Ravi", "phone": "012-111 2222"},
    ).json()

    response = client.put(
        f"/customers/{customer['id']}",
        json={"address": "Georgetown, Penang", "total_purchases": 3},
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated["name"] == "Ravi"
    assert updated["phone"] == "012-111 2222"
    assert updated["address"] == "Georgetown, Penang"
    assert updated["total_purchases"] == 3


def test_delete_customer(client):
    customer = client.post("/customers", json={"name": "Farah"}).json()

    assert client.delete(f"/customers/{customer['id']}").status_code == 204
    assert client.get(f"/customers/{customer['id']}").status_code == 404
    assert client.get("/customers").json() == []


def test_missing_customer_returns_404(client):
    assert client.get("/customers/999").status_code == 404
    assert client.put("/customers/999", json={"name": "Nobody"}).status_code == 404
    assert client.delete("/customers/999").status_code == 404
    assert client.get("/customers/999").json()["detail"] == "Customer not found"


def test_customer_validation(client):
    assert client.post("/customers", json={}).status_code == 422
    assert client.post("/customers", json={"name": ""}).status_code == 422
    assert client.post("/customers", json={"name": "A", "email": "not-an-email"}).status_code == 422
    assert client.post("/customers", json={"name": "A", "total_purchases": -1}).status_code == 422
