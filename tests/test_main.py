from pos_app.main import ROUTERS, create_app


def test_root_health_check(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {
        "message": "Simple POS API is running",
        "business": "Kacang Parpu",
    }


def test_factory_mounts_every_router():
    paths = {route.path for route in create_app().routes}

    for router in ROUTERS:
        assert any(path.startswith(router.prefix) for path in paths)

    assert "/customers/{customer_id}" in paths
    assert "/exports/monthly.pdf" in paths
