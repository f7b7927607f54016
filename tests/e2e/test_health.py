"""End-to-end tests for the health checks."""


def test_health(client):
    response = client.get("/api/healthcheck")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "Healthy"
    assert data["environment"] == "test"
    assert data["application"]["name"] == "BagOfHolding"


def test_detailed_health(client):
    response = client.get("/api/healthcheck/detailed")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "Healthy"
    assert data["server"]["processor_count"] >= 1
    assert data["configuration"]["port"] > 0


def test_swagger_hidden_outside_development(client):
    assert client.get("/swagger").status_code == 404
