"""Health & Readiness Probes: liveness always up, readiness follows its checks."""


async def test_liveness_is_healthy(client):
    res = await client.get("/employees/liveness")
    assert res.status_code == 200
    assert res.json() == {"status": "Healthy"}


async def test_readiness_without_checks_is_healthy(client):
    res = await client.get("/employees/readiness")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "Healthy"
    assert body["entries"] == {}


async def test_readiness_reports_failing_check(client, production_app):
    async def downstream_unreachable():
        return False

    production_app.state.readiness_checks["directory"] = downstream_unreachable
    res = await client.get("/employees/readiness")
    assert res.status_code == 503
    body = res.json()
    assert body["status"] == "Unhealthy"
    assert body["entries"]["directory"]["status"] == "Unhealthy"


async def test_swagger_document_is_served(client):
    res = await client.get("/swagger/v1/swagger.json")
    assert res.status_code == 200
    doc = res.json()
    assert doc["info"]["title"] == "Maliev Employee Service"
    assert "/employees/v{version}/validate" in doc["paths"]
    assert "get" not in doc["paths"]["/employees/v{version}/validate"]
