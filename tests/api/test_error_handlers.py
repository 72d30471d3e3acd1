"""Error envelope — every failure leaves as {"error": {code, message, category, severity}}.

Invariants:
    - Unknown routes and wrong methods use the ROUTE_NOT_FOUND envelope
    - Store failures are 500 DATABASE_ERROR, never collapsed into 404
"""

from planet_api.core.errors import DatabaseError
from tests.api.helpers import ALICE


class _BrokenGateway:
    async def find_all(self):
        raise DatabaseError("connection refused", "execute")

    async def update(self, planet_id, data):
        raise DatabaseError("deadlock", "commit")

    async def delete(self, planet_id):
        raise DatabaseError("deadlock", "commit")


async def test_unknown_route_uses_envelope(client):
    res = await client.get("/moons")

    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "ROUTE_NOT_FOUND"
    assert error["message"] == "Cannot GET /moons"
    assert set(error) == {"code", "message", "category", "severity"}


async def test_wrong_method_uses_envelope(client):
    res = await client.patch("/planets/1", json={"name": "X"}, auth=ALICE)

    assert res.status_code == 405
    assert res.json()["error"]["message"] == "Cannot PATCH /planets/1"


async def test_list_store_failure_returns_500(client, app):
    app.state.planet_gateway = _BrokenGateway()

    res = await client.get("/planets")

    assert res.status_code == 500
    assert res.json()["error"]["code"] == "DATABASE_ERROR"


async def test_replace_store_failure_is_not_reported_as_404(client, app):
    app.state.planet_gateway = _BrokenGateway()

    res = await client.put("/planets/1", json={"name": "X"}, auth=ALICE)

    assert res.status_code == 500
    assert res.json()["error"]["code"] == "DATABASE_ERROR"


async def test_delete_store_failure_is_not_reported_as_404(client, app):
    app.state.planet_gateway = _BrokenGateway()

    res = await client.delete("/planets/1", auth=ALICE)

    assert res.status_code == 500


async def test_validation_error_lists_each_field(client):
    res = await client.post(
        "/planets", json={"diameter": -5, "moons": "many"}, auth=ALICE,
    )

    fields = {d["field"] for d in res.json()["error"]["details"]}
    assert {"body.name", "body.diameter", "body.moons"} <= fields


async def test_malformed_json_returns_400(client):
    res = await client.post(
        "/planets",
        content=b"{not json",
        headers={"content-type": "application/json"},
        auth=ALICE,
    )
    assert res.status_code == 400
