"""
Tests for the HTTP surface: REST routes, health checks and GraphQL.
"""

import pytest
from fastapi.testclient import TestClient

from api.server import create_app
from core.container import AppContainer
from core.storage import Database
from conftest import make_settings


def test_health_live(client):
    """The liveness endpoint answers 204 with no body."""
    response = client.get("/_health/live")

    assert response.status_code == 204


def test_health_ready(client):
    """The readiness endpoint answers 204 when database and cache respond."""
    response = client.get("/_health/ready")

    assert response.status_code == 204


def test_client_crud(client):
    """Create, read, patch, count and delete a client over REST."""
    created = client.post("/api/clients", json={"first_name": "Jane", "email": "j@x.io"})
    assert created.status_code == 201
    client_id = created.json()["id"]

    fetched = client.get(f"/api/clients/{client_id}")
    assert fetched.status_code == 200
    assert fetched.json()["email"] == "j@x.io"

    patched = client.patch(f"/api/clients/{client_id}", json={"phone": "555"})
    assert patched.status_code == 200
    assert patched.json()["phone"] == "555"
    assert patched.json()["first_name"] == "Jane"

    assert client.get("/api/clients/meta").json() == {"count": 1}

    deleted = client.delete(f"/api/clients/{client_id}")
    assert deleted.status_code == 200
    assert client.get(f"/api/clients/{client_id}").status_code == 404


def test_missing_records_return_404(client):
    """Unknown ids return 404 on read, update and delete."""
    assert client.get("/api/agents/nope").status_code == 404

    response = client.patch("/api/properties/nope", json={"city": "Porto"})
    assert response.status_code == 404
    assert response.json() == {"detail": "No resource was found for nope"}

    assert client.delete("/api/appointments/nope").status_code == 404


def test_property_validation(client):
    """Invalid property payloads are rejected with 422."""
    response = client.post("/api/properties", json={"address": "", "price": -1})

    assert response.status_code == 422


def test_property_patch_rejects_null_required_fields(client):
    """PATCH with null address or status is a validation error, not a database error."""
    property_id = client.post("/api/properties", json={"address": "1 A St"}).json()["id"]

    for field in ("status", "address"):
        response = client.patch(f"/api/properties/{property_id}", json={field: None})
        assert response.status_code == 422

    fetched = client.get(f"/api/properties/{property_id}").json()
    assert fetched["address"] == "1 A St"
    assert fetched["status"] == "available"



def test_properties_by_status_and_agent(client):
    """Properties can be filtered by status and listed per agent."""
    agent_id = client.post("/api/agents", json={"last_name": "Lee"}).json()["id"]
    client.post("/api/properties", json={"address": "1 A St", "agent_id": agent_id})
    client.post(
        "/api/properties",
        json={"address": "2 B St", "agent_id": agent_id, "status": "sold"},
    )

    sold = client.get("/api/properties", params={"status": "sold"}).json()
    listed = client.get(f"/api/agents/{agent_id}/properties").json()

    assert [p["address"] for p in sold] == ["2 B St"]
    assert sorted(p["address"] for p in listed) == ["1 A St", "2 B St"]


def test_client_appointments_route(client):
    """A client's appointments are listed under the client."""
    client_id = client.post("/api/clients", json={"first_name": "Jane"}).json()["id"]
    client.post(
        "/api/appointments",
        json={"client_id": client_id, "scheduled_at": "2025-03-01T10:00:00Z", "notes": "viewing"},
    )

    response = client.get(f"/api/clients/{client_id}/appointments")

    assert response.status_code == 200
    assert [a["notes"] for a in response.json()] == ["viewing"]


def test_schema_file_written_on_startup(app, settings):
    """Building the app writes the GraphQL schema file."""
    with open(settings.graphql_schema_file, encoding="utf-8") as f:
        assert "type Query {" in f.read()


def _graphql(client, query, variables=None):
    response = client.post("/graphql", json={"query": query, "variables": variables or {}})
    assert response.status_code == 200
    return response.json()


def test_graphql_create_and_query_relations(client):
    """GraphQL mutations create linked records and queries resolve relations."""
    agent = _graphql(
        client,
        'mutation { createAgent(data: {lastName: "Lee"}) { id lastName } }',
    )["data"]["createAgent"]

    prop = _graphql(
        client,
        "mutation($agentId: ID) { createProperty(data: {address: \"3 C St\", agentId: $agentId}) "
        "{ id status agent { lastName } } }",
        {"agentId": agent["id"]},
    )["data"]["createProperty"]

    assert prop["status"] == "AVAILABLE"
    assert prop["agent"] == {"lastName": "Lee"}

    result = _graphql(
        client,
        "query($id: ID!) { agent(id: $id) { properties { id } } propertiesMeta { count } }",
        {"id": agent["id"]},
    )["data"]

    assert result["agent"]["properties"] == [{"id": prop["id"]}]
    assert result["propertiesMeta"] == {"count": 1}


def test_graphql_update_leaves_unset_fields(client):
    """Fields omitted from an update input keep their stored values."""
    created = _graphql(
        client,
        'mutation { createClient(data: {firstName: "Jane", email: "j@x.io"}) { id } }',
    )["data"]["createClient"]

    updated = _graphql(
        client,
        'mutation($id: ID!) { updateClient(id: $id, data: {firstName: "Janet"}) { firstName email } }',
        {"id": created["id"]},
    )["data"]["updateClient"]

    assert updated == {"firstName": "Janet", "email": "j@x.io"}


def test_graphql_update_property_rejects_null_status(client):
    """updateProperty with status: null returns a GraphQL error and keeps the record."""
    created = _graphql(
        client,
        'mutation { createProperty(data: {address: "4 D St"}) { id } }',
    )["data"]["createProperty"]

    result = _graphql(
        client,
        "mutation($id: ID!) { updateProperty(id: $id, data: {status: null}) { id } }",
        {"id": created["id"]},
    )

    assert result["data"] is None
    assert result["errors"][0]["message"] == "Field 'status' cannot be null"

    fetched = _graphql(
        client,
        "query($id: ID!) { property(id: $id) { address status } }",
        {"id": created["id"]},
    )["data"]["property"]
    assert fetched == {"address": "4 D St", "status": "AVAILABLE"}



def test_graphql_missing_record(client):
    """Missing records resolve to null on read and to an error on delete."""
    missing = _graphql(client, '{ client(id: "nope") { id } }')
    assert missing["data"] == {"client": None}

    deleted = _graphql(client, 'mutation { deleteClient(id: "nope") { id } }')
    assert deleted["errors"][0]["message"] == "No resource was found for nope"


def test_graphql_introspection_disabled_by_default(client):
    """Introspection queries fail when neither flag is set."""
    result = _graphql(client, "{ __schema { queryType { name } } }")

    assert result.get("errors")


def test_graphql_ide_hidden_without_playground(client):
    """The GraphiQL page is not served without the playground."""
    response = client.get("/graphql", headers={"Accept": "text/html"})

    assert response.status_code == 404


def test_graphql_playground_enables_ide_and_introspection(tmp_path, cache):
    """Turning on the playground serves GraphiQL and allows introspection."""
    settings = make_settings(tmp_path, graphql_playground=True)
    app = create_app(settings, AppContainer(settings, cache=cache))

    with TestClient(app) as client:
        ide = client.get("/graphql", headers={"Accept": "text/html"})
        assert ide.status_code == 200
        assert "graphiql" in ide.text.lower()

        result = _graphql(client, "{ __schema { queryType { name } } }")
        assert result["data"] == {"__schema": {"queryType": {"name": "Query"}}}


def test_request_logging_middleware(tmp_path, cache):
    """Request logging does not change responses."""
    settings = make_settings(tmp_path, log_request=True)
    app = create_app(settings, AppContainer(settings, cache=cache))

    with TestClient(app) as client:
        assert client.get("/_health/live").status_code == 204


def test_failed_startup_disposes_database(tmp_path, monkeypatch):
    """A startup failure after the database connects still disposes the engine."""
    async def unreachable(settings, secrets):
        raise ConnectionError("redis unreachable")

    monkeypatch.setattr("core.container.create_cache", unreachable)
    settings = make_settings(tmp_path)
    database = Database(settings.database_url)
    app = create_app(settings, AppContainer(settings, database=database))

    with pytest.raises(ConnectionError):
        with TestClient(app):
            pass

    with pytest.raises(RuntimeError):
        database.engine
