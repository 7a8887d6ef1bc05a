import logging

import pytest
from fastapi.testclient import TestClient

from ontology_api.logging_config import LOG_FORMAT
from ontology_api.server.api import create_app
from ontology_api.server.settings import Settings, get_settings

from conftest import obo_document


def _client(obo_path) -> TestClient:
    settings = Settings(obo_path=obo_path, cors_origins=["http://localhost:5173"])
    app = create_app(settings)
    app.dependency_overrides[get_settings] = lambda: settings
    return TestClient(app)


@pytest.fixture
def client(tmp_path, trait_obo):
    obo_path = tmp_path / "ontology.obo"
    obo_path.write_text(trait_obo, encoding="utf-8")
    return _client(obo_path)


def test_health_reports_obo_file(client, tmp_path):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "obo_file": str(tmp_path / "ontology.obo"),
        "obo_available": True,
    }


def test_load_lists_root_classes(client):
    response = client.get("/api/ontology/load")

    assert response.status_code == 200
    assert response.json() == {"success": True, "classes": ["Trait"]}


def test_subclasses_for_valid_class(client):
    response = client.get("/api/ontology/classes/Trait/subclasses")

    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    assert payload["class"] == "Trait"
    assert [node["name"] for node in payload["subclasses"]] == ["Leaf area", "Plant height"]
    assert payload["subclasses"][0]["subclasses"][0]["name"] == "Area ratio"
    assert payload["diagnostics"] == {"term_count": 4, "skipped_blocks": 0, "discarded_edges": []}


def test_subclasses_for_invalid_class(client):
    response = client.get("/api/ontology/classes/NotARealClass/subclasses")

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid class. Must be one of: Method, Scale, Trait, Variable"


def test_subclasses_for_valid_class_without_children(client):
    response = client.get("/api/ontology/classes/Variable/subclasses")

    assert response.status_code == 200
    assert response.json()["subclasses"] == []


def test_cyclic_hierarchy_is_unprocessable(tmp_path):
    obo_path = tmp_path / "cyclic.obo"
    obo_path.write_text(obo_document("id: Trait\nis_a: x", "id: x\nis_a: Trait"), encoding="utf-8")

    response = _client(obo_path).get("/api/ontology/classes/Trait/subclasses")

    assert response.status_code == 422
    assert "Cyclic hierarchy" in response.json()["detail"]


def test_missing_obo_file(tmp_path):
    client = _client(tmp_path / "missing.obo")

    health = client.get("/api/health")
    load = client.get("/api/ontology/load")
    subclasses = client.get("/api/ontology/classes/Trait/subclasses")

    assert health.json()["obo_available"] is False
    assert load.status_code == 500
    assert load.json()["detail"].startswith("Failed to load ontology:")
    assert subclasses.status_code == 500
    assert subclasses.json()["detail"].startswith("Failed to fetch subclasses:")


def test_file_is_reread_per_request(tmp_path, trait_obo):
    obo_path = tmp_path / "ontology.obo"
    obo_path.write_text(trait_obo, encoding="utf-8")
    client = _client(obo_path)

    assert client.get("/api/ontology/load").json()["classes"] == ["Trait"]

    obo_path.write_text(trait_obo + "\n[Term]\nid: s1\nis_a: ns4:Scale\n", encoding="utf-8")

    assert client.get("/api/ontology/load").json()["classes"] == ["Scale", "Trait"]


def test_deep_hierarchy_is_served(tmp_path):
    depth = 1500
    blocks = ["id: n0\nname: n0\nis_a: ns4:Trait"]
    blocks += [f"id: n{i}\nname: n{i}\nis_a: n{i - 1}" for i in range(1, depth)]
    obo_path = tmp_path / "deep.obo"
    obo_path.write_text(obo_document(*blocks), encoding="utf-8")

    response = _client(obo_path).get("/api/ontology/classes/Trait/subclasses")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    body = response.text
    assert body.startswith('{"success":true,"class":"Trait","subclasses":[{"id":"n0","name":"n0","subclasses":[')
    assert body.count('"subclasses":[') == depth + 1
    assert '{"id":"n1499","name":"n1499","subclasses":[]}' in body
    assert body.endswith('"diagnostics":{"term_count":1500,"skipped_blocks":0,"discarded_edges":[]}}')


def test_lifespan_configures_logging(tmp_path, trait_obo):
    obo_path = tmp_path / "ontology.obo"
    obo_path.write_text(trait_obo, encoding="utf-8")
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level

    try:
        before = list(root.handlers)
        with _client(obo_path) as client:
            assert client.get("/api/health").status_code == 200
            assert root.handlers != before
            assert [handler.formatter._fmt for handler in root.handlers] == [LOG_FORMAT]
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
