"""Tests router FastAPI — catalog, validate, normalize, merge, remove."""
import pytest
from fastapi.testclient import TestClient

from page_content import to_dict
from page_content.app import app
from conftest import nested_columns


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_catalog_lists_every_variant(client):
    r = client.get("/page-content/catalog")
    assert r.status_code == 200
    types = [b["type"] for b in r.json()["blocks"]]
    assert len(types) == 12
    assert "columns" in types
    list_schema = next(b["schema"] for b in r.json()["blocks"] if b["type"] == "list")
    assert "listType" in list_schema["properties"]


def test_validate_ok(client, sample_doc):
    r = client.post("/page-content/validate", json=to_dict(sample_doc))
    assert r.json() == {"valid": True}


def test_validate_reports_version(client, sample_doc):
    data = to_dict(sample_doc)
    data["version"] = "42"
    body = client.post("/page-content/validate", json=data).json()
    assert body["valid"] is False
    assert "Version" in body["error"]
    assert body["path"] == []


def test_validate_reports_depth_path(client):
    body = client.post("/page-content/validate", json=to_dict(nested_columns(40))).json()
    assert body["valid"] is False
    assert "Profondeur" in body["error"]
    assert len(body["path"]) == 65


def test_normalize_renumbers(client, sample_doc):
    data = to_dict(sample_doc)
    for block in data["blocks"]:
        block["order"] = 99
    r = client.post("/page-content/normalize", json=data)
    assert r.status_code == 200
    assert [b["order"] for b in r.json()["blocks"]] == list(range(6))


def test_merge_block(client, sample_doc):
    r = client.post("/page-content/blocks/merge", json={
        "document": to_dict(sample_doc), "block_id": "img-1", "delta": {"width": "60%", "align": "left"},
    })
    assert r.status_code == 200
    image = r.json()["blocks"][1]
    assert image["width"] == "60%"
    assert image["align"] == "left"
    assert image["alt"] == "Logo"


def test_merge_type_mismatch_422(client, sample_doc):
    r = client.post("/page-content/blocks/merge", json={
        "document": to_dict(sample_doc), "block_id": "p-left", "delta": {"items": ["a"]},
    })
    assert r.status_code == 422
    assert "items" in r.json()["detail"]


def test_merge_image_url_is_fixed_422(client, sample_doc):
    r = client.post("/page-content/blocks/merge", json={
        "document": to_dict(sample_doc), "block_id": "img-1", "delta": {"url": "autre.png"},
    })
    assert r.status_code == 422
    assert "url" in r.json()["detail"]


def test_merge_unknown_block_404(client, sample_doc):
    r = client.post("/page-content/blocks/merge", json={
        "document": to_dict(sample_doc), "block_id": "ghost", "delta": {"content": "x"},
    })
    assert r.status_code == 404


def test_merge_invalid_document_422(client):
    r = client.post("/page-content/blocks/merge", json={
        "document": {"version": "1.0", "blocks": [{"id": "x", "type": "video"}]},
        "block_id": "x", "delta": {},
    })
    assert r.status_code == 422


def test_remove_nested_block(client, sample_doc):
    r = client.post("/page-content/blocks/remove", json={"document": to_dict(sample_doc), "block_id": "p-left"})
    assert r.status_code == 200
    assert r.json()["blocks"][2]["columns"][0]["blocks"] == []
    assert r.json()["blocks"][2]["columns"][1]["blocks"][0]["id"] == "p-right"


def test_remove_unknown_block_404(client, sample_doc):
    r = client.post("/page-content/blocks/remove", json={"document": to_dict(sample_doc), "block_id": "ghost"})
    assert r.status_code == 404
