"""
API tests through the FastAPI test client.

Tests:
1-3.  Health, defaults, catalog
4-6.  Estimate endpoint
7-11. Render endpoint
12-13. PDF download
"""

import math

import pytest

from deckbuilder.schemas import DEFAULT_DECK_CONFIG


def _config_json(**overrides):
    data = DEFAULT_DECK_CONFIG.model_dump(mode="json")
    data.update(overrides)
    return data


# ============================================================
# Basics
# ============================================================

def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok", "app": "deckbuilder"}


def test_defaults(client):
    res = client.get("/api/deck/defaults")
    assert res.status_code == 200
    data = res.json()
    assert data["dimensions"]["width"] == 12
    assert data["dimensions"]["depth"] == 10
    assert data["dimensions"]["height"] == 3
    assert data["material"] == "pressure-treated"
    assert data["railing"] == "metal"
    assert data["railing_brand"] == "westbury"
    assert data["stairs"] == {"location": "front", "width": 4}
    assert data["ledger_attached"] is True


def test_catalog(client):
    res = client.get("/api/deck/catalog")
    assert res.status_code == 200
    data = res.json()
    brands = [b["brand"] for b in data["decking_brands"]]
    assert "Trex" in brands
    tuscany = data["railing_systems"][0]["series"][0]
    assert tuscany["name"] == "Tuscany C10"
    assert tuscany["colors"][0]["name"] == "Black Fine Texture"
    wolf = next(b for b in data["decking_brands"] if b["brand"] == "Wolf Serenity")
    assert wolf["lines"][0]["name"] == "Wolf Serenity Collection"


# ============================================================
# Estimate
# ============================================================

def test_estimate_default(client):
    res = client.post("/api/deck/estimate", json=_config_json())
    assert res.status_code == 200
    data = res.json()
    assert data["total_sq_ft"] == 120
    assert data["perimeter_ft"] == 32
    names = [i["name"] for i in data["items"]]
    assert names[0] == "Decking boards"
    assert data["items"][0]["quantity"] == math.ceil(12 * 10 * 1.10)
    assert data["total_cost"] == pytest.approx(sum(i["total_cost"] for i in data["items"]))


def test_estimate_rejects_l_shape_without_extension(client):
    res = client.post("/api/deck/estimate", json=_config_json(shape="l-shape"))
    assert res.status_code == 422


@pytest.mark.parametrize("field,value", [
    ("house_color", "beige"),
    ("railing", "rope"),
    ("dimensions", {"width": 0, "depth": 10, "height": 3}),
])
def test_estimate_rejects_invalid_config(client, field, value):
    res = client.post("/api/deck/estimate", json=_config_json(**{field: value}))
    assert res.status_code == 422


# ============================================================
# Render
# ============================================================

@pytest.mark.parametrize("view_mode", ["surface", "framing", "elevation", "isometric"])
def test_render_each_view(client, view_mode):
    res = client.post("/api/deck/render", json={
        "config": _config_json(),
        "view_mode": view_mode,
        "width": 640,
        "height": 480,
        "camera": {"x": 0, "y": 0, "zoom": 1.0, "rotation_angle": 30},
    })
    assert res.status_code == 200
    data = res.json()
    assert data["view_mode"] == view_mode
    assert (data["width"], data["height"]) == (640, 480)
    assert data["commands"][0]["op"] == "clear"
    ops = [c["op"] for c in data["commands"]]
    assert ops.count("save") == ops.count("restore")


def test_render_defaults_to_surface(client):
    res = client.post("/api/deck/render", json={"config": _config_json()})
    assert res.status_code == 200
    data = res.json()
    assert data["view_mode"] == "surface"
    assert (data["width"], data["height"]) == (800, 600)


def test_render_unknown_view_is_400(client):
    res = client.post("/api/deck/render", json={"config": _config_json(), "view_mode": "blueprint"})
    assert res.status_code == 400
    assert "blueprint" in res.json()["detail"]


def test_render_oversize_canvas_is_400(client):
    res = client.post("/api/deck/render", json={"config": _config_json(), "width": 10000})
    assert res.status_code == 400
    assert "too large" in res.json()["detail"]


@pytest.mark.parametrize("body", [
    {"width": 0},
    {"camera": {"zoom": 12}},
])
def test_render_invalid_request_is_422(client, body):
    res = client.post("/api/deck/render", json={"config": _config_json(), **body})
    assert res.status_code == 422


# ============================================================
# PDF
# ============================================================

def test_pdf_download(client):
    res = client.post("/api/deck/pdf", json=_config_json())
    assert res.status_code == 200
    assert res.headers["content-type"] == "application/pdf"
    assert res.headers["content-disposition"] == 'attachment; filename="Deck-DeckPlan.pdf"'
    assert res.content.startswith(b"%PDF-")


def test_pdf_filename_uses_quote_number(client):
    res = client.post("/api/deck/pdf", json=_config_json(quote_number="Q-0042"))
    assert res.status_code == 200
    assert res.headers["content-disposition"] == 'attachment; filename="Deck-Q-0042.pdf"'
