"""Tests for the /shipping/pack HTTP endpoint."""

from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from carton_optimizer import api
from carton_optimizer.api import app
from carton_optimizer.config import Settings

client = TestClient(app)

SMALL_BOX = {
    "id": "box-sm",
    "name": "Small Box",
    "innerDimensions": {"length": 10, "width": 8, "height": 6, "unit": "in"},
    "maxWeight": {"value": 15, "unit": "lb"},
    "cost": 150,
}
MEDIUM_BOX = {
    "id": "box-md",
    "name": "Medium Box",
    "innerDimensions": {"length": 16, "width": 12, "height": 10, "unit": "in"},
    "maxWeight": {"value": 30, "unit": "lb"},
    "cost": 250,
}


def make_item(item_id: str, weight: float, dims: tuple[float, float, float], quantity: int = 1) -> dict:
    length, width, height = dims
    return {
        "id": item_id,
        "weight": {"value": weight, "unit": "lb"},
        "dimensions": {"length": length, "width": width, "height": height, "unit": "in"},
        "quantity": quantity,
    }


def test_pack_response_is_camel_case_result() -> None:
    request = {
        "items": [make_item("sku-1", 2, (4, 3, 2), quantity=3)],
        "availableBoxes": [MEDIUM_BOX, SMALL_BOX],
    }

    response = client.post("/shipping/pack", json=request)

    assert response.status_code == 200
    data = response.json()

    assert set(data.keys()) == {"boxes", "totalBoxes", "totalWeight", "totalBoxCost", "unpacked"}
    assert data["totalBoxes"] == 1
    assert data["totalBoxCost"] == 150
    assert data["totalWeight"] == {"value": 6.0, "unit": "lb"}
    assert data["unpacked"] == []

    box = data["boxes"][0]
    assert box["box"]["id"] == "box-sm"
    assert box["box"]["innerDimensions"]["length"] == 10
    assert box["items"] == [{"itemId": "sku-1", "quantity": 3}]
    assert box["totalWeight"] == {"value": 6.0, "unit": "lb"}
    assert 0 < box["volumeUtilization"] <= 0.9


def test_pack_reports_unpacked_items() -> None:
    request = {
        "items": [make_item("huge", 1, (50, 50, 50))],
        "availableBoxes": [SMALL_BOX],
    }

    response = client.post("/shipping/pack", json=request)

    assert response.status_code == 200
    data = response.json()
    assert data["totalBoxes"] == 0
    assert data["unpacked"] == [{"itemId": "huge", "reason": "No available box can fit this item"}]


def test_pack_empty_request() -> None:
    response = client.post("/shipping/pack", json={"items": [], "availableBoxes": []})

    assert response.status_code == 200
    assert response.json() == {
        "boxes": [],
        "totalBoxes": 0,
        "totalWeight": {"value": 0.0, "unit": "lb"},
        "totalBoxCost": 0,
        "unpacked": [],
    }


def test_invalid_quantity_returns_422() -> None:
    request = {
        "items": [make_item("bad", 1, (1, 1, 1), quantity=0)],
        "availableBoxes": [SMALL_BOX],
    }

    response = client.post("/shipping/pack", json=request)

    assert response.status_code == 422


def test_negative_dimension_returns_422() -> None:
    request = {
        "items": [make_item("bad", 1, (-1, 1, 1))],
        "availableBoxes": [SMALL_BOX],
    }

    response = client.post("/shipping/pack", json=request)

    assert response.status_code == 422


def test_health() -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_request_log_line_counts_packed_units(caplog: pytest.LogCaptureFixture) -> None:
    request = {
        "items": [make_item("sku-1", 2, (4, 3, 2), quantity=3), make_item("huge", 1, (50, 50, 50))],
        "availableBoxes": [SMALL_BOX],
    }

    with caplog.at_level(logging.INFO, logger="carton_optimizer.api"):
        response = client.post("/shipping/pack", json=request)

    assert response.status_code == 200
    assert "packed=3, boxes=1, unpacked=1" in caplog.text


def test_startup_tolerates_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(api, "settings", Settings(log_level="LOUD"))

    with TestClient(app) as started:
        response = started.get("/health")

    assert response.status_code == 200
