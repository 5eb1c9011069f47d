"""Tests for the HTTP surface."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from server import app as app_module
from simulation import CarConstraints, ManualClock


@pytest.fixture
def manager(monkeypatch):
    manager = app_module.SimulationManager(
        constraints=CarConstraints(),
        clock=ManualClock(),
        broadcast_interval=0.01,
    )
    monkeypatch.setattr(app_module, "manager", manager)
    return manager


@pytest.fixture
def client(manager):
    with TestClient(app_module.app) as client:
        yield client


def test_initial_state(client):
    state = client.get("/state").json()
    assert state["status"]["current_floor"] == 0
    assert state["status"]["direction"] == "IDLE"
    assert state["status"]["waiting_counts"] == [0] * 10
    assert state["started"] is False
    assert state["complete"] is True


def test_register_batch(client):
    response = client.post(
        "/passengers",
        json={"passengers": [{"origin": 0, "destination": 5}, {"origin": 7, "destination": 2}]},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["registered"] == [1, 2]
    assert body["status"]["total_registered"] == 2
    assert body["status"]["waiting_counts"][7] == 1


@pytest.mark.parametrize(
    "payload",
    [
        {"passengers": []},
        {"passengers": [{"origin": 3, "destination": 3}]},
        {"passengers": [{"origin": -1, "destination": 3}]},
        {"passengers": [{"origin": "lobby", "destination": 3}]},
        {"passengers": [{"origin": 0, "destination": 1}] * 21},
    ],
)
def test_malformed_batches_are_rejected(client, payload):
    response = client.post("/passengers", json=payload)
    assert response.status_code == 422


def test_out_of_range_floor_registers_nobody(client, manager):
    response = client.post(
        "/passengers",
        json={"passengers": [{"origin": 0, "destination": 5}, {"origin": 0, "destination": 10}]},
    )
    assert response.status_code == 400
    assert manager.controller.registry.total_registered == 0


def test_start_runs_to_completion_and_closes_registration(client, manager):
    client.post("/passengers", json={"passengers": [{"origin": 5, "destination": 0}]})
    response = client.post("/start")
    assert response.status_code == 200
    assert manager.controller.join(timeout=5)

    state = client.get("/state").json()
    assert state["complete"] is True
    assert state["running"] is False
    assert state["status"]["total_processed"] == 1
    assert state["metrics"]["throughput"] == 1

    late = client.post("/passengers", json={"passengers": [{"origin": 1, "destination": 2}]})
    assert late.status_code == 409
    assert client.post("/start").status_code == 409


def test_reset_builds_fresh_controller(client, manager):
    client.post("/passengers", json={"passengers": [{"origin": 5, "destination": 0}]})
    client.post("/start")
    manager.controller.join(timeout=5)

    state = client.post("/reset", json={"start_floor": 4}).json()
    assert state["started"] is False
    assert state["status"]["current_floor"] == 4
    assert state["status"]["total_registered"] == 0

    assert client.post("/reset", json={"start_floor": 11}).status_code == 400


def test_stop_endpoint(client, manager):
    state = client.post("/stop").json()
    assert state["running"] is False


def test_websocket_sends_current_state(client):
    with client.websocket_connect("/ws/stream") as websocket:
        message = websocket.receive_json()
    assert message["status"]["direction"] == "IDLE"
