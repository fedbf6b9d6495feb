"""Tests for the HTTP server in main.py."""

import pytest
from fastapi.testclient import TestClient

import main


@pytest.fixture
def client():
    main.store.clear()
    main.store.registry.reset()
    yield TestClient(main.app)
    main.store.clear()
    main.store.registry.reset()


def test_status(client):
    res = client.get("/status")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"


def test_create_default_robot(client):
    res = client.post("/robots", json={})
    assert res.status_code == 200
    assert res.json() == {"id": 1, "result": "0 0 N", "lost": False}


def test_create_with_pose(client):
    res = client.post("/robots", json={"x": 26, "y": 12, "heading": "W"})
    assert res.json()["result"] == "26 12 W"


def test_create_bad_heading(client):
    res = client.post("/robots", json={"heading": "Z"})
    assert res.status_code == 400


def test_instruct(client):
    robot_id = client.post("/robots", json={}).json()["id"]
    res = client.post(f"/robots/{robot_id}/instruct", json={"instructions": "f"})
    assert res.status_code == 200
    assert res.json()["result"] == "0 1 N"


def test_instruct_lost_and_scent(client):
    first = client.post("/robots", json={}).json()["id"]
    second = client.post("/robots", json={}).json()["id"]

    res = client.post(f"/robots/{first}/instruct", json={"instructions": "lf"})
    assert res.json() == {"id": first, "result": "-1 0 W LOST", "lost": True}
    assert client.get("/scents").json() == {"scents": [{"x": -1, "y": 0}]}

    res = client.post(f"/robots/{second}/instruct", json={"instructions": "lf"})
    assert res.json()["result"] == "0 0 W"


def test_instruct_bad_characters(client):
    robot_id = client.post("/robots", json={}).json()["id"]
    res = client.post(f"/robots/{robot_id}/instruct", json={"instructions": "lfz"})
    assert res.status_code == 400
    assert res.json()["detail"] == "Instructions can only include a combination of L, R and F"


def test_instruct_too_long(client):
    robot_id = client.post("/robots", json={}).json()["id"]
    res = client.post(f"/robots/{robot_id}/instruct", json={"instructions": "l" * 100})
    assert res.status_code == 400
    assert res.json()["detail"] == "Instruction string must be less than 100 characters"


def test_instruct_unknown_robot(client):
    res = client.post("/robots/99/instruct", json={"instructions": "f"})
    assert res.status_code == 404


def test_robot_detail_history(client):
    robot_id = client.post("/robots", json={}).json()["id"]
    client.post(f"/robots/{robot_id}/instruct", json={"instructions": "rf"})
    res = client.get(f"/robots/{robot_id}")
    assert res.status_code == 200
    assert res.json()["history"] == [
        {"x": 0, "y": 0, "heading": "N", "lost": False},
        {"x": 0, "y": 0, "heading": "E", "lost": False},
        {"x": 1, "y": 0, "heading": "E", "lost": False},
    ]


def test_list_robots(client):
    client.post("/robots", json={})
    client.post("/robots", json={"x": 3})
    res = client.get("/robots")
    assert [r["result"] for r in res.json()] == ["0 0 N", "3 0 N"]


def test_reset_scents(client):
    robot_id = client.post("/robots", json={}).json()["id"]
    client.post(f"/robots/{robot_id}/instruct", json={"instructions": "lf"})
    res = client.delete("/scents")
    assert res.json() == {"scents": []}
    assert client.get("/scents").json() == {"scents": []}


def test_status_reports_grid(client):
    res = client.get("/status")
    assert res.json()["grid"] == {"min": {"x": 0, "y": 0}, "max": {"x": 50, "y": 25}}
