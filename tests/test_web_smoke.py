from __future__ import annotations

from fastapi.testclient import TestClient

from tivoliwheel.web import app as web_app
from tivoliwheel.web.app import app

BASE = "/api/v1/wheel"


def test_health_and_index() -> None:
    client = TestClient(app)
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}

    r = client.get("/")
    assert r.status_code == 200
    assert "Tivoli Wheel" in r.text
    assert 'class="pointer"' in r.text
    assert "Pizza" in r.text


def test_wheel_spin_flow() -> None:
    client = TestClient(app)
    labels = ["Pizza", "Pasta", "Salad", "Soup", "Steak"]
    r = client.post(BASE, json={"labels": labels, "duration_ms": 50, "seed": 42})
    assert r.status_code == 201
    wid = r.json()["wheel"]

    layout = client.get(f"{BASE}/{wid}").json()
    assert layout["labels"] == labels
    assert len(layout["sectors"]) == 5

    r = client.get(f"{BASE}/{wid}/svg", params={"rotation": 0.5})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("image/svg+xml")
    assert r.text.count("<path") == 5

    r = client.post(f"{BASE}/{wid}/spin")
    assert r.status_code == 200
    spin = r.json()
    assert spin["status"] == "spinning"

    r = client.post(f"{BASE}/{wid}/spin")
    assert r.status_code == 409

    r = client.post(f"{BASE}/{wid}/shuffle")
    assert r.status_code == 409

    # past the end of the spin
    finish = spin["start_time"] + 75
    r = client.get(f"{BASE}/{wid}/poll", params={"now": finish})
    sample = r.json()
    assert sample["done"] is True
    assert sample["winner"] in labels
    assert labels[sample["winner_index"]] == sample["winner"]

    again = client.get(f"{BASE}/{wid}/poll", params={"now": finish + 1_000}).json()
    assert again == sample

    r = client.post(f"{BASE}/{wid}/shuffle")
    assert r.status_code == 200
    assert sorted(r.json()["labels"]) == sorted(labels)

    assert client.delete(f"{BASE}/{wid}").status_code == 204
    assert client.get(f"{BASE}/{wid}").status_code == 404


def test_wheel_errors() -> None:
    client = TestClient(app)
    r = client.post(BASE, json={"labels": ["solo"]})
    assert r.status_code == 400
    assert "between 2 and 100" in r.json()["detail"]

    r = client.post(BASE, json={"labels": "Pizza\nPasta\n\nSalad"})
    assert r.status_code == 201
    wid = r.json()["wheel"]
    assert client.get(f"{BASE}/{wid}").json()["labels"] == ["Pizza", "Pasta", "Salad"]

    assert client.get(f"{BASE}/nope/poll").status_code == 404
    assert client.post(f"{BASE}/nope/spin").status_code == 404


def test_replacing_a_wheel_keeps_the_registry_bounded() -> None:
    client = TestClient(app)
    page = client.get("/").text
    assert 'method: "DELETE"' in page

    before = len(web_app._manager._wheels)
    wid = None
    for round_ in range(5):
        if wid is not None:
            assert client.delete(f"{BASE}/{wid}").status_code == 204
        r = client.post(BASE, json={"labels": [f"a{round_}", f"b{round_}"]})
        assert r.status_code == 201
        wid = r.json()["wheel"]
        assert len(web_app._manager._wheels) == before + 1

    assert client.delete(f"{BASE}/{wid}").status_code == 204
    assert len(web_app._manager._wheels) == before
    assert client.delete(f"{BASE}/{wid}").status_code == 404
