import pytest
from fastapi.testclient import TestClient

from postureguard.main import app
from postureguard.utils.landmarks import PoseLandmark as P

from conftest import build_landmarks


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "service": "PostureGuard"}


def test_modes(client):
    r = client.get("/modes")
    assert r.status_code == 200
    assert [m["mode"] for m in r.json()] == ["squat", "desk_sitting"]


def test_analyze_good(client, good_squat):
    r = client.post("/analyze", json={"mode": "squat", "landmarks": good_squat})
    assert r.status_code == 200

    body = r.json()
    assert body["overallStatus"] == "good"
    assert body["confidence"] == 100
    assert body["alerts"] == [
        {"type": "good", "message": "Great posture! Keep it up!", "rule": "overall"}
    ]
    assert body["tips"] == []


def test_analyze_bad_has_tips(client, good_squat):
    good_squat[P.LEFT_KNEE]["x"] = 0.7
    r = client.post("/analyze", json={"mode": "squat", "landmarks": good_squat})

    body = r.json()
    assert body["overallStatus"] == "bad"
    assert body["alerts"][0]["rule"] == "knee_over_toe"
    assert len(body["tips"]) == 2


def test_analyze_vis_alias(client):
    raw = build_landmarks()
    for p in raw:
        p["vis"] = p.pop("visibility")
    r = client.post("/analyze", json={"mode": "desk-sitting", "landmarks": raw})
    assert r.status_code == 200
    assert r.json()["confidence"] == 100


def test_analyze_unknown_mode(client, good_squat):
    r = client.post("/analyze", json={"mode": "yoga", "landmarks": good_squat})
    assert r.status_code == 400
    assert "yoga" in r.json()["detail"]


def test_analyze_short_frame(client, good_squat):
    r = client.post("/analyze", json={"mode": "squat", "landmarks": good_squat[:20]})
    assert r.status_code == 422
    assert "Expected 33" in r.json()["detail"]


def test_analyze_missing_joint(client, good_squat):
    good_squat[P.LEFT_HIP] = None
    r = client.post("/analyze", json={"mode": "squat", "landmarks": good_squat})
    assert r.status_code == 422
    assert "LEFT_HIP" in r.json()["detail"]


def test_batch(client, good_squat):
    frames = [
        {"frame_index": 0, "landmarks": good_squat},
        {"frame_index": 1, "landmarks": []},
        {"frame_index": 2, "landmarks": good_squat},
    ]
    r = client.post("/analyze/batch", json={"mode": "squat", "frames": frames})
    assert r.status_code == 200

    body = r.json()
    assert body["input"] == {"mode": "squat"}
    assert "frames" not in body
    assert [res["error"] is None for res in body["results"]] == [True, False, True]
    assert body["results"][0]["analysis"]["overallStatus"] == "good"
    assert body["summary"]["frames_analyzed"] == 2
    assert body["summary"]["frames_failed"] == 1
    assert body["summary"]["worst_status"] == "good"
    assert body["cues"]["tips"] == []


def test_batch_unknown_mode(client):
    r = client.post("/analyze/batch", json={"mode": "lunge", "frames": []})
    assert r.status_code == 400


def test_batch_overflowing_frame_is_reported(client, good_desk):
    huge = [dict(p) for p in good_desk]
    huge[P.LEFT_HIP]["x"] = 1e308
    huge[P.RIGHT_HIP]["x"] = 1e308

    frames = [{"landmarks": huge}, {"landmarks": good_desk}]
    r = client.post("/analyze/batch", json={"mode": "desk_sitting", "frames": frames})
    assert r.status_code == 200

    body = r.json()
    assert body["results"][0]["error"]
    assert body["results"][1]["analysis"]["overallStatus"] == "good"
