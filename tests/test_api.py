"""Tests for the HTTP surface."""

import pytest
from fastapi.testclient import TestClient

from gridbench.main import app


@pytest.fixture(scope="module")
def client() -> TestClient:
    return TestClient(app)


def grid_payload(lines: list[str]) -> dict:
    return {
        "rows": len(lines),
        "cols": len(lines[0]),
        "blocked": [1 if ch == "#" else 0 for line in lines for ch in line],
    }


OPEN_5X5 = grid_payload(["....."] * 5)
SPLIT_3X3 = grid_payload(["...", "###", "..."])


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True, "algorithms": 4}


def test_algorithms_listed_in_report_order(client):
    response = client.get("/api/algorithms")
    assert response.status_code == 200
    assert [a["id"] for a in response.json()] == ["bfs", "dfs", "astar", "dijkstra"]


class TestBenchmarkEndpoint:
    """POST /api/benchmark."""

    def test_open_grid(self, client):
        response = client.post(
            "/api/benchmark",
            json={"grid": OPEN_5X5, "start": [0, 0], "goal": [4, 4]},
        )
        assert response.status_code == 200
        results = response.json()["results"]
        assert list(results) == ["bfs", "dfs", "astar", "dijkstra"]
        assert results["bfs"]["path_length"] == 9
        assert results["astar"]["path"][0] == [0, 0]
        assert results["dfs"]["path_length"] >= 9

    def test_eight_connected(self, client):
        response = client.post(
            "/api/benchmark",
            json={"grid": OPEN_5X5, "start": [0, 0], "goal": [4, 4], "neighbor_model": 8},
        )
        assert response.status_code == 200
        assert response.json()["results"]["dijkstra"]["path_length"] == 5

    def test_no_path(self, client):
        response = client.post(
            "/api/benchmark",
            json={"grid": SPLIT_3X3, "start": [0, 0], "goal": [2, 2]},
        )
        assert response.status_code == 200
        for entry in response.json()["results"].values():
            assert entry["outcome"] == "no_path"
            assert entry["path"] is None
            assert entry["nodes_visited"] == 3

    def test_blocked_endpoint_is_not_http_error(self, client):
        response = client.post(
            "/api/benchmark",
            json={"grid": SPLIT_3X3, "start": [1, 1], "goal": [2, 2]},
        )
        assert response.status_code == 200
        for entry in response.json()["results"].values():
            assert entry["outcome"] == "invalid_endpoint"

    def test_strategy_subset(self, client):
        response = client.post(
            "/api/benchmark",
            json={"grid": OPEN_5X5, "start": [0, 0], "goal": [4, 4], "strategies": ["astar", "bfs"]},
        )
        assert response.status_code == 200
        assert list(response.json()["results"]) == ["bfs", "astar"]

    def test_out_of_bounds_is_400(self, client):
        response = client.post(
            "/api/benchmark",
            json={"grid": OPEN_5X5, "start": [0, 0], "goal": [5, 5]},
        )
        assert response.status_code == 400

    def test_bad_blocked_length_is_400(self, client):
        grid = dict(OPEN_5X5, blocked=[0] * 24)
        response = client.post(
            "/api/benchmark",
            json={"grid": grid, "start": [0, 0], "goal": [4, 4]},
        )
        assert response.status_code == 400

    def test_non_positive_timeout_is_422(self, client):
        response = client.post(
            "/api/benchmark",
            json={"grid": OPEN_5X5, "start": [0, 0], "goal": [4, 4], "timeout_s": 0},
        )
        assert response.status_code == 422


class TestRunEndpoint:
    """POST /api/run."""

    def test_run_single_strategy(self, client):
        response = client.post(
            "/api/run",
            json={
                "algorithm_id": "astar",
                "grid": OPEN_5X5,
                "start": [0, 0],
                "goal": [4, 4],
                "options": {"return_visited": True},
            },
        )
        assert response.status_code == 200
        body = response.json()
        assert body["strategy"] == "astar"
        assert body["outcome"] == "found"
        assert body["path_length"] == 9
        assert len(body["visited"]) == body["nodes_visited"]

    def test_unknown_algorithm_is_404(self, client):
        response = client.post(
            "/api/run",
            json={"algorithm_id": "thetastar", "grid": OPEN_5X5, "start": [0, 0], "goal": [4, 4]},
        )
        assert response.status_code == 404

    def test_out_of_bounds_is_400(self, client):
        response = client.post(
            "/api/run",
            json={"algorithm_id": "bfs", "grid": OPEN_5X5, "start": [-1, 0], "goal": [4, 4]},
        )
        assert response.status_code == 400
