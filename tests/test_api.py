import pytest

import main
from main import InputError, parse_input


# ---------------------------------------------------------------------------
# parse_input
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("raw,expected", [
    ([1, 2, 3], [1, 2, 3]),
    ("[5, 3, 8]", [5, 3, 8]),
    ("[]", []),
    ([1.5, -2], [1.5, -2]),
])
def test_parse_input_accepts_arrays(raw, expected):
    assert parse_input(raw) == expected


@pytest.mark.parametrize("raw", [
    "not json",
    '{"a": 1}',
    "42",
    [1, "two"],
    [True, 2],
    [[1], 2],
    None,
    "[Infinity]",
    "[NaN]",
    "[1e400]",
    "[3, -Infinity]",
    [float("inf"), 1],
    [1, float("nan")],
])
def test_parse_input_rejects(raw):
    with pytest.raises(InputError, match="Invalid input data"):
        parse_input(raw)


# ---------------------------------------------------------------------------
# Catalog routes
# ---------------------------------------------------------------------------
def test_list_algorithms(client):
    resp = client.get("/api/algorithms")
    cats = resp.get_json()["categories"]

    assert resp.status_code == 200
    assert [c["key"] for c in cats] == ["sorting", "searching", "tree", "graph", "dataStructure"]
    assert cats[0]["items"][0]["name"] == "Bubble Sort"


def test_list_data_structures(client):
    cats = client.get("/api/data-structures").get_json()["categories"]
    assert [c["key"] for c in cats] == ["linear", "nonlinear"]


def test_get_descriptor_includes_code(client):
    body = client.get("/api/algorithms/dijkstra").get_json()
    assert body["name"] == "Dijkstra's Algorithm"
    assert body["code"].startswith("def dijkstra")

    body = client.get("/api/data-structures/queue").get_json()
    assert body["key"] == "queue"
    assert "code" in body


def test_unknown_descriptor_is_404(client):
    assert client.get("/api/algorithms/nope").status_code == 404
    assert client.get("/api/data-structures/bubbleSort").status_code == 404


# ---------------------------------------------------------------------------
# /api/run
# ---------------------------------------------------------------------------
def test_run_algorithm(client):
    resp = client.post("/api/run", json={"kind": "algorithm", "key": "bubbleSort", "input": [3, 1, 2]})
    body = resp.get_json()

    assert resp.status_code == 200
    assert body["totalSteps"] == len(body["steps"])
    assert body["steps"][-1]["array"] == [1, 2, 3]
    assert body["steps"][-1]["isFinal"] is True
    assert body["metrics"]["key"] == "bubbleSort"


def test_run_data_structure_with_string_input(client):
    resp = client.post("/api/run", json={"kind": "dataStructure", "key": "hashTable", "input": "[12, 22]"})
    body = resp.get_json()

    assert resp.status_code == 200
    assert body["steps"][-1]["structureKind"] == "hashTable"
    assert body["steps"][-1]["hashTable"]["size"] == 10


def test_run_graph_serializes_infinity_as_null(client):
    resp = client.post("/api/run", json={"key": "dijkstra", "input": [1, 2, 3, 4]})
    steps = resp.get_json()["steps"]

    init = steps[1]
    assert init["distances"]["0"] == 0
    assert all(v is None for k, v in init["distances"].items() if k != "0")
    assert steps[0]["structureKind"] == "graph"


def test_run_uses_default_input(client):
    body = client.post("/api/run", json={"key": "insertionSort"}).get_json()
    assert body["steps"][-1]["array"] == [1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_run_rejects_bad_input(client):
    resp = client.post("/api/run", json={"key": "bubbleSort", "input": '{"x": 1}'})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == main.INVALID_INPUT_MESSAGE


@pytest.mark.parametrize("key,raw", [
    ("hashTable", "[Infinity, 3]"),
    ("bubbleSort", "[3, NaN, 1, 2]"),
])
def test_run_rejects_non_finite_numbers(client, key, raw):
    kind = "dataStructure" if key == "hashTable" else "algorithm"
    resp = client.post("/api/run", json={"kind": kind, "key": key, "input": raw})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == main.INVALID_INPUT_MESSAGE


def test_parse_input_accepts_large_integers():
    big = 10 ** 400
    assert parse_input([big, 1]) == [big, 1]


def test_run_rejects_bad_kind(client):
    resp = client.post("/api/run", json={"kind": "spreadsheet", "key": "bubbleSort", "input": [1]})
    assert resp.status_code == 400


def test_run_unknown_key_is_404(client):
    resp = client.post("/api/run", json={"kind": "dataStructure", "key": "bubbleSort", "input": [1]})
    assert resp.status_code == 404
    assert "Unknown dataStructure" in resp.get_json()["error"]


# ---------------------------------------------------------------------------
# /api/compare
# ---------------------------------------------------------------------------
def test_compare_pairs_steps(client):
    resp = client.post("/api/compare", json={
        "kind": "algorithm", "key": "bubbleSort", "secondKey": "mergeSort",
        "input": [5, 3, 8, 4, 2], "index": 10_000,
    })
    body = resp.get_json()
    comparison = body["comparison"]

    assert resp.status_code == 200
    assert body["steps"]["left"]["isFinal"] is True
    assert body["steps"]["right"]["isFinal"] is True
    assert comparison["left"]["name"] == "Bubble Sort"
    assert comparison["right"]["name"] == "Merge Sort"
    assert comparison["timeVerdict"].startswith("Merge Sort is generally faster")
    assert comparison["useCase"].startswith("Bubble Sort is best for")


def test_compare_defaults_to_first_step(client):
    body = client.post("/api/compare", json={
        "key": "quickSort", "secondKey": "heapSort", "input": [2, 1],
    }).get_json()

    assert body["index"] == 0
    assert body["steps"]["left"]["message"] == "Starting Quick Sort"
    assert body["steps"]["right"]["message"] == "Starting Heap Sort"


def test_compare_unknown_second_key(client):
    resp = client.post("/api/compare", json={"key": "bubbleSort", "secondKey": "nope", "input": [1]})
    assert resp.status_code == 404


def test_compare_bad_index(client):
    resp = client.post("/api/compare", json={
        "key": "bubbleSort", "secondKey": "mergeSort", "input": [1], "index": "later",
    })
    assert resp.status_code == 400
