"""Test the filter (predicates) route."""
from fastapi.testclient import TestClient

from scheduler_extender.main import create_app
from scheduler_extender.policies import PolicyError, PolicyRegistry, Predicate
from scheduler_extender.policies.unsupported import FILTER_UNSUPPORTED_MESSAGE

from conftest import SCARCE, extender_args, make_node, make_pod


class LabelPredicate(Predicate):
    """Accepts nodes labelled pool=scarce, fails nodes labelled broken=true."""

    name = "scarce-pool"

    def __init__(self):
        self.calls = 0

    def check(self, pod, node):
        self.calls += 1
        if node.metadata.labels.get("broken") == "true":
            raise PolicyError(f"node {node.name} is broken")
        return node.metadata.labels.get("pool") == "scarce"


def labelled_node(name, **labels):
    node = make_node(name, {SCARCE: "4"})
    node["metadata"]["labels"].update(labels)
    return node


class TestFilterRoute:

    def setup_method(self):
        self.predicate = LabelPredicate()
        registry = PolicyRegistry()
        registry.register_predicate(self.predicate)
        self.client = TestClient(create_app(registry=registry))

    def post(self, body, name="scarce-pool"):
        return self.client.post(f"/scheduler/predicates/{name}", json=body)

    def test_eligible_nodes_are_a_subset_of_candidates(self):
        nodes = [
            labelled_node("a", pool="scarce"),
            labelled_node("b", pool="general"),
            labelled_node("c", pool="scarce"),
        ]
        response = self.post(extender_args(make_pod(), nodes))
        assert response.status_code == 200
        result = response.json()
        eligible = [node["metadata"]["name"] for node in result["Nodes"]["items"]]
        assert eligible == ["a", "c"]
        assert set(eligible) <= {"a", "b", "c"}
        assert result["FailedNodes"] == {}
        assert result["Error"] == ""

    def test_eligible_nodes_are_echoed_with_unknown_fields(self):
        node = labelled_node("a", pool="scarce")
        node["spec"] = {"podCIDR": "10.0.0.0/24"}
        result = self.post(extender_args(make_pod(), [node])).json()
        assert result["Nodes"]["items"][0]["spec"] == {"podCIDR": "10.0.0.0/24"}

    def test_eligible_nodes_are_echoed_as_sent(self):
        sparse = {"metadata": {"name": "a", "labels": {"pool": "scarce"}}, "status": {"allocatable": {SCARCE: "4"}}}
        bare = {"metadata": {"name": "b", "labels": {"pool": "scarce"}}}
        result = self.post(extender_args(make_pod(), [sparse, bare])).json()
        assert result["Nodes"]["items"] == [sparse, bare]

    def test_policy_errors_are_reported_per_node(self):
        nodes = [labelled_node("ok", pool="scarce"), labelled_node("bad", broken="true")]
        result = self.post(extender_args(make_pod(), nodes)).json()
        assert [node["metadata"]["name"] for node in result["Nodes"]["items"]] == ["ok"]
        assert result["FailedNodes"] == {"bad": "node bad is broken"}

    def test_node_names_only_request(self):
        body = {"Pod": make_pod(), "NodeNames": ["a", "b"]}
        result = self.post(body).json()
        # nodes built from names carry no labels
        assert result["NodeNames"] == []
        assert result["Nodes"] is None
        assert self.predicate.calls == 2

    def test_lower_case_envelope_is_accepted(self):
        body = {"pod": make_pod(), "nodes": {"items": [labelled_node("a", pool="scarce")]}}
        result = self.post(body).json()
        assert [node["metadata"]["name"] for node in result["Nodes"]["items"]] == ["a"]

    def test_duplicate_candidates_are_collapsed(self):
        nodes = [labelled_node("a", pool="scarce"), labelled_node("a", pool="scarce")]
        result = self.post(extender_args(make_pod(), nodes)).json()
        assert [node["metadata"]["name"] for node in result["Nodes"]["items"]] == ["a"]
        assert self.predicate.calls == 1

    def test_unregistered_predicate_explains_itself(self):
        response = self.post(extender_args(make_pod(), [labelled_node("a", pool="scarce")]), name="nope")
        assert response.status_code == 200
        result = response.json()
        assert "nope" in result["Error"]
        assert "not registered" in result["Error"]
        assert not result["Nodes"]
        assert not result["NodeNames"]
        assert self.predicate.calls == 0

    def test_malformed_json_never_reaches_the_predicate(self):
        response = self.client.post(
            "/scheduler/predicates/scarce-pool",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 200
        assert response.json()["Error"]
        assert self.predicate.calls == 0

    def test_invalid_quantity_is_a_decode_error(self):
        pod = make_pod([{"name": "c", "resources": {"requests": {SCARCE: "lots"}}}])
        result = self.post(extender_args(pod, [labelled_node("a", pool="scarce")])).json()
        assert "lots" in result["Error"]
        assert self.predicate.calls == 0

    def test_missing_pod_is_a_decode_error(self):
        result = self.post({"Nodes": {"items": []}}).json()
        assert result["Error"]
        assert self.predicate.calls == 0

    def test_empty_body_is_rejected(self):
        response = self.client.post("/scheduler/predicates/scarce-pool", content=b"")
        assert response.status_code == 400
        assert response.json()["detail"] == "Please send a request body"


def test_default_unsupported_predicate_fails_every_node(client):
    nodes = [make_node("nodeA"), make_node("nodeB")]
    response = client.post("/scheduler/predicates/unsupported", json=extender_args(make_pod(), nodes))
    assert response.status_code == 200
    result = response.json()
    assert result["Nodes"]["items"] == []
    assert result["FailedNodes"] == {
        "nodeA": FILTER_UNSUPPORTED_MESSAGE,
        "nodeB": FILTER_UNSUPPORTED_MESSAGE,
    }
