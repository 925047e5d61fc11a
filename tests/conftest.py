"""Shared test fixtures for the scheduler extender."""
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from scheduler_extender.core.config import Settings
from scheduler_extender.main import create_app

SCARCE = "intel.com/foo"


@pytest.fixture
def settings():
    """Settings with the default scarce resource and verbose logging."""
    return Settings(LOG_LEVEL="DEBUG", SCARCE_RESOURCE=SCARCE, MAX_PRIORITY=10, APP_VERSION="test-build")


@pytest.fixture
def client(settings):
    """Test client for an extender built with the default policies."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


def make_container(name: str = "main", requests: Optional[Dict] = None, limits: Optional[Dict] = None) -> Dict:
    return {"name": name, "resources": {"requests": requests or {}, "limits": limits or {}}}


def make_pod(
    containers: Optional[List[Dict]] = None,
    init_containers: Optional[List[Dict]] = None,
    name: str = "test-pod",
) -> Dict:
    spec = {"containers": containers or []}
    if init_containers is not None:
        spec["initContainers"] = init_containers
    return {
        "metadata": {"name": name, "namespace": "default", "uid": f"uid-{name}"},
        "spec": spec,
    }


def make_node(name: str, allocatable: Optional[Dict] = None, allocated: Optional[Dict] = None, **extra) -> Dict:
    node = {
        "metadata": {"name": name, "labels": {"kubernetes.io/hostname": name}},
        "status": {
            "capacity": dict(allocatable or {}),
            "allocatable": dict(allocatable or {}),
            "allocated": dict(allocated or {}),
        },
    }
    node.update(extra)
    return node


def extender_args(pod: Dict, nodes: List[Dict]) -> Dict:
    return {"Pod": pod, "Nodes": {"items": nodes}}


@pytest.fixture
def scarce_pod():
    """Pod whose single container requests one unit of the scarce resource."""
    return make_pod([make_container(requests={"cpu": "100m", SCARCE: "1"}, limits={SCARCE: "1"})])
