# Environment store tests.
import os

import pytest

from env_plus.environment import (
    EnvironmentStore,
    MappingEnvironment,
    OsEnvironment,
    resolve_store,
)


def test_mapping_environment_get_and_set():
    backing = {"A": "1"}
    store = MappingEnvironment(backing)

    store.set("B", "2")

    assert store.get("A") == "1"
    assert store.get("missing") is None
    assert backing == {"A": "1", "B": "2"}


def test_os_environment_uses_process_environment(monkeypatch):
    monkeypatch.setenv("ENV_PLUS_STORE_TEST", "present")
    store = OsEnvironment()

    assert store.get("ENV_PLUS_STORE_TEST") == "present"
    store.set("ENV_PLUS_STORE_TEST", "updated")
    assert os.environ["ENV_PLUS_STORE_TEST"] == "updated"


def test_resolve_store():
    store = MappingEnvironment()
    backing = {}

    assert isinstance(resolve_store(), OsEnvironment)
    assert resolve_store(store) is store
    assert resolve_store(backing).mapping is backing


def test_store_missing_a_method_cannot_be_created():
    class GetOnly(EnvironmentStore):
        def get(self, name):
            return None

    with pytest.raises(TypeError):
        GetOnly()
