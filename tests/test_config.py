"""
Tests for settings loading and validation
"""

import pytest
from pydantic import ValidationError

from bandstand.config import Settings


def test_defaults():
    s = Settings()

    assert s.api_host == "0.0.0.0"
    assert s.api_port == 3000
    assert s.graphql_ide == "playground"
    assert s.max_batch_operations == 10


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BANDSTAND_API_HOST", "127.0.0.1")
    monkeypatch.setenv("BANDSTAND_API_PORT", "8080")
    monkeypatch.setenv("BANDSTAND_GRAPHQL_IDE", "GraphiQL")

    s = Settings()

    assert s.api_host == "127.0.0.1"
    assert s.api_port == 8080
    assert s.graphql_ide == "graphiql"


@pytest.mark.parametrize("host", ["localhost", "::", "192.168.1.10"])
def test_valid_hosts(host):
    assert Settings(api_host=host).api_host == host


@pytest.mark.parametrize("host", ["0.0.0.0:3000", "not a host", "999.1.1.1"])
def test_unparsable_host_is_fatal(host):
    with pytest.raises(ValidationError, match="api_host"):
        Settings(api_host=host)


@pytest.mark.parametrize("port", [-1, 65536])
def test_port_out_of_range(port):
    with pytest.raises(ValidationError, match="api_port"):
        Settings(api_port=port)


def test_non_numeric_port_from_environment(monkeypatch):
    monkeypatch.setenv("BANDSTAND_API_PORT", "three thousand")

    with pytest.raises(ValidationError):
        Settings()


def test_unknown_ide():
    with pytest.raises(ValidationError, match="graphql_ide"):
        Settings(graphql_ide="altair")


def test_batch_limit_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(max_batch_operations=0)


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("BANDSTAND_LOG_LEVEL", "warning")

    assert Settings().log_level == "WARNING"


def test_unknown_log_level():
    with pytest.raises(ValidationError, match="log_level"):
        Settings(log_level="chatty")
