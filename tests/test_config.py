"""Tests for provider settings and the provider factory."""
import pytest

from ethrpc.config import ProviderSettings, create_provider
from ethrpc.providers.bridge import BridgeProvider
from ethrpc.providers.http import HttpProvider

from conftest import FakeBridge


def test_defaults():
    settings = ProviderSettings()

    assert settings.host == "http://localhost:8545"
    assert settings.timeout == 0
    assert settings.keep_alive is True
    assert settings.with_credentials is False
    assert settings.bridge_namespace == "eth"


def test_from_env(monkeypatch):
    monkeypatch.setenv("ETHRPC_HOST", "https://rpc.example.org")
    monkeypatch.setenv("ETHRPC_TIMEOUT", "12.5")
    monkeypatch.setenv("ETHRPC_KEEP_ALIVE", "false")
    monkeypatch.setenv("ETHRPC_WITH_CREDENTIALS", "yes")
    monkeypatch.setenv("ETHRPC_HEADERS", "Authorization: Bearer abc; X-Client: tests")
    monkeypatch.setenv("ETHRPC_CHAIN_ID", "56")

    settings = ProviderSettings.from_env()

    assert settings.host == "https://rpc.example.org"
    assert settings.timeout == 12.5
    assert settings.keep_alive is False
    assert settings.with_credentials is True
    assert settings.headers == {"Authorization": "Bearer abc", "X-Client": "tests"}
    assert settings.chain_id == "56"


def test_from_env_custom_prefix(monkeypatch):
    monkeypatch.setenv("NODE_HOST", "http://node:8545")

    assert ProviderSettings.from_env(prefix="NODE_").host == "http://node:8545"


def test_from_yaml_provider_section(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "provider:\n"
        "  host: http://node:8545\n"
        "  timeout: 5\n"
        "  headers:\n"
        "    X-Api-Key: secret\n"
        "other: ignored\n"
    )

    settings = ProviderSettings.from_yaml(path)

    assert settings.host == "http://node:8545"
    assert settings.timeout == 5
    assert settings.headers == {"X-Api-Key": "secret"}


def test_from_yaml_top_level(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("host: http://node:8545\nbridge_namespace: wallet\n")

    settings = ProviderSettings.from_yaml(path)

    assert settings.bridge_namespace == "wallet"


def test_from_yaml_rejects_non_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- a\n- b\n")

    with pytest.raises(ValueError):
        ProviderSettings.from_yaml(path)


def test_negative_timeout_rejected():
    with pytest.raises(ValueError):
        ProviderSettings(timeout=-1)


def test_create_http_provider():
    settings = ProviderSettings(host="https://rpc.example.org", timeout=3, headers={"X-A": "1"})

    provider = create_provider(settings)

    assert isinstance(provider, HttpProvider)
    assert provider.host == "https://rpc.example.org"
    assert provider.timeout == 3
    assert provider.headers == {"X-A": "1"}
    assert provider.https_agent is not None


def test_create_bridge_provider():
    settings = ProviderSettings(bridge_namespace="wallet", address="0x" + "12" * 20, chain_id=1)

    provider = create_provider(settings, bridge=FakeBridge())

    assert isinstance(provider, BridgeProvider)
    assert isinstance(provider.fallback, HttpProvider)
    assert provider.namespace == "wallet"
    assert provider.chain_id == 1
    assert provider.ready is True
