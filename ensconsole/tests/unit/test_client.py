from unittest.mock import Mock

import pytest
from eth_utils import decode_hex

from ensconsole.client import ResolutionClient, resolve_address, resolve_content
from ensconsole.config import Config
from ensconsole.constants import ENS_ADDRESS_ZERO, ENS_HASH_ZERO
from ensconsole.exceptions import ProviderUnavailable, TransportError
from ensconsole.network.proxies import Registry, Resolver
from ensconsole.utils.namehash import namehash

RESOLVER_ADDRESS = "0xD277b08f085121d287878A991e0C496488AAaEc6"
OWNER_ADDRESS = "0xEe078019375fBFEef8f6278754d54Cf415e83329"
CONTENT_HASH = decode_hex("0x3985b475b7e3af72cdbcd2e41b22951c168b0e2ff41bcc9548ee98d14ec86784")


def make_registry(resolver_address=RESOLVER_ADDRESS):
    registry = Mock(spec=Registry)
    registry.resolver.return_value = resolver_address
    registry.owner.return_value = OWNER_ADDRESS
    registry.ttl.return_value = 3600
    return registry


def make_resolver_factory(content_hash=CONTENT_HASH):
    resolver = Mock(spec=Resolver)
    resolver.content.return_value = content_hash
    resolver.addr.return_value = OWNER_ADDRESS
    return Mock(return_value=resolver), resolver


def test_resolve_content_zero_resolver_returns_zero_hash():
    registry = make_registry(resolver_address=ENS_ADDRESS_ZERO)
    resolver_factory, resolver = make_resolver_factory()

    assert resolve_content("meta.eth", registry, resolver_factory) == ENS_HASH_ZERO

    registry.resolver.assert_called_once_with(namehash("meta.eth"))
    resolver_factory.assert_not_called()
    resolver.content.assert_not_called()


def test_resolve_content_forwards_resolver_value():
    registry = make_registry()
    resolver_factory, resolver = make_resolver_factory()

    assert resolve_content("meta.eth", registry, resolver_factory) == CONTENT_HASH

    resolver_factory.assert_called_once_with(RESOLVER_ADDRESS)
    resolver.content.assert_called_once_with(namehash("meta.eth"))


def test_resolve_content_returns_unset_content_unchanged():
    registry = make_registry()
    resolver_factory, _ = make_resolver_factory(content_hash=ENS_HASH_ZERO)

    assert resolve_content("meta.eth", registry, resolver_factory) == ENS_HASH_ZERO


def test_resolve_content_registry_error_propagates():
    registry = make_registry()
    error = ProviderUnavailable(address=RESOLVER_ADDRESS, message="connection refused")
    registry.resolver.side_effect = error
    resolver_factory, _ = make_resolver_factory()

    with pytest.raises(ProviderUnavailable) as excinfo:
        resolve_content("meta.eth", registry, resolver_factory)

    assert excinfo.value is error
    resolver_factory.assert_not_called()


def test_resolve_content_resolver_error_propagates():
    registry = make_registry()
    resolver_factory, resolver = make_resolver_factory()
    error = TransportError(address=RESOLVER_ADDRESS, message="timeout")
    resolver.content.side_effect = error

    with pytest.raises(TransportError) as excinfo:
        resolve_content("meta.eth", registry, resolver_factory)

    assert excinfo.value is error
    assert resolver.content.call_count == 1


def test_resolve_address():
    resolver_factory, resolver = make_resolver_factory()

    assert resolve_address("meta.eth", make_registry(), resolver_factory) == OWNER_ADDRESS
    resolver.addr.assert_called_once_with(namehash("meta.eth"))


def test_resolve_address_zero_resolver():
    registry = make_registry(resolver_address=ENS_ADDRESS_ZERO)
    resolver_factory, _ = make_resolver_factory()

    assert resolve_address("meta.eth", registry, resolver_factory) == ENS_ADDRESS_ZERO
    resolver_factory.assert_not_called()


def test_resolution_client_registry_lookups():
    registry = make_registry()
    resolver_factory, _ = make_resolver_factory()
    client = ResolutionClient(registry, resolver_factory)

    assert client.resolve_content("meta.eth") == CONTENT_HASH
    assert client.resolver_address("meta.eth") == RESOLVER_ADDRESS
    assert client.owner("meta.eth") == OWNER_ADDRESS
    assert client.ttl("meta.eth") == 3600
    registry.owner.assert_called_once_with(namehash("meta.eth"))
    registry.ttl.assert_called_once_with(namehash("meta.eth"))


def test_resolution_client_from_config(monkeypatch):
    web3 = Mock()
    monkeypatch.setattr("ensconsole.client.connect", Mock(return_value=web3))
    config = Config(registry_address="0x241be96854fc2f0172daa660ee7a14410957c15d")

    client = ResolutionClient.from_config(config)
    resolver = client.resolver_factory(RESOLVER_ADDRESS)

    assert client.registry.address == "0x241be96854Fc2f0172dAA660EE7A14410957C15d"
    assert resolver.address == RESOLVER_ADDRESS
    assert web3.eth.contract.call_count == 2


def test_resolution_client_node_lookups():
    registry = make_registry()
    resolver_factory, resolver = make_resolver_factory()
    client = ResolutionClient(registry, resolver_factory)
    node = namehash("meta.eth")

    assert client.content_of_node(node) == CONTENT_HASH
    assert client.address_of_node(node) == OWNER_ADDRESS
    assert client.resolver_of_node(node) == RESOLVER_ADDRESS
    assert client.owner_of_node(node) == OWNER_ADDRESS
    assert client.ttl_of_node(node) == 3600
    resolver.content.assert_called_once_with(node)


def test_config_repr_and_replace():
    config = Config(rpc_url="http://localhost:8545").replace(request_timeout=2.5, rpc_url=None)

    assert config.rpc_url == "http://localhost:8545"
    assert config.request_timeout == 2.5
    assert "request_timeout=2.5" in repr(config)
