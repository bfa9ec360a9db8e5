from typing import Callable

import structlog
from eth_utils import encode_hex

from ensconsole.config import Config
from ensconsole.constants import ENS_ADDRESS_ZERO, ENS_HASH_ZERO
from ensconsole.network.proxies import Registry, Resolver, Web3Registry, Web3Resolver
from ensconsole.network.rpc import connect
from ensconsole.utils import is_address_zero
from ensconsole.utils.namehash import namehash
from ensconsole.utils.typing import Address, ContentHash, Node

log = structlog.get_logger(__name__)

ResolverFactory = Callable[[Address], Resolver]


def content_of_node(node: Node, registry: Registry, resolver_factory: ResolverFactory) -> ContentHash:
    """
    Content hash stored for `node` by its resolver.

    The registry is asked for the resolver of the node. When no resolver is
    assigned (zero address) the zero hash is returned and no resolver is created.
    Otherwise the resolver's content record is returned as-is. Provider errors are
    not handled here.
    """
    resolver_address = registry.resolver(node)
    log.debug("Resolving content", node=encode_hex(node), resolver=resolver_address)
    if is_address_zero(resolver_address):
        return ContentHash(ENS_HASH_ZERO)
    return resolver_factory(resolver_address).content(node)


def address_of_node(node: Node, registry: Registry, resolver_factory: ResolverFactory) -> Address:
    resolver_address = registry.resolver(node)
    log.debug("Resolving address", node=encode_hex(node), resolver=resolver_address)
    if is_address_zero(resolver_address):
        return Address(ENS_ADDRESS_ZERO)
    return resolver_factory(resolver_address).addr(node)


def resolve_content(name, registry: Registry, resolver_factory: ResolverFactory) -> ContentHash:
    """ Resolves `name` to the content hash stored by its resolver. """
    return content_of_node(namehash(name), registry, resolver_factory)


def resolve_address(name, registry: Registry, resolver_factory: ResolverFactory) -> Address:
    return address_of_node(namehash(name), registry, resolver_factory)


class ResolutionClient:
    """
    Lookups against one registry, by name or by an already computed node.
    Holds no state besides its collaborators.
    """

    def __init__(self, registry: Registry, resolver_factory: ResolverFactory):
        self.registry = registry
        self.resolver_factory = resolver_factory

    @classmethod
    def from_config(cls, config: Config) -> "ResolutionClient":
        web3 = connect(config)
        registry = Web3Registry(web3, config.registry_address)
        return cls(registry, lambda address: Web3Resolver(web3, address))

    def resolve_content(self, name) -> ContentHash:
        return self.content_of_node(namehash(name))

    def resolve_address(self, name) -> Address:
        return self.address_of_node(namehash(name))

    def resolver_address(self, name) -> Address:
        return self.resolver_of_node(namehash(name))

    def owner(self, name) -> Address:
        return self.owner_of_node(namehash(name))

    def ttl(self, name) -> int:
        return self.ttl_of_node(namehash(name))

    def content_of_node(self, node: Node) -> ContentHash:
        return content_of_node(node, self.registry, self.resolver_factory)

    def address_of_node(self, node: Node) -> Address:
        return address_of_node(node, self.registry, self.resolver_factory)

    def resolver_of_node(self, node: Node) -> Address:
        return self.registry.resolver(node)

    def owner_of_node(self, node: Node) -> Address:
        return self.registry.owner(node)

    def ttl_of_node(self, node: Node) -> int:
        return self.registry.ttl(node)
