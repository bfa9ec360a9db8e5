from abc import ABC, abstractmethod

import structlog
from eth_utils import encode_hex, to_checksum_address
from web3 import Web3
from web3.exceptions import Web3Exception

from ensconsole.constants import ENS_REGISTRY_ABI, ENS_RESOLVER_ABI
from ensconsole.exception_handler import TransportErrorHandler
from ensconsole.exceptions import InvalidNode
from ensconsole.utils.typing import Address, ContentHash, Node

log = structlog.get_logger(__name__)

# Errors a provider raises when a call cannot complete. Older web3 releases report
# JSON-RPC error responses as plain ValueError.
PROVIDER_ERRORS = (Web3Exception, OSError, ValueError)


def check_node(node: bytes) -> Node:
    if not isinstance(node, (bytes, bytearray)) or len(node) != 32:
        raise InvalidNode(f"Expected a 32 bytes node, got {node!r}")
    return Node(bytes(node))


class Registry(ABC):
    """ Read-only view of the ENS registry contract. """

    @abstractmethod
    def resolver(self, node: Node) -> Address:
        """ Address of the resolver responsible for `node`, the zero address if none is set. """

    @abstractmethod
    def owner(self, node: Node) -> Address:
        pass

    @abstractmethod
    def ttl(self, node: Node) -> int:
        pass


class Resolver(ABC):
    """ Read-only view of a resolver contract. """

    @abstractmethod
    def content(self, node: Node) -> ContentHash:
        """ Content hash stored for `node`, 32 zero bytes when unset. """

    @abstractmethod
    def addr(self, node: Node) -> Address:
        pass


class ContractProxy:
    """
    Binds one contract ABI at one address and runs read-only calls against it.

    Every provider failure is raised as a TransportError for the bound address.
    """

    abi: tuple = ()

    def __init__(self, web3: Web3, address: str):
        self.address = to_checksum_address(address)
        self.proxy = web3.eth.contract(address=self.address, abi=self.abi)

    def _call(self, function_name: str, node: bytes):
        node = check_node(node)
        log.debug(
            "Contract call",
            contract=self.__class__.__name__,
            address=self.address,
            function=function_name,
            node=encode_hex(node),
        )
        try:
            return getattr(self.proxy.functions, function_name)(node).call()
        except PROVIDER_ERRORS as error:
            log.error(
                "Contract call failed",
                address=self.address,
                function=function_name,
                error=str(error),
            )
            raise TransportErrorHandler.map_exception(error, self.address) from error


class Web3Registry(ContractProxy, Registry):
    abi = ENS_REGISTRY_ABI

    def resolver(self, node: Node) -> Address:
        return Address(to_checksum_address(self._call("resolver", node)))

    def owner(self, node: Node) -> Address:
        return Address(to_checksum_address(self._call("owner", node)))

    def ttl(self, node: Node) -> int:
        return int(self._call("ttl", node))


class Web3Resolver(ContractProxy, Resolver):
    abi = ENS_RESOLVER_ABI

    def content(self, node: Node) -> ContentHash:
        return ContentHash(bytes(self._call("content", node)))

    def addr(self, node: Node) -> Address:
        return Address(to_checksum_address(self._call("addr", node)))
