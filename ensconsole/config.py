from eth_utils import to_checksum_address

from ensconsole.constants import DEV_REGISTRY_ADDRESS, DEV_RPC_URL


class Config:
    """
    Config holds the connection settings of the console: which node to talk to and where
    the ENS registry lives on that chain.

    request_timeout is handed to the HTTP provider; IPC connections use the provider default.
    """

    def __init__(
        self,
        rpc_url: str = DEV_RPC_URL,
        registry_address: str = DEV_REGISTRY_ADDRESS,
        request_timeout: float = 10.0,
    ):
        self.rpc_url = rpc_url
        self.registry_address = to_checksum_address(registry_address)
        self.request_timeout = request_timeout

    def replace(self, **changes) -> "Config":
        values = dict(
            rpc_url=self.rpc_url,
            registry_address=self.registry_address,
            request_timeout=self.request_timeout,
        )
        values.update({key: value for key, value in changes.items() if value is not None})
        return Config(**values)

    def __repr__(self):
        return (
            f"Config(rpc_url={self.rpc_url!r}, registry_address={self.registry_address!r}, "
            f"request_timeout={self.request_timeout!r})"
        )


# The development chain deployment is the default
DEFAULT_CONFIG = Config()
