import structlog
from web3 import Web3

from ensconsole.config import Config

log = structlog.get_logger(__name__)


def make_provider(config: Config):
    """ IPC for socket paths, HTTP for everything else. """
    if config.rpc_url.endswith(".ipc"):
        return Web3.IPCProvider(config.rpc_url)
    return Web3.HTTPProvider(config.rpc_url, request_kwargs={"timeout": config.request_timeout})


def connect(config: Config) -> Web3:
    provider = make_provider(config)
    log.debug("Connecting to node", rpc_url=config.rpc_url, provider=type(provider).__name__)
    return Web3(provider)
