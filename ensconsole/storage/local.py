import os

import structlog
from eth_utils import decode_hex, encode_hex

from ensconsole.exceptions import InvalidNode, NameNotExist
from ensconsole.utils.typing import ContentHash

log = structlog.get_logger(__name__)


class LocalContentStore:
    """
    Name to content hash mapping kept on the local filesystem, one file per name
    holding the hex encoded hash. Useful when no node is available.
    """

    def __init__(self, directory: str):
        self.directory = directory

    def _path(self, name: str) -> str:
        if not name or os.sep in name or name in (".", ".."):
            raise NameNotExist(f"Invalid name for the local store: {name!r}")
        return os.path.join(self.directory, name)

    def resolve(self, name: str) -> ContentHash:
        path = self._path(name)
        try:
            with open(path) as f:
                value = f.read().strip()
        except FileNotFoundError:
            raise NameNotExist(f"ENS name does not exist: {name}")
        try:
            content_hash = decode_hex(value)
        except ValueError as error:
            raise InvalidNode(f"Stored value for {name} is not hex encoded: {value!r}") from error
        if len(content_hash) > 32:
            raise InvalidNode(f"Stored value for {name} is longer than 32 bytes")
        # short values are left padded, like a uint256 word
        return ContentHash(content_hash.rjust(32, b"\x00"))

    def set_content_hash(self, name: str, content_hash: bytes) -> None:
        if len(content_hash) != 32:
            raise InvalidNode(f"Expected a 32 bytes hash, got {len(content_hash)} bytes")
        path = self._path(name)
        os.makedirs(self.directory, exist_ok=True)
        with open(path, "w") as f:
            f.write(encode_hex(content_hash))
        log.debug("Stored content hash", name=name, path=path)
