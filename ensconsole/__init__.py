from ensconsole.client import ResolutionClient, resolve_address, resolve_content  # noqa: F401
from ensconsole.exceptions import EnsError, TransportError  # noqa: F401
from ensconsole.utils.namehash import labelhash, namehash  # noqa: F401
