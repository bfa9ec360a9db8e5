class EnsError(Exception):
    """ Base exception, used to catch all ensconsole related exceptions. """


class TransportError(EnsError):
    """
    A read-only call against the registry or a resolver contract could not complete.

    The TransportError has the following attributes, created from the provider error:
        - address: the contract address the call was made against
        - message: the provider error rendered as text
    """

    def __init__(self, address, message):
        super().__init__(f"Address: {address}, Message: {message}")
        self.address = address
        self.message = message


class ProviderUnavailable(TransportError):
    """
    The JSON-RPC endpoint could not be reached
    """


class BadCallOutput(TransportError):
    """
    The contract call returned data that could not be decoded, usually no contract at the address
    """


class NameNotExist(EnsError):
    """
    The name has no content hash in the local content store
    """


class InvalidNode(EnsError):
    """
    A value that was expected to be a 32 bytes node
    """
