from requests.exceptions import ConnectionError as RequestsConnectionError
from web3.exceptions import BadFunctionCallOutput

from ensconsole.exceptions import BadCallOutput, ProviderUnavailable, TransportError


class TransportErrorHandler:
    """
        A class to map provider exceptions to ensconsole transport exceptions.
    """
    EXCEPTION_MAPPING = {
        RequestsConnectionError: ProviderUnavailable,
        ConnectionError: ProviderUnavailable,
        FileNotFoundError: ProviderUnavailable,
        BadFunctionCallOutput: BadCallOutput,
    }

    @classmethod
    def map_exception(cls, error: Exception, address: str) -> TransportError:
        """
            This function maps a provider error into a TransportError for the contract at `address`
        """
        for error_type in type(error).__mro__:
            if error_type in cls.EXCEPTION_MAPPING:
                exception = cls.EXCEPTION_MAPPING[error_type]
                break
        else:
            exception = TransportError
        return exception(address=address, message=str(error))
