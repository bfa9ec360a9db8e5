from eth_utils import is_same_address

from ensconsole.constants import ENS_ADDRESS_ZERO


def is_ens_name(value) -> bool:
    if isinstance(value, (bytes, bytearray)):
        return b'.' in value
    return '.' in value


def is_address_zero(address) -> bool:
    return is_same_address(address, ENS_ADDRESS_ZERO)
