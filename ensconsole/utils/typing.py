from typing import NewType

# 32 bytes, the namehash of a domain name
Node = NewType("Node", bytes)

# 32 bytes stored by a resolver for a node
ContentHash = NewType("ContentHash", bytes)

# checksum hex string, as returned by web3 for `address` outputs
Address = NewType("Address", str)
