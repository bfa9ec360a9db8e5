import codecs
import functools

from eth_utils import keccak

from ensconsole.constants import ENS_ROOT_NODE
from ensconsole.utils.typing import Node


def is_bytes(value):
    return isinstance(value, (bytes, bytearray))


def combine(f, g):
    return lambda x: f(g(x))


def compose(*functions):
    return functools.reduce(combine, functions, lambda x: x)


def _encode(value, encoding=None):
    if encoding is None:
        if is_bytes(value):
            return bytes(value)
        return codecs.encode(value, 'utf8')
    return codecs.encode(value, encoding)


def labelhash(label, encoding=None) -> bytes:
    return keccak(_encode(label, encoding))


def _sub_hash(value, label):
    return keccak(value + keccak(label))


def namehash(name, encoding=None) -> Node:
    """
    Implementation of the namehash algorithm from EIP137.

    Labels are hashed right to left: the rightmost label is folded into the
    root node first, so ``namehash("a.b") == keccak(namehash("b") + keccak("a"))``.
    """
    node = ENS_ROOT_NODE
    if name:
        labels = _encode(name, encoding).split(b'.')

        return Node(compose(*(
            functools.partial(_sub_hash, label=label)
            for label
            in labels
        ))(node))
    return Node(node)
