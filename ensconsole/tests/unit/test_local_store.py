import pytest
from eth_utils import decode_hex

from ensconsole.exceptions import InvalidNode, NameNotExist
from ensconsole.storage.local import LocalContentStore

CONTENT_HASH = decode_hex("0x3985b475b7e3af72cdbcd2e41b22951c168b0e2ff41bcc9548ee98d14ec86784")


def test_set_and_resolve(tmp_path):
    store = LocalContentStore(str(tmp_path / "ens"))
    store.set_content_hash("meta.eth", CONTENT_HASH)

    assert store.resolve("meta.eth") == CONTENT_HASH
    assert (tmp_path / "ens" / "meta.eth").read_text() == "0x" + CONTENT_HASH.hex()


def test_unknown_name(tmp_path):
    with pytest.raises(NameNotExist):
        LocalContentStore(str(tmp_path)).resolve("missing.eth")


def test_name_cannot_leave_directory(tmp_path):
    with pytest.raises(NameNotExist):
        LocalContentStore(str(tmp_path)).resolve("../meta.eth")


def test_rejects_short_hash(tmp_path):
    with pytest.raises(InvalidNode):
        LocalContentStore(str(tmp_path)).set_content_hash("meta.eth", b"\x01" * 20)


def test_corrupt_entry_is_invalid_node(tmp_path):
    (tmp_path / "meta.eth").write_text("not-hex")

    with pytest.raises(InvalidNode) as excinfo:
        LocalContentStore(str(tmp_path)).resolve("meta.eth")

    assert isinstance(excinfo.value.__cause__, ValueError)


def test_short_entry_is_left_padded(tmp_path):
    (tmp_path / "meta.eth").write_text("0x01\n")

    assert LocalContentStore(str(tmp_path)).resolve("meta.eth") == b"\x00" * 31 + b"\x01"


def test_long_entry_is_rejected(tmp_path):
    (tmp_path / "meta.eth").write_text("0x" + "ab" * 33)

    with pytest.raises(InvalidNode):
        LocalContentStore(str(tmp_path)).resolve("meta.eth")
