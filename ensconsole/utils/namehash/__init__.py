from ensconsole.utils.namehash.namehash import labelhash, namehash  # noqa: F401
