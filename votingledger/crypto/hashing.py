import hashlib

'''
Bytes can't be stored in JSON so we use hex-strings converted into bytes and back.
'''


def sha3(hex_str: str):
    byte_str = bytes.fromhex(hex_str)

    hasher = hashlib.sha3_256()
    hasher.update(byte_str)

    hashed_bytes = hasher.digest()

    return hashed_bytes.hex()


def sha256(hex_str: str):
    byte_str = bytes.fromhex(hex_str)

    hasher = hashlib.sha256()
    hasher.update(byte_str)

    hashed_bytes = hasher.digest()

    return hashed_bytes.hex()


def identity_hash(identity: str) -> bytes:
    # Identities are opaque strings, so they are hashed as UTF-8 rather than as hex
    return hashlib.sha3_256(identity.encode('utf-8')).digest()
