import nacl.exceptions
import nacl.signing

from votingledger import config
from votingledger.crypto.hashing import identity_hash


def verify(v: bytes, msg: bytes, sig: bytes):
    try:
        v = nacl.signing.VerifyKey(v)
        v.verify(msg, sig)
    except (nacl.exceptions.BadSignatureError, nacl.exceptions.ValueError, nacl.exceptions.TypeError):
        return False
    return True


def _from_hex(value, size):
    if not isinstance(value, str):
        return None

    if value[:len(config.HEX_PREFIX)].lower() == config.HEX_PREFIX:
        value = value[len(config.HEX_PREFIX):]

    try:
        raw = bytes.fromhex(value)
    except ValueError:
        return None

    if len(raw) != size:
        return None

    return raw


def authorization_message(identity: str) -> bytes:
    return identity_hash(identity)


def verify_authorization(owner: str, identity: str, proof) -> bool:
    """
    Checks that proof is an ed25519 signature by owner over the hash of identity.

    Both owner and proof are hex strings, optionally prefixed with 0x. Anything
    malformed is simply not a valid authorization.
    """
    vk = _from_hex(owner, config.VERIFY_KEY_SIZE)
    sig = _from_hex(proof, config.SIGNATURE_SIZE)

    if vk is None or sig is None or not isinstance(identity, str):
        return False

    return verify(vk, authorization_message(identity), sig)