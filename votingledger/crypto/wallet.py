import nacl.signing

from votingledger.crypto.signing import authorization_message


class Wallet:
    """
    An ed25519 key pair. The hex of the verify key is the identity used on the ledger.

    The ledger only ever verifies. Wallets live on the key management side,
    which is where the owner issues voting authorizations from.
    """
    def __init__(self, seed=None):
        if isinstance(seed, str):
            seed = bytes.fromhex(seed)

        if seed is None:
            self.sk = nacl.signing.SigningKey.generate()
        else:
            self.sk = nacl.signing.SigningKey(seed=seed)

        self.vk = self.sk.verify_key

    @property
    def signing_key(self):
        return self.sk.encode().hex()

    @property
    def verifying_key(self):
        return self.vk.encode().hex()

    def sign(self, msg: bytes):
        # pynacl includes the message in the signature, which we are not interested in
        return self.sk.sign(msg)[:64].hex()

    def authorize(self, identity: str):
        return self.sign(authorization_message(identity))

    def __repr__(self):
        return '<Wallet {}>'.format(self.verifying_key)
