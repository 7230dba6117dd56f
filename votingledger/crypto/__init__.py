from votingledger.crypto.hashing import sha3, sha256, identity_hash
from votingledger.crypto.signing import verify, verify_authorization, authorization_message
from votingledger.crypto.wallet import Wallet
