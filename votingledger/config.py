import os

CONTRACT_NAME = 'ledger'

DELIMITER = ':'
INDEX_SEPARATOR = '.'

MAX_HASH_DIMENSIONS = 16
MAX_KEY_SIZE = 1024

# Identities are stored hex encoded inside hash keys, so they get half the key budget
MAX_IDENTITY_SIZE = 256

# Genesis
DEFAULT_TOTAL_SUPPLY = 1_000_000
TOTAL_SUPPLY = int(os.getenv('LEDGER_TOTAL_SUPPLY', DEFAULT_TOTAL_SUPPLY))

# ed25519 sizes in bytes
SIGNATURE_SIZE = 64
VERIFY_KEY_SIZE = 32
HEX_PREFIX = '0x'

# Storage names inside the ledger contract
BALANCES = 'balances'
ALLOWANCES = 'allowances'
CANDIDATES = 'candidates'
CANDIDATE_COUNT = 'candidate_count'
VOTERS = 'voters'
OWNER = '__owner__'
SUPPLY = '__supply__'

PRIVATE_METHOD_PREFIX = '_'

WEB_SERVER_HOST = os.getenv('LEDGER_HOST', '0.0.0.0')
WEB_SERVER_PORT = int(os.getenv('LEDGER_PORT', 8080))
NUM_WORKERS = 1

# Hex seed of the owner wallet used by the webserver. A fresh key is generated when unset.
OWNER_SEED = os.getenv('LEDGER_OWNER_SEED')
