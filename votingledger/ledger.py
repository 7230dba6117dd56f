from collections import namedtuple
from contextlib import contextmanager

from votingledger import config
from votingledger.crypto.signing import verify_authorization
from votingledger.db.driver import ContractDriver
from votingledger.db.orm import Variable, Hash
from votingledger.exceptions import (
    InsufficientBalance, InsufficientAllowance, InvalidAmount, InvalidName, InvalidIdentity,
    Unauthorized, NotFound, AlreadyVoted, NoCandidates
)
from votingledger.logger import get_logger

Candidate = namedtuple('Candidate', ['id', 'name', 'vote_count'])


def candidate_to_dict(candidate: Candidate):
    return {
        'id': candidate.id,
        'name': candidate.name,
        'voteCount': candidate.vote_count
    }


def export(signer=None):
    """
    Marks a method as callable through the Executor. signer names the keyword
    argument the calling identity is bound to, or None for reads.
    """
    def decorator(f):
        f.__export__ = True
        f.__signer__ = signer
        return f
    return decorator


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def identity_key(identity):
    """
    Storage slot for an identity. Identities are opaque strings and may hold the
    key delimiters, so they are stored as the hex of their UTF-8 bytes.
    """
    if not isinstance(identity, str) or identity == '':
        raise InvalidIdentity(identity=identity, reason='must be a non-empty string')

    raw = identity.encode('utf-8')
    if len(raw) > config.MAX_IDENTITY_SIZE:
        raise InvalidIdentity(identity=identity[:32], reason='longer than {} bytes'.format(config.MAX_IDENTITY_SIZE))

    return raw.hex()


def identity_from_key(key):
    return bytes.fromhex(key).decode('utf-8')


class LedgerCore:
    """
    Token balances plus a single election.

    The deploying identity receives the whole supply and is the only one that may
    register candidates. Voters need an authorization signed by the owner over the
    hash of their identity, and each identity is counted once no matter which
    signature it presents.

    Every mutation runs inside _atomic, so a rejected call leaves no pending writes behind.
    """
    def __init__(self, owner, total_supply=config.DEFAULT_TOTAL_SUPPLY, driver: ContractDriver=None,
                 contract=config.CONTRACT_NAME):
        self.driver = driver or ContractDriver()
        self.contract = contract
        self.log = get_logger('Ledger')

        self.balances = Hash(contract, config.BALANCES, driver=self.driver, default_value=0)
        self.allowances = Hash(contract, config.ALLOWANCES, driver=self.driver, default_value=0)
        self.candidates_hash = Hash(contract, config.CANDIDATES, driver=self.driver)
        self.voters = Hash(contract, config.VOTERS, driver=self.driver, default_value=False)

        self._count = Variable(contract, config.CANDIDATE_COUNT, driver=self.driver, t=int, default_value=0)
        self._owner = Variable(contract, config.OWNER, driver=self.driver, t=str)
        self._supply = Variable(contract, config.SUPPLY, driver=self.driver, t=int)

        self.last_writes = {}

        if self._owner.get() is None:
            self._seed(owner, total_supply)
        else:
            self.log.info('Attached to existing ledger owned by {}'.format(self.owner))

    def _seed(self, owner, total_supply):
        slot = identity_key(owner)

        if not _is_int(total_supply) or total_supply < 0:
            raise InvalidAmount(amount=total_supply)

        with self._atomic('genesis'):
            self._owner.set(owner)
            self._supply.set(total_supply)
            self.balances[slot] = total_supply

        self.log.info('Genesis: {} holds the total supply of {}'.format(owner, total_supply))

    @contextmanager
    def _atomic(self, action):
        try:
            yield
        except Exception as e:
            self.driver.rollback()
            self.last_writes = {}
            self.log.warning('Rolled back {}: {}'.format(action, e))
            raise
        else:
            self.last_writes = dict(self.driver.pending_writes)
            self.driver.commit()
            self.log.debug('Committed {} ({} writes)'.format(action, len(self.last_writes)))

    @property
    def owner(self):
        return self._owner.get()

    # Tokens

    @export()
    def balance_of(self, identity):
        return self.balances[identity_key(identity)]

    @export()
    def total_supply(self):
        return self._supply.get()

    @export()
    def holders(self):
        prefix = '{}{}'.format(self.balances._key, config.DELIMITER)
        return {identity_from_key(k[len(prefix):]): v for k, v in self.driver.items(prefix=prefix).items()}

    def _validate_amount(self, amount):
        if not _is_int(amount) or amount < 0:
            raise InvalidAmount(amount=amount)

    def _move(self, source, to, amount):
        source, to = identity_key(source), identity_key(to)
        balance = self.balances[source]

        if amount > balance:
            raise InsufficientBalance(identity=identity_from_key(source), balance=balance, amount=amount)

        self.balances[source] = balance - amount
        self.balances[to] += amount

    @export(signer='sender')
    def transfer(self, sender, to, amount):
        with self._atomic('transfer'):
            self._validate_amount(amount)
            self._move(sender, to, amount)

    @export(signer='sender')
    def approve(self, sender, spender, amount):
        with self._atomic('approve'):
            self._validate_amount(amount)
            self.allowances[identity_key(sender), identity_key(spender)] = amount

    @export()
    def allowance(self, owner, spender):
        return self.allowances[identity_key(owner), identity_key(spender)]

    @export(signer='sender')
    def transfer_from(self, sender, source, to, amount):
        with self._atomic('transfer_from'):
            self._validate_amount(amount)

            slot = identity_key(source), identity_key(sender)
            allowed = self.allowances[slot]
            if amount > allowed:
                raise InsufficientAllowance(owner=source, spender=sender, allowance=allowed, amount=amount)

            self.allowances[slot] = allowed - amount
            self._move(source, to, amount)

    # Candidates

    @export(signer='caller')
    def add_candidate(self, name, caller):
        with self._atomic('add_candidate'):
            if caller != self.owner:
                raise Unauthorized(identity=caller, action='add candidates')

            if not isinstance(name, str) or not name.strip():
                raise InvalidName(name=name)

            candidate_id = self._count.get() + 1

            self.candidates_hash[candidate_id] = {'name': name, 'votes': 0}
            self._count.set(candidate_id)

        self.log.info('Registered candidate {} ({})'.format(candidate_id, name))
        return candidate_id

    @export()
    def candidate_count(self):
        return self._count.get()

    @export()
    def get_candidate_ids(self):
        return list(range(1, self._count.get() + 1))

    def _lookup(self, candidate_id):
        if not _is_int(candidate_id) or not 0 < candidate_id <= self._count.get():
            raise NotFound(candidate_id=candidate_id)

        record = self.candidates_hash[candidate_id]
        return Candidate(id=candidate_id, name=record['name'], vote_count=record['votes'])

    @export()
    def get_candidate(self, candidate_id):
        return self._lookup(candidate_id)

    @export()
    def candidates(self):
        return [self._lookup(i) for i in self.get_candidate_ids()]

    # Voting

    @export()
    def has_voted(self, identity):
        return bool(self.voters[identity_key(identity)])

    @export(signer='voter')
    def vote(self, candidate_id, proof, voter):
        with self._atomic('vote'):
            candidate = self._lookup(candidate_id)
            slot = identity_key(voter)

            # Keyed on the identity, so any later attempt by this voter is a replay whatever proof it carries
            if self.voters[slot]:
                raise AlreadyVoted(identity=voter)

            if not verify_authorization(self.owner, voter, proof):
                raise Unauthorized(identity=voter, action='vote')

            self.voters[slot] = True
            self.candidates_hash[candidate.id] = {'name': candidate.name, 'votes': candidate.vote_count + 1}

        self.log.info('{} voted for candidate {}'.format(voter, candidate.id))

    @export()
    def standings(self):
        # Most votes first, ties go to whoever registered first
        return sorted(self.candidates(), key=lambda c: (-c.vote_count, c.id))

    @export()
    def get_winner(self):
        if self._count.get() == 0:
            raise NoCandidates()

        return self.standings()[0]
