from unittest import TestCase

from votingledger.client import LedgerClient
from votingledger.crypto import Wallet
from votingledger.exceptions import InsufficientBalance, Unauthorized, AlreadyVoted, NotFound

TOTAL_SUPPLY = 1000


class TestVotingContract(TestCase):
    def setUp(self):
        self.owner = Wallet()
        self.addr1 = Wallet()
        self.addr2 = Wallet()

        self.c = LedgerClient(signer=self.owner.verifying_key, total_supply=TOTAL_SUPPLY)
        self.voting = self.c.ledger

    def tearDown(self):
        self.c.flush()

    def test_total_supply_assigned_to_owner(self):
        owner_balance = self.voting.balance_of(identity=self.owner.verifying_key)

        self.assertEqual(owner_balance, self.voting.total_supply())

    def test_transfer_between_accounts(self):
        self.voting.transfer(to=self.addr1.verifying_key, amount=50)

        self.assertEqual(self.voting.balance_of(identity=self.addr1.verifying_key), 50)
        self.assertEqual(self.voting.balance_of(identity=self.owner.verifying_key), self.voting.total_supply() - 50)

    def test_fails_if_sender_lacks_tokens(self):
        owner_balance = self.voting.balance_of(identity=self.owner.verifying_key)

        with self.assertRaises(InsufficientBalance):
            self.c.connect(self.addr1.verifying_key).transfer(to=self.owner.verifying_key, amount=1)

        self.assertEqual(self.voting.balance_of(identity=self.owner.verifying_key), owner_balance)

    def test_balances_update_after_transfers(self):
        owner_balance = self.voting.balance_of(identity=self.owner.verifying_key)
        addr1_balance = self.voting.balance_of(identity=self.addr1.verifying_key)

        self.voting.transfer(to=self.addr1.verifying_key, amount=100)
        self.voting.transfer(to=self.addr2.verifying_key, amount=50)

        self.assertEqual(self.voting.balance_of(identity=self.owner.verifying_key), owner_balance - 150)
        self.assertEqual(self.voting.balance_of(identity=self.addr1.verifying_key), addr1_balance + 100)
        self.assertEqual(self.voting.balance_of(identity=self.addr2.verifying_key), 50)

    def test_owner_adds_candidates(self):
        self.voting.add_candidate(name='Alice')
        self.voting.add_candidate(name='Bob')

        self.assertListEqual(self.voting.get_candidate_ids(), [1, 2])

    def test_non_owner_cannot_add_candidates(self):
        with self.assertRaises(Unauthorized):
            self.c.connect(self.addr1.verifying_key).add_candidate(name='Charlie')

    def test_authorized_voter_can_vote(self):
        self.voting.add_candidate(name='Alice')

        signature = self.owner.authorize(self.addr1.verifying_key)
        self.c.connect(self.addr1.verifying_key).vote(candidate_id=1, proof=signature)

        self.assertEqual(self.voting.get_candidate(candidate_id=1).vote_count, 1)

    def test_unauthorized_voter_cannot_vote(self):
        self.voting.add_candidate(name='Alice')

        with self.assertRaises(Unauthorized):
            self.c.connect(self.addr1.verifying_key).vote(candidate_id=1, proof='0x')

    def test_vote_for_missing_candidate(self):
        signature = self.owner.authorize(self.addr1.verifying_key)

        with self.assertRaises(NotFound):
            self.c.connect(self.addr1.verifying_key).vote(candidate_id=1, proof=signature)

    def test_replay_attack_rejected(self):
        self.voting.add_candidate(name='Alice')

        signature = self.owner.authorize(self.addr1.verifying_key)
        voter = self.c.connect(self.addr1.verifying_key)
        voter.vote(candidate_id=1, proof=signature)

        with self.assertRaises(AlreadyVoted):
            voter.vote(candidate_id=1, proof=signature)

    def test_stolen_signature_rejected(self):
        self.voting.add_candidate(name='Alice')

        signature = self.owner.authorize(self.addr1.verifying_key)

        with self.assertRaises(Unauthorized):
            self.c.connect(self.addr2.verifying_key).vote(candidate_id=1, proof=signature)

    def test_winner(self):
        self.voting.add_candidate(name='Alice')
        self.voting.add_candidate(name='Bob')

        signature1 = self.owner.authorize(self.addr1.verifying_key)
        signature2 = self.owner.authorize(self.addr2.verifying_key)

        self.c.connect(self.addr1.verifying_key).vote(candidate_id=1, proof=signature1)
        self.c.connect(self.addr2.verifying_key).vote(candidate_id=1, proof=signature2)

        winner = self.voting.get_winner()

        self.assertEqual(winner.id, 1)
        self.assertEqual(winner.name, 'Alice')
        self.assertEqual(winner.vote_count, 2)
