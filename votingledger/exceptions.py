class LedgerError(Exception):
    """
    The base exception for the ledger. The fmt directive
    will be overloaded by the inheriting classes

    :ivar msg: The message associated with the error
    """
    fmt = 'An unspecified error occurred'

    def __init__(self, **kwargs):
        msg = self.fmt.format(**kwargs)
        Exception.__init__(self, msg)
        self.kwargs = kwargs


class InsufficientBalance(LedgerError):
    """
    The sender tried to move more tokens than it holds

    :ivar identity: The account being debited
    :ivar balance: Its current balance
    :ivar amount: The amount requested
    """
    fmt = "Account '{identity}' holds {balance}, cannot send {amount}"


class InsufficientAllowance(LedgerError):
    fmt = "Spender '{spender}' may move {allowance} from '{owner}', cannot move {amount}"


class InvalidAmount(LedgerError):
    fmt = "Amount must be a non-negative integer, got {amount!r}"


class InvalidName(LedgerError):
    fmt = "Candidate name must be a non-empty string, got {name!r}"


class InvalidKey(LedgerError):
    """
    A storage key contained a reserved character or was too long
    """
    fmt = "Invalid storage key {key!r}: {reason}"


class Unauthorized(LedgerError):
    """
    The caller is not allowed to perform the action

    :ivar identity: The identity that was rejected
    :ivar action: What it attempted
    """
    fmt = "'{identity}' is not authorized to {action}"


class NotFound(LedgerError):
    fmt = "Candidate {candidate_id!r} does not exist"


class AlreadyVoted(LedgerError):
    fmt = "'{identity}' has already voted"


class NoCandidates(LedgerError):
    fmt = "No candidates have been registered"


class InvalidIdentity(LedgerError):
    fmt = "Invalid identity {identity!r}: {reason}"
