import inspect
import traceback

from votingledger import config
from votingledger.ledger import LedgerCore
from votingledger.logger import get_logger

log = get_logger('Executor')


def exported_functions(ledger: LedgerCore):
    """
    Returns (name, kwargs, signer) for every exported function, where kwargs
    excludes the argument the signer is bound to.
    """
    funcs = []
    for name, member in inspect.getmembers(ledger, predicate=inspect.ismethod):
        if not getattr(member, '__export__', False):
            continue

        signer = member.__signer__
        kwargs = [p for p in inspect.signature(member).parameters if p != signer]

        funcs.append((name, kwargs, signer))

    return funcs


class Executor:
    def __init__(self, ledger: LedgerCore):
        self.ledger = ledger

    def execute(self, sender, function_name, kwargs) -> dict:
        status_code = 0
        self.ledger.last_writes = {}

        try:
            if function_name.startswith(config.PRIVATE_METHOD_PREFIX):
                raise AttributeError('Private method not callable.')

            func = getattr(self.ledger, function_name, None)
            if func is None or not getattr(func, '__export__', False):
                raise AttributeError('{} is not an exported function.'.format(function_name))

            kwargs = dict(kwargs)

            # The signer is always the authenticated sender, never something passed in by the caller
            if func.__signer__ is not None:
                kwargs[func.__signer__] = sender

            result = func(**kwargs)
        except Exception as e:
            result = e
            log.error(str(e))
            log.error(traceback.format_exc())
            status_code = 1

        return {
            'status_code': status_code,
            'result': result,
            'writes': self.ledger.last_writes,
        }
