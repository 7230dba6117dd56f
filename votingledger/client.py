from functools import partial

from votingledger import config
from votingledger.db.driver import ContractDriver
from votingledger.execution.executor import Executor, exported_functions
from votingledger.ledger import LedgerCore


class AbstractLedger:
    def __init__(self, signer, executor: Executor, funcs):
        self.signer = signer
        self.executor = executor
        self.functions = funcs

        # set up virtual functions
        for func, kwargs, _ in funcs:
            # each function is a partial that takes its arguments as keywords
            setattr(self, func, partial(self._abstract_function_call,
                                        signer=self.signer,
                                        executor=self.executor,
                                        func=func))

    def quick_read(self, variable, key=None, args=None):
        a = []

        if key is not None:
            a.append(key)

        if args is not None and isinstance(args, list):
            a.extend(args)

        driver = self.executor.ledger.driver
        k = driver.make_key(contract=self.executor.ledger.contract, variable=variable, args=a)
        return driver.get(k)

    def _abstract_function_call(self, signer, executor, func, **kwargs):
        output = executor.execute(sender=signer,
                                  function_name=func,
                                  kwargs=kwargs)

        if output['status_code'] == 1:
            raise output['result']

        return output['result']

    def __repr__(self):
        return '<AbstractLedger signer={}>'.format(self.signer)


class LedgerClient:
    def __init__(self, signer, total_supply=config.DEFAULT_TOTAL_SUPPLY, driver=None):
        self.signer = signer
        self.total_supply = total_supply
        self.raw_driver = driver or ContractDriver()

        self._genesis()

    def _genesis(self):
        self.core = LedgerCore(owner=self.signer, total_supply=self.total_supply, driver=self.raw_driver)
        self.executor = Executor(self.core)
        self.functions = exported_functions(self.core)
        self.ledger = self.connect(self.signer)

    def flush(self):
        # flushes db and runs genesis again
        self.raw_driver.flush()
        self._genesis()

    # Returns an abstract ledger which has partial methods mapped to each exported function, called as signer.
    def connect(self, signer):
        return AbstractLedger(signer=signer, executor=self.executor, funcs=self.functions)

    def get_var(self, variable, arguments=[]):
        return self.raw_driver.get_var(self.core.contract, variable, arguments)
