from votingledger.db.driver import ContractDriver
from votingledger.exceptions import InvalidKey
from votingledger import config


class Datum:
    def __init__(self, contract, name, driver: ContractDriver):
        self._driver = driver
        self._key = self._driver.make_key(contract, name)


class Variable(Datum):
    def __init__(self, contract, name, driver: ContractDriver, t=None, default_value=None):
        self._type = t if isinstance(t, type) else None
        self._default_value = default_value

        super().__init__(contract, name, driver=driver)

    def set(self, value):
        if self._type is not None and not isinstance(value, self._type):
            raise TypeError('Wrong type passed to variable! Expected {}, got {}.'.format(self._type, type(value)))

        self._driver.set(self._key, value)

    def get(self):
        value = self._driver.get(self._key)
        if value is None:
            return self._default_value
        return value


class Hash(Datum):
    def __init__(self, contract, name, driver: ContractDriver, default_value=None):
        super().__init__(contract, name, driver=driver)
        self._delimiter = config.DELIMITER
        self._default_value = default_value

    def _set(self, key, value):
        self._driver.set('{}{}{}'.format(self._key, self._delimiter, key), value)

    def _get(self, item):
        value = self._driver.get('{}{}{}'.format(self._key, self._delimiter, item))

        # Add Python defaultdict behavior
        if value is None:
            value = self._default_value

        return value

    def _validate_part(self, key):
        key = str(key)

        if config.DELIMITER in key:
            raise InvalidKey(key=key, reason='illegal delimiter')
        if config.INDEX_SEPARATOR in key:
            raise InvalidKey(key=key, reason='illegal separator')

        return key

    def _validate_key(self, key):
        if isinstance(key, tuple):
            if len(key) > config.MAX_HASH_DIMENSIONS:
                raise InvalidKey(key=key, reason='too many dimensions, max is {}'.format(config.MAX_HASH_DIMENSIONS))

            key = self._delimiter.join(self._validate_part(k) for k in key)
        else:
            key = self._validate_part(key)

        if len(key) > config.MAX_KEY_SIZE:
            raise InvalidKey(key=key[:32] + '...', reason='too long, max is {}'.format(config.MAX_KEY_SIZE))
        return key

    def _prefix_for_args(self, args):
        multi = self._validate_key(args)
        prefix = '{}{}'.format(self._key, self._delimiter)
        if multi != '':
            prefix += '{}{}'.format(multi, self._delimiter)

        return prefix

    def all(self, *args):
        prefix = self._prefix_for_args(args)
        return self._driver.values(prefix=prefix)

    def _items(self, *args):
        prefix = self._prefix_for_args(args)
        return self._driver.items(prefix=prefix)

    def clear(self, *args):
        kvs = self._items(*args)
        for k in kvs.keys():
            self._driver.delete(k)

    def __setitem__(self, key, value):
        # handle multiple hashes differently
        key = self._validate_key(key)
        self._set(key, value)

    def __getitem__(self, key):
        key = self._validate_key(key)
        return self._get(key)

    def __contains__(self, key):
        key = self._validate_key(key)
        return self._driver.get('{}{}{}'.format(self._key, self._delimiter, key)) is not None
