from unittest import TestCase

from votingledger.db.driver import ContractDriver
from votingledger.db.orm import Datum, Variable, Hash
from votingledger.exceptions import InvalidKey
from votingledger import config

driver = ContractDriver()


class TestDatum(TestCase):
    def setUp(self):
        driver.flush()

    def test_init(self):
        d = Datum('stustu', 'test', driver)
        self.assertEqual(d._key, driver.make_key('stustu', 'test'))


class TestVariable(TestCase):
    def setUp(self):
        driver.flush()

    def test_set(self):
        v = Variable('stustu', 'balance', driver=driver)
        v.set(1000)

        self.assertEqual(driver.get('stustu.balance'), 1000)

    def test_get(self):
        driver.set('stustu.balance', 1234)

        v = Variable('stustu', 'balance', driver=driver)

        self.assertEqual(v.get(), 1234)

    def test_default_value(self):
        v = Variable('stustu', 'count', driver=driver, default_value=0)

        self.assertEqual(v.get(), 0)

    def test_type_enforced(self):
        v = Variable('stustu', 'count', driver=driver, t=int)

        with self.assertRaises(TypeError):
            v.set('a')

    def test_non_type_t_ignored(self):
        v = Variable('stustu', 'count', driver=driver, t='int')
        v.set('a')

        self.assertEqual(v.get(), 'a')


class TestHash(TestCase):
    def setUp(self):
        driver.flush()

    def test_set_get(self):
        h = Hash('stustu', 'balances', driver=driver)
        h['stu'] = 1234

        self.assertEqual(driver.get('stustu.balances:stu'), 1234)
        self.assertEqual(h['stu'], 1234)

    def test_default_value(self):
        h = Hash('stustu', 'balances', driver=driver, default_value=0)

        self.assertEqual(h['nobody'], 0)

    def test_augmented_assignment(self):
        h = Hash('stustu', 'balances', driver=driver, default_value=0)
        h['stu'] += 5
        h['stu'] += 5

        self.assertEqual(h['stu'], 10)

    def test_multi_dimensional(self):
        h = Hash('stustu', 'allowances', driver=driver, default_value=0)
        h['stu', 'raghu'] = 5

        self.assertEqual(driver.get('stustu.allowances:stu:raghu'), 5)
        self.assertEqual(h['stu', 'raghu'], 5)
        self.assertEqual(h['raghu', 'stu'], 0)

    def test_delimiter_in_key_rejected(self):
        h = Hash('stustu', 'balances', driver=driver)

        with self.assertRaises(InvalidKey):
            h['stu:raghu'] = 1

        with self.assertRaises(InvalidKey):
            h['stu.raghu']

    def test_too_many_dimensions_rejected(self):
        h = Hash('stustu', 'balances', driver=driver)

        with self.assertRaises(InvalidKey):
            h[tuple(range(config.MAX_HASH_DIMENSIONS + 1))] = 1

    def test_key_too_long_rejected(self):
        h = Hash('stustu', 'balances', driver=driver)

        with self.assertRaises(InvalidKey):
            h['a' * (config.MAX_KEY_SIZE + 1)] = 1

    def test_all(self):
        h = Hash('stustu', 'balances', driver=driver)
        h['a'] = 1
        h['b'] = 2

        self.assertListEqual(h.all(), [1, 2])

    def test_all_with_prefix(self):
        h = Hash('stustu', 'allowances', driver=driver)
        h['stu', 'a'] = 1
        h['stu', 'b'] = 2
        h['raghu', 'a'] = 3

        self.assertListEqual(h.all('stu'), [1, 2])

    def test_clear(self):
        h = Hash('stustu', 'balances', driver=driver)
        h['a'] = 1
        h['b'] = 2

        h.clear()

        self.assertListEqual(h.all(), [])

    def test_contains(self):
        h = Hash('stustu', 'voters', driver=driver, default_value=False)
        h['stu'] = True

        self.assertIn('stu', h)
        self.assertNotIn('raghu', h)
