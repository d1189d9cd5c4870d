"""
Unit tests for ExpenseLedger.model.transaction

Run:
    python -m unittest tests.test_transaction
"""
import dataclasses
import datetime

from ExpenseLedger.model.transaction import Transaction
from ExpenseLedger.status import status
from tests.base import BaseTestCase

WHEN = datetime.datetime(2025, 3, 14, 9, 30)


class TransactionTests(BaseTestCase):

    def test_fields(self):
        tx = Transaction(amount=-12.5, category='food', timestamp=WHEN, description='lunch')
        self.assertEqual(tx.amount, -12.5)
        self.assertEqual(tx.category, 'food')
        self.assertEqual(tx.timestamp, WHEN)
        self.assertEqual(tx.description, 'lunch')

    def test_default_timestamp_is_now(self):
        before = datetime.datetime.now()
        tx = Transaction(amount=5, category='salary')
        after = datetime.datetime.now()
        self.assertTrue(before <= tx.timestamp <= after)

    def test_category_is_stripped(self):
        tx = Transaction(amount=1, category='  travel ', timestamp=WHEN)
        self.assertEqual(tx.category, 'travel')

    def test_is_expense(self):
        self.assertTrue(Transaction(amount=-1, category='food', timestamp=WHEN).is_expense)
        self.assertFalse(Transaction(amount=1, category='food', timestamp=WHEN).is_expense)

    def test_is_frozen(self):
        tx = Transaction(amount=-1, category='food', timestamp=WHEN)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            tx.amount = 3  # type: ignore[misc]

    def test_equality_is_by_value(self):
        a = Transaction(amount=-1, category='food', timestamp=WHEN)
        b = Transaction(amount=-1, category='food', timestamp=WHEN)
        c = Transaction(amount=-2, category='food', timestamp=WHEN)
        self.assertEqual(a, b)
        self.assertNotEqual(a, c)
        self.assertEqual(hash(a), hash(b))

    def test_invalid_values_raise(self):
        cases = {
            'zero amount': dict(amount=0, category='food'),
            'nan amount': dict(amount=float('nan'), category='food'),
            'inf amount': dict(amount=float('inf'), category='food'),
            'string amount': dict(amount='10', category='food'),
            'bool amount': dict(amount=True, category='food'),
            'empty category': dict(amount=1, category='   '),
            'non-string category': dict(amount=1, category=None),
            'bad timestamp': dict(amount=1, category='food', timestamp='2025-01-01'),
            'bad description': dict(amount=1, category='food', description=None),
        }
        for name, kwargs in cases.items():
            with self.subTest(name):
                with self.assertRaises(status.TransactionInvalidException):
                    Transaction(**kwargs)
