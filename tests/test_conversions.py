import unittest

from monadpy import Try, Left, Right, success, failure, left, right, try_from_either, InvalidArgumentError


class TestConversions(unittest.TestCase):
    def test_try_to_either(self):
        err = OSError("io")
        self.assertEqual(Try.failure(err).to_either(), Left(err))
        self.assertEqual(Try.success(5).to_either(), Right(5))

    def test_either_to_try(self):
        err = ValueError("v")
        self.assertEqual(try_from_either(right(5)), success(5))
        self.assertEqual(try_from_either(left(err)), failure(err))

    def test_roundtrip(self):
        err = OSError("io")
        for t in (success(1), success(None), failure(err)):
            self.assertEqual(try_from_either(t.to_either()), t)

    def test_from_either_requires_either(self):
        with self.assertRaises(InvalidArgumentError):
            try_from_either(None)
        with self.assertRaises(InvalidArgumentError):
            try_from_either(success(1))

    def test_optional_views_agree(self):
        self.assertEqual(success(3).to_optional(), success(3).to_either().to_optional())
        self.assertEqual(failure(OSError()).to_optional(), failure(OSError()).to_either().to_optional())
