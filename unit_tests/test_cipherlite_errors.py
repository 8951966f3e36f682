# Copyright (c) 2016, cipherlite developers
#
# See the LICENSE file for legal information regarding use of this file.

import unittest

from cipherlite.errors import BaseTLSException, TLSError, \
        TLSConfigurationError, CipherRuleParseError, EmptyCipherListError, \
        CurveListError, MalformedCurveListError, UnknownCurveError


class TestErrors(unittest.TestCase):

    def test_hierarchy(self):
        for cls in [CipherRuleParseError, EmptyCipherListError,
                    MalformedCurveListError, UnknownCurveError]:
            self.assertTrue(issubclass(cls, TLSConfigurationError))
            self.assertTrue(issubclass(cls, TLSError))
            self.assertTrue(issubclass(cls, BaseTLSException))
            self.assertTrue(issubclass(cls, ValueError))
        self.assertTrue(issubclass(UnknownCurveError, CurveListError))
        self.assertTrue(issubclass(MalformedCurveListError, CurveListError))

    def test_TLSError___str__(self):
        e = TLSError("x")

        self.assertEqual(str(e), repr(e))

    def test_TLSConfigurationError___str__(self):
        self.assertEqual(str(EmptyCipherListError("No cipher suites")),
                         "No cipher suites")

    def test_TLSConfigurationError___str___without_args(self):
        self.assertEqual(str(EmptyCipherListError()),
                         repr(EmptyCipherListError()))

    def test_CipherRuleParseError(self):
        e = CipherRuleParseError("Invalid command", "?BAR", 0)

        self.assertEqual(e.rule, "?BAR")
        self.assertEqual(e.offset, 0)
        self.assertEqual(str(e), "Invalid command at offset 0 in \"?BAR\"")

    def test_CipherRuleParseError_without_position(self):
        e = CipherRuleParseError("Invalid command")

        self.assertIsNone(e.rule)
        self.assertEqual(str(e), "Invalid command")

    def test_UnknownCurveError(self):
        e = UnknownCurveError("P-999")

        self.assertEqual(e.name, "P-999")
        self.assertEqual(str(e), "Unknown curve name: \"P-999\"")


if __name__ == '__main__':
    unittest.main()
