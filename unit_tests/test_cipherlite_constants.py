# Copyright (c) 2016, cipherlite developers
#
# See the LICENSE file for legal information regarding use of this file.

import unittest

from cipherlite.constants import TLSEnum, GroupName, CipherSuite, \
        ProtocolVersion, BulkCipherAlgorithm, KeyExchangeAlgorithm


class TestTLSEnumSubClassing(unittest.TestCase):

    class SubClass(TLSEnum):
        value = 1

    def test_toRepr(self):
        self.assertEqual(self.SubClass.toStr(1), 'value')

    class SubSubClass(SubClass):
        new_value = 2

    def test_toRepr_SubSubClass(self):
        self.assertEqual(self.SubSubClass.toStr(1), 'value')
        self.assertEqual(self.SubSubClass.toStr(2), 'new_value')

    def test_toRepr_with_unknown_id(self):
        self.assertIsNone(self.SubClass.toRepr(200))

    def test_toStr_with_unknown_id(self):
        self.assertEqual(self.SubClass.toStr(200), '200')


class TestGroupName(unittest.TestCase):

    def test_toRepr(self):
        self.assertEqual(GroupName.toRepr(23), 'secp256r1')

    def test_toRepr_with_x25519(self):
        self.assertEqual(GroupName.toRepr(29), 'x25519')

    def test_toRepr_with_list(self):
        self.assertIsNone(GroupName.toRepr(GroupName.allEC))


class TestProtocolVersion(unittest.TestCase):

    def test_toStr(self):
        self.assertEqual(ProtocolVersion.toStr((3, 3)), 'tls1_2')

    def test_ordering(self):
        self.assertLess(ProtocolVersion.ssl3, ProtocolVersion.tls1_2)


class TestAlgorithms(unittest.TestCase):

    def test_BulkCipherAlgorithm_toStr(self):
        self.assertEqual(BulkCipherAlgorithm.toStr(6), 'chacha20_poly1305')

    def test_KeyExchangeAlgorithm_toRepr(self):
        self.assertEqual(KeyExchangeAlgorithm.toRepr(3), 'ecdhe')


class TestCipherSuite(unittest.TestCase):

    def test_ietfNames(self):
        self.assertEqual(
            CipherSuite.ietfNames[
                CipherSuite.TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256],
            'TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256')

    def test_toStr(self):
        self.assertEqual(CipherSuite.toStr(0x002F),
                         'TLS_RSA_WITH_AES_128_CBC_SHA')

    def test_toStr_with_unknown_id(self):
        self.assertEqual(CipherSuite.toStr(0x1234), '0x1234')

    def test_every_constant_has_name(self):
        values = [val for key, val in vars(CipherSuite).items()
                  if key.startswith('TLS_')]

        self.assertEqual(len(values), len(CipherSuite.ietfNames))
        for val in values:
            self.assertIn(val, CipherSuite.ietfNames)


if __name__ == '__main__':
    unittest.main()
