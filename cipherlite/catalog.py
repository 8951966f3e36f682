# Authors:
#   cipherlite developers
#
# See the LICENSE file for legal information regarding use of this file.

"""
Table of cipher suites known to the cipher rule compiler.

The table is ordered by the built-in preference of the library: forward
secret AEAD suites first (ChaCha20-Poly1305 ahead of AES-GCM), then CBC
suites, then suites without forward secrecy, with NULL encryption last.
This order is the baseline for every rule that does not reorder suites.
"""

from collections import namedtuple

from .constants import CipherSuite, ProtocolVersion, \
        KeyExchangeAlgorithm as Kx, AuthenticationAlgorithm as Au, \
        BulkCipherAlgorithm as Enc, MacAlgorithm as Mac

#: effective symmetric key strength, used by @STRENGTH sorting
STRENGTH_BITS = {Enc.null: 0,
                 Enc.tripleDES: 112,
                 Enc.aes128: 128,
                 Enc.aes128gcm: 128,
                 Enc.aes256: 256,
                 Enc.aes256gcm: 256,
                 Enc.chacha20_poly1305: 256,
                 Enc.chacha20_poly1305_old: 256}

# MACs that need the TLS 1.2 PRF or AEAD record protection
_TLS12_MACS = (Mac.sha256, Mac.sha384, Mac.aead)


class CipherSuiteInfo(namedtuple('CipherSuiteInfo',
                                 ['id', 'name', 'keyExchange',
                                  'authentication', 'bulkCipher', 'mac',
                                  'minVersion', 'maxVersion',
                                  'strengthBits'])):
    """
    Description of a single cipher suite.

    :vartype id: int
    :ivar id: 16 bit value used on the wire

    :vartype name: str
    :ivar name: OpenSSL style name, as used in cipher rule strings

    :vartype minVersion: tuple
    :ivar minVersion: lowest protocol version the suite may be negotiated in

    :vartype maxVersion: tuple
    :ivar maxVersion: highest protocol version the suite may be negotiated
        in, None if not limited

    :vartype strengthBits: int
    :ivar strengthBits: strength of the symmetric cipher, in bits
    """

    __slots__ = ()

    @property
    def ietfName(self):
        """Name of the suite in the IANA registry"""
        return CipherSuite.toStr(self.id)

    def isNull(self):
        """Check if the suite provides no confidentiality"""
        return self.bulkCipher == Enc.null

    def isAnonymous(self):
        """Check if the suite does not authenticate the server"""
        return self.authentication == Au.anonymous

    def isForwardSecret(self):
        """Check if the key exchange uses ephemeral keys"""
        return self.keyExchange in (Kx.dhe, Kx.ecdhe)

    def isAEAD(self):
        """Check if the suite uses an AEAD record protection"""
        return self.mac == Mac.aead

    def usableWith(self, version):
        """Check if the suite can be negotiated in given protocol version"""
        if version < self.minVersion:
            return False
        return self.maxVersion is None or version <= self.maxVersion

    def __str__(self):
        return self.name


def _suite(cipherId, name, keyExchange, authentication, bulkCipher, mac,
           maxVersion=None):
    if mac in _TLS12_MACS:
        minVersion = ProtocolVersion.tls1_2
    else:
        minVersion = ProtocolVersion.ssl3
    return CipherSuiteInfo(cipherId, name, keyExchange, authentication,
                           bulkCipher, mac, minVersion, maxVersion,
                           STRENGTH_BITS[bulkCipher])


CS = CipherSuite

#: all known cipher suites, in default preference order
CIPHER_SUITES = (
    _suite(CS.TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_SHA256,
           "ECDHE-ECDSA-CHACHA20-POLY1305",
           Kx.ecdhe, Au.ecdsa, Enc.chacha20_poly1305, Mac.aead),
    _suite(CS.TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_SHA256,
           "ECDHE-RSA-CHACHA20-POLY1305",
           Kx.ecdhe, Au.rsa, Enc.chacha20_poly1305, Mac.aead),
    _suite(CS.TLS_ECDHE_PSK_WITH_CHACHA20_POLY1305_SHA256,
           "ECDHE-PSK-CHACHA20-POLY1305",
           Kx.ecdhe, Au.psk, Enc.chacha20_poly1305, Mac.aead),
    _suite(CS.TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_OLD,
           "ECDHE-ECDSA-CHACHA20-POLY1305-OLD",
           Kx.ecdhe, Au.ecdsa, Enc.chacha20_poly1305_old, Mac.aead),
    _suite(CS.TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_OLD,
           "ECDHE-RSA-CHACHA20-POLY1305-OLD",
           Kx.ecdhe, Au.rsa, Enc.chacha20_poly1305_old, Mac.aead),
    _suite(CS.TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256,
           "ECDHE-ECDSA-AES128-GCM-SHA256",
           Kx.ecdhe, Au.ecdsa, Enc.aes128gcm, Mac.aead),
    _suite(CS.TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256,
           "ECDHE-RSA-AES128-GCM-SHA256",
           Kx.ecdhe, Au.rsa, Enc.aes128gcm, Mac.aead),
    _suite(CS.TLS_DHE_RSA_WITH_AES_128_GCM_SHA256,
           "DHE-RSA-AES128-GCM-SHA256",
           Kx.dhe, Au.rsa, Enc.aes128gcm, Mac.aead),
    _suite(CS.TLS_ECDHE_ECDSA_WITH_AES_256_GCM_SHA384,
           "ECDHE-ECDSA-AES256-GCM-SHA384",
           Kx.ecdhe, Au.ecdsa, Enc.aes256gcm, Mac.aead),
    _suite(CS.TLS_ECDHE_RSA_WITH_AES_256_GCM_SHA384,
           "ECDHE-RSA-AES256-GCM-SHA384",
           Kx.ecdhe, Au.rsa, Enc.aes256gcm, Mac.aead),
    _suite(CS.TLS_DHE_RSA_WITH_AES_256_GCM_SHA384,
           "DHE-RSA-AES256-GCM-SHA384",
           Kx.dhe, Au.rsa, Enc.aes256gcm, Mac.aead),
    _suite(CS.TLS_ECDHE_ECDSA_WITH_AES_128_CBC_SHA,
           "ECDHE-ECDSA-AES128-SHA",
           Kx.ecdhe, Au.ecdsa, Enc.aes128, Mac.sha1),
    _suite(CS.TLS_ECDHE_ECDSA_WITH_AES_128_CBC_SHA256,
           "ECDHE-ECDSA-AES128-SHA256",
           Kx.ecdhe, Au.ecdsa, Enc.aes128, Mac.sha256),
    _suite(CS.TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA,
           "ECDHE-RSA-AES128-SHA",
           Kx.ecdhe, Au.rsa, Enc.aes128, Mac.sha1),
    _suite(CS.TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA256,
           "ECDHE-RSA-AES128-SHA256",
           Kx.ecdhe, Au.rsa, Enc.aes128, Mac.sha256),
    _suite(CS.TLS_ECDHE_PSK_WITH_AES_128_CBC_SHA,
           "ECDHE-PSK-AES128-CBC-SHA",
           Kx.ecdhe, Au.psk, Enc.aes128, Mac.sha1),
    _suite(CS.TLS_DHE_RSA_WITH_AES_128_CBC_SHA,
           "DHE-RSA-AES128-SHA",
           Kx.dhe, Au.rsa, Enc.aes128, Mac.sha1),
    _suite(CS.TLS_DHE_RSA_WITH_AES_128_CBC_SHA256,
           "DHE-RSA-AES128-SHA256",
           Kx.dhe, Au.rsa, Enc.aes128, Mac.sha256),
    _suite(CS.TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA,
           "ECDHE-ECDSA-AES256-SHA",
           Kx.ecdhe, Au.ecdsa, Enc.aes256, Mac.sha1),
    _suite(CS.TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA384,
           "ECDHE-ECDSA-AES256-SHA384",
           Kx.ecdhe, Au.ecdsa, Enc.aes256, Mac.sha384),
    _suite(CS.TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA,
           "ECDHE-RSA-AES256-SHA",
           Kx.ecdhe, Au.rsa, Enc.aes256, Mac.sha1),
    _suite(CS.TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA384,
           "ECDHE-RSA-AES256-SHA384",
           Kx.ecdhe, Au.rsa, Enc.aes256, Mac.sha384),
    _suite(CS.TLS_ECDHE_PSK_WITH_AES_256_CBC_SHA,
           "ECDHE-PSK-AES256-CBC-SHA",
           Kx.ecdhe, Au.psk, Enc.aes256, Mac.sha1),
    _suite(CS.TLS_DHE_RSA_WITH_AES_256_CBC_SHA,
           "DHE-RSA-AES256-SHA",
           Kx.dhe, Au.rsa, Enc.aes256, Mac.sha1),
    _suite(CS.TLS_DHE_RSA_WITH_AES_256_CBC_SHA256,
           "DHE-RSA-AES256-SHA256",
           Kx.dhe, Au.rsa, Enc.aes256, Mac.sha256),
    # no forward secrecy
    _suite(CS.TLS_RSA_WITH_AES_128_GCM_SHA256,
           "AES128-GCM-SHA256",
           Kx.rsa, Au.rsa, Enc.aes128gcm, Mac.aead),
    _suite(CS.TLS_RSA_WITH_AES_256_GCM_SHA384,
           "AES256-GCM-SHA384",
           Kx.rsa, Au.rsa, Enc.aes256gcm, Mac.aead),
    _suite(CS.TLS_RSA_WITH_AES_128_CBC_SHA,
           "AES128-SHA",
           Kx.rsa, Au.rsa, Enc.aes128, Mac.sha1),
    _suite(CS.TLS_RSA_WITH_AES_128_CBC_SHA256,
           "AES128-SHA256",
           Kx.rsa, Au.rsa, Enc.aes128, Mac.sha256),
    _suite(CS.TLS_PSK_WITH_AES_128_CBC_SHA,
           "PSK-AES128-CBC-SHA",
           Kx.psk, Au.psk, Enc.aes128, Mac.sha1),
    _suite(CS.TLS_RSA_WITH_AES_256_CBC_SHA,
           "AES256-SHA",
           Kx.rsa, Au.rsa, Enc.aes256, Mac.sha1),
    _suite(CS.TLS_RSA_WITH_AES_256_CBC_SHA256,
           "AES256-SHA256",
           Kx.rsa, Au.rsa, Enc.aes256, Mac.sha256),
    _suite(CS.TLS_PSK_WITH_AES_256_CBC_SHA,
           "PSK-AES256-CBC-SHA",
           Kx.psk, Au.psk, Enc.aes256, Mac.sha1),
    _suite(CS.TLS_RSA_WITH_3DES_EDE_CBC_SHA,
           "DES-CBC3-SHA",
           Kx.rsa, Au.rsa, Enc.tripleDES, Mac.sha1),
    _suite(CS.TLS_RSA_WITH_NULL_SHA,
           "NULL-SHA",
           Kx.rsa, Au.rsa, Enc.null, Mac.sha1),
    )

del CS

#: names that stand for both the standard and the pre-standard code point
#: of a suite, standard one first
SHARED_NAMES = {
    "ECDHE-ECDSA-CHACHA20-POLY1305":
        (CipherSuite.TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_SHA256,
         CipherSuite.TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_OLD),
    "ECDHE-RSA-CHACHA20-POLY1305":
        (CipherSuite.TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_SHA256,
         CipherSuite.TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_OLD),
    }

_INDEX_BY_ID = dict((suite.id, index)
                    for index, suite in enumerate(CIPHER_SUITES))
_BY_NAME = dict((suite.name, suite) for suite in CIPHER_SUITES)


def getCipherSuite(cipherId):
    """
    Return the catalog entry of a suite.

    :type cipherId: int
    :param cipherId: wire value of the suite
    :rtype: CipherSuiteInfo
    :returns: the suite, None if unknown
    """
    index = _INDEX_BY_ID.get(cipherId)
    if index is None:
        return None
    return CIPHER_SUITES[index]


def getCipherSuiteByName(name):
    """Return the catalog entry with exactly matching name, or None"""
    return _BY_NAME.get(name)


def catalogIndex(cipherId):
    """Return position of the suite in the catalog, KeyError if unknown"""
    return _INDEX_BY_ID[cipherId]
