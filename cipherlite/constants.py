# Authors:
#   cipherlite developers
#
# See the LICENSE file for legal information regarding use of this file.

"""Constants used in various places."""


class TLSEnum(object):
    """Base class for different enums of TLS IDs"""

    @classmethod
    def _recursiveVars(cls, klass):
        """Call vars recursively on base classes"""
        fields = dict()
        for basecls in klass.__bases__:
            fields.update(cls._recursiveVars(basecls))
        fields.update(dict(vars(klass)))
        return fields

    @classmethod
    def toRepr(cls, value, blacklist=None):
        """
        Convert numeric type to string representation

        name if found, None otherwise
        """
        fields = cls._recursiveVars(cls)
        if blacklist is None:
            blacklist = []
        return next((key for key, val in fields.items()
                     if key not in ('__weakref__', '__dict__', '__doc__',
                                    '__module__') and
                     key not in blacklist and
                     val == value), None)

    @classmethod
    def toStr(cls, value, blacklist=None):
        """Convert numeric type to human-readable string if possible"""
        ret = cls.toRepr(value, blacklist)
        if ret is not None:
            return ret
        else:
            return '{0}'.format(value)


class ProtocolVersion(TLSEnum):
    """Protocol versions, as (major, minor) tuples used on the wire"""

    ssl3 = (3, 0)
    tls1_0 = (3, 1)
    tls1_1 = (3, 2)
    tls1_2 = (3, 3)


class GroupName(TLSEnum):
    """Name of groups supported for (EC)DH key exchange"""

    # RFC4492
    secp224r1 = 21
    secp256r1 = 23
    secp384r1 = 24
    secp521r1 = 25

    # RFC7748
    x25519 = 29
    x448 = 30

    allEC = [secp224r1, secp256r1, secp384r1, secp521r1, x25519, x448]

    @classmethod
    def toRepr(cls, value, blacklist=None):
        """Convert numeric type to name representation"""
        if blacklist is None:
            blacklist = []
        blacklist += ['allEC']
        return super(GroupName, cls).toRepr(value, blacklist)


class KeyExchangeAlgorithm(TLSEnum):
    """Key exchange methods of cipher suites"""

    rsa = 1
    dhe = 2
    ecdhe = 3
    psk = 4


class AuthenticationAlgorithm(TLSEnum):
    """Server authentication methods of cipher suites"""

    anonymous = 0
    rsa = 1
    ecdsa = 2
    psk = 3


class BulkCipherAlgorithm(TLSEnum):
    """Symmetric record protection algorithms of cipher suites"""

    null = 0
    tripleDES = 1
    aes128 = 2
    aes256 = 3
    aes128gcm = 4
    aes256gcm = 5
    chacha20_poly1305 = 6
    # pre-standard ChaCha20-Poly1305 construction
    chacha20_poly1305_old = 7


class MacAlgorithm(TLSEnum):
    """Record integrity algorithms, aead when the bulk cipher provides it"""

    aead = 0
    md5 = 1
    sha1 = 2
    sha256 = 3
    sha384 = 4


class CipherSuite:

    """
    Numeric values of ciphersuites

    Only the suites that can be enabled with a cipher rule string are
    listed. Their attributes are kept in :py:mod:`cipherlite.catalog`.

    :cvar ietfNames: dictionary with string names of the ciphersuites
    """

    ietfNames = {}

# the ciphesuite names come from IETF, we want to keep them
#pylint: disable = invalid-name

    # RFC 5246 - TLS v1.2 Protocol
    TLS_RSA_WITH_NULL_SHA = 0x0002
    ietfNames[0x0002] = 'TLS_RSA_WITH_NULL_SHA'
    TLS_RSA_WITH_3DES_EDE_CBC_SHA = 0x000A
    ietfNames[0x000A] = 'TLS_RSA_WITH_3DES_EDE_CBC_SHA'
    TLS_RSA_WITH_AES_128_CBC_SHA = 0x002F
    ietfNames[0x002F] = 'TLS_RSA_WITH_AES_128_CBC_SHA'
    TLS_DHE_RSA_WITH_AES_128_CBC_SHA = 0x0033
    ietfNames[0x0033] = 'TLS_DHE_RSA_WITH_AES_128_CBC_SHA'
    TLS_RSA_WITH_AES_256_CBC_SHA = 0x0035
    ietfNames[0x0035] = 'TLS_RSA_WITH_AES_256_CBC_SHA'
    TLS_DHE_RSA_WITH_AES_256_CBC_SHA = 0x0039
    ietfNames[0x0039] = 'TLS_DHE_RSA_WITH_AES_256_CBC_SHA'
    TLS_RSA_WITH_AES_128_CBC_SHA256 = 0x003C
    ietfNames[0x003C] = 'TLS_RSA_WITH_AES_128_CBC_SHA256'
    TLS_RSA_WITH_AES_256_CBC_SHA256 = 0x003D
    ietfNames[0x003D] = 'TLS_RSA_WITH_AES_256_CBC_SHA256'
    TLS_DHE_RSA_WITH_AES_128_CBC_SHA256 = 0x0067
    ietfNames[0x0067] = 'TLS_DHE_RSA_WITH_AES_128_CBC_SHA256'
    TLS_DHE_RSA_WITH_AES_256_CBC_SHA256 = 0x006B
    ietfNames[0x006B] = 'TLS_DHE_RSA_WITH_AES_256_CBC_SHA256'

    # RFC 4279 - Pre-Shared Key Ciphersuites for TLS
    TLS_PSK_WITH_AES_128_CBC_SHA = 0x008C
    ietfNames[0x008C] = 'TLS_PSK_WITH_AES_128_CBC_SHA'
    TLS_PSK_WITH_AES_256_CBC_SHA = 0x008D
    ietfNames[0x008D] = 'TLS_PSK_WITH_AES_256_CBC_SHA'

    # RFC 5288 - AES-GCM ciphers for TLSv1.2
    TLS_RSA_WITH_AES_128_GCM_SHA256 = 0x009C
    ietfNames[0x009C] = 'TLS_RSA_WITH_AES_128_GCM_SHA256'
    TLS_RSA_WITH_AES_256_GCM_SHA384 = 0x009D
    ietfNames[0x009D] = 'TLS_RSA_WITH_AES_256_GCM_SHA384'
    TLS_DHE_RSA_WITH_AES_128_GCM_SHA256 = 0x009E
    ietfNames[0x009E] = 'TLS_DHE_RSA_WITH_AES_128_GCM_SHA256'
    TLS_DHE_RSA_WITH_AES_256_GCM_SHA384 = 0x009F
    ietfNames[0x009F] = 'TLS_DHE_RSA_WITH_AES_256_GCM_SHA384'

    # RFC 4492 - ECC Cipher Suites for TLS
    TLS_ECDHE_ECDSA_WITH_AES_128_CBC_SHA = 0xC009
    ietfNames[0xC009] = 'TLS_ECDHE_ECDSA_WITH_AES_128_CBC_SHA'
    TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA = 0xC00A
    ietfNames[0xC00A] = 'TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA'
    TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA = 0xC013
    ietfNames[0xC013] = 'TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA'
    TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA = 0xC014
    ietfNames[0xC014] = 'TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA'

    # RFC 5289 - ECC Ciphers with SHA-256/SHA-384 HMAC and AES-GCM
    TLS_ECDHE_ECDSA_WITH_AES_128_CBC_SHA256 = 0xC023
    ietfNames[0xC023] = 'TLS_ECDHE_ECDSA_WITH_AES_128_CBC_SHA256'
    TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA384 = 0xC024
    ietfNames[0xC024] = 'TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA384'
    TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA256 = 0xC027
    ietfNames[0xC027] = 'TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA256'
    TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA384 = 0xC028
    ietfNames[0xC028] = 'TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA384'
    TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256 = 0xC02B
    ietfNames[0xC02B] = 'TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256'
    TLS_ECDHE_ECDSA_WITH_AES_256_GCM_SHA384 = 0xC02C
    ietfNames[0xC02C] = 'TLS_ECDHE_ECDSA_WITH_AES_256_GCM_SHA384'
    TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256 = 0xC02F
    ietfNames[0xC02F] = 'TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256'
    TLS_ECDHE_RSA_WITH_AES_256_GCM_SHA384 = 0xC030
    ietfNames[0xC030] = 'TLS_ECDHE_RSA_WITH_AES_256_GCM_SHA384'

    # RFC 5489 - ECDHE_PSK Cipher Suites for TLS
    TLS_ECDHE_PSK_WITH_AES_128_CBC_SHA = 0xC035
    ietfNames[0xC035] = 'TLS_ECDHE_PSK_WITH_AES_128_CBC_SHA'
    TLS_ECDHE_PSK_WITH_AES_256_CBC_SHA = 0xC036
    ietfNames[0xC036] = 'TLS_ECDHE_PSK_WITH_AES_256_CBC_SHA'

    # pre-standard ChaCha20/Poly1305 code points, deployed before the
    # IETF drafts fixed the nonce construction
    TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_OLD = 0xCC13
    ietfNames[0xCC13] = 'TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_OLD'
    TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_OLD = 0xCC14
    ietfNames[0xCC14] = 'TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_OLD'

    # RFC 7905 - ChaCha20-Poly1305 Cipher Suites for TLS
    TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_SHA256 = 0xCCA8
    ietfNames[0xCCA8] = 'TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_SHA256'
    TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_SHA256 = 0xCCA9
    ietfNames[0xCCA9] = 'TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_SHA256'
    TLS_ECDHE_PSK_WITH_CHACHA20_POLY1305_SHA256 = 0xCCAC
    ietfNames[0xCCAC] = 'TLS_ECDHE_PSK_WITH_CHACHA20_POLY1305_SHA256'

#pylint: enable = invalid-name

    @staticmethod
    def toStr(ciphersuite):
        """Return the IETF name of the suite, or hex value if unknown"""
        name = CipherSuite.ietfNames.get(ciphersuite)
        if name is not None:
            return name
        return '0x{0:04x}'.format(ciphersuite)
