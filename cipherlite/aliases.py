# Authors:
#   cipherlite developers
#
# See the LICENSE file for legal information regarding use of this file.

"""
Resolution of cipher rule selectors to sets of cipher suites.

A selector is either the exact name of a suite, a shared name that stands
for two wire values of the same suite, or an alias: a predicate over the
suite attributes.  Every alias except ``eNULL`` and ``NULL`` leaves out
suites without encryption or without server authentication, those can be
enabled only explicitly.
"""

from collections import namedtuple

from .catalog import CIPHER_SUITES, SHARED_NAMES, getCipherSuiteByName
from .constants import KeyExchangeAlgorithm as Kx, \
        AuthenticationAlgorithm as Au, BulkCipherAlgorithm as Enc, \
        MacAlgorithm as Mac, ProtocolVersion

#: protocol families the rule compiler knows about
PROTOCOL_FAMILIES = ("tls", "dtls")

#: selector naming one suite
ExactOne = namedtuple('ExactOne', ['cipherId'])

#: selector naming two wire values of one suite
ExactPair = namedtuple('ExactPair', ['first', 'second'])

#: alias selector, versionAlias is set for protocol version pseudo-aliases
Predicate = namedtuple('Predicate', ['name', 'match', 'versionAlias'])


def _alias(keyExchange=None, authentication=None, ciphers=None, macs=None,
           minVersion=None, allowNull=False):
    """Create predicate matching all suites with given properties"""
    def match(suite):
        if not allowNull and (suite.isNull() or suite.isAnonymous()):
            return False
        if keyExchange is not None and suite.keyExchange not in keyExchange:
            return False
        if authentication is not None and \
                suite.authentication not in authentication:
            return False
        if ciphers is not None and suite.bulkCipher not in ciphers:
            return False
        if macs is not None and suite.mac not in macs:
            return False
        if minVersion is not None and suite.minVersion != minVersion:
            return False
        return True
    return match


def _nothing(suite):
    return False


_CHACHA20 = (Enc.chacha20_poly1305, Enc.chacha20_poly1305_old)
_AES128 = (Enc.aes128, Enc.aes128gcm)
_AES256 = (Enc.aes256, Enc.aes256gcm)

_ALIASES = {
    # "ALL" doesn't include NULL ciphers, they must be enabled explicitly
    "ALL": _alias(),
    "DEFAULT": _alias(),
    "COMPLEMENTOFDEFAULT": _nothing,
    "COMPLEMENTOFALL": _nothing,

    # key exchange
    "kRSA": _alias(keyExchange=(Kx.rsa,)),
    "kDHE": _alias(keyExchange=(Kx.dhe,)),
    "kEDH": _alias(keyExchange=(Kx.dhe,)),
    "DH": _alias(keyExchange=(Kx.dhe,)),
    "kECDHE": _alias(keyExchange=(Kx.ecdhe,)),
    "kEECDH": _alias(keyExchange=(Kx.ecdhe,)),
    "ECDH": _alias(keyExchange=(Kx.ecdhe,)),
    "kPSK": _alias(keyExchange=(Kx.psk,)),

    # server authentication
    "aRSA": _alias(authentication=(Au.rsa,)),
    "aECDSA": _alias(authentication=(Au.ecdsa,)),
    "ECDSA": _alias(authentication=(Au.ecdsa,)),
    "aPSK": _alias(authentication=(Au.psk,)),

    # key exchange and authentication
    "DHE": _alias(keyExchange=(Kx.dhe,)),
    "EDH": _alias(keyExchange=(Kx.dhe,)),
    "ECDHE": _alias(keyExchange=(Kx.ecdhe,)),
    "EECDH": _alias(keyExchange=(Kx.ecdhe,)),
    "RSA": _alias(keyExchange=(Kx.rsa,), authentication=(Au.rsa,)),
    "PSK": _alias(keyExchange=(Kx.psk,), authentication=(Au.psk,)),

    # bulk ciphers
    "3DES": _alias(ciphers=(Enc.tripleDES,)),
    "AES128": _alias(ciphers=_AES128),
    "AES256": _alias(ciphers=_AES256),
    "AES": _alias(ciphers=_AES128 + _AES256),
    "AESGCM": _alias(ciphers=(Enc.aes128gcm, Enc.aes256gcm)),
    "CHACHA20": _alias(ciphers=_CHACHA20),

    # MACs
    "MD5": _alias(macs=(Mac.md5,)),
    "SHA1": _alias(macs=(Mac.sha1,)),
    "SHA": _alias(macs=(Mac.sha1,)),
    "SHA256": _alias(macs=(Mac.sha256,)),
    "SHA384": _alias(macs=(Mac.sha384,)),

    # legacy strength classes
    "HIGH": _alias(),
    "FIPS": _alias(ciphers=(Enc.tripleDES,) + _AES128 + _AES256),

    "eNULL": _alias(ciphers=(Enc.null,), allowNull=True),
    "NULL": _alias(ciphers=(Enc.null,), allowNull=True),
    }

# "TLSv1" is intentionally the same as "SSLv3"
_VERSION_ALIASES = {
    "SSLv3": _alias(minVersion=ProtocolVersion.ssl3),
    "TLSv1": _alias(minVersion=ProtocolVersion.ssl3),
    "TLSv1.2": _alias(minVersion=ProtocolVersion.tls1_2),
    }


def resolveAtom(atom):
    """
    Find what a single selector stands for.

    :type atom: str
    :param atom: selector as written in the rule string, case sensitive
    :rtype: ExactOne, ExactPair or Predicate
    :returns: resolved selector, None for unknown ones
    """
    pair = SHARED_NAMES.get(atom)
    if pair is not None:
        return ExactPair(*pair)
    suite = getCipherSuiteByName(atom)
    if suite is not None:
        return ExactOne(suite.id)
    match = _ALIASES.get(atom)
    if match is not None:
        return Predicate(atom, match, False)
    match = _VERSION_ALIASES.get(atom)
    if match is not None:
        return Predicate(atom, match, True)
    return None


def matchingIds(selector, family="tls"):
    """Return set of wire values selected by a resolved selector"""
    if selector is None:
        return frozenset()
    if isinstance(selector, ExactOne):
        return frozenset([selector.cipherId])
    if isinstance(selector, ExactPair):
        return frozenset([selector.first, selector.second])
    # DTLS never had SSLv3, the version aliases are meaningless there
    if selector.versionAlias and family != "tls":
        return frozenset()
    return frozenset(suite.id for suite in CIPHER_SUITES
                     if selector.match(suite))


def resolveCompound(atoms, family="tls"):
    """
    Return set of wire values selected by all the atoms together.

    Exact suite names can't be combined with anything else, a compound that
    includes one selects nothing.

    :type atoms: list of str
    :param atoms: selectors joined with ``+`` in the rule string
    :type family: str
    :param family: protocol family the rules are compiled for
    :rtype: frozenset
    """
    selectors = [resolveAtom(atom) for atom in atoms]
    if len(selectors) > 1 and \
            any(isinstance(sel, (ExactOne, ExactPair)) for sel in selectors):
        return frozenset()
    ret = None
    for selector in selectors:
        ids = matchingIds(selector, family)
        ret = ids if ret is None else ret & ids
        if not ret:
            break
    return ret if ret is not None else frozenset()


def aliasNames():
    """Return sorted names of all aliases"""
    return sorted(list(_ALIASES) + list(_VERSION_ALIASES))
