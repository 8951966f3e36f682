# Authors:
#   cipherlite developers
#
# See the LICENSE file for legal information regarding use of this file.

"""Class for setting handshake parameters."""

import logging

from .aliases import PROTOCOL_FAMILIES
from .constants import ProtocolVersion
from .curves import parseCurvesList
from .errors import EmptyCipherListError
from .selection import createCipherPreferenceList

logger = logging.getLogger(__name__)

CIPHER_RULES = "ALL"
CURVES_LIST = "X25519:P-256:P-384"
KNOWN_VERSIONS = ((3, 0), (3, 1), (3, 2), (3, 3))


class HandshakeSettings(object):
    """
    This class encapsulates the cipher and curve configuration of a TLS
    handshake.

    :vartype cipherString: str
    :ivar cipherString: The cipher rule string.

        Colon separated list of selectors and operators, see
        :py:mod:`cipherlite.ruleparser`. Unknown selectors are ignored so
        that rule strings written for newer versions keep working.
        The default is "ALL", that is, all suites except the ones without
        encryption, in the library preference order.

    :vartype curvesList: str
    :ivar curvesList: Colon separated list of curves to advertise and
        accept, most preferred first. Every name needs to be known.

        The default is "X25519:P-256:P-384".

    :vartype protocolFamily: str
    :ivar protocolFamily: Either "tls" or "dtls". The protocol version
        aliases (SSLv3, TLSv1, TLSv1.2) select nothing for "dtls".

    :vartype minVersion: tuple
    :ivar minVersion: The minimum allowed SSL/TLS version.

    :vartype maxVersion: tuple
    :ivar maxVersion: The maximum allowed SSL/TLS version. At least one
        selected cipher suite must be usable in it.

    :vartype cipherPreferences: CipherPreferenceList
    :ivar cipherPreferences: compiled cipher rules, set by validate()

    :vartype eccCurves: list
    :ivar eccCurves: group identifiers of the curves, set by validate()
    """
    def __init__(self):
        self.cipherString = CIPHER_RULES
        self.curvesList = CURVES_LIST
        self.protocolFamily = "tls"
        self.minVersion = (3, 1)
        self.maxVersion = (3, 3)
        self.cipherPreferences = None
        self.eccCurves = None

    @staticmethod
    def _sanityCheckStrings(other):
        """Check if the configuration strings are of proper type"""
        if not isinstance(other.cipherString, str):
            raise ValueError("cipherString must be a string")
        if not isinstance(other.curvesList, str):
            raise ValueError("curvesList must be a string")
        if other.protocolFamily not in PROTOCOL_FAMILIES:
            raise ValueError("Unknown protocol family: {0}"
                             .format(other.protocolFamily))

    @staticmethod
    def _sanityCheckProtocolVersions(other):
        """Check if set protocol version are sane"""
        if other.minVersion > other.maxVersion:
            raise ValueError("Versions set incorrectly")
        if other.minVersion not in KNOWN_VERSIONS:
            raise ValueError("minVersion set incorrectly")
        if other.maxVersion not in KNOWN_VERSIONS:
            raise ValueError("maxVersion set incorrectly")

    def validate(self):
        """
        Validate the settings, compile the cipher rules and curve list and
        return a copy of object. Does not modify the original object.

        :rtype: HandshakeSettings
        :returns: a self-consistent copy of settings
        :raises ValueError: when settings are invalid, the errors from
            :py:mod:`cipherlite.errors` for bad rule strings and curve lists
            are subclasses of it
        """
        other = HandshakeSettings()
        other.cipherString = self.cipherString
        other.curvesList = self.curvesList
        other.protocolFamily = self.protocolFamily
        other.minVersion = self.minVersion
        other.maxVersion = self.maxVersion

        self._sanityCheckStrings(other)

        self._sanityCheckProtocolVersions(other)

        other.cipherPreferences = createCipherPreferenceList(
            other.cipherString, other.protocolFamily)
        if not any(suite.usableWith(other.maxVersion)
                   for suite in other.cipherPreferences.suites):
            raise EmptyCipherListError("No selected cipher suite is usable "
                                       "with {0}".format(
                                           ProtocolVersion.toStr(
                                               other.maxVersion)))

        other.eccCurves = parseCurvesList(other.curvesList)

        logger.debug("Validated settings: %d cipher suites, %d curves",
                     len(other.cipherPreferences), len(other.eccCurves))
        return other

    def getCipherSuites(self, version=None):
        """
        Return wire values of the configured suites usable in version.

        :type version: tuple
        :param version: negotiated protocol version, maxVersion if None
        """
        if self.cipherPreferences is None:
            raise ValueError("Settings need to be validated first")
        if version is None:
            version = self.maxVersion
        return [suite.id for suite in self.cipherPreferences.suites
                if suite.usableWith(version)]
