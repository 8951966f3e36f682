# Authors:
#   cipherlite developers
#
# See the LICENSE file for legal information regarding use of this file.

"""Class with various handshake helpers."""

from .catalog import getCipherSuite
from .utils.lists import getFirstMatching


class HandshakeHelpers(object):
    """
    This class encapsulates helper functions to be used with a TLS handshake.
    """

    @staticmethod
    def chooseCipherSuite(preferences, clientSuites, serverPreference=True,
                          version=None):
        """
        Pick the cipher suite for the connection.

        With server preference, suites are taken in order of the server list,
        but among a group of equally preferred suites the one the client
        ranks highest wins. Otherwise the first suite in the client list
        that the server enabled is used.

        :type preferences: CipherPreferenceList
        :param preferences: server configuration
        :type clientSuites: list of int
        :param clientSuites: suites from the ClientHello, in client order
        :type version: tuple
        :param version: negotiated protocol version, suites that can't be
            used in it are skipped; None to not filter
        :rtype: int
        :returns: wire value of the suite, None when there's no overlap
        """
        def usable(cipherId):
            if version is None:
                return True
            suite = getCipherSuite(cipherId)
            return suite is not None and suite.usableWith(version)

        if not serverPreference:
            enabled = set(i for i in preferences.ciphers if usable(i))
            return getFirstMatching(clientSuites, enabled)

        clientRank = dict((cipherId, rank) for rank, cipherId
                          in reversed(list(enumerate(clientSuites))))
        groupBest = None
        for cipherId, inGroup in preferences:
            if cipherId in clientRank and usable(cipherId):
                if groupBest is None or \
                        clientRank[cipherId] < clientRank[groupBest]:
                    groupBest = cipherId
            if not inGroup and groupBest is not None:
                return groupBest
        return None
