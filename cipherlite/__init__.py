# Authors:
#   cipherlite developers
#
# See the LICENSE file for legal information regarding use of this file.

"""
cipherlite compiles OpenSSL style cipher rule strings into cipher suite
preference lists for TLS servers and clients, and validates lists of
elliptic curves for the supported groups extension.

To use, do::

    from cipherlite.api import *

    settings = HandshakeSettings()
    settings.cipherString = "ECDHE+AESGCM:ECDHE+CHACHA20:!SHA1"
    settings = settings.validate()

Then pass ``settings.cipherPreferences`` to
L{cipherlite.handshakehelpers.HandshakeHelpers.chooseCipherSuite}.

@version: 0.1.0
"""
__version__ = "0.1.0"
