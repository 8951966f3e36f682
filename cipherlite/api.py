# Authors:
#   cipherlite developers
#
# See the LICENSE file for legal information regarding use of this file.

"""Import this module for easy access to cipherlite objects.

The cipherlite API consists of classes, functions, and variables spread
throughout this package.  Instead of importing them individually with::

    from cipherlite.handshakesettings import HandshakeSettings
    from cipherlite.selection import createCipherPreferenceList
    from cipherlite.errors import *
    .
    .

It's easier to do::

    from cipherlite.api import *

This imports all the important objects (HandshakeSettings,
CipherPreferenceList, the parsers, etc.) into the global namespace.
"""

__version__ = "0.1.0"

from .constants import CipherSuite, GroupName
from .errors import *
from .catalog import CipherSuiteInfo, CIPHER_SUITES, getCipherSuite, \
        getCipherSuiteByName
from .curves import parseCurvesList
from .handshakehelpers import HandshakeHelpers
from .handshakesettings import HandshakeSettings
from .ruleparser import parseCipherRules
from .selection import CipherPreferenceList, createCipherPreferenceList
