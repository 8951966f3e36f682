#!/usr/bin/env python

# Authors:
#   cipherlite developers
#
# See the LICENSE file for legal information regarding use of this file.
import sys
import getopt
import logging

if __name__ != "__main__":
    raise ImportError("This must be run as a command, not used as a module!")

from cipherlite.api import *
from cipherlite import __version__
from cipherlite.aliases import aliasNames
from cipherlite.curves import getCurve
from cipherlite.utils.lists import wrapWords


def printUsage(s=None):
    if s:
        print("ERROR: %s" % s)

    print("")
    print("Version: %s" % __version__)
    print("")
    print("""Commands:

  ciphers
    [-f FAMILY] [-i] [-v] RULES

  curves
    [-v] LIST

  aliases

  FAMILY - protocol family the rules are compiled for, "tls" or "dtls"
  -i     - print IETF names and wire values of the suites
  -v     - print debugging messages
""")
    sys.exit(-1)


def printError(s):
    """Print error message and exit"""
    sys.stderr.write("ERROR: %s\n" % s)
    sys.exit(1)


def handleArgs(argv, argString, flagsList=[]):
    try:
        opts, argv = getopt.getopt(argv, argString, flagsList)
    except getopt.GetoptError as e:
        printError(e)
    # Default values if arg not present
    family = "tls"
    ietf = False
    verbose = False

    for opt, arg in opts:
        if opt == "-f":
            family = arg
        elif opt == "-i":
            ietf = True
        elif opt == "-v":
            verbose = True
        else:
            assert(False)

    if not argv:
        printError("Missing argument")
    if len(argv) > 1:
        printError("Too many arguments")

    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    return argv[0], family, ietf


def ciphersCmd(argv):
    rules, family, ietf = handleArgs(argv, "f:iv")
    try:
        preferences = createCipherPreferenceList(rules, family)
    except ValueError as e:
        printError(e)

    if not ietf:
        print(preferences.describe())
        return
    for group in preferences.groups():
        marker = "[" if len(group) > 1 else " "
        for cipherId in group:
            print("{0} 0x{1:04x} {2}".format(marker, cipherId,
                                             CipherSuite.toStr(cipherId)))
            marker = "|" if len(group) > 1 else " "


def curvesCmd(argv):
    curves, _, _ = handleArgs(argv, "v")
    try:
        groups = parseCurvesList(curves)
    except TLSConfigurationError as e:
        printError(e)
    for groupId in groups:
        curve = getCurve(groupId)
        print("{0:3d} {1:8s} {2} bits".format(groupId, curve.name,
                                              curve.bitLength))


def aliasesCmd(argv):
    if argv:
        printError("Too many arguments")
    for line in wrapWords(aliasNames()):
        print(line)


if __name__ == '__main__':
    if len(sys.argv) < 2:
        printUsage("Missing command")
    elif sys.argv[1] == "ciphers"[:len(sys.argv[1])]:
        ciphersCmd(sys.argv[2:])
    elif sys.argv[1] == "curves"[:len(sys.argv[1])]:
        curvesCmd(sys.argv[2:])
    elif sys.argv[1] == "aliases"[:len(sys.argv[1])]:
        aliasesCmd(sys.argv[2:])
    else:
        printUsage("Unknown command: %s" % sys.argv[1])
