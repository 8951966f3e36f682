# Authors:
#   cipherlite developers
#
# See the LICENSE file for legal information regarding use of this file.

"""
Parser of cipher rule strings.

A rule string is a list of items separated by colons (spaces, semicolons and
commas are accepted too). Every item is one of:

* ``SEL+SEL...`` - enable the suites matching all selectors
* ``+SEL+SEL...`` - move the matching enabled suites to the end
* ``-SEL+SEL...`` - disable the matching suites, they may be enabled again
* ``!SEL+SEL...`` - disable the matching suites permanently
* ``@STRENGTH`` - sort the enabled suites by strength of the cipher
* ``[SEL|SEL...]`` - enable suites as one group of equal preference

Groups can't be mixed with the ``+``, ``-``, ``!`` and ``@STRENGTH`` items.
"""

import logging

from .errors import CipherRuleParseError

logger = logging.getLogger(__name__)

SEPARATORS = ":;, "
OPERATORS = "+-!"

_ATOM_PUNCTUATION = ".-_="


def _isAtomChar(char):
    return (char.isascii() and char.isalnum()) or char in _ATOM_PUNCTUATION


class RuleItem(object):
    """
    Base class of the items of parsed cipher rule string.

    :vartype atoms: tuple
    :ivar atoms: selectors of the item, for groups the names in the group
    """

    operator = None

    def __init__(self, atoms=()):
        self.atoms = tuple(atoms)

    def __eq__(self, other):
        return type(self) is type(other) and self.atoms == other.atoms

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__, self.atoms))

    def __repr__(self):
        return "{0}({1!r})".format(type(self).__name__, list(self.atoms))


class Select(RuleItem):
    """Enable matching suites that are not enabled yet."""

    operator = ""


class Add(RuleItem):
    """Move matching enabled suites to the end of the list."""

    operator = "+"


class Remove(RuleItem):
    """Disable matching suites, keeping them available for reselection."""

    operator = "-"


class Delete(RuleItem):
    """Disable matching suites for the rest of the rule string."""

    operator = "!"


class Strength(RuleItem):
    """Stable sort of the enabled suites, strongest ciphers first."""

    directive = "STRENGTH"

    def __init__(self):
        super(Strength, self).__init__()

    def __repr__(self):
        return "Strength()"


class Group(RuleItem):
    """Enable suites matching any of the names as equally preferred."""

    pass


_ITEM_CLASSES = {"": Select, "+": Add, "-": Remove, "!": Delete}


class _Scanner(object):
    """Position tracking over a rule string"""

    def __init__(self, rules):
        self.rules = rules
        self.pos = 0

    def atEnd(self):
        return self.pos >= len(self.rules)

    def peek(self):
        if self.atEnd():
            return None
        return self.rules[self.pos]

    def readAtom(self):
        start = self.pos
        while not self.atEnd() and _isAtomChar(self.rules[self.pos]):
            self.pos += 1
        return self.rules[start:self.pos]

    def error(self, message, offset=None):
        if offset is None:
            offset = self.pos
        return CipherRuleParseError(message, self.rules, offset)


def _parseCompound(scanner):
    """Parse item with optional operator and atoms joined by '+'"""
    operator = ""
    if scanner.peek() in OPERATORS:
        operator = scanner.peek()
        scanner.pos += 1
    atoms = []
    while True:
        atom = scanner.readAtom()
        if not atom:
            if not atoms and operator:
                raise scanner.error("Missing selector after '{0}'"
                                    .format(operator))
            elif not atoms:
                raise scanner.error("Invalid command")
            raise scanner.error("Empty selector")
        atoms.append(atom)
        if scanner.peek() != "+":
            break
        scanner.pos += 1
    return _ITEM_CLASSES[operator](atoms)


def _parseDirective(scanner):
    """Parse item starting with '@'"""
    start = scanner.pos
    scanner.pos += 1
    name = scanner.readAtom()
    if name != Strength.directive:
        raise scanner.error("Unknown directive \"@{0}\"".format(name), start)
    return Strength()


def _parseGroup(scanner):
    """Parse bracketed group of equally preferred suites"""
    start = scanner.pos
    scanner.pos += 1
    names = []
    while True:
        char = scanner.peek()
        if char is None:
            raise scanner.error("Missing close square bracket", start)
        if char == "[":
            raise scanner.error("Nested groups are not allowed")
        if char in OPERATORS or char == "@":
            raise scanner.error("Unexpected operator in group")
        name = scanner.readAtom()
        if not name:
            if char in "|]":
                raise scanner.error("Empty name in group")
            raise scanner.error("Invalid character in group")
        names.append(name)
        char = scanner.peek()
        if char == "]":
            scanner.pos += 1
            return Group(names)
        elif char == "|":
            scanner.pos += 1
        elif char is None or char in SEPARATORS:
            raise scanner.error("Missing close square bracket", start)
        elif char == "[":
            raise scanner.error("Nested groups are not allowed")
        elif char in OPERATORS or char == "@":
            raise scanner.error("Unexpected operator in group")
        else:
            raise scanner.error("Invalid character in group")


def parseCipherRules(rules):
    """
    Convert cipher rule string to list of rule items.

    Selectors are not resolved, unknown ones are returned like any other.

    :type rules: str
    :param rules: the rule string
    :rtype: list of RuleItem
    :raises CipherRuleParseError: when the string is malformed
    """
    scanner = _Scanner(rules)
    items = []
    groupOffset = None
    specialOffset = None
    while not scanner.atEnd():
        char = scanner.peek()
        if char in SEPARATORS:
            scanner.pos += 1
            continue

        start = scanner.pos
        if char == "[":
            item = _parseGroup(scanner)
            if groupOffset is None:
                groupOffset = start
        elif char == "]":
            raise scanner.error("Unexpected group close")
        elif char == "@":
            item = _parseDirective(scanner)
        elif char in OPERATORS or _isAtomChar(char):
            item = _parseCompound(scanner)
        else:
            raise scanner.error("Invalid command")

        if not isinstance(item, (Select, Group)) and specialOffset is None:
            specialOffset = start

        if not scanner.atEnd() and scanner.peek() not in SEPARATORS:
            if scanner.peek() == "]":
                raise scanner.error("Unexpected group close")
            raise scanner.error("Unexpected character after rule")
        items.append(item)

    if groupOffset is not None and specialOffset is not None:
        raise CipherRuleParseError("Special operators are not allowed "
                                   "together with groups", rules,
                                   max(groupOffset, specialOffset))

    logger.debug("Parsed cipher rules %r into %d items", rules, len(items))
    return items
