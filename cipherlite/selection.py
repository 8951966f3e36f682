# Authors:
#   cipherlite developers
#
# See the LICENSE file for legal information regarding use of this file.

"""Compilation of cipher rule strings into cipher preference lists."""

import logging

from .aliases import PROTOCOL_FAMILIES, resolveAtom, resolveCompound, \
        matchingIds
from .catalog import CIPHER_SUITES, getCipherSuite, catalogIndex
from .constants import TLSEnum
from .errors import EmptyCipherListError
from .ruleparser import parseCipherRules, Select, Add, Remove, Delete, \
        Strength, Group

logger = logging.getLogger(__name__)


class SuiteStatus(TLSEnum):
    """State of a catalog entry during rule evaluation"""

    unused = 0
    active = 1
    excluded = 2


class CipherPreferenceList(object):
    """
    Ordered list of cipher suites with groups of equal preference.

    :vartype ciphers: list
    :ivar ciphers: wire values of the suites, most preferred first

    :vartype inGroupFlags: list
    :ivar inGroupFlags: for every suite, True when the next suite belongs
        to the same group of equally preferred suites
    """

    def __init__(self, ciphers, inGroupFlags):
        if len(ciphers) != len(inGroupFlags):
            raise ValueError("Every cipher needs an in group flag")
        self.ciphers = list(ciphers)
        self.inGroupFlags = list(inGroupFlags)

    def __len__(self):
        return len(self.ciphers)

    def __iter__(self):
        return iter(zip(self.ciphers, self.inGroupFlags))

    def __eq__(self, other):
        if not isinstance(other, CipherPreferenceList):
            return NotImplemented
        return self.ciphers == other.ciphers and \
            self.inGroupFlags == other.inGroupFlags

    def __ne__(self, other):
        ret = self.__eq__(other)
        if ret is NotImplemented:
            return ret
        return not ret

    def __repr__(self):
        return "CipherPreferenceList(ciphers=[{0}], inGroupFlags={1!r})"\
               .format(", ".join("0x{0:04x}".format(i) for i in self.ciphers),
                       self.inGroupFlags)

    @property
    def suites(self):
        """Catalog entries of the suites, in preference order"""
        return [getCipherSuite(i) for i in self.ciphers]

    def groups(self):
        """Return the suites split into lists of equally preferred ones"""
        ret = []
        current = []
        for cipherId, inGroup in self:
            current.append(cipherId)
            if not inGroup:
                ret.append(current)
                current = []
        return ret

    def describe(self):
        """Return multi-line text listing the suites, groups in brackets"""
        lines = []
        for group in self.groups():
            names = [getCipherSuite(i).name for i in group]
            if len(names) == 1:
                lines.append(names[0])
            else:
                lines.append("[")
                lines.extend("  " + name for name in names)
                lines.append("]")
        return "\n".join(lines)


class CipherSelector(object):
    """
    Working state of evaluation of one cipher rule string.

    All not deleted suites are kept in one ordered list, the active ones in
    it make up the result, the inactive ones are the order in which they
    will be picked up by later selections.

    :vartype family: str
    :ivar family: protocol family the rules are evaluated for
    """

    def __init__(self, family="tls"):
        if family not in PROTOCOL_FAMILIES:
            raise ValueError("Unknown protocol family: {0}".format(family))
        self.family = family
        self._order = list(range(len(CIPHER_SUITES)))
        self._status = [SuiteStatus.unused] * len(CIPHER_SUITES)
        self._group = [None] * len(CIPHER_SUITES)
        self._nextGroup = 0

    def _matching(self, ids, status=None):
        """Return indexes of suites in ids, in current order"""
        return [i for i in self._order
                if CIPHER_SUITES[i].id in ids and
                (status is None or self._status[i] == status)]

    def _moveToEnd(self, indexes):
        moved = set(indexes)
        self._order = [i for i in self._order if i not in moved] + \
            list(indexes)

    def _newGroup(self):
        group = self._nextGroup
        self._nextGroup += 1
        return group

    def select(self, ids):
        """Enable suites that are neither active nor deleted"""
        matched = self._matching(ids, SuiteStatus.unused)
        self._moveToEnd(matched)
        for i in matched:
            self._status[i] = SuiteStatus.active
            self._group[i] = self._newGroup()

    def add(self, ids):
        """Move active suites to the end, keeping their relative order"""
        self._moveToEnd(self._matching(ids, SuiteStatus.active))

    def remove(self, ids):
        """Deactivate suites, they will be the first ones to be reselected"""
        matched = self._matching(ids, SuiteStatus.active)
        moved = set(matched)
        self._order = matched + [i for i in self._order if i not in moved]
        for i in matched:
            self._status[i] = SuiteStatus.unused
            self._group[i] = None

    def delete(self, ids):
        """Deactivate suites and make sure they are never selected again"""
        matched = set(self._matching(ids))
        self._order = [i for i in self._order if i not in matched]
        for i in matched:
            self._status[i] = SuiteStatus.excluded
            self._group[i] = None

    def sortByStrength(self):
        """Stable sort of active suites, strongest cipher first"""
        active = [i for i in self._order
                  if self._status[i] == SuiteStatus.active]
        strengths = sorted(set(CIPHER_SUITES[i].strengthBits for i in active),
                           reverse=True)
        for bits in strengths:
            self.add(frozenset(CIPHER_SUITES[i].id for i in active
                               if CIPHER_SUITES[i].strengthBits == bits))

    def selectGroup(self, idSets):
        """
        Enable suites as a single group of equal preference.

        :type idSets: list of set
        :param idSets: suites selected by the names in the group, in order
            of names
        """
        matched = []
        for ids in idSets:
            matched.extend(i for i in self._matching(ids, SuiteStatus.unused)
                           if i not in matched)
        if not matched:
            return
        self._moveToEnd(matched)
        group = self._newGroup()
        for i in matched:
            self._status[i] = SuiteStatus.active
            self._group[i] = group

    def apply(self, item):
        """Execute single rule item"""
        if isinstance(item, Strength):
            self.sortByStrength()
        elif isinstance(item, Group):
            self.selectGroup([matchingIds(resolveAtom(name), self.family)
                              for name in item.atoms])
        else:
            ids = resolveCompound(item.atoms, self.family)
            if isinstance(item, Select):
                self.select(ids)
            elif isinstance(item, Add):
                self.add(ids)
            elif isinstance(item, Remove):
                self.remove(ids)
            elif isinstance(item, Delete):
                self.delete(ids)
            else:
                raise TypeError("Unknown rule item: {0!r}".format(item))

    def activeIds(self):
        """Return wire values of active suites, in order"""
        return [CIPHER_SUITES[i].id for i in self._order
                if self._status[i] == SuiteStatus.active]

    def isExcluded(self, cipherId):
        """Check if the suite was deleted, KeyError for unknown suites"""
        return self._status[catalogIndex(cipherId)] == SuiteStatus.excluded

    def result(self):
        """
        Return the compiled preference list.

        :rtype: CipherPreferenceList
        :raises EmptyCipherListError: when no suite is active
        """
        active = [i for i in self._order
                  if self._status[i] == SuiteStatus.active]
        if not active:
            raise EmptyCipherListError("No cipher suites selected")
        flags = [self._group[cur] == self._group[nxt]
                 for cur, nxt in zip(active, active[1:])]
        flags.append(False)
        return CipherPreferenceList([CIPHER_SUITES[i].id for i in active],
                                    flags)


def createCipherPreferenceList(rules, family="tls"):
    """
    Compile cipher rule string.

    :type rules: str
    :param rules: the rule string, see :py:mod:`cipherlite.ruleparser`
    :type family: str
    :param family: protocol family, "tls" or "dtls"
    :rtype: CipherPreferenceList
    :raises CipherRuleParseError: when the rule string is malformed
    :raises EmptyCipherListError: when the rules select no suites
    :raises ValueError: when the protocol family is unknown
    """
    selector = CipherSelector(family)
    for item in parseCipherRules(rules):
        selector.apply(item)
    ret = selector.result()
    logger.debug("Cipher rules %r selected %d suites in %d groups",
                 rules, len(ret), len(ret.groups()))
    return ret
