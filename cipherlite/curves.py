# Authors:
#   cipherlite developers
#
# See the LICENSE file for legal information regarding use of this file.

"""Parser of lists of elliptic curves for the supported groups extension."""

from collections import namedtuple
import logging

import ecdsa

from .constants import GroupName
from .errors import MalformedCurveListError, UnknownCurveError

logger = logging.getLogger(__name__)


class NamedCurve(namedtuple('NamedCurve', ['groupId', 'name', 'aliases',
                                           'bitLength'])):
    """
    Curve that can be used in ECDHE key exchange.

    :vartype groupId: int
    :ivar groupId: identifier in the TLS supported groups registry

    :vartype name: str
    :ivar name: preferred name in curve lists

    :vartype aliases: tuple
    :ivar aliases: other accepted names of the curve

    :vartype bitLength: int
    :ivar bitLength: size of the curve order, in bits
    """

    __slots__ = ()


def _nistCurve(groupId, name, curve):
    """Describe NIST curve using the ecdsa module curve parameters"""
    aliases = [curve.openssl_name, GroupName.toRepr(groupId)]
    return NamedCurve(groupId, name,
                      tuple(sorted(set(alias for alias in aliases if alias))),
                      int(curve.order).bit_length())


#: curves that may be named in a curve list, in default preference order
CURVES = (
    NamedCurve(GroupName.x25519, "X25519", ("x25519",), 255),
    _nistCurve(GroupName.secp256r1, "P-256", ecdsa.NIST256p),
    _nistCurve(GroupName.secp384r1, "P-384", ecdsa.NIST384p),
    _nistCurve(GroupName.secp521r1, "P-521", ecdsa.NIST521p),
    _nistCurve(GroupName.secp224r1, "P-224", ecdsa.NIST224p),
    )

_BY_NAME = dict((name, curve) for curve in CURVES
                for name in (curve.name, ) + curve.aliases)


def getCurveByName(name):
    """Return curve with given name or alias, None if unknown"""
    return _BY_NAME.get(name)


def getCurve(groupId):
    """Return curve with given group identifier, None if unknown"""
    return next((curve for curve in CURVES if curve.groupId == groupId),
                None)


def parseCurvesList(curves):
    """
    Convert colon separated list of curve names to group identifiers.

    Unlike cipher rules, no name may be left unrecognised.

    :type curves: str
    :param curves: list of names, e.g. "X25519:P-256"
    :rtype: list of int
    :returns: group identifiers, in the order of the list
    :raises MalformedCurveListError: when the list or any name in it is empty
    :raises UnknownCurveError: when a name is not a supported curve
    """
    if not curves:
        raise MalformedCurveListError("Empty curve list")
    ret = []
    for position, name in enumerate(curves.split(":")):
        if not name:
            raise MalformedCurveListError("Empty curve name at position {0}"
                                          .format(position))
        curve = getCurveByName(name)
        if curve is None:
            raise UnknownCurveError(name)
        ret.append(curve.groupId)
    logger.debug("Curve list %r parsed to %r", curves, ret)
    return ret
