# Authors:
#   cipherlite developers
#
# See the LICENSE file for legal information regarding use of this file.

"""Exception classes."""


class BaseTLSException(Exception):
    """
    Metaclass for cipherlite exceptions.

    Look to :py:class:`cipherlite.errors.TLSError` for exceptions that should
    be caught by cipherlite consumers
    """

    pass


class TLSError(BaseTLSException):
    """Base class for all cipherlite exceptions."""

    def __str__(self):
        """At least print out the Exception time for str(...)."""
        return repr(self)


class TLSConfigurationError(TLSError, ValueError):
    """
    A configuration string could not be turned into settings.

    Raised before any state is changed, the previous configuration (if any)
    stays in effect.
    """

    def __str__(self):
        if self.args:
            return str(self.args[0])
        return repr(self)


class CipherRuleParseError(TLSConfigurationError):
    """
    The cipher rule string is malformed.

    :vartype rule: str
    :ivar rule: the complete rule string that failed to parse

    :vartype offset: int
    :ivar offset: position in the rule string where the error was detected
    """

    def __init__(self, message, rule=None, offset=None):
        TLSConfigurationError.__init__(self, message)
        self.rule = rule
        self.offset = offset

    def __str__(self):
        if self.rule is None or self.offset is None:
            return TLSConfigurationError.__str__(self)
        return "{0} at offset {1} in \"{2}\"".format(self.args[0],
                                                     self.offset,
                                                     self.rule)


class EmptyCipherListError(TLSConfigurationError):
    """The cipher rule string is valid but selects no cipher suites."""

    pass


class CurveListError(TLSConfigurationError):
    """Base class for errors in lists of elliptic curves."""

    pass


class MalformedCurveListError(CurveListError):
    """The curve list is empty or contains an empty name."""

    pass


class UnknownCurveError(CurveListError):
    """
    The curve list names a curve that is not supported.

    :vartype name: str
    :ivar name: the name that was not recognised
    """

    def __init__(self, name):
        CurveListError.__init__(self, "Unknown curve name: \"{0}\""
                                      .format(name))
        self.name = name
