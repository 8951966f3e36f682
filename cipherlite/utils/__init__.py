# Authors:
#   cipherlite developers
#
# See the LICENSE file for legal information regarding use of this file.

"""Helper functions used by the other modules."""

__all__ = ["lists"]
