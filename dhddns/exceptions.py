#  dhddns - Dynamic DNS Updater for DreamHost
#  Copyright (C) 2023 Dominick C. Pastore
#
#  This program is free software: you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation, either version 3 of the License, or
#  (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  You should have received a copy of the GNU General Public License
#  along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""All dhddns exceptions"""


class DHDDNSException(Exception):
    """Base class for all dhddns exceptions"""


class SetupError(DHDDNSException):
    """Base class for dhddns exceptions that happen during startup"""


class ConfigError(SetupError):
    """Raised when the configuration is malformed or has other errors"""


class CycleError(DHDDNSException):
    """Base class for errors that end an update cycle early. The manager
    counts the cycle as failed and backs off before trying again."""


class ResolutionError(CycleError):
    """Resolvers should raise when the current external address(es) could not
    be determined"""


class ListError(CycleError):
    """Record stores should raise when the current remote records could not be
    fetched"""


class MutationError(CycleError):
    """Record stores should raise when adding or removing a single record
    fails"""


class SafetyError(CycleError):
    """Raised when acting on the current state could destroy records that
    should be kept"""


class EmptyDesiredSet(SafetyError):
    """Raised by :func:`~dhddns.reconcile.reconcile` when there are no desired
    addresses. No address at all is treated as a lookup problem, never as a
    request to remove every record."""


class ParseError(DHDDNSException):
    """Raised when a single remote record entry is malformed. Record stores
    drop the entry and carry on."""
