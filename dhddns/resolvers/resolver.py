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

"""Base class for dhddns resolvers"""

import logging
# Note: We are not using abstractmethod the way it is intended. We are using it
# purely to get Sphinx to mark methods as abstract. Thus, we intentionally do
# NOT use ABCMeta or inherit from ABC.
from abc import abstractmethod
from typing import List, Mapping

from ..configuration import parse_bool, parse_number
from ..exceptions import ConfigError
from ..records import Address


class AddressResolver:
    """Base class for all dhddns resolvers. A resolver finds the externally
    visible address(es) of this host. Sets up the logger and reads the options
    common to all resolvers.

    :param name: Name of the resolver (usually its type)
    :param config: Dict of config options for this resolver

    :raises ConfigError: if the configuration is invalid
    """

    def __init__(self, name: str, config: Mapping[str, str]):
        #: Resolver name
        self.name: str = name

        #: Logger (see standard :mod:`logging` module)
        self.log = logging.getLogger(f'dhddns.resolver.{self.name}')

        # - ipv4: default true
        #   Look up the current IPv4 address(es)
        #
        # - ipv6: default false
        #   Look up the current IPv6 address(es). Off by default since IPv6
        #   support in networks generally isn't universal.
        try:
            self._ipv4: bool = parse_bool('ipv4', config.get('ipv4', 'true'))
            self._ipv6: bool = parse_bool('ipv6', config.get('ipv6', 'false'))
        except ConfigError:
            self.log.critical("'ipv4' and 'ipv6' must be boolean "
                              "(true/yes/on/1/false/no/off/0)")
            raise

        if not (self._ipv4 or self._ipv6):
            self.log.critical("Cannot skip both IPv4 and IPv6")
            raise ConfigError(f"Resolver {self.name} cannot skip both IPv4 "
                              "and IPv6")

    def want_ipv4(self) -> bool:
        """Whether to look up IPv4 addresses"""
        return self._ipv4

    def want_ipv6(self) -> bool:
        """Whether to look up IPv6 addresses"""
        return self._ipv6

    def _timeout_option(self, config: Mapping[str, str], key: str,
                        default: str) -> float:
        """Read a timeout option in seconds, logging if it is invalid"""
        try:
            return parse_number(key, config.get(key, default))
        except ConfigError:
            self.log.critical("'%s' config option must be a number > 0", key)
            raise

    @abstractmethod
    def resolve(self) -> List[Address]:
        """Look up the current external addresses of this host, for each
        wanted address family.

        An empty result is not an error here; it is up to the caller to decide
        what no addresses means. If the lookup for any wanted family fails,
        the whole lookup fails, since a partial result could get the other
        family's records removed.

        **Must be overridden by subclasses.**

        :raises ResolutionError: if the addresses could not be determined
        :return: The addresses found (possibly with duplicates)
        """
        raise NotImplementedError
