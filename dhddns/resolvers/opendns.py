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

"""dhddns resolver that asks OpenDNS for this host's address"""

import ipaddress
from typing import List, Mapping

import dns.exception    # type: ignore
import dns.resolver     # type: ignore

from ..exceptions import ConfigError, ResolutionError
from ..records import Address
from .resolver import AddressResolver


DEFAULT_NAMESERVERS4 = '208.67.222.222 208.67.220.220'
DEFAULT_NAMESERVERS6 = '2620:119:35::35 2620:119:53::53'
DEFAULT_LOOKUP_NAME = 'myip.opendns.com'


class OpenDNSResolver(AddressResolver):
    """Resolver that looks up ``myip.opendns.com`` directly on the OpenDNS
    nameservers, which answer with the address the query came from.

    Because of that, the A query has to go to IPv4 nameservers and the AAAA
    query to IPv6 nameservers.

    :param name: Name of the resolver
    :param config: Dict of config options for this resolver
    """

    def __init__(self, name: str, config: Mapping[str, str]):
        super().__init__(name, config)

        self.nameservers4 = self._nameservers_option(
            config, 'nameservers4', DEFAULT_NAMESERVERS4, 4)
        self.nameservers6 = self._nameservers_option(
            config, 'nameservers6', DEFAULT_NAMESERVERS6, 6)
        self.lookup_name = config.get('lookup_name', DEFAULT_LOOKUP_NAME)
        self.timeout = self._timeout_option(config, 'timeout', '10')

    def _nameservers_option(self, config: Mapping[str, str], key: str,
                            default: str, version: int) -> List[str]:
        """Read a whitespace-separated list of nameserver addresses of the
        given IP version"""
        nameservers = config.get(key, default).split()
        for ns in nameservers:
            try:
                addr = ipaddress.ip_address(ns)
            except ValueError:
                addr = None
            if addr is None or addr.version != version:
                self.log.critical("'%s' config option must be a list of IPv%d "
                                  "addresses", key, version)
                raise ConfigError(f"'{key}' option for {self.name} resolver "
                                  f"must be a list of IPv{version} addresses")
        return nameservers

    def _query(self, nameservers: List[str], rdtype: str) -> List[Address]:
        """Query the lookup name on the given nameservers

        :param nameservers: Nameserver addresses to query
        :param rdtype: ``'A'`` or ``'AAAA'``
        :raises ResolutionError: if the query failed
        :return: The addresses in the answer, empty if there were none
        """
        if not nameservers:
            self.log.error("No nameservers configured for %s lookup",
                           rdtype)
            raise ResolutionError(f"Resolver {self.name} has no nameservers "
                                  f"for {rdtype} lookups")

        resolver = dns.resolver.Resolver(configure=False)
        resolver.nameservers = nameservers
        resolver.lifetime = self.timeout
        self.log.debug("Looking up %s record(s) for '%s' on %s", rdtype,
                       self.lookup_name, nameservers)
        try:
            answer = resolver.resolve(self.lookup_name, rdtype)
        except dns.resolver.NoAnswer:
            self.log.info("No %s record for '%s'", rdtype, self.lookup_name)
            return []
        except (OSError, dns.exception.DNSException) as e:
            self.log.error("Could not look up %s record(s) for '%s': %s",
                           rdtype, self.lookup_name, e)
            raise ResolutionError(f"Resolver {self.name} could not look up "
                                  f"{rdtype} for {self.lookup_name}") from e

        try:
            addrs = [ipaddress.ip_address(rec.address) for rec in answer]
        except (AttributeError, ValueError) as e:
            self.log.error("Invalid %s answer for '%s': %s", rdtype,
                           self.lookup_name, e)
            raise ResolutionError(f"Resolver {self.name} got an invalid "
                                  f"{rdtype} answer") from e
        self.log.debug("Found following address(es): %s",
                       str([addr.compressed for addr in addrs]))
        return addrs

    def resolve(self) -> List[Address]:
        self.log.info("Checking IP addresses.")
        result: List[Address] = []
        if self.want_ipv4():
            result.extend(self._query(self.nameservers4, 'A'))
        if self.want_ipv6():
            result.extend(self._query(self.nameservers6, 'AAAA'))
        return result
