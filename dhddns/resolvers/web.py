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

"""dhddns resolver that checks the IP address using a what-is-my-ip-style
website"""

import ipaddress
from typing import List, Mapping, Type

import requests

from ..configuration import USER_AGENT
from ..exceptions import ResolutionError
from ..records import Address
from .resolver import AddressResolver


class WebResolver(AddressResolver):
    """dhddns resolver that checks the IP address using a what-is-my-ip-style
    website. The site must reply with just the address as plain text.

    Separate URLs are used for IPv4 and IPv6, since most such sites answer
    with whichever address family the connection happened to use."""

    def __init__(self, name: str, config: Mapping[str, str]):
        super().__init__(name, config)

        # URL to request the IPv4 address from
        self.url4 = config.get('url', 'https://api4.ipify.org')

        # URL to request the IPv6 address from
        self.url6 = config.get('url6', 'https://api6.ipify.org')

        # Timeout to use waiting for a response from the HTTP server, in
        # seconds
        self.timeout = self._timeout_option(config, 'timeout', '10')

    def _fetch(self, url: str,
               addr_class: Type[Address]) -> Address:
        """Fetch one address from the given URL

        :param url: The URL to fetch
        :param addr_class: :class:`~ipaddress.IPv4Address` or
                           :class:`~ipaddress.IPv6Address`
        :raises ResolutionError: if the request failed or the response was not
                                 a valid address
        """
        try:
            r = requests.get(url, timeout=self.timeout,
                             headers={'User-Agent': USER_AGENT})
        except requests.exceptions.RequestException as e:
            self.log.error("Could not get address from %s: %s", url, e)
            raise ResolutionError(f"Resolver {self.name} could not reach "
                                  f"{url}") from e

        try:
            r.raise_for_status()
        except requests.exceptions.HTTPError:
            self.log.error("Received HTTP %d from %s: %s",
                           r.status_code, url, r.text)
            raise ResolutionError(f"Resolver {self.name} got HTTP "
                                  f"{r.status_code} from {url}") from None

        try:
            return addr_class(r.text.strip())
        except ValueError:
            self.log.error('Response from %s did not contain valid address: '
                           '"%s"', url, r.text)
            raise ResolutionError(f"Resolver {self.name} got an invalid "
                                  f"address from {url}") from None

    def resolve(self) -> List[Address]:
        self.log.info("Checking IP addresses.")
        result: List[Address] = []
        if self.want_ipv4():
            result.append(self._fetch(self.url4, ipaddress.IPv4Address))
        if self.want_ipv6():
            result.append(self._fetch(self.url6, ipaddress.IPv6Address))
        return result
