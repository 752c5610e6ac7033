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

"""Address records and the plans built from them"""

import enum
import ipaddress
from dataclasses import dataclass, field
from typing import List, Union


Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


class RecordKind(enum.Enum):
    """The kinds of DNS record dhddns manages"""
    A = "A"
    AAAA = "AAAA"

    def __str__(self):
        return self.value

    @classmethod
    def of(cls, address: Address) -> 'RecordKind':
        """Get the record kind that holds the given address

        :param address: An :class:`~ipaddress.IPv4Address` or
                        :class:`~ipaddress.IPv6Address`
        :return: :attr:`A` for IPv4, :attr:`AAAA` for IPv6
        """
        if address.version == 4:
            return cls.A
        return cls.AAAA


@dataclass(frozen=True)
class AddressRecord:
    """One A or AAAA record for the managed hostname.

    Two records are equal when their kind and parsed address are equal. The
    ``remote_handle`` is not compared: it is the remote authority's own text
    for the address (e.g. an unabbreviated IPv6 literal), which is what it
    requires to delete that exact record. Records built locally from resolved
    addresses have an empty ``remote_handle`` and can never be removed.
    """

    kind: RecordKind
    value: Address
    remote_handle: str = field(default='', compare=False)

    def __post_init__(self):
        if RecordKind.of(self.value) is not self.kind:
            raise ValueError(f"{self.kind} record cannot hold address "
                             f"{self.value}")

    @classmethod
    def from_address(cls, address: Address) -> 'AddressRecord':
        """Create a (desired) record for the given address, with no remote
        handle"""
        return cls(RecordKind.of(address), address)

    @property
    def is_remote(self) -> bool:
        """Whether this record came from the record store (and so can be
        removed)"""
        return self.remote_handle != ''

    def __str__(self):
        return f"{self.kind} {self.value.compressed}"


@dataclass
class ReconciliationPlan:
    """The changes needed to bring the remote records in line with the desired
    ones. Removals should be carried out before additions."""

    #: Remote records that no longer match a desired address
    to_remove: List[AddressRecord] = field(default_factory=list)

    #: Desired records with no matching remote record
    to_add: List[AddressRecord] = field(default_factory=list)

    @property
    def is_noop(self) -> bool:
        """``True`` if the remote records are already up to date"""
        return not self.to_remove and not self.to_add
