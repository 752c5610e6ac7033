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

"""Computing the changes that bring remote records in line with the current
addresses"""

from typing import Iterable, List, Collection

from .exceptions import EmptyDesiredSet
from .records import Address, AddressRecord, RecordKind, ReconciliationPlan


def desired_records(
    addresses: Iterable[Address],
    kinds: Collection[RecordKind] = (RecordKind.A, RecordKind.AAAA),
) -> List[AddressRecord]:
    """Build the desired records for a set of resolved addresses. Duplicate
    addresses produce duplicate records.

    :param addresses: The addresses returned by a resolver
    :param kinds: The record kinds being managed. Addresses needing any other
                  kind are left out.
    :return: A list of :class:`~dhddns.records.AddressRecord` with no remote
             handles
    """
    records = (AddressRecord.from_address(addr) for addr in addresses)
    return [rec for rec in records if rec.kind in kinds]


def only_kinds(
    records: Iterable[AddressRecord],
    kinds: Collection[RecordKind],
) -> List[AddressRecord]:
    """Filter records down to the given kinds"""
    return [rec for rec in records if rec.kind in kinds]


def reconcile(
    desired: Iterable[AddressRecord],
    remote: Iterable[AddressRecord],
) -> ReconciliationPlan:
    """Work out which remote records to remove and which desired records to
    add.

    Both arguments are treated as bags: each remote record is paired off
    against at most one equal desired record. If the same address is desired
    twice but present remotely once, one copy is left over to be added (and
    likewise, a remote duplicate left over is removed).

    Neither argument is modified.

    :param desired: Records for the current addresses
    :param remote: Records currently held by the record store
    :raises EmptyDesiredSet: if ``desired`` is empty. An empty desired set
                             would otherwise mean removing every record.
    :return: The :class:`~dhddns.records.ReconciliationPlan`
    """
    unmatched = list(desired)
    if not unmatched:
        raise EmptyDesiredSet("No desired addresses; refusing to remove all "
                              "records")

    to_remove = []
    for record in remote:
        try:
            # Consumes exactly one equal (kind, value) record
            unmatched.remove(record)
        except ValueError:
            to_remove.append(record)

    return ReconciliationPlan(to_remove=to_remove, to_add=unmatched)
