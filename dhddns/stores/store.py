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

"""Base class for dhddns record stores"""

import logging
# Note: We are not using abstractmethod the way it is intended. We are using it
# purely to get Sphinx to mark methods as abstract. Thus, we intentionally do
# NOT use ABCMeta or inherit from ABC.
from abc import abstractmethod
from typing import List

from ..records import AddressRecord


class RecordStore:
    """Base class for record stores. A record store lists, adds, and removes
    the A and AAAA records for one hostname at a DNS provider.

    :param name: Name of the record store
    :param hostname: The managed hostname
    """

    def __init__(self, name: str, hostname: str):
        #: Record store name
        self.name: str = name

        #: Logger (see standard :mod:`logging` module)
        self.log = logging.getLogger(f'dhddns.store.{self.name}')

        #: The hostname whose records are managed
        self.hostname: str = hostname

    @abstractmethod
    def list(self) -> List[AddressRecord]:
        """Fetch all A and AAAA records for the managed hostname. Every record
        returned must carry a remote handle.

        Malformed entries should be logged and left out, not treated as a
        failure.

        **Must be overridden by subclasses.**

        :raises ListError: if the records could not be fetched
        """
        raise NotImplementedError

    @abstractmethod
    def add(self, record: AddressRecord) -> None:
        """Add a record for the managed hostname. Any remote handle is ignored.

        **Must be overridden by subclasses.**

        :param record: The record to add
        :raises MutationError: if the record could not be added
        """
        raise NotImplementedError

    def remove(self, record: AddressRecord) -> None:
        """Remove a record previously returned by :meth:`list`.

        :param record: The record to remove
        :raises ValueError: if the record has no remote handle
        :raises MutationError: if the record could not be removed
        """
        if not record.is_remote:
            raise ValueError("Only records returned by list() can be "
                             "removed")
        self.remove_remote(record)

    @abstractmethod
    def remove_remote(self, record: AddressRecord) -> None:
        """Remove a record by its remote handle. Called by :meth:`remove` once
        it has checked the record has one.

        **Must be overridden by subclasses.**

        :param record: The record to remove
        :raises MutationError: if the record could not be removed
        """
        raise NotImplementedError
