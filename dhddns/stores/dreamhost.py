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

"""dhddns record store for the DreamHost DNS API"""

import ipaddress
from json import JSONDecodeError
from typing import Any, Dict, List, Type

import requests

from ..configuration import Config, USER_AGENT
from ..exceptions import CycleError, ListError, MutationError, ParseError
from ..records import AddressRecord, RecordKind
from .store import RecordStore


API_ENDPOINT = 'https://api.dreamhost.com/'


class DreamHostStore(RecordStore):
    """dhddns record store for the DreamHost DNS API
    (https://help.dreamhost.com/hc/en-us/articles/217555707-DNS-API-commands)

    :param config: The dhddns :class:`~dhddns.Config`
    """

    def __init__(self, config: Config):
        super().__init__('dreamhost', config.hostname)

        # DreamHost API key, from the web panel. Needs the dns-* permissions.
        self.key: str = config.key

        # Normally not required, but can be pointed elsewhere for testing
        self.endpoint: str = config.endpoint or API_ENDPOINT

        self.timeout: float = config.timeout

    def _api_request(self, cmd: str, error_class: Type[CycleError],
                     **params: str) -> Any:
        """Issue a DreamHost API request and return its ``data`` field

        :param cmd: The API command, e.g. ``'dns-list_records'``
        :param error_class: The exception to raise on failure
        :param params: Additional URL parameters for the command

        :raises error_class: if the request failed or the result was not
                             ``success``
        """
        query = {'key': self.key, 'cmd': cmd, 'format': 'json'}
        query.update(params)
        try:
            r = requests.get(self.endpoint, params=query,
                             headers={'User-Agent': USER_AGENT},
                             timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            self.log.error("Could not send %s request: %s", cmd, e)
            raise error_class(f"Could not send {cmd} request") from e

        try:
            r.raise_for_status()
        except requests.exceptions.HTTPError:
            self.log.error("Received HTTP %d for %s request:\n%s",
                           r.status_code, cmd, r.text)
            raise error_class(f"Got HTTP {r.status_code} for {cmd} "
                              "request") from None

        try:
            obj = r.json()
        except (JSONDecodeError, ValueError):
            self.log.error("Could not parse JSON response for %s request:\n%s",
                           cmd, r.text)
            raise error_class(f"Invalid JSON response for {cmd} "
                              "request") from None

        if not isinstance(obj, dict) or obj.get('result') != 'success':
            data = obj.get('data') if isinstance(obj, dict) else obj
            self.log.error("Error from %s request: %s", cmd, data)
            raise error_class(f"Non-success result for {cmd} request")
        return obj.get('data')

    def _parse_entry(self, entry: Dict[str, Any]) -> AddressRecord:
        """Convert one entry from ``dns-list_records`` into a record. The
        entry's value string becomes the remote handle as-is, since DreamHost
        only deletes a record when given exactly the same string.

        :raises ParseError: if the entry is malformed
        """
        try:
            kind = RecordKind(entry['type'])
        except ValueError:
            raise ParseError(f"unexpected record type {entry['type']!r}") \
                from None

        value = entry.get('value')
        if not isinstance(value, str):
            raise ParseError(f"{kind} record value {value!r} is not a string")

        try:
            address = ipaddress.ip_address(value)
        except ValueError:
            raise ParseError(f"{kind} record value {value!r} is not an IP "
                             "address") from None

        try:
            return AddressRecord(kind, address, remote_handle=value)
        except ValueError as e:
            raise ParseError(str(e)) from None

    def list(self) -> List[AddressRecord]:
        self.log.debug("Fetching records for %s", self.hostname)
        data = self._api_request('dns-list_records', ListError)
        if not isinstance(data, list):
            self.log.error("'data' field in dns-list_records response was not "
                           "a list:\n%s", data)
            raise ListError("Unknown response structure from "
                            "dns-list_records")

        records = []
        for entry in data:
            if not isinstance(entry, dict):
                self.log.error("Skipping record entry that is not an "
                               "object: %r", entry)
                continue
            record_name = entry.get('record')
            if (not isinstance(record_name, str) or
                    record_name.lower().rstrip('.') != self.hostname):
                continue
            if entry.get('type') not in ('A', 'AAAA'):
                continue
            try:
                records.append(self._parse_entry(entry))
            except ParseError as e:
                self.log.error("Skipping malformed record for %s: %s",
                               self.hostname, e)
        self.log.debug("Found records: %s", [str(rec) for rec in records])
        return records

    def add(self, record: AddressRecord) -> None:
        self._api_request('dns-add_record', MutationError,
                          record=self.hostname,
                          type=str(record.kind),
                          value=record.value.compressed)
        self.log.info("Added %s record for %s", record, self.hostname)

    def remove_remote(self, record: AddressRecord) -> None:
        self._api_request('dns-remove_record', MutationError,
                          record=self.hostname,
                          type=str(record.kind),
                          value=record.remote_handle)
        self.log.info("Removed %s record for %s", record, self.hostname)
