"""Test doubles for use in test classes and fixtures"""
import ipaddress
import itertools
from typing import List, Optional, Set, Tuple

import dhddns
from dhddns import AddressRecord, ListError, MutationError, ResolutionError


def addr(text):
    """Shorthand for :func:`ipaddress.ip_address`"""
    return ipaddress.ip_address(text)


def desired(text):
    """Shorthand for a desired record (no remote handle)"""
    return AddressRecord.from_address(addr(text))


def remote(text, handle=None):
    """Shorthand for a remote record. The handle defaults to the address text
    exactly as given."""
    address = addr(text)
    return AddressRecord(dhddns.RecordKind.of(address), address,
                         remote_handle=text if handle is None else handle)


class FakeResolver(dhddns.AddressResolver):
    """Resolver whose lookups return a predetermined sequence of results.
    Each result is a list of address strings, or an exception to raise."""

    def __init__(self, name='fake', config=None, results=None):
        if config is None:
            config = {'ipv4': 'true', 'ipv6': 'true'}
        super().__init__(name, config)
        if results is None:
            self.results = itertools.repeat(['1.2.3.4'])
        else:
            self.results = iter(results)
        self.resolve_count = 0

    def resolve(self):
        self.resolve_count += 1
        result = next(self.results)
        if isinstance(result, Exception):
            raise result
        return [addr(a) for a in result]


class MockRecordStore(dhddns.RecordStore):
    """In-memory record store that tracks calls and fails on request

    :param records: Initial remote records, as ``(address, handle)`` tuples or
                    plain address strings
    :param list_errors: Sequence of booleans; ``True`` makes that call to
                        :meth:`list` raise :exc:`ListError`
    :param add_errors: Addresses whose addition raises :exc:`MutationError`
    :param remove_errors: Handles whose removal raises :exc:`MutationError`
    """

    def __init__(self, records=None, list_errors=None, add_errors=None,
                 remove_errors=None, hostname='home.example.com'):
        super().__init__('mock', hostname)
        self.records: List[AddressRecord] = []
        for rec in records or []:
            if isinstance(rec, tuple):
                self.records.append(remote(*rec))
            else:
                self.records.append(remote(rec))

        if list_errors is None:
            self.list_errors = itertools.repeat(False)
        else:
            self.list_errors = iter(list_errors)
        self.add_errors: Set[str] = set(add_errors or [])
        self.remove_errors: Set[str] = set(remove_errors or [])

        #: Every call in order, as (method, record or None)
        self.calls: List[Tuple[str, Optional[AddressRecord]]] = []

    @property
    def added(self):
        return [rec for call, rec in self.calls if call == 'add']

    @property
    def removed(self):
        return [rec for call, rec in self.calls if call == 'remove']

    def list(self):
        self.calls.append(('list', None))
        if next(self.list_errors):
            raise ListError("mock list failure")
        return list(self.records)

    def add(self, record):
        self.calls.append(('add', record))
        if record.value.compressed in self.add_errors:
            raise MutationError("mock add failure")
        # Remote side renders addresses its own way
        self.records.append(AddressRecord(record.kind, record.value,
                                          record.value.exploded))

    def remove_remote(self, record):
        self.calls.append(('remove', record))
        if record.remote_handle in self.remove_errors:
            raise MutationError("mock remove failure")
        for i, rec in enumerate(self.records):
            if rec.remote_handle == record.remote_handle:
                del self.records[i]
                return
        raise MutationError("no such record")


def failing_resolver(message="mock resolution failure"):
    """A :class:`FakeResolver` that always fails"""
    return FakeResolver(results=itertools.repeat(ResolutionError(message)))
