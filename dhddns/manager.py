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

"""DDNS Manager: Runs the update cycle and paces it"""

import logging
import threading
from typing import Optional

from . import configuration
from .backoff import BackoffScheduler
from .exceptions import (EmptyDesiredSet, ListError, MutationError,
                         ResolutionError)
from .reconcile import desired_records, only_kinds, reconcile
from .records import ReconciliationPlan
from .resolvers import AddressResolver, create_resolver
from .stores import RecordStore
from .stores.dreamhost import DreamHostStore


class DDNSManager:
    """Keeps the managed hostname's records in sync with this host's current
    addresses. Each cycle looks up the current addresses, fetches the current
    records, and adds and removes records until they match. Cycles repeat until
    :meth:`stop` is called, spaced out by a :class:`~dhddns.BackoffScheduler`.

    :param config: A :class:`~dhddns.Config` with the configuration to use
    :param resolver: The :class:`~dhddns.AddressResolver` to use. Created from
                     the config if not provided.
    :param store: The :class:`~dhddns.RecordStore` to use. Defaults to
                  DreamHost.

    :raises ConfigError: if the resolver configuration is not valid
    """

    def __init__(self, config: configuration.Config,
                 resolver: Optional[AddressResolver] = None,
                 store: Optional[RecordStore] = None):
        self.log = logging.getLogger('dhddns')
        self.config = config

        if resolver is None:
            resolver = create_resolver(config.resolver)
        self.resolver: AddressResolver = resolver

        if store is None:
            store = DreamHostStore(config)
        self.store: RecordStore = store

        self.scheduler = BackoffScheduler(config.min_sleep, config.max_sleep)

        # Set to end the loop. _wakeup ends the current wait early.
        self._stopping = threading.Event()
        self._wakeup = threading.Event()

    def heartbeat(self) -> bool:
        """Do a single update cycle. Errors are logged, not raised.

        :return: ``True`` if the records are now up to date, ``False`` if the
                 cycle failed
        """
        kinds = self.config.managed_kinds

        try:
            addresses = self.resolver.resolve()
        except ResolutionError as e:
            self.log.error("Error resolving current IP: %s", e)
            return False
        desired = desired_records(addresses, kinds)

        try:
            remote = only_kinds(self.store.list(), kinds)
        except ListError as e:
            self.log.error("Error fetching current records: %s", e)
            return False

        try:
            plan = reconcile(desired, remote)
        except EmptyDesiredSet:
            self.log.error("Got 0 IP addresses from resolver %s; leaving "
                           "records alone", self.resolver.name)
            return False

        return self.execute_plan(plan)

    def execute_plan(self, plan: ReconciliationPlan) -> bool:
        """Carry out a plan: removals first (freeing up room for new records
        at the provider), then additions.

        A failed removal is logged and skipped. A failed addition ends the
        cycle; whatever is left will be worked out again next cycle.

        :param plan: The plan from :func:`~dhddns.reconcile.reconcile`
        :return: ``True`` if all additions succeeded
        """
        if plan.is_noop:
            self.log.info("Records for %s are up to date.",
                          self.config.hostname)
            return True

        for record in plan.to_remove:
            try:
                self.store.remove(record)
            except MutationError as e:
                self.log.error("Error removing record %s: %s. Continuing.",
                               record, e)
            else:
                self.log.info("Removed record %s", record)

        for record in plan.to_add:
            try:
                self.store.add(record)
            except MutationError as e:
                self.log.error("Error adding record %s: %s. Will try again "
                               "next cycle.", record, e)
                return False
            self.log.info("Added record %s", record)

        return True

    def run(self):
        """Run update cycles until :meth:`stop` is called"""
        self.log.info("Starting updates for %s", self.config.hostname)
        while not self._stopping.is_set():
            succeeded = self.heartbeat()
            delay = self.scheduler.record(succeeded)
            if self._stopping.is_set():
                break
            self.log.debug("Next check in %d secs (last cycle %s)", delay,
                           "succeeded" if succeeded else "failed")
            self._wakeup.wait(delay)
            self._wakeup.clear()
        self.log.info("Updates stopped.")

    def check_now(self):
        """End the current wait early so the next cycle starts right away.
        Safe to call from a signal handler."""
        self.log.info("Checking immediately")
        self._wakeup.set()

    def stop(self):
        """Make :meth:`run` return once the current cycle (if any) finishes.
        Safe to call from a signal handler."""
        self.log.info("Stopping updates...")
        self._stopping.set()
        self._wakeup.set()
