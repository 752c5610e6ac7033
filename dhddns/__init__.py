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

"""dhddns, a dynamic DNS updater for DreamHost

Top-level module, containing classes and objects useful to custom resolvers
and record stores.
"""

from .backoff import BackoffScheduler, next_delay
from .configuration import Config, read_file, read_file_from_path
from .exceptions import (DHDDNSException, SetupError, ConfigError, CycleError,
                         ResolutionError, ListError, MutationError,
                         SafetyError, EmptyDesiredSet, ParseError)
from .manager import DDNSManager
from .reconcile import desired_records, reconcile
from .records import AddressRecord, RecordKind, ReconciliationPlan
from .resolvers import AddressResolver
from .stores import RecordStore
