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

"""Pacing of update cycles"""

from .exceptions import ConfigError


def next_delay(previous_delay: float, succeeded: bool,
               min_delay: float, max_delay: float) -> float:
    """Compute the delay before the next cycle.

    After a success, the delay resets to ``min_delay``. After a failure, it
    grows by ``min_delay`` each time, up to ``max_delay``.

    :param previous_delay: The delay used after the previous cycle (0 before
                           the first cycle)
    :param succeeded: Whether the cycle that just finished succeeded
    :param min_delay: The normal polling interval
    :param max_delay: The largest delay allowed
    :return: Seconds to wait before the next cycle
    """
    if succeeded:
        return min_delay
    return min(previous_delay + min_delay, max_delay)


class BackoffScheduler:
    """Keeps the delay between cycles, which lasts as long as the process does

    :param min_delay: Delay after a successful cycle, and the step added after
                      each failure, in seconds
    :param max_delay: Maximum delay in seconds

    :raises ConfigError: if ``min_delay`` is not positive or ``max_delay`` is
                         less than ``min_delay``
    """

    def __init__(self, min_delay: float, max_delay: float):
        if min_delay <= 0:
            raise ConfigError("Minimum delay must be greater than zero")
        if max_delay < min_delay:
            raise ConfigError("Maximum delay cannot be less than the minimum "
                              "delay")
        self.min_delay = min_delay
        self.max_delay = max_delay

        #: Delay computed after the most recent cycle
        self.last_delay: float = 0

    def record(self, succeeded: bool) -> float:
        """Record the outcome of a cycle and get the delay until the next one

        :param succeeded: Whether the cycle succeeded
        :return: Seconds to wait
        """
        self.last_delay = next_delay(self.last_delay, succeeded,
                                     self.min_delay, self.max_delay)
        return self.last_delay
