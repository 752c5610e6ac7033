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

"""dhddns configuration parsing"""

import configparser
import pathlib
import sys
import types
from typing import Dict, Mapping, Optional, TextIO, Tuple, Union

if sys.version_info < (3, 10):
    from importlib_metadata import version
else:
    from importlib.metadata import version

from .exceptions import ConfigError
from .records import RecordKind


USER_AGENT = f"dhddns/{version('dhddns')}"

DEFAULT_MIN_SLEEP = 40
DEFAULT_MAX_SLEEP = 1800
DEFAULT_TIMEOUT = 30.0
DEFAULT_RESOLVER = 'opendns'
DEFAULT_LOGFILE = 'syslog'

_TRUE = ('true', 'on', 'yes', '1')
_FALSE = ('false', 'off', 'no', '0')


def parse_bool(name: str, value: str) -> bool:
    """Parse a boolean config option

    :param name: The option name, for the error message
    :param value: The raw value
    :raises ConfigError: if the value is not a recognized boolean
    """
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigError(f"'{name}' option must be boolean "
                      "(true/yes/on/1/false/no/off/0)")


def parse_number(name: str, value: str, minimum: float = 0) -> float:
    """Parse a numeric config option that must be greater than ``minimum``

    :param name: The option name, for the error message
    :param value: The raw value
    :param minimum: Exclusive lower bound
    :raises ConfigError: if the value is not a number or is too small
    """
    try:
        number = float(value)
    except ValueError:
        raise ConfigError(f"'{name}' option must be a number") from None
    if number <= minimum:
        raise ConfigError(f"'{name}' option must be greater than {minimum:g}")
    return number


class Config:
    """dhddns configuration data. Validated when created and read-only after
    that.

    :param main: Global options (the ``[dhddns]`` section plus command line
                 overrides)
    :param resolver: Resolver options (the ``[resolver]`` section)

    :raises ConfigError: if the configuration is invalid
    """

    def __init__(self,
                 main: Mapping[str, str],
                 resolver: Optional[Mapping[str, str]] = None):
        main = dict(main)
        resolver = dict(resolver) if resolver is not None else dict()

        try:
            self._hostname: str = main['hostname'].strip().lower().rstrip('.')
        except KeyError:
            raise ConfigError("'hostname' option is required") from None
        if not self._hostname:
            raise ConfigError("'hostname' option cannot be empty")

        try:
            self._key: str = main['key'].strip()
        except KeyError:
            raise ConfigError("'key' option is required") from None
        if not self._key:
            raise ConfigError("'key' option cannot be empty")

        self._min_sleep = parse_number(
            'min_sleep', main.get('min_sleep', str(DEFAULT_MIN_SLEEP)))
        self._max_sleep = parse_number(
            'max_sleep', main.get('max_sleep', str(DEFAULT_MAX_SLEEP)))
        if self._max_sleep < self._min_sleep:
            raise ConfigError("'max_sleep' option cannot be less than "
                              "'min_sleep'")

        self._timeout = parse_number(
            'timeout', main.get('timeout', str(DEFAULT_TIMEOUT)))

        self._ipv4 = parse_bool('ipv4', main.get('ipv4', 'true'))
        self._ipv6 = parse_bool('ipv6', main.get('ipv6', 'false'))
        if not (self._ipv4 or self._ipv6):
            raise ConfigError("At least one of 'ipv4' and 'ipv6' must be "
                              "enabled")

        self._endpoint: Optional[str] = main.get('endpoint') or None
        self._logfile: str = main.get('logfile', DEFAULT_LOGFILE)

        # The resolver needs to know which address families to look up
        resolver.setdefault('type', DEFAULT_RESOLVER)
        resolver['ipv4'] = 'true' if self._ipv4 else 'false'
        resolver['ipv6'] = 'true' if self._ipv6 else 'false'
        self._resolver = types.MappingProxyType(resolver)

    @property
    def hostname(self) -> str:
        """The hostname whose records are managed"""
        return self._hostname

    @property
    def key(self) -> str:
        """DreamHost API key"""
        return self._key

    @property
    def min_sleep(self) -> float:
        return self._min_sleep

    @property
    def max_sleep(self) -> float:
        return self._max_sleep

    @property
    def timeout(self) -> float:
        """Timeout for record store requests, in seconds"""
        return self._timeout

    @property
    def endpoint(self) -> Optional[str]:
        """Record store API endpoint override, or ``None`` for the default"""
        return self._endpoint

    @property
    def logfile(self) -> str:
        """``'syslog'``, ``'stderr'``, or a path"""
        return self._logfile

    @property
    def managed_kinds(self) -> Tuple[RecordKind, ...]:
        """The record kinds to keep updated. Records of other kinds are left
        alone."""
        kinds = []
        if self._ipv4:
            kinds.append(RecordKind.A)
        if self._ipv6:
            kinds.append(RecordKind.AAAA)
        return tuple(kinds)

    @property
    def resolver(self) -> Mapping[str, str]:
        """Options for the resolver, including its ``type`` and the global
        ``ipv4``/``ipv6`` options"""
        return self._resolver


def _process_config(config: configparser.ConfigParser,
                    overrides: Optional[Mapping[str, str]]) -> Config:
    """Process the given :class:`~configparser.ConfigParser` into a
    :class:`Config`

    :param config: The configuration to process
    :param overrides: Global options taking precedence over the file
    :raises ConfigError: if the configuration is invalid
    """
    main: Dict[str, str] = dict()
    resolver: Dict[str, str] = dict()

    for section in config.sections():
        if section == 'dhddns':
            main.update(config[section])
        elif section == 'resolver':
            resolver.update(config[section])
        else:
            raise ConfigError(f"Config section {section} is not a dhddns or "
                              "resolver section")

    if overrides is not None:
        main.update(overrides)

    return Config(main, resolver)


def read_file(configfile: TextIO,
              overrides: Optional[Mapping[str, str]] = None) -> Config:
    """Read configuration from a file-like object

    :param configfile: File-like object to read the config from
    :param overrides: Global options (e.g. from the command line) that take
                      precedence over the file
    :raises ConfigError: if the config file cannot be read or is invalid
    :return: A :class:`Config`
    """
    config = configparser.ConfigParser()
    try:
        config.read_file(configfile)
    except OSError as e:
        raise ConfigError(f"Could not read config file: {e}") from e
    except configparser.Error as e:
        raise ConfigError(f"Error in config file: {e}") from e

    return _process_config(config, overrides)


def read_file_from_path(filename: Union[str, pathlib.Path],
                        overrides: Optional[Mapping[str, str]] = None
                        ) -> Config:
    """Read configuration from the named file or :class:`~pathlib.Path`

    :param filename: Filename or path to read from
    :param overrides: Global options that take precedence over the file
    :raises ConfigError: if the config file cannot be read or is invalid
    :return: A :class:`Config`
    """
    try:
        with open(filename, 'r') as f:
            return read_file(f, overrides)
    except OSError as e:
        raise ConfigError(f"Could not read config file {filename}: "
                          f"{e.strerror}") from e
