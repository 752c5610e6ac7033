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

import argparse
import logging
import logging.handlers
import os.path
import signal
import sys
from typing import Dict

from . import configuration, manager
from .exceptions import ConfigError, SetupError


def parse_args(argv):
    """Parse command line arguments

    :param argv: Either ``None`` or a list of arguments
    :returns: a :class:`argparse.Namespace` containing the parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Dynamic DNS updater for DreamHost",
        epilog="SIGUSR1 will cause a running instance to immediately check and"
               " update the current IP address(es)",
    )
    parser.add_argument("-c", "--configfile",
                        help="Path to a config file (optional if the hostname "
                             "and key are given on the command line)")
    parser.add_argument("-H", "--hostname",
                        help="The hostname to use for DDNS on DreamHost")
    parser.add_argument("-k", "--key",
                        help="The DreamHost API key to use, from "
                             "https://panel.dreamhost.com/?tree=home.api")
    parser.add_argument("-m", "--min-sleep", type=int,
                        help="Minimum seconds to wait between refreshes "
                             f"(default {configuration.DEFAULT_MIN_SLEEP})")
    parser.add_argument("-M", "--max-sleep", type=int,
                        help="Maximum seconds to wait between refreshes "
                             f"(default {configuration.DEFAULT_MAX_SLEEP})")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase verbosity. Only errors are logged by "
                             "default.")
    parser.add_argument("-s", "--stderr", action="store_true",
                        help="Log to stderr instead of syslog or file")
    return parser.parse_args(argv)


def read_config(args) -> configuration.Config:
    """Build the configuration from the config file, if any, with the command
    line options taking precedence

    :param args: The parsed arguments
    :raises ConfigError: if the configuration is invalid
    """
    overrides: Dict[str, str] = dict()
    if args.hostname is not None:
        overrides['hostname'] = args.hostname
    if args.key is not None:
        overrides['key'] = args.key
    if args.min_sleep is not None:
        overrides['min_sleep'] = str(args.min_sleep)
    if args.max_sleep is not None:
        overrides['max_sleep'] = str(args.max_sleep)
    if args.stderr:
        overrides['logfile'] = 'stderr'

    if args.configfile is None:
        return configuration.Config(overrides)
    return configuration.read_file_from_path(args.configfile, overrides)


def setup_logging(logfile: str, verbose: int) -> logging.Logger:
    """Attach a handler to the ``dhddns`` logger

    :param logfile: ``'syslog'``, ``'stderr'``, or a path
    :param verbose: Number of times ``-v`` was given
    """
    if logfile == 'syslog':
        if os.path.exists('/dev/log'):
            log_handler = logging.handlers.SysLogHandler(address='/dev/log')
        else:
            log_handler = logging.handlers.SysLogHandler()
        log_handler.ident = 'dhddns: '
    elif logfile == 'stderr':
        log_handler = logging.StreamHandler()
        log_handler.setFormatter(
            logging.Formatter('%(asctime)s %(levelname)s %(name)s: '
                              '%(message)s'))
    else:
        log_handler = logging.FileHandler(logfile)
        log_handler.setFormatter(
            logging.Formatter('%(asctime)s %(levelname)s %(name)s: '
                              '%(message)s'))
    log = logging.getLogger('dhddns')
    log.addHandler(log_handler)

    if verbose >= 2:
        log.setLevel(logging.DEBUG)
    elif verbose == 1:
        log.setLevel(logging.INFO)
    else:
        log.setLevel(logging.ERROR)
    return log


def main(argv=None):
    """Main entry point when run as a standalone program

    :param argv: List of arguments. If ``None``, read :data:`sys.argv`.
    """
    args = parse_args(argv)
    try:
        conf = read_config(args)
    except ConfigError as e:
        print("Config error:", e, file=sys.stderr)
        sys.exit(2)

    try:
        log = setup_logging(conf.logfile, args.verbose)
    except OSError as e:
        print("Could not open log:", e, file=sys.stderr)
        sys.exit(1)

    try:
        ddns_manager = manager.DDNSManager(conf)
    except SetupError as e:
        log.critical("dhddns failed to start: %s", e)
        sys.exit(1)

    # Do an immediate update on SIGUSR1
    def handle_sigusr1(sig, _):
        log.info("Received signal: %s", signal.Signals(sig).name)
        ddns_manager.check_now()
    signal.signal(signal.SIGUSR1, handle_sigusr1)

    # Stop on SIGINT (^C) or SIGTERM
    def handle_signals(sig, _):
        log.info("Received signal: %s", signal.Signals(sig).name)
        ddns_manager.stop()
    signal.signal(signal.SIGINT, handle_signals)
    signal.signal(signal.SIGTERM, handle_signals)

    ddns_manager.run()
