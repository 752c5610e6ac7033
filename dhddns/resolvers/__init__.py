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

"""Built in resolvers and the resolver base class"""

import importlib
from typing import Dict, Mapping, Type

from ..exceptions import ConfigError
from .resolver import AddressResolver

from . import opendns
from . import web

resolvers: Dict[str, Type[AddressResolver]] = {
    'opendns': opendns.OpenDNSResolver,
    'web': web.WebResolver,
}


def create_resolver(config: Mapping[str, str]) -> AddressResolver:
    """Create the resolver described by the given resolver config. Built-in
    resolvers are selected by ``type`` alone. Others are imported using
    ``module`` plus ``type`` as the class name.

    :param config: The resolver config, e.g. :attr:`dhddns.Config.resolver`
    :raises ConfigError: if the resolver does not exist or its config is
                         invalid
    """
    module = config.get('module')
    try:
        type_ = config['type']
    except KeyError:
        raise ConfigError("Resolver requires a type") from None

    if module is None:
        try:
            resolver_class = resolvers[type_]
        except KeyError:
            raise ConfigError(f"No built-in resolver of type {type_}") \
                from None
        return resolver_class(type_, config)

    try:
        imported_module = importlib.import_module(module)
        resolver_class = getattr(imported_module, type_)
    except (ImportError, AttributeError):
        raise ConfigError(f"Resolver module or class {module}.{type_} does "
                          "not exist") from None
    return resolver_class(type_, config)


__all__ = [
    'AddressResolver',
    'create_resolver',
    'resolvers',
]
