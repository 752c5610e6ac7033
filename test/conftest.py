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

import pytest

import doubles
import dhddns


@pytest.fixture
def config_factory():
    """Fixture creating a factory for :class:`~dhddns.Config`. Keyword
    arguments become options in the main section; ``resolver`` may be a dict
    of resolver options."""
    def factory(resolver=None, **options):
        main = {
            'hostname': 'home.example.com',
            'key': 'TESTKEY',
        }
        main.update({k: str(v) for k, v in options.items()})
        return dhddns.Config(main, resolver)
    return factory


@pytest.fixture
def config(config_factory):
    """Fixture creating a default :class:`~dhddns.Config`"""
    return config_factory()


@pytest.fixture
def dual_stack_config(config_factory):
    """Fixture creating a :class:`~dhddns.Config` managing both IPv4 and
    IPv6"""
    return config_factory(ipv6='true')


@pytest.fixture
def manager_factory(dual_stack_config):
    """Fixture creating a factory for :class:`~dhddns.DDNSManager` with a fake
    resolver and mock record store"""
    def factory(resolved=None, records=None, config=None, **store_kwargs):
        if resolved is None:
            resolver = doubles.FakeResolver()
        else:
            resolver = doubles.FakeResolver(results=resolved)
        store = doubles.MockRecordStore(records=records, **store_kwargs)
        if config is None:
            config = dual_stack_config
        return dhddns.DDNSManager(config, resolver=resolver, store=store)
    return factory
