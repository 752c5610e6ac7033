import logging

import pytest

import doubles
from dhddns import AddressResolver, ConfigError
from dhddns.resolvers import create_resolver, resolvers
from dhddns.resolvers.opendns import OpenDNSResolver


def test_member_vars():
    """Test AddressResolver has basic member variables name and log"""
    resolver = doubles.FakeResolver('test_resolver')
    assert resolver.name == 'test_resolver'
    assert isinstance(resolver.log, logging.Logger)
    assert resolver.log.name == 'dhddns.resolver.test_resolver'


@pytest.mark.parametrize('config, ipv4, ipv6', [
    ({}, True, False),
    ({'ipv6': 'yes'}, True, True),
    ({'ipv4': 'off', 'ipv6': '1'}, False, True),
])
def test_families(config, ipv4, ipv6):
    resolver = doubles.FakeResolver('test', config)
    assert resolver.want_ipv4() is ipv4
    assert resolver.want_ipv6() is ipv6


@pytest.mark.parametrize('config', [
    {'ipv4': 'false', 'ipv6': 'false'},
    {'ipv4': 'sometimes'},
])
def test_bad_families(config):
    with pytest.raises(ConfigError):
        doubles.FakeResolver('test', config)


def test_resolve_not_implemented():
    with pytest.raises(NotImplementedError):
        AddressResolver('base', {}).resolve()


def test_registry():
    assert set(resolvers) == {'opendns', 'web'}


def test_create_built_in():
    resolver = create_resolver({'type': 'opendns', 'ipv6': 'true'})
    assert isinstance(resolver, OpenDNSResolver)
    assert resolver.name == 'opendns'
    assert resolver.want_ipv6()


def test_create_requires_type():
    with pytest.raises(ConfigError):
        create_resolver({})
