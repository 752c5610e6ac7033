import ipaddress

import pytest

from dhddns import AddressRecord, RecordKind, ReconciliationPlan
from doubles import desired, remote


@pytest.mark.parametrize('text, kind', [
    ('1.2.3.4', RecordKind.A),
    ('2001:db8::1', RecordKind.AAAA),
])
def test_kind_of(text, kind):
    """Test the record kind is derived from the address family"""
    assert RecordKind.of(ipaddress.ip_address(text)) is kind
    assert AddressRecord.from_address(ipaddress.ip_address(text)).kind is kind


def test_kind_str():
    """Test record kinds render as their DNS type names"""
    assert str(RecordKind.A) == 'A'
    assert str(RecordKind.AAAA) == 'AAAA'


def test_mismatched_kind():
    """Test a record refuses an address of the wrong family"""
    with pytest.raises(ValueError):
        AddressRecord(RecordKind.AAAA, ipaddress.ip_address('1.2.3.4'))
    with pytest.raises(ValueError):
        AddressRecord(RecordKind.A, ipaddress.ip_address('::1'))


def test_equality_ignores_handle():
    """Test records with the same address are equal however the remote
    authority wrote the address"""
    short = remote('2001:db8::1')
    long = remote('2001:db8::1', '2001:0db8:0000:0000:0000:0000:0000:0001')
    assert short == long
    assert short == desired('2001:db8::1')
    assert hash(long) == hash(desired('2001:db8::1'))
    assert long.remote_handle == '2001:0db8:0000:0000:0000:0000:0000:0001'


def test_inequality():
    assert desired('1.2.3.4') != desired('1.2.3.5')
    assert desired('::ffff:1.2.3.4') != desired('1.2.3.4')


def test_is_remote():
    assert remote('1.2.3.4').is_remote
    assert not desired('1.2.3.4').is_remote


def test_str():
    assert str(desired('1.2.3.4')) == 'A 1.2.3.4'
    assert str(remote('2001:db8::1', '2001:db8:0:0::1')) == 'AAAA 2001:db8::1'


def test_plan_noop():
    assert ReconciliationPlan().is_noop
    assert not ReconciliationPlan(to_add=[desired('1.2.3.4')]).is_noop
    assert not ReconciliationPlan(to_remove=[remote('1.2.3.4')]).is_noop
