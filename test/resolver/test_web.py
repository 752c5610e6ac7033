import ipaddress

import pytest
import requests

from dhddns import ConfigError, ResolutionError
from dhddns.resolvers.web import WebResolver


@pytest.fixture
def mock_get(mocker):
    """Fixture patching requests.get. Replies are given per URL as
    ``(status, text)`` or an exception to raise."""
    replies = {}

    def get(url, **_):
        reply = replies[url]
        if isinstance(reply, Exception):
            raise reply
        status, text = reply
        response = mocker.Mock()
        response.status_code = status
        response.text = text
        if status >= 400:
            response.raise_for_status.side_effect = \
                requests.exceptions.HTTPError(f"HTTP {status}")
        return response

    patched = mocker.patch('requests.get', side_effect=get)
    patched.replies = replies
    return patched


def test_ipv4(mock_get):
    mock_get.replies['https://api4.ipify.org'] = (200, '1.2.3.4\n')
    resolver = WebResolver('web', {})
    assert resolver.resolve() == [ipaddress.IPv4Address('1.2.3.4')]
    args, kwargs = mock_get.call_args
    assert args == ('https://api4.ipify.org',)
    assert kwargs['timeout'] == 10
    assert kwargs['headers']['User-Agent'].startswith('dhddns/')


def test_dual_stack(mock_get):
    mock_get.replies['https://ip4.example.com'] = (200, '1.2.3.4')
    mock_get.replies['https://ip6.example.com'] = (200, '2001:db8::1')
    resolver = WebResolver('web', {'ipv6': 'true',
                                   'url': 'https://ip4.example.com',
                                   'url6': 'https://ip6.example.com',
                                   'timeout': '3'})
    assert resolver.resolve() == [ipaddress.IPv4Address('1.2.3.4'),
                                  ipaddress.IPv6Address('2001:db8::1')]
    assert mock_get.call_args[1]['timeout'] == 3


@pytest.mark.parametrize('reply', [
    requests.exceptions.ConnectionError("refused"),
    requests.exceptions.Timeout("slow"),
    (500, 'oops'),
    (200, 'not an address'),
    (200, '2001:db8::1'),
])
def test_errors(mock_get, reply):
    mock_get.replies['https://api4.ipify.org'] = reply
    resolver = WebResolver('web', {})
    with pytest.raises(ResolutionError):
        resolver.resolve()


def test_ipv6_error_fails_all(mock_get):
    mock_get.replies['https://api4.ipify.org'] = (200, '1.2.3.4')
    mock_get.replies['https://api6.ipify.org'] = \
        requests.exceptions.ConnectionError("no route")
    resolver = WebResolver('web', {'ipv6': 'true'})
    with pytest.raises(ResolutionError):
        resolver.resolve()


def test_bad_timeout():
    with pytest.raises(ConfigError):
        WebResolver('web', {'timeout': 'never'})
