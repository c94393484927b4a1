import pytest
import requests

from hospitals.exceptions import UpstreamUnavailable
from hospitals.services import kakao


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f'{self.status_code} error', response=self)

    def json(self):
        if self._payload is None:
            raise ValueError('no json')
        return self._payload


@pytest.fixture
def kakao_settings(settings):
    settings.KAKAO_REST_API_KEY = 'test-key'
    settings.KAKAO_TIMEOUT = 3
    settings.KAKAO_PHARMACY_RADIUS = 500
    return settings


def test_find_pharmacies_sends_category_search(monkeypatch, kakao_settings):
    captured = {}

    def fake_get(url, params=None, headers=None, timeout=None):
        captured.update(url=url, params=params, headers=headers, timeout=timeout)
        return FakeResponse({'documents': [{'place_name': '흑석약국', 'address_name': '서울 동작구'}]})
    monkeypatch.setattr(kakao.requests, 'get', fake_get)

    docs = kakao.find_pharmacies(37.5, 126.9)

    assert docs == [{'place_name': '흑석약국', 'address_name': '서울 동작구'}]
    assert captured['headers'] == {'Authorization': 'KakaoAK test-key'}
    assert captured['params']['category_group_code'] == 'PM9'
    assert captured['params']['x'] == '126.9'
    assert captured['params']['y'] == '37.5'
    assert captured['params']['radius'] == 500
    assert captured['timeout'] == 3


def test_missing_documents_means_no_pharmacies(monkeypatch, kakao_settings):
    monkeypatch.setattr(kakao.requests, 'get', lambda *a, **kw: FakeResponse({'meta': {'total_count': 0}}))
    assert kakao.find_pharmacies(37.5, 126.9) == []


@pytest.mark.parametrize('failure', [
    requests.Timeout('slow'),
    requests.ConnectionError('down'),
])
def test_network_failures_are_upstream_unavailable(monkeypatch, kakao_settings, failure):
    def fake_get(*args, **kwargs):
        raise failure
    monkeypatch.setattr(kakao.requests, 'get', fake_get)
    with pytest.raises(UpstreamUnavailable):
        kakao.find_pharmacies(37.5, 126.9)


def test_http_error_is_upstream_unavailable(monkeypatch, kakao_settings):
    monkeypatch.setattr(kakao.requests, 'get', lambda *a, **kw: FakeResponse({}, status_code=401))
    with pytest.raises(UpstreamUnavailable):
        kakao.find_pharmacies(37.5, 126.9)


def test_invalid_body_is_upstream_unavailable(monkeypatch, kakao_settings):
    monkeypatch.setattr(kakao.requests, 'get', lambda *a, **kw: FakeResponse(None))
    with pytest.raises(UpstreamUnavailable):
        kakao.find_pharmacies(37.5, 126.9)


def test_missing_api_key(settings):
    settings.KAKAO_REST_API_KEY = ''
    with pytest.raises(UpstreamUnavailable):
        kakao.find_pharmacies(37.5, 126.9)


@pytest.mark.parametrize('payload', [
    ['unexpected'],
    {'documents': 'x'},
    {'documents': [{'place_name': '흑석약국'}, 'stray']},
])
def test_malformed_body_is_upstream_unavailable(monkeypatch, kakao_settings, payload):
    monkeypatch.setattr(kakao.requests, 'get', lambda *a, **kw: FakeResponse(payload))
    with pytest.raises(UpstreamUnavailable):
        kakao.find_pharmacies(37.5, 126.9)
