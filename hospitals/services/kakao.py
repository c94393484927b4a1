"""Kakao Local category search, used to find pharmacies near a hospital."""
import logging

import requests
from django.conf import settings

from hospitals.exceptions import UpstreamUnavailable

logger = logging.getLogger(__name__)

PHARMACY_CATEGORY = 'PM9'


def find_pharmacies(lat: float, lon: float) -> list[dict]:
    """Return the raw ``documents`` of a PM9 category search around (lat, lon)."""
    if not settings.KAKAO_REST_API_KEY:
        logger.error('KAKAO_REST_API_KEY is not configured')
        raise UpstreamUnavailable('Kakao API key not configured')
    params = {
        'category_group_code': PHARMACY_CATEGORY,
        'x': str(lon),
        'y': str(lat),
        'radius': settings.KAKAO_PHARMACY_RADIUS,
        'sort': 'distance',
    }
    headers = {'Authorization': f'KakaoAK {settings.KAKAO_REST_API_KEY}'}
    try:
        r = requests.get(settings.KAKAO_LOCAL_URL, params=params, headers=headers, timeout=settings.KAKAO_TIMEOUT)
        r.raise_for_status()
        data = r.json()
    except requests.Timeout as e:
        logger.error('Kakao API timeout (lat=%s, lon=%s)', lat, lon)
        raise UpstreamUnavailable() from e
    except requests.HTTPError as e:
        logger.error('Kakao API HTTP error %s', e.response.status_code if e.response is not None else '?')
        raise UpstreamUnavailable() from e
    except (requests.RequestException, ValueError) as e:
        logger.error('Kakao category search failed: %s', e)
        raise UpstreamUnavailable() from e
    documents = data.get('documents') if isinstance(data, dict) else None
    if documents is None and isinstance(data, dict):
        return []
    if not isinstance(documents, list) or not all(isinstance(d, dict) for d in documents):
        logger.error('Kakao category search returned an unexpected body: %.200r', data)
        raise UpstreamUnavailable()
    return documents
