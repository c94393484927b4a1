import logging
from functools import wraps
from typing import Optional

from django.conf import settings
from django.db import DatabaseError

from hospitals.exceptions import InvalidPage, UpstreamUnavailable
from hospitals.models import Hospital, Like

logger = logging.getLogger(__name__)


def surfaces_db_errors(func):
    """Re-raise database failures as ``UpstreamUnavailable``."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DatabaseError as e:
            logger.error('hospital store unavailable in %s: %s', func.__name__, e)
            raise UpstreamUnavailable() from e
    return wrapper


def page_bounds(page_num: int, page_size: Optional[int] = None) -> tuple[int, int]:
    """Return the ``[start, end)`` slice for a 1-indexed page."""
    if page_num is None or page_num < 1:
        raise InvalidPage()
    page_size = page_size or settings.HOSPITAL_PAGE_SIZE
    start = (page_num - 1) * page_size
    return start, start + page_size


@surfaces_db_errors
def list_hospital_ids() -> list[str]:
    return list(Hospital.objects.values_list('hpid', flat=True))


@surfaces_db_errors
def find_by_type_and_address(type_label: str, address1: str, address2: str, page_num: int) -> list[Hospital]:
    start, end = page_bounds(page_num)
    qs = Hospital.objects.filter(types__name=type_label, address1=address1, address2=address2)
    return list(qs.order_by('duty_name', 'hpid').distinct()[start:end])


@surfaces_db_errors
def find_by_address(address1: str, address2: str, page_num: int) -> list[Hospital]:
    start, end = page_bounds(page_num)
    qs = Hospital.objects.filter(address1=address1, address2=address2)
    return list(qs.order_by('duty_name', 'hpid')[start:end])


@surfaces_db_errors
def find_detail(hospital_id: str) -> Optional[Hospital]:
    return Hospital.objects.filter(hpid=hospital_id).first()


@surfaces_db_errors
def find_liked_by_user(user_id: str) -> list[Hospital]:
    """Hospitals the user has liked, oldest like first.

    Likes pointing at a hospital that has since been removed are skipped.
    """
    hospital_ids = list(
        Like.objects.filter(user_id=user_id).order_by('created_at', 'id').values_list('hospital_id', flat=True)
    )
    found = Hospital.objects.in_bulk(hospital_ids)
    hospitals = []
    for hospital_id in hospital_ids:
        hospital = found.get(hospital_id)
        if hospital is None:
            logger.warning('like of user %s points at missing hospital %s, skipped', user_id, hospital_id)
            continue
        hospitals.append(hospital)
    return hospitals
