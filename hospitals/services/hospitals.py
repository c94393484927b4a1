"""
Hospital query and response assembly.

Each public function wraps one or more store calls and shapes the
result into the objects the HTTP layer serialises.  List mappings are
all-or-nothing: if enriching any single record fails against an
upstream, the whole call fails with ``HospitalNotFound``.
"""
import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Iterable

from rest_framework.exceptions import ValidationError

from hospitals.exceptions import HospitalNotFound, LikeAlreadyExists, LikeNotFound, UpstreamUnavailable
from hospitals.models import Hospital, Specialty
from hospitals.services import kakao, likes, reviews, store

logger = logging.getLogger(__name__)

CLOSED_HOURS = '휴진'
_HHMM = re.compile(r'[0-9]{4}')


@dataclass
class DetailHospital:
    hpid: str
    name: str
    phone: str
    address: str
    description: str
    like_count: int
    time: list[str] = field(default_factory=list)


@dataclass
class SimpleHospital:
    hpid: str
    name: str
    address: str
    rating: float


@dataclass
class Pharmacy:
    name: str
    address: str


def format_hours(start: str, end: str) -> str:
    """'0900', '1800' -> '09:00 - 18:00'; a slot without valid times is closed."""
    if not (start and end and _HHMM.fullmatch(start) and _HHMM.fullmatch(end)):
        return CLOSED_HOURS
    return f"{start[:2]}:{start[2:4]} - {end[:2]}:{end[2:4]}"


def opening_hours(hospital: Hospital) -> list[str]:
    return [format_hours(s, c) for s, c in hospital.duty_times()]


def to_simple(hospital: Hospital) -> SimpleHospital:
    return SimpleHospital(
        hpid=hospital.hpid,
        name=hospital.duty_name,
        address=hospital.duty_addr,
        rating=reviews.average_rating(hospital.hpid),
    )


def _map_all(hospitals: Iterable[Hospital], fn: Callable[[Hospital], SimpleHospital]) -> list[SimpleHospital]:
    try:
        return [fn(h) for h in hospitals]
    except UpstreamUnavailable as e:
        logger.error('hospital list mapping failed: %s', e)
        raise HospitalNotFound() from e


def list_hospital_ids() -> list[str]:
    return store.list_hospital_ids()


def get_detail(hospital_id: str) -> DetailHospital:
    hospital = store.find_detail(hospital_id)
    if hospital is None:
        raise HospitalNotFound()
    return DetailHospital(
        hpid=hospital.hpid,
        name=hospital.duty_name,
        phone=hospital.duty_tel1,
        address=hospital.duty_addr,
        description=hospital.duty_mapimg,
        like_count=likes.count_by_hospital(hospital_id),
        time=opening_hours(hospital),
    )


def get_by_type_and_address(type_code: str, address1: str, address2: str, page_num: int) -> list[SimpleHospital]:
    try:
        type_label = Specialty.label_for(type_code)
    except ValueError:
        raise ValidationError({'type': f'unknown hospital type code: {type_code}'})
    hospitals = store.find_by_type_and_address(type_label, address1, address2, page_num)
    return _map_all(hospitals, to_simple)


def get_by_address(address1: str, address2: str, page_num: int) -> list[SimpleHospital]:
    hospitals = store.find_by_address(address1, address2, page_num)
    return _map_all(hospitals, to_simple)


def get_liked_by_user(user_id: str) -> list[SimpleHospital]:
    return _map_all(store.find_liked_by_user(user_id), to_simple)


def like(user_id: str, hospital_id: str) -> None:
    if likes.exists(user_id, hospital_id):
        raise LikeAlreadyExists()
    likes.save(user_id, hospital_id)


def unlike(user_id: str, hospital_id: str) -> None:
    if not likes.exists(user_id, hospital_id):
        raise LikeNotFound()
    if not likes.delete(user_id, hospital_id):
        # removed by a concurrent request between the check and the delete
        raise LikeNotFound()


def get_pharmacies_near(hospital_id: str) -> list[Pharmacy]:
    hospital = store.find_detail(hospital_id)
    if hospital is None:
        raise HospitalNotFound()
    if hospital.wgs84_lat is None or hospital.wgs84_lon is None:
        return []
    documents = kakao.find_pharmacies(hospital.wgs84_lat, hospital.wgs84_lon)
    return [Pharmacy(name=d.get('place_name', ''), address=d.get('address_name', '')) for d in documents]
