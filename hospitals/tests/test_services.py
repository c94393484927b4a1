import pytest
from django.db import DatabaseError

from hospitals.exceptions import (
    HospitalNotFound,
    InvalidPage,
    LikeAlreadyExists,
    LikeNotFound,
    UpstreamUnavailable,
)
from hospitals.models import Hospital, Like, Review, User
from hospitals.services import hospitals as svc
from hospitals.services import likes, reviews, store
from hospitals.tests.factories import make_hospital

pytestmark = pytest.mark.django_db


@pytest.mark.parametrize('start,end,expected', [
    ('0900', '1800', '09:00 - 18:00'),
    ('0000', '2400', '00:00 - 24:00'),
    ('0830', '1230', '08:30 - 12:30'),
])
def test_format_hours_inserts_colons(start, end, expected):
    assert svc.format_hours(start, end) == expected


@pytest.mark.parametrize('start,end', [('', ''), ('0900', ''), ('900', '1800'), ('09:0', '1800'), ('0900\n', '1800'), (None, None)])
def test_format_hours_treats_missing_slot_as_closed(start, end):
    assert svc.format_hours(start, end) == svc.CLOSED_HOURS


def test_detail_formats_all_six_slots():
    make_hospital('H1', '가나병원', duty_time1s='0900', duty_time1c='1800', duty_time6s='', duty_time6c='')
    Like.objects.create(user_id='u1', hospital_id='H1')
    Like.objects.create(user_id='u2', hospital_id='H1')

    detail = svc.get_detail('H1')

    assert detail.hpid == 'H1'
    assert detail.like_count == 2
    assert len(detail.time) == 6
    assert detail.time[0] == '09:00 - 18:00'
    assert detail.time[5] == svc.CLOSED_HOURS


def test_detail_of_missing_hospital_raises_not_found():
    with pytest.raises(HospitalNotFound):
        svc.get_detail('nope')


def test_find_by_address_pages_by_name():
    for i in range(13):
        make_hospital(f'H{i:02d}', f'병원{i:02d}')
    make_hospital('X1', '병원00-타지역', address2='관악구')

    page1 = store.find_by_address('서울특별시', '동작구', 1)
    page2 = store.find_by_address('서울특별시', '동작구', 2)
    page3 = store.find_by_address('서울특별시', '동작구', 3)

    assert [h.duty_name for h in page1] == [f'병원{i:02d}' for i in range(10)]
    assert [h.duty_name for h in page2] == ['병원10', '병원11', '병원12']
    assert page3 == []


def test_page_below_one_is_rejected():
    with pytest.raises(InvalidPage):
        store.find_by_address('서울특별시', '동작구', 0)


def test_find_by_type_matches_whole_tag_only():
    make_hospital('H1', '가내과', types=['내과'])
    make_hospital('H2', '나소아과', types=['소아청소년과'])
    make_hospital('H3', '다한방', types=['한방내과'])

    found = store.find_by_type_and_address('내과', '서울특별시', '동작구', 1)

    assert [h.hpid for h in found] == ['H1']


def test_get_by_type_translates_code_and_reports_rating():
    make_hospital('H1', '가내과', types=['내과'])
    make_hospital('H2', '나외과', types=['외과'])
    Review.objects.create(hospital_id='H1', user_id='u1', rating=4)
    Review.objects.create(hospital_id='H1', user_id='u2', rating=5)

    result = svc.get_by_type_and_address('D001', '서울특별시', '동작구', 1)

    assert len(result) == 1
    assert result[0].hpid == 'H1'
    assert result[0].rating == 4.5


def test_unknown_type_code_is_validation_error():
    from rest_framework.exceptions import ValidationError
    with pytest.raises(ValidationError):
        svc.get_by_type_and_address('Z999', '서울특별시', '동작구', 1)


def test_rating_failure_fails_whole_list(monkeypatch):
    make_hospital('H1', '가병원')
    make_hospital('H2', '나병원')
    calls = []

    def flaky_average(hospital_id):
        calls.append(hospital_id)
        if hospital_id == 'H2':
            raise UpstreamUnavailable()
        return 3.0
    monkeypatch.setattr(reviews, 'average_rating', flaky_average)

    with pytest.raises(HospitalNotFound):
        svc.get_by_address('서울특별시', '동작구', 1)
    assert calls == ['H1', 'H2']


def test_store_errors_surface_as_upstream_unavailable(monkeypatch):
    def broken(*args, **kwargs):
        raise DatabaseError('connection refused')
    monkeypatch.setattr(Hospital.objects, 'values_list', broken)

    with pytest.raises(UpstreamUnavailable):
        store.list_hospital_ids()


def test_list_hospital_ids():
    make_hospital('H1', '가병원')
    make_hospital('H2', '나병원')
    assert sorted(svc.list_hospital_ids()) == ['H1', 'H2']


def test_like_then_unlike_leaves_no_relation():
    make_hospital('H1', '가병원')
    svc.like('u1', 'H1')
    assert likes.exists('u1', 'H1')

    svc.unlike('u1', 'H1')
    assert not Like.objects.filter(user_id='u1', hospital_id='H1').exists()


def test_unlike_without_like_raises_not_found():
    with pytest.raises(LikeNotFound):
        svc.unlike('u1', 'H1')


def test_double_like_raises_and_keeps_single_row():
    svc.like('u1', 'H1')
    with pytest.raises(LikeAlreadyExists):
        svc.like('u1', 'H1')
    assert Like.objects.filter(user_id='u1', hospital_id='H1').count() == 1


def test_unique_constraint_backs_up_existence_check(monkeypatch):
    svc.like('u1', 'H1')
    # simulate a concurrent request that passed the existence check
    monkeypatch.setattr(likes, 'exists', lambda user_id, hospital_id: False)
    with pytest.raises(LikeAlreadyExists):
        svc.like('u1', 'H1')
    assert Like.objects.count() == 1


def test_liked_hospitals_skip_deleted_ones():
    make_hospital('H1', '가병원')
    make_hospital('H2', '나병원')
    for hpid in ('H1', 'H2', 'GONE'):
        Like.objects.create(user_id='u1', hospital_id=hpid)
    Like.objects.create(user_id='u2', hospital_id='H2')

    liked = svc.get_liked_by_user('u1')

    assert [h.hpid for h in liked] == ['H1', 'H2']


def test_pharmacies_near_maps_places(monkeypatch):
    make_hospital('H1', '가병원', wgs84_lat=37.5, wgs84_lon=126.9)
    seen = {}

    def fake_find(lat, lon):
        seen['coords'] = (lat, lon)
        return [
            {'place_name': '흑석약국', 'address_name': '서울 동작구 흑석동 1'},
            {'place_name': '중앙약국', 'address_name': '서울 동작구 흑석동 2'},
        ]
    monkeypatch.setattr(svc.kakao, 'find_pharmacies', fake_find)

    pharmacies = svc.get_pharmacies_near('H1')

    assert seen['coords'] == (37.5, 126.9)
    assert [(p.name, p.address) for p in pharmacies] == [
        ('흑석약국', '서울 동작구 흑석동 1'),
        ('중앙약국', '서울 동작구 흑석동 2'),
    ]


def test_pharmacies_near_empty_when_api_returns_nothing(monkeypatch):
    make_hospital('H1', '가병원', wgs84_lat=37.5, wgs84_lon=126.9)
    monkeypatch.setattr(svc.kakao, 'find_pharmacies', lambda lat, lon: [])
    assert svc.get_pharmacies_near('H1') == []


def test_pharmacies_near_missing_hospital():
    with pytest.raises(HospitalNotFound):
        svc.get_pharmacies_near('nope')


def test_user_factory_requires_all_fields():
    with pytest.raises(ValueError):
        User.of('홍길동', '', '서울특별시', '동작구')
    u = User.of('홍길동', 'hong@example.com', '서울특별시', '동작구')
    assert u.user_id and u.address2 == '동작구'


def test_average_rating_without_reviews_is_zero():
    assert reviews.average_rating('H1') == 0.0


def test_review_content_is_stripped_of_markup():
    make_hospital('H1', '가나병원')
    review = reviews.create_review('u1', 'H1', 5, '  <b>친절해요</b> ')
    assert review.content == '친절해요'
