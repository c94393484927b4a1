import json

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from hospitals.models import Hospital

pytestmark = pytest.mark.django_db


def test_load_sample_hospitals():
    call_command('load_hospitals')
    assert Hospital.objects.count() == 2
    h = Hospital.objects.get(hpid='A1100002')
    assert set(h.types.values_list('name', flat=True)) == {'내과', '가정의학과'}
    assert h.duty_time6s == ''


def test_load_from_file_pads_numeric_times_and_upserts(tmp_path):
    path = tmp_path / 'hospitals.json'
    docs = [{
        'hpid': 'B1', 'dutyName': '흑석의원', 'address1': '서울특별시', 'address2': '동작구',
        'wgs84Lat': '37.5', 'wgs84Lon': '126.9', 'dutyTime1s': 900, 'dutyTime1c': 1800,
        'type': ['내과', '내과', '외과'],
    }, {'dutyName': 'hpid 없음'}]
    path.write_text(json.dumps(docs, ensure_ascii=False), encoding='utf-8')

    call_command('load_hospitals', str(path))
    h = Hospital.objects.get(hpid='B1')
    assert (h.duty_time1s, h.duty_time1c) == ('0900', '1800')
    assert h.wgs84_lat == 37.5
    assert h.types.count() == 2

    docs[0]['type'] = ['소아청소년과']
    path.write_text(json.dumps(docs[:1], ensure_ascii=False), encoding='utf-8')
    call_command('load_hospitals', str(path))
    assert Hospital.objects.count() == 1
    assert list(Hospital.objects.get(hpid='B1').types.values_list('name', flat=True)) == ['소아청소년과']


def test_missing_file():
    with pytest.raises(CommandError):
        call_command('load_hospitals', '/nonexistent/hospitals.json')
