"""
Management command to import hospital documents.

Accepts a JSON file holding a list of hospitals in the public dataset
shape (``hpid``, ``dutyName``, ``dutyTime1s``... plus ``address1``,
``address2`` and a ``type`` list).  Without a file a small sample set is
loaded for local development.
"""
import json
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from hospitals.models import DUTY_SLOTS, Hospital, HospitalType

FIELD_MAP = {
    'dutyName': 'duty_name',
    'dutyTel1': 'duty_tel1',
    'dutyAddr': 'duty_addr',
    'dutyMapimg': 'duty_mapimg',
    'address1': 'address1',
    'address2': 'address2',
}

SAMPLE_HOSPITALS = [
    {
        'hpid': 'A1100001', 'dutyName': '중앙대학교병원', 'dutyTel1': '02-6299-1114',
        'dutyAddr': '서울특별시 동작구 흑석로 102', 'dutyMapimg': '흑석역 4번 출구',
        'wgs84Lat': 37.5071, 'wgs84Lon': 126.9607, 'address1': '서울특별시', 'address2': '동작구',
        'dutyTime1s': '0830', 'dutyTime1c': '1730', 'dutyTime2s': '0830', 'dutyTime2c': '1730',
        'dutyTime3s': '0830', 'dutyTime3c': '1730', 'dutyTime4s': '0830', 'dutyTime4c': '1730',
        'dutyTime5s': '0830', 'dutyTime5c': '1730', 'dutyTime6s': '0830', 'dutyTime6c': '1230',
        'type': ['내과', '외과', '소아청소년과', '응급의학과'],
    },
    {
        'hpid': 'A1100002', 'dutyName': '상도연합의원', 'dutyTel1': '02-812-0000',
        'dutyAddr': '서울특별시 동작구 상도로 200', 'dutyMapimg': '상도역 1번 출구',
        'wgs84Lat': 37.5029, 'wgs84Lon': 126.9476, 'address1': '서울특별시', 'address2': '동작구',
        'dutyTime1s': '0900', 'dutyTime1c': '1800', 'dutyTime2s': '0900', 'dutyTime2c': '1800',
        'dutyTime3s': '0900', 'dutyTime3c': '1800', 'dutyTime4s': '0900', 'dutyTime4c': '1800',
        'dutyTime5s': '0900', 'dutyTime5c': '1800', 'dutyTime6s': '', 'dutyTime6c': '',
        'type': ['내과', '가정의학과'],
    },
]


def _float_or_none(v):
    try:
        return float(v) if v not in (None, '') else None
    except (TypeError, ValueError):
        return None


def upsert_hospital(doc: dict) -> tuple[Hospital, bool]:
    hpid = str(doc.get('hpid') or '').strip()
    if not hpid:
        raise ValueError('hospital document without hpid')
    defaults = {model_field: str(doc.get(key) or '') for key, model_field in FIELD_MAP.items()}
    defaults['wgs84_lat'] = _float_or_none(doc.get('wgs84Lat'))
    defaults['wgs84_lon'] = _float_or_none(doc.get('wgs84Lon'))
    for i in range(1, DUTY_SLOTS + 1):
        for suffix in ('s', 'c'):
            # the public dataset stores times as numbers, e.g. 900 for 09:00
            raw = str(doc.get(f'dutyTime{i}{suffix}') or '').strip()
            defaults[f'duty_time{i}{suffix}'] = raw.zfill(4) if raw.isdigit() else ''
    hospital, created = Hospital.objects.update_or_create(hpid=hpid, defaults=defaults)
    hospital.types.all().delete()
    HospitalType.objects.bulk_create(
        [HospitalType(hospital=hospital, name=name) for name in dict.fromkeys(doc.get('type') or []) if name]
    )
    return hospital, created


class Command(BaseCommand):
    help = 'Import hospitals from a JSON file (or load sample data when no file is given)'

    def add_arguments(self, parser):
        parser.add_argument('path', nargs='?', help='JSON file with a list of hospital documents')

    def handle(self, *args, **options):
        if options['path']:
            path = Path(options['path'])
            if not path.exists():
                raise CommandError(f'{path} does not exist')
            try:
                docs = json.loads(path.read_text(encoding='utf-8'))
            except json.JSONDecodeError as e:
                raise CommandError(f'invalid JSON in {path}: {e}')
            if isinstance(docs, dict):
                docs = docs.get('items') or []
        else:
            self.stdout.write('파일이 없어 샘플 병원 데이터를 적재합니다...')
            docs = SAMPLE_HOSPITALS

        created = updated = 0
        with transaction.atomic():
            for doc in docs:
                try:
                    _, is_new = upsert_hospital(doc)
                except ValueError as e:
                    self.stderr.write(f'skipped: {e}')
                    continue
                if is_new:
                    created += 1
                else:
                    updated += 1
        self.stdout.write(self.style.SUCCESS(f'hospitals created={created} updated={updated}'))
