"""
Database models for the hospital lookup backend.

Hospitals are imported from the public emergency-medical dataset, so
the persisted field vocabulary (``duty_name``, ``duty_time1s``...)
follows that dataset.  Likes and reviews reference hospitals by their
``hpid`` only; a like may outlive the hospital it points to.
"""
from __future__ import annotations

import uuid
from django.db import models

DUTY_SLOTS = 6


class Specialty(models.TextChoices):
    """External department codes and the specialty label stored on hospitals."""
    INTERNAL_MEDICINE = 'D001', '내과'
    PEDIATRICS = 'D002', '소아청소년과'
    NEUROLOGY = 'D003', '신경과'
    PSYCHIATRY = 'D004', '정신건강의학과'
    DERMATOLOGY = 'D005', '피부과'
    SURGERY = 'D006', '외과'
    THORACIC_SURGERY = 'D007', '흉부외과'
    ORTHOPEDICS = 'D008', '정형외과'
    NEUROSURGERY = 'D009', '신경외과'
    PLASTIC_SURGERY = 'D010', '성형외과'
    OBSTETRICS = 'D011', '산부인과'
    OPHTHALMOLOGY = 'D012', '안과'
    OTOLARYNGOLOGY = 'D013', '이비인후과'
    UROLOGY = 'D014', '비뇨의학과'
    REHABILITATION = 'D016', '재활의학과'
    ANESTHESIOLOGY = 'D017', '마취통증의학과'
    RADIOLOGY = 'D018', '영상의학과'
    FAMILY_MEDICINE = 'D022', '가정의학과'
    EMERGENCY_MEDICINE = 'D024', '응급의학과'
    DENTISTRY = 'D026', '치과'
    KOREAN_MEDICINE = 'D034', '한방과'

    @classmethod
    def label_for(cls, code: str) -> str:
        """Translate an external type code into the stored specialty label."""
        return cls(code).label


class Hospital(models.Model):
    """A hospital document.

    Each of the six duty slots holds an opening (``s``) and closing (``c``)
    time as a zero padded ``HHMM`` string; an empty string means the
    hospital has no service hours in that slot.
    """
    hpid = models.CharField(max_length=20, primary_key=True)
    duty_name = models.CharField(max_length=255, db_index=True)
    duty_tel1 = models.CharField(max_length=32, blank=True)
    duty_addr = models.CharField(max_length=255, blank=True)
    duty_mapimg = models.CharField(max_length=255, blank=True)
    wgs84_lat = models.FloatField(null=True, blank=True)
    wgs84_lon = models.FloatField(null=True, blank=True)
    # 시/도
    address1 = models.CharField(max_length=32, db_index=True)
    # 구/군
    address2 = models.CharField(max_length=32, db_index=True)

    duty_time1s = models.CharField(max_length=4, blank=True)
    duty_time1c = models.CharField(max_length=4, blank=True)
    duty_time2s = models.CharField(max_length=4, blank=True)
    duty_time2c = models.CharField(max_length=4, blank=True)
    duty_time3s = models.CharField(max_length=4, blank=True)
    duty_time3c = models.CharField(max_length=4, blank=True)
    duty_time4s = models.CharField(max_length=4, blank=True)
    duty_time4c = models.CharField(max_length=4, blank=True)
    duty_time5s = models.CharField(max_length=4, blank=True)
    duty_time5c = models.CharField(max_length=4, blank=True)
    duty_time6s = models.CharField(max_length=4, blank=True)
    duty_time6c = models.CharField(max_length=4, blank=True)

    class Meta:
        ordering = ['duty_name']
        indexes = [models.Index(fields=['address1', 'address2', 'duty_name'])]

    def duty_times(self) -> list[tuple[str, str]]:
        """Return the six (open, close) pairs in slot order."""
        return [
            (getattr(self, f'duty_time{i}s'), getattr(self, f'duty_time{i}c'))
            for i in range(1, DUTY_SLOTS + 1)
        ]

    def __str__(self) -> str:
        return f"{self.duty_name} ({self.hpid})"


class HospitalType(models.Model):
    """A specialty tag attached to a hospital (e.g. '내과')."""
    hospital = models.ForeignKey(Hospital, on_delete=models.CASCADE, related_name='types')
    name = models.CharField(max_length=32, db_index=True)

    class Meta:
        unique_together = [('hospital', 'name')]

    def __str__(self) -> str:
        return f"{self.hospital_id}: {self.name}"


class Like(models.Model):
    """Bookmark of a hospital by a user."""
    user_id = models.CharField(max_length=64, db_index=True)
    hospital_id = models.CharField(max_length=20, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['user_id', 'hospital_id'], name='unique_like_per_user_hospital'),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} -> {self.hospital_id}"


class Review(models.Model):
    hospital_id = models.CharField(max_length=20, db_index=True)
    user_id = models.CharField(max_length=64)
    rating = models.PositiveSmallIntegerField()
    content = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self) -> str:
        return f"{self.hospital_id} ({self.rating})"


class User(models.Model):
    """Application user with a two-level home address.

    Build instances with :meth:`User.of`; the factory refuses to create a
    user without name, email and address.
    """
    user_id = models.CharField(max_length=64, primary_key=True)
    user_name = models.CharField(max_length=64)
    user_email = models.EmailField()
    address1 = models.CharField(max_length=32)
    address2 = models.CharField(max_length=32)
    created_at = models.DateTimeField(auto_now_add=True)

    @classmethod
    def of(cls, user_name: str, user_email: str, address1: str, address2: str,
           user_id: str | None = None) -> 'User':
        missing = [
            name for name, value in (
                ('user_name', user_name), ('user_email', user_email),
                ('address1', address1), ('address2', address2),
            ) if not value
        ]
        if missing:
            raise ValueError(f"missing required fields: {', '.join(missing)}")
        return cls(
            user_id=user_id or uuid.uuid4().hex,
            user_name=user_name,
            user_email=user_email,
            address1=address1,
            address2=address2,
        )

    def __str__(self) -> str:
        return f"{self.user_name} ({self.user_id})"
