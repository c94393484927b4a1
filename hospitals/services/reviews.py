from typing import Optional

import bleach
from django.db.models import Avg

from hospitals.exceptions import HospitalNotFound
from hospitals.models import Hospital, Review
from hospitals.services.store import surfaces_db_errors


@surfaces_db_errors
def average_rating(hospital_id: str) -> float:
    avg: Optional[float] = Review.objects.filter(hospital_id=hospital_id).aggregate(avg=Avg('rating'))['avg']
    return round(avg, 1) if avg is not None else 0.0


@surfaces_db_errors
def create_review(user_id: str, hospital_id: str, rating: int, content: str = '') -> Review:
    if not Hospital.objects.filter(hpid=hospital_id).exists():
        raise HospitalNotFound()
    content = bleach.clean((content or '').strip(), tags=set(), strip=True)
    return Review.objects.create(user_id=user_id, hospital_id=hospital_id, rating=rating, content=content)


@surfaces_db_errors
def list_reviews(hospital_id: str) -> list[dict]:
    return [{
        'id': r.id,
        'userId': r.user_id,
        'rating': r.rating,
        'content': r.content,
        'createdAt': r.created_at,
    } for r in Review.objects.filter(hospital_id=hospital_id)]
