import logging

from django.db import IntegrityError, transaction

from hospitals.exceptions import LikeAlreadyExists
from hospitals.models import Like
from hospitals.services.store import surfaces_db_errors

logger = logging.getLogger(__name__)


@surfaces_db_errors
def exists(user_id: str, hospital_id: str) -> bool:
    return Like.objects.filter(user_id=user_id, hospital_id=hospital_id).exists()


@surfaces_db_errors
def save(user_id: str, hospital_id: str) -> Like:
    # The unique constraint decides between concurrent writers.
    try:
        with transaction.atomic():
            like = Like.objects.create(user_id=user_id, hospital_id=hospital_id)
    except IntegrityError as e:
        raise LikeAlreadyExists() from e
    logger.info('user %s liked hospital %s', user_id, hospital_id)
    return like


@surfaces_db_errors
def delete(user_id: str, hospital_id: str) -> int:
    deleted, _ = Like.objects.filter(user_id=user_id, hospital_id=hospital_id).delete()
    if deleted:
        logger.info('user %s unliked hospital %s', user_id, hospital_id)
    return deleted


@surfaces_db_errors
def count_by_hospital(hospital_id: str) -> int:
    return Like.objects.filter(hospital_id=hospital_id).count()
