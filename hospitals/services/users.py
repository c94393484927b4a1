from typing import Optional

from django.db import IntegrityError, transaction

from hospitals.exceptions import UserAlreadyExists, UserNotFound
from hospitals.models import User
from hospitals.services.store import surfaces_db_errors


def format_user(user: User) -> dict:
    return {
        'userId': user.user_id,
        'userName': user.user_name,
        'userEmail': user.user_email,
        'address1': user.address1,
        'address2': user.address2,
    }


@surfaces_db_errors
def create_user(*, user_name: str, user_email: str, address1: str, address2: str,
                user_id: Optional[str] = None) -> User:
    try:
        user = User.of((user_name or '').strip(), user_email, address1, address2, user_id=user_id)
    except ValueError as e:
        from rest_framework.exceptions import ValidationError as DRFValidation
        raise DRFValidation(str(e))
    try:
        with transaction.atomic():
            # force_insert so an existing id is reported instead of overwritten
            user.save(force_insert=True)
    except IntegrityError as e:
        raise UserAlreadyExists() from e
    return user


@surfaces_db_errors
def get_user(user_id: str) -> User:
    try:
        return User.objects.get(user_id=user_id)
    except User.DoesNotExist:
        raise UserNotFound()
