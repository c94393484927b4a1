"""
Domain errors and the unified API exception handler.

Every error raised by the service layer is an ``APIException`` with a
stable ``default_code`` so the handler can render it in the same
``{'ok': False, 'error': {...}}`` envelope as DRF's own errors.
"""
import logging

from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class HospitalNotFound(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = '병원을 찾을 수 없습니다.'
    default_code = 'HOSPITAL_NOT_FOUND'


class LikeNotFound(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = '좋아요 내역이 없습니다.'
    default_code = 'LIKE_NOT_FOUND'


class LikeAlreadyExists(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = '이미 좋아요한 병원입니다.'
    default_code = 'LIKE_ALREADY_EXIST'


class UserNotFound(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = '사용자를 찾을 수 없습니다.'
    default_code = 'USER_NOT_FOUND'


class UserAlreadyExists(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = '이미 존재하는 사용자입니다.'
    default_code = 'USER_ALREADY_EXIST'


class InvalidPage(ValidationError):
    default_detail = 'pageNum must be >= 1'
    default_code = 'INVALID_PAGE'


class UpstreamUnavailable(APIException):
    """The database or the Kakao places API could not be reached."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = '외부 서비스에 연결할 수 없습니다.'
    default_code = 'UPSTREAM_UNAVAILABLE'


def _error_code(exc) -> str:
    if isinstance(exc, ValidationError) and not isinstance(exc, InvalidPage):
        return 'VALIDATION_ERROR'
    if isinstance(exc, APIException):
        return exc.default_code.upper() if exc.default_code else 'API_ERROR'
    return 'API_ERROR'


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.exception('unhandled error in %s', context.get('view'), exc_info=exc)
        return Response({'ok': False, 'error': {'code': 'server_error', 'message': str(exc)}}, status=500)
    detail = None
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    elif isinstance(resp.data, list) and len(resp.data) == 1:
        detail = resp.data[0]
    else:
        detail = resp.data
    return Response({'ok': False, 'error': {'code': _error_code(exc), 'message': detail}}, status=resp.status_code)
