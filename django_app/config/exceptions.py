# config/exceptions.py
"""
DRF 예외 핸들러.

- APIException 계열(검증 실패 400, 없는 상품 404 등): {success: false, error, details?}
- 그 밖의 예외(쓰기 중 DB 오류 등): 500 + {success: false, error}
  DEBUG 일 때만 details 에 원인 메시지를 붙인다.
"""

import logging

from django.conf import settings
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def _error_message(detail) -> str:
    if isinstance(detail, list) and len(detail) == 1:
        return str(detail[0])
    if isinstance(detail, (dict, list)):
        return "Validation failed"
    return str(detail)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is not None:
        detail = response.data.get("detail", response.data) if isinstance(response.data, dict) else response.data
        body = {"success": False, "error": _error_message(detail)}
        if isinstance(detail, (dict, list)):
            body["details"] = detail
        response.data = body
        return response

    view = context.get("view")
    logger.exception("Unhandled error in %s", type(view).__name__ if view else "request")

    body = {"success": False, "error": "Internal server error"}
    if settings.DEBUG:
        body["details"] = str(exc)
    return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
