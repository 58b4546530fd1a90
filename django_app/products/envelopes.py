# products/envelopes.py
"""읽기 API 공통 응답 포맷 {success, data, pagination, filters}."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .pagination import Pagination


def success(data: Any) -> Dict[str, Any]:
    return {"success": True, "data": data}


def listing(data: Any, pagination: Pagination, filters: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        "success": True,
        "data": data,
        "pagination": pagination.as_dict(),
        "filters": dict(filters),
    }


def echo_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """QueryDict 든 dict 든 {key: 마지막 값} 형태로 펼친다."""
    if not params:
        return {}
    return {key: params.get(key) for key in params.keys()}


def degraded(params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    목록/검색 실패 시 내려주는 빈 결과.
    읽기 경로는 500 대신 항상 이 형태로 응답한다.
    """
    return listing([], Pagination.empty(), echo_params(params))
