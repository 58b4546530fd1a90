# products/query.py
"""
목록/검색 요청의 raw query parameter 를 정규화하는 모듈.

- 입력은 전부 문자열(또는 없음)이라고 가정한다.
- 어떤 값이 들어와도 예외를 던지지 않고 기본값으로 되돌린다.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

# 클라이언트에 노출되는 정렬 키 → 모델 필드
SORT_FIELDS: Dict[str, str] = {
    "title": "title",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "sourceWebsite": "source_website",
    "category": "category",
    "subCategory": "sub_category",
}

SORT_ORDERS = ("ASC", "DESC")

DEFAULT_SORT_BY = "createdAt"
DEFAULT_SORT_ORDER = "DESC"
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100

# 이 중 하나라도 들어오면 페이지네이션 경로를 탄다.
LISTING_PARAMS = (
    "search",
    "category",
    "subCategory",
    "sourceWebsite",
    "deals",
    "sortBy",
    "sortOrder",
    "page",
    "limit",
)


@dataclass(frozen=True)
class ProductQuery:
    search: str = ""
    category: Optional[str] = None
    sub_category: Optional[str] = None
    source_website: Optional[str] = None
    deals: Optional[bool] = None
    deals_raw: Optional[str] = None
    sort_by: str = DEFAULT_SORT_BY
    sort_order: str = DEFAULT_SORT_ORDER
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def sort_field(self) -> str:
        return SORT_FIELDS[self.sort_by]

    @property
    def descending(self) -> bool:
        return self.sort_order == "DESC"

    def echo(self, search_key: str = "search") -> Dict[str, Any]:
        """응답 envelope 의 filters 블록. 값이 없는 키는 내려주지 않는다."""
        filters = {
            search_key: self.search,
            "category": self.category,
            "subCategory": self.sub_category,
            "sourceWebsite": self.source_website,
            "deals": self.deals_raw,
            "sortBy": self.sort_by,
            "sortOrder": self.sort_order,
        }
        return {key: value for key, value in filters.items() if value is not None}


def _first(params: Optional[Mapping[str, Any]], key: str) -> Optional[str]:
    if not params:
        return None
    value = params.get(key)
    if value is None:
        return None
    return str(value)


def _optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def _parse_int(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    # 앞쪽 정수 부분만 읽는다 ("12abc" → 12, "1_000" → 1)
    match = _LEADING_INT.match(value)
    if match is None:
        return default
    return int(match.group(0))


def parse_deals(value: Optional[str]) -> Optional[bool]:
    """
    "true" 만 True 로 본다.
    "false" 를 포함한 나머지는 None → 필터 미적용 (딜 아닌 상품도 제외하지 않음).
    """
    if value is not None and value.strip() == "true":
        return True
    return None


def normalize_sort_by(value: Optional[str]) -> str:
    if value and value.strip() in SORT_FIELDS:
        return value.strip()
    return DEFAULT_SORT_BY


def normalize_sort_order(value: Optional[str]) -> str:
    if value and value.strip().upper() in SORT_ORDERS:
        return value.strip().upper()
    return DEFAULT_SORT_ORDER


def clamp_page(value: Optional[str]) -> int:
    return max(_parse_int(value, DEFAULT_PAGE), 1)


def clamp_limit(value: Optional[str], default: int = DEFAULT_LIMIT, maximum: int = MAX_LIMIT) -> int:
    return min(max(_parse_int(value, default), 1), maximum)


def has_listing_params(params: Optional[Mapping[str, Any]]) -> bool:
    if not params:
        return False
    return any(key in params for key in LISTING_PARAMS)


def normalize_query(
    params: Optional[Mapping[str, Any]],
    *,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> ProductQuery:
    """raw parameter(QueryDict 또는 dict) → ProductQuery."""
    deals_raw = _first(params, "deals")
    return ProductQuery(
        search=(_first(params, "search") or "").strip(),
        category=_optional_text(_first(params, "category")),
        sub_category=_optional_text(_first(params, "subCategory")),
        source_website=_optional_text(_first(params, "sourceWebsite")),
        deals=parse_deals(deals_raw),
        deals_raw=deals_raw,
        sort_by=normalize_sort_by(_first(params, "sortBy")),
        sort_order=normalize_sort_order(_first(params, "sortOrder")),
        page=clamp_page(_first(params, "page")),
        limit=clamp_limit(_first(params, "limit"), default=default_limit, maximum=max_limit),
    )
