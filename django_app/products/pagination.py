# products/pagination.py
"""
페이지 윈도우 계산 + pagination 메타데이터.

DRF 의 PageNumberPagination 은 범위를 벗어난 page 에 404 를 내므로 쓰지 않는다.
여기서는 마지막 페이지를 넘으면 빈 data + 정상 pagination 블록을 돌려준다.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from django.db.models import QuerySet


@dataclass(frozen=True)
class PageWindow:
    page: int
    limit: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def end(self) -> int:
        return self.skip + self.limit


@dataclass(frozen=True)
class Pagination:
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def build(cls, window: PageWindow, total: int) -> "Pagination":
        # total 이 0 이어도 화면에는 1페이지로 보여준다.
        total_pages = max(math.ceil(total / window.limit), 1)
        return cls(
            current_page=window.page,
            total_pages=total_pages,
            total_items=total,
            items_per_page=window.limit,
            has_next_page=window.page < total_pages,
            has_prev_page=window.page > 1,
        )

    @classmethod
    def empty(cls) -> "Pagination":
        return cls(
            current_page=1,
            total_pages=1,
            total_items=0,
            items_per_page=0,
            has_next_page=False,
            has_prev_page=False,
        )

    @classmethod
    def single_page(cls, count: int) -> "Pagination":
        """페이지네이션 없이 전체를 한 번에 내려줄 때."""
        return cls(
            current_page=1,
            total_pages=1,
            total_items=count,
            items_per_page=count,
            has_next_page=False,
            has_prev_page=False,
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "totalItems": self.total_items,
            "itemsPerPage": self.items_per_page,
            "hasNextPage": self.has_next_page,
            "hasPrevPage": self.has_prev_page,
        }


def paginate(queryset: QuerySet, window: PageWindow) -> Tuple[List[Any], Pagination]:
    """
    count 조회 1번 + 슬라이스 조회 1번.
    두 쿼리 사이에 트랜잭션은 걸지 않는다 (그 사이 쓰기가 끼면 total 이 1 정도 어긋날 수 있음).
    skip 이 total 이상이면 슬라이스 조회를 하지 않는다 (아주 큰 page 는 DB OFFSET 범위를 넘는다).
    """
    total = queryset.count()
    items = list(queryset[window.skip:window.end]) if window.skip < total else []
    return items, Pagination.build(window, total)
