# products/filters.py
"""
ProductQuery → Django Q 조건 / 정렬 목록.

각 clause builder 는 조건이 없으면 None 을 돌려주고,
build_predicate 가 None 이 아닌 조각만 AND 로 묶는다.
"""

from __future__ import annotations

from functools import reduce
from operator import and_, or_
from typing import Callable, Iterable, List, Optional

from django.db.models import Q

from .query import ProductQuery

ClauseBuilder = Callable[[ProductQuery], Optional[Q]]


def any_of(clauses: Iterable[Q]) -> Q:
    return reduce(or_, clauses)


def all_of(clauses: Iterable[Q]) -> Q:
    return reduce(and_, clauses, Q())


def category_clause(category: str) -> Q:
    """
    category 대소문자 보정.

    기존 데이터에 'electronics', 'Electronics' 처럼 대소문자가 섞여 들어간 행이 있어서
    정확히 일치 / 대문자 / 소문자 / iexact 네 가지를 OR 로 묶는다.
    저장 시점 정규화가 끝나면 category=... 하나로 줄일 수 있다.
    """
    return any_of(
        [
            Q(category=category),
            Q(category=category.upper()),
            Q(category=category.lower()),
            Q(category__iexact=category),
        ]
    )


def search_filter(query: ProductQuery) -> Optional[Q]:
    if not query.search:
        return None
    return Q(title__icontains=query.search) | Q(description__icontains=query.search)


def category_filter(query: ProductQuery) -> Optional[Q]:
    if not query.category:
        return None
    return category_clause(query.category)


def sub_category_filter(query: ProductQuery) -> Optional[Q]:
    if not query.sub_category:
        return None
    return Q(sub_category=query.sub_category)


def source_website_filter(query: ProductQuery) -> Optional[Q]:
    if not query.source_website:
        return None
    return Q(source_website=query.source_website)


def deals_filter(query: ProductQuery) -> Optional[Q]:
    if query.deals is None:
        return None
    return Q(deals=query.deals)


CLAUSE_BUILDERS: List[ClauseBuilder] = [
    search_filter,
    category_filter,
    sub_category_filter,
    source_website_filter,
    deals_filter,
]


def build_predicate(query: ProductQuery, builders: Iterable[ClauseBuilder] = CLAUSE_BUILDERS) -> Q:
    """조건이 하나도 없으면 빈 Q() (= 전체 매칭)."""
    clauses = [clause for clause in (builder(query) for builder in builders) if clause is not None]
    return all_of(clauses)


def build_ordering(query: ProductQuery) -> List[str]:
    """정렬 필드 + id tie-breaker (같은 값끼리도 페이지 경계가 흔들리지 않게)."""
    prefix = "-" if query.descending else ""
    return [f"{prefix}{query.sort_field}", f"{prefix}id"]
