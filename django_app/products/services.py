# products/services.py
"""
상품 카탈로그 서비스 레이어.

- 읽기(목록/검색/추천어): 내부 오류가 나도 500 을 내지 않고 빈 envelope 로 응답한다.
- 쓰기(생성/수정/삭제): 오류를 그대로 올려서 예외 핸들러가 처리하게 둔다.
- 이미지 파일 삭제는 best-effort (실패해도 본 작업은 계속 진행).
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Dict, List, Mapping, Optional

from django.conf import settings
from django.db.models import Count, QuerySet, Value
from django.db.models.functions import StrIndex

from . import envelopes
from .exceptions import ImageRequired, ProductNotFound
from .filters import build_ordering, build_predicate, category_clause
from .models import Product, SubCategory
from .pagination import PageWindow, Pagination, paginate
from .query import DEFAULT_LIMIT, MAX_LIMIT, has_listing_params, normalize_query
from .serializers import ProductSerializer
from .storage import ImageStore

logger = logging.getLogger(__name__)

SUGGESTION_MIN_LENGTH = 2
SUGGESTION_LIMIT = 10


class ProductService:
    def __init__(
        self,
        image_store: ImageStore,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ) -> None:
        self.image_store = image_store
        self.default_limit = default_limit
        self.max_limit = max_limit

    def get_queryset(self) -> QuerySet:
        return Product.objects.all()

    @staticmethod
    def serialize(products) -> List[Dict[str, Any]]:
        return ProductSerializer(products, many=True).data

    # ---------- 목록 / 검색 ----------

    def list_products(self, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        GET /products

        - 인식하는 파라미터가 하나도 없으면: 전체 상품을 최신순으로 한 번에 (페이지네이션 없음)
        - 하나라도 있으면: 필터 + 정렬 + 페이지네이션
        """
        try:
            if not has_listing_params(params):
                return self._list_all()

            query = normalize_query(params, default_limit=self.default_limit, max_limit=self.max_limit)
            return self._run_query(query, filters=query.echo())
        except Exception:
            logger.exception("Product listing failed, returning empty result (params=%s)", dict(params or {}))
            return envelopes.degraded(params)

    def search_products(self, keyword: Optional[str], params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """GET /products/search?keyword=... (search 대신 keyword 를 echo)."""
        try:
            keyword = (keyword or "").strip()
            if not keyword:
                return envelopes.degraded(params)

            query = normalize_query(params, default_limit=self.default_limit, max_limit=self.max_limit)
            query = dataclasses.replace(query, search=keyword)
            return self._run_query(query, filters=query.echo(search_key="keyword"))
        except Exception:
            logger.exception("Product search failed for keyword %r, returning empty result", keyword)
            return envelopes.degraded(params)

    def _list_all(self) -> Dict[str, Any]:
        products = list(self.get_queryset().order_by("-created_at", "-id"))
        return envelopes.listing(
            self.serialize(products),
            Pagination.single_page(len(products)),
            filters={},
        )

    def _run_query(self, query, filters: Dict[str, Any]) -> Dict[str, Any]:
        queryset = (
            self.get_queryset()
            .filter(build_predicate(query))
            .order_by(*build_ordering(query))
        )
        items, pagination = paginate(queryset, PageWindow(page=query.page, limit=query.limit))
        return envelopes.listing(self.serialize(items), pagination, filters)

    def search_suggestions(self, q: Optional[str]) -> Dict[str, Any]:
        q = q or ""
        if len(q) < SUGGESTION_MIN_LENGTH:
            return envelopes.success([])

        try:
            titles = (
                self.get_queryset()
                # LIKE 는 sqlite 에서 대소문자를 무시하므로 instr/strpos 로 비교
                .alias(match_pos=StrIndex("title", Value(q)))
                .filter(match_pos__gt=0)
                .order_by("title")
                .values_list("title", flat=True)
                .distinct()[:SUGGESTION_LIMIT]
            )
            return envelopes.success(list(titles))
        except Exception:
            logger.exception("Search suggestions failed for %r", q)
            return envelopes.success([])

    # ---------- 집계 ----------

    def _grouped_counts(self, queryset: QuerySet, field: str, key: str, by_count: bool = False) -> List[Dict[str, Any]]:
        rows = queryset.order_by().values(field).annotate(count=Count("id"))
        rows = rows.order_by("-count", field) if by_count else rows.order_by(field)
        return [{key: row[field], "count": row["count"]} for row in rows]

    def get_categories(self) -> Dict[str, Any]:
        queryset = self.get_queryset()
        return envelopes.success(
            {
                "categories": self._grouped_counts(queryset, "category", "category"),
                "subCategories": self._grouped_counts(queryset, "sub_category", "subCategory"),
                "sourceWebsites": self._grouped_counts(
                    queryset, "source_website", "sourceWebsite", by_count=True
                ),
            }
        )

    def get_subcategories_by_category(self, category: str) -> Dict[str, Any]:
        queryset = self.get_queryset().filter(category_clause(category))
        return envelopes.success(
            {
                "category": category,
                "subCategories": self._grouped_counts(queryset, "sub_category", "subCategory"),
            }
        )

    @staticmethod
    def list_subcategories() -> Dict[str, Any]:
        return envelopes.success(list(SubCategory.values))

    # ---------- 단건 조회 ----------

    def find_one(self, product_id) -> Product:
        product = self.get_queryset().filter(pk=product_id).first()
        if product is None:
            raise ProductNotFound(product_id)
        return product

    def find_one_formatted(self, product_id) -> Optional[Dict[str, Any]]:
        product = self.get_queryset().filter(pk=product_id).first()
        if product is None:
            return None
        return envelopes.success(ProductSerializer(product).data)

    # ---------- 생성 / 수정 / 삭제 ----------

    def create(self, data: Mapping[str, Any], image=None) -> Product:
        if image is None:
            raise ImageRequired()

        filename = self.image_store.save(image)
        try:
            product = Product.objects.create(**data, image_url=self.image_store.url_for(filename))
        except Exception:
            # 레코드가 없으면 파일도 남기지 않는다.
            self.image_store.delete(filename)
            raise

        logger.info("Created product %s (%s)", product.pk, product.title)
        return product

    def update(self, product_id, data: Mapping[str, Any], image=None) -> Product:
        product = self.find_one(product_id)

        old_image_url = product.image_url
        filename = None
        if image is not None:
            # TODO: 같은 상품 이미지를 동시에 교체하면 한쪽 파일이 고아로 남을 수 있다 (락 없음).
            filename = self.image_store.save(image)
            product.image_url = self.image_store.url_for(filename)

        for field, value in data.items():
            setattr(product, field, value)

        try:
            product.save()
        except Exception:
            # 저장 실패 시 기존 이미지는 그대로 두고 새 파일만 지운다.
            self.image_store.delete(filename)
            raise

        if filename is not None:
            self.image_store.delete_by_url(old_image_url)

        logger.info("Updated product %s (fields=%s, new_image=%s)", product.pk, sorted(data), image is not None)
        return product

    def remove(self, product_id) -> Product:
        product = self.find_one(product_id)
        pk = product.pk

        self.image_store.delete_by_url(product.image_url)
        product.delete()
        # delete() 후 pk 가 None 이 되므로 응답용으로 되돌려 둔다.
        product.pk = pk

        logger.info("Deleted product %s", pk)
        return product


def get_product_service() -> ProductService:
    """settings 값으로 서비스 인스턴스를 만든다 (요청마다 호출)."""
    image_store = ImageStore(
        location=settings.UPLOADS_ROOT,
        base_url=settings.PUBLIC_BASE_URL,
        public_path=settings.UPLOADS_URL,
    )
    return ProductService(
        image_store=image_store,
        default_limit=getattr(settings, "PRODUCT_LIST_DEFAULT_LIMIT", DEFAULT_LIMIT),
        max_limit=getattr(settings, "PRODUCT_LIST_MAX_LIMIT", MAX_LIMIT),
    )
