# products/views.py

from rest_framework import permissions, status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import ProductNotFound
from .serializers import ProductSerializer, ProductWriteSerializer
from .services import get_product_service


class ProductServiceMixin:
    """요청마다 settings 기준으로 ProductService 를 만들어 쓴다."""

    permission_classes = [permissions.AllowAny]

    @property
    def service(self):
        if not hasattr(self, "_service"):
            self._service = get_product_service()
        return self._service


class ProductWriteMixin(ProductServiceMixin):
    """생성/수정/삭제 공통 처리 (공개 라우트와 /admin 라우트가 같이 쓴다)."""

    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def create_product(self, request):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        image = data.pop("image", None)

        product = self.service.create(data, image)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    def update_product(self, request, pk: int):
        serializer = ProductWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        image = data.pop("image", None)

        product = self.service.update(pk, data, image)
        return Response(ProductSerializer(product).data, status=status.HTTP_200_OK)

    def remove_product(self, pk: int):
        product = self.service.remove(pk)
        return Response(ProductSerializer(product).data, status=status.HTTP_200_OK)


class ProductListCreateView(ProductWriteMixin, APIView):
    """
    상품 목록 / 생성

    GET  /products
    - search: 제목/설명 부분 일치 (대소문자 무시)
    - category, subCategory, sourceWebsite: 필터
    - deals: "true" 일 때만 딜 상품으로 제한
    - sortBy, sortOrder, page, limit
    POST /products  (multipart, image 또는 file 필수)
    """

    def get(self, request):
        return Response(self.service.list_products(request.query_params))

    def post(self, request):
        return self.create_product(request)


class ProductDetailView(ProductWriteMixin, APIView):
    """
    GET    /products/<id>
    PATCH  /products/<id>
    DELETE /products/<id>
    """

    def get(self, request, pk: int):
        result = self.service.find_one_formatted(pk)
        if result is None:
            raise ProductNotFound()
        return Response(result)

    def patch(self, request, pk: int):
        return self.update_product(request, pk)

    def delete(self, request, pk: int):
        return self.remove_product(pk)


class ProductDealsView(ProductServiceMixin, APIView):
    """GET /products/deals → 목록과 같고 deals=true 고정."""

    def get(self, request):
        params = request.query_params.copy()
        params["deals"] = "true"
        return Response(self.service.list_products(params))


class ProductCategoriesView(ProductServiceMixin, APIView):
    """GET /products/categories → category / subCategory / sourceWebsite 별 상품 수."""

    def get(self, request):
        return Response(self.service.get_categories())


class ProductSubcategoriesView(ProductServiceMixin, APIView):
    """GET /products/subcategories/<category>"""

    def get(self, request, category: str):
        return Response(self.service.get_subcategories_by_category(category))


class ProductSearchView(ProductServiceMixin, APIView):
    """GET /products/search?keyword=...&(목록과 같은 필터/정렬/페이지 파라미터)"""

    def get(self, request):
        keyword = request.query_params.get("keyword")
        return Response(self.service.search_products(keyword, request.query_params))


class SearchSuggestionsView(ProductServiceMixin, APIView):
    """GET /products/search/suggestions?q=... → 최대 10개 상품명."""

    def get(self, request):
        return Response(self.service.search_suggestions(request.query_params.get("q", "")))


class SubcategoryListView(ProductServiceMixin, APIView):
    """GET /subcategories → 전체 서브카테고리 enum 값."""

    def get(self, request):
        return Response(self.service.list_subcategories())


# -------------------------
# Admin CRUD (/admin/products)
# -------------------------


class AdminProductListCreateView(ProductWriteMixin, APIView):
    def get(self, request):
        return Response(self.service.list_products())

    def post(self, request):
        return self.create_product(request)


class AdminProductDetailView(ProductWriteMixin, APIView):
    """단건 조회는 envelope 없이 상품 그대로 내려준다."""

    def get(self, request, pk: int):
        product = self.service.find_one(pk)
        return Response(ProductSerializer(product).data)

    def patch(self, request, pk: int):
        return self.update_product(request, pk)

    def delete(self, request, pk: int):
        return self.remove_product(pk)
