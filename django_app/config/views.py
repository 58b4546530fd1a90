# config/views.py

from django.conf import settings
from django.utils import timezone
from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView


class ApiRootView(APIView):
    """GET / → API 안내 (엔드포인트 목록)"""

    permission_classes = [permissions.AllowAny]

    def get(self, request):
        return Response(
            {
                "message": "PukkaPrice Backend API",
                "version": settings.API_VERSION,
                "endpoints": {
                    "health": "/health",
                    "products": "/products",
                    "categories": "/products/categories",
                    "deals": "/products/deals",
                    "subcategories": "/products/subcategories/:category",
                    "allSubcategories": "/subcategories",
                    "search": "/products?search=keyword",
                    "keywordSearch": "/products/search?keyword=keyword",
                    "filterByCategory": "/products?category=ELECTRONICS",
                    "filterBySubCategory": "/products?subCategory=SMARTPHONES",
                    "filterBySourceWebsite": "/products?sourceWebsite=AMAZON",
                    "filterByDeals": "/products?deals=true",
                    "suggestions": "/products/search/suggestions?q=keyword",
                    "singleProduct": "/products/:id",
                    "createProduct": "POST /products",
                    "updateProduct": "PATCH /products/:id",
                    "deleteProduct": "DELETE /products/:id",
                    "staticFiles": f"{settings.UPLOADS_URL}:filename",
                    "createProductAdmin": "POST /admin/products",
                    "getAllProductsAdmin": "GET /admin/products",
                    "getProductAdmin": "GET /admin/products/:id",
                    "updateProductAdmin": "PATCH /admin/products/:id",
                    "deleteProductAdmin": "DELETE /admin/products/:id",
                },
            }
        )


class HealthView(APIView):
    """GET /health"""

    permission_classes = [permissions.AllowAny]

    def get(self, request):
        return Response(
            {
                "status": "OK",
                "timestamp": timezone.now().isoformat(),
                "environment": settings.ENVIRONMENT,
                "version": settings.API_VERSION,
            }
        )
