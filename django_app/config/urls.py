# config/urls.py

from django.conf import settings
from django.contrib import admin
from django.urls import include, path, re_path
from django.views.static import serve

from .views import ApiRootView, HealthView

urlpatterns = [
    # Django 관리자 (/admin/products 는 API 라우트라 경로를 분리)
    path("django-admin/", admin.site.urls),

    path("", ApiRootView.as_view(), name="api-root"),
    re_path(r"^health/?$", HealthView.as_view(), name="health"),

    # API 엔드포인트 (/products, /subcategories, /admin/products)
    path("", include("products.urls")),

    # 업로드된 상품 이미지
    re_path(
        r"^%s(?P<path>.+)$" % settings.UPLOADS_URL.lstrip("/"),
        serve,
        {"document_root": settings.UPLOADS_ROOT},
        name="uploads",
    ),
]
