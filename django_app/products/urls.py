# products/urls.py

from django.urls import re_path

from . import views

app_name = "products"

# 끝의 슬래시는 있어도 되고 없어도 된다.
api_urlpatterns = [
    re_path(r"^products/?$", views.ProductListCreateView.as_view(), name="product-list-create"),
    re_path(r"^products/categories/?$", views.ProductCategoriesView.as_view(), name="product-categories"),
    re_path(r"^products/deals/?$", views.ProductDealsView.as_view(), name="product-deals"),
    re_path(
        r"^products/subcategories/(?P<category>[^/]+)/?$",
        views.ProductSubcategoriesView.as_view(),
        name="product-subcategories",
    ),
    re_path(
        r"^products/search/suggestions/?$",
        views.SearchSuggestionsView.as_view(),
        name="product-search-suggestions",
    ),
    re_path(r"^products/search/?$", views.ProductSearchView.as_view(), name="product-search"),
    re_path(r"^products/(?P<pk>[0-9]+)/?$", views.ProductDetailView.as_view(), name="product-detail"),
    re_path(r"^subcategories/?$", views.SubcategoryListView.as_view(), name="subcategory-list"),
]

admin_urlpatterns = [
    re_path(r"^admin/products/?$", views.AdminProductListCreateView.as_view(), name="admin-product-list-create"),
    re_path(
        r"^admin/products/(?P<pk>[0-9]+)/?$",
        views.AdminProductDetailView.as_view(),
        name="admin-product-detail",
    ),
]

urlpatterns = api_urlpatterns + admin_urlpatterns
