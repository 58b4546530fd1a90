# products/admin.py
from django.contrib import admin

from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "title",
        "source_website",
        "category",
        "sub_category",
        "deals",
        "created_at",
    )
    list_filter = ("source_website", "category", "sub_category", "deals")
    search_fields = ("title", "description")
    readonly_fields = ("image_url", "created_at", "updated_at")
    ordering = ("-created_at",)
