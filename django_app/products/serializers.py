# products/serializers.py
from django.conf import settings
from rest_framework import serializers

from .models import Category, Product, SourceWebsite, SubCategory


class ProductSerializer(serializers.ModelSerializer):
    """응답용. DB 필드는 snake_case, API 는 기존 프론트엔드가 쓰는 camelCase 그대로."""

    imageUrl = serializers.CharField(source="image_url", read_only=True)
    affiliateLink = serializers.CharField(source="affiliate_link", read_only=True)
    SEO_title = serializers.CharField(source="seo_title", read_only=True)
    META_description = serializers.CharField(source="meta_description", read_only=True)
    sourceWebsite = serializers.CharField(source="source_website", read_only=True)
    subCategory = serializers.CharField(source="sub_category", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "title",
            "description",
            "imageUrl",
            "affiliateLink",
            "SEO_title",
            "META_description",
            "sourceWebsite",
            "category",
            "subCategory",
            "deals",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields


class ProductWriteSerializer(serializers.ModelSerializer):
    """
    생성/수정 입력 검증 (multipart).

    - 이미지는 "image" 또는 "file" 필드 어느 쪽으로 와도 받는다.
    - imageUrl 은 입력으로 받지 않는다 (업로드 파일에서 계산).
    - 저장은 하지 않는다. 실제 저장은 ProductService 가 담당.
    """

    affiliateLink = serializers.URLField(source="affiliate_link", max_length=1000)
    SEO_title = serializers.CharField(source="seo_title", max_length=60)
    META_description = serializers.CharField(source="meta_description", max_length=140)
    sourceWebsite = serializers.ChoiceField(source="source_website", choices=SourceWebsite.choices)
    category = serializers.ChoiceField(
        choices=Category.choices,
        required=False,
        allow_null=True,
        allow_blank=True,
    )
    subCategory = serializers.ChoiceField(source="sub_category", choices=SubCategory.choices)
    deals = serializers.BooleanField(required=False)

    image = serializers.ImageField(required=False, write_only=True)
    file = serializers.ImageField(required=False, write_only=True)

    class Meta:
        model = Product
        fields = [
            "title",
            "description",
            "affiliateLink",
            "SEO_title",
            "META_description",
            "sourceWebsite",
            "category",
            "subCategory",
            "deals",
            "image",
            "file",
        ]

    def validate_category(self, value):
        return value or None

    def validate(self, attrs):
        image = attrs.pop("image", None) or attrs.pop("file", None)
        attrs.pop("file", None)

        max_size = getattr(settings, "MAX_IMAGE_UPLOAD_SIZE", 5 * 1024 * 1024)
        if image is not None and image.size > max_size:
            raise serializers.ValidationError(
                {"image": f"Image must be {max_size // (1024 * 1024)}MB or smaller."}
            )

        if image is not None:
            attrs["image"] = image
        return attrs
