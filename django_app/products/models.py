# products/models.py
from django.db import models


class SourceWebsite(models.TextChoices):
    AMAZON = "AMAZON", "Amazon"
    FLIPKART = "FLIPKART", "Flipkart"


class Category(models.TextChoices):
    ELECTRONICS = "ELECTRONICS", "Electronics"


class SubCategory(models.TextChoices):
    SMARTPHONES = "SMARTPHONES", "Smartphones"
    LAPTOPS = "LAPTOPS", "Laptops"
    HEADPHONES_EARBUDS = "HEADPHONES_EARBUDS", "Headphones & Earbuds"
    SMARTWATCHES = "SMARTWATCHES", "Smartwatches"
    BLUETOOTH_SPEAKERS = "BLUETOOTH_SPEAKERS", "Bluetooth Speakers"
    LED_SMART_TVS = "LED_SMART_TVS", "LED Smart TVs"
    POWER_BANKS = "POWER_BANKS", "Power Banks"
    DSLR_MIRRORLESS_CAMERAS = "DSLR_MIRRORLESS_CAMERAS", "DSLR & Mirrorless Cameras"
    MOBILE_CHARGERS_CABLES = "MOBILE_CHARGERS_CABLES", "Mobile Chargers & Cables"
    HOME_THEATER_SOUNDBARS = "HOME_THEATER_SOUNDBARS", "Home Theater & Soundbars"


class Product(models.Model):
    """
    제휴 상품 (어필리에이트 링크 + 대표 이미지 1장)
    - image_url 은 클라이언트가 직접 넣지 않는다. 업로드된 파일명으로부터 계산된다.
    - sub_category 는 category 와 교차 검증하지 않는다 (flat namespace).
    """

    title = models.CharField(max_length=255)
    description = models.TextField()

    affiliate_link = models.URLField(max_length=1000)
    image_url = models.URLField(max_length=1000)

    seo_title = models.CharField(max_length=60)
    meta_description = models.CharField(max_length=140)

    source_website = models.CharField(max_length=30, choices=SourceWebsite.choices)
    category = models.CharField(
        max_length=30,
        choices=Category.choices,
        null=True,
        blank=True,
    )
    sub_category = models.CharField(max_length=50, choices=SubCategory.choices)
    deals = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["category"], name="product_category_idx"),
            models.Index(fields=["sub_category"], name="product_sub_category_idx"),
            models.Index(fields=["source_website"], name="product_source_website_idx"),
            models.Index(fields=["deals"], name="product_deals_idx"),
            models.Index(fields=["created_at"], name="product_created_at_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.title} ({self.source_website})"
