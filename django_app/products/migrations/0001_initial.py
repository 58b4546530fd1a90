from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("affiliate_link", models.URLField(max_length=1000)),
                ("image_url", models.URLField(max_length=1000)),
                ("seo_title", models.CharField(max_length=60)),
                ("meta_description", models.CharField(max_length=140)),
                (
                    "source_website",
                    models.CharField(
                        choices=[("AMAZON", "Amazon"), ("FLIPKART", "Flipkart")],
                        max_length=30,
                    ),
                ),
                (
                    "category",
                    models.CharField(
                        blank=True,
                        choices=[("ELECTRONICS", "Electronics")],
                        max_length=30,
                        null=True,
                    ),
                ),
                (
                    "sub_category",
                    models.CharField(
                        choices=[
                            ("SMARTPHONES", "Smartphones"),
                            ("LAPTOPS", "Laptops"),
                            ("HEADPHONES_EARBUDS", "Headphones & Earbuds"),
                            ("SMARTWATCHES", "Smartwatches"),
                            ("BLUETOOTH_SPEAKERS", "Bluetooth Speakers"),
                            ("LED_SMART_TVS", "LED Smart TVs"),
                            ("POWER_BANKS", "Power Banks"),
                            ("DSLR_MIRRORLESS_CAMERAS", "DSLR & Mirrorless Cameras"),
                            ("MOBILE_CHARGERS_CABLES", "Mobile Chargers & Cables"),
                            ("HOME_THEATER_SOUNDBARS", "Home Theater & Soundbars"),
                        ],
                        max_length=50,
                    ),
                ),
                ("deals", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["category"], name="product_category_idx"),
                    models.Index(fields=["sub_category"], name="product_sub_category_idx"),
                    models.Index(fields=["source_website"], name="product_source_website_idx"),
                    models.Index(fields=["deals"], name="product_deals_idx"),
                    models.Index(fields=["created_at"], name="product_created_at_idx"),
                ],
            },
        ),
    ]
