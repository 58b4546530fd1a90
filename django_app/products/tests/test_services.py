# products/tests/test_services.py

from unittest import mock

from django.core.files.storage import FileSystemStorage
from django.db import DatabaseError
from django.test import TestCase

from products.exceptions import ImageRequired, ProductNotFound
from products.models import Product, SubCategory

from .factories import TEST_BASE_URL, TempUploadsMixin, make_image, make_product


class ListProductsTests(TempUploadsMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.old = make_product(title="Old Phone")
        self.deal = make_product(title="Deal Phone", deals=True)
        self.laptop = make_product(title="Laptop Pro", sub_category="LAPTOPS")

    def test_no_params_returns_everything_newest_first(self):
        result = self.service.list_products(None)
        self.assertTrue(result["success"])
        self.assertEqual([p["title"] for p in result["data"]], ["Laptop Pro", "Deal Phone", "Old Phone"])
        self.assertEqual(result["filters"], {})
        self.assertEqual(result["pagination"]["totalItems"], 3)
        self.assertEqual(result["pagination"]["itemsPerPage"], 3)
        self.assertFalse(result["pagination"]["hasNextPage"])

    def test_unrecognized_params_use_fast_path(self):
        result = self.service.list_products({"utm_source": "newsletter"})
        self.assertEqual(result["filters"], {})
        self.assertEqual(len(result["data"]), 3)

    def test_paginated_listing(self):
        result = self.service.list_products({"limit": "2", "sortBy": "title", "sortOrder": "asc"})
        self.assertEqual([p["title"] for p in result["data"]], ["Deal Phone", "Laptop Pro"])
        self.assertEqual(
            result["pagination"],
            {
                "currentPage": 1,
                "totalPages": 2,
                "totalItems": 3,
                "itemsPerPage": 2,
                "hasNextPage": True,
                "hasPrevPage": False,
            },
        )
        self.assertEqual(result["filters"]["sortBy"], "title")
        self.assertEqual(result["filters"]["sortOrder"], "ASC")

    def test_page_beyond_last(self):
        result = self.service.list_products({"page": "4", "limit": "2"})
        self.assertEqual(result["data"], [])
        self.assertEqual(result["pagination"]["totalItems"], 3)
        self.assertFalse(result["pagination"]["hasNextPage"])
        self.assertTrue(result["pagination"]["hasPrevPage"])

    def test_huge_page_is_past_the_end_not_an_error(self):
        result = self.service.list_products({"page": str(10**19)})
        self.assertEqual(result["data"], [])
        self.assertEqual(result["pagination"]["currentPage"], 10**19)
        self.assertEqual(result["pagination"]["totalItems"], 3)
        self.assertFalse(result["pagination"]["hasNextPage"])
        self.assertTrue(result["pagination"]["hasPrevPage"])

    def test_invalid_sort_by_does_not_fail(self):
        result = self.service.list_products({"sortBy": "dropTable"})
        self.assertEqual(len(result["data"]), 3)
        self.assertEqual(result["filters"]["sortBy"], "createdAt")

    def test_deals_filter(self):
        only_deals = self.service.list_products({"deals": "true"})
        self.assertEqual([p["title"] for p in only_deals["data"]], ["Deal Phone"])

        not_applied = self.service.list_products({"deals": "false"})
        self.assertEqual(len(not_applied["data"]), 3)

    def test_internal_failure_degrades_to_empty_result(self):
        params = {"search": "phone", "page": "2"}
        with mock.patch("products.services.paginate", side_effect=DatabaseError("boom")):
            with self.assertLogs("products.services", level="ERROR"):
                result = self.service.list_products(params)

        self.assertTrue(result["success"])
        self.assertEqual(result["data"], [])
        self.assertEqual(result["pagination"]["totalItems"], 0)
        self.assertEqual(result["pagination"]["totalPages"], 1)
        self.assertEqual(result["filters"], params)


class SearchProductsTests(TempUploadsMixin, TestCase):
    def setUp(self):
        super().setUp()
        make_product(title="Phone X")
        make_product(title="Phone Y", source_website="FLIPKART")
        make_product(title="Speaker", description="loud")

    def test_empty_keyword_returns_empty_envelope(self):
        result = self.service.search_products("  ", {"category": "ELECTRONICS"})
        self.assertEqual(result["data"], [])
        self.assertEqual(result["filters"], {"category": "ELECTRONICS"})

    def test_keyword_with_filters(self):
        result = self.service.search_products("phone", {"sourceWebsite": "FLIPKART"})
        self.assertEqual([p["title"] for p in result["data"]], ["Phone Y"])
        self.assertEqual(result["filters"]["keyword"], "phone")
        self.assertNotIn("search", result["filters"])


class SuggestionTests(TempUploadsMixin, TestCase):
    def test_short_query_skips_store(self):
        with self.assertNumQueries(0):
            self.assertEqual(self.service.search_suggestions("P"), {"success": True, "data": []})
            self.assertEqual(self.service.search_suggestions(""), {"success": True, "data": []})
            self.assertEqual(self.service.search_suggestions(None), {"success": True, "data": []})

    def test_distinct_sorted_and_capped(self):
        for index in range(12):
            make_product(title=f"Phone {index:02d}")
        make_product(title="Phone 00")
        make_product(title="Laptop")

        result = self.service.search_suggestions("Phone")
        self.assertEqual(result["data"], [f"Phone {index:02d}" for index in range(10)])

    def test_match_is_case_sensitive(self):
        make_product(title="Phone X")
        self.assertEqual(self.service.search_suggestions("phone")["data"], [])
        self.assertEqual(self.service.search_suggestions("Phone")["data"], ["Phone X"])
        self.assertEqual(self.service.search_suggestions("ne X")["data"], ["Phone X"])

    def test_failure_degrades(self):
        with mock.patch.object(type(self.service), "get_queryset", side_effect=DatabaseError("boom")):
            with self.assertLogs("products.services", level="ERROR"):
                self.assertEqual(self.service.search_suggestions("Phone"), {"success": True, "data": []})


class AggregateTests(TempUploadsMixin, TestCase):
    def setUp(self):
        super().setUp()
        make_product(sub_category="SMARTPHONES", source_website="AMAZON")
        make_product(sub_category="SMARTPHONES", source_website="FLIPKART")
        make_product(sub_category="LAPTOPS", source_website="FLIPKART")
        make_product(sub_category="LAPTOPS", category="electronics", source_website="FLIPKART")
        make_product(sub_category="POWER_BANKS", category=None)

    def test_categories(self):
        data = self.service.get_categories()["data"]
        self.assertIn({"subCategory": "SMARTPHONES", "count": 2}, data["subCategories"])
        self.assertIn({"category": "ELECTRONICS", "count": 3}, data["categories"])
        self.assertEqual(data["sourceWebsites"][0], {"sourceWebsite": "FLIPKART", "count": 3})

    def test_subcategories_by_category(self):
        data = self.service.get_subcategories_by_category("ELECTRONICS")["data"]
        self.assertEqual(data["category"], "ELECTRONICS")
        self.assertEqual(
            data["subCategories"],
            [{"subCategory": "LAPTOPS", "count": 2}, {"subCategory": "SMARTPHONES", "count": 2}],
        )

    def test_static_subcategory_list(self):
        result = self.service.list_subcategories()
        self.assertEqual(len(result["data"]), 10)
        self.assertEqual(result["data"], list(SubCategory.values))


class CrudTests(TempUploadsMixin, TestCase):
    def product_data(self, **overrides):
        data = {
            "title": "Phone X",
            "description": "A very capable smartphone",
            "affiliate_link": "https://www.amazon.in/dp/B000000001",
            "seo_title": "Phone X deal",
            "meta_description": "Best price on Phone X",
            "source_website": "AMAZON",
            "category": "ELECTRONICS",
            "sub_category": "SMARTPHONES",
            "deals": False,
        }
        data.update(overrides)
        return data

    def test_create_requires_image(self):
        with self.assertRaises(ImageRequired):
            self.service.create(self.product_data(), image=None)
        self.assertEqual(Product.objects.count(), 0)

    def test_create_stores_image_and_url(self):
        product = self.service.create(self.product_data(), image=make_image("phone.png"))
        files = self.stored_files()
        self.assertEqual(len(files), 1)
        self.assertRegex(files[0], r"^\d+-phone\.png$")
        self.assertEqual(product.image_url, f"{TEST_BASE_URL}/uploads/{files[0]}")

    def test_create_failure_removes_stored_image(self):
        with mock.patch.object(Product.objects, "create", side_effect=DatabaseError("boom")):
            with self.assertRaises(DatabaseError):
                self.service.create(self.product_data(), image=make_image())
        self.assertEqual(self.stored_files(), [])

    def test_update_replaces_image_and_deletes_old_file(self):
        product = self.service.create(self.product_data(), image=make_image("old.png"))
        old_url = product.image_url

        updated = self.service.update(product.pk, {"deals": True}, image=make_image("new.png", color="blue"))

        self.assertNotEqual(updated.image_url, old_url)
        self.assertTrue(updated.deals)
        files = self.stored_files()
        self.assertEqual(len(files), 1)
        self.assertTrue(files[0].endswith("-new.png"))

    def test_update_succeeds_when_old_file_cannot_be_deleted(self):
        product = self.service.create(self.product_data(), image=make_image("old.png"))
        old_url = product.image_url

        with mock.patch.object(FileSystemStorage, "delete", side_effect=OSError("read-only")):
            with self.assertLogs("products.storage", level="WARNING"):
                updated = self.service.update(product.pk, {}, image=make_image("new.png"))

        self.assertNotEqual(updated.image_url, old_url)
        product.refresh_from_db()
        self.assertEqual(product.image_url, updated.image_url)

    def test_update_failure_keeps_old_image(self):
        product = self.service.create(self.product_data(), image=make_image("old.png"))
        old_url = product.image_url
        old_files = self.stored_files()

        with mock.patch.object(Product, "save", side_effect=DatabaseError("boom")):
            with self.assertRaises(DatabaseError):
                self.service.update(product.pk, {"deals": True}, image=make_image("new.png"))

        product.refresh_from_db()
        self.assertEqual(product.image_url, old_url)
        self.assertFalse(product.deals)
        self.assertEqual(self.stored_files(), old_files)

    def test_update_without_image_keeps_url(self):
        product = self.service.create(self.product_data(), image=make_image())
        updated = self.service.update(product.pk, {"title": "Phone X (2025)"})
        self.assertEqual(updated.image_url, product.image_url)
        self.assertEqual(updated.title, "Phone X (2025)")
        self.assertEqual(updated.sub_category, "SMARTPHONES")

    def test_update_missing_product(self):
        with self.assertRaises(ProductNotFound):
            self.service.update(9999, {"title": "nope"})

    def test_remove_deletes_record_and_file(self):
        product = self.service.create(self.product_data(), image=make_image())
        removed = self.service.remove(product.pk)
        self.assertEqual(removed.pk, product.pk)
        self.assertFalse(Product.objects.filter(pk=product.pk).exists())
        self.assertEqual(self.stored_files(), [])

    def test_remove_missing_product(self):
        with self.assertRaises(ProductNotFound):
            self.service.remove(9999)

    def test_find_one_variants(self):
        product = make_product()
        self.assertEqual(self.service.find_one(product.pk), product)
        self.assertEqual(self.service.find_one_formatted(product.pk)["data"]["id"], product.pk)
        self.assertIsNone(self.service.find_one_formatted(9999))
        with self.assertRaises(ProductNotFound):
            self.service.find_one(9999)
