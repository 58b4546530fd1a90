# products/exceptions.py
from rest_framework import exceptions


class ProductNotFound(exceptions.NotFound):
    default_detail = "Product not found"
    default_code = "product_not_found"

    def __init__(self, product_id=None):
        detail = None
        if product_id is not None:
            detail = f'Product with ID "{product_id}" not found'
        super().__init__(detail=detail)


class ImageRequired(exceptions.ValidationError):
    default_detail = "Image file is required"
    default_code = "image_required"

    def __init__(self):
        super().__init__(detail=self.default_detail)
