class UnknownProductError(Exception):
    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class CatalogLoadError(Exception):
    """Raised when a catalog file is missing, unreadable or fails schema validation."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
