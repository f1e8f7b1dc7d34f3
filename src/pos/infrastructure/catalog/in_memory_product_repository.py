"""In-memory implementation of ProductRepository.

Products are kept for the lifetime of the repository only; nothing is
written to disk.
"""

from __future__ import annotations

from pos.domain.exceptions import ValidationError
from pos.domain.model.product import Product
from pos.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self.save(p)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for product in self._store.values():
            if product.name.lower() == name.strip().lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        existing = self.get_by_name(product.name)
        if existing is not None and existing.id != product.id:
            raise ValidationError(f"Product '{product.name}' already exists")
        self._store[product.id] = product
