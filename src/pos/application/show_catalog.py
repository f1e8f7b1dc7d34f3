"""Application service: Show Catalog use case (query)."""

from __future__ import annotations

from pos.application.dto import CatalogLineDTO
from pos.domain.repository.product_repository import ProductRepository


class ShowCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[CatalogLineDTO]:
        return [
            CatalogLineDTO(
                name=p.name,
                price=str(p.price),
                stock=p.quantity,
                expires=p.expiry.expires_at.strftime("%Y-%m-%d %H:%M UTC") if p.expiry else "-",
                weight=str(p.weight) if p.is_shippable() else "-",
            )
            for p in self._product_repo.list_all()
        ]
