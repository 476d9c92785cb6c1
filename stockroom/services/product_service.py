from __future__ import annotations

import logging

from stockroom.models.product import Product, ProductStatus
from stockroom.repositories.base import ProductRepository
from stockroom.settings import settings

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, repo: ProductRepository) -> None:
        self.repo = repo

    def _ensure_unique_sku(self, sku: str, product_id: int | None = None) -> None:
        existing = self.repo.get_by_sku(sku)
        if existing is not None and existing.id != product_id:
            logger.warning("Product rejected: duplicate sku=%s", sku)
            raise ValueError(f"SKU '{sku}' is already in use")

    def create_product(
        self,
        name: str,
        sku: str,
        category: str = "",
        cost_price: int = 0,
        selling_price: int = 0,
        stock: int = 0,
        unit_type: str = "pcs",
        min_stock: int | None = None,
        is_active: bool = True,
        image: str | None = None,
    ) -> Product:
        name = name.strip()
        sku = sku.strip()
        if not name:
            raise ValueError("Product name is required")
        if not sku:
            raise ValueError("SKU is required")
        self._ensure_unique_sku(sku)
        product = Product(
            name=name,
            sku=sku,
            category=category.strip(),
            cost_price=cost_price,
            selling_price=selling_price,
            stock=stock,
            unit_type=unit_type,
            min_stock=settings.default_min_stock if min_stock is None else min_stock,
            is_active=is_active,
            image=image,
        )
        result = self.repo.create(product)
        logger.info("Product created: id=%s, sku=%s, status=%s", result.id, result.sku, result.status.value)
        return result

    def update_product(self, product: Product) -> Product:
        if not product.name.strip():
            raise ValueError("Product name is required")
        if not product.sku.strip():
            raise ValueError("SKU is required")
        self._ensure_unique_sku(product.sku, product.id)
        result = self.repo.update(product)
        logger.info("Product updated: id=%s, sku=%s, status=%s", result.id, result.sku, result.status.value)
        return result

    def get_product(self, product_id: int) -> Product | None:
        result = self.repo.get_by_id(product_id)
        logger.debug("get_product id=%s found=%s", product_id, result is not None)
        return result

    def get_product_by_uuid(self, uuid: str) -> Product | None:
        result = self.repo.get_by_uuid(uuid)
        logger.debug("get_product_by_uuid uuid=%s found=%s", uuid, result is not None)
        return result

    def delete_product(self, product_id: int) -> None:
        self.repo.delete(product_id)
        logger.info("Product %s deleted", product_id)

    def list_products(
        self,
        search: str = "",
        category: str = "",
        status: ProductStatus | str | None = None,
    ) -> list[Product]:
        term = search.strip().lower()
        wanted_status = ProductStatus(status) if status else None
        result = []
        for product in self.repo.list_all():
            if term and term not in product.name.lower() and term not in product.sku.lower():
                continue
            if category and product.category != category:
                continue
            if wanted_status is not None and product.status != wanted_status:
                continue
            result.append(product)
        logger.debug("Listed %d products (search=%r category=%r status=%s)", len(result), term, category, status)
        return result

    def list_categories(self) -> list[str]:
        return sorted({p.category for p in self.repo.list_all() if p.category})

    def low_stock_products(self) -> list[Product]:
        """Active products that are out of stock or at/below their minimum."""
        return [
            p
            for p in self.repo.list_all()
            if p.status in (ProductStatus.LOW_STOCK, ProductStatus.OUT_OF_STOCK)
        ]

    def adjust_stock(self, product_id: int, delta: int) -> Product:
        product = self.repo.get_by_id(product_id)
        if product is None:
            logger.warning("Stock adjustment failed: product %s not found", product_id)
            raise ValueError("Product not found")
        new_stock = product.stock + delta
        if new_stock < 0:
            logger.warning(
                "Stock adjustment rejected: product=%s stock=%d delta=%d", product.sku, product.stock, delta
            )
            raise ValueError(f"Insufficient stock for {product.name}: only {product.stock} available")
        self.repo.update_stock(product_id, new_stock)
        product.stock = new_stock
        logger.info("Stock adjusted: product=%s delta=%+d stock=%d", product.sku, delta, new_stock)
        return product

    def get_price(self, product_id: int, kind: str = "selling") -> int | None:
        """Unit price used to pre-fill an order line; ``kind`` is 'selling' or 'cost'."""
        product = self.repo.get_by_id(product_id)
        if product is None:
            return None
        return product.cost_price if kind == "cost" else product.selling_price
