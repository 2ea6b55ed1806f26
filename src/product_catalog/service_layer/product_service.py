"""Product service: the façade callers use to reach the product catalog.

The service delegates every operation to an injected `ProductRepository`
and returns the repository's result unchanged. It applies no validation,
filtering or sorting, and it never catches repository errors.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from product_catalog.domain.product import Product
    from product_catalog.interfaces.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:
    """Stateless façade over a product repository.

    Args:
        repository: The repository every call is forwarded to. Each service
            operation calls exactly one repository method, exactly once.
    """

    def __init__(self, repository: ProductRepository) -> None:
        self.repository = repository

    def get_all_products(self) -> list[Product]:
        """Return every product, in the order the repository yields them."""
        products = self.repository.find_all()
        logger.debug("Listed %d product(s)", len(products))
        return products

    def add_product(self, product: Product) -> Product:
        """Save `product` as given and return the repository's persisted entity."""
        logger.debug("Adding product %r", product.name)
        return self.repository.save(product)

    def get_product(self, product_id: int) -> Product | None:
        """Return the product with `product_id`, or None when it does not exist."""
        product = self.repository.find_by_id(product_id)
        if product is None:
            logger.debug("Product %s not found", product_id)
        return product
