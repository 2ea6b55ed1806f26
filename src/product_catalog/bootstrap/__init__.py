"""Bootstrap (composition root) for the product catalog.

Assembles the application at runtime: wires concrete adapters to the service
layer and reads configuration.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- Inner layers must not import `product_catalog.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_product_service, build_uow

__all__ = ["AppContainer", "bootstrap", "build_product_service", "build_uow"]
