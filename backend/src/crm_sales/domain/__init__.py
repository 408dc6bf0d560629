"""
Domain package - Core business logic with no external dependencies.

Three bounded contexts live here: ``shared`` (the shared kernel of
value objects), ``crm`` (customers) and ``sales`` (orders). The CRM and
Sales contexts never import each other; they meet only on the shared
value types.
"""

from .crm import Customer
from .errors import DomainError, InvalidArgumentError
from .sales import ProductId, SalesOrder, SalesOrderItem
from .shared import Address, Currency, CustomerId, Money

__all__ = [
    "Address",
    "Currency",
    "Customer",
    "CustomerId",
    "DomainError",
    "InvalidArgumentError",
    "Money",
    "ProductId",
    "SalesOrder",
    "SalesOrderItem",
]
