"""
Sales bounded context - orders, line items and product references.
"""

from .models import ProductId, SalesOrder, SalesOrderItem

__all__ = ["ProductId", "SalesOrder", "SalesOrderItem"]
