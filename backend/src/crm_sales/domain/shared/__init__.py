"""
Shared kernel - value objects used by every bounded context.
"""

from .models import Address, Currency, CustomerId, Identifier, Money

__all__ = ["Address", "Currency", "CustomerId", "Identifier", "Money"]
