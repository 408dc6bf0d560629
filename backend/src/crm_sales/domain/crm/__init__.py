"""
CRM bounded context - customers and their contact details.
"""

from .models import Customer

__all__ = ["Customer"]
