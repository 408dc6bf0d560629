"""
CRM + Sales domain model.

Aggregate roots, value objects and bounded contexts for a small
customer-and-orders domain. See ``crm_sales.domain`` for the model and
``crm_sales.main`` for the demonstration scenario.
"""

__version__ = "1.0.0"
