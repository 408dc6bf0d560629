"""
Demonstration driver.

Builds the sample scenario across the three bounded contexts and prints
each step to stdout:
- Shared kernel: two addresses
- CRM: a customer whose contact info is then updated
- Sales: an order for that customer with one line item

The scenario is fixed; no command-line arguments are read.
"""

import logging
from collections.abc import Callable
from decimal import Decimal

from crm_sales import __version__
from crm_sales.config import Settings, load_settings
from crm_sales.domain import (
    Address,
    Customer,
    DomainError,
    Money,
    ProductId,
    SalesOrder,
)
from crm_sales.errors import ConfigError

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=settings.log_format,
        force=True,
    )


def run_scenario(out: Callable[[str], None] = print) -> tuple[Customer, SalesOrder]:
    """
    Run the sample scenario, reporting each step through ``out``.

    Returns:
        The customer and the sales order that were built
    """
    out("Hello and welcome!")

    # Shared context
    address = Address("Street", "123", "City", "12345", "USA")
    out(f"First Address: {address}")
    another_address = Address("Street", "456", "Anytown", "12345", "USA")
    out(f"Second Address: {another_address}")

    # CRM context
    out("Creating a customer...")
    customer = Customer("John Doe", "john.doe@gmail.com", address)
    out(f"Customer contact info: {customer.get_contact_info()}")
    out("Updating customer contact info...")
    customer.update_contact_info(customer.email, another_address)
    out(f"Customer contact info: {customer.get_contact_info()}")

    # Sales context
    out("Creating a sales order...")
    order = SalesOrder(customer.id)
    price = Money(Decimal("29.99"), "USD")
    order.add_item(ProductId.generate(), 2, price)
    out(f"Sales order total: {order.get_order_total_amount_as_string()}")

    return customer, order


def main() -> int:
    """
    Entry point for the ``crm-sales-demo`` script.

    Returns:
        Process exit code: 0 on success, 1 if the scenario raised a
        domain error, 2 on invalid configuration
    """
    try:
        settings = load_settings()
    except ConfigError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error(str(e))
        return 2

    configure_logging(settings)
    logger.info(f"Starting crm-sales v{__version__}")

    try:
        customer, order = run_scenario()
    except DomainError as e:
        logger.error(f"Scenario failed: {e}", exc_info=settings.debug)
        return 1

    logger.info(f"Scenario finished: {customer!r}, {order!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
