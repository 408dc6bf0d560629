"""
Sales order aggregate for the Sales bounded context.

A SalesOrder owns its line items outright; callers see them only as an
immutable snapshot. The order total is cached and recomputed eagerly
every time an item is added, so reading it is O(1).

Design Decisions:
- SalesOrderItem is frozen: changing quantity or price means building a
  new item, which re-runs every constructor check
- The total is folded over Money.add starting from Money.zero(), which
  is USD. Orders priced in any other currency therefore fail on the
  first add with a currency mismatch
- add_item() computes the new total before touching state, so a
  rejected item never ends up in the order
- Customers are referenced by CustomerId only
"""

import dataclasses
import logging
import uuid
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone
from functools import reduce
from typing import ClassVar

from ..errors import InvalidArgumentError
from ..shared.models import CustomerId, Identifier, Money
from ..validation import require_instance, require_positive, require_present

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProductId(Identifier):
    """Identity of a product as seen by the Sales context."""
    label: ClassVar[str] = "Product ID"


@dataclass(frozen=True)
class SalesOrderItem:
    """
    A single line of a sales order.

    Invariants: quantity is a positive integer, the unit price is a
    strictly positive amount with a valid currency.
    """
    product_id: ProductId
    quantity: int
    unit_price: Money

    def __post_init__(self) -> None:
        """Validate quantity and unit price."""
        require_present(self.product_id, "Product ID cannot be null")
        require_instance(self.product_id, ProductId, "Product ID must be a ProductId")

        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidArgumentError(
                f"Quantity must be an integer, got {type(self.quantity).__name__}"
            )
        require_positive(self.quantity, "Quantity must be greater than zero")

        require_present(self.unit_price, "Unit price cannot be null")
        require_instance(self.unit_price, Money, "Unit price must be a Money value")
        require_positive(self.unit_price.amount, "Unit price must be greater than zero")

        currency = self.unit_price.currency
        if currency is None or not currency.code or not currency.code.strip():
            raise InvalidArgumentError("Unit price must have a valid currency")

    def calculate_item_amount(self) -> Money:
        """Line amount: unit price times quantity."""
        return self.unit_price.multiply(self.quantity)

    def with_quantity(self, quantity: int) -> "SalesOrderItem":
        """Copy of this item with a different quantity (validated)."""
        return dataclasses.replace(self, quantity=quantity)

    def with_unit_price(self, unit_price: Money) -> "SalesOrderItem":
        """Copy of this item with a different unit price (validated)."""
        return dataclasses.replace(self, unit_price=unit_price)


def _sum_item_amounts(items: Iterable[SalesOrderItem]) -> Money:
    return reduce(
        Money.add,
        (item.calculate_item_amount() for item in items),
        Money.zero(),
    )


class SalesOrder:
    """
    Sales order aggregate root.

    Items can only be appended; there is no removal. The order date
    defaults to the creation time and may be overridden with
    with_order_date().

    Example:
        order = SalesOrder(customer.id)
        order.add_item(ProductId.generate(), 2, Money("29.99", "USD"))
        order.get_order_total_amount_as_string()  # '59.98 USD'
    """

    def __init__(self, customer_id: CustomerId) -> None:
        """
        Open an empty order for a customer.

        Raises:
            InvalidArgumentError: If customer_id is missing
        """
        require_present(customer_id, "Customer ID cannot be null")
        self._customer_id = require_instance(
            customer_id, CustomerId, "Customer ID must be a CustomerId"
        )
        self._id = uuid.uuid4()
        self._order_date = datetime.now(timezone.utc)
        self._items: list[SalesOrderItem] = []
        self._total_amount = Money.zero()

        logger.debug(f"Sales order {self._id} opened for customer {self._customer_id}")

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def customer_id(self) -> CustomerId:
        return self._customer_id

    @property
    def order_date(self) -> datetime:
        return self._order_date

    @property
    def items(self) -> tuple[SalesOrderItem, ...]:
        """Snapshot of the line items in insertion order."""
        return tuple(self._items)

    @property
    def total_amount(self) -> Money:
        return self._total_amount

    def add_item(self, product_id: ProductId, quantity: int, unit_price: Money) -> SalesOrderItem:
        """
        Append a line item and refresh the order total.

        Args:
            product_id: Product being ordered
            quantity: Number of units, must be positive
            unit_price: Price per unit, must be positive

        Returns:
            The item that was added

        Raises:
            InvalidArgumentError: If the item is invalid or its currency
                cannot be added to the order total
        """
        item = SalesOrderItem(product_id, quantity, unit_price)
        total = _sum_item_amounts([*self._items, item])

        self._items.append(item)
        self._total_amount = total

        logger.debug(
            f"Sales order {self._id}: added {quantity} x {product_id} "
            f"at {unit_price}, total now {total}"
        )
        return item

    def calculate_order_total_amount(self) -> Money:
        """Sum of all line amounts. Does not modify the order."""
        return _sum_item_amounts(self._items)

    def with_order_date(self, order_date: datetime) -> "SalesOrder":
        """Override the order date. Returns self for chaining."""
        require_present(order_date, "Order date cannot be null")
        self._order_date = require_instance(
            order_date, datetime, "Order date must be a datetime"
        )
        return self

    def get_order_total_amount_as_string(self) -> str:
        """Total followed by its currency code, e.g. ``'59.98 USD'``."""
        return f"{self._total_amount.amount} {self._total_amount.currency.code}"

    def __repr__(self) -> str:
        return (
            f"SalesOrder(id={self._id}, customer_id={self._customer_id}, "
            f"items={len(self._items)}, total={self._total_amount})"
        )
