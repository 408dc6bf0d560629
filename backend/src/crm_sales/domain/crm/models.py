"""
Customer aggregate for the CRM bounded context.

The customer's identity and name are fixed at construction. Email and
address only ever change together, through update_contact_info().
"""

import logging

from ..errors import InvalidArgumentError
from ..shared.models import Address, CustomerId
from ..validation import require_instance, require_not_blank

logger = logging.getLogger(__name__)


class Customer:
    """
    Customer aggregate root.

    Other contexts refer to a customer through its CustomerId only.

    Example:
        customer = Customer("John Doe", "john.doe@gmail.com", address)
        customer.get_contact_info()
        # 'John Doe <john.doe@gmail.com>, Street 123, City, 12345, USA'
    """

    def __init__(self, name: str, email: str, address: Address) -> None:
        """
        Create a customer with a fresh identity.

        Raises:
            InvalidArgumentError: If name or email is blank, or address is missing
        """
        self._name = require_not_blank(name, "Name cannot be null or blank")
        self._email = require_not_blank(email, "Email cannot be null or blank")
        self._address = _require_address(address)
        self._id = CustomerId.generate()

        logger.debug(f"Customer {self._id} created")

    @property
    def id(self) -> CustomerId:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def address(self) -> Address:
        return self._address

    def update_contact_info(self, email: str, address: Address) -> None:
        """
        Replace email and address together.

        Both arguments are validated before either field is written, so a
        rejected update leaves the customer untouched.
        """
        new_email = require_not_blank(email, "Email cannot be null or blank")
        new_address = _require_address(address)

        self._email = new_email
        self._address = new_address
        logger.debug(f"Customer {self._id} contact info updated")

    def get_contact_info(self) -> str:
        """Format as ``name <email>, address``."""
        return f"{self._name} <{self._email}>, {self._address}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Customer):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Customer(id={self._id}, name={self._name!r}, email={self._email!r})"


def _require_address(address: Address | None) -> Address:
    if address is None:
        raise InvalidArgumentError("Address cannot be null")
    return require_instance(address, Address, "Address must be an Address")
