"""Domain events for the Customer aggregate."""

from protean.fields import DateTime, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Customer")
class CustomerRegistered:
    """A customer profile was attached to a new account."""

    __version__ = 1

    customer_id: Identifier(required=True)
    first_name: String(required=True, sanitize=False)
    last_name: String(required=True, sanitize=False)
    registered_at: DateTime(required=True)


@storefront.event(part_of="Customer")
class AddressAdded:
    """A new address was added to a customer's address book."""

    __version__ = 1

    customer_id: Identifier(required=True)
    address_id: Identifier(required=True)
    street: String(required=True)
    city: String(required=True)
    country: String(required=True)


@storefront.event(part_of="Customer")
class AddressRemoved:
    """An address was removed; orders pointing at it lose the reference."""

    __version__ = 1

    customer_id: Identifier(required=True)
    address_id: Identifier(required=True)
