"""Customer aggregate root with its Address entities."""

from datetime import UTC, datetime

from protean import atomic_change
from protean.exceptions import ValidationError
from protean.fields import Boolean, Date, DateTime, HasMany, Integer, String

from storefront.domain import storefront


@storefront.entity(part_of="Customer")
class Address:
    """A postal address in a customer's address book.

    Orders point at addresses by identifier only. Removing an address clears
    those pointers; the orders themselves are kept.
    """

    label: String(max_length=50, default="Home")
    street: String(required=True, max_length=255)
    city: String(required=True, max_length=100)
    state: String(max_length=100)
    postal_code: String(max_length=30)
    country: String(required=True, max_length=100)
    is_default_shipping: Boolean(default=False)
    is_default_billing: Boolean(default=False)
    created_at: DateTime()


@storefront.aggregate
class Customer:
    """Shopper profile, one-to-one with an Account and sharing its identifier."""

    first_name: String(required=True, max_length=100, sanitize=False)
    last_name: String(required=True, max_length=100, sanitize=False)
    phone: String(max_length=30)
    date_of_birth: Date()
    loyalty_points: Integer(default=0, min_value=0)
    addresses: HasMany(Address)
    created_at: DateTime()

    @classmethod
    def register(cls, account_id, first_name, last_name, phone=None, date_of_birth=None):
        from storefront.identity.events import CustomerRegistered

        now = datetime.now(UTC)
        customer = cls(
            id=account_id,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            date_of_birth=date_of_birth,
            created_at=now,
        )
        customer.raise_(
            CustomerRegistered(
                customer_id=customer.id,
                first_name=first_name,
                last_name=last_name,
                registered_at=now,
            )
        )
        return customer

    def address(self, address_id):
        address = next((a for a in self.addresses if str(a.id) == str(address_id)), None)
        if address is None:
            raise ValidationError({"addresses": [f"Address {address_id} not found"]})
        return address

    def add_address(
        self,
        street,
        city,
        country,
        label="Home",
        state=None,
        postal_code=None,
        is_default_shipping=False,
        is_default_billing=False,
    ):
        from storefront.identity.events import AddressAdded

        with atomic_change(self):
            # At most one default of each kind
            for existing in self.addresses:
                if is_default_shipping:
                    existing.is_default_shipping = False
                if is_default_billing:
                    existing.is_default_billing = False

            address = Address(
                label=label,
                street=street,
                city=city,
                state=state,
                postal_code=postal_code,
                country=country,
                is_default_shipping=is_default_shipping,
                is_default_billing=is_default_billing,
                created_at=datetime.now(UTC),
            )
            self.add_addresses(address)

        self.raise_(
            AddressAdded(
                customer_id=self.id,
                address_id=address.id,
                street=street,
                city=city,
                country=country,
            )
        )
        return address

    def remove_address(self, address_id):
        from storefront.identity.events import AddressRemoved

        address = self.address(address_id)
        self.remove_addresses(address)

        self.raise_(
            AddressRemoved(
                customer_id=self.id,
                address_id=address.id,
            )
        )
        return address

    def award_loyalty_points(self, points):
        if points <= 0:
            raise ValidationError({"loyalty_points": ["Points awarded must be positive"]})
        self.loyalty_points = (self.loyalty_points or 0) + points
