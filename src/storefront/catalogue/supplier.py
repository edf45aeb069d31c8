"""Supplier aggregate."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, String, Text

from storefront.domain import storefront


@storefront.aggregate
class Supplier:
    name: String(required=True, max_length=255, sanitize=False)
    contact_email: String(max_length=255)
    phone: String(max_length=30)
    address: Text(sanitize=False)
    created_at: DateTime()

    @classmethod
    def register(cls, name, contact_email=None, phone=None, address=None):
        if contact_email is not None and "@" not in contact_email:
            raise ValidationError({"contact_email": [f"Invalid email address: {contact_email}"]})
        return cls(
            name=name,
            contact_email=contact_email,
            phone=phone,
            address=address,
            created_at=datetime.now(UTC),
        )
