"""Account aggregate: authentication identity behind a customer profile."""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, String

from storefront.domain import storefront


class AccountRole(Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"
    SELLER = "seller"


_FORBIDDEN_EMAIL_CHARS = (" ", ";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


@storefront.aggregate
class Account:
    """A login identity. Admins and sellers share the table with customers.

    A customer profile, when present, reuses the account's identifier, so the
    two records form a one-to-one pair.
    """

    email: String(required=True, max_length=255)
    password_hash: String(required=True, max_length=255)
    is_active: Boolean(default=True)
    role: String(choices=AccountRole, default=AccountRole.CUSTOMER.value)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def email_must_be_well_formed(self):
        email = self.email or ""
        local_part, _, domain_part = email.partition("@")
        if (
            email.count("@") != 1
            or not local_part
            or "." not in domain_part
            or domain_part.startswith(".")
            or domain_part.endswith(".")
            or ".." in email
            or any(char in email for char in _FORBIDDEN_EMAIL_CHARS)
        ):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

    @classmethod
    def open(cls, email, password_hash, role=AccountRole.CUSTOMER.value):
        now = datetime.now(UTC)
        return cls(
            email=email.strip().lower(),
            password_hash=password_hash,
            role=role,
            created_at=now,
            updated_at=now,
        )

    def deactivate(self):
        if not self.is_active:
            raise ValidationError({"is_active": ["Account is already inactive"]})
        self.is_active = False
        self.updated_at = datetime.now(UTC)
