"""Account registration: command and handler."""

from datetime import date

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.account import Account, AccountRole
from storefront.identity.customer import Customer
from storefront.shared.queries import ensure_unique


@storefront.command(part_of="Account")
class RegisterAccount:
    """Open an account and, for shoppers, the customer profile that goes with it."""

    email: String(required=True, max_length=255)
    password_hash: String(required=True, max_length=255)
    role: String(max_length=20, default=AccountRole.CUSTOMER.value)
    first_name: String(max_length=100, sanitize=False)
    last_name: String(max_length=100, sanitize=False)
    phone: String(max_length=30)
    date_of_birth: String(max_length=10)


@storefront.command_handler(part_of=Account)
class RegisterAccountHandler:
    @handle(RegisterAccount)
    def register_account(self, command):
        account = Account.open(
            email=command.email,
            password_hash=command.password_hash,
            role=command.role,
        )
        ensure_unique(Account, email=account.email)
        current_domain.repository_for(Account).add(account)

        if command.first_name and command.last_name:
            dob = None
            if command.date_of_birth:
                dob = date.fromisoformat(command.date_of_birth)

            customer = Customer.register(
                account_id=account.id,
                first_name=command.first_name,
                last_name=command.last_name,
                phone=command.phone,
                date_of_birth=dob,
            )
            current_domain.repository_for(Customer).add(customer)

        return str(account.id)
