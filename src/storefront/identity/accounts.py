"""Account lifecycle: commands and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.account import Account
from storefront.integrity import propagation


@storefront.command(part_of="Account")
class DeactivateAccount:
    account_id: Identifier(required=True)


@storefront.command(part_of="Account")
class DeleteAccount:
    """Delete an account; its customer profile goes with it."""

    account_id: Identifier(required=True)


@storefront.command_handler(part_of=Account)
class AccountLifecycleHandler:
    @handle(DeactivateAccount)
    def deactivate_account(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_id)
        account.deactivate()
        repo.add(account)

    @handle(DeleteAccount)
    def delete_account(self, command):
        account = current_domain.repository_for(Account).get(command.account_id)
        propagation.delete(account)
