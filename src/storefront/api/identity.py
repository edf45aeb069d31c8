"""FastAPI endpoints for accounts and customers."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from storefront.api.schemas import AddAddressRequest, IdResponse, RegisterAccountRequest, StatusResponse
from storefront.identity.accounts import DeactivateAccount, DeleteAccount
from storefront.identity.addresses import AddAddress, RemoveAddress
from storefront.identity.customers import DeleteCustomer
from storefront.identity.registration import RegisterAccount

account_router = APIRouter(prefix="/accounts", tags=["accounts"])
customer_router = APIRouter(prefix="/customers", tags=["customers"])


@account_router.post("", status_code=201, response_model=IdResponse)
async def register_account(body: RegisterAccountRequest) -> IdResponse:
    command = RegisterAccount(**body.model_dump(exclude_none=True))
    result = current_domain.process(command, asynchronous=False)
    return IdResponse(id=result)


@account_router.put("/{account_id}/deactivate", response_model=StatusResponse)
async def deactivate_account(account_id: str) -> StatusResponse:
    current_domain.process(DeactivateAccount(account_id=account_id), asynchronous=False)
    return StatusResponse()


@account_router.delete("/{account_id}", response_model=StatusResponse)
async def delete_account(account_id: str) -> StatusResponse:
    current_domain.process(DeleteAccount(account_id=account_id), asynchronous=False)
    return StatusResponse()


@customer_router.post("/{customer_id}/addresses", status_code=201, response_model=IdResponse)
async def add_address(customer_id: str, body: AddAddressRequest) -> IdResponse:
    command = AddAddress(customer_id=customer_id, **body.model_dump(exclude_none=True))
    result = current_domain.process(command, asynchronous=False)
    return IdResponse(id=result)


@customer_router.delete("/{customer_id}/addresses/{address_id}", response_model=StatusResponse)
async def remove_address(customer_id: str, address_id: str) -> StatusResponse:
    current_domain.process(RemoveAddress(customer_id=customer_id, address_id=address_id), asynchronous=False)
    return StatusResponse()


@customer_router.delete("/{customer_id}", response_model=StatusResponse)
async def delete_customer(customer_id: str) -> StatusResponse:
    current_domain.process(DeleteCustomer(customer_id=customer_id), asynchronous=False)
    return StatusResponse()
