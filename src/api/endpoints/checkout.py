from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from src.api.dependencies import get_checkout_service
from src.error_handler import error_handler
from src.integrations.contracts.checkout import decode_preference, ensure_valid_preference
from src.integrations.contracts.errors import (
    AuthRequiredError,
    BodyDecodeError,
    MissingParameterError,
    PreferenceValidationError,
)
from src.integrations.policy.checkout_service import CheckoutService

api = APIRouter()
checkout_api = api

ACCESS_TOKEN_HEADER = "access_token"


def _access_token_from(request: Request) -> str:
    return (request.headers.get(ACCESS_TOKEN_HEADER) or "").strip()


@api.get("/ping", tags=["Health"], response_class=PlainTextResponse)
async def ping():
    return PlainTextResponse("pong")


@api.get("/access_token", tags=["Checkout"], response_class=PlainTextResponse)
async def get_access_token(
    client_id: str = Query(default=""),
    client_secret: str = Query(default=""),
    service: CheckoutService = Depends(get_checkout_service),
):
    if not client_id:
        return error_handler.handle_exception(MissingParameterError("client id is required"))
    if not client_secret:
        return error_handler.handle_exception(MissingParameterError("client secret is required"))

    try:
        access_token = await service.get_access_token(client_id, client_secret)
    except Exception as e:
        return error_handler.handle_exception(e, "couldn't get access token")

    return PlainTextResponse(access_token)


@api.post("/preferences", tags=["Checkout"], response_class=PlainTextResponse)
async def create_preference(
    request: Request,
    service: CheckoutService = Depends(get_checkout_service),
):
    access_token = _access_token_from(request)
    if not access_token:
        return error_handler.handle_exception(AuthRequiredError())

    try:
        preference = decode_preference(await request.body())
    except BodyDecodeError as e:
        return error_handler.handle_exception(e, "couldn't decode body")

    try:
        ensure_valid_preference(preference)
    except PreferenceValidationError as e:
        return error_handler.handle_exception(e, "validation error")

    try:
        checkout_url = await service.create_preference(access_token, preference)
    except Exception as e:
        return error_handler.handle_exception(e, "couldn't create checkout")

    return PlainTextResponse(checkout_url)


@api.get("/total_payments", tags=["Checkout"], response_class=PlainTextResponse)
async def get_total_payments(
    request: Request,
    status: str = Query(default=""),
    service: CheckoutService = Depends(get_checkout_service),
):
    # Same header contract as /preferences: the payment search needs a caller token.
    access_token = _access_token_from(request)
    if not access_token:
        return error_handler.handle_exception(AuthRequiredError())

    try:
        total = await service.get_total_payments(access_token, status)
    except Exception as e:
        return error_handler.handle_exception(e, "couldn't get total payments")

    return PlainTextResponse(str(total))
