from __future__ import annotations

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from src.integrations.contracts.checkout import describe_validation_error
from src.integrations.contracts.errors import DecodeError, ProviderError


class _ProviderResponseModel(BaseModel):
    model_config = ConfigDict(strict=True)


class AccessTokenResponseModel(_ProviderResponseModel):
    access_token: str


class PreferenceResponseModel(_ProviderResponseModel):
    init_point: str


class PagingModel(_ProviderResponseModel):
    total: int


class PaymentSearchResponseModel(_ProviderResponseModel):
    paging: PagingModel


def raise_for_provider_status(response: httpx.Response) -> None:
    if response.status_code >= 400:
        raise ProviderError(response.text, response.status_code)


def normalize_access_token_response(response: httpx.Response) -> str:
    raise_for_provider_status(response)
    return _build_model(AccessTokenResponseModel, response).access_token


def normalize_preference_response(response: httpx.Response) -> str:
    raise_for_provider_status(response)
    return _build_model(PreferenceResponseModel, response).init_point


def normalize_payment_search_response(response: httpx.Response) -> int:
    raise_for_provider_status(response)
    return _build_model(PaymentSearchResponseModel, response).paging.total


def _build_model(model_type, response: httpx.Response):
    try:
        return model_type.model_validate_json(response.content)
    except ValidationError as exc:
        raise DecodeError(f"unexpected provider response: {describe_validation_error(exc)}") from exc
