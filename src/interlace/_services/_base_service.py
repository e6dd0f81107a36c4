import json
from functools import lru_cache
from logging import getLogger
from typing import Any, Optional, Type, TypeVar, Union, overload

from httpx import AsyncClient, Client, Headers, Request, Response
from pydantic import BaseModel, TypeAdapter, ValidationError

from .._client_context import ClientContext
from .._config import Config
from .._utils import RequestSpec, handle_decoding_errors, handle_transport_errors
from .._utils.constants import (
    CONTENT_TYPE_JSON,
    HEADER_ACCEPT,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
    PARSE_ERROR_CODE,
    PARSE_ERROR_MESSAGE,
)
from ..models.common import ApiResponse, ErrorPayload
from ..models.errors import APIError, DecodingError, EncodingError

T = TypeVar("T")


@lru_cache(maxsize=None)
def _type_adapter(response_model: Any) -> TypeAdapter:
    return TypeAdapter(response_model)


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_json(value: Any) -> bytes:
    """Serialize a request body, rendering pydantic models by alias.

    Raises:
        EncodingError: If the value cannot be represented as JSON.
    """
    try:
        return json.dumps(value, default=_json_default, allow_nan=False).encode(
            "utf-8"
        )
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Failed to marshal request body: {e}") from e


class BaseService:
    """Base class for all Interlace API services.

    Every service call goes through the request executor implemented here:
    a RequestSpec is turned into exactly one HTTP request against the
    configured base URL, the response is checked for an error status and
    the body is decoded into the type requested by the caller.

    Services share one ClientContext, which holds the config, the access
    token and the httpx connection pools. Nothing is retried or cached;
    every failure is raised to the caller.
    """

    def __init__(self, context: ClientContext) -> None:
        self._logger = getLogger("interlace")
        self._context = context

    @property
    def _config(self) -> Config:
        return self._context.config

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            HEADER_ACCEPT: CONTENT_TYPE_JSON,
            HEADER_USER_AGENT: self._config.user_agent,
            **self.custom_headers,
        }

    @property
    def auth_headers(self) -> dict[str, str]:
        token = self._context.access_token
        if not token:
            return {}
        return {self._config.auth_header: token}

    @property
    def custom_headers(self) -> dict[str, str]:
        """Headers added to every request of a service. Empty by default."""
        return {}

    def _headers(self, spec: RequestSpec) -> Headers:
        headers = Headers(self.default_headers)

        if spec.content_type:
            headers[HEADER_CONTENT_TYPE] = spec.content_type
        elif spec.has_json_body and spec.method.upper() != "GET":
            headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON

        if spec.requires_auth:
            auth_headers = self.auth_headers
            if not auth_headers:
                self._logger.warning(
                    f"Sending {spec.method.upper()} {spec.endpoint} without an access token"
                )
            headers.update(auth_headers)

        for key, value in spec.headers.items():
            headers[key] = value

        return headers

    def _build_request(
        self, client: Union[Client, AsyncClient], spec: RequestSpec
    ) -> Request:
        method = spec.method.upper()
        url = f"{self._config.base_url}{spec.endpoint}"

        content = spec.content
        if spec.has_json_body:
            content = encode_json(spec.json)

        return client.build_request(
            method,
            url,
            params=dict(spec.params) or None,
            headers=self._headers(spec),
            content=content,
            data=spec.data,
            files=spec.files,
            timeout=spec.timeout if spec.timeout is not None else self._config.timeout,
        )

    def _raise_for_status(self, response: Response) -> None:
        if response.status_code < 400:
            return

        try:
            payload = ErrorPayload.model_validate_json(response.content)
        except ValidationError as e:
            raise APIError(
                PARSE_ERROR_CODE,
                PARSE_ERROR_MESSAGE,
                status_code=response.status_code,
            ) from e

        raise APIError(
            payload.code,
            payload.message,
            status_code=response.status_code,
            data=payload.data,
        )

    def _decode(self, response: Response, response_model: Type[T]) -> T:
        name = getattr(response_model, "__name__", repr(response_model))
        with handle_decoding_errors(name):
            return _type_adapter(response_model).validate_json(response.content)

    def _unwrap(self, envelope: ApiResponse[T]) -> Optional[T]:
        """Return the envelope payload, raising APIError for a non-success code."""
        if not envelope.is_success:
            raise APIError(envelope.code, envelope.message, data=envelope.data)
        return envelope.data

    def _unwrap_required(self, envelope: ApiResponse[T]) -> T:
        """Like :meth:`_unwrap`, but a success envelope without data raises DecodingError."""
        data = self._unwrap(envelope)
        if data is None:
            raise DecodingError("Response envelope has no data")
        return data

    def send(self, spec: RequestSpec) -> Response:
        """Send the request described by ``spec`` and return the raw response.

        Raises:
            EncodingError: If the JSON body cannot be serialized.
            TransportError: If the request fails or times out.
            APIError: If the response status is 400 or above.
        """
        client = self._context.client
        request = self._build_request(client, spec)
        self._logger.debug(f"Request: {request.method} {request.url}")

        with handle_transport_errors(request.method, str(request.url)):
            response = client.send(request)

        self._logger.debug(f"Response: {response.status_code} {request.url}")
        self._raise_for_status(response)
        return response

    async def send_async(self, spec: RequestSpec) -> Response:
        """Asynchronously send the request described by ``spec``.

        Raises the same errors as :meth:`send`.
        """
        client = self._context.client_async
        request = self._build_request(client, spec)
        self._logger.debug(f"Request: {request.method} {request.url}")

        with handle_transport_errors(request.method, str(request.url)):
            response = await client.send(request)

        self._logger.debug(f"Response: {response.status_code} {request.url}")
        self._raise_for_status(response)
        return response

    @overload
    def request(self, spec: RequestSpec) -> None: ...

    @overload
    def request(self, spec: RequestSpec, response_model: Type[T]) -> T: ...

    def request(
        self, spec: RequestSpec, response_model: Optional[Type[T]] = None
    ) -> Optional[T]:
        """Execute ``spec`` and decode the JSON body into ``response_model``.

        Args:
            spec (RequestSpec): The request to send.
            response_model (Optional[Type[T]]): Type to validate the body
                against. When omitted the body is not decoded and None is
                returned.

        Returns:
            Optional[T]: The decoded body.

        Raises:
            EncodingError: If the JSON body cannot be serialized.
            TransportError: If the request fails or times out.
            APIError: If the response status is 400 or above.
            DecodingError: If the body does not match ``response_model``.
        """
        response = self.send(spec)
        if response_model is None:
            return None
        return self._decode(response, response_model)

    @overload
    async def request_async(self, spec: RequestSpec) -> None: ...

    @overload
    async def request_async(
        self, spec: RequestSpec, response_model: Type[T]
    ) -> T: ...

    async def request_async(
        self, spec: RequestSpec, response_model: Optional[Type[T]] = None
    ) -> Optional[T]:
        """Asynchronous counterpart of :meth:`request`."""
        response = await self.send_async(spec)
        if response_model is None:
            return None
        return self._decode(response, response_model)
