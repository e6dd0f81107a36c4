import json

import httpx
import pytest
from pytest_httpx import HTTPXMock

from interlace._client_context import ClientContext
from interlace._services._base_service import BaseService
from interlace._utils import Endpoint, RequestSpec
from interlace.models import AccountData, ApiResponse
from interlace.models.errors import (
    APIError,
    DecodingError,
    EncodingError,
    TransportError,
)


@pytest.fixture
def service(context: ClientContext) -> BaseService:
    return BaseService(context=context)


class TestBaseService:
    def test_init_base_service(self, service: BaseService):
        assert service is not None

    def test_base_service_default_headers(self, service: BaseService, user_agent: str):
        assert service.default_headers == {
            "Accept": "application/json",
            "User-Agent": user_agent,
        }

    def test_base_service_auth_headers(self, service: BaseService, access_token: str):
        assert service.auth_headers == {"x-access-token": access_token}

    class TestRequest:
        def test_simple_request(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
            access_token: str,
            user_agent: str,
        ):
            endpoint = "/endpoint"

            httpx_mock.add_response(
                url=f"{base_url}{endpoint}",
                status_code=200,
                json={"test": "test"},
            )

            result = service.request(
                RequestSpec(method="GET", endpoint=Endpoint(endpoint)), dict
            )

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert sent_request.method == "GET"
            assert sent_request.url == f"{base_url}{endpoint}"
            assert sent_request.headers["Accept"] == "application/json"
            assert sent_request.headers["User-Agent"] == user_agent
            assert sent_request.headers["x-access-token"] == access_token
            assert "Content-Type" not in sent_request.headers

            assert result == {"test": "test"}

        def test_request_without_response_model_returns_none(
            self, httpx_mock: HTTPXMock, service: BaseService, base_url: str
        ):
            httpx_mock.add_response(url=f"{base_url}/empty", status_code=204)

            result = service.request(RequestSpec(method="DELETE", endpoint=Endpoint("/empty")))

            assert result is None

        def test_json_body_reaches_transport_unchanged(
            self, httpx_mock: HTTPXMock, service: BaseService, base_url: str
        ):
            body = {
                "amount": "10.50",
                "currency": "USD",
                "tags": ["a", "b"],
                "nested": {"flag": True, "count": 3, "note": None},
            }
            httpx_mock.add_response(url=f"{base_url}/payments", method="POST", json={})

            service.request(
                RequestSpec(method="POST", endpoint=Endpoint("/payments"), json=body)
            )

            sent_request = httpx_mock.get_request()
            assert json.loads(sent_request.content) == body
            assert sent_request.headers["Content-Type"] == "application/json"

        def test_pydantic_body_is_serialized_by_alias(
            self, httpx_mock: HTTPXMock, service: BaseService, base_url: str
        ):
            httpx_mock.add_response(url=f"{base_url}/accounts", method="POST", json={})

            service.request(
                RequestSpec(
                    method="POST",
                    endpoint=Endpoint("/accounts"),
                    json=AccountData(id="acc_1", display_id="D1"),
                )
            )

            assert json.loads(httpx_mock.get_request().content) == {
                "id": "acc_1",
                "displayId": "D1",
            }

        def test_query_params_are_escaped_and_repeated(
            self, httpx_mock: HTTPXMock, service: BaseService
        ):
            httpx_mock.add_response(json={})

            service.request(
                RequestSpec(
                    method="GET",
                    endpoint=Endpoint("/search"),
                    params={"ids": ["a", "b"], "q": "a b&c"},
                )
            )

            sent_request = httpx_mock.get_request()
            assert sent_request.url.params.get_list("ids") == ["a", "b"]
            assert sent_request.url.params["q"] == "a b&c"
            assert "&c" not in sent_request.url.query.decode()

        def test_raw_content_passes_through(
            self, httpx_mock: HTTPXMock, service: BaseService, base_url: str
        ):
            httpx_mock.add_response(url=f"{base_url}/raw", method="PUT", json={})

            service.request(
                RequestSpec(method="PUT", endpoint=Endpoint("/raw"), content=b"\x00\x01raw")
            )

            sent_request = httpx_mock.get_request()
            assert sent_request.content == b"\x00\x01raw"
            assert "Content-Type" not in sent_request.headers

        def test_streamed_content_passes_through(
            self, httpx_mock: HTTPXMock, service: BaseService, base_url: str
        ):
            def chunks():
                yield b"chunk-1,"
                yield b"chunk-2"

            httpx_mock.add_response(
                url=f"{base_url}/stream",
                method="PUT",
                match_content=b"chunk-1,chunk-2",
                json={},
            )

            service.request(
                RequestSpec(method="PUT", endpoint=Endpoint("/stream"), content=chunks())
            )

            sent_request = httpx_mock.get_request()
            assert sent_request.content == b"chunk-1,chunk-2"
            assert "Content-Type" not in sent_request.headers

        def test_timeout_override_reaches_transport(
            self, httpx_mock: HTTPXMock, service: BaseService
        ):
            httpx_mock.add_response(json={})

            service.request(
                RequestSpec(method="GET", endpoint=Endpoint("/slow"), timeout=2.5)
            )

            sent_request = httpx_mock.get_request()
            assert sent_request.extensions["timeout"] == httpx.Timeout(2.5).as_dict()

        def test_config_timeout_is_the_default(
            self, httpx_mock: HTTPXMock, service: BaseService, context: ClientContext
        ):
            httpx_mock.add_response(json={})

            service.request(RequestSpec(method="GET", endpoint=Endpoint("/endpoint")))

            sent_request = httpx_mock.get_request()
            assert (
                sent_request.extensions["timeout"]
                == httpx.Timeout(context.config.timeout).as_dict()
            )

        def test_content_type_override(
            self, httpx_mock: HTTPXMock, service: BaseService
        ):
            httpx_mock.add_response(json={})

            service.request(
                RequestSpec(
                    method="POST",
                    endpoint=Endpoint("/raw"),
                    content=b"a,b,c",
                    content_type="text/csv",
                )
            )

            assert httpx_mock.get_request().headers["Content-Type"] == "text/csv"

        def test_get_with_json_body_has_no_json_content_type(
            self, httpx_mock: HTTPXMock, service: BaseService
        ):
            httpx_mock.add_response(json={})

            service.request(
                RequestSpec(method="GET", endpoint=Endpoint("/filter"), json={"a": 1})
            )

            assert "Content-Type" not in httpx_mock.get_request().headers

        def test_extra_headers_override_defaults(
            self, httpx_mock: HTTPXMock, service: BaseService
        ):
            httpx_mock.add_response(json={})

            service.request(
                RequestSpec(
                    method="GET",
                    endpoint=Endpoint("/endpoint"),
                    headers={"accept": "text/plain", "X-Request-Id": "req-1"},
                )
            )

            sent_request = httpx_mock.get_request()
            assert sent_request.headers.get_list("Accept") == ["text/plain"]
            assert sent_request.headers["X-Request-Id"] == "req-1"

    class TestAuthentication:
        def test_auth_header_absent_when_token_empty(
            self, httpx_mock: HTTPXMock, service: BaseService, context: ClientContext
        ):
            context.access_token = ""
            httpx_mock.add_response(json={})

            service.request(RequestSpec(method="GET", endpoint=Endpoint("/endpoint")))

            assert "x-access-token" not in httpx_mock.get_request().headers

        def test_auth_header_absent_when_not_required(
            self, httpx_mock: HTTPXMock, service: BaseService
        ):
            httpx_mock.add_response(json={})

            service.request(
                RequestSpec(
                    method="GET", endpoint=Endpoint("/public"), requires_auth=False
                )
            )

            assert "x-access-token" not in httpx_mock.get_request().headers

        def test_custom_auth_header_name(
            self, httpx_mock: HTTPXMock, context: ClientContext, access_token: str
        ):
            context.config = context.config.model_copy(update={"auth_header": "X-Token"})
            service = BaseService(context=context)
            httpx_mock.add_response(json={})

            service.request(RequestSpec(method="GET", endpoint=Endpoint("/endpoint")))

            sent_request = httpx_mock.get_request()
            assert sent_request.headers["X-Token"] == access_token
            assert "x-access-token" not in sent_request.headers

        def test_token_rotation_is_shared_between_services(
            self, httpx_mock: HTTPXMock, context: ClientContext
        ):
            first = BaseService(context=context)
            second = BaseService(context=context)
            httpx_mock.add_response(json={})
            httpx_mock.add_response(json={})

            context.access_token = "rotated-token"
            first.request(RequestSpec(method="GET", endpoint=Endpoint("/one")))
            second.request(RequestSpec(method="GET", endpoint=Endpoint("/two")))

            requests = httpx_mock.get_requests()
            assert [r.headers["x-access-token"] for r in requests] == [
                "rotated-token",
                "rotated-token",
            ]

    class TestErrors:
        @pytest.mark.parametrize("status_code", [400, 401, 404, 500, 503])
        def test_error_status_raises_api_error(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
            status_code: int,
        ):
            httpx_mock.add_response(
                url=f"{base_url}/accounts/register",
                status_code=status_code,
                json={"code": "400001", "message": "duplicate phone", "data": None},
            )

            with pytest.raises(APIError) as exc_info:
                service.request(
                    RequestSpec(method="POST", endpoint=Endpoint("/accounts/register"), json={}),
                    dict,
                )

            assert exc_info.value.code == "400001"
            assert exc_info.value.message == "duplicate phone"
            assert exc_info.value.status_code == status_code
            assert (
                str(exc_info.value)
                == "Interlace API Error - Code: 400001, Message: duplicate phone"
            )

        @pytest.mark.parametrize("body", [b"<html>oops</html>", b"", b"[1, 2]"])
        def test_malformed_error_body_is_parse_error(
            self, httpx_mock: HTTPXMock, service: BaseService, body: bytes
        ):
            httpx_mock.add_response(status_code=502, content=body)

            with pytest.raises(APIError) as exc_info:
                service.request(RequestSpec(method="GET", endpoint=Endpoint("/endpoint")))

            assert exc_info.value.code == "PARSE_ERROR"
            assert exc_info.value.message == "Failed to parse error response"
            assert exc_info.value.status_code == 502

        def test_transport_failure_raises_transport_error(
            self, httpx_mock: HTTPXMock, service: BaseService
        ):
            httpx_mock.add_exception(httpx.ConnectError("connection refused"))

            with pytest.raises(TransportError) as exc_info:
                service.request(RequestSpec(method="GET", endpoint=Endpoint("/endpoint")))

            assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

        def test_timeout_raises_transport_error(
            self, httpx_mock: HTTPXMock, service: BaseService
        ):
            httpx_mock.add_exception(httpx.ReadTimeout("timed out"))

            with pytest.raises(TransportError, match="timed out"):
                service.request(RequestSpec(method="GET", endpoint=Endpoint("/endpoint")))

        def test_unserializable_body_raises_encoding_error(self, service: BaseService):
            with pytest.raises(EncodingError):
                service.request(
                    RequestSpec(method="POST", endpoint=Endpoint("/endpoint"), json={"a": {1, 2}})
                )

        @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
        def test_non_finite_number_raises_encoding_error(
            self, httpx_mock: HTTPXMock, service: BaseService, value: float
        ):
            with pytest.raises(EncodingError):
                service.request(
                    RequestSpec(
                        method="POST", endpoint=Endpoint("/payments"), json={"amount": value}
                    )
                )

            assert httpx_mock.get_requests() == []

        def test_success_envelope_without_data_raises_decoding_error(
            self, httpx_mock: HTTPXMock, service: BaseService
        ):
            httpx_mock.add_response(json={"code": "000000", "message": "ok", "data": None})

            envelope = service.request(
                RequestSpec(method="GET", endpoint=Endpoint("/endpoint")),
                ApiResponse[AccountData],
            )

            assert service._unwrap(envelope) is None
            with pytest.raises(DecodingError):
                service._unwrap_required(envelope)

        def test_body_not_matching_model_raises_decoding_error(
            self, httpx_mock: HTTPXMock, service: BaseService
        ):
            httpx_mock.add_response(
                json={"code": "000000", "message": "ok", "data": ["not", "an", "account"]}
            )

            with pytest.raises(DecodingError):
                service.request(
                    RequestSpec(method="GET", endpoint=Endpoint("/endpoint")),
                    ApiResponse[AccountData],
                )

        def test_non_json_success_body_raises_decoding_error(
            self, httpx_mock: HTTPXMock, service: BaseService
        ):
            httpx_mock.add_response(content=b"not json")

            with pytest.raises(DecodingError):
                service.request(RequestSpec(method="GET", endpoint=Endpoint("/endpoint")), dict)

    class TestRequestAsync:
        @pytest.mark.anyio
        async def test_simple_request_async(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            context: ClientContext,
            base_url: str,
            access_token: str,
        ):
            endpoint = "/endpoint"
            httpx_mock.add_response(
                url=f"{base_url}{endpoint}",
                status_code=200,
                json={"code": "000000", "message": "ok", "data": {"id": "acc_1"}},
            )

            result = await service.request_async(
                RequestSpec(method="GET", endpoint=Endpoint(endpoint)),
                ApiResponse[AccountData],
            )
            await context.aclose()

            sent_request = httpx_mock.get_request()
            assert sent_request.method == "GET"
            assert sent_request.headers["x-access-token"] == access_token
            assert result.data is not None
            assert result.data.id == "acc_1"

        @pytest.mark.anyio
        async def test_error_status_async(
            self, httpx_mock: HTTPXMock, service: BaseService, context: ClientContext
        ):
            httpx_mock.add_response(
                status_code=403, json={"code": "403001", "message": "forbidden"}
            )

            with pytest.raises(APIError) as exc_info:
                await service.request_async(
                    RequestSpec(method="GET", endpoint=Endpoint("/endpoint"))
                )
            await context.aclose()

            assert exc_info.value.code == "403001"
