from ._endpoint import Endpoint
from ._errors import handle_decoding_errors, handle_transport_errors
from ._logs import setup_logging
from ._request_spec import RequestSpec

__all__ = [
    "Endpoint",
    "handle_decoding_errors",
    "handle_transport_errors",
    "setup_logging",
    "RequestSpec",
]
