from .api_client import (
    append_query_param,
    create_api_client,
    make_authorize_request,
    trace_response,
)

__all__ = [
    "append_query_param",
    "create_api_client",
    "make_authorize_request",
    "trace_response",
]
