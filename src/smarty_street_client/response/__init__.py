from smarty_street_client.response.parser import (
    classify_status,
    decode_candidates,
    parse_response,
)

__all__ = [
    "classify_status",
    "decode_candidates",
    "parse_response",
]
