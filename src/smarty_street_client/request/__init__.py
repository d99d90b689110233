from smarty_street_client.request.builder import (
    MAX_CANDIDATES,
    MIN_CANDIDATES,
    Credentials,
    build_address_params,
    build_batch,
    build_entry,
    build_optional_params,
    build_query,
    clamp_candidates,
    encode_params,
    resolve_credentials,
    select_address_params,
)

__all__ = [
    "Credentials",
    "MAX_CANDIDATES",
    "MIN_CANDIDATES",
    "build_address_params",
    "build_batch",
    "build_entry",
    "build_optional_params",
    "build_query",
    "clamp_candidates",
    "encode_params",
    "resolve_credentials",
    "select_address_params",
]
