from __future__ import annotations

import pytest

from smarty_street_client import (
    AddressInput,
    AddressInputOptional,
    AddressValidationError,
    AuthenticationError,
    Credentials,
    LengthMismatchError,
    build_batch,
    build_optional_params,
    build_query,
    clamp_candidates,
    is_valid_input,
)
from smarty_street_client.request import build_entry, resolve_credentials, select_address_params
from smarty_street_client.validation import AddressInputValidator

CREDS = Credentials("id-123", "token-456")


# =============================================================================
# Validation
# =============================================================================


@pytest.mark.parametrize(
    "fields",
    [
        {"street": "123 Main St", "city": "Austin", "state": "TX"},
        {"street": "123 Main St", "zipcode": "78749"},
        {"freeform": "123 Main St Austin TX"},
        {"street": "123 Main St", "freeform": "123 Main St Austin TX"},
    ],
)
def test_addressable_inputs_are_valid(fields: dict[str, str]) -> None:
    assert is_valid_input(AddressInput(**fields))


@pytest.mark.parametrize(
    "fields",
    [
        {},
        {"street": "123 Main St"},
        {"street": "123 Main St", "city": "Austin"},
        {"city": "Austin", "state": "TX", "zipcode": "78749"},
        {"street": "   ", "freeform": ""},
    ],
)
def test_unaddressable_inputs_are_invalid(fields: dict[str, str]) -> None:
    assert not is_valid_input(AddressInput(**fields))


def test_blank_strings_normalize_to_none() -> None:
    address = AddressInput(street="  ", city="", state=" TX ")
    assert address.street is None
    assert address.city is None
    assert address.state == "TX"


@pytest.mark.parametrize("raw", ["", "  ", None])
def test_blank_candidates_fall_back_to_one(raw) -> None:
    address = AddressInput.model_validate({"freeform": "1 Main St Austin TX", "candidates": raw})
    assert address.candidates is None
    assert build_entry(address)["candidates"] == 1


def test_numeric_fields_coerce_to_strings() -> None:
    address = AddressInput.model_validate({"street": "1 Main St", "zipcode": 78749})
    assert address.zipcode == "78749"
    assert is_valid_input(address)


def test_validate_many_tags_issues_with_index() -> None:
    result = AddressInputValidator().validate_many(
        [
            AddressInput(freeform="1 Main St Austin TX"),
            AddressInput(street="9 Elm St"),
            AddressInput(),
        ]
    )
    assert not result.is_valid
    assert [issue.index for issue in result.errors] == [1, 2]
    assert result.messages()[0].startswith("[1] Either street")


# =============================================================================
# GET query serialization
# =============================================================================


def test_query_street_city_state_in_order() -> None:
    query = build_query(
        AddressInput(street="1600 Amphitheatre Pkwy", city="Mountain View", state="CA"),
        credentials=CREDS,
    )

    assert query.startswith("auth-id=id-123&auth-token=token-456")
    street_at = query.index("&street=1600+Amphitheatre+Pkwy")
    city_at = query.index("&city=Mountain+View")
    state_at = query.index("&state=CA")
    assert street_at < city_at < state_at
    assert "&zipcode=" not in query


def test_query_street_city_state_appends_zipcode() -> None:
    query = build_query(
        AddressInput(street="1 Main St", city="Austin", state="TX", zipcode="78749"),
        credentials=CREDS,
    )
    assert query.index("&state=TX") < query.index("&zipcode=78749")


def test_query_street_zipcode_only() -> None:
    query = build_query(AddressInput(street="1 Main St", zipcode="78749"), credentials=CREDS)

    assert "&street=1+Main+St" in query
    assert "&zipcode=78749" in query
    assert "&city=" not in query
    assert "&state=" not in query


def test_query_city_without_state_falls_back_to_zipcode() -> None:
    params = select_address_params(AddressInput(street="1 Main St", city="Austin", zipcode="78749"))
    assert params == [("street", "1 Main St"), ("zipcode", "78749")]


def test_query_freeform_is_sent_as_street() -> None:
    query = build_query(AddressInput(freeform="1 Main St, Austin TX"), credentials=CREDS)
    assert "&street=1+Main+St%2C+Austin+TX" in query


def test_street_takes_precedence_over_freeform() -> None:
    params = select_address_params(
        AddressInput(street="1 Main St", zipcode="78749", freeform="somewhere else")
    )
    assert ("street", "1 Main St") in params
    assert all(value != "somewhere else" for _, value in params)


def test_incomplete_street_uses_freeform() -> None:
    params = select_address_params(AddressInput(street="1 Main St", freeform="1 Main St Austin TX"))
    assert params == [("street", "1 Main St Austin TX")]


def test_query_percent_encodes_reserved_characters() -> None:
    query = build_query(
        AddressInput(street="12 O'Neil & Sons Rd #4", zipcode="02101"),
        credentials=Credentials("a/b", "c=d"),
    )
    assert "auth-id=a%2Fb" in query
    assert "auth-token=c%3Dd" in query
    assert "&street=12+O%27Neil+%26+Sons+Rd+%234" in query


def test_query_rejects_missing_address() -> None:
    with pytest.raises(AddressValidationError) as excinfo:
        build_query(AddressInput(city="Austin", state="TX"), credentials=CREDS)

    assert excinfo.value.type == "address_validation"
    assert "Street address OR freeform required" in str(excinfo.value)


def test_query_rejects_incomplete_street() -> None:
    with pytest.raises(AddressValidationError) as excinfo:
        build_query(AddressInput(street="1 Main St", city="Austin"), credentials=CREDS)

    assert excinfo.value.issues[0]["field"] == "street"
    assert "street + zipcode" in str(excinfo.value)


# =============================================================================
# Candidate count
# =============================================================================


@pytest.mark.parametrize(
    ("requested", "expected"),
    [(0, 1), (-3, 1), (1, 1), (5, 5), (10, 10), (11, 10), (15, 10)],
)
def test_clamp_candidates(requested: int, expected: int) -> None:
    assert clamp_candidates(requested) == expected


@pytest.mark.parametrize(("requested", "serialized"), [(0, "1"), (15, "10"), (5, "5")])
def test_query_serializes_clamped_candidates(requested: int, serialized: str) -> None:
    query = build_query(
        AddressInput(street="1 Main St", zipcode="78749", candidates=requested),
        credentials=CREDS,
    )
    assert f"&candidates={serialized}" in query


# =============================================================================
# Optional fields
# =============================================================================


def test_optional_params_skip_absent_fields() -> None:
    optional = AddressInputOptional(addressee="Acme Corp", secondary="Suite 200", street2="")
    assert build_optional_params(optional) == [
        ("addressee", "Acme Corp"),
        ("secondary", "Suite 200"),
    ]


def test_optional_params_include_urbanization() -> None:
    optional = AddressInputOptional(urbanization="URB Las Gladiolas")
    assert build_optional_params(optional) == [("urbanization", "URB Las Gladiolas")]


def test_optional_params_none() -> None:
    assert build_optional_params(None) == []
    assert build_optional_params(AddressInputOptional()) == []


def test_query_appends_optional_fields_after_candidates() -> None:
    query = build_query(
        AddressInput(street="1 Main St", zipcode="78749"),
        AddressInputOptional(input_id="row 7", lastline="Austin TX"),
        credentials=CREDS,
    )
    assert query.endswith("&candidates=1&input_id=row+7&lastline=Austin+TX")


# =============================================================================
# POST batch serialization
# =============================================================================


def test_build_entry_omits_absent_fields() -> None:
    entry = build_entry(
        AddressInput(street="1 Main St", city="Austin", state="TX", candidates=3),
        AddressInputOptional(addressee="Jane Doe"),
    )
    assert entry == {
        "street": "1 Main St",
        "city": "Austin",
        "state": "TX",
        "candidates": 3,
        "addressee": "Jane Doe",
    }


def test_build_batch_pairs_optionals_by_position() -> None:
    body = build_batch(
        [
            AddressInput(street="1 Main St", zipcode="78749"),
            AddressInput(freeform="2 Oak Ave Boston MA"),
        ],
        [AddressInputOptional(input_id="first"), None],
    )

    assert body == [
        {"street": "1 Main St", "zipcode": "78749", "candidates": 1, "input_id": "first"},
        {"street": "2 Oak Ave Boston MA", "candidates": 1},
    ]


def test_build_batch_without_optionals() -> None:
    body = build_batch([AddressInput(street="1 Main St", zipcode="78749", candidates=20)])
    assert body == [{"street": "1 Main St", "zipcode": "78749", "candidates": 10}]


def test_build_batch_length_mismatch() -> None:
    with pytest.raises(LengthMismatchError) as excinfo:
        build_batch(
            [AddressInput(freeform="a"), AddressInput(freeform="b")],
            [AddressInputOptional()],
        )

    assert excinfo.value.type == "length_mismatch"
    assert excinfo.value.context["inputs"] == 2
    assert excinfo.value.context["optionals"] == 1


def test_build_batch_reports_every_invalid_entry() -> None:
    with pytest.raises(AddressValidationError) as excinfo:
        build_batch(
            [
                AddressInput(city="Austin"),
                AddressInput(freeform="1 Main St Austin TX"),
                AddressInput(street="9 Elm St"),
            ]
        )

    issues = excinfo.value.issues
    assert [issue["index"] for issue in issues] == [0, 2]
    assert "[0]" in str(excinfo.value)
    assert "[2]" in str(excinfo.value)


def test_build_batch_rejects_empty_batch() -> None:
    with pytest.raises(AddressValidationError):
        build_batch([])


# =============================================================================
# Credentials
# =============================================================================


def test_resolve_credentials_prefers_first_authenticated_entry() -> None:
    addresses = [
        AddressInput(freeform="a"),
        AddressInput(freeform="b", auth_id="one", auth_token="uno"),
        AddressInput(freeform="c", auth_id="two", auth_token="dos"),
    ]
    assert resolve_credentials(addresses, CREDS) == Credentials("one", "uno")


def test_resolve_credentials_ignores_partial_pairs() -> None:
    addresses = [AddressInput(freeform="a", auth_id="only-id")]
    assert resolve_credentials(addresses, CREDS) == CREDS


def test_resolve_credentials_requires_some_pair() -> None:
    with pytest.raises(AuthenticationError):
        resolve_credentials([AddressInput(freeform="a")])


def test_auth_fields_accept_wire_names() -> None:
    address = AddressInput.model_validate({"auth-id": "x", "auth-token": "y", "freeform": "a"})
    assert address.has_auth
