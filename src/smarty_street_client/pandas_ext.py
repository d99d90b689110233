from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Optional

from smarty_street_client.models import AddressCandidate, AddressInput, AddressInputOptional

if TYPE_CHECKING:
    import pandas as pd

    from smarty_street_client.client import SmartyStreetClient

# DataFrame column -> AddressInput field
DEFAULT_COLUMNS: dict[str, str] = {
    "street": "street",
    "city": "city",
    "state": "state",
    "zipcode": "zipcode",
    "freeform": "freeform",
}

OPTIONAL_COLUMNS: tuple[str, ...] = tuple(AddressInputOptional.model_fields)


def candidates_to_frame(candidates: Sequence[AddressCandidate]) -> pd.DataFrame:
    """Flatten candidates into a DataFrame.

    Nested groups become dotted columns such as ``components.city_name``
    and ``metadata.latitude``. Row order follows ``candidates``.

    Args:
        candidates: Candidates to flatten.

    Returns:
        DataFrame with one row per candidate.
    """
    import pandas as pd

    return pd.json_normalize([c.model_dump() for c in candidates])


def _row_value(row: pd.Series, column: str) -> Optional[str]:
    import pandas as pd

    if column not in row.index:
        return None
    value = row[column]
    if pd.isna(value):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def lookup_dataframe(
    df: pd.DataFrame,
    client: SmartyStreetClient,
    *,
    columns: Optional[dict[str, str]] = None,
    candidates: int = 1,
) -> pd.DataFrame:
    """Look up every row of a DataFrame with one batch request.

    Columns named after optional input fields (``addressee``, ``secondary``,
    ...) are sent too when present.

    Args:
        df: DataFrame holding address columns.
        client: Client used for the batch request.
        columns: Mapping of DataFrame column to input field, defaults to
            identically named columns.
        candidates: Candidate count requested per row.

    Returns:
        DataFrame of flattened candidates with a ``row`` column holding the
        source row's index label.

    Raises:
        SmartyStreetError: If the batch request fails.
    """
    mapping = columns or DEFAULT_COLUMNS

    addresses: list[AddressInput] = []
    optionals: list[AddressInputOptional] = []
    for _, row in df.iterrows():
        fields = {target: _row_value(row, source) for source, target in mapping.items()}
        addresses.append(AddressInput(candidates=candidates, **fields))
        optionals.append(
            AddressInputOptional(**{name: _row_value(row, name) for name in OPTIONAL_COLUMNS})
        )

    found = client.post_candidates(addresses, optionals)
    frame = candidates_to_frame(found)
    if not frame.empty:
        frame.insert(0, "row", [df.index[c.input_index] for c in found])
    return frame
