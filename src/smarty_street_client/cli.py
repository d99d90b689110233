from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError

from smarty_street_client.client import SmartyStreetClient
from smarty_street_client.models import AddressInput, AddressInputOptional, LookupResult

app = typer.Typer(help="Validate US street addresses against the SmartyStreets API.")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _build_client(auth_id: Optional[str], auth_token: Optional[str]) -> SmartyStreetClient:
    return SmartyStreetClient(auth_id=auth_id, auth_token=auth_token)


def _emit(result: LookupResult) -> None:
    if result.error is not None:
        typer.echo(f"Error: {result.error}", err=True)
        if result.validation is not None:
            for message in result.validation.messages():
                typer.echo(f"  {message}", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(result.to_records(), indent=2))


def _load_batch(path: Path) -> tuple[list[AddressInput], list[AddressInputOptional]]:
    try:
        payload: Any = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        typer.echo(f"Could not read {path}: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if not isinstance(payload, list):
        typer.echo(f"{path} must contain a JSON array of address objects", err=True)
        raise typer.Exit(code=1)

    try:
        addresses = [AddressInput.model_validate(item) for item in payload]
        optionals = [AddressInputOptional.model_validate(item) for item in payload]
    except ValidationError as exc:
        typer.echo(f"Invalid entry in {path}: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    return addresses, optionals


@app.command()
def lookup(
    street: Optional[str] = typer.Option(None, help="Street line."),
    city: Optional[str] = typer.Option(None, help="City name."),
    state: Optional[str] = typer.Option(None, help="State name or abbreviation."),
    zipcode: Optional[str] = typer.Option(None, help="ZIP or ZIP+4."),
    freeform: Optional[str] = typer.Option(None, help="Whole address as one string."),
    candidates: int = typer.Option(1, help="Maximum candidates to return (1-10)."),
    addressee: Optional[str] = typer.Option(None, help="Recipient or firm name."),
    input_id: Optional[str] = typer.Option(None, help="Id echoed back in the output."),
    lastline: Optional[str] = typer.Option(None, help="City, state and ZIP combined."),
    secondary: Optional[str] = typer.Option(None, help="Apartment or suite."),
    street2: Optional[str] = typer.Option(None, help="Extra delivery information."),
    urbanization: Optional[str] = typer.Option(None, help="Puerto Rico urbanization."),
    auth_id: Optional[str] = typer.Option(None, envvar="SMARTY_AUTH_ID", help="Auth id."),
    auth_token: Optional[str] = typer.Option(
        None, envvar="SMARTY_AUTH_TOKEN", help="Auth token."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Look up a single address."""
    _configure_logging(verbose)
    address = AddressInput(
        street=street,
        city=city,
        state=state,
        zipcode=zipcode,
        freeform=freeform,
        candidates=candidates,
    )
    optional = AddressInputOptional(
        addressee=addressee,
        input_id=input_id,
        lastline=lastline,
        secondary=secondary,
        street2=street2,
        urbanization=urbanization,
    )
    with _build_client(auth_id, auth_token) as client:
        result = client.lookup(address, optional)
    _emit(result)


@app.command()
def batch(
    path: Path = typer.Argument(..., help="JSON file holding an array of address objects."),  # noqa: B008
    auth_id: Optional[str] = typer.Option(None, envvar="SMARTY_AUTH_ID", help="Auth id."),
    auth_token: Optional[str] = typer.Option(
        None, envvar="SMARTY_AUTH_TOKEN", help="Auth token."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Look up every address in a JSON file with one batch request."""
    _configure_logging(verbose)
    addresses, optionals = _load_batch(path)
    with _build_client(auth_id, auth_token) as client:
        result = client.lookup_batch(addresses, optionals)
    _emit(result)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
