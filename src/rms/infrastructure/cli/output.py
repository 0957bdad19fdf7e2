"""Shared rendering and error handling for CLI commands."""

from __future__ import annotations

import json
from typing import Any, NoReturn

import click

from rms.domain.exceptions import DomainException, ValidationError
from rms.infrastructure.error_responses import error_response


def echo_json(status: int, payload: Any) -> None:
    click.echo(json.dumps({"status": status, "data": payload}, indent=2, ensure_ascii=False))


def fail(exc: DomainException, as_json: bool = False) -> NoReturn:
    """Abort the command with a non-zero exit code describing *exc*."""
    if as_json:
        status, body = error_response(exc)
        click.echo(json.dumps({"status": status, **body}, indent=2, ensure_ascii=False), err=True)
        raise click.exceptions.Exit(1)

    message = exc.message
    if isinstance(exc, ValidationError) and exc.details:
        message = "Invalid data:\n" + "\n".join(
            f"  {d.field}: {d.message}" for d in exc.details
        )
    raise click.ClickException(message)
