from __future__ import annotations

import logging
import pathlib
from datetime import datetime
from enum import Enum
from typing import Optional

import typer
import structlog
import yaml
from pydantic import ValidationError
from rich.console import Console

from .config import load_config, RomidConfig
from .engine.checks import KINDS, check as run_check, Verdict
from .geo.address import RomanianAddress, format_romanian_address, format_romanian_address_single_line
from .geo.contact import normalize_romanian_phone
from .geo.counties import get_cnp_county_name, get_county_name
from .identifiers.cnp import mask_cnp
from .identifiers.iban import format_iban

console = Console()
log = structlog.get_logger()
app = typer.Typer(add_completion=False, no_args_is_help=True, help="romid — Romanian identifier validator")

Kind = Enum("Kind", {k: k for k in KINDS}, type=str)


def version_callback(value: bool):
    if value:
        from . import __version__
        console.print(f"romid {__version__}")
        raise typer.Exit()


@app.callback()
def common(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(None, "--config", help="Path to romid.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logs"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """Global options (config, verbosity)."""
    structlog.configure(processors=[structlog.processors.JSONRenderer()])
    ctx.obj = {"config": load_config(config) if config else RomidConfig(), "verbose": verbose}
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        log.info("verbose_enabled")


@app.command()
def check(
    ctx: typer.Context,
    kind: Kind = typer.Argument(..., help="Identifier kind", case_sensitive=False),
    value: str = typer.Argument(..., help="Value to check"),
    today: Optional[datetime] = typer.Option(None, "--today", formats=["%Y-%m-%d"], help="Reference date for CNP checks"),
    as_json: bool = typer.Option(False, "--json", help="Print the verdict as JSON"),
):
    """Validate a value; exits with code 1 when it is invalid."""
    verdict: Verdict = run_check(kind.value, value, ctx.obj["config"], today.date() if today else None)
    if ctx.obj["verbose"]:
        log.info("check_done", kind=verdict.kind, valid=verdict.valid, reason=verdict.reason)

    if as_json:
        typer.echo(verdict.model_dump_json())
    elif verdict.valid:
        console.print(f"[green]valid[/green] {verdict.kind}: {verdict.normalized}")
        for key, val in verdict.details.items():
            console.print(f"  {key}: {val}")
    else:
        console.print(f"[red]invalid[/red] {verdict.kind}: {verdict.reason}")

    if not verdict.valid:
        raise typer.Exit(code=1)


@app.command()
def mask(ctx: typer.Context, value: str = typer.Argument(..., help="CNP to mask for display")):
    """Print a CNP with everything after the sixth character hidden."""
    console.print(mask_cnp(value, ctx.obj["config"].mask.char), markup=False, soft_wrap=True)


@app.command()
def phone(value: str = typer.Argument(..., help="Phone number in any Romanian notation")):
    """Print a phone number in +40 international form."""
    console.print(normalize_romanian_phone(value), markup=False, soft_wrap=True)


@app.command("iban-format")
def iban_format(value: str = typer.Argument(..., help="IBAN to group in blocks of four")):
    """Print an IBAN in groups of four characters."""
    console.print(format_iban(value), markup=False, soft_wrap=True)


@app.command()
def county(code: str = typer.Argument(..., help="Address code ('CJ') or CNP code ('12')")):
    """Look up a county by its address code or its two-digit CNP code."""
    name = get_cnp_county_name(code) if code.isdigit() else get_county_name(code)
    if name is None:
        raise typer.BadParameter(f"unknown county code: {code}")
    console.print(name)


@app.command()
def address(
    ctx: typer.Context,
    src: pathlib.Path = typer.Argument(..., help="YAML file with the address fields"),
    single_line: bool = typer.Option(False, "--single-line", help="Print on one line"),
):
    """Validate an address file and print it formatted."""
    data = yaml.safe_load(src.read_text(encoding="utf-8")) or {}
    # YAML reads 28 or 400114 as ints; the model wants strings
    data = {k: v if v is None or isinstance(v, str) else str(v) for k, v in data.items()}
    try:
        addr = RomanianAddress(**data)
    except ValidationError as e:
        for err in e.errors():
            console.print(f"[red]{'.'.join(str(p) for p in err['loc'])}[/red]: {err['msg']}")
        raise typer.Exit(code=1)
    country = ctx.obj["config"].address.country
    fmt = format_romanian_address_single_line if single_line else format_romanian_address
    console.print(fmt(addr, country=country), markup=False, soft_wrap=True)
