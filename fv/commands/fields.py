"""Komenda: fv fields — listowanie pól rekordu."""

from __future__ import annotations

import argparse

from rich import box
from rich.console import Console
from rich.table import Table

from fv import _config
from partial import record_fields

console = Console()


def run(args: argparse.Namespace) -> None:
    try:
        model = _config.load_object(args.model)
        fields = record_fields(model)
    except (ImportError, ValueError, TypeError) as exc:
        console.print(f"[red]Nie można wczytać modelu:[/red] {exc}")
        raise SystemExit(1)

    table = Table(
        title=f"Pola rekordu {model.__name__}",
        box=box.SIMPLE_HEAVY,
        show_header=True,
        header_style="bold",
    )
    table.add_column("Pole", style="cyan", no_wrap=True)
    table.add_column("Typ", style="green")
    table.add_column("Opcjonalne", justify="center")

    for ref in fields:
        types = " | ".join(t.__name__ for t in ref.value_type)
        table.add_row(ref.name, types, "tak" if ref.optional else "-")

    console.print(table)
    console.print(f"[dim]Łącznie: {len(fields)} pól[/dim]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "fields",
        help="Listuje pola rekordu (nazwa, typ, opcjonalność).",
    )
    p.add_argument(
        "--model",
        default=_config.model_path(),
        metavar="MODUŁ:KLASA",
        help=f"Klasa rekordu (domyślnie: {_config.model_path()}).",
    )
    p.set_defaults(func=run)
