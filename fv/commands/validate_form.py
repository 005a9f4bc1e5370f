"""Komenda: fv validate — waliduje pola formularza (JSON) zestawem reguł."""

from __future__ import annotations

import argparse
import dataclasses
import json
import pathlib
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from fv import _config
from partial import Partial, PartialError
from validation import Validation

console = Console()

KIND_STYLE: dict[str, str] = {
    "missing":       "red",
    "invalid_value": "yellow",
}


def _load_form(path: pathlib.Path) -> dict[str, Any]:
    if not path.exists():
        console.print(f"[red]Brak pliku formularza:[/red] {path}")
        raise SystemExit(1)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        console.print(f"[red]Nie można odczytać pliku formularza:[/red] {exc}")
        raise SystemExit(1)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        console.print(f"[red]Błąd parsowania JSON:[/red] {exc}")
        raise SystemExit(1)
    if not isinstance(data, dict):
        console.print("[red]Formularz musi być obiektem JSON (pole → wartość).[/red]")
        raise SystemExit(1)
    return data


def run(args: argparse.Namespace) -> None:
    form = _load_form(pathlib.Path(args.form))

    # --- Model i reguły --------------------------------------------------
    try:
        model = _config.load_object(args.model)
        rules = _config.load_object(args.rules)
    except (ImportError, ValueError) as exc:
        console.print(f"[red]Nie można wczytać modelu/reguł:[/red] {exc}")
        raise SystemExit(1)

    if not isinstance(rules, Validation):
        console.print(f"[red]{args.rules} nie jest obiektem Validation.[/red]")
        raise SystemExit(1)

    # --- Walidacja -------------------------------------------------------
    try:
        partial = Partial.from_mapping(model, form)
    except (PartialError, TypeError) as exc:
        console.print(f"[red]Niepoprawny formularz:[/red] {exc}")
        raise SystemExit(1)

    result = rules.validate(partial)

    # --- Wynik na konsoli ------------------------------------------------
    if result.is_valid:
        console.print(
            f"[green]OK[/green]  Formularz [bold]{model.__name__}[/bold] jest poprawny."
        )
    else:
        console.print(
            f"[red]BŁĄD[/red]  Formularz [bold]{model.__name__}[/bold] — "
            f"{len(result.reasons)} niespełnionych reguł."
        )

        table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
        table.add_column("Rodzaj", no_wrap=True)
        table.add_column("Pole", style="cyan", no_wrap=True)
        table.add_column("Wartość", style="dim")

        for reason in result.reasons:
            value = repr(partial.raw(reason.field)) if reason.field in partial else "—"
            style = KIND_STYLE.get(reason.kind, "white")
            table.add_row(f"[{style}]{reason.kind}[/{style}]", reason.field.name, Text(value))

        console.print(table)

    # --- Wyjście JSON (opcjonalnie) --------------------------------------
    if args.json_output:
        out: dict[str, Any] = {
            "is_valid": result.is_valid,
            "reasons": [
                {"kind": str(r.kind), "field": r.field.name} for r in result.reasons
            ],
            "record": dataclasses.asdict(result.value) if result.is_valid else None,
        }
        print(json.dumps(out, ensure_ascii=False, indent=2))

    if not result.is_valid:
        sys.exit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "validate",
        help="Waliduje pola formularza (JSON) zestawem reguł.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=f"""\
Buduje Partial modelu z obiektu JSON (pole → wartość) i uruchamia
zestaw reguł Validation. Kod wyjścia 1 gdy formularz jest niepoprawny.

Model i reguły wskazywane są ścieżką importu moduł:atrybut
(domyślnie z FV_MODEL / FV_RULES):

  model:  {_config.model_path()}
  reguły: {_config.rules_path()}

Przykłady:
  fv validate formularz.json
  fv validate formularz.json --json-output
  fv validate formularz.json --model app.forms:Order --rules app.forms:ORDER_RULES
        """,
    )
    p.add_argument(
        "form",
        metavar="PLIK_FORMULARZA",
        help="Ścieżka do pliku JSON z polami formularza.",
    )
    p.add_argument(
        "--model",
        default=_config.model_path(),
        metavar="MODUŁ:KLASA",
        help="Klasa rekordu (PartialInitializable).",
    )
    p.add_argument(
        "--rules", "-r",
        default=_config.rules_path(),
        metavar="MODUŁ:ATRYBUT",
        help="Obiekt Validation z regułami.",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz wynik walidacji jako JSON na stdout.",
    )
    p.set_defaults(func=run)
