"""
fv — narzędzie CLI biblioteki walidacji formularzy.

Użycie:
  fv [--log-level POZIOM] <komenda> [opcje]

Komendy:
  validate   Waliduje pola formularza (JSON) zestawem reguł Validation.
  fields     Listuje pola rekordu (nazwa, typ, opcjonalność).

Zmienne środowiskowe (także z pliku .env):
  FV_MODEL      domyślna klasa rekordu   (moduł:klasa)
  FV_RULES      domyślny zestaw reguł    (moduł:atrybut)
  FV_LOG_LEVEL  poziom logowania         (domyślnie WARNING)
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from fv import _config
from fv.commands import fields as cmd_fields
from fv.commands import validate_form as cmd_validate_form


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fv",
        description="formvalidation — narzędzie CLI.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="fv 0.1.0"
    )
    parser.add_argument(
        "--log-level",
        default=_config.log_level(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Poziom logowania (domyślnie z FV_LOG_LEVEL lub WARNING).",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_validate_form.add_parser(subparsers)
    cmd_fields.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    _config.setup_logging(args.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
