"""CLI for Keysmith: generate passwords and manage saved generation defaults."""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import DEFAULTS, MIN_COPIES, config_path, load_config, options_from_config, save_config
from .errors import PasswordGenerationError
from .generator import PasswordGenerator, GenerationOptions

console = Console()
err_console = Console(stderr=True)

DEMO_LENGTH = 16

def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )

def _emit(passwords, plain: bool) -> None:
    for i, pw in enumerate(passwords):
        if plain:
            console.print(pw, markup=False, emoji=False, highlight=False, soft_wrap=True)
        else:
            console.print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}", emoji=False, highlight=False, soft_wrap=True)

def cmd_demo(args) -> int:
    pw = PasswordGenerator().generate(GenerationOptions(length=DEMO_LENGTH))
    _emit([pw], plain=True)
    return 0

def cmd_generate(args) -> int:
    cfg = load_config()
    opts = options_from_config(cfg)
    overrides = {}
    if args.length is not None:
        overrides["length"] = args.length
    if args.no_lower:
        overrides["include_lowercase"] = False
    if args.no_upper:
        overrides["include_uppercase"] = False
    if args.no_digits:
        overrides["include_numbers"] = False
    if args.no_symbols:
        overrides["include_symbols"] = False
    copies = args.copies if args.copies is not None else cfg["copies"]
    if copies < MIN_COPIES:
        err_console.print(f"[red]--copies must be at least {MIN_COPIES}[/red]")
        return 2
    gen = PasswordGenerator()
    try:
        passwords = [gen.generate(opts, **overrides) for _ in range(copies)]
    except PasswordGenerationError as e:
        err_console.print(f"[red]{e.kind}: {escape(str(e))}[/red]")
        return 2
    _emit(passwords, args.plain)
    return 0

def cmd_config_show(args) -> int:
    cfg = load_config()
    table = Table(show_header=True, header_style="bold cyan", title=config_path())
    table.add_column("Setting")
    table.add_column("Value")
    for key in DEFAULTS:
        table.add_row(key, str(cfg[key]))
    console.print(table)
    return 0

def cmd_config_set(args) -> int:
    cfg = load_config()
    changes = {
        "length": args.length,
        "include_lowercase": args.lower,
        "include_uppercase": args.upper,
        "include_numbers": args.digits,
        "include_symbols": args.symbols,
        "copies": args.copies,
    }
    changes = {k: v for k, v in changes.items() if v is not None}
    if not changes:
        err_console.print("[yellow]Nothing to change.[/yellow]")
        return 1
    cfg.update(changes)
    if cfg["copies"] < MIN_COPIES:
        err_console.print(f"[red]Refusing to save settings: copies must be at least {MIN_COPIES}[/red]")
        return 2
    # refuse to persist defaults that can never generate
    try:
        options_from_config(cfg).validate()
    except PasswordGenerationError as e:
        err_console.print(f"[red]Refusing to save settings: {escape(str(e))}[/red]")
        return 2
    path = save_config(cfg)
    console.print(f"[green]Saved settings to:[/green] {escape(path)}")
    return 0

def cmd_config_reset(args) -> int:
    path = save_config(DEFAULTS.copy())
    console.print(f"[green]Restored default settings in:[/green] {escape(path)}")
    return 0

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="keysmith")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.set_defaults(func=cmd_demo)
    sub = parser.add_subparsers(dest="cmd")

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, default=None, help="Password length (min 4)")
    gen.add_argument("--no-symbols", action="store_true", help="Disable symbols")
    gen.add_argument("--no-upper", action="store_true", help="Disable uppercase")
    gen.add_argument("--no-lower", action="store_true", help="Disable lowercase")
    gen.add_argument("--no-digits", action="store_true", help="Disable digits")
    gen.add_argument("--copies", type=int, default=None, help="How many passwords to generate")
    gen.add_argument("--plain", action="store_true", help="Print bare passwords, one per line")
    gen.set_defaults(func=cmd_generate)

    c = sub.add_parser("config", help="Saved generation defaults")
    csub = c.add_subparsers(dest="ccmd", required=True)

    c_show = csub.add_parser("show", help="Show current settings")
    c_show.set_defaults(func=cmd_config_show)

    c_set = csub.add_parser("set", help="Change saved defaults")
    c_set.add_argument("--length", type=int, default=None, help="Default password length")
    c_set.add_argument("--lower", action=argparse.BooleanOptionalAction, default=None, help="Include lowercase")
    c_set.add_argument("--upper", action=argparse.BooleanOptionalAction, default=None, help="Include uppercase")
    c_set.add_argument("--digits", action=argparse.BooleanOptionalAction, default=None, help="Include digits")
    c_set.add_argument("--symbols", action=argparse.BooleanOptionalAction, default=None, help="Include symbols")
    c_set.add_argument("--copies", type=int, default=None, help="Default number of passwords")
    c_set.set_defaults(func=cmd_config_set)

    c_reset = csub.add_parser("reset", help="Restore default settings")
    c_reset.set_defaults(func=cmd_config_reset)

    return parser

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.log_level)
    return args.func(args)

if __name__ == "__main__":
    sys.exit(main())
