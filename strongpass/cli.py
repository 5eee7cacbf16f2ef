"""CLI for StrongPass — generate, score, config (show/set)."""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import (
    DEFAULTS,
    GenerationConfig,
    MAX_UI_LENGTH,
    MIN_UI_LENGTH,
    config_path,
    generation_config_from,
    load_config,
    parse_value,
    save_config,
)
from .exceptions import StrongPassError
from .generator import generate_many, validate_config
from .score import score

logger = logging.getLogger(__name__)

BAR_WIDTH = 30

# passwords may contain ":+1:"-like runs, so no emoji codes
console = Console(emoji=False, highlight=False)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
    )


def _strength_bar(value: int, color: str) -> str:
    filled = round(BAR_WIDTH * value / 100)
    return f"[{color}]{'█' * filled}[/]{'░' * (BAR_WIDTH - filled)}"


def cmd_generate(args):
    defaults = generation_config_from(load_config())
    config = GenerationConfig(
        length=args.length if args.length is not None else defaults.length,
        uppercase=defaults.uppercase and not args.no_upper,
        lowercase=defaults.lowercase and not args.no_lower,
        digits=defaults.digits and not args.no_digits,
        symbols=defaults.symbols and not args.no_symbols,
    )
    if args.allow_any_length:
        validate_config(config, min_length=None, max_length=None)
    else:
        validate_config(config)
    logger.debug("Generating %d password(s) with %s", args.copies, config)
    for i, pw in enumerate(generate_many(config, args.copies)):
        console.print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}", end="")
        if args.show_strength:
            result = score(pw)
            console.print(f"  [{result.color}]{result.label} ({result.score}/100)[/]")
        else:
            console.print()


def cmd_score(args):
    result = score(args.password)
    header = f"Score: {result.score} / 100 — {result.label}"
    body = (
        f"{_strength_bar(result.score, result.color)}\n"
        f"Length: {len(args.password)}"
    )
    console.print(Panel(body, title=header, border_style=result.color))


def cmd_config_show(args):
    cfg = load_config()
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Key")
    table.add_column("Value")
    table.add_column("Default")
    for key, default in DEFAULTS.items():
        table.add_row(key, str(cfg.get(key)), str(default))
    console.print(table)
    console.print(f"[dim]{config_path()}[/dim]")


def cmd_config_set(args):
    try:
        value = parse_value(args.key, args.value)
    except KeyError:
        console.print(f"[red]Unknown key: {args.key}. Known keys: {', '.join(DEFAULTS)}[/red]")
        return 2
    except ValueError as e:
        console.print(f"[red]Invalid value: {escape(str(e))}[/red]")
        return 2
    if args.key == "length" and not MIN_UI_LENGTH <= value <= MAX_UI_LENGTH:
        console.print(f"[red]Invalid value: length must be between {MIN_UI_LENGTH} and {MAX_UI_LENGTH}[/red]")
        return 2
    cfg = load_config()
    cfg[args.key] = value
    save_config(cfg)
    console.print(f"[green]Set {args.key} = {value}[/green]")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="strongpass")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, default=None,
                     help=f"Password length ({MIN_UI_LENGTH}-{MAX_UI_LENGTH}, default from config)")
    gen.add_argument("--no-symbols", action="store_true", help="Disable symbols")
    gen.add_argument("--no-upper", action="store_true", help="Disable uppercase")
    gen.add_argument("--no-lower", action="store_true", help="Disable lowercase")
    gen.add_argument("--no-digits", action="store_true", help="Disable digits")
    gen.add_argument("--copies", type=int, default=1, help="How many passwords to generate")
    gen.add_argument("--show-strength", action="store_true", help="Print the strength next to each password")
    gen.add_argument("--allow-any-length", action="store_true", help="Skip the length range check")
    gen.set_defaults(func=cmd_generate)

    sc = sub.add_parser("score", help="Score a password")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    sc.set_defaults(func=cmd_score)

    c = sub.add_parser("config", help="Show or change preferences")
    csub = c.add_subparsers(dest="ccmd", required=True)

    c_show = csub.add_parser("show", help="Show current preferences")
    c_show.set_defaults(func=cmd_config_show)

    c_set = csub.add_parser("set", help="Set a preference")
    c_set.add_argument("key", type=str, help=f"One of: {', '.join(DEFAULTS)}")
    c_set.add_argument("value", type=str, help="New value")
    c_set.set_defaults(func=cmd_config_set)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    try:
        return args.func(args) or 0
    except StrongPassError as e:
        logger.debug("Command failed", exc_info=True)
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 2


if __name__ == "__main__":
    sys.exit(main())
