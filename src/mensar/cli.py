"""Command-line entry point.

Usage:
    mensar [MENSA] [--lang LANG] [-d DATE | -t] [-p]
    mensar --list
    mensar set-mensa NAME
    mensar set-language NAME

Exit codes:
  0 = success (menu or list on stdout)
  1 = error (``mensar: <message>`` on stderr)
"""

import argparse
import sys
from datetime import date, timedelta

from rich.console import Console
from rich.text import Text

from mensar import __version__
from mensar.client import CookpitClient
from mensar.config import MensarConfig, get_config
from mensar.defaults import DefaultsStore, Overrides, effective
from mensar.errors import MensarError
from mensar.logging import get_logger, setup_logging
from mensar.navigator import resolve_menu
from mensar.render import render_facility_list, render_menu
from mensar.resolver import list_published, resolve

log = get_logger(__name__)

MAINTENANCE_COMMANDS = ("set-mensa", "set-language")


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mensar",
        description="Show the menu of an ETH Zurich mensa.",
        epilog=(
            "maintenance commands:\n"
            "  set-mensa NAME        set your default mensa\n"
            "  set-language NAME     set your default language"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "mensa",
        nargs="?",
        default=None,
        help="Name of mensa, matched loosely (default: stored default mensa).",
    )
    parser.add_argument("--lang", default=None, help="Language (de / en).")

    when = parser.add_mutually_exclusive_group()
    when.add_argument(
        "-d",
        "--date",
        type=_iso_date,
        default=None,
        help="Date (YYYY-MM-DD) for which to show the menu.",
    )
    when.add_argument(
        "-t", "--tomorrow", action="store_true", help="Show the menu for tomorrow."
    )

    parser.add_argument("-p", "--prices", action="store_true", help="Show prices.")
    parser.add_argument(
        "-l", "--list", action="store_true", help="List available mensas."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_maintenance_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mensar")
    commands = parser.add_subparsers(dest="command", required=True)
    set_mensa = commands.add_parser("set-mensa", help="Set your default mensa.")
    set_mensa.add_argument("name")
    set_language = commands.add_parser("set-language", help="Set your default language.")
    set_language.add_argument("name")
    return parser


def target_date(args: argparse.Namespace, today: date | None = None) -> date:
    """Date selected on the command line (default: today)."""
    if args.date is not None:
        return args.date
    today = today or date.today()
    if args.tomorrow:
        return today + timedelta(days=1)
    return today


def run_maintenance(args: argparse.Namespace, store: DefaultsStore, out: Console) -> None:
    if args.command == "set-mensa":
        store.set_mensa(args.name)
        out.print(f"default mensa set to {args.name}", markup=False)
    else:
        store.set_lang(args.name)
        out.print(f"default language set to {args.name}", markup=False)


def show_menu(
    args: argparse.Namespace,
    store: DefaultsStore,
    client: CookpitClient,
    out: Console,
    today: date | None = None,
) -> None:
    settings = effective(Overrides(mensa=args.mensa, lang=args.lang), store.load())
    facilities = client.fetch_facilities(settings.lang)

    if args.list:
        out.print(render_facility_list(list_published(facilities)), end="", markup=False)
        return

    facility = resolve(facilities, settings.mensa)
    day = target_date(args, today)
    rotas = client.fetch_weekly_rotas(settings.lang, day)
    lines = resolve_menu(
        rotas,
        facility.facility_id,
        day,
        facility_name=settings.mensa,
    )
    emit(out, render_menu(lines, show_prices=args.prices))


def emit(out: Console, text: Text) -> None:
    """Write rendered text to stdout.

    Rich expands tabs while rendering, so styling is applied only on a
    terminal; piped output gets the plain text with its tab indents intact.
    """
    if out.is_terminal:
        out.print(text, end="")
    else:
        out.file.write(text.plain)
        out.file.flush()


def main(
    argv: list[str] | None = None,
    *,
    config: MensarConfig | None = None,
    client: CookpitClient | None = None,
    today: date | None = None,
) -> int:
    """Run mensar and return the process exit status."""
    argv = sys.argv[1:] if argv is None else list(argv)
    out = Console(highlight=False, soft_wrap=True, emoji=False)
    err = Console(stderr=True, highlight=False, soft_wrap=True, emoji=False)

    try:
        config = config or get_config()
        setup_logging(json_output=config.log_json, log_level=config.log_level)
        store = DefaultsStore(config.defaults_path)

        if argv and argv[0] in MAINTENANCE_COMMANDS:
            run_maintenance(build_maintenance_parser().parse_args(argv), store, out)
            return 0

        args = build_parser().parse_args(argv)
        client = client or CookpitClient(config)
        try:
            show_menu(args, store, client, out, today)
        finally:
            client.close()
    except MensarError as e:
        log.debug("terminated", error=type(e).__name__)
        err.print(f"mensar: {e}", markup=False)
        return 1
    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
