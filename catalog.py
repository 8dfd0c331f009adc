import os
import sys
from typing import Callable, Dict, Optional, TextIO

from core.logger import get_logger
from core.render import build_html_page, build_plaintext_page
from core.session import CatalogSession
from fetchers import FETCHERS

logger = get_logger(__name__)

MODE = os.getenv("MODE", "once").lower()  # "once" or "interactive"
SOURCE = os.getenv("POTION_SOURCE", "potterdb").lower()
HTML_OUTPUT = os.getenv("HTML_OUTPUT", "").strip()

HELP = (
    "Commands: search <text> | difficulty <value|all> | characteristic <value|all> | "
    "next | prev | page <n> | show <row> | close | html <path> | help | quit"
)


def build_session(source: str = SOURCE) -> CatalogSession:
    fetcher = FETCHERS.get(source)
    if not fetcher:
        logger.error("No fetcher registered for source '%s'.", source)
        raise SystemExit(1)
    return CatalogSession(fetcher=fetcher)


def write_html(session: CatalogSession, path: str) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(build_html_page(session))
    except OSError as e:
        logger.error("Failed to write HTML page to %s: %s", path, e)
        return
    logger.info("Wrote HTML page to %s", path)


def _filter_value(arg: str) -> Optional[str]:
    return None if not arg or arg.lower() == "all" else arg


def _parse_int(arg: str) -> Optional[int]:
    try:
        return int(arg)
    except ValueError:
        logger.warning("Expected a number, got '%s'.", arg)
        return None


def _cmd_page(session: CatalogSession, arg: str) -> None:
    page = _parse_int(arg)
    if page is not None:
        session.go_to_page(page)


def _cmd_show(session: CatalogSession, arg: str) -> None:
    row = _parse_int(arg)
    if row is None:
        return
    try:
        session.select_row(row)
    except IndexError as e:
        logger.warning("Cannot show row: %s", e)


def _cmd_html(session: CatalogSession, arg: str) -> None:
    path = arg or HTML_OUTPUT
    if not path:
        logger.warning("No HTML output path given.")
        return
    write_html(session, path)


COMMANDS: Dict[str, Callable[[CatalogSession, str], None]] = {
    "search": lambda s, arg: s.set_search(arg),
    "difficulty": lambda s, arg: s.set_difficulty(_filter_value(arg)),
    "characteristic": lambda s, arg: s.set_characteristic(_filter_value(arg)),
    "next": lambda s, arg: s.next_page(),
    "prev": lambda s, arg: s.previous_page(),
    "page": _cmd_page,
    "show": _cmd_show,
    "close": lambda s, arg: s.close_detail(),
    "html": _cmd_html,
}


def handle_command(session: CatalogSession, line: str) -> bool:
    """Apply one command line to the session. Returns False on quit."""
    name, _, arg = line.strip().partition(" ")
    name = name.lower()
    arg = arg.strip()

    if name in ("quit", "exit"):
        return False
    if not name:
        return True
    if name == "help":
        print(HELP)
        return True

    command = COMMANDS.get(name)
    if not command:
        logger.warning("Unknown command '%s'. %s", name, HELP)
        return True

    logger.debug("Command %s %r (page %d).", name, arg, session.current_page)
    command(session, arg)
    return True


def run_once(session: CatalogSession, out: TextIO = sys.stdout) -> int:
    session.load()
    out.write(build_plaintext_page(session))
    if HTML_OUTPUT:
        write_html(session, HTML_OUTPUT)
    return 0


def run_interactive(session: CatalogSession, stdin: TextIO = sys.stdin, out: TextIO = sys.stdout) -> int:
    session.load()
    out.write(build_plaintext_page(session))
    out.write(HELP + "\n")

    for line in stdin:
        if not handle_command(session, line):
            break
        out.write(build_plaintext_page(session))

    return 0


if __name__ == "__main__":
    try:
        session = build_session()
        if MODE == "interactive":
            raise SystemExit(run_interactive(session))
        else:
            raise SystemExit(run_once(session))
    except Exception as e:
        logger.exception("Fatal catalog error: %s", e)
        raise SystemExit(2)
