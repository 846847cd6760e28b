from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from fav_core.config import load_fav_config, write_fav_config
from fav_core.db import resolve_db_path
from fav_core.db.store import Store
from fav_core.errors import FavError
from fav_core.home import ensure_fav_layout, resolve_fav_home
from fav_core.logs import configure_logging
from fav_core.service import FavService

logger = logging.getLogger(__name__)

TARGET_ALIAS = "alias"
TARGET_PATH = "path"


def _add_target_flag(parser: argparse.ArgumentParser, help_text: str) -> None:
    parser.add_argument(
        "-t",
        "--type",
        dest="target",
        choices=[TARGET_ALIAS, TARGET_PATH],
        default=TARGET_ALIAS,
        help=help_text,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fav", description="Bookmark paths under short aliases.")
    parser.add_argument("--home", type=Path, default=None, help="Override FAV_HOME")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    sub.add_parser("init", help="Create the config directory and database.")

    add = sub.add_parser("add", aliases=["a"], help="Add the path.")
    add.add_argument("-a", "--alias", dest="aliases", action="append", default=[])
    add.add_argument("path")

    get = sub.add_parser("get", aliases=["g"], help="Get the path alias.")
    _add_target_flag(get, 'Print the aliases of a path ("alias") or the path of an alias ("path").')
    get.add_argument("value")

    set_ = sub.add_parser("set", aliases=["s"], help="Set the path alias.")
    set_.add_argument("-a", "--alias", dest="aliases", action="append", default=[])
    set_.add_argument("path")

    remove = sub.add_parser("remove", aliases=["rm"], help="Remove the alias or path.")
    _add_target_flag(remove, 'Delete aliases ("alias") or paths ("path").')
    remove.add_argument("values", nargs="+")

    resolve = sub.add_parser("resolve", help="Resolve aliases.")
    resolve.add_argument("names", nargs="+")

    list_ = sub.add_parser("list", aliases=["ls"], help="Lists paths.")
    list_.add_argument(
        "-v",
        "--verbose",
        dest="details",
        action="store_true",
        help="Also print creation time and aliases",
    )

    return parser


_COMMAND_ALIASES = {"a": "add", "g": "get", "s": "set", "rm": "remove", "ls": "list"}


def _not_found(value: str) -> None:
    print(f"{value} was not found", file=sys.stderr)


def _cmd_add(service: FavService, args: argparse.Namespace) -> int:
    service.add_favorite(args.path, args.aliases)
    return 0


def _cmd_get(service: FavService, args: argparse.Namespace) -> int:
    if args.target == TARGET_ALIAS:
        for name in service.get_alias_names(args.value):
            print(name)
        return 0

    path = service.get_path(args.value)
    if path is None:
        _not_found(args.value)
        return 1
    print(path)
    return 0


def _cmd_set(service: FavService, args: argparse.Namespace) -> int:
    service.set_aliases(args.path, args.aliases)
    return 0


def _cmd_remove(service: FavService, args: argparse.Namespace) -> int:
    if args.target == TARGET_ALIAS:
        result = service.remove_aliases(args.values)
    else:
        result = service.remove_paths(args.values)

    for value in result.missing:
        _not_found(value)
    for value in result.invalid:
        print(f"{value!r} is not a valid path", file=sys.stderr)
    return 1 if result.missing or result.invalid else 0


def _cmd_resolve(service: FavService, args: argparse.Namespace) -> int:
    status = 0
    for item in service.resolve(args.names):
        if item.path is None:
            _not_found(item.name)
            status = 1
        else:
            print(item.path)
    return status


def _cmd_list(service: FavService, args: argparse.Namespace) -> int:
    if not args.details:
        for path in service.list_paths():
            print(path)
        return 0

    for detail in service.list_details():
        print(f"{detail.path}\t{detail.created_at}\t{','.join(detail.aliases)}")
    return 0


_HANDLERS = {
    "add": _cmd_add,
    "get": _cmd_get,
    "set": _cmd_set,
    "remove": _cmd_remove,
    "resolve": _cmd_resolve,
    "list": _cmd_list,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    environ = None
    if args.home is not None:
        environ = {"FAV_HOME": str(args.home)}

    try:
        home = resolve_fav_home(environ)
        paths = ensure_fav_layout(home)
        config = load_fav_config(paths)
    except (ValueError, OSError) as e:
        # pydantic's ValidationError and json's JSONDecodeError are ValueErrors.
        print(f"fav: cannot load configuration: {e}", file=sys.stderr)
        return 1
    configure_logging(paths, config, verbose=args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    command = _COMMAND_ALIASES.get(args.command, args.command)

    try:
        if command == "init":
            if not paths.config_path.exists():
                write_fav_config(paths, config)
            store = Store.init(resolve_db_path(paths, config))
            print(store.db_path)
            return 0

        store = Store.init(resolve_db_path(paths, config))
        return _HANDLERS[command](FavService(store), args)
    except FavError as e:
        logger.debug("Command %s failed", command, exc_info=True)
        print(f"fav: {e}", file=sys.stderr)
        return 1
