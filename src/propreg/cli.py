from __future__ import annotations

import argparse
import logging
import sys

from .config import RegistrySettings
from .core.errors import GrammarError
from .core.grammar import parse_path
from .core.registry import Registry, default_registry
from .core.resolver import describe_paths, find_prop
from .core.serde import prop_to_json

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_USAGE = 2


def _configure_logging(settings: RegistrySettings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _registry(settings: RegistrySettings) -> Registry:
    return default_registry(include_test_schemas=settings.include_test_schemas)


def _cmd_types(argv: list[str], settings: RegistrySettings) -> int:
    p = argparse.ArgumentParser(prog="propreg types", description="List registered entity types.")
    p.parse_args(argv)
    for name in _registry(settings).list_entity_types():
        print(name)
    return EXIT_OK


def _cmd_find(argv: list[str], settings: RegistrySettings) -> int:
    p = argparse.ArgumentParser(
        prog="propreg find",
        description="Resolve a property path and print its descriptor as canonical JSON.",
    )
    p.add_argument("path", type=str, help="Dotted path, e.g. dockerImage.name")
    p.add_argument(
        "--separator",
        type=str,
        default=None,
        help="Segment separator (defaults to the configured path_separator).",
    )
    args = p.parse_args(argv)
    separator = settings.path_separator if args.separator is None else args.separator
    try:
        segments = parse_path(args.path, separator)
    except GrammarError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return EXIT_USAGE
    prop = find_prop(segments, _registry(settings))
    if prop is None:
        print(f"[INFO] Path does not resolve: {args.path}", file=sys.stderr)
        return EXIT_NOT_FOUND
    print(prop_to_json(prop))
    return EXIT_OK


def _cmd_props(argv: list[str], settings: RegistrySettings) -> int:
    p = argparse.ArgumentParser(
        prog="propreg props", description="List every resolvable path of an entity type."
    )
    p.add_argument("entity_type", type=str, help="Registered entity type, e.g. k8sDeployment")
    args = p.parse_args(argv)
    entry = _registry(settings).get(args.entity_type)
    if entry is None:
        print(f"[INFO] Unknown entity type: {args.entity_type}", file=sys.stderr)
        return EXIT_NOT_FOUND
    for line in describe_paths(entry, settings.path_separator):
        print(line)
    return EXIT_OK


_COMMANDS = {
    "types": _cmd_types,
    "find": _cmd_find,
    "props": _cmd_props,
}


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="propreg", description="Property registry utilities CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)
    sub.add_parser("types", help="List registered entity types.")
    sub.add_parser("find", help="Resolve a property path.")
    sub.add_parser("props", help="List resolvable paths of an entity type.")
    return p


def main(argv: list[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        build_argparser().print_help()
        return
    settings = RegistrySettings.load()
    _configure_logging(settings)
    cmd, rest = argv[0], argv[1:]
    handler = _COMMANDS.get(cmd)
    if handler is None:
        print(f"Unknown command: {cmd}", file=sys.stderr)
        code = EXIT_USAGE
    else:
        code = handler(rest, settings)
    raise SystemExit(code)


if __name__ == "__main__":
    main()
