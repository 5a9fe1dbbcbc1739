import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import colorlog

from sql_redis.core.enums import StatementKind
from sql_redis.errors import SqlToRedisError

try:
    from sql_redis import __version__ as _PACKAGE_VERSION
except ImportError:  # pragma: no cover
    _PACKAGE_VERSION = None  # type: ignore[assignment]
    try:
        from importlib.metadata import version as _pkg_version, PackageNotFoundError

        _PACKAGE_VERSION = _pkg_version("sql-redis")  # type: ignore[assignment]
    except PackageNotFoundError:
        _PACKAGE_VERSION = "unknown"  # type: ignore[assignment]

NO_INPUT_MESSAGE = "No input provided. Use --help for usage information."


def setup_logging(
    verbose: bool = False, warnings_only: bool = False, errors_only: bool = False
) -> None:
    logger = logging.getLogger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    log_format = (
        "%(asctime)s:%(levelname)s:%(name)s in %(filename)s:%(funcName)s:%(lineno)d: %(message)s"
    )
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }
    stream_handler = colorlog.StreamHandler()
    formatter = colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if errors_only:
        logger.setLevel(logging.ERROR)
    elif warnings_only:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _build_transformer():
    from sql_redis.transformer import SqlToRedisTransformer

    return SqlToRedisTransformer()


def _query_lines(lines: Iterable[str]) -> List[str]:
    """Non-blank lines that are not ``--`` comments."""
    queries = []
    for line in lines:
        line = line.strip()
        if line and not line.startswith("--"):
            queries.append(line)
    return queries


def _transform_one(transformer, sql: str) -> bool:
    try:
        command = transformer.transform(sql)
    except SqlToRedisError as e:
        print(f"Error: Transformation failed: {e}", file=sys.stderr)
        return False
    print(f"Redis: {command}")
    return True


def _transform_batch(transformer, queries: List[str]) -> int:
    """Echo and translate each query; 2 if any failed."""
    failures = 0
    for sql in queries:
        print(f"SQL: {sql}")
        if not _transform_one(transformer, sql):
            failures += 1
        print()
    if failures:
        logging.warning("%d of %d queries could not be translated", failures, len(queries))
    return 2 if failures else 0


def cmd_transform(args: argparse.Namespace) -> int:
    """Translate a single query.

    Returns:
        0 on success, 2 if the query could not be translated
    """
    transformer = _build_transformer()
    return 0 if _transform_one(transformer, args.query) else 2


def cmd_list_patterns(args: argparse.Namespace) -> int:
    """Print every supported pattern grouped by statement kind."""
    transformer = _build_transformer()
    print("Supported SQL to Redis patterns:")

    groups: Dict[StatementKind, List[str]] = {kind: [] for kind in StatementKind}
    for i, pattern in enumerate(transformer.get_pattern_details(), start=1):
        groups[pattern.statement].append(
            f"  {i}. {pattern.name} (matcher: {pattern.matcher})\n"
            f"     SQL: {pattern.sql_pattern}\n"
            f"     Redis: {pattern.redis_pattern}"
        )
    for kind, entries in groups.items():
        if not entries:
            continue
        print(f"\n{kind.value} Operations:")
        for entry in entries:
            print(entry)
    return 0


def cmd_lua(args: argparse.Namespace) -> int:
    """Render a packaged Lua script template."""
    context: Dict[str, str] = {}
    for item in args.var or []:
        if "=" not in item:
            logging.error("Invalid --var '%s'; expected NAME=VALUE", item)
            return 2
        name, value = item.split("=", 1)
        context[name] = value
    transformer = _build_transformer()
    try:
        print(transformer.render_lua(args.category, args.operation, context), end="")
    except SqlToRedisError as e:
        logging.error("%s", e)
        return 2
    return 0


def cmd_default(args: argparse.Namespace) -> int:
    """Handle the top-level options: --list-patterns, --query, --file, then stdin."""
    if args.list_patterns:
        return cmd_list_patterns(args)
    if args.query:
        return cmd_transform(args)
    if args.file:
        path = Path(args.file)
        if not path.exists():
            logging.error("Input file not found: %s", path)
            return 1
        with path.open("r", encoding="utf-8") as f:
            queries = _query_lines(f)
        return _transform_batch(_build_transformer(), queries)

    stdin = sys.stdin
    if stdin is not None and not stdin.isatty():
        queries = _query_lines(stdin.read().splitlines())
        if queries:
            return _transform_batch(_build_transformer(), queries)

    print(NO_INPUT_MESSAGE)
    return 1


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sqlnosql",
        description=f"Transform SQL queries to Redis commands (v{_PACKAGE_VERSION})",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {_PACKAGE_VERSION}")
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    p.add_argument(
        "--warnings-only",
        action="store_true",
        help="Show only warnings and errors (overrides --verbose)",
    )
    p.add_argument(
        "--errors-only",
        action="store_true",
        help="Show only errors (overrides --warnings-only and --verbose)",
    )
    p.add_argument("-q", "--query", help="SQL query to transform")
    p.add_argument(
        "-f",
        "--file",
        help="File with one SQL query per line (blank lines and '--' comments are skipped)",
    )
    p.add_argument(
        "--list-patterns", action="store_true", help="List supported SQL to Redis patterns"
    )
    p.set_defaults(func=cmd_default)

    sub = p.add_subparsers(dest="command")

    p_transform = sub.add_parser("transform", help="Transform a single SQL query")
    p_transform.add_argument("query", help="SQL query to transform")
    p_transform.set_defaults(func=cmd_transform)

    p_list = sub.add_parser("list-patterns", help="List supported SQL to Redis patterns")
    p_list.set_defaults(func=cmd_list_patterns)

    p_lua = sub.add_parser("lua", help="Render a packaged Lua script template")
    p_lua.add_argument("category", help="Template category (string, hash, list, set, zset, complex, utils)")
    p_lua.add_argument("operation", help="Template operation (e.g. zrangebyscore or join/inner_join)")
    p_lua.add_argument(
        "--var",
        action="append",
        help="Template variable as NAME=VALUE (repeatable)",
    )
    p_lua.set_defaults(func=cmd_lua)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=bool(args.verbose),
        warnings_only=bool(getattr(args, "warnings_only", False)),
        errors_only=bool(getattr(args, "errors_only", False)),
    )
    try:
        return args.func(args)
    except SqlToRedisError as e:
        logging.error("%s", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
