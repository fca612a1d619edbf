# src/sqltranslate/cli.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from . import clauses
from .config import TranslatorConfig, load_translator_config
from .dialects import available
from .errors import ExitCode, TranslateException, TranslateProblem, problem_to_dict
from .pipeline import TranslationPipeline
from .types import Dialect, aliases_for

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers: IO + formatting
# =============================================================================

def _print_payload(payload: Dict[str, Any], fmt: str) -> None:
    if fmt == "json":
        print(json.dumps(payload, indent=2, ensure_ascii=False, sort_keys=True, default=str))
    elif fmt == "jsonl":
        print(json.dumps(payload, ensure_ascii=False, sort_keys=True, default=str))
    else:
        # "text": caller prints human-friendly output
        pass


def _emit(result: str, fmt: str, **extra: Any) -> None:
    if fmt in ("json", "jsonl"):
        _print_payload({"ok": True, "sql": result, **extra}, fmt)
    else:
        print(result)


def _raise_config_error(code: str, message: str, *, details: Dict[str, Any], remediation: str) -> None:
    raise TranslateException(
        TranslateProblem(
            code=code,
            category="config",
            message=message,
            details=details,
            remediation=remediation,
        ),
        ExitCode.CONFIG_INVALID,
    )


def _load_config(path: Optional[str]) -> TranslatorConfig:
    if not path:
        return TranslatorConfig()
    if not Path(path).exists():
        _raise_config_error(
            "SQLT_CONFIG_NOT_FOUND",
            f"Config not found: {path}",
            details={"path": path},
            remediation="Verify the path is correct and the file exists.",
        )
    try:
        return load_translator_config(path)
    except Exception as e:
        raise TranslateException(
            TranslateProblem(
                code="SQLT_CONFIG_PARSE_ERROR",
                category="config",
                message=f"Failed to load config: {path}",
                details={"path": path, "error": repr(e)},
                remediation="Ensure the file is a YAML/JSON mapping encoded in UTF-8.",
            ),
            ExitCode.CONFIG_INVALID,
            cause=e,
        )


def _read_query(args: argparse.Namespace) -> str:
    if args.query is not None:
        return args.query
    if args.file:
        p = Path(args.file)
        if not p.exists():
            raise TranslateException(
                TranslateProblem(
                    code="SQLT_INPUT_NOT_FOUND",
                    category="input",
                    message=f"Query file not found: {args.file}",
                    details={"path": args.file},
                    remediation="Pass an existing file with --file or the query text with --query.",
                ),
                ExitCode.INPUT_ERROR,
            )
        return p.read_text(encoding="utf-8")
    return sys.stdin.read()


def _dialect(args: argparse.Namespace) -> Dialect:
    if args.dialect is not None:
        return Dialect.parse(args.dialect)
    return _load_config(args.config).default_dialect


# =============================================================================
# Commands
# =============================================================================

def cmd_translate(args: argparse.Namespace) -> int:
    config = _load_config(args.config)
    query = _read_query(args)
    pipeline = TranslationPipeline.from_config(config)
    logger.debug("translating with rules: %s", ", ".join(pipeline.rule_names))
    _emit(pipeline.translate(query) or "", args.format)
    return 0


def cmd_order_by_random(args: argparse.Namespace) -> int:
    d = _dialect(args)
    _emit(clauses.order_by_random(d, args.distinct), args.format, dialect=d.value)
    return 0


def cmd_paging(args: argparse.Namespace) -> int:
    d = _dialect(args)
    _emit(clauses.paging(d, args.offset, args.page_size), args.format, dialect=d.value)
    return 0


def cmd_top(args: argparse.Namespace) -> int:
    d = _dialect(args)
    _emit(clauses.top_clause(d, args.count), args.format, dialect=d.value)
    return 0


def cmd_limit(args: argparse.Namespace) -> int:
    d = _dialect(args)
    sql = args.sql if args.sql is not None else sys.stdin.read().rstrip("\n")
    _emit(clauses.append_limit_if_absent(sql, d, args.count), args.format, dialect=d.value)
    return 0


def cmd_dialects(args: argparse.Namespace) -> int:
    rows = {
        d.value: {"aliases": list(aliases_for(d)), "limit_style": d.is_limit_style}
        for d in sorted(available(), key=lambda x: x.value)
    }
    if args.format in ("json", "jsonl"):
        _print_payload({"ok": True, "dialects": rows, "fallback": Dialect.SQLSERVER.value}, args.format)
    else:
        for name, row in rows.items():
            style = "OFFSET/LIMIT" if row["limit_style"] else "TOP/FETCH"
            print(f"{name} ({style}): {', '.join(row['aliases'])}")
        print(f"(unrecognized names fall back to {Dialect.SQLSERVER.value})")
    return 0


# =============================================================================
# Parser
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sqltranslate",
        description="Translate SQL Server queries to PostgreSQL and build dialect-specific clauses.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--format", choices=["text", "json", "jsonl"], default="text")
    common.add_argument("--config", default=None, help="YAML/JSON translator config.")

    sub = p.add_subparsers(dest="cmd")

    t = sub.add_parser("translate", parents=[common], help="Rewrite a SQL Server query for PostgreSQL.")
    src = t.add_mutually_exclusive_group()
    src.add_argument("--query", default=None, help="Query text (default: read stdin).")
    src.add_argument("--file", default=None, help="Read the query from a file.")
    t.set_defaults(func=cmd_translate)

    dialect_opts = argparse.ArgumentParser(add_help=False, parents=[common])
    dialect_opts.add_argument("--dialect", default=None, help="Target database type (any alias).")

    o = sub.add_parser("order-by-random", parents=[dialect_opts], help="Random ORDER BY key.")
    o.add_argument("--distinct", action="store_true", help="The query uses SELECT DISTINCT.")
    o.set_defaults(func=cmd_order_by_random)

    pg = sub.add_parser("paging", parents=[dialect_opts], help="Paging clause.")
    pg.add_argument("--offset", type=int, required=True)
    pg.add_argument("--page-size", type=int, required=True)
    pg.set_defaults(func=cmd_paging)

    tp = sub.add_parser("top", parents=[dialect_opts], help="TOP clause (empty for LIMIT-style dialects).")
    tp.add_argument("--count", type=int, required=True)
    tp.set_defaults(func=cmd_top)

    lm = sub.add_parser("limit", parents=[dialect_opts], help="Append LIMIT unless already limited.")
    lm.add_argument("--count", type=int, required=True)
    lm.add_argument("--sql", default=None, help="Statement text (default: read stdin).")
    lm.set_defaults(func=cmd_limit)

    d = sub.add_parser("dialects", parents=[common], help="List recognized dialect names.")
    d.set_defaults(func=cmd_dialects)

    return p


def main(argv: list[str] | None = None) -> int:
    """Entry point used by the console script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "cmd", None):
        parser.print_help()
        return 2

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        return int(args.func(args))
    except TranslateException as e:
        payload = {"ok": False, "error": problem_to_dict(e.problem), "exit_code": int(e.exit_code)}
        fmt = getattr(args, "format", "text")
        if fmt in ("json", "jsonl"):
            _print_payload(payload, fmt)
        else:
            err = payload["error"]
            print(f"ERROR[{err.get('code', 'SQLT_ERROR')}]: {err.get('message')}", file=sys.stderr)
            if err.get("remediation"):
                print(f"REMEDIATION: {err['remediation']}", file=sys.stderr)
            print(f"DETAILS: {err.get('details', {})}", file=sys.stderr)
        return int(e.exit_code)
    except Exception as e:
        logger.exception("unexpected failure")
        payload = {
            "ok": False,
            "error": {"code": "SQLT_INTERNAL_ERROR", "category": "internal", "message": repr(e), "details": {}},
            "exit_code": int(ExitCode.INTERNAL_ERROR),
        }
        fmt = getattr(args, "format", "text")
        if fmt in ("json", "jsonl"):
            _print_payload(payload, fmt)
        else:
            print(f"ERROR[SQLT_INTERNAL_ERROR]: {e!r}", file=sys.stderr)
        return int(ExitCode.INTERNAL_ERROR)


if __name__ == "__main__":
    sys.exit(main())
