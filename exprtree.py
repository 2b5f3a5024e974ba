#!/usr/bin/env python3
"""
exprtree.py — CLI for the exprtree sample expressions.

Works entirely in-process: the trees are built in samples.py, nothing is
parsed from text.

Configuration: environment variables with the EXPRTREE_ prefix
or a .env file (e.g. EXPRTREE_OVERFLOW=wrap).

Subcommands:
    tree     — print the tree diagram of a sample (default)
    infix    — print the infix form of a sample
    eval     — evaluate a sample, optionally with the computation steps
    show     — diagram plus a summary table
    samples  — table of every sample with its infix form and value

Usage:
    python exprtree.py
    python exprtree.py tree --sample sum-times
    python exprtree.py infix --sample reference
    python exprtree.py eval --sample div-by-zero --steps
    python exprtree.py show --dump
    python exprtree.py --ascii samples
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.renderer.infix_renderer import ParenInfixRenderer
from adapters.renderer.tree_renderer import BoxTreeRenderer
from config import Settings
from contracts import EvalResult, ExprAST
from samples import SAMPLES, get_sample

logger = logging.getLogger("exprtree.cli")


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _can_encode(text: str) -> bool:
    encoding = sys.stdout.encoding or "utf-8"
    try:
        text.encode(encoding)
        return True
    except UnicodeEncodeError:
        return False


def _safe_terminal_text(value: Any) -> str:
    s = str(value)
    if _can_encode(s):
        return s
    s = s.replace("├─", "|-").replace("└─", "`-")
    encoding = sys.stdout.encoding or "utf-8"
    return s.encode(encoding, errors="replace").decode(encoding, errors="replace")


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(_safe_terminal_text(key), _safe_terminal_text(value))
    _console().print(table)


def _format_result(result: EvalResult) -> str:
    return "None" if result.value is None else str(result.value)


def _tree_renderer(args: argparse.Namespace) -> BoxTreeRenderer:
    return BoxTreeRenderer(ascii_only=args.ascii or not _can_encode("├─└"))


def _print_tree(ast: ExprAST, args: argparse.Namespace) -> None:
    for line in _tree_renderer(args).iter_lines(ast):
        print(line)


# -- commands --------------------------------------------------------------

def _tree(ast: ExprAST, args: argparse.Namespace, settings: Settings) -> None:
    _print_tree(ast, args)


def _infix(ast: ExprAST, args: argparse.Namespace, settings: Settings) -> None:
    print(ParenInfixRenderer().render(ast))


def _eval(ast: ExprAST, args: argparse.Namespace, settings: Settings) -> None:
    result = ASTEvaluator(settings).eval_expr(ast)
    if args.steps:
        for i, step in enumerate(result.steps, 1):
            print(f"  {i}. {step}")
    print(f"Result: {_format_result(result)}")


def _show(ast: ExprAST, args: argparse.Namespace, settings: Settings) -> None:
    _print_tree(ast, args)
    result = ASTEvaluator(settings).eval_expr(ast)
    _print_kv_table(
        f"{settings.app_title} {settings.app_version}",
        [
            ("Sample", args.sample_name),
            ("Infix", ParenInfixRenderer().render(ast)),
            ("Result", _format_result(result)),
            ("Steps", len(result.steps)),
            ("Diagnostics", "; ".join(result.diagnostics) or "-"),
        ],
    )
    if args.dump:
        print(ast.model_dump_json(indent=2))


def _samples(args: argparse.Namespace, settings: Settings) -> None:
    evaluator = ASTEvaluator(settings)
    renderer = ParenInfixRenderer()
    table = Table(title=f"Samples [{len(SAMPLES)}]", box=box.ASCII, show_lines=False)
    table.add_column("Name", no_wrap=True, style="cyan")
    table.add_column("Infix")
    table.add_column("Result", justify="right", no_wrap=True)
    for name, ast in SAMPLES.items():
        result = evaluator.eval_expr(ast)
        table.add_row(name, renderer.render(ast), _format_result(result))
    _console().print(table)


def main(argv: list[str] | None = None) -> None:
    settings = Settings()

    parser = argparse.ArgumentParser(
        prog="exprtree",
        description="exprtree — evaluate and render sample expression trees",
    )
    parser.add_argument("--log-level", default=None,
                        help=f"Logging level (default: {settings.log_level})")
    parser.add_argument("--ascii", action="store_true",
                        help="Draw branches with ASCII characters only")
    sub = parser.add_subparsers(dest="command")

    sample_opts = argparse.ArgumentParser(add_help=False)
    sample_opts.add_argument("--sample", "-s", choices=sorted(SAMPLES), default=None,
                             help=f"Sample tree (default: {settings.default_sample})")

    sub.add_parser("tree", parents=[sample_opts], help="Print the tree diagram")
    sub.add_parser("infix", parents=[sample_opts], help="Print the infix form")

    p = sub.add_parser("eval", parents=[sample_opts], help="Evaluate a sample")
    p.add_argument("--steps", action="store_true",
                   help="Print the computation steps")

    p = sub.add_parser("show", parents=[sample_opts], help="Diagram plus summary table")
    p.add_argument("--dump", action="store_true",
                   help="Also print the tree as JSON")

    sub.add_parser("samples", help="List every sample")

    args = parser.parse_args(argv)
    logging.basicConfig(level=(args.log_level or settings.log_level).upper())

    if args.command == "samples":
        _samples(args, settings)
        return

    args.sample_name = getattr(args, "sample", None) or settings.default_sample
    try:
        ast = get_sample(args.sample_name)
    except KeyError as exc:
        parser.error(exc.args[0])
    logger.debug("Running %s on sample %r", args.command or "tree", args.sample_name)

    cmds = {
        None:    _tree,
        "tree":  _tree,
        "infix": _infix,
        "eval":  _eval,
        "show":  _show,
    }
    cmds[args.command](ast, args, settings)


if __name__ == "__main__":
    main()
