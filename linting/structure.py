#!/usr/bin/env python
"""Structural AST checks for the `voice_relay` package.

Rules:
- `__all__`, when present, is a single plain assignment and the last top-level statement.
- At most one top-level non-dataclass class per file.
- No imports inside functions or classes.
- Functions stay under FUNCTION_LIMIT code lines (blanks, comments and docstrings excluded).
- No lazy singleton module state (`_INSTANCE = None`, `get_instance()`, `*Singleton`).

Exit status is 1 when any rule is violated.
"""

from __future__ import annotations

import ast
import sys
import tokenize
from pathlib import Path

FUNCTION_LIMIT = 60

ROOT = Path(__file__).resolve().parents[1]
PACKAGE_DIR = ROOT / "voice_relay"

SINGLETON_CLASS_SUFFIX = "Singleton"
SINGLETON_FN_NAMES = {"get_instance", "reset_instance"}


def _is_dataclass(node: ast.ClassDef) -> bool:
    for decorator in node.decorator_list:
        target = decorator.func if isinstance(decorator, ast.Call) else decorator
        if isinstance(target, ast.Name) and target.id == "dataclass":
            return True
        if isinstance(target, ast.Attribute) and target.attr == "dataclass":
            return True
    return False


def _assigned_names(node: ast.stmt) -> list[str]:
    if isinstance(node, ast.Assign):
        return [t.id for t in node.targets if isinstance(t, ast.Name)]
    if isinstance(node, (ast.AnnAssign, ast.AugAssign)) and isinstance(node.target, ast.Name):
        return [node.target.id]
    return []


def check_all_at_bottom(tree: ast.Module) -> list[str]:
    positions = [i for i, node in enumerate(tree.body) if "__all__" in _assigned_names(node)]
    if not positions:
        return []
    problems: list[str] = []
    if len(positions) > 1:
        problems.append("__all__ is assigned more than once")
    if positions[-1] != len(tree.body) - 1:
        problems.append("__all__ is not the last top-level statement")
    if isinstance(tree.body[positions[-1]], ast.AugAssign):
        problems.append("__all__ is mutated instead of assigned")
    return problems


def check_one_class(tree: ast.Module) -> list[str]:
    names = [n.name for n in tree.body if isinstance(n, ast.ClassDef) and not _is_dataclass(n)]
    if len(names) <= 1:
        return []
    return [f"{len(names)} classes ({', '.join(names)})"]


def check_local_imports(tree: ast.Module) -> list[str]:
    problems: list[str] = []
    for scope in ast.walk(tree):
        if not isinstance(scope, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
            continue
        for node in ast.walk(scope):
            if isinstance(node, (ast.Import, ast.ImportFrom)):
                problems.append(f"line {node.lineno}: local import inside `{scope.name}`")
    return sorted(set(problems))


def _non_code_lines(path: Path, tree: ast.Module) -> set[int]:
    skipped: set[int] = set()
    with path.open("rb") as f:
        for tok in tokenize.tokenize(f.readline):
            if tok.type == tokenize.COMMENT:
                skipped.add(tok.start[0])
    for node in ast.walk(tree):
        if not isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef, ast.Module)):
            continue
        body = node.body
        if body and isinstance(body[0], ast.Expr) and isinstance(body[0].value, ast.Constant):
            if isinstance(body[0].value.value, str):
                skipped.update(range(body[0].lineno, (body[0].end_lineno or body[0].lineno) + 1))
    return skipped


def check_function_length(path: Path, tree: ast.Module, lines: list[str]) -> list[str]:
    skipped = _non_code_lines(path, tree)
    problems: list[str] = []
    for node in ast.walk(tree):
        if not isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
            continue
        end = node.end_lineno or node.lineno
        count = sum(
            1 for n in range(node.lineno, end + 1) if n not in skipped and lines[n - 1].strip()
        )
        if count > FUNCTION_LIMIT:
            problems.append(f"line {node.lineno}: `{node.name}` has {count} code lines (limit {FUNCTION_LIMIT})")
    return problems


def check_singletons(tree: ast.Module) -> list[str]:
    problems: list[str] = []
    for node in tree.body:
        if isinstance(node, ast.ClassDef) and node.name.endswith(SINGLETON_CLASS_SUFFIX):
            problems.append(f"line {node.lineno}: class `{node.name}` uses singleton naming")
        elif isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)) and node.name in SINGLETON_FN_NAMES:
            problems.append(f"line {node.lineno}: function `{node.name}` suggests singleton lifecycle")
        elif isinstance(node, (ast.Assign, ast.AnnAssign)):
            value = node.value
            if isinstance(value, ast.Constant) and value.value is None:
                lazy = [name for name in _assigned_names(node) if name.lower().endswith("_instance")]
                if lazy:
                    problems.append(f"line {node.lineno}: lazy singleton state `{', '.join(lazy)}`")
    return problems


def check_file(path: Path) -> list[str]:
    source = path.read_text(encoding="utf-8")
    tree = ast.parse(source, filename=str(path))
    lines = source.splitlines()
    return [
        *check_all_at_bottom(tree),
        *check_one_class(tree),
        *check_local_imports(tree),
        *check_function_length(path, tree, lines),
        *check_singletons(tree),
    ]


def collect_violations(package_dir: Path = PACKAGE_DIR) -> list[str]:
    violations: list[str] = []
    for py_file in sorted(package_dir.rglob("*.py")):
        if "__pycache__" in py_file.parts:
            continue
        rel = py_file.relative_to(package_dir.parent)
        violations.extend(f"  {rel}: {problem}" for problem in check_file(py_file))
    return violations


def main() -> int:
    if not PACKAGE_DIR.is_dir():
        print(f"[structure] Missing package directory: {PACKAGE_DIR}", file=sys.stderr)
        return 1

    violations = collect_violations()
    if not violations:
        return 0

    print("Structure violations:", file=sys.stderr)
    for violation in violations:
        print(violation, file=sys.stderr)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
