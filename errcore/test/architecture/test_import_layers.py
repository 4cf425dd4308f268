from __future__ import annotations

import ast
from dataclasses import dataclass
from importlib.util import resolve_name
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ImportRef:
    module: str
    line: int


def package_root() -> Path:
    return Path(__file__).resolve().parents[2]


def iter_python_files(base: Path) -> list[Path]:
    return [p for p in sorted(base.rglob("*.py")) if "__pycache__" not in p.parts]


def package_of(path: Path) -> str:
    """Dotted package a module file belongs to, e.g. errcore.core for core/error.py."""
    return ".".join(path.resolve().relative_to(package_root().parent).parent.parts)


def parse_imports(path: Path, package: str | None = None) -> list[ImportRef]:
    """Collect imported module names, with relative imports made absolute."""
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    imports: list[ImportRef] = []

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.append(ImportRef(module=alias.name, line=node.lineno))
            continue

        if isinstance(node, ast.ImportFrom):
            if node.level:
                base = resolve_name(
                    "." * node.level + (node.module or ""), package or package_of(path)
                )
            elif node.module is not None:
                base = node.module
            else:
                continue
            if node.module is None:
                # from . import x: each name is a submodule
                for alias in node.names:
                    imports.append(ImportRef(module=f"{base}.{alias.name}", line=node.lineno))
            else:
                imports.append(ImportRef(module=base, line=node.lineno))

    return imports


def matches_prefix(module: str, prefix: str) -> bool:
    return module == prefix or module.startswith(prefix + ".")


def forbidden_imports(
    path: Path, prefixes: tuple[str, ...], package: str | None = None
) -> list[ImportRef]:
    return [
        item
        for item in parse_imports(path, package)
        if any(matches_prefix(item.module, prefix) for prefix in prefixes)
    ]


def test_core_does_not_import_output_or_rich() -> None:
    root = package_root()
    offenders: list[str] = []

    for file_path in iter_python_files(root / "core"):
        rel = file_path.relative_to(root)
        for item in forbidden_imports(file_path, ("errcore.output", "rich")):
            offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")

    assert not offenders, "core -> output dependency violations:\n" + "\n".join(offenders)


def test_only_console_imports_rich() -> None:
    root = package_root()
    offenders: list[str] = []

    for file_path in iter_python_files(root):
        rel = file_path.relative_to(root)
        if rel.parts[0] == "test" or rel == Path("output/console.py"):
            continue
        for item in forbidden_imports(file_path, ("rich",)):
            offenders.append(f"{rel}:{item.line}: direct rich import '{item.module}'")

    assert not offenders, "rich usage outside output/console.py:\n" + "\n".join(offenders)


class TestParseImports:
    """Relative imports are resolved before the layer checks see them."""

    def test_package_of_module_and_init(self) -> None:
        root = package_root()
        assert package_of(root / "core" / "error.py") == "errcore.core"
        assert package_of(root / "core" / "__init__.py") == "errcore.core"
        assert package_of(root / "__init__.py") == "errcore"

    def test_resolves_relative_forms(self, tmp_path: Path) -> None:
        module = tmp_path / "module.py"
        module.write_text(
            "from .error import Error\n"
            "from . import kind\n"
            "from ..output.console import Style\n"
            "import tomllib\n",
            encoding="utf-8",
        )
        modules = [item.module for item in parse_imports(module, "errcore.core")]
        assert modules == [
            "errcore.core.error",
            "errcore.core.kind",
            "errcore.output.console",
            "tomllib",
        ]

    def test_parent_relative_import_is_flagged(self, tmp_path: Path) -> None:
        leaky = tmp_path / "leaky.py"
        leaky.write_text("from ..output import x\n", encoding="utf-8")
        found = forbidden_imports(leaky, ("errcore.output", "rich"), "errcore.core")
        assert found == [ImportRef(module="errcore.output", line=1)]

    def test_sibling_relative_import_is_allowed(self, tmp_path: Path) -> None:
        sibling = tmp_path / "sibling.py"
        sibling.write_text("from .result import Ok\n", encoding="utf-8")
        assert forbidden_imports(sibling, ("errcore.output", "rich"), "errcore.core") == []

    def test_real_core_modules_resolve(self) -> None:
        config = package_root() / "core" / "config.py"
        modules = {item.module for item in parse_imports(config)}
        assert {"errcore.core.error", "errcore.core.result"} <= modules
