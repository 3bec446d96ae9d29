"""リポジトリのポリシーチェッカー。

次の違反を検出する:

- 正しい設計のモジュールでの「未対応操作」の送出
  （``raise UnsupportedOperationError`` / ``raise NotImplementedError``）。
  送出してよいのは対比用の ``src/principles/antipatterns/`` だけ
- 秘密情報パターン
- コード中の外部 URL 直書き

使い方:
    python ci/policy_check.py
"""

from __future__ import annotations

import ast
import re
from dataclasses import dataclass
from pathlib import Path

# ---------------------------------------------------------------------------
# 設定
# ---------------------------------------------------------------------------

REPO_ROOT = Path(__file__).resolve().parent.parent

SCAN_DIRS = ("src", "tests", "ci")

SCAN_EXTENSIONS = {".py", ".toml", ".txt", ".yml", ".yaml"}

SKIP_DIR_NAMES = {
    "__pycache__",
    ".git",
    ".mypy_cache",
    ".ruff_cache",
    ".pytest_cache",
    ".hypothesis",
}

# パターン定義を含むため自分自身は除外
SKIP_FILES = {"ci/policy_check.py"}

# ---------------------------------------------------------------------------
# ポリシー
# ---------------------------------------------------------------------------

# 正しい設計のモジュール（このディレクトリ配下、ただし除外ディレクトリを除く）
CORRECTED_DESIGN_ROOT = "src/principles"
CONTRAST_DIR = "src/principles/antipatterns"

UNSUPPORTED_ERRORS = {"UnsupportedOperationError", "NotImplementedError"}

SECRET_PATTERNS = [
    re.compile(r"AKIA[0-9A-Z]{16}"),
    re.compile(r"-----BEGIN\s+(RSA|DSA|EC|OPENSSH)\s+PRIVATE\s+KEY-----"),
    re.compile(r"ghp_[A-Za-z0-9_]{36,}"),
    re.compile(r"sk-[A-Za-z0-9]{32,}"),
]

URL_PATTERN = re.compile(r"https?://[^\s\"')\]>]+")

URL_ALLOWLIST = [
    re.compile(r"example\.com"),
    re.compile(r"docs\.python\.org"),
    re.compile(r"opentelemetry\.io"),
]


@dataclass(frozen=True)
class Issue:
    """1 件のポリシー違反。"""

    kind: str
    path: str
    line: int | None = None

    def __str__(self) -> str:
        where = self.path if self.line is None else f"{self.path}:{self.line}"
        return f"{self.kind} in {where}"


# ---------------------------------------------------------------------------
# 判定
# ---------------------------------------------------------------------------


def should_skip(path: Path) -> bool:
    return any(part in SKIP_DIR_NAMES for part in path.parts)


def is_corrected_design(rel: str) -> bool:
    """正しい設計のモジュールか判定する。"""
    return (
        rel.endswith(".py")
        and rel.startswith(CORRECTED_DESIGN_ROOT + "/")
        and not rel.startswith(CONTRAST_DIR + "/")
    )


def is_comment_line(line: str) -> bool:
    return line.lstrip().startswith("#")


def read_text_safely(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8", errors="ignore")
    except OSError:
        return None


def raised_name(node: ast.Raise) -> str | None:
    """送出される例外のクラス名を返す（``errors.X(...)`` の修飾は外す）。"""
    exc = node.exc
    if isinstance(exc, ast.Call):
        exc = exc.func
    if isinstance(exc, ast.Attribute):
        return exc.attr
    if isinstance(exc, ast.Name):
        return exc.id
    return None


def unsupported_raise_lines(source: str) -> list[int]:
    """未対応操作の例外を送出している行番号を返す。

    Raises:
        SyntaxError: ``source`` が Python として解析できない場合。
    """
    return sorted(
        node.lineno
        for node in ast.walk(ast.parse(source))
        if isinstance(node, ast.Raise) and raised_name(node) in UNSUPPORTED_ERRORS
    )


# ---------------------------------------------------------------------------
# スキャン
# ---------------------------------------------------------------------------


def scan_file(path: Path, root: Path = REPO_ROOT) -> list[Issue]:
    """1 ファイルをスキャンし、違反を返す。"""
    text = read_text_safely(path)
    if text is None:
        return []

    rel = path.relative_to(root).as_posix()
    issues: list[Issue] = []

    if is_corrected_design(rel):
        try:
            for lineno in unsupported_raise_lines(text):
                issues.append(Issue("未対応操作の送出", rel, lineno))
        except SyntaxError as exc:
            issues.append(Issue("構文エラー", rel, exc.lineno))

    if path.suffix == ".py":
        for lineno, line in enumerate(text.splitlines(), start=1):
            if is_comment_line(line):
                continue
            if URL_PATTERN.search(line) and not any(
                pat.search(line) for pat in URL_ALLOWLIST
            ):
                issues.append(Issue("URL直書き", rel, lineno))

    for pat in SECRET_PATTERNS:
        if pat.search(text):
            issues.append(Issue(f"秘密情報疑い ({pat.pattern})", rel))

    return issues


def scan_tree(root: Path = REPO_ROOT) -> list[Issue]:
    """スキャン対象ディレクトリ配下をすべてスキャンする。"""
    issues: list[Issue] = []
    for name in SCAN_DIRS:
        base = root / name
        if not base.exists():
            continue
        for path in sorted(base.rglob("*")):
            if not path.is_file() or should_skip(path):
                continue
            if path.relative_to(root).as_posix() in SKIP_FILES:
                continue
            if path.suffix.lower() not in SCAN_EXTENSIONS:
                continue
            issues.extend(scan_file(path, root))
    return issues


# ---------------------------------------------------------------------------
# メイン
# ---------------------------------------------------------------------------


def main() -> int:
    """ポリシーチェックを実行し、違反があれば非ゼロで終了する。"""
    issues = scan_tree(REPO_ROOT)
    if issues:
        print("[policy_check] FAILED")
        for i, issue in enumerate(issues, start=1):
            print(f"  {i}. {issue}")
        return 1

    print("[policy_check] OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
