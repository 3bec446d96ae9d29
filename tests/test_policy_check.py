"""ポリシーチェッカーのテスト。"""

from pathlib import Path

import pytest

import policy_check
from policy_check import REPO_ROOT, Issue, is_corrected_design, scan_file, scan_tree

# 検出対象の文字列はこのファイル自体がスキャンで検出されないよう分割して組み立てる
FAKE_AWS_KEY = "AKIA" + "ABCDEFGHIJKLMNOP"
FAKE_URL = "http" + "://internal.invalid/api"
UNSUPPORTED_RAISE = "raise " + "NotImplementedError"


def _write(root: Path, rel: str, text: str) -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestCorrectedDesignPolicy:
    def test_unsupported_raise_in_corrected_module(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "src/principles/segregation.py",
            f"class X:\n    def repair(self):\n        {UNSUPPORTED_RAISE}\n",
        )
        assert scan_file(path, tmp_path) == [
            Issue("未対応操作の送出", "src/principles/segregation.py", 3)
        ]

    def test_unsupported_raise_allowed_in_contrast_module(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "src/principles/antipatterns/segregation.py",
            f"def repair():\n    {UNSUPPORTED_RAISE}\n",
        )
        assert scan_file(path, tmp_path) == []

    def test_qualified_raise_in_corrected_module(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "src/principles/segregation.py",
            "from principles import errors\n\n\n"
            "def repair():\n"
            "    raise errors.UnsupportedOperationError('X', 'repair')\n",
        )
        assert scan_file(path, tmp_path) == [
            Issue("未対応操作の送出", "src/principles/segregation.py", 5)
        ]

    def test_same_line_raise_in_corrected_module(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "src/principles/inversion.py",
            f"def repair(): {UNSUPPORTED_RAISE}\n",
        )
        assert scan_file(path, tmp_path) == [
            Issue("未対応操作の送出", "src/principles/inversion.py", 1)
        ]

    def test_other_raises_and_comments_allowed(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "src/principles/assembly.py",
            f"# {UNSUPPORTED_RAISE}\n"
            "def provide():\n"
            "    raise LookupError('missing')\n",
        )
        assert scan_file(path, tmp_path) == []

    def test_unparsable_corrected_module(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "src/principles/broken.py", "def repair(:\n")
        (issue,) = scan_file(path, tmp_path)
        assert issue.kind == "構文エラー"

    def test_classification(self) -> None:
        assert is_corrected_design("src/principles/inversion.py")
        assert not is_corrected_design("src/principles/antipatterns/inversion.py")
        assert not is_corrected_design("src/observability/tracing.py")
        assert not is_corrected_design("tests/test_demo.py")


class TestGenericPolicies:
    def test_secret_detected(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "ci/settings.toml", f'key = "{FAKE_AWS_KEY}"\n')
        (issue,) = scan_file(path, tmp_path)
        assert issue.kind.startswith("秘密情報疑い")
        assert str(issue) == f"{issue.kind} in ci/settings.toml"

    def test_url_detected_outside_comments(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "tests/test_x.py",
            f'# see {FAKE_URL}\nENDPOINT = "{FAKE_URL}"\n',
        )
        assert scan_file(path, tmp_path) == [Issue("URL直書き", "tests/test_x.py", 2)]

    def test_allowlisted_url(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "tests/test_x.py", 'URL = "https://example.com/"\n')
        assert scan_file(path, tmp_path) == []


class TestScanTree:
    def test_skips_caches_and_self(self, tmp_path: Path) -> None:
        _write(tmp_path, "src/principles/__pycache__/x.py", UNSUPPORTED_RAISE + "\n")
        _write(tmp_path, "ci/policy_check.py", f'X = "{FAKE_AWS_KEY}"\n')
        _write(tmp_path, "src/principles/ok.py", "VALUE = 1\n")
        assert scan_tree(tmp_path) == []

    def test_repository_is_clean(self) -> None:
        assert scan_tree(REPO_ROOT) == []

    def test_main_exit_code(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _write(tmp_path, "src/principles/bad.py", UNSUPPORTED_RAISE + "\n")
        monkeypatch.setattr(policy_check, "REPO_ROOT", tmp_path)
        assert policy_check.main() == 1
        assert "[policy_check] FAILED" in capsys.readouterr().out
