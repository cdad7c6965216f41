"""Tests for owned-scope glob matching."""

import pytest

from intent_hooks.governance.scope import normalize_path, path_matches_owned_scope


class TestPathMatchesOwnedScope:
    """Test path_matches_owned_scope."""

    def test_empty_pattern_list_matches_nothing(self):
        assert path_matches_owned_scope("src/a.py", []) is False

    def test_exact_path_matches_itself(self):
        assert path_matches_owned_scope("src/a.py", ["src/a.py"]) is True

    @pytest.mark.parametrize(
        ("path", "patterns", "expected"),
        [
            ("a/b/c", ["a/**"], True),
            ("a", ["a/**"], True),
            ("a2/b", ["a/**"], False),
            ("src/auth/login.ts", ["src/auth/**"], True),
            ("src/db/models.ts", ["src/auth/**"], False),
            ("src/authz/x.ts", ["src/auth/**"], False),
        ],
        ids=["nested", "prefix-itself", "sibling-prefix", "in-scope", "out-of-scope", "authz"],
    )
    def test_globstar_suffix(self, path: str, patterns: list[str], expected: bool):
        assert path_matches_owned_scope(path, patterns) is expected

    @pytest.mark.parametrize(
        ("path", "pattern", "expected"),
        [
            ("docs/guide.md", "docs", True),
            ("docs/deep/guide.md", "docs/", True),
            ("docsite/index.md", "docs", False),
        ],
        ids=["dir", "dir-trailing-slash", "not-a-child"],
    )
    def test_bare_directory_owns_children(self, path: str, pattern: str, expected: bool):
        assert path_matches_owned_scope(path, [pattern]) is expected

    @pytest.mark.parametrize(
        ("path", "pattern", "expected"),
        [
            ("src/a.ts", "src/*.ts", True),
            ("src/sub/a.ts", "src/*.ts", False),
            ("src/sub/a.ts", "src/**/*.ts", True),
            ("lib/x/y/z.py", "lib/**.py", True),
            ("src/a.tsx", "src/*.ts", False),
            ("srcXa.ts", "src?a.ts", False),
            ("src(1)/a.ts", "src(1)/*.ts", True),
        ],
        ids=["star", "star-no-slash", "globstar-mid", "globstar-ext", "anchored", "question-literal", "escaped"],
    )
    def test_wildcards(self, path: str, pattern: str, expected: bool):
        assert path_matches_owned_scope(path, [pattern]) is expected

    def test_any_pattern_matching_is_enough(self):
        assert path_matches_owned_scope("tests/test_a.py", ["src/**", "tests/**"]) is True

    def test_windows_separators_and_leading_slashes(self):
        assert path_matches_owned_scope("\\src\\auth\\login.ts", ["/src/auth/**"]) is True


class TestNormalizePath:
    def test_backslashes_and_leading_slashes(self):
        assert normalize_path("//a\\b/c") == "a/b/c"
