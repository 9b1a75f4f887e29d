import pytest

from fstree.exceptions import ConfigurationError, InvalidPatternError
from fstree.filters.glob_rules import GlobRules, compile_pattern


@pytest.mark.parametrize(
    "path,expected",
    [
        # Patterns without a slash match the name at any depth
        ("a.txt", True),
        ("sub/c.txt", True),
        ("deep/er/notes.txt", True),
        ("a.txt.bak", False),
        # Patterns with a slash are anchored to the walk root
        ("docs/intro.md", True),
        ("docs/guide/intro.md", True),
        ("other/docs/intro.md", False),
        ("README.md", False),
        # Character classes and single-character wildcards
        ("module.pyc", True),
        ("module.pyo", True),
        ("module.pyx", False),
        ("v1.cfg", True),
        ("v12.cfg", False),
    ],
)
def test_glob_rules_matching(path, expected):
    rules = GlobRules(["*.txt", "docs/**/*.md", "*.py[co]", "v?.cfg"])
    assert rules.matches(path) == expected, f"Failed for path: {path}"


def test_glob_rules_are_case_sensitive():
    rules = GlobRules(["*.txt"])
    assert rules.matches("notes.txt")
    assert not rules.matches("NOTES.TXT")


def test_directory_only_pattern():
    rules = GlobRules(["build/"])
    assert rules.matches("build/")
    assert rules.matches("src/build/")
    assert not rules.matches("build")


def test_empty_rules():
    rules = GlobRules()
    assert not rules.has_rules()
    assert not rules.matches("anything.txt")


def test_has_rules_and_patterns_are_kept_in_order():
    rules = GlobRules(["b*", "a*"])
    assert rules.has_rules()
    assert rules.patterns == ["b*", "a*"]
    assert repr(rules) == "GlobRules(['b*', 'a*'])"


@pytest.mark.parametrize("pattern", ["", "   "])
def test_empty_pattern_is_invalid(pattern):
    with pytest.raises(InvalidPatternError) as exc_info:
        GlobRules(["*.txt", pattern])
    assert exc_info.value.pattern == pattern
    assert "pattern is empty" in str(exc_info.value)


def test_invalid_pattern_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        compile_pattern("")


def test_compile_pattern():
    pattern = compile_pattern("*.txt")
    assert pattern.match_file("notes/a.txt") is not None
    assert pattern.match_file("notes/a.md") is None


@pytest.mark.parametrize("pattern", ["[", "a[", "/", "#x"])
def test_pattern_matching_nothing_is_invalid(pattern):
    with pytest.raises(InvalidPatternError) as exc_info:
        GlobRules([pattern])
    assert exc_info.value.pattern == pattern


@pytest.mark.parametrize(
    "path,expected",
    [
        ("notes.txt", True),
        ("sub/notes.txt", True),
        ("notes.txt/x.py", False),
        ("notes.txt/inner/y.txt", True),
        ("docs/guide/intro.md", True),
    ],
)
def test_matches_file_ignores_matched_parent_directories(path, expected):
    rules = GlobRules(["*.txt", "docs/**/*.md"])
    assert rules.matches_file(path) == expected, f"Failed for path: {path}"
