import pytest

from dirble.errors import ExtensionFileUnavailable
from dirble.extensions import resolve_extensions
from dirble.helpers import lines_from_file


def _check_invariants(resolved):
    assert list(resolved) == sorted(resolved)
    assert len(resolved) == len(set(resolved))
    assert resolved.count("") == 1


class TestResolveExtensions:
    def test_nothing_supplied(self):
        assert resolve_extensions() == ("",)

    def test_inline_sorted(self):
        assert resolve_extensions(["txt", "php"]) == ("", "php", "txt")

    def test_inline_duplicates_removed(self):
        assert resolve_extensions(["php", "php", "asp"]) == ("", "asp", "php")

    def test_inline_empty_tokens_collapse(self):
        assert resolve_extensions(["", "php", ""]) == ("", "php")

    def test_tokens_not_normalised(self):
        assert resolve_extensions([".php", "php", "PHP"]) == ("", ".php", "PHP", "php")

    def test_file_merged(self, extension_file):
        resolved = resolve_extensions(["txt", "php"], str(extension_file))
        assert resolved == ("", "asp", "html", "php", "txt")

    def test_reader_not_called_without_file(self):
        def reader(path):
            raise AssertionError("reader should not be called")

        assert resolve_extensions(["php"], read_lines=reader) == ("", "php")

    def test_injected_reader(self):
        calls = []

        def reader(path):
            calls.append(path)
            return ["zip", "", "bak"]

        assert resolve_extensions([], "exts.txt", read_lines=reader) == ("", "bak", "zip")
        assert calls == ["exts.txt"]

    @pytest.mark.parametrize(
        "inline,from_file",
        [
            ([], []),
            (["", ""], [""]),
            (["b", "a", "b"], ["a", "c", "a"]),
            (["z", "", "y"], ["", "x"]),
        ],
    )
    def test_invariants_hold(self, inline, from_file):
        _check_invariants(resolve_extensions(inline, "f", read_lines=lambda path: list(from_file)))

    def test_unreadable_file_propagates(self, tmp_path):
        missing = tmp_path / "nope.txt"
        with pytest.raises(ExtensionFileUnavailable) as exc:
            resolve_extensions(["php"], str(missing))
        assert exc.value.path == str(missing)


class TestLinesFromFile:
    def test_trims_and_drops_blank_lines(self, extension_file):
        assert lines_from_file(str(extension_file)) == ["php", "asp", "html", "php"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ExtensionFileUnavailable, match="No such file"):
            lines_from_file(str(tmp_path / "missing.txt"))

    def test_directory(self, tmp_path):
        with pytest.raises(ExtensionFileUnavailable):
            lines_from_file(str(tmp_path))
