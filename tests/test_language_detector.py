"""Tests for output file type detection."""

from mdcode.extractors import LanguageDetector, file_extension, get_code_type


class TestFileExtension:
    """Test extension parsing of output names."""

    def test_regular_names(self):
        assert file_extension("main.go") == ".go"
        assert file_extension("web/static/app.min.js") == ".js"

    def test_bare_dotfile_is_its_own_extension(self):
        """Test that ".go" is not treated as an extensionless hidden file."""
        assert file_extension(".go") == ".go"
        assert file_extension("pkg/.css") == ".css"

    def test_no_extension(self):
        assert file_extension("Makefile") == ""
        assert file_extension("main.") == "."


class TestGetCodeType:
    """Test extension -> tag lookup."""

    def test_default_table(self):
        assert get_code_type("main.go") == "go"
        assert get_code_type("app.js") == "javascript"
        assert get_code_type("style.css") == "css"
        assert get_code_type(".go") == "go"

    def test_unknown_and_case_sensitive(self):
        assert get_code_type("main.py") is None
        assert get_code_type("MAIN.GO") is None

    def test_custom_table(self):
        detector = LanguageDetector({".ts": "typescript"})

        assert detector.get_code_type("index.ts") == "typescript"
        assert detector.get_code_type("main.go") is None
        assert detector.supported_extensions() == {".ts": "typescript"}
