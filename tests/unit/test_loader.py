"""Unit tests for the document loader."""

from dokploy_docs.catalog import DOC_FILES
from dokploy_docs.core.loader import DocumentLoader
from dokploy_docs.core.search import KeywordSearch
from tests.conftest import SETUP_GUIDE


class TestDocumentLoader:
    """Test reading corpus files."""

    def test_load_existing_file(self, docs_dir):
        """Test that an existing file is returned verbatim."""
        loader = DocumentLoader(docs_dir)
        result = loader.load("setup-guide.md")

        assert result.found is True
        assert result.content == SETUP_GUIDE
        assert result.text == SETUP_GUIDE

    def test_load_preserves_exact_bytes(self, tmp_path):
        """Test that line endings and unicode survive unchanged."""
        raw = "# Título\r\nline two\r\n✓ done\n"
        (tmp_path / "databases.md").write_bytes(raw.encode("utf-8"))

        result = DocumentLoader(tmp_path).load("databases.md")

        assert result.content == raw

    def test_invalid_utf8_is_replaced(self, tmp_path):
        """Test that undecodable bytes become U+FFFD instead of raising."""
        (tmp_path / "api-reference.md").write_bytes(b"caf\xe9 deploy\n")

        result = DocumentLoader(tmp_path).load("api-reference.md")

        assert result.found is True
        assert result.content == "caf\ufffd deploy\n"

    def test_invalid_utf8_still_searchable(self, tmp_path):
        """Test that one bad file does not break search across the corpus."""
        (tmp_path / "api-reference.md").write_bytes(b"caf\xe9 deploy\n")
        (tmp_path / "setup-guide.md").write_text("deploy on a VPS\n", encoding="utf-8")

        results = KeywordSearch(DocumentLoader(tmp_path), DOC_FILES).search("deploy")

        assert [r.file for r in results] == ["api-reference.md", "setup-guide.md"]

    def test_missing_file_is_placeholder(self, empty_docs_dir):
        """Test that every missing corpus file renders a not-found placeholder."""
        loader = DocumentLoader(empty_docs_dir)

        for filename in DOC_FILES:
            result = loader.load(filename)
            assert result.found is False
            assert result.content is None
            assert filename in result.text
            assert "not found" in result.text
            assert "refresh" in result.text

    def test_missing_docs_dir_does_not_raise(self, tmp_path):
        """Test that a non-existent docs directory is treated as empty."""
        loader = DocumentLoader(tmp_path / "does-not-exist")
        assert loader.load("api-reference.md").found is False

    def test_rereads_on_every_call(self, docs_dir):
        """Test that changes on disk are visible on the next load."""
        loader = DocumentLoader(docs_dir)
        assert loader.load_text("setup-guide.md") == SETUP_GUIDE

        (docs_dir / "setup-guide.md").write_text("updated", encoding="utf-8")

        assert loader.load_text("setup-guide.md") == "updated"

    def test_directory_with_document_name_is_missing(self, tmp_path):
        """Test that a directory named like a document is not read."""
        (tmp_path / "databases.md").mkdir()
        assert DocumentLoader(tmp_path).load("databases.md").found is False
