"""Unit tests for keyword search with context windows."""

from dokploy_docs.catalog import DOC_FILES
from dokploy_docs.core.loader import DocumentLoader
from dokploy_docs.core.search import MAX_RESULTS, KeywordSearch
from tests.conftest import write_docs


def numbered_lines(count: int, overrides: dict[int, str] | None = None) -> str:
    """Build a document of ``count`` lines; ``overrides`` maps 1-based line to text."""
    overrides = overrides or {}
    return "\n".join(overrides.get(n, f"filler line {n}") for n in range(1, count + 1))


class TestKeywordSearch:
    """Test search semantics over a fixture corpus."""

    def make_search(self, directory, docs):
        write_docs(directory, docs)
        return KeywordSearch(DocumentLoader(directory), DOC_FILES)

    def test_single_match_with_context(self, tmp_path):
        """Test a unique match reports its line and 5 lines either side."""
        search = self.make_search(
            tmp_path,
            {"troubleshooting.md": numbered_lines(60, {42: "deploy failed"})},
        )

        results = search.search("deploy failed")

        assert len(results) == 1
        assert results[0].file == "troubleshooting.md"
        assert results[0].line == 42
        context_lines = results[0].context.split("\n")
        assert context_lines[0] == "filler line 37"
        assert context_lines[5] == "deploy failed"
        assert context_lines[-1] == "filler line 47"
        assert len(context_lines) == 11

    def test_case_insensitive(self, tmp_path):
        """Test matching ignores case on both sides."""
        search = self.make_search(
            tmp_path, {"setup-guide.md": "Configure TRAEFIK first\nthen deploy"}
        )

        results = search.search("Traefik")

        assert [r.line for r in results] == [1]

    def test_context_clamped_at_document_start_and_end(self, tmp_path):
        """Test context windows stop at the document bounds."""
        search = self.make_search(
            tmp_path,
            {
                "deploy-guide.md": numbered_lines(4, {2: "needle"}),
            },
        )

        results = search.search("needle")

        assert len(results) == 1
        assert results[0].context == "filler line 1\nneedle\nfiller line 3\nfiller line 4"

    def test_skips_past_context_window(self, tmp_path):
        """Test hits inside a previous match's window are not reported again."""
        doc = numbered_lines(30, {1: "hit", 4: "hit", 7: "hit", 21: "hit"})
        search = self.make_search(tmp_path, {"databases.md": doc})

        results = search.search("hit")

        # Line 4 falls inside line 1's window; line 7 is the first line after it
        assert [r.line for r in results] == [1, 7, 21]

    def test_results_capped_at_ten(self, tmp_path):
        """Test no more than ten results are returned across documents."""
        every_line = "\n".join(["match"] * 200)
        search = self.make_search(
            tmp_path,
            {"api-reference.md": every_line, "docker-compose.md": every_line},
        )

        results = search.search("match")

        assert len(results) == MAX_RESULTS
        assert all(r.file == "api-reference.md" for r in results)
        assert [r.line for r in results] == [1 + 6 * n for n in range(10)]

    def test_results_follow_catalog_order(self, tmp_path):
        """Test results are ordered by catalog position then line number."""
        search = self.make_search(
            tmp_path,
            {
                "docker-compose.md": "compose uses traefik",
                "api-reference.md": numbered_lines(20, {3: "traefik", 15: "Traefik"}),
                "domains-ssl.md": "traefik issues certificates",
            },
        )

        results = search.search("traefik")

        assert [(r.file, r.line) for r in results] == [
            ("api-reference.md", 3),
            ("api-reference.md", 15),
            ("domains-ssl.md", 1),
            ("docker-compose.md", 1),
        ]

    def test_no_match_returns_empty(self, docs_dir):
        """Test a query that matches nothing yields no results."""
        search = KeywordSearch(DocumentLoader(docs_dir), DOC_FILES)
        assert search.search("kubernetes operator") == []

    def test_empty_query_matches_first_line(self, docs_dir):
        """Test an empty query matches every line."""
        search = KeywordSearch(DocumentLoader(docs_dir), DOC_FILES)

        results = search.search("")

        assert results[0].file == "api-reference.md"
        assert results[0].line == 1
        # One hit per context window in each present document
        assert [r.line for r in results[:4]] == [1, 7, 13, 19]
        assert results[4].file == "setup-guide.md"

    def test_missing_documents_skipped(self, empty_docs_dir):
        """Test absent files produce no results, not placeholder matches."""
        search = KeywordSearch(DocumentLoader(empty_docs_dir), DOC_FILES)
        assert search.search("not found") == []

    def test_document_mentioning_not_found_is_searched(self, docs_dir):
        """Test real content containing 'not found' is still searched."""
        search = KeywordSearch(DocumentLoader(docs_dir), DOC_FILES)

        results = search.search("certificate not found")

        assert len(results) == 1
        assert results[0].file == "troubleshooting.md"
        assert results[0].line == 3

    def test_repeated_search_is_identical(self, docs_dir):
        """Test searching twice against unchanged files gives the same output."""
        search = KeywordSearch(DocumentLoader(docs_dir), DOC_FILES)
        assert search.search("POST") == search.search("POST")
