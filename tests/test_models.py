import unittest

from models import (
    SourceMetadata, SourceType, SearchCandidate, SearchSource, Citations, InputType, ResolveResult,
    CitationInputError,
)


class SourceMetadataTests(unittest.TestCase):
    def test_defaults_fill_empty_fields(self):
        metadata = SourceMetadata(title="  ", authors=["", " Jane Doe "], site_name="")
        self.assertEqual(metadata.title, "Untitled")
        self.assertEqual(metadata.site_name, "Unknown Publisher")
        self.assertEqual(metadata.authors, ["Jane Doe"])

    def test_to_dict_uses_wire_keys(self):
        metadata = SourceMetadata(
            title="Emma",
            authors=["Jane Austen"],
            site_name="John Murray",
            publisher="John Murray",
            year=1815,
            url="https://openlibrary.org/works/OL1W",
            access_date="October 17, 2026",
            source_type=SourceType.BOOK,
            id="openlibrary_/works/OL1W",
        )
        self.assertEqual(metadata.to_dict(), {
            'authors': ["Jane Austen"],
            'title': "Emma",
            'siteName': "John Murray",
            'publisher': "John Murray",
            'year': "1815",
            'month': None,
            'day': None,
            'url': "https://openlibrary.org/works/OL1W",
            'accessDate': "October 17, 2026",
            'type': "book",
            'id': "openlibrary_/works/OL1W",
        })

    def test_to_dict_omits_missing_id(self):
        self.assertNotIn('id', SourceMetadata(title="T").to_dict())


class ResolveResultTests(unittest.TestCase):
    CITATIONS = Citations(apa7="a", mla9="m", chicago="c", harvard="h")

    def test_structured_result_carries_metadata(self):
        metadata = SourceMetadata(title="A Study", source_type=SourceType.ARTICLE)
        result = ResolveResult(input_type=InputType.DOI, citations=self.CITATIONS, metadata=metadata)
        d = result.to_dict()
        self.assertEqual(d['citations'], self.CITATIONS.to_dict())
        self.assertEqual(d['metadata'], metadata.to_dict())

    def test_ai_result_has_no_metadata(self):
        result = ResolveResult(input_type=InputType.URL, citations=self.CITATIONS, via_ai=True)
        self.assertEqual(result.to_dict(), {'citations': self.CITATIONS.to_dict()})


class SearchCandidateTests(unittest.TestCase):
    def test_round_trip(self):
        candidate = SearchCandidate(
            id="google_abc",
            title="Emma",
            source=SearchSource.GOOGLE_BOOKS,
            authors=["Jane Austen"],
            year="1815",
            raw={"id": "abc"},
        )
        rebuilt = SearchCandidate.from_dict(candidate.to_dict())
        self.assertEqual(rebuilt, candidate)

    def test_unknown_source(self):
        with self.assertRaises(ValueError):
            SearchCandidate.from_dict({"title": "Emma", "source": "bing"})

    def test_authors_string_rejected(self):
        with self.assertRaises(CitationInputError):
            SearchCandidate.from_dict({"title": "Emma", "source": "google_books", "authors": "Jane Austen"})

    def test_missing_authors_is_empty(self):
        candidate = SearchCandidate.from_dict({"title": "Emma", "source": "openlibrary", "authors": None})
        self.assertEqual(candidate.authors, [])


if __name__ == "__main__":
    unittest.main()
