import unittest

from formatters import format_citation, format_all_citations, get_formatter
from formatters.apa import APAFormatter
from formatters.mla import MLAFormatter
from models import SourceMetadata, SourceType, CitationStyle


ACCESS_LONG = "October 17, 2026"
ACCESS_SHORT = "17 Oct 2026"


def make_record(**kwargs):
    kwargs.setdefault('access_date', ACCESS_LONG)
    return SourceMetadata(**kwargs)


class FormatterRegistryTests(unittest.TestCase):
    def test_aliases(self):
        self.assertIsInstance(get_formatter('APA 7'), APAFormatter)
        self.assertIsInstance(get_formatter(CitationStyle.APA7), APAFormatter)
        self.assertIsInstance(get_formatter('mla'), MLAFormatter)

    def test_unknown_style_falls_back_to_apa(self):
        self.assertIsInstance(get_formatter('vancouver'), APAFormatter)


class WebsiteCitationTests(unittest.TestCase):
    def setUp(self):
        self.record = make_record(
            title="How Tides Work",
            authors=["Jane Doe"],
            site_name="Ocean Blog",
            year="2021",
            month="March",
            day="5",
            url="https://oceanblog.example/tides",
            source_type=SourceType.WEBSITE,
        )

    def test_all_styles(self):
        citations = format_all_citations(self.record, ACCESS_SHORT)
        self.assertEqual(
            citations.apa7,
            "Doe, J. (2021, March 5). <i>How Tides Work</i>. Ocean Blog. https://oceanblog.example/tides",
        )
        self.assertEqual(
            citations.mla9,
            'Doe, Jane. "How Tides Work." <i>Ocean Blog</i>, 5 Mar. 2021, '
            'https://oceanblog.example/tides. Accessed 17 Oct 2026.',
        )
        self.assertEqual(
            citations.chicago,
            'Doe, Jane. "How Tides Work." <i>Ocean Blog</i>, March 5, 2021. https://oceanblog.example/tides.',
        )
        self.assertEqual(
            citations.harvard,
            "Doe, J. (2021) <i>How Tides Work</i>, Ocean Blog. "
            "Available at: https://oceanblog.example/tides (Accessed: October 17, 2026).",
        )

    def test_month_without_day(self):
        self.record.day = None
        self.assertIn("(2021, March).", format_citation(self.record, 'apa7'))
        self.assertIn("Mar. 2021,", format_citation(self.record, 'mla9', ACCESS_SHORT))
        self.assertIn("March 2021.", format_citation(self.record, 'chicago'))

    def test_site_stands_in_for_missing_author(self):
        record = make_record(
            title="Home",
            site_name="example.com",
            url="https://example.com",
            source_type=SourceType.WEBSITE,
        )
        citations = format_all_citations(record, ACCESS_SHORT)
        self.assertEqual(citations.apa7, "example.com (n.d.). <i>Home</i>. https://example.com")
        self.assertEqual(
            citations.mla9,
            '"Home." <i>example.com</i>, n.d., https://example.com. Accessed 17 Oct 2026.',
        )
        self.assertEqual(citations.chicago, '"Home." <i>example.com</i>, n.d. https://example.com.')
        self.assertEqual(
            citations.harvard,
            "example.com (n.d.) <i>Home</i>, example.com. "
            "Available at: https://example.com (Accessed: October 17, 2026).",
        )

    def test_mla_without_short_date_uses_access_date(self):
        self.assertTrue(format_citation(self.record, 'mla9').endswith("Accessed October 17, 2026."))


class BookCitationTests(unittest.TestCase):
    def setUp(self):
        self.record = make_record(
            title="Pride and Prejudice",
            authors=["Jane Austen"],
            site_name="T. Egerton",
            publisher="T. Egerton",
            year="1813",
            url="https://openlibrary.org/works/OL66554W",
            source_type=SourceType.BOOK,
        )

    def test_all_styles(self):
        citations = format_all_citations(self.record, ACCESS_SHORT)
        self.assertEqual(citations.apa7, "Austen, J. (1813). <i>Pride and Prejudice</i>. T. Egerton.")
        self.assertEqual(citations.mla9, "Austen, Jane. <i>Pride and Prejudice</i>. T. Egerton, 1813.")
        self.assertEqual(citations.chicago, "Austen, Jane. <i>Pride and Prejudice</i>. T. Egerton, 1813.")
        self.assertEqual(citations.harvard, "Austen, J. (1813) <i>Pride and Prejudice</i>. T. Egerton.")

    def test_publisher_preferred_over_site(self):
        self.record.site_name = "Google Books"
        self.record.publisher = "Penguin"
        self.assertTrue(format_citation(self.record, 'apa7').endswith("Penguin."))

    def test_et_al_is_not_double_terminated(self):
        self.record.authors = ["Jane Doe", "John Roe", "Ann Poe"]
        self.assertEqual(
            format_citation(self.record, 'mla9'),
            "Doe, Jane, et al. <i>Pride and Prejudice</i>. T. Egerton, 1813.",
        )

    def test_unknown_author_and_date(self):
        record = make_record(title="Anonymous Tract", publisher="Printer", source_type=SourceType.BOOK)
        self.assertEqual(format_citation(record, 'apa7'), "Unknown (n.d.). <i>Anonymous Tract</i>. Printer.")
        self.assertEqual(format_citation(record, 'mla9'), "<i>Anonymous Tract</i>. Printer, n.d.")


class ArticleCitationTests(unittest.TestCase):
    def test_all_styles(self):
        record = make_record(
            title="A Study",
            authors=["Smith, John", "Jane Roe"],
            site_name="Journal X",
            publisher="Elsevier",
            year="2020",
            month="May",
            day="4",
            url="https://doi.org/10.1000/182",
            source_type=SourceType.ARTICLE,
        )
        citations = format_all_citations(record, ACCESS_SHORT)
        self.assertEqual(
            citations.apa7,
            "Smith, J., & Roe, J. (2020). A Study. <i>Journal X</i>. https://doi.org/10.1000/182",
        )
        self.assertEqual(
            citations.mla9,
            'Smith, John, and Jane Roe. "A Study." <i>Journal X</i>, 4 May 2020, '
            'https://doi.org/10.1000/182. Accessed 17 Oct 2026.',
        )
        self.assertEqual(
            citations.chicago,
            'Smith, John, and Jane Roe. "A Study." <i>Journal X</i>, 2020. https://doi.org/10.1000/182.',
        )
        self.assertEqual(
            citations.harvard,
            "Smith, J., & Roe, J. (2020) A Study. <i>Journal X</i>. "
            "Available at: https://doi.org/10.1000/182 (Accessed: October 17, 2026).",
        )


class VideoCitationTests(unittest.TestCase):
    def test_channel_kept_verbatim(self):
        record = make_record(
            title="Why Clocks Tick",
            authors=["Veritasium"],
            site_name="YouTube",
            url="https://www.youtube.com/watch?v=abc",
            source_type=SourceType.VIDEO,
        )
        citations = format_all_citations(record, ACCESS_SHORT)
        self.assertEqual(
            citations.apa7,
            "Veritasium (n.d.). <i>Why Clocks Tick</i> [Video]. YouTube. https://www.youtube.com/watch?v=abc",
        )
        self.assertEqual(
            citations.mla9,
            'Veritasium. "Why Clocks Tick." <i>YouTube</i>, n.d., '
            'https://www.youtube.com/watch?v=abc. Accessed 17 Oct 2026.',
        )
        self.assertEqual(
            citations.chicago,
            'Veritasium. "Why Clocks Tick." Video. <i>YouTube</i>, n.d. https://www.youtube.com/watch?v=abc.',
        )
        self.assertEqual(
            citations.harvard,
            "Veritasium (n.d.) <i>Why Clocks Tick</i> [Video]. "
            "Available at: https://www.youtube.com/watch?v=abc (Accessed: October 17, 2026).",
        )

    def test_multi_word_channel_not_inverted_in_apa(self):
        record = make_record(
            title="Intro",
            authors=["Khan Academy"],
            site_name="YouTube",
            url="https://youtu.be/x",
            source_type=SourceType.VIDEO,
        )
        self.assertTrue(format_citation(record, 'apa7').startswith("Khan Academy (n.d.)."))


class EncyclopediaCitationTests(unittest.TestCase):
    def test_all_styles(self):
        record = make_record(
            title="Alan Turing",
            site_name="Wikipedia",
            publisher="Wikimedia Foundation",
            url="https://en.wikipedia.org/wiki/Alan_Turing",
            source_type=SourceType.ENCYCLOPEDIA,
        )
        citations = format_all_citations(record, ACCESS_SHORT)
        self.assertEqual(
            citations.apa7,
            "Alan Turing. (n.d.). In <i>Wikipedia</i>. "
            "Retrieved October 17, 2026, from https://en.wikipedia.org/wiki/Alan_Turing",
        )
        self.assertEqual(
            citations.mla9,
            '"Alan Turing." <i>Wikipedia</i>, n.d., '
            'https://en.wikipedia.org/wiki/Alan_Turing. Accessed 17 Oct 2026.',
        )
        self.assertEqual(
            citations.chicago,
            '<i>Wikipedia</i>. "Alan Turing." Accessed October 17, 2026. '
            'https://en.wikipedia.org/wiki/Alan_Turing.',
        )
        self.assertEqual(
            citations.harvard,
            "<i>Wikipedia</i> (n.d.) Alan Turing. "
            "Available at: https://en.wikipedia.org/wiki/Alan_Turing (Accessed: October 17, 2026).",
        )


class TitlePunctuationTests(unittest.TestCase):
    def record(self, source_type):
        return make_record(
            title="Why Do Tides Happen?",
            authors=["Jane Doe"],
            site_name="Blog",
            publisher="Press",
            year="2020",
            url="https://blog.example/tides",
            source_type=source_type,
        )

    def test_question_mark_not_followed_by_period(self):
        for source_type in SourceType:
            for style in CitationStyle:
                citation = format_citation(self.record(source_type), style, ACCESS_SHORT)
                self.assertNotIn("?.", citation, f"{style.value}/{source_type.value}")
                self.assertNotIn("?</i>.", citation, f"{style.value}/{source_type.value}")

    def test_mla_quoted_title(self):
        self.assertEqual(
            format_citation(self.record(SourceType.WEBSITE), 'mla9', ACCESS_SHORT),
            'Doe, Jane. "Why Do Tides Happen?" <i>Blog</i>, 2020, '
            'https://blog.example/tides. Accessed 17 Oct 2026.',
        )

    def test_apa_italic_title(self):
        self.assertEqual(
            format_citation(self.record(SourceType.BOOK), 'apa7'),
            "Doe, J. (2020). <i>Why Do Tides Happen?</i> Press.",
        )

    def test_exclamation_mark(self):
        record = self.record(SourceType.ARTICLE)
        record.title = "Stop!"
        self.assertIn('"Stop!" <i>Blog</i>', format_citation(record, 'chicago'))


class MissingDateTests(unittest.TestCase):
    def test_every_style_prints_nd(self):
        for source_type in SourceType:
            record = make_record(
                title="Undated",
                authors=["Jane Doe"],
                site_name="Somewhere",
                url="https://example.com/x",
                source_type=source_type,
            )
            for style in CitationStyle:
                citation = format_citation(record, style, ACCESS_SHORT)
                if style == CitationStyle.CHICAGO and source_type == SourceType.ENCYCLOPEDIA:
                    # Chicago encyclopedia entries carry only the access date
                    self.assertNotIn("n.d.", citation)
                else:
                    self.assertIn("n.d.", citation, f"{style.value}/{source_type.value}")

    def test_month_without_year_is_undated(self):
        record = make_record(title="T", site_name="S", month="March", url="u", source_type=SourceType.WEBSITE)
        self.assertIn("(n.d.)", format_citation(record, 'apa7'))


if __name__ == "__main__":
    unittest.main()
