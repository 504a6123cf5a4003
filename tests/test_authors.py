import unittest

from formatters.authors import format_author_apa, format_author_mla, split_name


class SplitNameTests(unittest.TestCase):
    def test_display_order(self):
        self.assertEqual(split_name("Jane Mary Doe"), ("Doe", ["Jane", "Mary"]))

    def test_inverted(self):
        self.assertEqual(split_name("Doe, Jane Mary"), ("Doe", ["Jane", "Mary"]))

    def test_single_token(self):
        self.assertEqual(split_name("Plato"), ("Plato", []))


class APAAuthorTests(unittest.TestCase):
    def test_middle_name_initials(self):
        self.assertEqual(format_author_apa(["Jane Mary Doe"]), "Doe, J. M.")

    def test_two_authors_use_ampersand(self):
        self.assertEqual(format_author_apa(["A B", "C D"]), "B, A., & D, C.")

    def test_three_authors(self):
        self.assertEqual(
            format_author_apa(["Jane Doe", "John Roe", "Ann Poe"]),
            "Doe, J., Roe, J., & Poe, A.",
        )

    def test_single_token_unchanged(self):
        self.assertEqual(format_author_apa(["Plato"]), "Plato")

    def test_already_inverted_name(self):
        self.assertEqual(format_author_apa(["Smith, John"]), "Smith, J.")
        self.assertEqual(format_author_apa(["Smith, John Paul"]), "Smith, J. P.")

    def test_lowercase_given_name_is_capitalized(self):
        self.assertEqual(format_author_apa(["bell hooks"]), "hooks, B.")

    def test_empty(self):
        self.assertEqual(format_author_apa([]), "Unknown")


class MLAAuthorTests(unittest.TestCase):
    def test_single_author_inverted(self):
        self.assertEqual(format_author_mla(["Jane Mary Doe"]), "Doe, Jane Mary")

    def test_two_authors(self):
        self.assertEqual(format_author_mla(["Jane Doe", "John Roe"]), "Doe, Jane, and John Roe")

    def test_three_or_more_use_et_al(self):
        self.assertEqual(format_author_mla(["Jane Doe", "John Roe", "Ann Poe"]), "Doe, Jane, et al.")
        self.assertEqual(format_author_mla(["Jane Doe", "B C", "D E", "F G"]), "Doe, Jane, et al.")

    def test_inverted_first_author_kept(self):
        self.assertEqual(format_author_mla(["Smith, John"]), "Smith, John")

    def test_single_token(self):
        self.assertEqual(format_author_mla(["Veritasium"]), "Veritasium")

    def test_empty(self):
        self.assertEqual(format_author_mla([]), "Unknown")


if __name__ == "__main__":
    unittest.main()
