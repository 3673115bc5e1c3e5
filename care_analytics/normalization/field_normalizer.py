# ==============================================
# FieldNormalizer
# ==============================================
#
# PURPOSE:
#   Turn every incoming column header into the snake_case column
#   name one record schema understands.
#
# WHY THIS CLASS EXISTS:
#   The same column arrives under different spellings depending on
#   where the rows came from:
#     - CSV exports:    "ContactName", "TBTestNegative", "Phone2"
#     - API / Excel:    "contact_name", "tb_test_negative", "phone2"
#     - Client state:   "contactName", "tbTestNegative"
#     - Hand-made sheets: "1+ Year Experience", "Phone 2", "Zip Code"
#   All of them must land on the same schema column.
#
# CLASS: FieldNormalizer
# ----------------------
#   Built per schema (known_columns = every alias the schema accepts).
#   Caches header → column; remembers headers that match no column.
#
#   Methods:
#   --------
#   - normalize(header: str) -> str
#   - unmatched_headers() -> list[str]
#   - get_mappings() -> dict[str, str]
#
# RULES:
# ------
#   1. Words are split at case changes, acronym ends, spaces and
#      punctuation               (TBTestNegative → tb_test_negative)
#   2. A leading count becomes a word
#                                (1+ Year Experience → one_year_experience)
#   3. Any other number sticks to the word before it
#                                (Phone 2 → phone2)
#
# ==============================================

import re
from typing import Dict, Iterable, List


class FieldNormalizer:
    """Maps raw column headers onto one schema's snake_case column names."""

    # Acronym run (not followed by lowercase), capitalized/lower word, or digits
    WORD = re.compile(r'[A-Z]+(?![a-z])|[A-Z]?[a-z]+|\d+')

    NUMBER_WORDS = {
        "1": "one", "2": "two", "3": "three", "4": "four", "5": "five",
    }

    def __init__(self, known_columns: Iterable[str] = ()):
        self.known_columns = frozenset(known_columns)
        self._mappings: Dict[str, str] = {}
        self._unmatched: Dict[str, None] = {}

    def normalize(self, header: str) -> str:
        """
        Convert one column header to its snake_case column name.

        Args:
            header: Raw header (e.g. "CPRCertificate", "Phone 2", "1+ Year Experience")

        Returns:
            Column name (e.g. "cpr_certificate", "phone2", "one_year_experience")
        """
        if header in self._mappings:
            return self._mappings[header]

        column = "_".join(self._words(header))
        self._mappings[header] = column

        if self.known_columns and column not in self.known_columns:
            self._unmatched[header] = None

        return column

    def unmatched_headers(self) -> List[str]:
        """Headers seen so far that map to no column of the schema, in first-seen order."""
        return list(self._unmatched)

    def get_mappings(self) -> Dict[str, str]:
        return self._mappings.copy()

    @classmethod
    def _words(cls, header: str) -> List[str]:
        words: List[str] = []
        for match in cls.WORD.finditer(header or ""):
            word = match.group(0).lower()
            if word.isdigit():
                if not words:
                    words.append(cls.NUMBER_WORDS.get(word, word))
                    continue
                words[-1] += word
                continue
            words.append(word)
        return words
