"""Word list: validity lookup and length-ordered candidate lists."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from sanakisa.constants import BOARD_SIZE
from sanakisa.errors import DictionaryError

log = logging.getLogger("sanakisa")


class Dictionary:
    """Uppercase word set plus two length-ordered views of it.

    The ordered views are built once on first use and reused for the
    lifetime of the dictionary.
    """

    def __init__(self, dict_path: str | None = None, words: Iterable[str] | None = None):
        self.words: set[str] = set()
        self._order: list[str] = []
        self._by_length_desc: list[str] | None = None
        self._by_length_asc: list[str] | None = None
        if words is not None:
            self._add_all(words)
        else:
            self._load(dict_path)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Dictionary:
        return cls(words=words)

    def _add_all(self, words: Iterable[str]) -> None:
        for line in words:
            word = line.strip().upper()
            if 2 <= len(word) <= BOARD_SIZE and word.isalpha() and word not in self.words:
                self.words.add(word)
                self._order.append(word)

    def _load(self, dict_path: str | None) -> None:
        if dict_path:
            if not os.path.exists(dict_path):
                raise DictionaryError(f"word list not found: {dict_path}")
            search_paths = [dict_path]
        else:
            search_paths = [
                "words.txt",
                "sanat.txt",
                os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
            ]

        for path in search_paths:
            if os.path.exists(path):
                try:
                    with open(path, "r", encoding="utf-8") as f:
                        self._add_all(f)
                except (OSError, UnicodeDecodeError) as exc:
                    raise DictionaryError(f"cannot read {path}: {exc}") from exc
                if self.words:
                    log.info("Loaded %s words from %s", f"{len(self.words):,}", path)
                    return

        log.warning("No dictionary file found -- using built-in minimal word list.")
        log.warning("Save a Finnish word list (one word per line) as words.txt for real games.")
        self._load_minimal()

    def _load_minimal(self) -> None:
        two_letter = [
            "AI", "EI", "EN", "HE", "JA", "JO", "ME", "NE", "NO", "OI",
            "ON", "SE", "TE", "UI", "YÖ",
        ]
        common = [
            "AAMU", "AIKA", "AUTO", "ILTA", "ISÄ", "JOKI", "JÄRVI", "KALA",
            "KARHU", "KETTU", "KIRJA", "KISSA", "KIVI", "KOIRA", "KOTI",
            "KUKKA", "KUU", "KYNÄ", "KÄSI", "LEIPÄ", "LINTU", "LUMI", "MAA",
            "MAITO", "MERI", "METSÄ", "NIMI", "OMENA", "OVI", "PELI", "PUU",
            "PÄIVÄ", "PÖYTÄ", "SANA", "SAUNA", "SUO", "SUSI", "TALO", "TIE",
            "TULI", "TUOLI", "TYÖ", "VESI", "VENE", "ÄITI", "IKKUNA",
            "KOULU", "KAUPUNKI", "OPETTAJA", "SANAKIRJA",
        ]
        self._add_all(two_letter + common)

    def words_by_length(self, ascending: bool = False) -> list[str]:
        """All words, longest first (or shortest first with *ascending*).

        Words of equal length keep load order; the ascending view is the
        exact reverse of the descending one.
        """
        if self._by_length_desc is None:
            self._by_length_desc = sorted(self._order, key=len, reverse=True)
            self._by_length_asc = self._by_length_desc[::-1]
        return self._by_length_asc if ascending else self._by_length_desc

    def is_valid(self, word: str) -> bool:
        return word.upper() in self.words

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        return len(self.words)
