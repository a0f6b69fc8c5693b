"""
Компонент для подсчёта частотности слов.

Отвечает за приведение слов к нижнему регистру и ведение таблицы
«слово → количество вхождений».
"""

from collections import Counter
from typing import Dict, Iterable, Optional
from ..interfaces.tag_cloud import FrequencyAnalyzerInterface, Token
from .tokenizer import SeparatorTokenizer


class FrequencyAnalyzer(FrequencyAnalyzerInterface):
    """Анализатор частотности слов."""

    def __init__(self, tokenizer: Optional[SeparatorTokenizer] = None):
        """
        Инициализирует анализатор частотности.

        Args:
            tokenizer: Токенизатор для подсчёта по строкам текста
        """
        self.tokenizer = tokenizer or SeparatorTokenizer()
        self._word_frequencies: Counter = Counter()
        self._total_words = 0

    def accumulate(self, word: str) -> None:
        """
        Учитывает одно вхождение слова.

        Args:
            word: Слово (отрезок без разделителей)
        """
        if not word:
            raise ValueError("Пустое слово не может быть учтено")
        if any(self.tokenizer.is_separator(ch) for ch in word):
            raise ValueError(f"Слово содержит разделители: {word!r}")

        self._word_frequencies[word.lower()] += 1
        self._total_words += 1

    def count_tokens(self, tokens: Iterable[Token]) -> int:
        """
        Учитывает все слова из потока отрезков, разделители пропускаются.

        Returns:
            Количество учтённых слов
        """
        counted = 0
        for token in tokens:
            if token.is_word:
                self.accumulate(token.text)
                counted += 1
        return counted

    def count_lines(self, lines: Iterable[str]) -> int:
        """
        Разбивает строки на отрезки и учитывает слова.

        Args:
            lines: Строки текста (с переводами строк или без)

        Returns:
            Количество учтённых слов
        """
        counted = 0
        for line in lines:
            counted += self.count_tokens(self.tokenizer.iter_runs(line))
        return counted

    def frequencies(self) -> Dict[str, int]:
        """Возвращает копию таблицы частот."""
        return dict(self._word_frequencies)

    def get_word_frequency(self, word: str) -> int:
        """Возвращает частоту конкретного слова (без учёта регистра)."""
        return self._word_frequencies.get(word.lower(), 0)

    def get_frequency_statistics(self) -> Dict[str, int]:
        """
        Возвращает общую статистику частотности.

        Returns:
            Словарь со статистикой
        """
        return {
            'total_words': self._total_words,
            'unique_words': len(self._word_frequencies),
        }

    def reset_statistics(self) -> None:
        """Сбрасывает всю статистику."""
        self._word_frequencies.clear()
        self._total_words = 0
