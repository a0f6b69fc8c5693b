"""
Компонент для разбиения текста на слова и строки разделителей.

Текст делится на максимальные однородные отрезки: «слово» (ни одного
символа-разделителя) или «строка разделителей» (только разделители).
Отрезки вычисляются построчно и никогда не пересекают границу строки.
"""

import io
from typing import FrozenSet, Iterable, Iterator, List, Optional
from ..config import config
from ..interfaces.tag_cloud import Token, TokenKind, TokenizerInterface


class SeparatorTokenizer(TokenizerInterface):
    """Токенизатор по фиксированному набору символов-разделителей."""

    def __init__(self, separators: Optional[Iterable[str]] = None):
        """
        Инициализирует токенизатор.

        Args:
            separators: Символы-разделители (по умолчанию из config)
        """
        if separators is None:
            separators = config.get_separators()
        self._separators: FrozenSet[str] = frozenset(separators)
        if not self._separators:
            raise ValueError("Набор разделителей не может быть пустым")

    def is_separator(self, char: str) -> bool:
        return char in self._separators

    def next_run(self, text: str, position: int) -> Token:
        """
        Возвращает максимальный отрезок, начинающийся с позиции position.

        Если text[position] является разделителем, отрезок состоит только из
        разделителей, иначе только из прочих символов.

        Args:
            text: Строка для разбора
            position: Начальная позиция, 0 <= position < len(text)

        Returns:
            Непустой отрезок с его типом
        """
        if not 0 <= position < len(text):
            raise ValueError(f"Позиция {position} вне строки длины {len(text)}")

        separator_run = self.is_separator(text[position])
        end = position + 1
        while end < len(text) and self.is_separator(text[end]) == separator_run:
            end += 1

        kind = TokenKind.SEPARATOR if separator_run else TokenKind.WORD
        return Token(text[position:end], kind)

    def iter_runs(self, line: str) -> Iterator[Token]:
        """Перебирает все отрезки одной строки."""
        position = 0
        while position < len(line):
            run = self.next_run(line, position)
            position += len(run)
            yield run

    def lines(self, text: str) -> List[str]:
        """Делит текст на строки, сохраняя символы перевода строки."""
        if not text:
            return []
        return list(io.StringIO(text, newline=''))

    def tokenize(self, text: str) -> Iterator[Token]:
        """
        Разбивает текст на отрезки построчно.

        Переводы строк остаются в составе строк, поэтому склейка всех
        отрезков воспроизводит исходный текст.
        """
        for line in self.lines(text):
            yield from self.iter_runs(line)

    def words(self, text: str) -> Iterator[str]:
        """Возвращает только слова текста (в исходном регистре)."""
        for token in self.tokenize(text):
            if token.is_word:
                yield token.text
