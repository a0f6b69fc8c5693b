"""
Абстрактные интерфейсы и структуры данных для построения облака тегов.

Определяет контракты компонентов пайплайна (токенизация, подсчёт частот,
ранжирование, масштабирование шрифта, рендеринг, экспорт), чтобы
реализации можно было подменять независимо друг от друга.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Union


class TokenKind(Enum):
    """Тип отрезка текста."""
    WORD = "word"
    SEPARATOR = "separator"


@dataclass(frozen=True)
class Token:
    """Максимальный однородный отрезок текста (слово или строка разделителей)."""
    text: str
    kind: TokenKind

    @property
    def is_word(self) -> bool:
        return self.kind is TokenKind.WORD

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class FrequencyEntry:
    """Пара (слово, количество вхождений)."""
    word: str
    count: int


@dataclass
class RankedList:
    """Результат отбора N самых частых слов.

    entries хранятся уже в порядке отображения (по алфавиту),
    max_count/min_count берутся из отобранного подмножества.
    """
    entries: List[FrequencyEntry]
    requested: int
    max_count: Optional[int] = None
    min_count: Optional[int] = None
    diagnostics: List[str] = field(default_factory=list)

    @property
    def selection_size(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class RenderedTag:
    """Слово облака с вычисленным классом размера шрифта."""
    word: str
    count: int
    font_size: int


@dataclass
class TagCloud:
    """Готовое к выводу облако тегов."""
    tags: List[RenderedTag]
    source_name: str
    max_count: Optional[int] = None
    min_count: Optional[int] = None
    total_words: int = 0
    unique_words: int = 0
    diagnostics: List[str] = field(default_factory=list)

    @property
    def selection_size(self) -> int:
        return len(self.tags)


class TokenizerInterface(ABC):
    """Интерфейс для разбиения текста на отрезки."""

    @abstractmethod
    def next_run(self, text: str, position: int) -> Token:
        """Возвращает максимальный отрезок, начинающийся с позиции position."""
        pass

    @abstractmethod
    def tokenize(self, text: str) -> Iterator[Token]:
        """Разбивает весь текст на отрезки."""
        pass


class FrequencyAnalyzerInterface(ABC):
    """Интерфейс для подсчёта частотности слов."""

    @abstractmethod
    def accumulate(self, word: str) -> None:
        """Учитывает одно вхождение слова."""
        pass

    @abstractmethod
    def frequencies(self) -> Dict[str, int]:
        """Возвращает текущую таблицу частот."""
        pass

    @abstractmethod
    def reset_statistics(self) -> None:
        """Сбрасывает статистику."""
        pass


class RankerInterface(ABC):
    """Интерфейс для отбора самых частых слов."""

    @abstractmethod
    def select_top_n(self, frequencies: Mapping[str, int], n: int) -> RankedList:
        """Отбирает n самых частых слов и упорядочивает их для вывода."""
        pass


class TagCloudRendererInterface(ABC):
    """Интерфейс для рендеринга облака тегов."""

    @abstractmethod
    def render(self, cloud: TagCloud) -> str:
        """Возвращает облако тегов в виде готового документа."""
        pass


class ResultExporterInterface(ABC):
    """Интерфейс для экспорта результатов."""

    @abstractmethod
    def export_to_csv(self, cloud: TagCloud, filepath: Union[str, Path]) -> Path:
        """Экспортирует облако в CSV."""
        pass

    @abstractmethod
    def export_to_json(self, cloud: TagCloud, filepath: Union[str, Path]) -> Path:
        """Экспортирует облако в JSON."""
        pass

    @abstractmethod
    def export_to_excel(self, cloud: TagCloud, filepath: Union[str, Path]) -> Path:
        """Экспортирует облако в Excel."""
        pass


def iter_entries(frequencies: Mapping[str, int]) -> Iterable[FrequencyEntry]:
    """Материализует таблицу частот в последовательность FrequencyEntry."""
    return (FrequencyEntry(word, count) for word, count in frequencies.items())
