"""
Компонент для вычисления размера шрифта слова облака.

Размер линейно интерполируется между минимальной и максимальной частотой
отобранных слов и ограничивается диапазоном [min_size, max_size].
"""

import logging
import math
from typing import List, Optional
from ..config import config
from ..interfaces.tag_cloud import RankedList, RenderedTag

logger = logging.getLogger(__name__)


class FontScaler:
    """Переводит частоту слова в класс размера шрифта."""

    def __init__(self, min_size: Optional[int] = None, max_size: Optional[int] = None,
                 uniform_size: Optional[int] = None):
        """
        Args:
            min_size: Минимальный размер шрифта, px
            max_size: Максимальный размер шрифта, px
            uniform_size: Размер для случая равных частот (по умолчанию max_size)
        """
        self.min_size = config.get_min_font_size() if min_size is None else min_size
        self.max_size = config.get_max_font_size() if max_size is None else max_size
        if self.min_size < 1 or self.max_size < self.min_size:
            raise ValueError(f"Некорректный диапазон шрифта: [{self.min_size}, {self.max_size}]")

        if uniform_size is None:
            uniform_size = config.get_uniform_font_size()
            if not self.min_size <= uniform_size <= self.max_size:
                uniform_size = self.max_size
        elif not self.min_size <= uniform_size <= self.max_size:
            raise ValueError(f"uniform_size {uniform_size} вне диапазона [{self.min_size}, {self.max_size}]")
        self.uniform_size = uniform_size

    def scale(self, count: int, min_count: int, max_count: int) -> int:
        """
        Вычисляет размер шрифта для частоты count.

        Args:
            count: Частота слова
            min_count: Минимальная частота среди отобранных слов
            max_count: Максимальная частота среди отобранных слов

        Returns:
            Целый размер шрифта в диапазоне [min_size, max_size]
        """
        if min_count > max_count:
            raise ValueError(f"min_count {min_count} больше max_count {max_count}")
        if not min_count <= count <= max_count:
            raise ValueError(f"Частота {count} вне диапазона [{min_count}, {max_count}]")

        if max_count == min_count:
            return self.uniform_size

        size = math.floor(self.max_size * (count - min_count) / (max_count - min_count) + self.min_size)
        return max(self.min_size, min(self.max_size, size))

    def scale_ranked(self, ranked: RankedList) -> List[RenderedTag]:
        """Вычисляет размеры шрифта для всех отобранных слов в порядке отображения."""
        if not ranked.entries:
            return []
        if ranked.max_count == ranked.min_count:
            logger.debug(f"Все отобранные слова одинаково частые, размер шрифта {self.uniform_size}")
        return [
            RenderedTag(entry.word, entry.count, self.scale(entry.count, ranked.min_count, ranked.max_count))
            for entry in ranked.entries
        ]
