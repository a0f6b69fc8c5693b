"""
Компонент для отбора самых частых слов.

Используются два порядка:
- ранговый: по убыванию частоты, при равенстве по алфавиту;
- порядок отображения: по алфавиту.
Первый служит для отбора N слов, второй для вывода отобранных.
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Mapping, Tuple
from ..interfaces.tag_cloud import FrequencyEntry, RankedList, RankerInterface, iter_entries

logger = logging.getLogger(__name__)

COUNT_EXCEEDS_CORPUS = "requested count exceeds available distinct words"


class OrderKind(Enum):
    """Порядок сортировки записей частотности."""
    RANK = "rank"
    DISPLAY = "display"


def rank_order_key(entry: FrequencyEntry) -> Tuple[int, str]:
    """Частота по убыванию, затем слово по возрастанию."""
    return (-entry.count, entry.word)


def display_order_key(entry: FrequencyEntry) -> str:
    return entry.word


_ORDER_KEYS: Dict[OrderKind, Callable[[FrequencyEntry], object]] = {
    OrderKind.RANK: rank_order_key,
    OrderKind.DISPLAY: display_order_key,
}


def sort_entries(entries, kind: OrderKind) -> List[FrequencyEntry]:
    """Возвращает новый список записей, упорядоченный по kind."""
    return sorted(entries, key=_ORDER_KEYS[kind])


class FrequencyRanker(RankerInterface):
    """Отбирает N самых частых слов для облака тегов."""

    def select_top_n(self, frequencies: Mapping[str, int], n: int) -> RankedList:
        """
        Отбирает n самых частых слов и упорядочивает их по алфавиту.

        Args:
            frequencies: Таблица «слово → частота»
            n: Сколько слов отобрать (n >= 0)

        Returns:
            Отобранные записи в порядке отображения и границы частот
        """
        if n < 0:
            raise ValueError(f"Количество слов не может быть отрицательным: {n}")

        ranked = sort_entries(iter_entries(frequencies), OrderKind.RANK)
        diagnostics: List[str] = []
        if n > len(ranked):
            message = f"{COUNT_EXCEEDS_CORPUS}: запрошено {n}, доступно {len(ranked)}"
            logger.warning(message)
            diagnostics.append(message)

        selection = ranked[:n]
        if not selection:
            return RankedList(entries=[], requested=n, diagnostics=diagnostics)

        # Границы берутся до пересортировки: первая запись самая частая
        max_count = selection[0].count
        min_count = selection[-1].count
        logger.debug(f"Отобрано {len(selection)} слов, частоты от {min_count} до {max_count}")

        return RankedList(
            entries=sort_entries(selection, OrderKind.DISPLAY),
            requested=n,
            max_count=max_count,
            min_count=min_count,
            diagnostics=diagnostics,
        )
