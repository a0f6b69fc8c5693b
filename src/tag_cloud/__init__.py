"""
Tag Cloud - построение HTML-облака тегов по текстовому документу

Этот модуль предоставляет инструменты для:
- Разбиения текста на слова и разделители
- Подсчёта частотности слов
- Отбора N самых частых слов
- Рендеринга облака тегов в HTML
- Экспорта результатов в CSV/JSON/Excel
"""

__version__ = "0.1.0"

from .generator import TagCloudGenerator
from .interfaces.tag_cloud import TagCloud, RenderedTag, FrequencyEntry, RankedList
from .exceptions import TagCloudError, InputUnavailableError, OutputUnavailableError

__all__ = [
    "TagCloudGenerator",
    "TagCloud",
    "RenderedTag",
    "FrequencyEntry",
    "RankedList",
    "TagCloudError",
    "InputUnavailableError",
    "OutputUnavailableError",
]
