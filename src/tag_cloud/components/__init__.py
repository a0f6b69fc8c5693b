"""
Компоненты построения облака тегов.

Каждый компонент отвечает за одну конкретную задачу:
- SeparatorTokenizer - разбиение текста на слова и разделители
- FrequencyAnalyzer - подсчёт частотности
- FrequencyRanker - отбор самых частых слов
- FontScaler - вычисление размера шрифта
- HtmlTagCloudRenderer - рендеринг HTML-страницы
- ResultExporter - экспорт результатов
"""

from .tokenizer import SeparatorTokenizer
from .frequency_analyzer import FrequencyAnalyzer
from .ranker import FrequencyRanker, OrderKind, rank_order_key, display_order_key, sort_entries
from .font_scaler import FontScaler
from .renderer import HtmlTagCloudRenderer
from .exporter import ResultExporter, EXPORT_FORMATS

__all__ = [
    'SeparatorTokenizer',
    'FrequencyAnalyzer',
    'FrequencyRanker',
    'OrderKind',
    'rank_order_key',
    'display_order_key',
    'sort_entries',
    'FontScaler',
    'HtmlTagCloudRenderer',
    'ResultExporter',
    'EXPORT_FORMATS',
]
