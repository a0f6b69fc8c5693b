"""
Интерфейсы компонентов построения облака тегов.

Определяет абстрактные базовые классы и общие структуры данных,
обеспечивая единообразный API и возможность замены реализаций.
"""

from .tag_cloud import (
    TokenKind,
    Token,
    FrequencyEntry,
    RankedList,
    RenderedTag,
    TagCloud,
    TokenizerInterface,
    FrequencyAnalyzerInterface,
    RankerInterface,
    TagCloudRendererInterface,
    ResultExporterInterface,
    iter_entries,
)

__all__ = [
    'TokenKind',
    'Token',
    'FrequencyEntry',
    'RankedList',
    'RenderedTag',
    'TagCloud',
    'TokenizerInterface',
    'FrequencyAnalyzerInterface',
    'RankerInterface',
    'TagCloudRendererInterface',
    'ResultExporterInterface',
    'iter_entries',
]
