"""
Модуль для построения облака тегов из текстового файла

Связывает компоненты в один пайплайн:
текст → отрезки → частоты → N самых частых слов → размеры шрифта → HTML.
Здесь же находится граница ввода-вывода: чтение входного файла
и атомарная запись результата.
"""

import os
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional, Union
from .config import Config, config
from .components.tokenizer import SeparatorTokenizer
from .components.frequency_analyzer import FrequencyAnalyzer
from .components.ranker import FrequencyRanker
from .components.font_scaler import FontScaler
from .components.renderer import HtmlTagCloudRenderer
from .exceptions import InputUnavailableError, OutputUnavailableError
from .interfaces.tag_cloud import TagCloud
import logging

logger = logging.getLogger(__name__)


class TagCloudGenerator:
    """Строит облако тегов по тексту документа"""

    def __init__(self,
                 tokenizer: Optional[SeparatorTokenizer] = None,
                 ranker: Optional[FrequencyRanker] = None,
                 font_scaler: Optional[FontScaler] = None,
                 renderer: Optional[HtmlTagCloudRenderer] = None,
                 encoding: Optional[str] = None):
        """Инициализация генератора (по умолчанию компоненты настраиваются из config)"""
        self.tokenizer = tokenizer or SeparatorTokenizer()
        self.ranker = ranker or FrequencyRanker()
        self.font_scaler = font_scaler or FontScaler()
        self.encoding = encoding or config.get_encoding()
        # Объявленная на странице кодировка совпадает с кодировкой записи
        self.renderer = renderer or HtmlTagCloudRenderer(encoding=self.encoding)

    @classmethod
    def from_config(cls, settings: Config) -> "TagCloudGenerator":
        """Создаёт генератор, все компоненты которого настроены из settings"""
        return cls(
            tokenizer=SeparatorTokenizer(settings.get_separators()),
            font_scaler=FontScaler(
                min_size=settings.get_min_font_size(),
                max_size=settings.get_max_font_size(),
                uniform_size=settings.get_uniform_font_size(),
            ),
            renderer=HtmlTagCloudRenderer(
                stylesheets=settings.get_stylesheets(),
                css_class_prefix=settings.get_css_class_prefix(),
                encoding=settings.get_encoding(),
            ),
            encoding=settings.get_encoding(),
        )

    def read_lines(self, input_path: Union[str, Path]) -> List[str]:
        """
        Читает входной файл целиком, построчно.

        Raises:
            InputUnavailableError: файл не удалось открыть или прочитать
        """
        input_path = Path(input_path)
        try:
            with open(input_path, 'r', encoding=self.encoding, newline='') as infile:
                lines = list(infile)
        except (OSError, UnicodeDecodeError) as e:
            raise InputUnavailableError(input_path, e) from e
        logger.info(f"Прочитано строк: {len(lines)} из {input_path}")
        return lines

    def build_cloud(self, lines: Iterable[str], count: int, source_name: str = "text") -> TagCloud:
        """
        Строит облако тегов по строкам текста.

        Args:
            lines: Строки текста
            count: Сколько слов включить в облако
            source_name: Название источника для заголовка страницы

        Returns:
            Облако тегов в алфавитном порядке
        """
        analyzer = FrequencyAnalyzer(tokenizer=self.tokenizer)
        analyzer.count_lines(lines)
        stats = analyzer.get_frequency_statistics()
        logger.info(f"Слов в тексте: {stats['total_words']}, уникальных: {stats['unique_words']}")

        ranked = self.ranker.select_top_n(analyzer.frequencies(), count)
        return TagCloud(
            tags=self.font_scaler.scale_ranked(ranked),
            source_name=source_name,
            max_count=ranked.max_count,
            min_count=ranked.min_count,
            total_words=stats['total_words'],
            unique_words=stats['unique_words'],
            diagnostics=list(ranked.diagnostics),
        )

    def build_cloud_from_text(self, text: str, count: int, source_name: str = "text") -> TagCloud:
        """Строит облако тегов по строке текста."""
        return self.build_cloud(self.tokenizer.lines(text), count, source_name)

    def write_page(self, html: str, output_path: Union[str, Path]) -> Path:
        """
        Записывает страницу атомарно: сначала во временный файл рядом
        с целевым, затем переименовывает его.

        Raises:
            OutputUnavailableError: файл не удалось создать или записать
        """
        output_path = Path(output_path)
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent)
            with os.fdopen(fd, 'w', encoding=self.encoding) as outfile:
                outfile.write(html)
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, output_path)
        except (OSError, UnicodeEncodeError) as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise OutputUnavailableError(output_path, e) from e
        logger.info(f"Облако тегов сохранено: {output_path}")
        return output_path

    def generate(self, input_path: Union[str, Path], output_path: Union[str, Path], count: int) -> TagCloud:
        """
        Полный цикл: читает input_path, строит облако из count слов
        и записывает HTML-страницу в output_path.

        Returns:
            Построенное облако тегов
        """
        lines = self.read_lines(input_path)
        cloud = self.build_cloud(lines, count, source_name=str(input_path))
        self.write_page(self.renderer.render(cloud), output_path)
        return cloud
