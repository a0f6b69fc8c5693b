"""
Компонент для экспорта облака тегов.

Отвечает за выгрузку слов облака (слово, частота, размер шрифта)
в CSV, JSON и Excel с временными метками.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union
import pandas as pd
from ..config import Config, config
from ..exceptions import OutputUnavailableError
from ..interfaces.tag_cloud import ResultExporterInterface, TagCloud
import logging

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ('csv', 'json', 'xlsx')


class ResultExporter(ResultExporterInterface):
    """Экспортёр облака тегов."""

    def __init__(self, output_dir: Optional[Union[str, Path]] = None, filename_prefix: Optional[str] = None):
        """
        Инициализирует экспортёр.

        Args:
            output_dir: Папка для файлов с автоматическим именем (по умолчанию из config)
            filename_prefix: Префикс автоматического имени файла
        """
        self.output_dir = Path(output_dir or config.get_results_folder())
        self.filename_prefix = filename_prefix or config.get_results_filename_prefix()

    @classmethod
    def from_config(cls, settings: Config) -> "ResultExporter":
        return cls(settings.get_results_folder(), settings.get_results_filename_prefix())

    def to_dataframe(self, cloud: TagCloud) -> pd.DataFrame:
        """Таблица слов облака в порядке отображения."""
        return pd.DataFrame(
            [{'word': tag.word, 'count': tag.count, 'font_size': tag.font_size} for tag in cloud.tags],
            columns=['word', 'count', 'font_size'],
        )

    def _metadata(self, cloud: TagCloud) -> Dict[str, Any]:
        return {
            'timestamp': datetime.now().isoformat(),
            'source': cloud.source_name,
            'selection_size': cloud.selection_size,
            'max_count': cloud.max_count,
            'min_count': cloud.min_count,
            'total_words': cloud.total_words,
            'unique_words': cloud.unique_words,
            'diagnostics': list(cloud.diagnostics),
        }

    def _prepare_path(self, filepath: Union[str, Path], suffix: str) -> Path:
        filepath = Path(filepath)
        if filepath.suffix.lower() != suffix:
            if filepath.suffix:
                logger.warning(f"Расширение {filepath.suffix} не соответствует формату {suffix}, файл будет сохранён как {suffix}")
            filepath = filepath.with_suffix(suffix)
        try:
            filepath.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputUnavailableError(filepath, e) from e
        return filepath

    def export_to_csv(self, cloud: TagCloud, filepath: Union[str, Path]) -> Path:
        """
        Экспортирует облако в CSV (колонки word, count, font_size).

        Args:
            cloud: Облако тегов
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу
        """
        filepath = self._prepare_path(filepath, '.csv')
        try:
            self.to_dataframe(cloud).to_csv(filepath, index=False, encoding='utf-8')
        except OSError as e:
            raise OutputUnavailableError(filepath, e) from e
        logger.info(f"Облако экспортировано в CSV: {filepath}")
        return filepath

    def export_to_json(self, cloud: TagCloud, filepath: Union[str, Path]) -> Path:
        """
        Экспортирует облако в JSON с метаданными.

        Args:
            cloud: Облако тегов
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу
        """
        filepath = self._prepare_path(filepath, '.json')
        json_data = {
            'metadata': self._metadata(cloud),
            'tags': [
                {'word': tag.word, 'count': tag.count, 'font_size': tag.font_size}
                for tag in cloud.tags
            ],
        }
        try:
            with open(filepath, 'w', encoding='utf-8') as jsonfile:
                json.dump(json_data, jsonfile, ensure_ascii=False, indent=2)
        except OSError as e:
            raise OutputUnavailableError(filepath, e) from e
        logger.info(f"Облако экспортировано в JSON: {filepath}")
        return filepath

    def export_to_excel(self, cloud: TagCloud, filepath: Union[str, Path]) -> Path:
        """
        Экспортирует облако в Excel: лист слов и лист статистики.

        Args:
            cloud: Облако тегов
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу
        """
        filepath = self._prepare_path(filepath, '.xlsx')
        metadata = self._metadata(cloud)
        stats_df = pd.DataFrame({
            'Параметр': [
                'Источник',
                'Слов в облаке',
                'Максимальная частота',
                'Минимальная частота',
                'Всего слов в тексте',
                'Уникальных слов',
                'Дата экспорта',
            ],
            'Значение': [
                metadata['source'],
                metadata['selection_size'],
                metadata['max_count'] if metadata['max_count'] is not None else '',
                metadata['min_count'] if metadata['min_count'] is not None else '',
                metadata['total_words'],
                metadata['unique_words'],
                datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
            ],
        })
        try:
            with pd.ExcelWriter(filepath, engine='openpyxl') as writer:
                self.to_dataframe(cloud).to_excel(writer, sheet_name='Облако тегов', index=False)
                stats_df.to_excel(writer, sheet_name='Статистика', index=False)
        except OSError as e:
            raise OutputUnavailableError(filepath, e) from e
        logger.info(f"Облако экспортировано в Excel: {filepath}")
        return filepath

    def export(self, cloud: TagCloud, fmt: str, filepath: Optional[Union[str, Path]] = None) -> Path:
        """
        Экспортирует облако в указанный формат.

        Без filepath файл создаётся в output_dir с именем
        «<префикс>_<метка времени>.<формат>».
        """
        fmt = fmt.lower().lstrip('.')
        if fmt not in EXPORT_FORMATS:
            raise ValueError(f"Неизвестный формат экспорта: {fmt}")
        if filepath is None:
            timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
            filepath = self.output_dir / f"{self.filename_prefix}_{timestamp}.{fmt}"

        if fmt == 'csv':
            return self.export_to_csv(cloud, filepath)
        if fmt == 'json':
            return self.export_to_json(cloud, filepath)
        return self.export_to_excel(cloud, filepath)
