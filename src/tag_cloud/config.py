"""
Модуль для работы с конфигурацией проекта

Функции:
- Загрузка config.yaml (+ профили: config.prod.yaml, config.test.yaml)
- ENV-переопределения (префикс TAG_CLOUD_, вложенность через __)
- Валидация параметров облака тегов
- Настройка логирования
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv
import logging
from datetime import datetime

logger = logging.getLogger(__name__)

ENV_PREFIX = 'TAG_CLOUD_'
ENV_PROFILE_KEY = 'TAG_CLOUD_ENV'

# Символы, разделяющие слова: пробельные и знаки препинания
DEFAULT_SEPARATORS = " \t\n\r\"()'!?{}-,.[]*"

DEFAULT_MIN_FONT_SIZE = 11
DEFAULT_MAX_FONT_SIZE = 48
DEFAULT_WORD_COUNT = 100


class Config:
    """Класс для работы с конфигурацией проекта"""

    def __init__(self, config_path: Optional[str] = None):
        """
        Инициализация конфигурации

        Args:
            config_path: Путь к файлу конфигурации
        """
        if config_path:
            self.config_path = Path(config_path)
            if not self.config_path.exists():
                logger.warning(f"Указанный файл конфигурации {self.config_path} не найден")
        else:
            # Ищем config.yaml в текущей директории и выше
            current_dir = Path.cwd()
            config_path = current_dir / "config.yaml"

            while not config_path.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                config_path = current_dir / "config.yaml"

            self.config_path = config_path

        self.config_data: Dict[str, Any] = {}

        # .env читаем до YAML, чтобы TAG_CLOUD_ENV из .env влиял на выбор профиля
        self._load_env()
        self._load_config()
        self._apply_env_overrides()
        self._validate()
        self._configure_logging_if_needed()

    def _load_env(self) -> None:
        """Загружает переменные окружения из .env файла"""
        try:
            load_dotenv()
            logger.debug("Переменные окружения загружены из .env (если есть)")
        except Exception as e:
            logger.error(f"Ошибка загрузки переменных окружения: {e}")

    def _resolve_config_path(self) -> Path:
        env = os.getenv(ENV_PROFILE_KEY, '').lower().strip()
        root = self.config_path.parent
        if env == 'production':
            candidate = root / 'config.prod.yaml'
        elif env == 'testing':
            candidate = root / 'config.test.yaml'
        else:
            return self.config_path
        if candidate.exists():
            return candidate
        return self.config_path

    def _load_config(self) -> None:
        """Загружает конфигурацию из YAML файла поверх значений по умолчанию"""
        self.config_data = self._get_default_config()
        self.config_path = self._resolve_config_path()
        if not self.config_path.exists():
            logger.debug(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
            return
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Ошибка загрузки конфигурации {self.config_path}: {e}")
            return
        if not isinstance(loaded, dict):
            logger.error(f"Конфигурация {self.config_path} должна быть словарём, получено: {type(loaded).__name__}")
            return
        self._merge(self.config_data, loaded)
        logger.info(f"Конфигурация загружена: {self.config_path}")

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (TAG_CLOUD_*)."""
        for key, val in os.environ.items():
            if not key.startswith(ENV_PREFIX) or key == ENV_PROFILE_KEY:
                continue
            tail = key[len(ENV_PREFIX):]
            # Вложенность разделяется двойным подчёркиванием
            dotted = tail.replace('__', '.').lower()
            # Пытаемся привести числа/булевы
            parsed: Any = val
            if val.lower() in ('true', 'false'):
                parsed = (val.lower() == 'true')
            else:
                try:
                    if '.' in val:
                        parsed = float(val)
                    else:
                        parsed = int(val)
                except ValueError:
                    parsed = val
            self._set_nested(self.config_data, dotted, parsed)
            logger.debug(f"ENV-переопределение: {dotted}={parsed!r}")
        if os.getenv(ENV_PROFILE_KEY):
            logger.info(f"Активирован профиль: {os.getenv(ENV_PROFILE_KEY)}")

    def _validate(self) -> None:
        """Проверяет диапазоны и исправляет некорректные значения."""
        min_font = self._as_int('tag_cloud.font.min_size', DEFAULT_MIN_FONT_SIZE)
        max_font = self._as_int('tag_cloud.font.max_size', DEFAULT_MAX_FONT_SIZE)
        if min_font < 1 or max_font < min_font:
            logger.warning(
                f"Некорректный диапазон шрифта [{min_font}, {max_font}]: "
                f"используется [{DEFAULT_MIN_FONT_SIZE}, {DEFAULT_MAX_FONT_SIZE}]"
            )
            min_font, max_font = DEFAULT_MIN_FONT_SIZE, DEFAULT_MAX_FONT_SIZE
            self._set_nested(self.config_data, 'tag_cloud.font.min_size', min_font)
            self._set_nested(self.config_data, 'tag_cloud.font.max_size', max_font)

        uniform = self.get('tag_cloud.font.uniform_size')
        if uniform is not None:
            try:
                uniform = int(uniform)
            except (TypeError, ValueError):
                uniform = None
            if uniform is None or not (min_font <= uniform <= max_font):
                logger.warning("uniform_size вне диапазона шрифта, используется максимальный размер")
                self._set_nested(self.config_data, 'tag_cloud.font.uniform_size', None)

        count = self._as_int('tag_cloud.default_count', DEFAULT_WORD_COUNT)
        if count < 0:
            logger.warning("default_count < 0, принудительно установлено в 0")
            self._set_nested(self.config_data, 'tag_cloud.default_count', 0)

        separators = self.get('tag_cloud.separators')
        if not isinstance(separators, str) or not separators:
            logger.warning("Набор разделителей пуст, используется набор по умолчанию")
            self._set_nested(self.config_data, 'tag_cloud.separators', DEFAULT_SEPARATORS)

    def _as_int(self, key: str, default: int) -> int:
        try:
            value = int(self.get(key, default))
        except (TypeError, ValueError):
            logger.warning(f"{key} не является целым числом, используется {default}")
            value = default
        self._set_nested(self.config_data, key, value)
        return value

    def _configure_logging_if_needed(self, force: bool = False) -> None:
        """Инициализирует/переинициализирует базовое логирование по config.

        Повторная конфигурация выполняется, если:
          - ранее не конфигурировалось, или
          - изменился уровень/формат/файл логирования, или
          - явно указан force=True
        """
        root = logging.getLogger()

        console_level_name = str(self.get_console_logging_level()).upper()
        file_level_name = str(self.get_file_logging_level()).upper()
        console_level = getattr(logging, console_level_name, logging.INFO)
        file_level = getattr(logging, file_level_name, logging.DEBUG)

        desired_fmt = self.get_logging_format()
        desired_file = self.get_logging_file() if self.is_logging_to_file_enabled() else None

        if getattr(root, "_tag_cloud_configured", False) and not force:
            if (
                getattr(root, "_tag_cloud_console_level", None) == console_level_name and
                getattr(root, "_tag_cloud_file_level", None) == file_level_name and
                getattr(root, "_tag_cloud_format", None) == desired_fmt and
                getattr(root, "_tag_cloud_file", None) == desired_file
            ):
                return

        handlers: List[logging.Handler] = []
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)

        if desired_file:
            self.cleanup_old_log_files()
            log_file = Path(desired_file)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setLevel(file_level)
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)
            except OSError as e:
                logger.debug(f"Не удалось открыть файл лога: {e}")

        root_level = min(console_level, file_level) if desired_file else console_level
        logging.basicConfig(level=root_level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_tag_cloud_configured", True)
        setattr(root, "_tag_cloud_console_level", console_level_name)
        setattr(root, "_tag_cloud_file_level", file_level_name)
        setattr(root, "_tag_cloud_format", desired_fmt)
        setattr(root, "_tag_cloud_file", desired_file)

    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        return {
            'tag_cloud': {
                'default_count': DEFAULT_WORD_COUNT,
                'separators': DEFAULT_SEPARATORS,
                'encoding': 'utf-8',
                'font': {
                    'min_size': DEFAULT_MIN_FONT_SIZE,
                    'max_size': DEFAULT_MAX_FONT_SIZE,
                    # Размер для случая, когда все отобранные слова одинаково частые
                    # (None = максимальный размер)
                    'uniform_size': None,
                },
                'html': {
                    'css_class_prefix': 'f',
                    'stylesheets': [
                        'http://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/projects/tag-cloud-generator/data/tagcloud.css',
                        'tagcloud.css',
                    ],
                },
            },
            'files': {
                'results_folder': "data/results",
                'results_filename_prefix': "tag_cloud",
            },
            'logging': {
                'level': "INFO",
                'format': "%(asctime)s - %(levelname)s - %(message)s",
                'log_to_file': False,
                'log_file': "logs/tag_cloud.log",
                'max_log_files': 10,
            },
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение конфигурации по ключу

        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию

        Returns:
            Значение параметра или default
        """
        try:
            value = self.config_data
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get_default_count(self) -> int:
        """Количество слов в облаке по умолчанию"""
        return int(self.get('tag_cloud.default_count', DEFAULT_WORD_COUNT))

    def get_separators(self) -> str:
        """Символы-разделители слов"""
        return self.get('tag_cloud.separators', DEFAULT_SEPARATORS)

    def get_encoding(self) -> str:
        """Кодировка входных и выходных файлов"""
        return self.get('tag_cloud.encoding', 'utf-8')

    def get_min_font_size(self) -> int:
        return int(self.get('tag_cloud.font.min_size', DEFAULT_MIN_FONT_SIZE))

    def get_max_font_size(self) -> int:
        return int(self.get('tag_cloud.font.max_size', DEFAULT_MAX_FONT_SIZE))

    def get_uniform_font_size(self) -> int:
        """Размер шрифта, когда минимальная и максимальная частоты совпадают"""
        uniform = self.get('tag_cloud.font.uniform_size')
        return self.get_max_font_size() if uniform is None else int(uniform)

    def get_css_class_prefix(self) -> str:
        return self.get('tag_cloud.html.css_class_prefix', 'f')

    def get_stylesheets(self) -> List[str]:
        """Ссылки на таблицы стилей для HTML-страницы"""
        stylesheets = self.get('tag_cloud.html.stylesheets', []) or []
        if isinstance(stylesheets, str):
            return [stylesheets]
        return list(stylesheets)

    def get_results_folder(self) -> str:
        """Получает папку для результатов экспорта"""
        return self.get('files.results_folder', "data/results")

    def get_results_filename_prefix(self) -> str:
        """Получает префикс для файлов результатов"""
        return self.get('files.results_filename_prefix', "tag_cloud")

    def get_console_logging_level(self) -> str:
        """Получает уровень логирования для консоли"""
        return self.get('logging.console_level', self.get('logging.level', "INFO"))

    def get_file_logging_level(self) -> str:
        """Получает уровень логирования для файла"""
        return self.get('logging.file_level', "DEBUG")

    def get_logging_format(self) -> str:
        """Получает формат логов"""
        return self.get('logging.format', "%(asctime)s - %(levelname)s - %(message)s")

    def is_logging_to_file_enabled(self) -> bool:
        """Проверяет, включено ли логирование в файл"""
        return bool(self.get('logging.log_to_file', False))

    def get_logging_file(self) -> str:
        """Получает путь к файлу логов ({timestamp} заменяется временной меткой)"""
        log_file_template = self.get('logging.log_file', "logs/tag_cloud.log")
        if "{timestamp}" in log_file_template:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            return log_file_template.replace("{timestamp}", timestamp)
        return log_file_template

    def get_max_log_files(self) -> int:
        """Получает максимальное количество файлов логов для хранения"""
        return int(self.get('logging.max_log_files', 10))

    def cleanup_old_log_files(self) -> None:
        """Удаляет старые файлы логов, оставляя только последние max_log_files"""
        logs_dir = Path(self.get('logging.log_file', "logs/tag_cloud.log")).parent
        if not logs_dir.exists():
            return

        log_files = list(logs_dir.glob("tag_cloud*.log"))
        max_files = self.get_max_log_files()
        if len(log_files) <= max_files:
            return

        # Самые новые в конце
        log_files.sort(key=lambda f: f.stat().st_mtime)
        for old_file in log_files[:-max_files]:
            try:
                old_file.unlink()
                logger.debug(f"Удален старый лог файл: {old_file}")
            except OSError as e:
                logger.debug(f"Не удалось удалить лог файл {old_file}: {e}")


# Глобальный экземпляр конфигурации
config = Config()
