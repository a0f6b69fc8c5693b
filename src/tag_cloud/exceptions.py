"""
Исключения построения облака тегов.

Ошибки ввода-вывода фатальны для запуска и пробрасываются вызывающему
коду с указанием ресурса и причины. Алгоритмические пограничные случаи
(запрошено больше слов, чем есть в тексте; одинаковые частоты) ошибками
не являются и обрабатываются на месте.
"""

from pathlib import Path
from typing import Union


class TagCloudError(Exception):
    """Базовое исключение пакета."""


class ResourceUnavailableError(TagCloudError):
    """Файл недоступен для чтения или записи."""

    action = "обработать"

    def __init__(self, path: Union[str, Path], reason: Union[str, BaseException]):
        self.path = Path(path)
        if isinstance(reason, OSError) and reason.strerror:
            self.reason = reason.strerror
        else:
            self.reason = str(reason)
        super().__init__(f"Не удалось {self.action} файл {self.path}: {self.reason}")


class InputUnavailableError(ResourceUnavailableError):
    """Входной файл не удалось открыть или прочитать."""

    action = "прочитать"


class OutputUnavailableError(ResourceUnavailableError):
    """Выходной файл не удалось создать или записать."""

    action = "записать"
