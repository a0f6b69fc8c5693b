from pathlib import Path

import pytest


SCENARIO_TEXT = "the cat sat on the Mat. The CAT ran."

SAMPLE_TEXT = """It was the best of times, it was the worst of times,
it was the age of wisdom, it was the age of foolishness,
it was the epoch of belief, it was the epoch of incredulity,
it was the season of Light, it was the season of Darkness...
"""


@pytest.fixture
def temp_directory(tmp_path: Path) -> Path:
    """Временная директория для тестов.

    Возвращает уникальную директорию для каждого теста.
    """
    return tmp_path


@pytest.fixture(scope="session")
def sample_texts():
    """Наборы текстов для тестирования."""
    return {
        "scenario": SCENARIO_TEXT,
        "dickens": SAMPLE_TEXT,
        "empty": "",
        "uniform": "a b c",
    }


@pytest.fixture
def input_file(temp_directory: Path, sample_texts) -> Path:
    """Входной файл с текстом сценария."""
    path = temp_directory / "input.txt"
    path.write_text(sample_texts["scenario"], encoding="utf-8")
    return path


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")
