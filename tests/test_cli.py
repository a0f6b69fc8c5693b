"""
Тесты для интерфейса командной строки.
"""

import json

import pytest
from bs4 import BeautifulSoup
from tag_cloud import cli


def _spans(path):
    soup = BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")
    return [span.get_text() for span in soup.find_all("span")]


class TestCli:
    """Тесты для cli.main."""

    def test_arguments(self, input_file, temp_directory, capsys):
        """Тест запуска с аргументами."""
        output = temp_directory / "cloud.html"
        assert cli.main([str(input_file), str(output), "-n", "3"]) == 0
        assert _spans(output) == ["cat", "mat", "the"]
        assert "Слов в облаке: 3" in capsys.readouterr().out

    def test_interactive_prompts(self, input_file, temp_directory, monkeypatch):
        """Тест интерактивного ввода недостающих параметров."""
        output = temp_directory / "cloud.html"
        answers = iter([str(input_file), str(output), "abc", "-2", "2"])
        monkeypatch.setattr("builtins.input", lambda _prompt: next(answers))

        assert cli.main([]) == 0
        assert _spans(output) == ["cat", "the"]

    def test_interactive_default_count(self, input_file, temp_directory, monkeypatch):
        """Тест: пустой ответ на вопрос о количестве берёт значение из конфигурации."""
        output = temp_directory / "cloud.html"
        monkeypatch.setattr("builtins.input", lambda _prompt: "")

        assert cli.main([str(input_file), str(output)]) == 0
        assert len(_spans(output)) == 6

    def test_missing_input_file(self, temp_directory, capsys):
        """Тест: ошибка ввода-вывода даёт код 1."""
        output = temp_directory / "cloud.html"
        assert cli.main([str(temp_directory / "missing.txt"), str(output), "-n", "3"]) == 1
        assert "missing.txt" in capsys.readouterr().out
        assert not output.exists()

    def test_count_exceeds_corpus_is_reported(self, input_file, temp_directory, capsys):
        """Тест: диагностика выводится, запуск успешен."""
        output = temp_directory / "cloud.html"
        assert cli.main([str(input_file), str(output), "-n", "50"]) == 0
        assert "requested count exceeds" in capsys.readouterr().out
        assert len(_spans(output)) == 6

    def test_negative_count_rejected(self, input_file, temp_directory):
        """Тест: отрицательное количество даёт ошибку разбора аргументов."""
        with pytest.raises(SystemExit) as exc_info:
            cli.main([str(input_file), str(temp_directory / "cloud.html"), "-n", "-1"])
        assert exc_info.value.code == 2

    def test_export(self, input_file, temp_directory):
        """Тест дополнительного экспорта."""
        output = temp_directory / "cloud.html"
        export_path = temp_directory / "cloud.json"
        assert cli.main([
            str(input_file), str(output), "-n", "3",
            "--export", "json", "--export-path", str(export_path),
        ]) == 0
        data = json.loads(export_path.read_text(encoding="utf-8"))
        assert [tag["word"] for tag in data["tags"]] == ["cat", "mat", "the"]

    def test_config_option(self, input_file, temp_directory):
        """Тест явного файла конфигурации."""
        cfg_path = temp_directory / "custom.yaml"
        cfg_path.write_text("tag_cloud:\n  html:\n    css_class_prefix: \"size\"\n", encoding="utf-8")
        output = temp_directory / "cloud.html"

        assert cli.main([str(input_file), str(output), "-n", "1", "--config", str(cfg_path)]) == 0
        soup = BeautifulSoup(output.read_text(encoding="utf-8"), "html.parser")
        assert soup.find("span")["class"] == ["size48"]

    def test_closed_stdin(self, temp_directory, monkeypatch, capsys):
        """Тест: закрытый stdin в интерактивном режиме даёт код 1 без трассировки."""
        def _eof(_prompt):
            raise EOFError

        monkeypatch.setattr("builtins.input", _eof)
        assert cli.main([]) == 1
        assert "❌" in capsys.readouterr().out

    def test_interrupted_prompt(self, input_file, temp_directory, monkeypatch):
        """Тест: Ctrl+C на вопросе о количестве слов."""
        def _interrupt(_prompt):
            raise KeyboardInterrupt

        monkeypatch.setattr("builtins.input", _interrupt)
        output = temp_directory / "cloud.html"
        assert cli.main([str(input_file), str(output)]) == 1
        assert not output.exists()

    def test_missing_config_file(self, input_file, temp_directory, capsys):
        """Тест: явно указанный несуществующий config сообщается как ошибка."""
        output = temp_directory / "cloud.html"
        missing = temp_directory / "missing.yaml"

        assert cli.main([str(input_file), str(output), "-n", "3", "--config", str(missing)]) == 1
        assert "missing.yaml" in capsys.readouterr().out
        assert not output.exists()
