#!/usr/bin/env python3
"""
Интерфейс командной строки для Tag Cloud

Строит HTML-облако из N самых частых слов текстового файла.
Недостающие параметры (входной файл, выходной файл, количество слов)
запрашиваются интерактивно.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from .components.exporter import ResultExporter
from .config import Config, config
from .exceptions import TagCloudError
from .generator import TagCloudGenerator
from .interfaces.tag_cloud import TagCloud


def _prompt(message: str) -> str:
    return input(message).strip()


def _prompt_count(default: int) -> int:
    """Запрашивает количество слов до получения неотрицательного целого."""
    while True:
        raw = _prompt(f"Сколько слов включить в облако? [{default}]: ")
        if not raw:
            return default
        try:
            count = int(raw)
        except ValueError:
            print("❌ Введите целое число.")
            continue
        if count < 0:
            print("❌ Количество слов не может быть отрицательным.")
            continue
        return count


def _non_negative_int(value: str) -> int:
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"не целое число: {value!r}")
    if count < 0:
        raise argparse.ArgumentTypeError("количество слов не может быть отрицательным")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tag-cloud",
        description="Tag Cloud - HTML-облако самых частых слов текста",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  python -m tag_cloud text.txt cloud.html -n 50
  python -m tag_cloud text.txt cloud.html -n 50 --export csv
  python -m tag_cloud                           # Интерактивный режим
        """
    )
    parser.add_argument('input', nargs='?', help='Входной текстовый файл')
    parser.add_argument('output', nargs='?', help='Выходной HTML-файл')
    parser.add_argument(
        '-n', '--count',
        type=_non_negative_int,
        help='Количество слов в облаке'
    )
    parser.add_argument(
        '--export',
        choices=['csv', 'json', 'xlsx'],
        help='Дополнительно экспортировать слова облака в указанный формат'
    )
    parser.add_argument(
        '--export-path',
        help='Путь для файла экспорта (по умолчанию папка результатов из config)'
    )
    parser.add_argument('--config', help='Путь к config.yaml')
    return parser


def _print_summary(cloud: TagCloud, output: str) -> None:
    print(f"\n📊 Слов в тексте: {cloud.total_words}, уникальных: {cloud.unique_words}")
    print(f"☁️  Слов в облаке: {cloud.selection_size}")
    if cloud.selection_size:
        print(f"🔢 Частоты: от {cloud.min_count} до {cloud.max_count}")
    for message in cloud.diagnostics:
        print(f"⚠️ {message}")
    print(f"✅ Облако тегов сохранено: {output}")


def main(argv: Optional[List[str]] = None) -> int:
    """Точка входа CLI; возвращает код завершения."""
    args = build_parser().parse_args(argv)

    if args.config and not Path(args.config).is_file():
        print(f"❌ Файл конфигурации не найден: {args.config}")
        return 1
    settings = Config(args.config) if args.config else config

    print("☁️  Tag Cloud - облако тегов")
    print("=" * 50)

    try:
        input_path = args.input or _prompt("Введите имя входного файла: ")
        output_path = args.output or _prompt("Введите имя выходного HTML-файла: ")
        count = args.count if args.count is not None else _prompt_count(settings.get_default_count())
    except (EOFError, KeyboardInterrupt):
        print("\n❌ Ввод прерван, облако не построено")
        return 1

    if not input_path or not output_path:
        print("❌ Не указан входной или выходной файл")
        return 1

    try:
        generator = TagCloudGenerator.from_config(settings)
        cloud = generator.generate(input_path, output_path, count)
        _print_summary(cloud, output_path)

        if args.export:
            exported = ResultExporter.from_config(settings).export(cloud, args.export, args.export_path)
            print(f"📁 Экспорт ({args.export}): {exported}")
    except TagCloudError as e:
        print(f"❌ {e}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
