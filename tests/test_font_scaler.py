"""
Тесты для компонента FontScaler.
"""

import pytest
from tag_cloud.components.font_scaler import FontScaler
from tag_cloud.interfaces.tag_cloud import FrequencyEntry, RankedList


class TestFontScaler:
    """Тесты для FontScaler."""

    def test_defaults(self):
        """Тест диапазона по умолчанию."""
        scaler = FontScaler()
        assert scaler.min_size == 11
        assert scaler.max_size == 48
        assert scaler.uniform_size == 48

    def test_scenario_sizes(self):
        """Тест сценария: max=3, min=1."""
        scaler = FontScaler(min_size=11, max_size=48)
        assert scaler.scale(3, 1, 3) == 48
        assert scaler.scale(2, 1, 3) == 35
        assert scaler.scale(1, 1, 3) == 11

    def test_equal_counts_use_uniform_size(self):
        """Тест: при max == min деления на ноль нет, размер фиксированный."""
        scaler = FontScaler(min_size=11, max_size=48)
        assert scaler.scale(1, 1, 1) == 48
        assert FontScaler(min_size=11, max_size=48, uniform_size=20).scale(7, 7, 7) == 20

    def test_bounds(self):
        """Тест: размер всегда в диапазоне [11, 48]."""
        scaler = FontScaler(min_size=11, max_size=48)
        for max_count in range(1, 30):
            for min_count in range(1, max_count + 1):
                for count in range(min_count, max_count + 1):
                    assert 11 <= scaler.scale(count, min_count, max_count) <= 48
                if max_count > min_count:
                    assert scaler.scale(max_count, min_count, max_count) == 48
                    assert scaler.scale(min_count, min_count, max_count) == 11

    def test_monotonic(self):
        """Тест: более частое слово не получает меньший шрифт."""
        scaler = FontScaler(min_size=11, max_size=48)
        sizes = [scaler.scale(count, 1, 100) for count in range(1, 101)]
        assert sizes == sorted(sizes)

    @pytest.mark.parametrize("count,min_count,max_count", [(0, 1, 3), (4, 1, 3), (2, 3, 1)])
    def test_invalid_arguments(self, count, min_count, max_count):
        """Тест частоты вне диапазона и перепутанных границ."""
        with pytest.raises(ValueError):
            FontScaler().scale(count, min_count, max_count)

    @pytest.mark.parametrize("kwargs", [
        {"min_size": 0, "max_size": 48},
        {"min_size": 50, "max_size": 48},
        {"min_size": 11, "max_size": 48, "uniform_size": 60},
    ])
    def test_invalid_configuration(self, kwargs):
        """Тест некорректных параметров."""
        with pytest.raises(ValueError):
            FontScaler(**kwargs)

    def test_scale_ranked(self):
        """Тест масштабирования отобранного списка."""
        ranked = RankedList(
            entries=[FrequencyEntry("cat", 2), FrequencyEntry("mat", 1), FrequencyEntry("the", 3)],
            requested=3,
            max_count=3,
            min_count=1,
        )
        tags = FontScaler(min_size=11, max_size=48).scale_ranked(ranked)
        assert [(t.word, t.count, t.font_size) for t in tags] == [("cat", 2, 35), ("mat", 1, 11), ("the", 3, 48)]

    def test_scale_ranked_empty(self):
        """Тест пустого списка."""
        assert FontScaler().scale_ranked(RankedList(entries=[], requested=0)) == []
