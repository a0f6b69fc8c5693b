"""
Тесты для компонента HtmlTagCloudRenderer.
"""

from bs4 import BeautifulSoup
from tag_cloud.components.renderer import HtmlTagCloudRenderer
from tag_cloud.interfaces.tag_cloud import RenderedTag, TagCloud


def _cloud(tags, source="sample.txt"):
    counts = [t.count for t in tags]
    return TagCloud(
        tags=tags,
        source_name=source,
        max_count=max(counts) if counts else None,
        min_count=min(counts) if counts else None,
    )


class TestHtmlTagCloudRenderer:
    """Тесты для HtmlTagCloudRenderer."""

    def test_spans(self):
        """Тест разметки слов облака."""
        cloud = _cloud([RenderedTag("cat", 2, 35), RenderedTag("mat", 1, 11), RenderedTag("the", 3, 48)])
        soup = BeautifulSoup(HtmlTagCloudRenderer().render(cloud), "html.parser")
        spans = soup.select("div.cdiv p.cbox span")

        assert [s.get_text() for s in spans] == ["cat", "mat", "the"]
        assert [s["class"] for s in spans] == [["f35"], ["f11"], ["f48"]]
        assert [s["title"] for s in spans] == ["count: 2", "count: 1", "count: 3"]
        assert all(s["style"] == "cursor:default" for s in spans)

    def test_page_structure(self):
        """Тест заголовка и подключения стилей."""
        renderer = HtmlTagCloudRenderer(stylesheets=["tagcloud.css"])
        html = renderer.render(_cloud([RenderedTag("word", 1, 48)], source="book.txt"))
        soup = BeautifulSoup(html, "html.parser")

        assert html.startswith("<!DOCTYPE html>")
        assert soup.title.get_text() == "Top 1 words in book.txt"
        assert soup.h2.get_text() == "Top 1 words in book.txt"
        assert soup.find("hr") is not None
        links = soup.find_all("link")
        assert [link["href"] for link in links] == ["tagcloud.css"]
        assert links[0]["rel"] == ["stylesheet"]

    def test_default_stylesheets(self):
        """Тест стилей по умолчанию из конфигурации."""
        renderer = HtmlTagCloudRenderer()
        assert "tagcloud.css" in renderer.stylesheets

    def test_empty_cloud(self):
        """Тест: пустое облако даёт полную страницу без слов."""
        soup = BeautifulSoup(HtmlTagCloudRenderer().render(_cloud([])), "html.parser")
        assert soup.find("p", class_="cbox") is not None
        assert soup.find_all("span") == []
        assert soup.title.get_text() == "Top 0 words in sample.txt"

    def test_escaping(self):
        """Тест экранирования: слово с угловыми скобками остаётся текстом."""
        cloud = _cloud([RenderedTag("<b>&", 1, 48)], source='"quoted" <file>')
        html = HtmlTagCloudRenderer().render(cloud)
        soup = BeautifulSoup(html, "html.parser")

        assert "<b>&" not in html
        assert soup.find("b") is None
        assert soup.find("span").get_text() == "<b>&"

    def test_css_class_prefix(self):
        """Тест собственного префикса класса."""
        renderer = HtmlTagCloudRenderer(css_class_prefix="size-")
        soup = BeautifulSoup(renderer.render(_cloud([RenderedTag("x", 1, 20)])), "html.parser")
        assert soup.find("span")["class"] == ["size-20"]

    def test_declared_charset(self):
        """Тест: в <meta charset> объявляется кодировка рендерера."""
        default = BeautifulSoup(HtmlTagCloudRenderer(encoding="utf-8").render(_cloud([])), "html.parser")
        assert default.find("meta")["charset"] == "utf-8"

        renderer = HtmlTagCloudRenderer(encoding="cp1251")
        soup = BeautifulSoup(renderer.render(_cloud([RenderedTag("мир", 1, 48)])), "html.parser")
        assert soup.find("meta")["charset"] == "cp1251"
