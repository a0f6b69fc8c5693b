"""
Компонент для рендеринга облака тегов в HTML.

Страница собирается через BeautifulSoup, что гарантирует корректное
экранирование слов и атрибутов.
"""

import logging
from typing import List, Optional
from bs4 import BeautifulSoup, Doctype
from ..config import config
from ..interfaces.tag_cloud import TagCloud, TagCloudRendererInterface, RenderedTag

logger = logging.getLogger(__name__)


class HtmlTagCloudRenderer(TagCloudRendererInterface):
    """Рендерер облака тегов в HTML-страницу."""

    def __init__(self, stylesheets: Optional[List[str]] = None, css_class_prefix: Optional[str] = None,
                 encoding: Optional[str] = None):
        """
        Args:
            stylesheets: Ссылки на CSS (по умолчанию из config)
            css_class_prefix: Префикс CSS-класса размера шрифта ("f" → "f35")
            encoding: Кодировка, объявляемая в <meta charset> (по умолчанию из config)
        """
        self.stylesheets = config.get_stylesheets() if stylesheets is None else list(stylesheets)
        self.css_class_prefix = config.get_css_class_prefix() if css_class_prefix is None else css_class_prefix
        self.encoding = encoding or config.get_encoding()

    def title_for(self, cloud: TagCloud) -> str:
        return f"Top {cloud.selection_size} words in {cloud.source_name}"

    def render(self, cloud: TagCloud) -> str:
        """
        Возвращает HTML-страницу облака тегов.

        Пустое облако даёт полноценную страницу без слов.
        """
        soup = BeautifulSoup("", "html.parser")
        soup.append(Doctype("html"))

        html = soup.new_tag("html")
        soup.append(html)

        head = soup.new_tag("head")
        html.append(head)
        meta = soup.new_tag("meta", attrs={"charset": self.encoding})
        head.append(meta)
        for href in self.stylesheets:
            head.append(soup.new_tag("link", attrs={"href": href, "rel": "stylesheet", "type": "text/css"}))
        title = soup.new_tag("title")
        title.string = self.title_for(cloud)
        head.append(title)

        body = soup.new_tag("body")
        html.append(body)
        heading = soup.new_tag("h2")
        heading.string = self.title_for(cloud)
        body.append(heading)
        body.append(soup.new_tag("hr"))

        container = soup.new_tag("div", attrs={"class": "cdiv"})
        body.append(container)
        box = soup.new_tag("p", attrs={"class": "cbox"})
        container.append(box)

        for tag in cloud.tags:
            box.append(self.render_tag(soup, tag))
            box.append("\n")

        logger.debug(f"Отрендерено слов: {cloud.selection_size}")
        return str(soup)

    def render_tag(self, soup: BeautifulSoup, tag: RenderedTag):
        """Создаёт <span> для одного слова облака."""
        span = soup.new_tag("span", attrs={
            "style": "cursor:default",
            "class": f"{self.css_class_prefix}{tag.font_size}",
            "title": f"count: {tag.count}",
        })
        span.string = tag.word
        return span
