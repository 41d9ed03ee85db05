"""分类渲染器测试"""
import pytest
from bs4 import BeautifulSoup

from news_daily.digest import (
    CATEGORIES,
    CardRenderer,
    CategoryRenderer,
    GenericItem,
    GenericRenderer,
    NewsletterItem,
    PaperItem,
    PriorityItem,
    ProjectCard,
)


def renderer_for(key: str):
    return next(c.renderer for c in CATEGORIES if c.key == key)


def soup_of(fragment: str) -> BeautifulSoup:
    return BeautifulSoup(fragment, "html.parser")


class TestEmptyCategories:
    @pytest.mark.parametrize("category", CATEGORIES, ids=lambda c: c.key)
    def test_empty_sequence_renders_empty_string(self, category):
        assert category.renderer.render([]) == ""


class TestPriorityRenderer:
    """核心洞察 / X 推文"""

    def test_single_insight_without_screenshot(self):
        items = [PriorityItem(title="A", author="@x", date="d1", summary="s1", link="https://e.com")]
        fragment = renderer_for("insights").render(items)
        soup = soup_of(fragment)

        blocks = soup.find_all("div", class_="priority")
        assert len(blocks) == 1
        assert soup.find("h3").get_text() == "1. A"
        meta = soup.find("div", class_="meta").get_text()
        assert "@x" in meta
        assert "d1" in meta
        assert soup.find("p").get_text() == "s1"
        assert soup.find("img") is None
        links = soup.find_all("a")
        assert len(links) == 1
        assert links[0]["href"] == "https://e.com"

    def test_screenshot_rendered_when_present(self):
        items = [PriorityItem(title="A", screenshot="/screenshots/a.png", link="https://e.com")]
        soup = soup_of(renderer_for("x_posts").render(items))

        img = soup.find("img", class_="screenshot")
        assert img["src"] == "/screenshots/a.png"
        assert img["alt"] == "A"

    def test_missing_link_omits_anchor(self):
        fragment = renderer_for("insights").render([PriorityItem(title="A")])

        assert "<a" not in fragment
        assert 'href=""' not in fragment
        assert 'src=""' not in fragment

    def test_numbering_follows_input_order(self):
        items = [PriorityItem(title=t) for t in ("first", "second", "third")]
        soup = soup_of(renderer_for("insights").render(items))

        headings = [h.get_text() for h in soup.find_all("h3")]
        assert headings == ["1. first", "2. second", "3. third"]

    def test_text_is_escaped(self):
        items = [PriorityItem(title="<b>A & B</b>", summary="x < y")]
        fragment = renderer_for("insights").render(items)

        assert "<b>" not in fragment
        assert "&lt;b&gt;A &amp; B&lt;/b&gt;" in fragment
        assert "x &lt; y" in fragment


class TestNewsletterAndPaperRenderer:
    def test_newsletter_block(self):
        items = [NewsletterItem(title="Latent Space", source="swyx", summary="s", link="https://latent.space/")]
        soup = soup_of(renderer_for("newsletters").render(items))

        assert soup.find("h3").get_text() == "1. Latent Space"
        assert soup.find("div", class_="meta").get_text() == "📰 来源: swyx"
        assert soup.find("a")["href"] == "https://latent.space/"
        assert soup.find("div", class_="priority") is None

    def test_paper_block(self):
        items = [PaperItem(title="P", authors="Stanford", summary="s", link="https://arxiv.org/x")]
        soup = soup_of(renderer_for("papers").render(items))

        assert soup.find("div", class_="meta").get_text() == "👤 Stanford"
        assert soup.find("a").get_text() == "📄 论文链接"

    def test_numbering_is_per_category(self):
        newsletter = renderer_for("newsletters").render([NewsletterItem(title="N")])
        paper = renderer_for("papers").render([PaperItem(title="P")])

        assert "<h3>1. N</h3>" in newsletter
        assert "<h3>1. P</h3>" in paper


class TestCardRenderer:
    """GitHub / 工具卡片"""

    def test_two_github_cards_are_individually_closed(self):
        items = [
            ProjectCard(name="A", description="d", stars="5", link="l"),
            ProjectCard(name="B", description="d2", stars="10", link="l2"),
        ]
        fragment = renderer_for("github").render(items)
        soup = soup_of(fragment)

        cards = soup.find_all("div", class_="card")
        assert len(cards) == 2
        assert fragment.count("<div") == fragment.count("</div>") == 2
        assert "grid" not in fragment
        assert cards[0].find("h4").get_text() == "1. A"
        assert cards[1].find("h4").get_text() == "2. B"
        assert "⭐ 10 Stars" in cards[1].get_text()
        assert cards[1].find("a")["href"] == "l2"

    def test_numeric_stars(self):
        fragment = renderer_for("github").render([ProjectCard(name="A", stars=5)])
        assert "⭐ 5 Stars" in fragment

    def test_tools_have_no_star_line(self):
        fragment = renderer_for("tools").render([ProjectCard(name="T", description="d", link="https://t.io")])
        soup = soup_of(fragment)

        assert "⭐" not in fragment
        assert soup.find("a").get_text() == "🔗 官网链接"


class TestGenericRenderer:
    def test_discord_meta_uses_source(self):
        items = [GenericItem(title="D", source="LangChain Discord", link="https://d.gg")]
        soup = soup_of(renderer_for("discord").render(items))

        assert soup.find("div", class_="meta").get_text() == "👤 来源: LangChain Discord"
        assert soup.find("a").get_text() == "🔗 原文链接"

    def test_reddit_meta_falls_back_to_author(self):
        items = [GenericItem(title="R", author="r/mlscaling", link="https://reddit.com/r")]
        soup = soup_of(renderer_for("reddit").render(items))

        assert soup.find("div", class_="meta").get_text() == "👤 Posted by: r/mlscaling"
        assert soup.find("a").get_text() == "🔗 Reddit 链接"

    def test_meta_omitted_without_source_or_author(self):
        fragment = renderer_for("discord").render([GenericItem(title="D", link="https://d.gg")])
        assert 'class="meta"' not in fragment

    @pytest.mark.parametrize("key", ["hn", "agent", "valley", "china"])
    def test_unlabelled_categories_have_no_meta(self, key):
        fragment = renderer_for(key).render([GenericItem(title="G", source="somewhere")])

        assert 'class="meta"' not in fragment
        assert "<h3>1. G</h3>" in fragment


class TestRendererBase:
    def test_link_text_is_escaped_for_every_renderer(self):
        card = CardRenderer("<b>官网</b>").render([ProjectCard(name="T", link="https://t.io")])
        generic = GenericRenderer(link_text="A & B").render([GenericItem(title="G", link="https://g.io")])

        assert "&lt;b&gt;官网&lt;/b&gt;</a>" in card
        assert "<b>" not in card
        assert ">A &amp; B</a>" in generic

    def test_subclass_without_render_item_cannot_be_created(self):
        class Incomplete(CategoryRenderer):
            pass

        with pytest.raises(TypeError):
            Incomplete()
