from pathlib import Path

from blogcorpus.config import ImageFormats, SiteConfig
from blogcorpus.models import Article, FrontMatter
from blogcorpus.site import absolute_url, article_links, opengraph_url, summarize, teaser_url


def test_absolute_url_joins_with_single_slash():
    assert absolute_url("https://reflectoring.io/", "/spring-boot-paging/") == "https://reflectoring.io/spring-boot-paging/"
    assert absolute_url("https://reflectoring.io", "book") == "https://reflectoring.io/book"


def test_image_variants_wrap_path():
    formats = ImageFormats(
        teaser_prefix="/assets/img/teaser/",
        teaser_suffix="-teaser",
        opengraph_prefix="/og/",
        opengraph_suffix=".png",
    )

    assert teaser_url("paging", formats) == "/assets/img/teaser/paging-teaser"
    assert opengraph_url("paging", formats) == "/og/paging.png"


def test_article_links():
    site = SiteConfig(base_url="https://example.org", image_formats=ImageFormats(opengraph_suffix="?og"))
    article = Article(
        path=Path("a.md"),
        front_matter=FrontMatter(url="/paging", image="/images/paging.jpg"),
    )

    assert article_links(article, site) == {
        "url": "https://example.org/paging/",
        "teaser": "https://example.org/images/paging.jpg",
        "opengraph": "https://example.org/images/paging.jpg?og",
    }


def test_article_links_without_url_or_image():
    links = article_links(Article(path=Path("a.md")), SiteConfig())
    assert links == {"url": None, "teaser": None, "opengraph": None}


def test_summarize_drops_code_and_markup():
    body = (
        "# Heading\n"
        "Spring **Data** makes [paging](https://example.org) easy.\n"
        "{{% info %}}\n"
        "```java\nignored code\n```\n"
        "> Quoted `inline` text.\n"
    )

    assert summarize(body) == "Heading Spring Data makes paging easy. Quoted inline text."


def test_summarize_cuts_to_word_count():
    body = " ".join(f"w{i}" for i in range(30))
    assert summarize(body, words=5) == "w0 w1 w2 w3 w4 ..."
    assert summarize("one two", words=5) == "one two"
