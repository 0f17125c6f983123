import pytest

from blogcorpus.parsing import ArticleLoader, load_article, load_paths, load_redirects


def test_load_article_fills_structures(corpus):
    article = load_article(corpus / "2021-10-05-spring-boot-paging.md")

    assert article.front_matter.title == "Paging with Spring Boot"
    assert article.body_line == 11
    assert [b.language for b in article.code_blocks] == ["java"]
    assert [s.name for s in article.shortcodes] == ["info", "info", "image"]
    assert article.code_blocks[0].line == 18


def test_loader_returns_sorted_articles(corpus):
    result = ArticleLoader(corpus).load()

    assert [a.path.name for a in result.articles] == [
        "2021-10-05-spring-boot-paging.md",
        "2022-03-15-nodejs-feature-flags.md",
    ]
    assert result.failures == []
    assert result.total_files == 2


def test_loader_collects_failures(corpus, write_article):
    write_article("2022-01-01-broken.md", "no front matter here\n")
    write_article("2022-01-02-bad-yaml.md", "---\ntitle: [oops\n---\n")

    result = ArticleLoader(corpus).load()

    assert len(result.articles) == 2
    assert sorted(f.path.name for f in result.failures) == [
        "2022-01-01-broken.md",
        "2022-01-02-bad-yaml.md",
    ]
    assert "Invalid YAML" in result.failures[1].error


def test_loader_can_skip_drafts(corpus, write_article):
    write_article("2022-05-01-draft.md", "---\ntitle: Draft\ndraft: true\n---\n")

    assert len(ArticleLoader(corpus).load().articles) == 3

    result = ArticleLoader(corpus, include_drafts=False).load()
    assert len(result.articles) == 2
    assert result.skipped_drafts == 1


def test_loader_keeps_quoted_false_drafts(corpus, write_article):
    write_article("2022-05-01-quoted.md", "---\ntitle: Quoted\ndraft: \"false\"\n---\n")

    result = ArticleLoader(corpus, include_drafts=False).load()
    assert len(result.articles) == 3
    assert result.skipped_drafts == 0


def test_loader_reports_impossible_dates(corpus, write_article):
    write_article("2022-05-01-bad-date.md", "---\ntitle: Bad\ndate: 2021-13-45\n---\n")

    result = ArticleLoader(corpus).load()
    assert len(result.articles) == 2
    assert "Invalid YAML" in result.failures[0].error


def test_loader_searches_nested_directories(corpus, write_article):
    write_article("2023/2023-01-01-nested.md", "---\ntitle: Nested\n---\n")

    names = [a.path.name for a in ArticleLoader(corpus).load().articles]
    assert "2023-01-01-nested.md" in names


def test_loader_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        ArticleLoader(tmp_path / "nope").load()


def test_load_paths_merges_without_duplicates(corpus):
    single = corpus / "2021-10-05-spring-boot-paging.md"
    result = load_paths([single, corpus])

    assert len(result.articles) == 2


def test_load_redirects(netlify_toml):
    redirects = load_redirects(netlify_toml)

    assert [r.source for r in redirects] == ["/feed.xml", "/spring-data-mvc-pagination"]
    assert all(r.force for r in redirects)


def test_load_redirects_without_table(tmp_path):
    path = tmp_path / "netlify.toml"
    path.write_text('[build]\npublish = "public"\n', encoding="utf-8")

    assert load_redirects(path) == []


def test_load_redirects_invalid_toml(tmp_path):
    path = tmp_path / "netlify.toml"
    path.write_text("[[redirects]\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid TOML"):
        load_redirects(path)


def test_load_redirects_missing_target(tmp_path):
    path = tmp_path / "netlify.toml"
    path.write_text('[[redirects]]\nfrom = "/a"\n', encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid redirect #1"):
        load_redirects(path)
