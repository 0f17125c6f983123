import textwrap
from pathlib import Path

import pytest

PAGING_ARTICLE = """\
---
authors: [tom]
title: "Paging with Spring Boot"
categories: ["Spring Boot"]
date: 2021-10-05 06:00:00 +1000
modified: 2021-10-06 06:00:00 +1000
excerpt: "Paging made simple with Spring Data."
image: images/stock/0101-paging-1200x628.jpg
url: spring-boot-paging
---

Spring Data supports **paging** out of the box.

{{% info title="Example Code" %}}
The example code is on [GitHub](https://github.com/example).
{{% /info %}}

```java
Page<Character> findAll(Pageable pageable);
```

{{% image alt="Paging" src="images/posts/paging.png" %}}
"""

FLAGS_ARTICLE = """\
---
authors: [pratik]
title: "Feature Flags with LaunchDarkly"
categories: ["Node"]
date: 2022-03-15 00:00:00 +1100
excerpt: "Roll out features safely."
image: images/stock/0104-on-off-1200x628.jpg
url: nodejs-feature-flags
---

Feature flags decouple deployment from release.

```json
{"flag": true}
```
"""


@pytest.fixture
def write_article(tmp_path):
    """Write an article into tmp_path/content and return its path."""
    content_dir = tmp_path / "content"
    content_dir.mkdir(exist_ok=True)

    def _write(name: str, text: str) -> Path:
        path = content_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def corpus(tmp_path, write_article):
    """A small clean corpus with two articles."""
    write_article("2021-10-05-spring-boot-paging.md", PAGING_ARTICLE)
    write_article("2022-03-15-nodejs-feature-flags.md", FLAGS_ARTICLE)
    return tmp_path / "content"


@pytest.fixture
def netlify_toml(tmp_path):
    path = tmp_path / "netlify.toml"
    path.write_text(
        textwrap.dedent(
            """\
            [build]
              publish = "public"

            [[redirects]]
              from = "/feed.xml"
              to = "/index.xml"
              status = 301
              force = true

            [[redirects]]
              from = "/spring-data-mvc-pagination"
              to = "/spring-boot-paging"
              status = 301
              force = true
            """
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def config_file(tmp_path, corpus, netlify_toml):
    path = tmp_path / "blogcorpus.yaml"
    path.write_text(
        textwrap.dedent(
            """\
            content_dir: content
            netlify_toml: netlify.toml
            site:
              base_url: https://example.org/
              image_formats:
                teaser_prefix: /thumbs/
                teaser_suffix: -teaser
            """
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("BLOGCORPUS_CONFIG", raising=False)
    monkeypatch.delenv("BLOGCORPUS_BASE_URL", raising=False)
    yield
