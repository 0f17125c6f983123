import pytest

from blogcorpus.config import Config, ConfigModel, LintConfig, load_config, save_config


def test_defaults_without_file(tmp_path):
    config = Config(tmp_path / "missing.yaml")

    assert config.config == ConfigModel()
    assert config.content_dir == tmp_path / "content" / "blog"
    assert config.config.lint.allowed_languages == ["java", "js", "json", "yaml", "shell", "xml", "sql", "text"]


def test_relative_paths_resolve_against_config_file(config_file, tmp_path):
    config = Config(config_file)

    assert config.content_dir == tmp_path / "content"
    assert config.resolve(config.config.netlify_toml) == tmp_path / "netlify.toml"
    assert config.resolve(None) is None


def test_config_path_from_environment(config_file, monkeypatch):
    monkeypatch.setenv("BLOGCORPUS_CONFIG", str(config_file))
    assert Config().config_path == config_file


def test_base_url_environment_override(config_file, monkeypatch):
    config = Config(config_file)
    assert config.get_site_config().base_url == "https://example.org/"

    monkeypatch.setenv("BLOGCORPUS_BASE_URL", "https://preview.example.org")
    assert config.get_site_config().base_url == "https://preview.example.org"
    assert config.config.site.base_url == "https://example.org/"


def test_report_dir_is_created(tmp_path):
    path = tmp_path / "blogcorpus.yaml"
    path.write_text("report_dir: out/reports\n", encoding="utf-8")

    report_dir = Config(path).report_dir
    assert report_dir == tmp_path / "out" / "reports"
    assert report_dir.is_dir()


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "nested" / "blogcorpus.yaml"
    original = ConfigModel(content_dir="posts", lint=LintConfig(strict=True, placeholders=["XXX"]))

    save_config(original, path)

    assert load_config(path) == original


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "blogcorpus.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == ConfigModel()


def test_invalid_yaml(tmp_path):
    path = tmp_path / "blogcorpus.yaml"
    path.write_text("content_dir: [\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid YAML"):
        load_config(path)


def test_invalid_values(tmp_path):
    path = tmp_path / "blogcorpus.yaml"
    path.write_text("site:\n  summary_length: 0\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_lint_names_are_lowercased():
    config = LintConfig(allowed_languages=["Java", " Kotlin ", ""], known_shortcodes=["Image"])

    assert config.allowed_languages == ["java", "kotlin"]
    assert config.known_shortcodes == ["image"]


def test_empty_content_dir_is_rejected(tmp_path):
    path = tmp_path / "blogcorpus.yaml"
    path.write_text('content_dir: ""\n', encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config(path)
