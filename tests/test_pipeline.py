import json

from blogcorpus.config import Config
from blogcorpus.pipeline import LintPipeline, PipelineStage


def test_stage_timing():
    stage = PipelineStage("lint", "Running lint checks")
    assert stage.duration == 0.0

    stage.start()
    stage.complete({"findings": 2})

    assert stage.success
    assert stage.stats == {"findings": 2}
    assert stage.duration >= 0.0


def test_stage_failure():
    stage = PipelineStage("articles", "Loading articles")
    stage.start()
    stage.fail("boom")

    assert not stage.success
    assert stage.error == "boom"


def test_pipeline_writes_reports(config_file, tmp_path, write_article):
    write_article("2021-02-02-unfinished.md", "---\ntitle: Unfinished\nurl: unfinished\nauthors: [tom]\ndate: 2021-02-02\nexcerpt: x\n---\nTBD\n")
    report_dir = tmp_path / "reports"

    pipeline = LintPipeline(Config(config_file), report_dir=report_dir, show_progress=False)
    report = pipeline.run()

    assert report is not None
    assert report.articles_checked == 3
    assert [f.code for f in report.findings] == ["placeholder"]
    assert all(stage.success for stage in pipeline.stages)
    assert pipeline._stage("redirects").stats == {"redirects": 2}

    data = json.loads((report_dir / "lint_report.json").read_text(encoding="utf-8"))
    assert data["counts"] == {"error": 0, "warning": 1, "info": 0}
    assert data["findings"][0]["path"].endswith("2021-02-02-unfinished.md")

    stats = json.loads((report_dir / "pipeline_stats.json").read_text(encoding="utf-8"))
    assert set(stats["stages"]) == {"config", "articles", "redirects", "lint", "report"}


def test_pipeline_with_explicit_paths(config_file, corpus):
    pipeline = LintPipeline(
        Config(config_file),
        paths=[corpus / "2021-10-05-spring-boot-paging.md"],
        show_progress=False,
    )
    report = pipeline.run()

    assert report.articles_checked == 1
    assert pipeline._stage("report").stats == {"files": []}


def test_pipeline_fails_on_missing_content(tmp_path):
    path = tmp_path / "blogcorpus.yaml"
    path.write_text("content_dir: nowhere\n", encoding="utf-8")

    pipeline = LintPipeline(Config(path), show_progress=False)

    assert pipeline.run() is None
    assert "Content directory not found" in pipeline._stage("articles").error
    assert pipeline._stage("redirects").start_time is None


def test_pipeline_fails_on_unknown_disabled_check(config_file):
    pipeline = LintPipeline(Config(config_file), disabled=["nope"], show_progress=False)

    assert pipeline.run() is None
    assert pipeline._stage("lint").error.startswith("Unknown check codes")


def test_pipeline_records_config_stage(config_file):
    pipeline = LintPipeline(Config(config_file), show_progress=False)
    pipeline.run()

    stage = pipeline._stage("config")
    assert stage.success
    assert stage.stats == {"path": str(config_file), "from_file": True}


def test_pipeline_fails_on_invalid_config(tmp_path):
    path = tmp_path / "blogcorpus.yaml"
    path.write_text("lint: [\n", encoding="utf-8")
    report_dir = tmp_path / "reports"

    pipeline = LintPipeline(Config(path), report_dir=report_dir, show_progress=False)

    assert pipeline.run() is None
    assert "Invalid YAML" in pipeline._stage("config").error
    assert pipeline._stage("articles").start_time is None

    stats = json.loads((report_dir / "pipeline_stats.json").read_text(encoding="utf-8"))
    assert stats["stages"]["config"]["success"] is False
    assert not (report_dir / "lint_report.json").exists()
