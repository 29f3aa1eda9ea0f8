import json
import logging

from codeblog import build
from codeblog.settings import Settings
from tests.conftest import make_header, make_post


def write_posts(directory, posts):
    directory.mkdir(parents=True, exist_ok=True)
    for name, text in posts.items():
        (directory / name).write_text(text, encoding="utf-8")


def test_main_writes_manifest(tmp_path):
    content = tmp_path / "_posts"
    output = tmp_path / "out"
    write_posts(
        content,
        {
            "a.md": make_post(make_header(title="A", date="2024-01-10")),
            "b.md": make_post(make_header(title="B", date="2024-06-25")),
        },
    )

    code = build.main(
        ["--content-dir", str(content), "--output-dir", str(output), "--base-path", "/site"]
    )

    assert code == 0
    manifest = json.loads((output / "posts.json").read_text(encoding="utf-8"))
    assert manifest["basePath"] == "/site"
    assert manifest["slugs"] == ["b", "a"]
    assert [p["title"] for p in manifest["posts"]] == ["B", "A"]
    assert manifest["posts"][0]["coverImage"] == "/site/assets/blog/memory/cover.png"
    assert "content" not in manifest["posts"][0]


def test_main_check_only_writes_nothing(tmp_path):
    content = tmp_path / "_posts"
    output = tmp_path / "out"
    write_posts(content, {"a.md": make_post()})

    code = build.main(
        ["--content-dir", str(content), "--output-dir", str(output), "--check"]
    )

    assert code == 0
    assert not output.exists()


def test_main_fails_on_invalid_content(tmp_path, caplog):
    content = tmp_path / "_posts"
    output = tmp_path / "out"
    write_posts(
        content,
        {"good.md": make_post(), "bad.md": make_post(make_header(date="soon"))},
    )

    with caplog.at_level(logging.ERROR):
        code = build.main(["--content-dir", str(content), "--output-dir", str(output)])

    assert code == 1
    assert not output.exists()
    assert "bad.md" in caplog.text


def test_main_collect_errors_logs_every_error(tmp_path, caplog):
    content = tmp_path / "_posts"
    write_posts(
        content,
        {
            "a.md": make_post(make_header(title="")),
            "b.md": make_post(make_header(date="soon")),
        },
    )

    with caplog.at_level(logging.ERROR):
        code = build.main(
            [
                "--content-dir",
                str(content),
                "--output-dir",
                str(tmp_path / "out"),
                "--collect-errors",
            ]
        )

    assert code == 1
    assert "a.md" in caplog.text
    assert "b.md" in caplog.text
    assert "2 content error(s)" in caplog.text


def test_main_fails_when_content_dir_missing(tmp_path):
    code = build.main(["--content-dir", str(tmp_path / "nowhere")])

    assert code == 1


def test_run_with_empty_content_writes_empty_manifest(tmp_path):
    content = tmp_path / "_posts"
    content.mkdir()
    current = Settings(CONTENT_DIR=str(content), OUTPUT_DIR=str(tmp_path / "out"))

    assert build.run(current) == 0

    manifest = json.loads(current.manifest_path.read_text(encoding="utf-8"))
    assert manifest["slugs"] == []
    assert manifest["posts"] == []


def test_resolve_settings_keeps_unset_values():
    base = Settings(CONTENT_DIR="posts", BASE_PATH="/blog", COLLECT_ERRORS=False)
    args = build.parse_args(["--collect-errors"])

    resolved = build.resolve_settings(args, base)

    assert resolved.CONTENT_DIR == "posts"
    assert resolved.BASE_PATH == "/blog"
    assert resolved.COLLECT_ERRORS is True
    assert base.COLLECT_ERRORS is False
