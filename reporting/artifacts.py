"""失败用例证据：截图、URL、console errors、视频、trace
目录结构：artifacts/<module>/<class>/<test>/attempt_N
"""
import json
import shutil
from pathlib import Path

import allure

ARTIFACTS_ROOT = Path("artifacts")
VIDEOS_ROOT = Path("videos")
TRACING_ROOT = Path("tracing")


def attempt_dir_name(attempt: int) -> str:
    return f"attempt_{attempt}"


def artifact_dir(item, attempt: int) -> Path:
    module = item.module.__name__.split(".")[-1]
    cls = item.cls.__name__ if item.cls else "no_class"
    return ARTIFACTS_ROOT / module / cls / item.name / attempt_dir_name(attempt)


def recording_dirs(attempt: int) -> tuple[Path, Path]:
    """本次 attempt 的 video、tracing 临时目录"""
    name = attempt_dir_name(attempt)
    video_dir, tracing_dir = VIDEOS_ROOT / name, TRACING_ROOT / name
    video_dir.mkdir(parents=True, exist_ok=True)
    tracing_dir.mkdir(parents=True, exist_ok=True)
    return video_dir, tracing_dir


def capture_failure_evidence(page, base_dir: Path):
    """hook 阶段：page 仍然可用，保存截图、URL、console errors"""
    base_dir.mkdir(parents=True, exist_ok=True)
    page.screenshot(path=base_dir / "failure.png", full_page=True)
    (base_dir / "url.txt").write_text(page.url, encoding="utf-8")
    (base_dir / "console_errors.json").write_text(
        json.dumps(getattr(page, "_console_errors", []), indent=2, ensure_ascii=False), encoding="utf-8")

    allure.attach.file(base_dir / "failure.png", name="Failure-Screenshot",
                       attachment_type=allure.attachment_type.PNG)
    allure.attach(page.url, name="Page-Url", attachment_type=allure.attachment_type.TEXT)


def collect_recordings(video_dir: Path, trace_path: Path, target_dir: Path):
    """teardown 阶段：context.close() 之后 video 才落盘，移动到 artifacts 并 attach"""
    target_dir.mkdir(parents=True, exist_ok=True)
    for video_file in video_dir.glob("*.webm"):
        shutil.move(str(video_file), target_dir / video_file.name)
    if trace_path.exists():
        shutil.move(str(trace_path), target_dir / "trace.zip")

    for video in target_dir.glob("*.webm"):
        allure.attach.file(video, name="Video", attachment_type=allure.attachment_type.WEBM)
    trace = target_dir / "trace.zip"
    if trace.exists():
        allure.attach.file(trace, name="Playwright-Trace.zip")


def discard_recordings(*dirs: Path):
    for d in dirs:
        shutil.rmtree(d, ignore_errors=True)


def describe_artifacts(target_dir: Path) -> dict:
    """补充到 attempt 记录中的附件信息"""
    url_file = target_dir / "url.txt"
    return {
        "has_screenshot": (target_dir / "failure.png").exists(),
        "has_video": any(target_dir.glob("*.webm")),
        "has_trace": (target_dir / "trace.zip").exists(),
        "url": url_file.read_text(encoding="utf-8") if url_file.exists() else None,
        "base_dir": str(target_dir),
    }
