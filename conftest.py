import logging
import shutil
from pathlib import Path

import allure
import pytest
from playwright.sync_api import sync_playwright

from api.api_helper import ApiHelper
from api.user_api import UserApi
from config.settings import BASE_URL, BROWSER, HEADLESS, ARTIFACT_DIRS
from data.api_data import USER_CREATED_MSG, STATUS_OK
from data.user_data import generate_user_data
from reporting.artifacts import (artifact_dir, recording_dirs, attempt_dir_name, capture_failure_evidence,
                                 collect_recordings, discard_recordings, describe_artifacts)
from reporting.attempt_summary import attach_attempt_summary
from scripts.save_session_state import save_session_state
from utils.cleanup import delete_user_quietly

logger = logging.getLogger(__name__)


# ================== Session Fixtures ==================
@pytest.fixture(scope="session")
def playwright_instance():
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance):
    """浏览器只启动一次"""
    browser = getattr(playwright_instance, BROWSER).launch(headless=HEADLESS)
    yield browser
    browser.close()


@pytest.fixture(scope="session", autouse=True)
def clean_artifacts():
    """测试session启动前，清空artifacts、videos、tracing"""
    for path in ARTIFACT_DIRS:
        p = Path(path)
        if p.exists():
            shutil.rmtree(p)
        p.mkdir()


@pytest.fixture(scope="session")
def session_state() -> Path:
    """
     全局会话状态：整个运行只生成一次，所有 page context 只读复用
     生成失败直接报错，依赖它的用例全部 error
    """
    state_file = save_session_state()
    logger.info("session state ready: %s", state_file)
    return state_file


# ================== Function Fixtures ==================
@pytest.fixture(scope="function")
def context(browser, session_state, request):
    """
    每个测试方法一个全新 context
    - 都基于 session_state
    - 视频 + tracing 每个 attempt 单独目录，只保留失败用例的
    """
    attempt = getattr(request.node, "execution_count", 1)
    request.node._current_attempt = attempt
    video_dir, tracing_dir = recording_dirs(attempt)

    context = browser.new_context(
        base_url=BASE_URL,
        storage_state=str(session_state),
        record_video_dir=str(video_dir),
        record_video_size={"width": 1280, "height": 720})
    context.tracing.start(name=attempt_dir_name(attempt), screenshots=True, snapshots=True, sources=True)

    yield context

    trace_path = tracing_dir / "trace.zip"
    try:
        context.tracing.stop(path=trace_path)
    finally:
        context.close()  # close 之后 video 才真正写入磁盘

    if not getattr(request.node, "_failed", False):
        discard_recordings(video_dir, tracing_dir)
        return

    target_dir = artifact_dir(request.node, attempt)
    collect_recordings(video_dir, trace_path, target_dir)

    attempts = getattr(request.node, "_attempts", [])
    current = next((a for a in attempts if a["attempt"] == attempt), None)
    if current is not None:
        current.update(describe_artifacts(target_dir))

    if attempt == _max_attempts(request.node):
        attach_attempt_summary(attempts)


@pytest.fixture(scope="function")
def page(context):
    """每个测试方法一个新 page，收集 console error"""
    page = context.new_page()
    console_errors = []
    page.on(
        "console",
        lambda msg: console_errors.append({
            "type": msg.type,
            "text": msg.text,
            "location": str(msg.location)
        }) if msg.type == "error" else None
    )
    page._console_errors = console_errors
    yield page
    page.close()


@pytest.fixture(scope="function")
def api_request_context(playwright_instance):
    request_context = playwright_instance.request.new_context(base_url=BASE_URL)
    yield request_context
    request_context.dispose()


@pytest.fixture(scope="function")
def api_helper(api_request_context):
    return ApiHelper(api_request_context)


@pytest.fixture(scope="function")
def user_api(api_request_context):
    return UserApi(api_request_context)


@pytest.fixture(scope="function")
def test_user(user_api):
    """API 创建测试账号，用例结束后 best-effort 删除"""
    user = generate_user_data()
    with allure.step("Setup: Create test user via API"):
        response = user_api.create_account(user)
        user_api.verify_status_code(response, STATUS_OK)
        assert user_api.get_message(response) == USER_CREATED_MSG, f"测试账号创建失败：{user.email}"

    yield user

    with allure.step("Cleanup: Delete test user via API"):
        delete_user_quietly(user_api, user)


# ================== Pytest Hook：失败处理 ==================
def _max_attempts(item) -> int:
    return (getattr(item.config.option, "reruns", 0) or 0) + 1


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    记录每次 attempt 的结果；失败时保存截图、URL、Console errors
    video、trace 要等 context 关闭后才生成，放在 context fixture teardown 处理
    """
    outcome = yield
    rep = outcome.get_result()

    if rep.when != "call":
        return

    attempt = getattr(item, "execution_count", 1)
    if not hasattr(item, "_attempts"):
        item._attempts = []
    item._attempts.append({
        "attempt": attempt,
        "status": "FAILED" if rep.failed else "PASSED",
        "duration": round(rep.duration, 2),
        "error": str(rep.longrepr) if rep.failed else "",
        "url": None
    })

    if rep.passed:
        item._failed = False
        # 重试后通过：同样输出汇总，便于识别 flaky
        if any(a["status"] == "FAILED" for a in item._attempts):
            attach_attempt_summary(item._attempts)
        return

    item._failed = True  # 跨 fixture 通信：告诉 context 这是一次失败执行

    page = item.funcargs.get("page")
    if not page:
        if attempt == _max_attempts(item):
            attach_attempt_summary(item._attempts)
        return

    capture_failure_evidence(page, artifact_dir(item, attempt))
