import logging
from pathlib import Path

from playwright.sync_api import sync_playwright

from config.settings import BASE_URL, BROWSER, HEADLESS, STORAGE_STATE_FILE

logger = logging.getLogger(__name__)


def save_session_state(base_url: str = BASE_URL, path: str = STORAGE_STATE_FILE) -> Path:
    """生成全局会话状态文件，每次测试运行执行一次
        单独执行该脚本命令：python -m scripts.save_session_state
    """
    state_file = Path(path)
    state_file.parent.mkdir(parents=True, exist_ok=True)  # 确保 .auth 目录存在

    with sync_playwright() as p:
        browser = getattr(p, BROWSER).launch(headless=HEADLESS)
        try:
            context = browser.new_context()
            page = context.new_page()
            page.goto(base_url)  # 打开站点建立会话
            context.storage_state(path=str(state_file))
            context.close()
        finally:
            browser.close()

    # 再次校验文件
    if not state_file.exists() or state_file.stat().st_size == 0:
        raise RuntimeError(f"‼️ 会话状态生成失败：{state_file}")
    logger.info("session state saved -> %s", state_file)
    return state_file


if __name__ == "__main__":
    print(f"✅ 会话状态已生成 -> {save_session_state()}")
