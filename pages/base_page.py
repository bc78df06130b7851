import re

from playwright.sync_api import Page, Locator, expect


class BasePage:

    def __init__(self, page: Page):
        self.page = page

    # ========= 定位 =========
    def locate(self, definition: tuple) -> Locator:
        """按 config/locators.py 的定位策略生成 Locator，每次调用重新解析"""
        strategy, *args = definition
        if strategy == "role":
            role, name, *exact = args
            return self.page.get_by_role(role, name=name, exact=bool(exact and exact[0]))
        if strategy == "css":
            return self.page.locator(args[0])
        raise ValueError(f"未知定位策略：{strategy}")

    # ========= 基础动作 =========
    def open(self, url: str):
        self.page.goto(url)

    def click(self, locator: Locator):
        locator.scroll_into_view_if_needed()
        locator.click()

    def fill(self, locator: Locator, value: str):
        locator.fill(value)

    def text(self, locator: Locator) -> str:
        return locator.inner_text()

    def get_texts(self, locator: Locator) -> list[str]:
        return [locator.nth(i).inner_text() for i in range(locator.count())]

    def get_count(self, locator: Locator) -> int:
        return locator.count()

    # ========= 等待 =========
    def wait_visible(self, locator: Locator):
        expect(locator).to_be_visible()  # expect 严格模式：多个元素时请先 .first

    def wait_url(self, pattern: str):
        expect(self.page).to_have_url(re.compile(pattern))

    def wait_title(self, pattern: str):
        expect(self.page).to_have_title(re.compile(pattern))
