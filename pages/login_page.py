from playwright.sync_api import Page, Locator

from assertions.login_assert import LoginAssert
from config.locators import LOGIN_LOCATORS
from config.settings import ROUTES
from pages.base_page import BasePage
from pages.home_page import HomePage


class LoginPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)

    # ================= 定位：登录表单 =================
    @property
    def _login_email_input(self) -> Locator:
        return self.locate(LOGIN_LOCATORS["login_email_input"])

    @property
    def _login_password_input(self) -> Locator:
        return self.locate(LOGIN_LOCATORS["login_password_input"])

    @property
    def _login_button(self) -> Locator:
        return self.locate(LOGIN_LOCATORS["login_button"])

    @property
    def _login_heading(self) -> Locator:
        return self.locate(LOGIN_LOCATORS["login_heading"])

    @property
    def _error_message(self) -> Locator:
        return self.locate(LOGIN_LOCATORS["error_msg"])

    # ================= 定位：注册表单 =================
    @property
    def _signup_name_input(self) -> Locator:
        return self.locate(LOGIN_LOCATORS["signup_name_input"])

    @property
    def _signup_email_input(self) -> Locator:
        return self.locate(LOGIN_LOCATORS["signup_email_input"])

    @property
    def _signup_button(self) -> Locator:
        return self.locate(LOGIN_LOCATORS["signup_button"])

    @property
    def _signup_heading(self) -> Locator:
        return self.locate(LOGIN_LOCATORS["signup_heading"])

    # ================= 页面行为：登录 =================
    def goto(self):
        self.open(ROUTES["login"])

    def fill_login_credentials(self, email: str, password: str):
        self.fill(self._login_email_input, email)
        self.fill(self._login_password_input, password)

    def submit_login(self) -> HomePage:
        """提交登录：成功后跳转首页，返回 HomePage"""
        self.click(self._login_button)
        return HomePage(self.page)

    def submit_login_expecting_error(self) -> "LoginPage":
        """提交错误账号：停留在登录页并显示错误提示"""
        self.click(self._login_button)
        self.wait_visible(self._error_message)
        return self

    def login(self, email: str, password: str) -> HomePage:
        self.fill_login_credentials(email, password)
        return self.submit_login()

    # ================= 页面行为：注册 =================
    def fill_signup_info(self, name: str, email: str):
        self.fill(self._signup_name_input, name)
        self.fill(self._signup_email_input, email)

    def submit_signup(self):
        self.click(self._signup_button)

    # ================= 数据获取 =================
    def get_login_failure_message(self) -> str:
        return self.text(self._error_message)

    def is_login_error_visible(self) -> bool:
        return self._error_message.is_visible()

    # ========== 校验 ==========
    def verify_login_form_visible(self):
        self.wait_visible(self._login_heading)
        self.wait_visible(self._login_email_input)
        self.wait_visible(self._login_password_input)

    def verify_signup_form_visible(self):
        self.wait_visible(self._signup_heading)
        self.wait_visible(self._signup_name_input)
        self.wait_visible(self._signup_email_input)

    def verify_login_error(self, expect_msg: str):
        self.wait_visible(self._error_message)
        LoginAssert.error_message(self.get_login_failure_message(), expect_msg)
