from playwright.sync_api import Page, Locator

from assertions.home_assert import HomeAssert
from config.locators import HOME_LOCATORS
from config.settings import ROUTES
from data.login_data import HOME_PAGE_TITLE
from pages.base_page import BasePage
from pages.products_page import ProductsPage


class HomePage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)

    # ================= 定位 =================
    @property
    def _products_link(self) -> Locator:
        return self.locate(HOME_LOCATORS["products_link"])

    @property
    def _cart_link(self) -> Locator:
        return self.locate(HOME_LOCATORS["cart_link"])

    @property
    def _signup_login_link(self) -> Locator:
        return self.locate(HOME_LOCATORS["signup_login_link"])

    @property
    def _features_items_heading(self) -> Locator:
        return self.locate(HOME_LOCATORS["features_items_heading"])

    @property
    def _logged_in_as(self) -> Locator:
        return self.locate(HOME_LOCATORS["logged_in_as"])

    @property
    def _logout_link(self) -> Locator:
        return self.locate(HOME_LOCATORS["logout_link"])

    @property
    def _delete_account_link(self) -> Locator:
        return self.locate(HOME_LOCATORS["delete_account_link"])

    # ================= 页面行为 =================
    def goto(self):
        self.open(ROUTES["home"])

    def navigate_to_products(self) -> ProductsPage:
        self.click(self._products_link)
        self.wait_url(ROUTES["products"])
        return ProductsPage(self.page)

    def navigate_to_cart(self):
        self.click(self._cart_link)
        self.wait_url("/view_cart")

    def navigate_to_signup_login(self):
        from pages.login_page import LoginPage  # login_page 依赖 home_page

        self.click(self._signup_login_link)
        self.wait_url(ROUTES["login"])
        return LoginPage(self.page)

    def logout(self):
        from pages.login_page import LoginPage

        self.click(self._logout_link)
        self.wait_url(ROUTES["login"])
        return LoginPage(self.page)

    # ================= 状态查询 =================
    def is_logged_in(self) -> bool:
        return self._logout_link.is_visible()

    # ========== 校验 ==========
    def verify_page_title(self):
        self.wait_title(HOME_PAGE_TITLE)

    def verify_navigation_visible(self):
        self.wait_visible(self._products_link)
        self.wait_visible(self._cart_link)
        self.wait_visible(self._signup_login_link)

    def verify_featured_items_visible(self):
        self.wait_visible(self._features_items_heading)

    def verify_user_logged_in(self, firstname: str):
        self.wait_visible(self._logged_in_as)
        HomeAssert.logged_in_as(self.text(self._logged_in_as), firstname)
        self.wait_visible(self._logout_link)
        self.wait_visible(self._delete_account_link)
