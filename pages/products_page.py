from playwright.sync_api import Page, Locator

from assertions.products_assert import ProductsAssert
from config.locators import PRODUCTS_LOCATORS
from config.settings import ROUTES
from pages.base_page import BasePage


class ProductsPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page)

    # ================= 定位 =================
    @property
    def _products_heading(self) -> Locator:
        return self.locate(PRODUCTS_LOCATORS["products_heading"])

    @property
    def _products_list(self) -> Locator:
        return self.locate(PRODUCTS_LOCATORS["products_list"])

    @property
    def _product_items(self) -> Locator:
        return self.locate(PRODUCTS_LOCATORS["product_item"])

    @property
    def _product_item_names(self) -> Locator:
        return self.locate(PRODUCTS_LOCATORS["product_item_name"])

    @property
    def _search_input(self) -> Locator:
        return self.locate(PRODUCTS_LOCATORS["search_input"])

    @property
    def _search_button(self) -> Locator:
        return self.locate(PRODUCTS_LOCATORS["search_button"])

    @property
    def _searched_heading(self) -> Locator:
        return self.locate(PRODUCTS_LOCATORS["searched_heading"])

    # ================= 页面行为 =================
    def goto(self):
        self.open(ROUTES["products"])

    def search_product(self, product_name: str):
        self.fill(self._search_input, product_name)
        self.click(self._search_button)

    # ================= 数据获取 =================
    def get_product_count(self) -> int:
        return self.get_count(self._product_items)

    def get_product_names(self) -> list[str]:
        return self.get_texts(self._product_item_names)

    # ========== 校验 ==========
    def verify_page_loaded(self):
        self.wait_visible(self._products_heading)
        self.wait_visible(self._products_list)

    def verify_products_displayed(self):
        self.wait_visible(self._product_items.first)
        ProductsAssert.product_count_greater_than(self.get_product_count(), 0)

    def verify_product_count_greater_than(self, min_count: int):
        self.wait_visible(self._product_items.first)
        ProductsAssert.product_count_greater_than(self.get_product_count(), min_count)

    def verify_search_results(self, keyword: str):
        self.wait_visible(self._searched_heading)
        self.wait_visible(self._product_items.first)
        names = self.get_product_names()
        ProductsAssert.column_not_empty(names)
        ProductsAssert.names_contain(names, keyword)
