class ProductsAssert:

    @staticmethod
    def product_count_greater_than(actual_count: int, min_count: int):
        assert actual_count > min_count, f"期望商品数量大于：{min_count}，实际商品数量：{actual_count}"

    @staticmethod
    def column_not_empty(names: list):
        assert names, "商品信息list为空"
        for name in names:
            assert name.strip(), "存在商品信息为空"

    @staticmethod
    def names_contain(names: list, keyword: str):
        """搜索结果至少有一个商品名包含关键字"""
        assert any(keyword.lower() in name.lower() for name in names), f"搜索结果中没有包含{keyword}的商品：{names}"
