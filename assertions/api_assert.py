class ApiAssert:

    @staticmethod
    def status_code(actual: int, expect: int, url: str = ""):
        assert actual == expect, f"接口{url}期望状态码：{expect}，实际状态码：{actual}"

    @staticmethod
    def message(actual_msg: str, expect_msg: str):
        assert actual_msg == expect_msg, f"接口期望message：{expect_msg}，实际message：{actual_msg}"

    @staticmethod
    def has_list(body: dict, key: str):
        """响应体包含 key 且值为 list"""
        assert key in body, f"响应体缺少字段{key}：{list(body)}"
        assert isinstance(body[key], list), f"字段{key}不是list：{type(body[key]).__name__}"

    @staticmethod
    def list_not_empty(body: dict, key: str):
        ApiAssert.has_list(body, key)
        assert len(body[key]) > 0, f"字段{key}为空list"

    @staticmethod
    def data_equal(actual, expect):
        assert actual == expect, f"期望数据：{expect}，实际数据：{actual}"
