class LoginAssert:

    @staticmethod
    def error_message(actual_msg: str, expect_msg: str):
        """登录失败提示必须与页面文案完全一致"""
        assert actual_msg.strip() == expect_msg, f"登录错误期望提示信息：{expect_msg}，登录错误实际提示信息：{actual_msg}"

    @staticmethod
    def error_visible(visible: bool):
        assert visible, "提交错误账号后未显示登录错误提示"
