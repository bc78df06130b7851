from data.login_data import LOGGED_IN_AS_MSG


class HomeAssert:

    @staticmethod
    def logged_in_as(actual_text: str, firstname: str):
        """导航栏显示 Logged in as <firstname>"""
        expect_text = LOGGED_IN_AS_MSG.format(firstname=firstname)
        assert expect_text in actual_text, f"登录用户名显示错误：期望{expect_text}，实际：{actual_text}"

    @staticmethod
    def logged_in(is_logged_in: bool, page_name: str):
        assert is_logged_in, f"{page_name}页面登录态丢失，未显示Logout"

    @staticmethod
    def logged_out(is_logged_in: bool):
        assert not is_logged_in, "Logout 后仍显示登录态"
