import re

from data.user_data import UserData, BIRTH_DAY_RANGE, BIRTH_MONTH_RANGE, BIRTH_YEAR_RANGE


class UserDataAssert:

    @staticmethod
    def fields_not_empty(user: UserData):
        for key, value in user.as_form().items():
            assert value.strip(), f"用户字段{key}为空"

    @staticmethod
    def email_format(email: str):
        assert re.match(r"^[^@\s]+@[^@\s]+\.[a-z]+$", email), f"邮箱格式错误：{email}"

    @staticmethod
    def birth_in_range(user: UserData):
        for value, (low, high), label in [(user.birth_date, BIRTH_DAY_RANGE, "日"),
                                          (user.birth_month, BIRTH_MONTH_RANGE, "月"),
                                          (user.birth_year, BIRTH_YEAR_RANGE, "年")]:
            assert value.isdigit(), f"出生{label}不是数字：{value}"
            assert low <= int(value) <= high, f"出生{label}超出范围[{low}, {high}]：{value}"
