from playwright.sync_api import APIResponse

from api.api_helper import ApiHelper
from config.settings import API_ENDPOINTS
from data.user_data import UserData
from utils.common_utils import FORM_CONTENT_TYPE, to_form_body

FORM_HEADERS = {"Content-Type": FORM_CONTENT_TYPE}


class UserApi(ApiHelper):
    """账号相关接口，请求体统一为 form-urlencoded（显式覆盖默认的 JSON 头）"""

    def create_account(self, user: UserData) -> APIResponse:
        return self.post(API_ENDPOINTS["create_account"], to_form_body(user.as_form()), FORM_HEADERS)

    def verify_login(self, email: str, password: str) -> APIResponse:
        # 接口恒返回 200，结果看 message
        return self.post(API_ENDPOINTS["verify_login"],
                         to_form_body({"email": email, "password": password}), FORM_HEADERS)

    def delete_account(self, email: str, password: str) -> APIResponse:
        return self.delete(API_ENDPOINTS["delete_account"],
                           to_form_body({"email": email, "password": password}), FORM_HEADERS)

    def get_message(self, response: APIResponse) -> str:
        body = self.get_response_body(response)
        assert isinstance(body, dict) and "message" in body, f"响应体缺少message字段：{body}"
        return body["message"]
