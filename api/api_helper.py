import json
import logging
from typing import Any, Optional

from playwright.sync_api import APIRequestContext, APIResponse

from assertions.api_assert import ApiAssert
from utils.common_utils import JSON_CONTENT_TYPE

logger = logging.getLogger(__name__)


class ApiHelper:
    """基于 Playwright APIRequestContext 的通用请求封装
    - 所有方法签名统一为 (url, body, headers)；GET/DELETE 不加默认头
    - POST/PUT/PATCH 默认 Content-Type: application/json，调用方 headers 同名 key 覆盖默认值
    - 不做重试、不做超时处理，沿用 Playwright 默认行为
    """

    def __init__(self, request: APIRequestContext):
        self.request = request

    # ========= 请求 =========
    def get(self, url: str, body: Any = None, headers: Optional[dict] = None) -> APIResponse:
        response = self.request.get(url, data=body, headers=headers)
        return self._log("GET", url, response)

    def post(self, url: str, body: Any = None, headers: Optional[dict] = None) -> APIResponse:
        response = self.request.post(url, data=body, headers=self._with_json_header(headers))
        return self._log("POST", url, response)

    def put(self, url: str, body: Any = None, headers: Optional[dict] = None) -> APIResponse:
        response = self.request.put(url, data=body, headers=self._with_json_header(headers))
        return self._log("PUT", url, response)

    def patch(self, url: str, body: Any = None, headers: Optional[dict] = None) -> APIResponse:
        response = self.request.patch(url, data=body, headers=self._with_json_header(headers))
        return self._log("PATCH", url, response)

    def delete(self, url: str, body: Any = None, headers: Optional[dict] = None) -> APIResponse:
        response = self.request.delete(url, data=body, headers=headers)
        return self._log("DELETE", url, response)

    # ========= 响应校验 =========
    def verify_status_code(self, response: APIResponse, expected: int):
        ApiAssert.status_code(response.status, expected, response.url)

    def get_response_body(self, response: APIResponse) -> Any:
        """解析 JSON 响应体，解析失败直接判定用例失败"""
        text = response.text()
        try:
            return json.loads(text)
        except ValueError as err:
            raise AssertionError(f"响应体不是合法JSON：{response.url} -> {text[:200]}") from err

    def verify_response_data(self, actual: Any, expected: Any):
        ApiAssert.data_equal(actual, expected)

    # ========= 辅助 =========
    @staticmethod
    def _with_json_header(headers: Optional[dict]) -> dict:
        return {"Content-Type": JSON_CONTENT_TYPE, **(headers or {})}

    @staticmethod
    def _log(method: str, url: str, response: APIResponse) -> APIResponse:
        logger.info("%s %s -> %s", method, url, response.status)
        return response
