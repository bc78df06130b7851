import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Optional

import allure

from data.user_data import UserData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CleanupResult:
    """清理结果：失败只记录，不向上抛出，避免掩盖用例本身的断言失败"""
    ok: bool
    reason: Optional[str] = None

    @classmethod
    def succeeded(cls) -> "CleanupResult":
        return cls(ok=True)

    @classmethod
    def failed(cls, reason: str) -> "CleanupResult":
        return cls(ok=False, reason=reason)


def delete_user_quietly(user_api, user: UserData) -> CleanupResult:
    """teardown 删除测试账号（best-effort）"""
    try:
        response = user_api.delete_account(user.email, user.password)
        user_api.verify_status_code(response, 200)
        result = CleanupResult.succeeded()
        logger.info("cleanup: deleted test user %s", user.email)
    except Exception as err:
        result = CleanupResult.failed(f"{type(err).__name__}: {err}")
        logger.warning("cleanup: user %s not deleted (%s)", user.email, result.reason)

    allure.attach(
        "OK" if result.ok else f"FAILED - {result.reason}",
        name=f"Cleanup: delete {user.email}",
        attachment_type=allure.attachment_type.TEXT,
    )
    return result


@contextmanager
def cleanup_user_on_error(user_api, user: UserData):
    """流程中途任何异常（断言、超时、网络错误）都先尝试删除账号，再原样抛出"""
    try:
        yield user
    except Exception:
        delete_user_quietly(user_api, user)
        raise
