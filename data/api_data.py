"""API测试数据：接口返回的 message 文案
verifyLogin 无论成功失败都返回 200，只能通过 message 区分结果
"""

INVALID_API_USER = {"email": "invalid@email.com", "password": "wrongpassword"}

USER_CREATED_MSG = "User created!"
USER_EXISTS_MSG = "User exists!"
USER_NOT_FOUND_MSG = "User not found!"
ACCOUNT_DELETED_MSG = "Account deleted!"

STATUS_OK = 200
