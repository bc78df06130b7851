"""login功能测试数据：错误账号、页面提示信息"""

INVALID_UI_USER = {"email": "invalid@test.com", "password": "wrongpassword"}

LOGIN_ERROR_MSG = "Your email or password is incorrect!"

LOGGED_IN_AS_MSG = "Logged in as {firstname}"

HOME_PAGE_TITLE = "Automation Exercise"
