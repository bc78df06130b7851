# 定位策略：("role", 角色, 可访问名称[, 精确匹配]) 优先，("css", 选择器) 兜底

# 顶部导航链接的可访问名称带图标字符，按 href 定位并限定在 #header 内
HOME_LOCATORS = {
    "products_link": ("css", "#header a[href='/products']"),  # 导航 Products
    "cart_link": ("css", "#header a[href='/view_cart']"),  # 导航 Cart
    "signup_login_link": ("css", "#header a[href='/login']"),  # 导航 Signup / Login
    "features_items_heading": ("role", "heading", "Features Items"),  # 首页商品区标题
    "logged_in_as": ("css", "#header li:has-text('Logged in as')"),  # 登录后显示 "Logged in as xxx"
    "logout_link": ("css", "#header a[href='/logout']"),  # 登出
    "delete_account_link": ("css", "#header a[href='/delete_account']"),  # 删除账号
}

LOGIN_LOCATORS = {
    "login_email_input": ("css", "[data-qa='login-email']"),  # 登录邮箱
    "login_password_input": ("css", "[data-qa='login-password']"),  # 登录密码
    "login_button": ("css", "[data-qa='login-button']"),  # 登录按钮
    "signup_name_input": ("css", "[data-qa='signup-name']"),  # 注册用户名
    "signup_email_input": ("css", "[data-qa='signup-email']"),  # 注册邮箱
    "signup_button": ("css", "[data-qa='signup-button']"),  # 注册按钮
    "login_heading": ("role", "heading", "Login to your account"),
    "signup_heading": ("role", "heading", "New User Signup!"),
    "error_msg": ("css", "form[action='/login'] p"),  # 登录失败提示信息
}

PRODUCTS_LOCATORS = {
    "products_heading": ("role", "heading", "All Products"),  # 商品页标题
    "products_list": ("css", ".features_items"),  # 商品列表区
    "product_item": ("css", ".productinfo"),  # 单个商品
    "product_item_name": ("css", ".productinfo p"),  # 商品名称
    "search_input": ("css", "#search_product"),  # 搜索框
    "search_button": ("css", "#submit_search"),  # 搜索按钮
    "searched_heading": ("role", "heading", "Searched Products"),  # 搜索结果标题
}
