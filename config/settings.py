import os

from dotenv import load_dotenv

load_dotenv()  # 本地调试时从 .env 读取覆盖项

BASE_URL = os.getenv("BASE_URL", "https://automationexercise.com").rstrip("/")

# chromium / firefox / webkit
BROWSER = os.getenv("BROWSER", "chromium")
HEADLESS = bool(os.getenv("CI")) or os.getenv("HEADLESS", "true").lower() != "false"

# 全局会话状态：每次运行生成一次，所有用例只读
STORAGE_STATE_DIR = ".auth"
STORAGE_STATE_FILE = f"{STORAGE_STATE_DIR}/user.json"

ROUTES = {
    "home": "/",
    "login": "/login",
    "products": "/products",
}

API_ENDPOINTS = {
    "products_list": "/api/productsList",
    "brands_list": "/api/brandsList",
    "create_account": "/api/createAccount",
    "verify_login": "/api/verifyLogin",
    "delete_account": "/api/deleteAccount",
}

# 每次运行前清空的目录
ARTIFACT_DIRS = ["artifacts", "videos", "tracing"]  # allure-results 由 --clean-alluredir 处理
