MIN_PRODUCT_COUNT = 30  # 商品页展示商品数必须大于该值

SEARCH_KEYWORD = "Top"
