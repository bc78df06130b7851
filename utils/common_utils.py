from urllib.parse import urlencode

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


def to_form_body(fields: dict) -> str:
    """
        {"email": "a@b.com", "password": "x y"} -> 'email=a%40b.com&password=x+y'
        """
    return urlencode({key: "" if value is None else str(value) for key, value in fields.items()})
