from decimal import Decimal


def auth(user_or_token) -> dict:
    token = user_or_token["token"] if isinstance(user_or_token, dict) else user_or_token
    return {"Authorization": f"Bearer {token}"}


def money(value) -> Decimal:
    return Decimal(str(value))
