from __future__ import annotations

from typing import Dict

LANGUAGES = ("en", "ru")

PAYMENT_TEMPLATES: Dict[str, Dict[str, str]] = {
    "en": {
        "card": "Payment of {amount} by card.",
        "paypal": "Payment of {amount} via PayPal.",
        "crypto": "Payment of {amount} in cryptocurrency.",
    },
    # wording of the original console program
    "ru": {
        "card": "Оплата {amount} через карту.",
        "paypal": "Оплата {amount} через PayPal.",
        "crypto": "Оплата {amount} криптовалютой.",
    },
}

RATE_TEMPLATES: Dict[str, Dict[str, str]] = {
    "en": {
        "bank": "Bank received exchange rate update: {rate}",
        "stock_market": "Stock market received exchange rate update: {rate}",
        "forex": "Forex received exchange rate update: {rate}",
    },
    "ru": {
        "bank": "Банк получил обновление курса: {rate}",
        "stock_market": "Фондовый рынок получил обновление курса: {rate}",
        "forex": "Форекс получил обновление курса: {rate}",
    },
}


def format_number(value: float) -> str:
    """Render a number the way a default C++ output stream does (``%g``).

    >>> format_number(100.0), format_number(1.2)
    ('100', '1.2')
    """
    return f"{float(value):g}"


def _template(table: Dict[str, Dict[str, str]], key: str, language: str) -> str:
    if language not in table:
        raise ValueError(f"Unsupported language '{language}', expected one of {LANGUAGES}")
    try:
        return table[language][key]
    except KeyError:
        raise ValueError(f"No message defined for '{key}'") from None


def payment_message(method: str, amount: float, language: str = "en") -> str:
    return _template(PAYMENT_TEMPLATES, method, language).format(amount=format_number(amount))


def rate_message(subscriber: str, rate: float, language: str = "en") -> str:
    return _template(RATE_TEMPLATES, subscriber, language).format(rate=format_number(rate))


__all__ = ["LANGUAGES", "format_number", "payment_message", "rate_message"]
