import pytest

from payfx.messages import format_number, payment_message, rate_message


@pytest.mark.parametrize(
    "value,expected",
    [(100, "100"), (100.0, "100"), (1.2, "1.2"), (0, "0"), (1.25, "1.25"), (1234567.0, "1.23457e+06")],
)
def test_format_number_matches_stream_output(value, expected):
    assert format_number(value) == expected


def test_english_messages():
    assert payment_message("card", 100) == "Payment of 100 by card."
    assert payment_message("paypal", 200) == "Payment of 200 via PayPal."
    assert payment_message("crypto", 300) == "Payment of 300 in cryptocurrency."
    assert rate_message("stock_market", 1.3) == "Stock market received exchange rate update: 1.3"


def test_russian_messages_keep_original_wording():
    assert payment_message("card", 100, "ru") == "Оплата 100 через карту."
    assert payment_message("crypto", 300, "ru") == "Оплата 300 криптовалютой."
    assert rate_message("bank", 1.2, "ru") == "Банк получил обновление курса: 1.2"
    assert rate_message("forex", 1.4, "ru") == "Форекс получил обновление курса: 1.4"


def test_unknown_language_rejected():
    with pytest.raises(ValueError, match="Unsupported language"):
        payment_message("card", 1, "de")


def test_unknown_key_rejected():
    with pytest.raises(ValueError, match="No message defined"):
        rate_message("central_bank", 1.0)
