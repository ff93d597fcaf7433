import sys
from pathlib import Path
from typing import Dict

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from payfx.exchange import (
    BankSubscriber,
    CurrencyExchange,
    ExchangeSubscriber,
    ForexSubscriber,
    StockMarketSubscriber,
)
from payfx.notifiers.console import MemoryNotifier
from payfx.payments import CardPayment, CryptoPayment, PayPalPayment, PaymentStrategy


@pytest.fixture
def memory_notifier() -> MemoryNotifier:
    return MemoryNotifier()


@pytest.fixture
def strategies(memory_notifier) -> Dict[str, PaymentStrategy]:
    """One instance of every payment behavior, all sharing the memory notifier."""
    return {
        "card": CardPayment(notifier=memory_notifier),
        "paypal": PayPalPayment(notifier=memory_notifier),
        "crypto": CryptoPayment(notifier=memory_notifier),
    }


@pytest.fixture
def subscribers(memory_notifier) -> Dict[str, ExchangeSubscriber]:
    return {
        "bank": BankSubscriber(notifier=memory_notifier),
        "stock_market": StockMarketSubscriber(notifier=memory_notifier),
        "forex": ForexSubscriber(notifier=memory_notifier),
    }


@pytest.fixture
def exchange() -> CurrencyExchange:
    return CurrencyExchange()


@pytest.fixture
def populated_exchange(exchange, subscribers) -> CurrencyExchange:
    """Exchange with bank, stock market and forex attached in that order."""
    exchange.attach(subscribers["bank"])
    exchange.attach(subscribers["stock_market"])
    exchange.attach(subscribers["forex"])
    return exchange


class RecordingSubscriber(ExchangeSubscriber):
    """Subscriber that records the rates it received instead of printing them."""

    name = "bank"

    def __init__(self, tag: str = ""):
        super().__init__(notifier=MemoryNotifier())
        self.tag = tag
        self.rates = []

    def update(self, rate: float) -> None:
        self.rates.append(rate)
