"""
Interchangeable payment behaviors and the context that delegates to them.

Each behavior reports a single human-readable line through its notifier when
asked to pay. ``PaymentContext`` holds exactly one behavior at a time and can
be switched to another one at runtime.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from payfx.messages import payment_message
from payfx.notifiers import Notifier
from payfx.notifiers.console import ConsoleNotifier

logger = logging.getLogger(__name__)


class PaymentStrategy(ABC):
    """Abstract payment behavior.

    Concrete behaviors only differ by ``name``, which selects their message.
    """

    name: str = ""
    label: str = ""

    def __init__(self, notifier: Optional[Notifier] = None, language: str = "en"):
        self.notifier = notifier if notifier is not None else ConsoleNotifier()
        self.language = language

    def describe(self, amount: float) -> str:
        return payment_message(self.name, amount, self.language)

    @abstractmethod
    def pay(self, amount: float) -> None:
        """Report a payment of ``amount``.

        Args:
            amount: Amount to pay, expected to be non-negative (not validated)
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(label={self.label!r}, language={self.language!r})"


class CardPayment(PaymentStrategy):
    name = "card"
    label = "Card"

    def pay(self, amount: float) -> None:
        self.notifier.send(self.describe(amount))


class PayPalPayment(PaymentStrategy):
    name = "paypal"
    label = "PayPal"

    def pay(self, amount: float) -> None:
        self.notifier.send(self.describe(amount))


class CryptoPayment(PaymentStrategy):
    name = "crypto"
    label = "Crypto"

    def pay(self, amount: float) -> None:
        self.notifier.send(self.describe(amount))


# Strategy registry - maps configuration names to behavior classes
PAYMENT_STRATEGIES: Dict[str, Type[PaymentStrategy]] = {
    CardPayment.name: CardPayment,
    PayPalPayment.name: PayPalPayment,
    CryptoPayment.name: CryptoPayment,
}


def create_strategy(name: str, notifier: Optional[Notifier] = None, language: str = "en") -> PaymentStrategy:
    """Instantiate a payment behavior by registry name.

    Raises:
        ValueError: If ``name`` is not a registered behavior
    """
    try:
        strategy_cls = PAYMENT_STRATEGIES[name.lower()]
    except KeyError:
        available = ", ".join(PAYMENT_STRATEGIES)
        raise ValueError(f"Unknown payment method '{name}'. Available: {available}") from None
    return strategy_cls(notifier=notifier, language=language)


def _require_strategy(strategy: object) -> PaymentStrategy:
    if not isinstance(strategy, PaymentStrategy):
        raise TypeError(f"PaymentContext requires a PaymentStrategy, got {type(strategy).__name__}")
    return strategy


class PaymentContext:
    """Delegates payments to the currently selected behavior."""

    def __init__(self, strategy: PaymentStrategy):
        self._strategy = _require_strategy(strategy)

    @property
    def strategy(self) -> PaymentStrategy:
        return self._strategy

    def set_strategy(self, strategy: PaymentStrategy) -> None:
        self._strategy = _require_strategy(strategy)
        logger.debug("Payment strategy switched to %s", strategy.label)

    set_behavior = set_strategy

    def pay(self, amount: float) -> None:
        logger.debug("Paying %s via %s", amount, self._strategy.label)
        self._strategy.pay(amount)

    make_payment = pay


__all__ = [
    "PaymentStrategy",
    "CardPayment",
    "PayPalPayment",
    "CryptoPayment",
    "PAYMENT_STRATEGIES",
    "create_strategy",
    "PaymentContext",
]
