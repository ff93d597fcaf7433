"""
Currency exchange subject and the subscribers it notifies.

``CurrencyExchange`` keeps an ordered list of subscribers; every rate change is
pushed synchronously to each of them in attachment order.

Subscribers are matched by identity, so two subscribers of the same kind are
distinct entries. Attaching the same object twice is allowed and results in
two notifications per rate change.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple, Type

from payfx.messages import rate_message
from payfx.notifiers import Notifier
from payfx.notifiers.console import ConsoleNotifier

logger = logging.getLogger(__name__)


class ExchangeSubscriber(ABC):
    """Observer interface: reacts to a new exchange rate."""

    name: str = ""
    label: str = ""

    def __init__(self, notifier: Optional[Notifier] = None, language: str = "en"):
        self.notifier = notifier if notifier is not None else ConsoleNotifier()
        self.language = language

    def describe(self, rate: float) -> str:
        return rate_message(self.name, rate, self.language)

    @abstractmethod
    def update(self, rate: float) -> None:
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(label={self.label!r}, language={self.language!r})"


class BankSubscriber(ExchangeSubscriber):
    name = "bank"
    label = "Bank"

    def update(self, rate: float) -> None:
        self.notifier.send(self.describe(rate))


class StockMarketSubscriber(ExchangeSubscriber):
    name = "stock_market"
    label = "Stock market"

    def update(self, rate: float) -> None:
        self.notifier.send(self.describe(rate))


class ForexSubscriber(ExchangeSubscriber):
    name = "forex"
    label = "Forex"

    def update(self, rate: float) -> None:
        self.notifier.send(self.describe(rate))


SUBSCRIBERS: Dict[str, Type[ExchangeSubscriber]] = {
    BankSubscriber.name: BankSubscriber,
    StockMarketSubscriber.name: StockMarketSubscriber,
    ForexSubscriber.name: ForexSubscriber,
}


def create_subscriber(name: str, notifier: Optional[Notifier] = None, language: str = "en") -> ExchangeSubscriber:
    """Instantiate a subscriber by registry name.

    Raises:
        ValueError: If ``name`` is not a registered subscriber kind
    """
    try:
        subscriber_cls = SUBSCRIBERS[name.lower()]
    except KeyError:
        available = ", ".join(SUBSCRIBERS)
        raise ValueError(f"Unknown subscriber '{name}'. Available: {available}") from None
    return subscriber_cls(notifier=notifier, language=language)


class Subject(ABC):
    """Subject interface of the observer pattern."""

    @abstractmethod
    def attach(self, subscriber: ExchangeSubscriber) -> None:
        pass

    @abstractmethod
    def detach(self, subscriber: ExchangeSubscriber) -> None:
        pass

    @abstractmethod
    def notify(self) -> None:
        pass


class CurrencyExchange(Subject):
    def __init__(self):
        self._subscribers: List[ExchangeSubscriber] = []
        self._rate: Optional[float] = None

    @property
    def rate(self) -> Optional[float]:
        return self._rate

    @property
    def subscribers(self) -> Tuple[ExchangeSubscriber, ...]:
        return tuple(self._subscribers)

    def __len__(self) -> int:
        return len(self._subscribers)

    def attach(self, subscriber: ExchangeSubscriber) -> None:
        if not isinstance(subscriber, ExchangeSubscriber):
            raise TypeError(f"Cannot attach {type(subscriber).__name__}, expected ExchangeSubscriber")
        if any(s is subscriber for s in self._subscribers):
            # No deduplication: the subscriber will be notified once per entry
            logger.warning("%r is already attached; it will be notified more than once", subscriber)
        self._subscribers.append(subscriber)
        logger.debug("Attached %r (%d subscribers)", subscriber, len(self._subscribers))

    def detach(self, subscriber: ExchangeSubscriber) -> None:
        remaining = [s for s in self._subscribers if s is not subscriber]
        removed = len(self._subscribers) - len(remaining)
        self._subscribers = remaining
        if removed:
            logger.debug("Detached %r (%d entries removed)", subscriber, removed)
        else:
            logger.debug("Detach ignored, %r was not attached", subscriber)

    def set_rate(self, rate: float) -> None:
        self._rate = float(rate)
        logger.info("Exchange rate set to %s", self._rate)
        self.notify()

    set_exchange_rate = set_rate

    def notify(self) -> None:
        """Push the current rate to every attached subscriber in attachment order.

        Iterates over a snapshot: subscribers attached or detached while the
        notification is running are only taken into account on the next one.

        Raises:
            RuntimeError: If there are subscribers but no rate has been set yet
        """
        snapshot = list(self._subscribers)
        if not snapshot:
            return
        if self._rate is None:
            raise RuntimeError("Exchange rate has not been set; nothing to notify")
        for subscriber in snapshot:
            subscriber.update(self._rate)
        logger.debug("Notified %d subscribers of rate %s", len(snapshot), self._rate)


__all__ = [
    "ExchangeSubscriber",
    "BankSubscriber",
    "StockMarketSubscriber",
    "ForexSubscriber",
    "SUBSCRIBERS",
    "create_subscriber",
    "Subject",
    "CurrencyExchange",
]
