from __future__ import annotations

import logging
from typing import Dict, List, Optional

from payfx.config import AppConfig
from payfx.exchange import CurrencyExchange, ExchangeSubscriber, create_subscriber
from payfx.notifiers import Notifier
from payfx.notifiers.console import ConsoleNotifier
from payfx.payments import PaymentContext, PaymentStrategy, create_strategy

logger = logging.getLogger(__name__)


class Demo:
    def __init__(self, config: AppConfig, notifier: Optional[Notifier] = None):
        """Build behaviors, subscribers and the exchange from configuration.

        Args:
            config: Application configuration
            notifier: Optional injected notifier for testing. If not provided,
                     everything is written to the console.
        """
        self.config = config
        self.notifier = notifier if notifier is not None else ConsoleNotifier()
        language = config.output.language

        # One shared instance per behavior, reused by every step naming it
        self.strategies: Dict[str, PaymentStrategy] = {}
        for step in config.demo.payments:
            if step.method not in self.strategies:
                self.strategies[step.method] = create_strategy(step.method, self.notifier, language)

        self.subscribers: Dict[str, ExchangeSubscriber] = {
            name: create_subscriber(name, self.notifier, language)
            for name in dict.fromkeys(config.demo.subscribers + config.demo.detach)
        }
        self.exchange: Optional[CurrencyExchange] = None

    def run_payments(self) -> Optional[PaymentContext]:
        steps = self.config.demo.payments
        if not steps:
            logger.info("No payments configured")
            return None
        context = PaymentContext(self.strategies[steps[0].method])
        for step in steps:
            context.set_strategy(self.strategies[step.method])
            context.pay(step.amount)
        logger.info(f"Completed {len(steps)} payments")
        return context

    def run_exchange(self) -> CurrencyExchange:
        demo = self.config.demo
        # fresh subject per run
        self.exchange = CurrencyExchange()
        for name in demo.subscribers:
            self.exchange.attach(self.subscribers[name])
        self._broadcast(demo.rates)
        for name in demo.detach:
            self.exchange.detach(self.subscribers[name])
            logger.info(f"Detached {name}")
        self._broadcast(demo.final_rates)
        return self.exchange

    def _broadcast(self, rates: List[float]) -> None:
        for rate in rates:
            self.exchange.set_rate(rate)

    def run(self) -> None:
        logger.info("Running payment strategy demonstration")
        self.run_payments()
        logger.info("Running exchange rate observer demonstration")
        self.run_exchange()
