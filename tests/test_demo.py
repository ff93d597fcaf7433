from payfx.config import AppConfig, DemoConfig, OutputConfig, PaymentStep
from payfx.demo import Demo
from payfx.notifiers.console import MemoryNotifier

REFERENCE_OUTPUT = [
    "Payment of 100 by card.",
    "Payment of 200 via PayPal.",
    "Payment of 300 in cryptocurrency.",
    "Bank received exchange rate update: 1.2",
    "Stock market received exchange rate update: 1.2",
    "Forex received exchange rate update: 1.2",
    "Bank received exchange rate update: 1.3",
    "Stock market received exchange rate update: 1.3",
    "Forex received exchange rate update: 1.3",
    "Bank received exchange rate update: 1.4",
    "Forex received exchange rate update: 1.4",
]


def test_reference_demo_output(memory_notifier):
    Demo(AppConfig(), notifier=memory_notifier).run()
    assert memory_notifier.get_messages() == REFERENCE_OUTPUT


def test_reference_demo_in_russian(memory_notifier):
    config = AppConfig(output=OutputConfig(language="ru"))
    Demo(config, notifier=memory_notifier).run()
    messages = memory_notifier.get_messages()
    assert messages[0] == "Оплата 100 через карту."
    assert messages[-1] == "Форекс получил обновление курса: 1.4"
    assert len(messages) == len(REFERENCE_OUTPUT)


def test_exchange_left_with_remaining_subscribers(memory_notifier):
    demo = Demo(AppConfig(), notifier=memory_notifier)
    exchange = demo.run_exchange()
    assert exchange.subscribers == (demo.subscribers["bank"], demo.subscribers["forex"])
    assert exchange.rate == 1.4


def test_payment_steps_reuse_one_instance_per_method(memory_notifier):
    config = AppConfig(
        demo=DemoConfig(
            payments=[
                PaymentStep(method="card", amount=1),
                PaymentStep(method="crypto", amount=2),
                PaymentStep(method="card", amount=3),
            ]
        )
    )
    demo = Demo(config, notifier=memory_notifier)
    context = demo.run_payments()
    assert context.strategy is demo.strategies["card"]
    assert memory_notifier.get_messages() == [
        "Payment of 1 by card.",
        "Payment of 2 in cryptocurrency.",
        "Payment of 3 by card.",
    ]


def test_empty_scenario_produces_no_output():
    notifier = MemoryNotifier()
    config = AppConfig(demo=DemoConfig(payments=[], subscribers=[], rates=[1.0], detach=[], final_rates=[]))
    demo = Demo(config, notifier=notifier)
    assert demo.run_payments() is None
    demo.run_exchange()
    assert notifier.get_messages() == []


def test_demo_defaults_to_console(capsys):
    Demo(AppConfig()).run()
    assert capsys.readouterr().out.splitlines() == REFERENCE_OUTPUT


def test_demo_can_run_twice(memory_notifier, caplog):
    demo = Demo(AppConfig(), notifier=memory_notifier)
    demo.run()
    assert memory_notifier.get_messages() == REFERENCE_OUTPUT
    first_exchange = demo.exchange

    memory_notifier.clear()
    with caplog.at_level("WARNING", logger="payfx.exchange"):
        demo.run()
    assert memory_notifier.get_messages() == REFERENCE_OUTPUT
    assert "already attached" not in caplog.text
    assert demo.exchange is not first_exchange
