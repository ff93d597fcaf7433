import argparse
import logging
import sys

from payfx.config import AppConfig, LoggingConfig, OutputConfig, load_config
from payfx.demo import Demo
from payfx.messages import LANGUAGES


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Payment strategy and exchange rate observer demonstration")
    parser.add_argument("--config", default=None, help="Path to config file (defaults to the built-in scenario)")
    parser.add_argument("--language", choices=LANGUAGES, default=None, help="Override message language from config")
    parser.add_argument("--log-level", default=None, help="Override log level from config (e.g. INFO, DEBUG)")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else AppConfig()
        if args.language is not None:
            config.output = OutputConfig(language=args.language)
        if args.log_level is not None:
            config.logging = LoggingConfig(level=args.log_level, format=config.logging.format)
    except (OSError, RuntimeError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(level=config.logging.level, format=config.logging.format)

    Demo(config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
