"""Send one log per severity, then a nested pair of span scopes.

Run with LOGFIRE_TOKEN set.
"""

import logging
import sys
import time

import logfire_otel
from logfire_otel.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    setup_logging()
    try:
        client = logfire_otel.initialize(service_name="test-my-service")
    except logfire_otel.LogfireException as e:
        logger.error("Failed to initialize logfire: %s", e)
        return 1

    with client:
        logfire_otel.trace("This is a trace log!")
        logfire_otel.debug("This is a debug log!")
        logfire_otel.info("This is an info log!")
        logfire_otel.warn("This is a warn log!")
        logfire_otel.error("This is an error log!")
        logfire_otel.fatal("This is a fatal log!")

        with logfire_otel.new_span_logger("span wrapper") as outer:
            outer.info("something inside the span")
            time.sleep(0.1)

            with client.span_logger("inner span", parent=outer.context) as inner:
                inner.fatal("something fatal inside!")
                time.sleep(0.2)
    return 0


if __name__ == "__main__":
    sys.exit(main())
