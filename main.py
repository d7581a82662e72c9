"""slot-log demo service — writes application and access traffic through rotating logs."""

import argparse
import logging
import os
import random
import signal
import sys
import time
import uuid

from slotlog.config import load_config, load_yaml_config
from slotlog.slot import Slot

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [slot-log] %(levelname)s %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

_running = True


def _signal_handler(sig, _frame):
    global _running
    logger.info("Shutdown signal received (signal %d), stopping...", sig)
    _running = False


LEVELS = ["INFO", "INFO", "INFO", "INFO", "DEBUG", "ERROR"]
MESSAGES = {
    "INFO": [
        "Request processed successfully",
        "Health check passed",
        "Cache hit for user session",
        "Database query completed in %dms",
    ],
    "DEBUG": [
        "Entering request handler",
        "Parsed request body",
        "Token validation started",
    ],
    "ERROR": [
        "Failed to connect to database",
        "Timeout waiting for upstream response",
        "Unhandled exception in request handler",
    ],
}
METHODS = ["GET", "GET", "GET", "POST", "PUT", "DELETE"]
PATHS = ["/", "/api/orders", "/api/users", "/health", "/static/app.js"]
STATUSES = [200, 200, 200, 201, 304, 404, 500]


def emit_app_line(slot: Slot):
    level = random.choice(LEVELS)
    message = random.choice(MESSAGES[level])
    req_id = uuid.uuid4().hex[:8]
    if "%d" in message:
        slot.log(level, "[%s] " + message, req_id, random.randint(1, 500))
    else:
        slot.log(level, "[%s] %s", req_id, message)


def emit_access_line(slot: Slot):
    slot.access(
        '10.0.%d.%d "%s %s HTTP/1.1" %d %d',
        random.randint(0, 255), random.randint(1, 254),
        random.choice(METHODS), random.choice(PATHS),
        random.choice(STATUSES), random.randint(64, 65536),
    )


def build_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="slot-log demo service")
    parser.add_argument("--config", default=None, help="Path to YAML config file")
    parser.add_argument("--rate", type=float, default=20.0,
                        help="Lines per second per channel (default: 20)")
    parser.add_argument("--count", type=int, default=0,
                        help="Stop after this many lines per channel (default: run until signalled)")
    return parser


def main():
    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)

    args = build_cli_parser().parse_args()
    config = load_config(load_yaml_config(args.config))
    logger.info(
        "Config: app_log=%s, access_log=%s, max_size=%d bytes, buffer=%d",
        config.app_log_path, config.access_log_path,
        config.max_file_size_bytes, config.buffer_size,
    )

    for path in (config.app_log_path, config.access_log_path):
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

    slot = Slot.from_config(config)
    app_ok, access_ok = slot.is_enabled()
    if not (app_ok and access_ok):
        logger.warning("Running degraded: app_log=%s, access_log=%s", app_ok, access_ok)

    slot.info("slot-log demo started")
    lines_written = 0
    interval = 1.0 / args.rate if args.rate > 0 else 0

    try:
        while _running and (args.count <= 0 or lines_written < args.count):
            emit_app_line(slot)
            emit_access_line(slot)
            lines_written += 1
            if interval:
                time.sleep(interval)
    except KeyboardInterrupt:
        pass

    slot.info("slot-log demo stopped after %d lines", lines_written)
    slot.close()
    logger.info("Shut down cleanly. Lines written per channel: %d", lines_written)


if __name__ == "__main__":
    main()
