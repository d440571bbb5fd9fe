#!/usr/bin/env python3
"""
Returns Tracker - Main entry point
"""
import os
import sys

# Add the parent directory to sys.path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from simple_logger import Slogger
from returns_tracker.config import load_config
from returns_tracker.errors import ConfigError
from returns_tracker.ui.app import ReturnsApp


def main():
    try:
        config = load_config()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    log_cfg = config.get("logging", {})
    Slogger.configure(log_cfg.get("file"), log_cfg.get("level", "INFO"))
    Slogger.log("Starting Returns Tracker application...")

    # Create and run the application
    app = ReturnsApp(config)
    app.run()


if __name__ == "__main__":
    main()
