#!/usr/bin/python3
"""
Demo entry point for prefstore.

Saves a small settings object to the OS config directory, loads it back,
prints it and removes the file again.
"""

import sys
import logging
from dataclasses import dataclass, field
from typing import Dict
from prefstore import ConfigDescriptor, Format, Location
from prefstore.logging_setup import init_logging

APP_NAME = "MyApp"

@dataclass
class MyConfig:
    window_width: int = 0
    window_height: int = 0
    window_x: int = 0
    window_y: int = 0
    theme: str = ""
    user_data: Dict[str, str] = field(default_factory=dict)

def main(fmt_name: str = "json") -> int:
    log_path = init_logging(APP_NAME)
    logger = logging.getLogger(__name__)
    logger.info("prefstore demo starting (logs: %s)", log_path)

    descriptor = ConfigDescriptor(app_name=APP_NAME, location=Location.auto(), format=Format.from_extension(fmt_name))

    my_config = MyConfig()
    path = descriptor.save(my_config)
    logger.info("Saved config to %s", path)

    my_config = descriptor.load(MyConfig)
    print(my_config)

    descriptor.delete()
    return 0

if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
