#!/usr/bin/env python3

import argparse
import logging
import sys

from catpoint import SecurityService, InMemorySecurityRepository, getLogger, load_config, ConfigError
from catpoint.agents import FakeImageClassifier
from catpoint.console import ControlPanel


def parse_arguments():
    arg_parser = argparse.ArgumentParser(description='Cat-aware home security control panel.')
    arg_parser.add_argument('-c', '--config', help='Path to config file.', default=None)
    arg_parser.add_argument('-s', '--seed', help='Seed of the fake image classifier.',
                            type=int, default=None)
    arg_parser.add_argument('-v', '--verbose', help='Enable verbose mode', action='store_true')
    return arg_parser.parse_args()


def setup_logging(debug_mode):
    root_logger = getLogger()
    if debug_mode:
        root_logger.setLevel(logging.DEBUG)
    stdout_format = logging.Formatter(
        "%(asctime)s %(levelname)-7s %(filename)s:%(lineno)-12s %(message)s", "%Y-%m-%d %H:%M:%S")
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(stdout_format)
    root_logger.addHandler(stderr_handler)
    return root_logger


#pylint: disable=invalid-name
if __name__ == "__main__":
    args = parse_arguments()
    logger = setup_logging(debug_mode=args.verbose)

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        logger.fatal("Failed reading configuration, got exception {0}".format(e))

    if not args.verbose:
        logger.setLevel(getattr(logging, cfg['logging']['level'].upper()))

    security_service = SecurityService(
        InMemorySecurityRepository(),
        FakeImageClassifier(seed=args.seed),
        confidence_threshold=cfg['security']['confidence_threshold'])
    panel = ControlPanel(security_service)

    if sys.stdin.isatty():
        panel.write("Type 'help' for the list of commands.")
    panel.run(sys.stdin)
