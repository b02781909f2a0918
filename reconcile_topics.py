#!/usr/bin/env python3
import argparse
import sys
from topic_reconciler.models import Settings
from topic_reconciler.services.init_service import InitService
from topic_reconciler.services.service import Service
from topic_reconciler.services.update_service import UpdateService
from topic_reconciler.utils.logging import setup_logger

COMMANDS: dict[str, type[Service]] = {
    "init": InitService,
    "update": UpdateService,
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Synchronize a marker topic on GitHub repositories")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("init", help="Init project configuration from the current repository topics")
    subparsers.add_parser("update", help="Update GitHub repositories to match the configuration")
    args = parser.parse_args(argv)
    # running without a subcommand updates, like the original tool
    if args.command is None:
        args.command = "update"
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logger = setup_logger("TopicReconciler")

    try:
        settings = Settings()
        logger.info(f"Starting {args.command} of topic {settings.topic} for {settings.owner} with configuration file: {settings.record_file}")
        service = COMMANDS[args.command](settings)
        service.run()
        logger.info(f"Topic {args.command} completed successfully")
        return 0
    except Exception as e:
        logger.error(f"Topic {args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
