"""
Behave environment configuration for Cloudflare DDNS scenarios.
"""

import io
import logging

from rich.console import Console

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_scenario(context, scenario):
    """Set up each test scenario."""
    context.output = io.StringIO()
    context.console = Console(file=context.output, width=200)
    context.report = None

    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Clean up after each test scenario."""
    if context.report is not None:
        logger.debug(context.output.getvalue())

    logger.info(f"Completed scenario: {scenario.name}")
