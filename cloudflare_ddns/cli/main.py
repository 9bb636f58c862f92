#!/usr/bin/env python3
"""
Cloudflare DDNS - Command Line Interface

Main entry point for the Cloudflare DDNS reconciler.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import yaml
from dotenv import load_dotenv

from ..core.exceptions import DDNSError, MissingConfiguration
from ..core.reconciler import Reconciler
from ..providers.dns_client import DNSClient

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Cloudflare DDNS - Point DNS records at this host's public address"
    )

    parser.add_argument(
        "--config",
        "-c",
        default="config.yaml",
        help="Configuration file path (default: config.yaml)",
    )

    parser.add_argument("--zone", "-z", help="Cloudflare zone id (overrides ZONE_ID)")

    parser.add_argument(
        "--records",
        "-r",
        help="Comma-separated record ids to reconcile (overrides RECORD_IDS)",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be changed without making changes",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    load_dotenv()
    config = apply_environment(load_config(args.config), os.environ)
    if args.zone:
        config["reconcile"]["zone_id"] = args.zone
    if args.records:
        config["reconcile"]["record_ids"] = args.records
    if args.verbose:
        config.setdefault("logging", {})["level"] = "DEBUG"
    config_logger(config)

    try:
        zone_id, record_ids = resolve_scope(config)
        with DNSClient(config) as dns_client:
            reconciler = Reconciler(dns_client, dry_run=args.dry_run)
            report = reconciler.reconcile(zone_id, record_ids)
            reconciler.display_summary(report)
    except DDNSError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if report.aborted:
        print("DNS reconciliation aborted")
        sys.exit(1)

    print("DNS reconciliation completed successfully")
    sys.exit(0)


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file."""
    if not Path(config_path).exists():
        logger.info(f"Config file {config_path} not found, using defaults")
        return get_default_config()

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        print(f"Error parsing config file: {e}")
        sys.exit(1)

    if not isinstance(config, dict):
        print(f"Error: config file {config_path} must contain a mapping")
        sys.exit(1)

    # Empty sections (``dns_providers:``) load as None
    defaults = get_default_config()
    for key, value in defaults.items():
        if config.get(key) is None:
            config[key] = value
        elif isinstance(value, dict) and not isinstance(config[key], dict):
            print(f"Error: '{key}' in {config_path} must be a mapping")
            sys.exit(1)

    logger.info(f"Configuration loaded from {config_path}")
    return config


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "dns_providers": {"cloudflare": {}},
        "default_provider": "cloudflare",
        "reconcile": {},
        "logging": {"level": "INFO"},
    }


def apply_environment(config: Dict, environ) -> Dict:
    """Override configuration with CLOUDFLARE_TOKEN, ZONE_ID and RECORD_IDS."""
    if environ.get("CLOUDFLARE_TOKEN"):
        providers = config.setdefault("dns_providers", {})
        cloudflare = providers.get("cloudflare") or {}
        cloudflare["api_token"] = environ["CLOUDFLARE_TOKEN"]
        providers["cloudflare"] = cloudflare

    reconcile = config.get("reconcile") or {}
    if environ.get("ZONE_ID"):
        reconcile["zone_id"] = environ["ZONE_ID"]
    if environ.get("RECORD_IDS"):
        reconcile["record_ids"] = environ["RECORD_IDS"]
    config["reconcile"] = reconcile

    return config


def parse_record_ids(value: Union[str, List[str], None]) -> List[str]:
    """Split a comma-separated string (or list) into record ids, in order."""
    if not value:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [str(record_id).strip() for record_id in value if str(record_id).strip()]


def resolve_scope(config: Dict) -> Tuple[str, List[str]]:
    """Return the zone id and record ids to reconcile."""
    reconcile = config.get("reconcile") or {}

    zone_id = str(reconcile.get("zone_id") or "").strip()
    if not zone_id:
        raise MissingConfiguration("ZONE_ID")

    record_ids = parse_record_ids(reconcile.get("record_ids"))
    if not record_ids:
        raise MissingConfiguration("RECORD_IDS")

    return zone_id, record_ids


def config_logger(config: Dict):
    """Configure logging."""
    logging_config = config.get("logging", None)
    if logging_config:
        log_level = logging_config.get("level", "INFO")
        log_file = logging_config.get("file")

        handlers = [logging.StreamHandler(sys.stdout)]
        if log_file:
            handlers.insert(0, logging.FileHandler(log_file))

        logging.basicConfig(
            level=log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=handlers,
        )
        return

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


if __name__ == "__main__":
    main()
