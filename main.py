#!/usr/bin/env python3
"""
Cloudflare DDNS - Main Entry Point

This is the main entry point for the Cloudflare DDNS reconciler.
It can be run directly or imported as a module.
"""

from cloudflare_ddns.cli.main import main

if __name__ == "__main__":
    main()
