#!/usr/bin/env python3
"""
Main entry point for the CLI when run as a module.

Usage:
    python -m markup_validator [options] [command]
"""
from markup_validator.cli import cli

if __name__ == "__main__":
    cli(obj={})
