#!/usr/bin/env python3
"""
Simple script to check if environment variables are properly loaded.
Run this script to verify your configuration is working.
"""

from jsonrest.configs import load_config

SECRET_HEADERS = {"authorization", "proxy-authorization", "x-api-key"}


def _mask(value: str) -> str:
    return "*" * 8 + value[-4:] if value else "Not set"


def main():
    """Print configuration values to verify they're loaded correctly."""
    config = load_config()
    print("\n=== jsonrest Configuration ===\n")

    print(f"JSONREST_BASE_URL: {config.base_url or 'Not set'}")
    print(f"JSONREST_KEEP_ALIVE: {config.keep_alive}")
    print(f"JSONREST_TIMEOUT: {config.timeout if config.timeout is not None else 'None (wait forever)'}")
    print(f"JSONREST_MAX_WORKERS: {config.max_workers}")
    for name, value in config.default_headers.items():
        shown = _mask(value) if name.lower() in SECRET_HEADERS else value
        print(f"Header {name}: {shown}")

    print("\nIf any values are missing or incorrect, please check your .env file or environment variables.")


if __name__ == "__main__":
    main()
