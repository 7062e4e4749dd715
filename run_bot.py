#!/usr/bin/env python3
"""
Run the Chain bot from a checkout.

Usage:
    python run_bot.py

The token comes from TELEGRAM_BOT_TOKEN, either exported or set in .env
(see env.example).
"""

import asyncio
import os
import sys

from dotenv import load_dotenv


def _has_token() -> bool:
    load_dotenv()
    return bool(os.getenv("TELEGRAM_BOT_TOKEN", "").strip())


if __name__ == "__main__":
    if not _has_token():
        print("TELEGRAM_BOT_TOKEN is not set.")
        print("Export it, or copy env.example to .env and fill it in.")
        sys.exit(1)

    from chainbot.main import main

    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nChain bot stopped")
