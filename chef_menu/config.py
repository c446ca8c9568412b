"""Runtime configuration defaults for the chef menu app."""

from __future__ import annotations

from decimal import Decimal

DEBUG_LOG_PATH = "/tmp/chef-menu-debug.log"
DEBUG_LOG_ENV = "CHEF_MENU_DEBUG_LOG"

# Admissible prices are [PRICE_MIN, PRICE_LIMIT).
PRICE_MIN = Decimal("0")
PRICE_LIMIT = Decimal("100")
PRICE_QUANTUM = Decimal("0.01")
