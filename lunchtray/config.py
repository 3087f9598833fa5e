"""Runtime configuration defaults for pricing and debug logging."""

from __future__ import annotations

from decimal import Decimal

TAX_RATE = Decimal("0.08")
CURRENCY_SYMBOL = "$"

DEBUG_LOG_PATH = "/tmp/lunchtray-debug.log"
