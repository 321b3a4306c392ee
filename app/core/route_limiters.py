"""
Description: 
This module sets up a rate limiter for the application using SlowAPI.
It initializes a Limiter instance keyed by client IP address. Routes without their own
limit fall back to the default through SlowAPIMiddleware; RATE_LIMIT_ENABLED=false turns limiting off.

Dependencies:
- slowapi: For rate limiting functionality.
- slowapi.util: For utility functions like get_remote_address to retrieve the client's IP address.
- loguru: For logging information about the rate limiter initialization.
"""
import os
from dotenv import load_dotenv
from slowapi import Limiter
from slowapi.util import get_remote_address
from loguru import logger
load_dotenv()

enabled = os.getenv("RATE_LIMIT_ENABLED", "true").lower() in ("1", "true", "yes")

limiter = Limiter(key_func=get_remote_address, default_limits=["60/minute"], enabled=enabled)
logger.info(f"Rate limiter initialized (enabled={enabled})")
