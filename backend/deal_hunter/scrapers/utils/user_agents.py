"""Browser user-agent strings for outbound vendor requests."""

import random
from typing import List


# Realistic desktop Chrome user-agent strings
USER_AGENTS: List[str] = [
    # Chrome on Windows
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/115.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
    # Chrome on macOS
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
    # Chrome on Linux
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
]

DEFAULT_USER_AGENT = USER_AGENTS[0]


def get_user_agent(configured: str = "", rotate: bool = False) -> str:
    """Pick the user-agent to send to vendors.

    Args:
        configured: Explicit user-agent from settings; wins when non-empty
        rotate: Pick a random string from the pool instead of the default

    Returns:
        User-agent string
    """
    if configured:
        return configured
    if rotate:
        return random.choice(USER_AGENTS)
    return DEFAULT_USER_AGENT
