"""Scraper utilities for user-agents and field normalization."""

from .user_agents import DEFAULT_USER_AGENT, USER_AGENTS, get_user_agent
from .normalizer import (
    PLACEHOLDER_IMAGE,
    PriceNormalizer,
    first_srcset_url,
    normalize_image_url,
    normalize_link,
)


__all__ = [
    # User agents
    "DEFAULT_USER_AGENT",
    "USER_AGENTS",
    "get_user_agent",
    # Normalization
    "PLACEHOLDER_IMAGE",
    "PriceNormalizer",
    "first_srcset_url",
    "normalize_image_url",
    "normalize_link",
]
