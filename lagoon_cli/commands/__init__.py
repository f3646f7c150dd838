"""Lagoon CLI commands."""

from .aliases import aliases, generate_aliases
from .jwt import jwt
from .rollout import post_rollout_tasks, pre_rollout_tasks

__all__ = [
    "aliases",
    "generate_aliases",
    "jwt",
    "pre_rollout_tasks",
    "post_rollout_tasks",
]
