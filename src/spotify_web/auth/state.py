"""CSRF state tokens for the authorization redirect."""

import random
import secrets

from spotify_web.constants import DEFAULT_STATE_LENGTH, STATE_ALPHABET

_system_random = secrets.SystemRandom()


def generate_state(length: int = DEFAULT_STATE_LENGTH, random_source: random.Random | None = None) -> str:
    """Generate an alphanumeric state token of *length* characters.

    The token is round-tripped through the authorization server; comparing
    the echoed value is up to the caller. Pass a seeded ``random.Random`` as
    *random_source* for deterministic tokens in tests.
    """
    if length < 1:
        raise ValueError(f"State length must be positive, got {length}")
    rng = random_source or _system_random
    return "".join(rng.choice(STATE_ALPHABET) for _ in range(length))
