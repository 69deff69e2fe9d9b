"""Service to generate random seeds for training runs."""

import random


def generate_seed() -> int:
    """Generates a random unsigned 64-bit seed for reproducibility."""
    return random.randint(0, 2**64 - 1)
