import math


def round_half_up(value):
    """Round a non-negative percentage to the nearest integer, halves going up."""
    return int(math.floor(value + 0.5))
