import math

# Coins needed to reach level 2, 3, 4 and 5
LEVEL_THRESHOLDS = (1000, 10000, 50000, 100000)


def level_for_coins(total_coins: int) -> int:
    """Return the level for a coin total: one step per threshold reached."""
    level = 1
    for threshold in LEVEL_THRESHOLDS:
        if total_coins >= threshold:
            level += 1
    return level


def clamp_delta(reported, ceiling: int) -> int:
    """Floor a reported delta and bound it into ``[0, ceiling]``."""
    return min(max(0, math.floor(reported)), ceiling)
