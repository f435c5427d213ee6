from .store import ProgressStore

DEFAULT_LEADERBOARD_SIZE = 100


def top_n(store: ProgressStore, n: int = DEFAULT_LEADERBOARD_SIZE) -> list:
    """Top ``n`` users by coins, highest first.

    Works on a locked snapshot of the store. ``sorted`` is stable, so users
    with equal coins keep the order in which they were first seen.
    """
    if n <= 0:
        return []
    ranked = sorted(store.snapshot(), key=lambda record: record.total_coins, reverse=True)
    return [record.to_leaderboard_entry() for record in ranked[:n]]
