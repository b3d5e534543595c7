from .dedup import is_already_recorded, same_instant

__all__ = ["is_already_recorded", "same_instant"]
