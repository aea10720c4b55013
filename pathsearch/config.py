"""Configuration for pathsearch algorithms."""

from dataclasses import dataclass


@dataclass
class SearchConfig:
    """Tunables shared by the eager searches.

    None of these settings change search results; they only affect diagnostics.
    """

    # Emit a DEBUG progress record every N node expansions (0 disables)
    progress_log_interval: int = 100_000

    def __post_init__(self) -> None:
        if self.progress_log_interval < 0:
            raise ValueError(
                f"progress_log_interval must be >= 0, got {self.progress_log_interval}"
            )

    def should_report(self, expansions: int) -> bool:
        """Return True when a progress record is due after ``expansions`` expansions."""
        return self.crossed_interval(expansions - 1, expansions)

    def crossed_interval(self, before: int, after: int) -> bool:
        """Return True if a reporting point lies in ``(before, after]``.

        Used by searches whose expansion count grows by more than one per step.
        """
        if not self.progress_log_interval or after <= 0:
            return False
        interval = self.progress_log_interval
        return after // interval > max(before, 0) // interval


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
