"""
Configuration for coverscan cover interpretation.

The numeric defaults were tuned against real book-cover photos;
change them only with a set of covers to re-check against.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class ScanConfig:
    """
    Configuration for a cover scan.

    All options have sensible defaults. Create a config only
    if you need to customize behavior.

    Example:
        >>> config = ScanConfig(found_delay=0.0, error_delay=0.0)
        >>> pipeline = CoverScanPipeline(recognizer, service, config=config)
    """

    # Text block selection
    size_ratio_of_max: float = 0.35  # Blocks must reach this fraction of the tallest block...
    size_ratio_of_average: float = 0.8  # ...or this fraction of the average, whichever is larger
    vertical_tie_tolerance: float = 0.05  # Closer than this counts as the same row

    # Query building
    max_title_words: int = 8
    raw_title_words: int = 6  # Used when every pooled word is a stopword
    max_fallback_names: int = 2

    # UI pacing (seconds)
    found_delay: float = 0.5
    error_delay: float = 3.0

    # Custom vocabulary file, merged over the packaged defaults
    vocabulary_path: Path | None = None

    def __post_init__(self):
        """Validate configuration."""
        for name in ("size_ratio_of_max", "size_ratio_of_average", "vertical_tie_tolerance"):
            value = getattr(self, name)
            if value < 0.0 or value > 1.0:
                raise ValueError(f"{name} must be between 0.0 and 1.0, got {value}")

        for name in ("max_title_words", "raw_title_words", "max_fallback_names"):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be >= 1, got {value}")

        if self.found_delay < 0 or self.error_delay < 0:
            raise ValueError(
                f"delays must be non-negative, got found_delay={self.found_delay}, "
                f"error_delay={self.error_delay}"
            )

        if self.vocabulary_path is not None:
            self.vocabulary_path = Path(self.vocabulary_path)
