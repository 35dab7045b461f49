from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Optional
import logging

from disc_bag.app_hooks import AppHooks
from .pipeline import StatisticsConfig, StatisticsPipeline
from .model import BagStats, Stats
from .summary import assemble_bag_stats

logger = logging.getLogger(__name__)


def calculate_bag_stats(discs: Optional[Iterable[Any]], config: Optional[StatisticsConfig] = None) -> BagStats:
    """
    Calculate bag statistics from a collection of discs.

    Pure computation: the discs are not modified and nothing is shared
    between calls, so repeated calls on the same discs give equal results.

    Args:
        discs: Disc records (DiscRecord, objects or payload mappings)
        config: Optional configuration; all collectors enabled by default

    Returns:
        BagStats summary
    """
    pipeline = StatisticsPipeline(config=config or StatisticsConfig())
    return assemble_bag_stats(pipeline.run(discs))


class BagStatistics:
    """
    High-level interface for collecting statistics on a bag of discs.

    This is a convenience wrapper around StatisticsPipeline that keeps the
    last results around for dashboards.

    Example:
        bag = BagStatistics(discs=discs)
        summary = bag.results          # BagStats
        payload = bag.to_dict()        # renderer shape
    """

    def __init__(
        self,
        discs: Optional[Iterable[Any]] = None,
        config_dict: Optional[Dict[str, Any]] = None,
        config_file: Optional[Path] = None,
        app_hooks: Optional[AppHooks] = None
    ) -> None:
        """
        Initialize statistics collection.

        Args:
            discs: Optional iterable of disc records
            config_dict: Dictionary to configure collectors (e.g., {'collectors': {'colors': False}})
            config_file: Path to YAML config file
            app_hooks: Optional application hooks for progress reporting
        """
        self.app_hooks = app_hooks
        self.discs = list(discs) if discs is not None else []

        # Create configuration
        if config_dict:
            self.config = StatisticsConfig.from_dict(config_dict)
        elif config_file:
            self.config = StatisticsConfig(config_file=config_file)
        else:
            # Use defaults - all collectors enabled
            self.config = StatisticsConfig()

        self._stats: Optional[Stats] = None
        self._results: Optional[BagStats] = None
        # An explicitly given bag is analyzed even when it is empty
        if discs is not None:
            self._analyze()

    def _analyze(self) -> BagStats:
        logger.info(f"Collecting statistics on {len(self.discs)} discs")
        pipeline = StatisticsPipeline(config=self.config, app_hooks=self.app_hooks)
        self._stats = pipeline.run(self.discs)
        self._results = assemble_bag_stats(self._stats)
        return self._results

    @property
    def results(self) -> Optional[BagStats]:
        """Get the last summary, or None if nothing has been analyzed."""
        return self._results

    @property
    def stats(self) -> Optional[Stats]:
        """Get the raw collected statistics behind the last summary."""
        return self._stats

    def analyze(self, discs: Optional[Iterable[Any]] = None) -> BagStats:
        """
        Analyze the given discs.

        Args:
            discs: Optional iterable of disc records. If None, uses self.discs.

        Returns:
            BagStats summary
        """
        if discs is not None:
            self.discs = list(discs)
        return self._analyze()

    def get_value(self, category: str, name: str, default=None):
        """
        Convenience method to get a specific raw statistic value.

        Args:
            category: Category name (e.g., 'brands', 'stability')
            name: Statistic name (e.g., 'unique_brands')
            default: Default value if not found

        Returns:
            The statistic value or default
        """
        if self._stats is not None:
            return self._stats.get_value(category, name, default)
        return default

    def to_dict(self) -> Dict[str, Any]:
        """
        Export the last summary in the renderer shape.

        Returns:
            Dictionary of summary fields, empty if nothing has been analyzed
        """
        if self._results is not None:
            return self._results.to_dict()
        return {}
