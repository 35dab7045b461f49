"""
Pipeline for running statistics collectors.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
import yaml

from disc_bag.statistics.base import StatisticsCollector, get_collector_registry
from disc_bag.statistics.model import Stats
from disc_bag.statistics.normalize import normalize_discs

logger = logging.getLogger(__name__)

# Options that must be positive integers when given
_POSITIVE_INT_OPTIONS = ('top_plastics_limit',)

# Fields every collector owns; the pipeline sets them, options may not
_RESERVED_OPTIONS = frozenset(f.name for f in fields(StatisticsCollector))


@dataclass
class StatisticsConfig:
    """
    Configuration for statistics collection.

    Attributes:
        collectors: Dict of collector_id -> enabled status
        statistics_options: Collector parameters (e.g. top_plastics_limit)
        config_file: Path to YAML config file (optional)
    """
    collectors: Dict[str, bool] = field(default_factory=dict)
    statistics_options: Dict[str, Any] = field(default_factory=dict)
    config_file: Optional[Path] = None

    def __post_init__(self) -> None:
        """Load configuration from file if config_file is specified and exists, then validate options."""
        if self.config_file and Path(self.config_file).exists():
            self._load_from_file()
        self._validate_options()

    def _load_from_file(self) -> None:
        """
        Load configuration from YAML file.

        Reads the 'statistics' section from the YAML file and extracts
        collector enable/disable settings and collector options.
        """
        collectors: Dict[str, bool] = {}
        options: Dict[str, Any] = {}
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
            statistics_config = data.get('statistics', {}) or {}

            # Load collector enabled/disabled settings
            collectors_config = statistics_config.get('collectors', {}) or {}
            for collector_id, settings in collectors_config.items():
                if isinstance(settings, dict):
                    collectors[collector_id] = settings.get('enabled', True)
                elif isinstance(settings, bool):
                    collectors[collector_id] = settings

            options_config = statistics_config.get('options', {}) or {}
            options.update(options_config.items())
        except (OSError, yaml.YAMLError, AttributeError, TypeError, ValueError) as e:
            logger.warning(f"Failed to load statistics config from {self.config_file}: {e}")
            return

        # Nothing is applied unless the whole file parsed
        self.collectors.update(collectors)
        # Explicit options passed to the constructor win over the file
        for name, value in options.items():
            self.statistics_options.setdefault(name, value)

        logger.info(f"Loaded statistics config from {self.config_file}")

    def _validate_options(self) -> None:
        reserved = sorted(_RESERVED_OPTIONS.intersection(self.statistics_options))
        if reserved:
            raise ValueError(f"Statistics options may not set collector fields: {', '.join(reserved)}")
        for name in _POSITIVE_INT_OPTIONS:
            if name not in self.statistics_options:
                continue
            value = self.statistics_options[name]
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"Statistics option '{name}' must be a positive integer, got {value!r}")

    def is_enabled(self, collector_id: str) -> bool:
        """
        Check if a collector is enabled.

        Args:
            collector_id: Identifier of the collector to check

        Returns:
            True if enabled (default if not specified), False otherwise
        """
        return self.collectors.get(collector_id, True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> StatisticsConfig:
        """
        Create configuration from dictionary.

        Useful for testing and programmatic configuration.

        Args:
            data: Dictionary with 'collectors' key mapping collector_id to enabled
                status, and optional 'options' key with collector parameters

        Returns:
            StatisticsConfig instance
        """
        return cls(
            collectors=dict(data.get('collectors', {})),
            statistics_options=dict(data.get('options', {})),
        )


@dataclass
class StatisticsPipeline:
    """
    Pipeline for running statistics collectors on a bag of discs.

    Attributes:
        collectors: List of collector instances to run
        config: Configuration for the pipeline
        app_hooks: Optional application hooks for progress reporting
    """
    collectors: List[StatisticsCollector] = field(default_factory=list)
    config: StatisticsConfig = field(default_factory=StatisticsConfig)
    app_hooks: Optional[Any] = field(default=None)

    def __post_init__(self) -> None:
        """
        Initialize collectors from registry if none provided.

        If no collectors are explicitly provided, automatically loads
        all registered collectors from the global registry.
        """
        if not self.collectors:
            self._load_collectors_from_registry()

    def _load_collectors_from_registry(self) -> None:
        """
        Load all registered collectors with configuration applied.

        Instantiates each collector from the registry, applies the
        enabled/disabled setting and passes any statistics options the
        collector declares as a field.
        """
        registry = get_collector_registry()
        for collector_id, collector_cls in registry.items():
            enabled = self.config.is_enabled(collector_id)
            accepted = {f.name for f in fields(collector_cls)} - _RESERVED_OPTIONS
            options = {name: value for name, value in self.config.statistics_options.items() if name in accepted}
            try:
                collector = collector_cls(enabled=enabled, app_hooks=self.app_hooks, **options)
                self.collectors.append(collector)
                logger.debug(f"Loaded collector: {collector_id} (enabled={enabled})")
            except (TypeError, ValueError) as e:
                logger.error(f"Failed to load collector {collector_id}: {e}")

    def run(self, discs: Optional[Iterable[Any]]) -> Stats:
        """
        Run all enabled collectors on the bag.

        Each record is normalized once; collectors only see normalized discs.

        Args:
            discs: Iterable of disc records (DiscRecord, objects or mappings)

        Returns:
            Stats object with all collected values
        """
        stats = Stats()

        disc_list = normalize_discs(discs)
        stats.add_value('bag', 'total_discs', len(disc_list))

        logger.debug(f"Running statistics on {len(disc_list)} discs")

        # Set up progress tracking
        enabled_collectors = [c for c in self.collectors if c.enabled]
        total_collectors = len(enabled_collectors)
        self._report_step(info="Collecting bag statistics", target=total_collectors, reset_counter=True, plus_step=0)

        for collector_num, collector in enumerate(enabled_collectors, start=1):
            try:
                logger.debug(f"Running collector: {collector.collector_id}")
                collector_stats = collector.collect(disc_list, stats, collector_num, total_collectors)
                stats.merge(collector_stats)

                # Report progress after each collector
                self._report_step(plus_step=1)
            except Exception as e:
                logger.error(f"Error in collector {collector.collector_id}: {e}", exc_info=True)

        skipped = [c.collector_id for c in self.collectors if not c.enabled]
        if skipped:
            logger.debug(f"Skipped disabled collectors: {', '.join(skipped)}")

        return stats

    def _report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 0) -> None:
        """
        Report a step via app hooks if available. (Private method)

        Args:
            info (str): Information message.
            target (int): Target count for progress.
            reset_counter (bool): Whether to reset the counter.
            plus_step (int): Incremental step count.
        """
        if self.app_hooks and callable(getattr(self.app_hooks, "report_step", None)):
            self.app_hooks.report_step(info=info, target=target, reset_counter=reset_counter, plus_step=plus_step)
        else:
            logger.debug(info)
