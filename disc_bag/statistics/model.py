"""
Data models for statistics module.

Stats is the working container collectors write into; BagStats is the
immutable summary handed to consumers.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union


StatValue = Union[int, float, str, List[Any], Dict[Any, Any]]


@dataclass
class Stats:
    """
    Container for statistical results collected from a bag of discs.

    Statistics are organized into categories (e.g., 'brands', 'stability')
    with named values within each category.
    """
    categories: Dict[str, Dict[str, StatValue]] = field(default_factory=dict)

    def add_value(self, category: str, name: str, value: StatValue) -> None:
        """Add a statistical value to a category."""
        if category not in self.categories:
            self.categories[category] = {}
        self.categories[category][name] = value

    def get_value(self, category: str, name: str, default: Optional[StatValue] = None) -> Optional[StatValue]:
        """Get a statistical value from a category."""
        return self.categories.get(category, {}).get(name, default)

    def get_category(self, category: str) -> Dict[str, StatValue]:
        """Get all values in a category."""
        return self.categories.get(category, {})

    def merge(self, other: Stats) -> None:
        """Merge another Stats object into this one."""
        for category, values in other.categories.items():
            if category not in self.categories:
                self.categories[category] = {}
            self.categories[category].update(values)

    def to_dict(self) -> Dict[str, Dict[str, StatValue]]:
        """Convert to a plain dictionary."""
        return dict(self.categories)

    @classmethod
    def from_dict(cls, data: Dict[str, Dict[str, StatValue]]) -> Stats:
        """Create from a plain dictionary."""
        return cls(categories=data)


@dataclass(frozen=True)
class SpeedRange:
    min: float
    max: float

    def to_dict(self) -> Dict[str, float]:
        return {'min': self.min, 'max': self.max}


@dataclass(frozen=True)
class NamedCount:
    """A label with the number of discs carrying it (brands, plastics)."""
    name: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'count': self.count}


@dataclass(frozen=True)
class CategoryCount:
    category: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {'category': self.category, 'count': self.count}


@dataclass(frozen=True)
class ColorCount:
    color: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {'color': self.color, 'count': self.count}


@dataclass(frozen=True)
class SpeedCount:
    speed: float
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {'speed': self.speed, 'count': self.count}


@dataclass(frozen=True)
class StabilityBreakdown:
    """Number of discs in each stability class."""
    understable: int = 0
    stable: int = 0
    overstable: int = 0

    @property
    def total(self) -> int:
        return self.understable + self.stable + self.overstable

    def to_dict(self) -> Dict[str, int]:
        return {'understable': self.understable, 'stable': self.stable, 'overstable': self.overstable}


@dataclass(frozen=True)
class CategoryStability:
    """Stability breakdown restricted to the discs of one category."""
    category: str
    understable: int = 0
    stable: int = 0
    overstable: int = 0

    @property
    def total(self) -> int:
        return self.understable + self.stable + self.overstable

    def to_dict(self) -> Dict[str, Any]:
        return {
            'category': self.category,
            'understable': self.understable,
            'stable': self.stable,
            'overstable': self.overstable,
        }


@dataclass(frozen=True)
class BagStats:
    """
    Aggregate analytics for one bag of discs.

    Created fresh on each calculation; holds no references back into the
    input collection.

    Attributes:
        total_discs: Number of input records, including empty ones.
        speed_range: Min/max over discs with a defined speed, or None.
        top_brand: Most common manufacturer, or None.
        categories_count: Number of distinct category labels observed.
        total_categories: Number of recognised category types.
        stability: Stability breakdown over discs with a defined turn.
        stability_by_category: One breakdown per observed category.
        category_distribution: Category counts, most common first.
        speed_distribution: Speed counts, slowest first.
        top_plastics: Most common plastics, at most three by default.
        color_distribution: Colour counts, most common first.
    """
    total_discs: int
    speed_range: Optional[SpeedRange]
    top_brand: Optional[NamedCount]
    categories_count: int
    total_categories: int
    stability: StabilityBreakdown
    stability_by_category: Tuple[CategoryStability, ...] = ()
    category_distribution: Tuple[CategoryCount, ...] = ()
    speed_distribution: Tuple[SpeedCount, ...] = ()
    top_plastics: Tuple[NamedCount, ...] = ()
    color_distribution: Tuple[ColorCount, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the plain dictionary shape consumed by dashboard renderers.

        Keys use the renderer contract names (camelCase); null values are None.

        Returns:
            Dictionary of summary fields.
        """
        return {
            'totalDiscs': self.total_discs,
            'speedRange': self.speed_range.to_dict() if self.speed_range else None,
            'topBrand': self.top_brand.to_dict() if self.top_brand else None,
            'categoriesCount': self.categories_count,
            'totalCategories': self.total_categories,
            'stability': self.stability.to_dict(),
            'stabilityByCategory': [entry.to_dict() for entry in self.stability_by_category],
            'categoryDistribution': [entry.to_dict() for entry in self.category_distribution],
            'speedDistribution': [entry.to_dict() for entry in self.speed_distribution],
            'topPlastics': [entry.to_dict() for entry in self.top_plastics],
            'colorDistribution': [entry.to_dict() for entry in self.color_distribution],
        }
