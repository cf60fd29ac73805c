"""
Data model for the tool catalog.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

ALL_CATEGORY_ID = 'all'


class SortMode(str, Enum):
    """Sort modes offered by the dashboard."""
    DEFAULT = 'default'
    NAME = 'name'
    CATEGORY = 'category'
    POPULAR = 'popular'


class ViewMode(str, Enum):
    GRID = 'grid'
    LIST = 'list'


@dataclass(frozen=True)
class ToolRecord:
    """One cataloged tool pointing at a standalone page."""
    id: int
    name: str
    description: str
    category: str
    url: str
    icon: str = ''
    tags: Tuple[str, ...] = ()
    is_local: bool = False
    is_original: bool = False
    is_migrated: bool = False
    priority: Optional[int] = None
    complexity: Optional[int] = None
    popular: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ToolRecord':
        """Create a record from a (schema-validated) mapping."""
        return cls(
            id=data['id'],
            name=data['name'],
            description=data.get('description', ''),
            category=data['category'],
            url=data['url'],
            icon=data.get('icon', ''),
            tags=tuple(data.get('tags', ())),
            is_local=data.get('is_local', False),
            is_original=data.get('is_original', False),
            is_migrated=data.get('is_migrated', False),
            priority=data.get('priority'),
            complexity=data.get('complexity'),
            popular=data.get('popular', False),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'category': self.category,
            'tags': list(self.tags),
            'icon': self.icon,
            'url': self.url,
            'is_local': self.is_local,
            'is_original': self.is_original,
            'is_migrated': self.is_migrated,
            'priority': self.priority,
            'complexity': self.complexity,
            'popular': self.popular,
        }


@dataclass
class CategoryRecord:
    """A filter bucket shown in the sidebar."""
    id: str
    name: str
    icon: str = 'grid'
    count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'icon': self.icon,
            'count': self.count,
        }


@dataclass(frozen=True)
class Catalog:
    """
    The read-only tool and category lists for a session.

    Built once at load time and never mutated afterwards.
    """
    tools: Tuple[ToolRecord, ...] = ()
    categories: Tuple[CategoryRecord, ...] = field(default_factory=lambda: (
        CategoryRecord(id=ALL_CATEGORY_ID, name='全部工具', icon='grid', count=0),
    ))

    @classmethod
    def empty(cls) -> 'Catalog':
        """Zero tools and only the 'all' category with count 0."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.tools

    def get_tool(self, tool_id: int) -> Optional[ToolRecord]:
        for tool in self.tools:
            if tool.id == tool_id:
                return tool
        return None

    def get_category(self, category_id: str) -> Optional[CategoryRecord]:
        for category in self.categories:
            if category.id == category_id:
                return category
        return None
