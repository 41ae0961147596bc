"""Cache key builders. Single place for key format (DRY).

Every cached view of an entity type is addressed by a key derived here, and
invalidation clears exactly the keys built here, so a key written by a read
path is always reachable by the write path.

Formats:
    list:           {Plural}
    item:           {Entity}_{id}
    page:           {Plural}Paged_Page{N}_Size{M}
    total count:    {Plural}TotalCount
    tracking set:   {Plural}PagedCacheKeys
    summary:        All{Plural}Summary
"""

from dataclasses import dataclass


def _validate_positive(value: int, name: str) -> None:
    """Raise ValueError if a numeric key component is not positive.

    Args:
        value: Number used in a cache key.
        name: Name of the component (for error message).

    Raises:
        ValueError: If value < 1.
    """
    if value < 1:
        raise ValueError(f"Cache key component {name!r} must be >= 1, got {value}")


@dataclass(frozen=True)
class EntityCacheKeys:
    """Key family for one entity type.

    Attributes:
        entity: Singular type name used in item keys (e.g. 'Project').
        plural: Plural type name used in collection keys (e.g. 'Projects').
        label: Human-readable label for log messages (e.g. 'projects').
    """

    entity: str
    plural: str
    label: str

    @property
    def list_key(self) -> str:
        return self.plural

    def item(self, entity_id: int) -> str:
        return f"{self.entity}_{entity_id}"

    def page(self, page_number: int, page_size: int) -> str:
        _validate_positive(page_number, "page_number")
        _validate_positive(page_size, "page_size")
        return f"{self.plural}Paged_Page{page_number}_Size{page_size}"

    @property
    def total_count(self) -> str:
        return f"{self.plural}TotalCount"

    @property
    def paged_tracking(self) -> str:
        return f"{self.plural}PagedCacheKeys"

    @property
    def summary(self) -> str:
        return f"All{self.plural}Summary"


PORTFOLIO_USER_KEYS = EntityCacheKeys("PortfolioUser", "PortfolioUsers", "portfolio users")
PROJECT_KEYS = EntityCacheKeys("Project", "Projects", "projects")
SKILL_KEYS = EntityCacheKeys("Skill", "Skills", "skills")
