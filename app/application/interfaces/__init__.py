"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    IAccountRepository,
    IEntityRepository,
    IPortfolioUserRepository,
)
from app.application.interfaces.services import (
    ICacheInvalidator,
    ICacheService,
    IEntityKeys,
)

__all__ = [
    "IAccountRepository",
    "ICacheInvalidator",
    "ICacheService",
    "IEntityKeys",
    "IEntityRepository",
    "IPortfolioUserRepository",
]
