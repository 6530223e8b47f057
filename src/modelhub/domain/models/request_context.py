"""Request context - what a single chat interaction asks for"""

from dataclasses import dataclass
from typing import Optional

from modelhub.domain.models.provider_id import ProviderId


@dataclass(frozen=True)
class RequestContext:
    """Read-only view of one user interaction"""

    model_name: str
    provider: Optional[ProviderId] = None  # Explicit override of the persisted default
