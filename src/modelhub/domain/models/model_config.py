"""Model configuration value object handed to chat client factories"""

from dataclasses import asdict, dataclass
from typing import Any, Dict

# Used when the persisted max output tokens is left at 0 (unset)
MAX_OUTPUT_TOKENS = 2500


@dataclass(frozen=True)
class ModelConfig:
    """Resolved, request-specific configuration for a chat client"""

    temperature: float
    max_retries: int
    top_p: float
    timeout: int  # Seconds, forwarded to the HTTP layer
    max_tokens: int
    model_name: str

    def __post_init__(self):
        """Validate config data"""
        if self.max_tokens < 1:
            raise ValueError("max_tokens must be a positive integer")

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary view (CLI output, logging)"""
        return asdict(self)
