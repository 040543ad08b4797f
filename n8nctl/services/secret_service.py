"""
Secret generation for the stack's credential slots.

Values are printed for the operator to copy into .env; nothing is persisted.
"""

import base64
import secrets as py_secrets
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from n8nctl.constants import LOG_DATETIME_FORMAT, SECRET_SLOTS


@dataclass(frozen=True)
class SecretSlot:
    """A credential key and how many random bytes back its value."""

    key: str
    num_bytes: int


class SecretService:
    """Produces independent random values for each credential slot."""

    def __init__(
        self,
        slots: Sequence[Tuple[str, int]] = SECRET_SLOTS,
        token_bytes: Callable[[int], bytes] = py_secrets.token_bytes,
    ):
        self.slots = [SecretSlot(key, num_bytes) for key, num_bytes in slots]
        self._token_bytes = token_bytes

    def generate_value(self, num_bytes: int) -> str:
        """Base64 of num_bytes from the secure source (openssl rand -base64 N)."""
        return base64.b64encode(self._token_bytes(num_bytes)).decode("ascii")

    def generate(self) -> Dict[str, str]:
        """One fresh value per slot, in slot order."""
        return {slot.key: self.generate_value(slot.num_bytes) for slot in self.slots}

    def render(
        self, values: Dict[str, str], generated_at: Optional[datetime] = None
    ) -> List[str]:
        """Format values as .env lines under a timestamp comment."""
        generated_at = generated_at or datetime.now()
        lines = [f"# Generated secrets - {generated_at.strftime(LOG_DATETIME_FORMAT)}"]
        lines.extend(f"{key}={value}" for key, value in values.items())
        return lines
