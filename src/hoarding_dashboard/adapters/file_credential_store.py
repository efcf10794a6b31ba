"""JSON file storage for the persisted login credential."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from hoarding_dashboard.domain.models import PersistedCredential
from hoarding_dashboard.services.session import CredentialStore

_logger = logging.getLogger(__name__)


@dataclass
class JsonFileCredentialStore(CredentialStore):
    """Keeps the token and login email in a small JSON file."""

    path: Path

    def load(self) -> PersistedCredential | None:
        """Return the stored credential, if a readable one exists."""
        if not self.path.exists():
            return None
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            _logger.warning("Ignoring unreadable credential file %s", self.path)
            return None
        token = payload.get("token") if isinstance(payload, dict) else None
        if not token:
            return None
        email = str(payload.get("email", ""))
        return PersistedCredential(token=str(token), email=email)

    def save(self, credential: PersistedCredential) -> None:
        """Write the credential, creating the parent directory if needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps({"token": credential.token, "email": credential.email}),
            encoding="utf-8",
        )

    def clear(self) -> None:
        """Delete the stored credential."""
        self.path.unlink(missing_ok=True)
