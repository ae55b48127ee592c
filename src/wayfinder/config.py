"""Router configuration.

RouterConfig is a frozen dataclass: immutable after creation, no
string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(client_url="https://example.com", maintenance_mode=True)
    """

    # Canonical landing path every alias redirects to
    landing_path: str = "/explore"

    # Absolute origin prepended to login return targets ("" keeps them relative)
    client_url: str = ""

    # Short-circuit every resolution to the maintenance outcome
    maintenance_mode: bool = False

    # Key in Location.state that marks a navigation as modal-intending
    modal_state_key: str = "modal"

    # Separator between the cosmetic slug and the identifier in thread paths
    delimiter: str = "~"

    # Literal segments compare case-insensitively unless this is set
    case_sensitive: bool = False

    def absolute_url(self, path: str) -> str:
        """Prefix *path* with ``client_url``."""
        return f"{self.client_url.rstrip('/')}{path}"
