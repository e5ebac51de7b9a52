from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

DEFAULT_API_URL = "https://api.stormglass.io/v2"
DEFAULT_SECTION = "App.resources.StormGlass"


@dataclass(frozen=True)
class StormGlassSettings:
    """Configuration for the StormGlass API client. Read-only once loaded."""
    api_token: str
    api_url: str = DEFAULT_API_URL
    timeout: float = 30.0

    def __post_init__(self):
        # frozen dataclass, so bypass __setattr__ to normalise the base url
        object.__setattr__(self, 'api_url', self.api_url.rstrip('/'))

    @staticmethod
    def from_env() -> 'StormGlassSettings':
        """Create StormGlass settings from environment variables."""
        api_token = os.environ['STORMGLASS_API_TOKEN']
        api_url = os.environ.get('STORMGLASS_API_URL', DEFAULT_API_URL)
        timeout_raw = os.environ.get('STORMGLASS_TIMEOUT', '30')
        try:
            timeout = float(timeout_raw)
        except ValueError as e:
            raise ValueError(f"Malformed STORMGLASS_TIMEOUT: {timeout_raw!r}") from e
        return StormGlassSettings(api_token=api_token, api_url=api_url, timeout=timeout)

    @staticmethod
    def from_mapping(config: Mapping[str, Any], section: str = DEFAULT_SECTION) -> 'StormGlassSettings':
        """Create settings from a namespaced section of a nested config mapping.

        ``section`` is a dotted path, e.g. ``App.resources.StormGlass`` selects
        ``config['App']['resources']['StormGlass']``. The section must hold
        ``apiToken`` and may hold ``apiUrl`` and ``timeout``.
        """
        node: Any = config
        for part in section.split('.'):
            if not isinstance(node, Mapping) or part not in node:
                raise ValueError(f"Missing configuration section: {section}")
            node = node[part]
        if not isinstance(node, Mapping):
            raise ValueError(f"Configuration section {section} is not a mapping")
        api_token = node.get('apiToken')
        if not api_token:
            raise ValueError(f"Missing apiToken in configuration section {section}")
        return StormGlassSettings(
            api_token=str(api_token),
            api_url=str(node.get('apiUrl') or DEFAULT_API_URL),
            timeout=float(node.get('timeout', 30.0)),
        )
