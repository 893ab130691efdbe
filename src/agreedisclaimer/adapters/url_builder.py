"""URL builder for assets served under a common prefix."""


class PrefixUrlBuilder:
    """Builds ``{base_url}/{namespace}/{relative_path}``."""

    def __init__(self, base_url: str = "/apps"):
        self.base_url = base_url.rstrip("/")

    def link_to(self, namespace: str, relative_path: str) -> str:
        return f"{self.base_url}/{namespace}/{relative_path.lstrip('/')}"
