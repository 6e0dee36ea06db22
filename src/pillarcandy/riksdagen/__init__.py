from pillarcandy.riksdagen.client import RiksdagenClient, RiksdagenConfig

_default_client: RiksdagenClient | None = None


def get_client() -> RiksdagenClient:
    global _default_client
    if _default_client is None:
        _default_client = RiksdagenClient(RiksdagenConfig())
    return _default_client
