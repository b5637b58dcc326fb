def cache_key(alias: str) -> str:
    """Key under which the URL for alias is cached"""
    return f"alias:{alias}"
