class CatalogDashError(Exception):
    """Base exception for all catalog_dash errors"""
    pass


class ConfigError(CatalogDashError):
    """Invalid or inconsistent global.json"""
    pass


class DatasetLoadError(CatalogDashError):
    """
    The catalog CSV could not be used: missing file, unreadable file, a
    parse failure in pandas or a frame that cannot be normalized
    """

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load catalog from {path}: {reason}")
