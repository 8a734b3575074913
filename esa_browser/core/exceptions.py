
class EsaBrowserError(Exception):
    """Base exception for all esa_browser errors"""
    pass

class ConfigError(EsaBrowserError):
    """Invalid or inconsistent global.json or dataset config"""
    pass

class ResourceLoadError(EsaBrowserError):
    """
    A static resource (CSV / GeoJSON) could not be fetched or parsed.
    Carries the resource name so callers can log and skip just that chart.
    """

    def __init__(self, resource: str, message: str):
        self.resource = resource
        super().__init__(f"{resource}: {message}")

class DatasetSchemaError(ResourceLoadError):
    """
    Resource loaded but doesn't match what the loader expects
    missing columns, no usable rows, etc
    """
    pass
