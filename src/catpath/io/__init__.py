from .probes import EnvHomeResolver, StatDirectoryProbe

__all__ = ['EnvHomeResolver', 'StatDirectoryProbe']
