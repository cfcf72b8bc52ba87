from .fs import ProjectFileResolverProtocol, ResponseFileReaderProtocol

__all__ = [
    'ProjectFileResolverProtocol',
    'ResponseFileReaderProtocol',
]
