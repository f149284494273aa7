"""AI directory data sources."""

from askai.providers.directory.json_directory_provider import JSONDirectoryProvider

__all__ = ["JSONDirectoryProvider"]
