"""
External systems: supplier FTP and the catalog REST API.
"""

from integrations.catalog_client import CatalogClient
from integrations.ftp_client import download_feed

__all__ = [
    "CatalogClient",
    "download_feed",
]
