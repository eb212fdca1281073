"""
FTP download of the supplier stock feed.

Plain (unencrypted) FTP. Download problems are logged and never raised:
the run goes on with whatever file is already at the local path.
"""

import ftplib
from pathlib import Path
import structlog

from config.settings import Settings
from exceptions import FeedDownloadError

logger = structlog.get_logger(__name__)


def download_feed(settings: Settings) -> Path:
    """
    Fetch the stock feed to ``settings.local_feed_path``.

    Args:
        settings: Application settings

    Returns:
        The local feed path, whether or not the download succeeded
    """
    local_path = Path(settings.local_feed_path)

    if not settings.ftp_configured:
        logger.warning(
            "ftp_not_configured_skipping_download",
            has_host=bool(settings.ftp_host),
            has_user=bool(settings.ftp_user),
            local_path=str(local_path)
        )
        return local_path

    try:
        _download(settings, local_path)
    except FeedDownloadError as e:
        logger.error("feed_download_failed", **e.details)

    return local_path


def _download(settings: Settings, local_path: Path) -> bool:
    """
    Connect, check the remote file and download it.

    Returns:
        True if the file was downloaded, False if absent on the server

    Raises:
        FeedDownloadError: On any FTP or socket failure
    """
    remote_path = settings.ftp_file_path

    try:
        with ftplib.FTP() as ftp:
            ftp.connect(settings.ftp_host, settings.ftp_port)
            ftp.login(settings.ftp_user, settings.ftp_pass or "")
            logger.info("ftp_connected", host=settings.ftp_host)

            if not _remote_file_exists(ftp, remote_path):
                logger.warning("feed_not_found_on_server", remote_path=remote_path)
                return False

            local_path.parent.mkdir(parents=True, exist_ok=True)
            with open(local_path, "wb") as f:
                ftp.retrbinary(f"RETR {remote_path}", f.write)

            logger.info(
                "feed_downloaded",
                remote_path=remote_path,
                local_path=str(local_path)
            )
            return True

    except (ftplib.Error, OSError) as e:
        raise FeedDownloadError(
            message=f"Failed to download {remote_path}",
            details={
                "host": settings.ftp_host,
                "remote_path": remote_path,
                "error": str(e),
                "error_type": type(e).__name__,
            }
        ) from e


def _remote_file_exists(ftp: ftplib.FTP, remote_path: str) -> bool:
    """SIZE answers 550 for a missing file; needs binary mode on most servers."""
    ftp.voidcmd("TYPE I")
    try:
        ftp.size(remote_path)
    except ftplib.error_perm:
        return False
    return True
