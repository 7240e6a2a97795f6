"""Scheduled maintenance entry points.

Meant to be invoked by an external scheduler (cron, Kubernetes CronJob):

    python -c "import asyncio; from lifelog_auth.core.container import run_token_cleanup; asyncio.run(run_token_cleanup())"
"""

from lifelog_auth.core.config import get_settings
from lifelog_auth.core.container.infrastructure import get_database, get_logger
from lifelog_auth.core.container.services import build_refresh_token_lifecycle


async def run_token_cleanup() -> int:
    """Purge refresh tokens that lapsed longer ago than the cleanup grace.

    Returns:
        Number of deleted rows.

    Raises:
        Exception: Database errors are logged and re-raised so the scheduler
            records the run as failed.
    """
    logger = get_logger().bind(job="refresh_token_cleanup")
    try:
        async with get_database().get_session() as session:
            lifecycle = build_refresh_token_lifecycle(session)
            deleted = await lifecycle.purge_expired(
                get_settings().expired_token_cleanup_grace
            )
    except Exception as e:
        logger.error("refresh_token_cleanup_failed", error=e)
        raise

    logger.info("refresh_token_cleanup_finished", deleted=deleted)
    return deleted
