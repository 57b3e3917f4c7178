import asyncio
import json
import logging
import sys
from typing import List

from .core.container import Container, init_container
from .core.domain import PostWithComments
from .core.exceptions import FetchFailure

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO"):
    # stdout carries the JSON result, logs go to stderr
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


async def run(container: Container) -> List[PostWithComments]:
    """Run one aggregation and release the HTTP session afterwards"""
    api_client = container.api_client()
    try:
        return await container.post_service().resolve_all()
    finally:
        await api_client.close()


def main() -> int:
    container = init_container()
    configure_logging(container.config.log_level())

    logger.info(f"[STARTUP] Aggregating from {container.config.api.base_url()}")
    try:
        posts = asyncio.run(run(container))
    except FetchFailure as e:
        logger.error(f"[ERROR] Aggregation failed: {e}")
        return 1

    json.dump([p.to_dict() for p in posts], sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0
