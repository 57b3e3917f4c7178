"""
Dependency Injection Container

Central place to configure dependencies:
- Configuration (environment variables, overridable in tests)
- API client (one shared aiohttp session per container)
- Services

Uses dependency-injector library for IoC container
"""

from dependency_injector import containers, providers
from pydantic import TypeAdapter

from .drivers.api_client import ApiClient
from .services.author_service import AuthorService
from .services.comment_service import CommentService
from .services.post_service import PostService


DEFAULT_BASE_URL = "http://127.0.0.1:9999/api/slow"


# Accepts true/false, 1/0, yes/no, on/off
_as_bool = TypeAdapter(bool).validate_python


class Container(containers.DeclarativeContainer):
    """
    Main DI Container

    Benefits:
    - Single source of truth for dependencies
    - Easy to test (override providers or config)
    """

    # ========== Configuration ==========
    config = providers.Configuration()

    # ========== Drivers ==========
    api_client = providers.Singleton(
        ApiClient,
        base_url=config.api.base_url,
        connect_timeout=config.api.connect_timeout,
        max_connections=config.api.max_connections,
        log_bodies=config.api.log_bodies
    )

    # ========== Services ==========
    author_service = providers.Factory(
        AuthorService,
        api_client=api_client
    )

    comment_service = providers.Factory(
        CommentService,
        api_client=api_client,
        author_service=author_service
    )

    post_service = providers.Factory(
        PostService,
        api_client=api_client,
        comment_service=comment_service,
        author_service=author_service
    )


def init_container() -> Container:
    """
    Create a container configured from the environment

    Call this on process startup
    """
    container = Container()
    container.config.api.base_url.from_env("AGGREGATOR_BASE_URL", default=DEFAULT_BASE_URL)
    container.config.api.connect_timeout.from_env("AGGREGATOR_CONNECT_TIMEOUT", default=30.0, as_=float)
    container.config.api.max_connections.from_env("AGGREGATOR_MAX_CONNECTIONS", default=100, as_=int)
    container.config.api.log_bodies.from_env("AGGREGATOR_LOG_BODIES", default=False, as_=_as_bool)
    container.config.log_level.from_env("AGGREGATOR_LOG_LEVEL", default="INFO")
    return container
