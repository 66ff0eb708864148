"""Dependency injection container."""
from dependency_injector import containers, providers

from chat_completion.assembler import ResponseAssembler
from chat_completion.decoders import UsageDecoder
from core.logger import LoggerService
from core.settings import Settings


class Container(containers.DeclarativeContainer):
    """Main application container."""

    # Settings
    settings = providers.Singleton(Settings)

    # Core services
    logger = providers.Singleton(LoggerService, settings_instance=settings)

    # Decoding
    usage_decoder = providers.Singleton(UsageDecoder, logger=logger)
    response_assembler = providers.Singleton(
        ResponseAssembler,
        logger=logger,
        settings=settings,
        usage_decoder=usage_decoder,
    )


container = Container()
