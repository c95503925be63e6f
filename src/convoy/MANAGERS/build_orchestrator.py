"""
Orchestration of a convoy build: consul, build context, image.
"""
import logging
from typing import Optional
from ..BUILDERS.consul_builder import ConsulBuilder
from ..BUILDERS.context_builder import ContextBuilder
from ..BUILDERS.image_builder import ImageBuilder
from ..MODELS.build_config import BuildConfig

logger = logging.getLogger(__name__)


class BuildOrchestrator:
    """
    Runs the build stages in order, stopping at the first failure.
    """
    def __init__(self,
                 config: BuildConfig,
                 consul_builder: Optional[ConsulBuilder] = None,
                 context_builder: Optional[ContextBuilder] = None,
                 image_builder: Optional[ImageBuilder] = None):
        """
        Initializes the orchestrator.

        :param config: Validated build configuration.
        """
        self.config = config
        self.consul_builder = consul_builder or ConsulBuilder(config.consul_location)
        self.context_builder = context_builder or ContextBuilder()
        self.image_builder = image_builder or ImageBuilder()

    def run(self) -> str:
        """
        Builds the convoy image.

        :return: The local image tag.
        :raises ConvoyError: From whichever stage failed.
        """
        consul_bytes = self.consul_builder.build()
        logger.debug("consul built (%d bytes)", len(consul_bytes))

        context = self.context_builder.assemble(consul_bytes)
        logger.info("build context assembled in %s", context.path)

        return self.image_builder.build(context.path, self.config.envoy_version)
