"""
Factory for assembling a glossary site pipeline from configuration.
"""
from pathlib import Path
from typing import Optional
import logging

from .exceptions import ConfigurationError
from .pipeline import GlossarySitePipeline
from ..formatters.html_formatter import HtmlPageRenderer
from ..glossary.cross_referencer import CrossReferencer
from ..parsers.text_parser import GlossaryTextParser
from ..utils.config_manager import AppConfig


logger = logging.getLogger(__name__)


class GlossarySystemFactory:
    """Main factory for creating complete glossary site pipelines."""

    @staticmethod
    def create_parser(config: Optional[AppConfig] = None) -> GlossaryTextParser:
        config = config or AppConfig()
        return GlossaryTextParser(encoding=config.input.encoding)

    @staticmethod
    def create_renderer(
        output_dir: Optional[Path] = None,
        config: Optional[AppConfig] = None
    ) -> HtmlPageRenderer:
        config = config or AppConfig()
        target = Path(output_dir) if output_dir else Path(config.output_dir)
        render = config.render

        if not render.index_filename or "/" in render.index_filename:
            raise ConfigurationError(
                f"Invalid index filename: {render.index_filename!r}",
                component="renderer"
            )
        if not render.page_suffix:
            raise ConfigurationError("Page suffix cannot be empty", component="renderer")

        return HtmlPageRenderer(
            output_dir=target,
            index_title=render.index_title,
            index_filename=render.index_filename,
            page_suffix=render.page_suffix,
            encoding=render.encoding
        )

    @staticmethod
    def create_pipeline(
        output_dir: Optional[Path] = None,
        config: Optional[AppConfig] = None
    ) -> GlossarySitePipeline:
        """
        Create a pipeline writing into output_dir.

        Args:
            output_dir: Target folder (falls back to config.output_dir)
            config: Application config (defaults when None)

        Returns:
            Configured GlossarySitePipeline

        Raises:
            ConfigurationError: If rendering settings are unusable
        """
        config = config or AppConfig()
        parser = GlossarySystemFactory.create_parser(config)
        renderer = GlossarySystemFactory.create_renderer(output_dir, config)
        cross_referencer = CrossReferencer(page_suffix=config.render.page_suffix)

        logger.debug(f"Created pipeline for {renderer.output_dir}")
        return GlossarySitePipeline(parser, renderer, cross_referencer)
