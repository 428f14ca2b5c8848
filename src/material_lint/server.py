"""MCP server exposing the Material for MkDocs linter over stdio."""
import logging
import sys

from mcp.server.fastmcp import FastMCP

from material_lint import __version__
from material_lint.config import Config
from material_lint.tools import lint

logger = logging.getLogger(__name__)


def create_server(config: Config) -> FastMCP:
    """Build a FastMCP server with the lint tools registered."""
    mcp = FastMCP("material-lint")
    lint.register(mcp, config)
    return mcp


def main():
    """Main entry point for the MCP server."""
    # stdout carries JSON-RPC, so logs go to stderr
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)]
    )

    try:
        config = Config.load()
    except (OSError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logger.info(f"material-lint v{__version__} MCP server starting")
    if config.enabled_rules is not None:
        logger.info(f"Enabled rules: {', '.join(config.enabled_rules)}")
    if config.disabled_rules:
        logger.info(f"Disabled rules: {', '.join(config.disabled_rules)}")

    try:
        mcp = create_server(config)
        logger.info("Serving lint_document, lint_markdown, generate_lint_report, get_lint_rules on stdio")
        mcp.run(transport="stdio")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
