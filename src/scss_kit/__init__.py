"""scss-kit: SCSS tooling for Shopify theme projects."""

__version__ = "0.3.0"

from scss_kit.errors import (
    ConfigurationError,
    PathEscapeError,
    ScssKitError,
    SourceNotFoundError,
)

__all__ = [
    "__version__",
    "ConfigurationError",
    "PathEscapeError",
    "ScssKitError",
    "SourceNotFoundError",
]
