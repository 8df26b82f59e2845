from importlib.metadata import PackageNotFoundError, version

from .annotations import AnnotationRecorder, ChoiceAnnotation, SectionMarker
from .config import ParserConfig, build_parser, load_config
from .exceptions import ArgObjError, ConfigError
from .formatter import ArgObjHelpFormatter, SingleMetavarHelpFormatter
from .matching import has_argument, longest_argument
from .parser import ArgObj, HelpParser
from .renderer import HelpRenderer
from .text import ensure_period, remove_unnecessary_lines, wrap_text

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("argobj")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

# Explicit public API
__all__ = [
    # Version
    "__version__",
    # Parser
    "ArgObj",
    "HelpParser",
    # Help rendering
    "HelpRenderer",
    "ArgObjHelpFormatter",
    "SingleMetavarHelpFormatter",
    "AnnotationRecorder",
    "SectionMarker",
    "ChoiceAnnotation",
    # Configuration
    "ParserConfig",
    "load_config",
    "build_parser",
    # Text and matching helpers
    "ensure_period",
    "remove_unnecessary_lines",
    "wrap_text",
    "has_argument",
    "longest_argument",
    # Exceptions
    "ArgObjError",
    "ConfigError",
]
