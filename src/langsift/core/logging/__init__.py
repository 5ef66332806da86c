"""
langsift Logging Module - Structured Application Logging.

Loggers are structlog BoundLoggers writing through the ``langsift`` standard
library logger, so applications embedding langsift can route or silence its
output with ordinary logging configuration.

Output Formats:
    - JSON: Structured format for log aggregation systems
    - Text: Human-readable key-value output
    - Rich: Console output with colors when DEBUG is enabled

Example:
    >>> from langsift.core.logging.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Detection finished", ngrams=42, results=1)
"""
