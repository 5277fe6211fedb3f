"""
Shared utilities package.

Currently holds the logging configuration used by the API server and
scripts.
"""

from app.utils.logging_config import setup_logging, get_logger, configure_api_logging

__all__ = ['setup_logging', 'get_logger', 'configure_api_logging']
