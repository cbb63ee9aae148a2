"""
Unified Logger System.

JSON-only structured logging for the styles generator. Every component
obtains its logger from LoggerFactory so output lines share one shape and
can be shipped to a log pipeline as-is.

Design Principles:
    - Strong typing with dataclasses (stdlib only)
    - Enum safety for categories
    - Component-specific loggers
    - Clean factory pattern

Exports:
    ComponentType: Enum for component types
    LogLevel: Enum for log levels
    LogContext: Logging context dataclass
    ComponentConfig: Per-component logger settings
    JSONFormatter: Formatter emitting one JSON object per record
    LoggerFactory: Factory for creating loggers
    log_exceptions: Exception logging decorator

Dependencies:
    Standard library only (logging, enum, dataclasses, json)
"""

from enum import Enum
from typing import Optional, Dict, Any
from datetime import datetime, timezone
from dataclasses import dataclass
import logging
import sys
import os
import json
import traceback
from functools import wraps


# ============================================================================
# COMPONENT TYPES - Architectural layers
# ============================================================================

class ComponentType(Enum):
    """
    Component types aligned with the generator's layers.

    Each layer has specific logging needs and levels.
    """
    TRIGGER = "trigger"        # Entry point layer (CLI)
    SERVICE = "service"        # Document generation engine
    REPOSITORY = "repository"  # Catalog loading and asset access
    FACTORY = "factory"        # Object creation layer
    VALIDATOR = "validator"    # Catalog validation
    ADAPTER = "adapter"        # Output writers (file, blob)


# ============================================================================
# LOG LEVELS - Standard Python levels with enum safety
# ============================================================================

class LogLevel(Enum):
    """
    Standard Python log levels as enum for type safety.
    """
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_python_level(self) -> int:
        """Convert to Python logging level constant."""
        return getattr(logging, self.value)

    @classmethod
    def from_string(cls, level: str) -> 'LogLevel':
        """Create from string, case-insensitive."""
        return cls[level.upper()]


# ============================================================================
# LOG CONTEXT - Correlation and tracking
# ============================================================================

@dataclass
class LogContext:
    """
    Context for log correlation across one generation run.
    """
    run_id: Optional[str] = None        # One CLI invocation
    config_path: Optional[str] = None   # Catalog being generated
    style_id: Optional[str] = None      # Style currently processed
    destination: Optional[str] = None   # Writer destination

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            k: v for k, v in {
                'run_id': self.run_id,
                'config_path': self.config_path,
                'style_id': self.style_id,
                'destination': self.destination,
            }.items() if v is not None
        }


# ============================================================================
# COMPONENT CONFIGURATION - Per-component settings
# ============================================================================

@dataclass
class ComponentConfig:
    """
    Configuration for component-specific logging.
    """
    component_type: ComponentType
    log_level: LogLevel = LogLevel.INFO


# ============================================================================
# JSON FORMATTER - Structured logging
# ============================================================================

class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.
    Outputs one JSON object per line so log collectors can parse it directly.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON.

        Args:
            record: Python LogRecord to format

        Returns:
            JSON string with structured log data
        """
        log_obj = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'message': record.getMessage(),
            'logger': record.name,
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if hasattr(record, 'custom_dimensions'):
            log_obj['customDimensions'] = record.custom_dimensions

        if record.exc_info:
            log_obj['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else None,
                'message': str(record.exc_info[1]) if record.exc_info[1] else None,
                'traceback': self.formatException(record.exc_info)
            }

        return json.dumps(log_obj, default=str)


# ============================================================================
# LOGGER FACTORY - Creates component-specific loggers
# ============================================================================

def _default_level() -> LogLevel:
    """Resolve the default level from DEBUG_LOGGING / LOG_LEVEL."""
    if os.getenv('DEBUG_LOGGING', '').lower() == 'true':
        return LogLevel.DEBUG
    try:
        return LogLevel.from_string(os.getenv('LOG_LEVEL', 'INFO'))
    except KeyError:
        return LogLevel.INFO


class LoggerFactory:
    """
    Factory for creating component-specific loggers.

    Example:
        logger = LoggerFactory.create_logger(
            ComponentType.SERVICE,
            "DocumentGenerator"
        )
        logger.info("Generating documents")
    """

    @classmethod
    def default_config(cls, component_type: ComponentType) -> ComponentConfig:
        """Default configuration for a component type."""
        return ComponentConfig(component_type=component_type, log_level=_default_level())

    @classmethod
    def create_logger(
        cls,
        component_type: ComponentType,
        name: str,
        context: Optional[LogContext] = None,
        config: Optional[ComponentConfig] = None
    ) -> logging.Logger:
        """
        Create a logger for a specific component.

        Args:
            component_type: Type of component
            name: Component name (e.g., "DocumentGenerator")
            context: Optional log context for correlation
            config: Optional custom configuration

        Returns:
            Configured Python logger
        """
        if config is None:
            config = cls.default_config(component_type)

        logger_name = f"{component_type.value}.{name}"
        logger = logging.getLogger(logger_name)

        if isinstance(config.log_level, str):
            log_level = LogLevel.from_string(config.log_level).to_python_level()
        else:
            log_level = config.log_level.to_python_level()
        logger.setLevel(log_level)

        # One JSON handler per logger, even when create_logger is called repeatedly
        has_json_handler = any(
            isinstance(h.formatter, JSONFormatter) for h in logger.handlers
        )
        if not has_json_handler:
            handler = logging.StreamHandler(sys.stdout)
            handler.setLevel(log_level)
            handler.setFormatter(JSONFormatter())
            logger.addHandler(handler)

        logger.propagate = True
        logger._log_context = context

        # Inject component info and context as custom dimensions
        if not hasattr(logger, '_context_wrapped'):
            original_log = logger._log

            def log_with_context(level, msg, args, exc_info=None, extra=None, stack_info=False, stacklevel=1):
                """Wrapper to inject context as custom dimensions."""
                if extra is None:
                    extra = {}

                current = getattr(logger, "_log_context", None)
                custom_dims = current.to_dict() if current else {}
                custom_dims['component_type'] = component_type.value
                custom_dims['component_name'] = name

                if 'custom_dimensions' in extra:
                    custom_dims.update(extra['custom_dimensions'])

                extra['custom_dimensions'] = custom_dims

                # +1 to account for this wrapper function
                original_log(level, msg, args, exc_info=exc_info, extra=extra,
                             stack_info=stack_info, stacklevel=stacklevel + 1)

            logger._log = log_with_context
            logger._context_wrapped = True

        return logger

    @classmethod
    def create_with_context(
        cls,
        component_type: ComponentType,
        name: str,
        run_id: Optional[str] = None,
        config_path: Optional[str] = None,
        style_id: Optional[str] = None,
        destination: Optional[str] = None
    ) -> logging.Logger:
        """
        Create logger with run context.

        Args:
            component_type: Type of component
            name: Component name
            run_id: Optional run identifier
            config_path: Optional catalog path
            style_id: Optional style id
            destination: Optional writer destination

        Returns:
            Configured Python logger with context
        """
        context = LogContext(
            run_id=run_id,
            config_path=config_path,
            style_id=style_id,
            destination=destination
        ) if any([run_id, config_path, style_id, destination]) else None

        return cls.create_logger(
            component_type=component_type,
            name=name,
            context=context
        )


# ============================================================================
# EXCEPTION DECORATOR - Automatic exception logging with context
# ============================================================================

def log_exceptions(component_type: Optional[ComponentType] = None,
                   component_name: Optional[str] = None,
                   logger: Optional[logging.Logger] = None):
    """
    Decorator to automatically log exceptions with full context.

    Can be used in three ways:
    1. With existing logger: @log_exceptions(logger=my_logger)
    2. With component info: @log_exceptions(ComponentType.SERVICE, "DocumentGenerator")
    3. Simple: @log_exceptions() - uses function module and name

    The exception is always re-raised.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if logger:
                log = logger
            elif component_type and component_name:
                log = LoggerFactory.create_logger(component_type, component_name)
            else:
                log = LoggerFactory.create_logger(
                    ComponentType.SERVICE,
                    func.__module__ or "unknown"
                )

            try:
                return func(*args, **kwargs)
            except Exception as e:
                log.error(
                    f"Exception in {func.__name__}",
                    exc_info=True,
                    extra={
                        'custom_dimensions': {
                            'function_name': func.__name__,
                            'function_module': func.__module__,
                            'exception_type': type(e).__name__,
                            'exception_message': str(e),
                            'traceback': traceback.format_exc()
                        }
                    }
                )
                raise
        return wrapper
    return decorator
