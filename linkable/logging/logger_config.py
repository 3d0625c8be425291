"""
Logging Configuration
Provides structured logging with sensitive data filtering
"""
import logging
import logging.handlers
import json
import re
from pathlib import Path
from typing import Dict, List, Optional, Union
from datetime import datetime


class SensitiveDataFilter(logging.Filter):
    """
    Filter to redact sensitive data from logs

    Route parameters end up in log messages, so tokens and secrets
    passed as query parameters are redacted.
    """

    SENSITIVE_PATTERNS = {
        # JSON / dict style fields
        'password': r'''(["']password["']\s*:\s*)["'][^"']*["']''',
        'token': r'''(["'](?:access_|refresh_|api_)?token["']\s*:\s*)["'][^"']*["']''',
        'secret': r'''(["']secret(?:_key)?["']\s*:\s*)["'][^"']*["']''',
        'api_key': r'''(["']api_key["']\s*:\s*)["'][^"']*["']''',

        # Query string style parameters
        'query': r'((?:password|token|access_token|api_key|secret|signature)=)[^&\s]*',
    }

    def __init__(self, additional_patterns: Optional[Dict[str, str]] = None):
        """
        Initialize sensitive data filter
        Args:
            additional_patterns: Additional regex patterns to filter (name: pattern)
                Each pattern must capture the kept prefix as group 1.
        """
        super().__init__()
        self.patterns = self.SENSITIVE_PATTERNS.copy()
        if additional_patterns:
            self.patterns.update(additional_patterns)

        self.compiled_patterns = {
            name: re.compile(pattern, re.IGNORECASE)
            for name, pattern in self.patterns.items()
        }

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Filter log record to redact sensitive data
        Returns:
            True (always pass the record, but with redacted content)
        """
        if isinstance(record.msg, str):
            record.msg = self._redact_sensitive_data(record.msg)

        if record.args:
            if isinstance(record.args, dict):
                record.args = {
                    k: self._redact_sensitive_data(v) if isinstance(v, str) else v
                    for k, v in record.args.items()
                }
            elif isinstance(record.args, tuple):
                record.args = tuple(
                    self._redact_sensitive_data(arg) if isinstance(arg, str) else arg
                    for arg in record.args
                )

        return True

    def _redact_sensitive_data(self, text: str) -> str:
        """
        Redact sensitive data from text

        Returns:
            Text with sensitive data redacted
        """
        redacted = text

        for name, pattern in self.compiled_patterns.items():
            if name == 'query':
                redacted = pattern.sub(r'\1[REDACTED]', redacted)
            else:
                redacted = pattern.sub(r'\1"[REDACTED]"', redacted)

        return redacted


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging

    Outputs logs in JSON format for easy parsing and analysis
    """

    RESERVED_FIELDS = frozenset([
        'name', 'msg', 'args', 'created', 'filename', 'funcName',
        'levelname', 'levelno', 'lineno', 'module', 'msecs',
        'pathname', 'process', 'processName', 'relativeCreated',
        'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
        'getMessage', 'message', 'taskName',
    ])

    def __init__(self, include_fields: Optional[List[str]] = None):
        """
        Initialize JSON formatter

        Args:
            include_fields: Additional fields to include in JSON output
        """
        super().__init__()
        self.include_fields = include_fields or []

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON

        Args:
            record: Log record to format

        Returns:
            JSON formatted log string
        """
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data['stack'] = record.stack_info

        for field in self.include_fields:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        # Extra fields passed via logger.x(..., extra={...})
        for key, value in record.__dict__.items():
            if key not in self.RESERVED_FIELDS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class LoggerConfig:
    """
    Centralized logging configuration
    """
    @staticmethod
    def setup_logger(
        name: str,
        format_type: str = 'json',
        log_file: Optional[Union[str, Path]] = None,
        max_bytes: int = None,
        backup_count: int = None,
        filter_sensitive: bool = True,
        additional_sensitive_patterns: Optional[Dict[str, str]] = None,
    ) -> logging.Logger:
        """
        Setup a logger with rotation and optional sensitive data filtering

        Args:
            name: Logger name
            format_type: Format type ('json' or 'text')
            log_file: Path of a rotating log file (optional)
            max_bytes: Max bytes before rotation (default: 10MB)
            backup_count: Number of backup files to keep
            filter_sensitive: Enable sensitive data filtering
            additional_sensitive_patterns: Additional patterns to filter

        Returns:
            Configured logger

        Example:
            logger = LoggerConfig.setup_logger(
                'linkable',
                format_type='text',
                log_file='storage/logs/linkable.log',
            )
        """
        from linkable.defaults import DEFAULT_LOG_MAX_BYTES, DEFAULT_LOG_BACKUP_COUNT, DEFAULT_APP_ENV
        from linkable.support import Config

        if max_bytes is None:
            max_bytes = DEFAULT_LOG_MAX_BYTES
        if backup_count is None:
            backup_count = DEFAULT_LOG_BACKUP_COUNT

        app_env = Config.get('app.APP_ENV', DEFAULT_APP_ENV)
        app_debug = Config.get('app.APP_DEBUG', False)

        logger = logging.getLogger(name)
        logger.setLevel(LoggerConfig.get_level_by_environment(app_env))

        # Clear existing handlers
        logger.handlers.clear()

        if format_type == 'json':
            formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )

        handlers: List[logging.Handler] = []

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            ))

        # Console output in debug mode, or when there is nowhere else to write
        if app_debug or not handlers:
            handlers.append(logging.StreamHandler())

        sensitive_filter = SensitiveDataFilter(additional_sensitive_patterns) if filter_sensitive else None
        for handler in handlers:
            handler.setFormatter(formatter)
            if sensitive_filter:
                handler.addFilter(sensitive_filter)
            logger.addHandler(handler)

        # Prevent propagation to avoid duplicate logs
        logger.propagate = False

        return logger

    @staticmethod
    def get_level_by_environment(environment: str) -> int:
        """
        Get logging level based on environment

        Args:
            environment: Environment name ('production', 'development', 'testing')

        Returns:
            Logging level
        """
        levels = {
            'production': logging.WARNING,
            'staging': logging.INFO,
            'development': logging.DEBUG,
            'testing': logging.ERROR,
        }
        return levels.get(environment.lower(), logging.INFO)
