"""
Centralized logging configuration for the tool recommender.

Features:
- Colored console output keyed by log level
- LLM prompt/response blocks with clear separators
- API call dividers with request IDs and timing
"""

import logging
import re
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union


class Colors:
    """ANSI color codes for terminal output"""
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    GRAY = "\033[90m"


TIMESTAMP_PATTERN = re.compile(r'(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})')


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level, timestamp and logger name"""

    COLORS = {
        logging.DEBUG: Colors.GRAY,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.MAGENTA,
    }

    def format(self, record):
        formatted = super().format(record)

        level_color = self.COLORS.get(record.levelno, Colors.WHITE)
        formatted = formatted.replace(
            record.levelname,
            f"{level_color}{record.levelname}{Colors.RESET}",
            1
        )
        formatted = TIMESTAMP_PATTERN.sub(f"{Colors.CYAN}\\1{Colors.RESET}", formatted, count=1)

        if record.name:
            formatted = formatted.replace(
                f"{record.name} - ",
                f"{Colors.BLUE}{record.name}{Colors.RESET} - ",
                1
            )

        return formatted


class LLMLogger:
    """Logs LLM calls and API request boundaries as readable blocks"""

    def __init__(self, logger: logging.Logger, preview_chars: int = 500):
        self.logger = logger
        self.preview_chars = preview_chars
        self.divider_length = 80

    def _preview(self, text: str) -> str:
        if len(text) > self.preview_chars:
            return f"{text[:self.preview_chars]}..."
        return text

    def log_api_call_start(self, endpoint: str, method: str = "POST", request_id: Optional[str] = None):
        """Log the start of an API call"""
        divider = "=" * self.divider_length
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]

        self.logger.info(f"{Colors.MAGENTA}{divider}{Colors.RESET}")
        self.logger.info(f"{Colors.MAGENTA}🚀 API CALL START - {endpoint}{Colors.RESET}")
        if request_id:
            self.logger.info(f"{Colors.MAGENTA}📋 Request ID: {request_id}{Colors.RESET}")
        self.logger.info(f"{Colors.MAGENTA}⏰ Timestamp: {timestamp}{Colors.RESET}")

    def log_api_call_end(self, endpoint: str, method: str = "POST", request_id: Optional[str] = None,
                         duration_ms: Optional[float] = None, status: str = "completed"):
        """Log the end of an API call with its duration and status"""
        divider = "=" * self.divider_length

        self.logger.info(f"{Colors.MAGENTA}✅ API CALL END - {endpoint}{Colors.RESET}")
        if request_id:
            self.logger.info(f"{Colors.MAGENTA}📋 Request ID: {request_id}{Colors.RESET}")
        if duration_ms is not None:
            self.logger.info(f"{Colors.MAGENTA}⏱️  Duration: {duration_ms:.2f}ms{Colors.RESET}")
        self.logger.info(f"{Colors.MAGENTA}📊 Status: {status}{Colors.RESET}")
        self.logger.info(f"{Colors.MAGENTA}{divider}{Colors.RESET}")

    def log_llm_request(self, model: str, prompt: str, request_id: Optional[str] = None):
        """Log an outgoing LLM prompt"""
        divider = "-" * 60
        self.logger.info(f"{Colors.CYAN}{divider}{Colors.RESET}")
        self.logger.info(f"{Colors.CYAN}🤖 LLM REQUEST - {model}{Colors.RESET}")
        if request_id:
            self.logger.info(f"{Colors.CYAN}📋 Request ID: {request_id}{Colors.RESET}")
        self.logger.info(f"{Colors.CYAN}📝 Prompt ({len(prompt)} chars):{Colors.RESET}")
        self.logger.debug(f"{Colors.WHITE}{self._preview(prompt)}{Colors.RESET}")
        self.logger.info(f"{Colors.CYAN}{divider}{Colors.RESET}")

    def log_llm_response(self, model: str, response: str, request_id: Optional[str] = None,
                         duration_ms: Optional[float] = None):
        """Log an LLM response"""
        divider = "-" * 60
        self.logger.info(f"{Colors.CYAN}{divider}{Colors.RESET}")
        self.logger.info(f"{Colors.CYAN}🤖 LLM RESPONSE - {model}{Colors.RESET}")
        if request_id:
            self.logger.info(f"{Colors.CYAN}📋 Request ID: {request_id}{Colors.RESET}")
        if duration_ms is not None:
            self.logger.info(f"{Colors.CYAN}⏱️  Response Time: {duration_ms:.2f}ms{Colors.RESET}")
        self.logger.info(f"{Colors.WHITE}{self._preview(response)}{Colors.RESET}")
        self.logger.info(f"{Colors.CYAN}{divider}{Colors.RESET}")

    def log_llm_error(self, model: str, error: str, request_id: Optional[str] = None):
        """Log an LLM failure"""
        divider = "-" * 60
        self.logger.error(f"{Colors.RED}{divider}{Colors.RESET}")
        self.logger.error(f"{Colors.RED}❌ LLM ERROR - {model}{Colors.RESET}")
        if request_id:
            self.logger.error(f"{Colors.RED}📋 Request ID: {request_id}{Colors.RESET}")
        self.logger.error(f"{Colors.RED}💥 Error: {error}{Colors.RESET}")
        self.logger.error(f"{Colors.RED}{divider}{Colors.RESET}")


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "detailed",
    log_file: Optional[Union[str, Path]] = None,
    enable_colors: bool = True
) -> logging.Logger:
    """
    Set up the root logger

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log format style ('simple', 'detailed', 'json')
        log_file: Optional file path for logging
        enable_colors: Whether to enable colored output (terminal only)

    Returns:
        Configured root logger
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)

    use_colors = enable_colors and sys.stdout.isatty()
    if log_format == "simple":
        fmt = "%(levelname)s - %(message)s"
    elif log_format == "json":
        fmt = '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}'
        use_colors = False
    else:
        fmt = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter_cls = ColoredFormatter if use_colors else logging.Formatter
    console_handler.setFormatter(formatter_cls(fmt, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        # Files never get ANSI codes
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        root_logger.addHandler(file_handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name"""
    return logging.getLogger(name)


def get_llm_logger(name: str) -> LLMLogger:
    """Get an LLM logger for the specified logger name"""
    return LLMLogger(logging.getLogger(name))


def configure_logging_from_settings():
    """Configure logging based on application settings"""
    from core.config import settings

    log_level = 'DEBUG' if settings.debug else settings.log_level
    setup_logging(log_level=log_level, log_format='detailed', enable_colors=True)

    logger = get_logger(__name__)
    logger.info(f"🎨 Logging configured with level: {log_level}")


# Initialize logging when module is imported
configure_logging_from_settings()
