"""Base logging functionality for algorithm tracing and debugging."""

import html
import logging
from functools import wraps
from typing import Any, Callable, List, TypeVar, cast

from cladelayout.logger.html_content import CSS_LOG

F = TypeVar("F", bound=Callable[..., Any])


class AlgorithmLogger:
    """Logger that mirrors console messages into an HTML report."""

    def __init__(self, name: str):
        self.name = name
        self.disabled = False
        self._html_content: List[str] = ['<div class="content">']
        self._section_open = False

        self.logger = logging.getLogger(name)

        # Only add a StreamHandler if none exists, so loggers sharing a name
        # do not print every message twice.
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(message)s"))
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)
            self.logger.propagate = False
        elif self.logger.level == logging.NOTSET:
            self.logger.setLevel(logging.INFO)

    def section(self, title: str):
        """Start a new section, closing the previous one."""
        if self.disabled:
            return
        if self._section_open:
            self._html_content.append("</section>")
            self._section_open = False

        self.logger.info(f"\n{'=' * 20} {title} {'=' * 20}\n")
        self._html_content.append(
            f'<section class="section"><h3>{html.escape(title)}</h3>'
        )
        self._section_open = True

    def end_section(self):
        if self.disabled:
            return
        if self._section_open:
            self._html_content.append("</section>")
            self._section_open = False

    def info(self, message: str):
        if self.disabled:
            return
        self.logger.info(message)
        self._html_content.append(f'<p class="info">{html.escape(message)}</p>')

    def warning(self, message: str):
        if self.disabled:
            return
        self.logger.warning(message)
        self._html_content.append(f'<p class="warning">{html.escape(message)}</p>')

    def debug(self, message: str):
        if self.disabled:
            return
        self.logger.debug(message)
        self._html_content.append(f'<p class="debug">{html.escape(message)}</p>')

    def result(self, label: str, value: Any):
        """Log a labelled result value."""
        if self.disabled:
            return
        self.logger.info(f"{label}: {value}")
        self._html_content.append(
            f'<div class="result"><strong>{html.escape(label)}:</strong> '
            f"{html.escape(str(value))}</div>"
        )

    def raw_html(self, html_content: str):
        if self.disabled:
            return
        self._html_content.append(html_content)

    def clear(self):
        """Drop all accumulated HTML content."""
        self._html_content = ['<div class="content">']
        self._section_open = False

    def get_html_content(self) -> str:
        """Return the report as an HTML fragment, without mutating the buffer."""
        parts = list(self._html_content)
        if self._section_open:
            parts.append("</section>")
        parts.append("</div>")
        return f"<style>{CSS_LOG}</style>\n" + "\n".join(parts)

    def log_execution(self, func: F) -> F:
        """Decorator wrapping a call in its own log section."""

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            self.section(f"Executing {func.__name__}")
            try:
                result = func(*args, **kwargs)
                self.info(f"{func.__name__} completed successfully")
                return result
            except Exception as e:
                self.info(f"Error in {func.__name__}: {str(e)}")
                raise

        return cast(F, wrapper)
