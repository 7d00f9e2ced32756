import inspect
import logging
from opentelemetry import trace


class CustomLogger:
    """wrap the python logger to include the acting user and the caller with every record"""

    def __init__(self, name, level=None):
        self.logger = logging.getLogger(name)
        if level is not None:
            self.logger.setLevel(level)

    def get_username(self):
        """retrieve the username of the actor from the call stack, if there is one"""
        try:
            for frame_info in inspect.stack():
                actor = frame_info.frame.f_locals.get("actor")
                if actor is not None and getattr(actor, "username", None):
                    return actor.username
        except Exception as error:
            # not through _extra, which would look for the username again
            self.logger.error(
                "An error occurred while getting username: %s",
                str(error),
                extra={"caller_name": "get_username", "username": ""},
            )
        return ""

    def get_trace_context(self):
        """Get current trace and span context for log correlation"""
        try:
            current_span = trace.get_current_span()
            if current_span and current_span.is_recording():
                span_context = current_span.get_span_context()
                return {
                    "trace_id": f"{span_context.trace_id:032x}",
                    "span_id": f"{span_context.span_id:016x}",
                    "trace_flags": span_context.trace_flags,
                }
        except Exception:
            # logging here would recurse
            pass
        return {}

    def _extra(self, extra):
        caller_name = inspect.stack()[2].function
        return {
            **(extra or {}),
            "caller_name": caller_name,
            "username": self.get_username(),
            **self.get_trace_context(),
        }

    def info(self, *args, extra=None):
        """call logger.info with the caller_name and the username"""
        self.logger.info(*args, extra=self._extra(extra))

    def error(self, *args, extra=None):
        """call logger.error with the caller_name and the username"""
        self.logger.error(*args, extra=self._extra(extra))

    def debug(self, *args, extra=None):
        """call logger.debug with the caller_name and the username"""
        self.logger.debug(*args, extra=self._extra(extra))

    def exception(self, *args, extra=None):
        """call logger.exception with the caller_name and the username"""
        self.logger.exception(*args, extra=self._extra(extra))

    def warning(self, *args, extra=None):
        """call logger.warning with the caller_name and the username; `extra` carries structured fields"""
        self.logger.warning(*args, extra=self._extra(extra))
