import logging
import re

_EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+")
_DOB_RE = re.compile(r"(date_of_birth['\"]?\s*[:=]\s*(?:datetime\.date\()?['\"]?)[\d\-, ]+")


class SensitiveDataFilter(logging.Filter):
    """
    Logging filter that redacts personal data (e-mails, dates of birth)
    that may appear when profiles are logged.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            msg = record.getMessage()
        except Exception:
            return True
        redacted = _EMAIL_RE.sub("<REDACTED>", msg)
        redacted = _DOB_RE.sub(r"\1<REDACTED>", redacted)
        if redacted != msg:
            record.msg = redacted
            record.args = ()
        return True


def setup_logging(level: int | str = logging.INFO) -> None:
    """
    Set up root logger with a stream handler and the sensitive data filter.
    """
    root = logging.getLogger()
    if root.handlers:
        return  # already configured
    root.setLevel(level)
    fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    ch.addFilter(SensitiveDataFilter())
    root.addHandler(ch)
