"""Process-wide logging setup for the CLI.

``setup_logging`` runs first, before litellm is imported anywhere, so
that litellm picks up ``LITELLM_LOG`` when it builds its own loggers.
``cleanup_third_party_handlers`` runs once every import is done and
removes the handlers litellm attached along the way. Repeated calls
to either function do nothing.
"""

import logging
import os

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"

# Kept at WARNING regardless of --verbose
_SUPPRESSED_LOGGERS = (
    "LiteLLM",
    "LiteLLM Router",
    "LiteLLM Proxy",
    "httpx",
    "httpcore",
)

_LITELLM_LOGGERS = ("LiteLLM", "LiteLLM Router", "LiteLLM Proxy")

_phase1_done = False
_phase2_done = False


def _to_level(name: str) -> int:
    return getattr(logging, name.upper(), logging.WARNING)


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger; call before importing providers."""
    global _phase1_done  # noqa: PLW0603
    if _phase1_done:
        return
    _phase1_done = True

    # Read by litellm at import time
    os.environ.setdefault("LITELLM_LOG", "WARNING")

    logging.basicConfig(
        level=_to_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
    for name in _SUPPRESSED_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def set_level(level: str) -> None:
    """Change the root level once settings are known."""
    logging.getLogger().setLevel(_to_level(level))


def cleanup_third_party_handlers() -> None:
    """Route litellm records through the root handler only.

    Without this each litellm record is printed twice: once by the
    StreamHandler litellm installs and once after propagating to root.
    """
    global _phase2_done  # noqa: PLW0603
    if _phase2_done:
        return
    _phase2_done = True

    for name in _LITELLM_LOGGERS:
        lg = logging.getLogger(name)
        lg.handlers.clear()
        lg.propagate = True
