"""Application-wide configuration.

Uses ``pydantic-settings`` so every value can be overridden via environment
variables prefixed with ``GRAPH_PLAYGROUND_`` (or a local ``.env`` file).
"""

import secrets

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Global settings for the graph playground.

    Attributes:
        app_name: Title shown in the page header.
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        secret_key: Flask session key. Random per process unless set.
        host: Interface the dev server binds to.
        port: Port the dev server listens on.
        debug: Flask debug mode.
        canvas_width: SVG canvas width in pixels.
        canvas_height: SVG canvas height in pixels.
        max_input_chars: Graph / calculator inputs longer than this are rejected.
            The graph text rides in the session cookie, so keep it well under 4 KB.
        default_weighted: Initial state of the "Weighted" checkbox.
        default_directed: Initial state of the direction radio.
        default_input_mode: Initial input mode, ``plain`` or ``array``.
    """

    app_name: str = "Graph Playground"
    log_level: str = "INFO"
    secret_key: str = Field(default_factory=lambda: secrets.token_hex(32))
    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False

    canvas_width: int = 900
    canvas_height: int = 600
    max_input_chars: int = 2_000

    default_weighted: bool = True
    default_directed: bool = False
    default_input_mode: str = "plain"

    model_config = {
        "env_prefix": "GRAPH_PLAYGROUND_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
