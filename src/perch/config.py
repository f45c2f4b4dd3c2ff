"""Application configuration.

AppConfig is a frozen dataclass. CLI flags passed to ``perch run`` take
precedence over the host, port and log level set here.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(title="Library", port=8080)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False
    workers: int = 1

    # Application identity (page titles and the ``perch routes`` banner)
    title: str = "My App"
    version: str = "0.1"
    author: str = ""
    about: str = "Simple framework for making Python webapps"

    # Templates
    template_dir: str | Path = "templates"
    autoescape: bool = True

    # Logging (forwarded to pounce)
    log_level: str = "info"
    log_format: str = "text"
