"""Runtime settings for logging and the default random source."""

import json
from pathlib import Path

from ksuid.logging import LogLevel, StructuredLogger
from ksuid.random_source import set_default_source, source_by_name

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class LoggingConfig:
    __slots__ = ("level",)

    def __init__(self, level="INFO"):
        self.level = level


class GeneratorConfig:
    __slots__ = ("random_source",)

    def __init__(self, random_source="system"):
        self.random_source = random_source


class Config:
    __slots__ = ("logging", "generator")

    def __init__(self, logging=None, generator=None):
        self.logging = logging or LoggingConfig()
        self.generator = generator or GeneratorConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            LoggingConfig(**d.get("logging", {})),
            GeneratorConfig(**d.get("generator", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))


def configure(path=None):
    """Load config and apply it to the logger and the default random source.

    Every setting is resolved before any is applied, so a bad config leaves
    the process untouched.
    """
    config = load_config(path)
    level = LogLevel.parse(config.logging.level)
    source = source_by_name(config.generator.random_source)

    logger = StructuredLogger.configure(min_level=level)
    set_default_source(source)
    logger.info(
        "KSUID runtime configured",
        log_level=level.name,
        random_source=config.generator.random_source,
    )
    return config
