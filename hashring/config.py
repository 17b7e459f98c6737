"""
Configuration management for hashring
"""

import logging
import os
import sys
import yaml
from typing import Dict, Any, Optional, List
from dataclasses import dataclass, field
from pathlib import Path

from .core.hashing import REPLICAS, MUL, INIT_V_IDX, MAX_INDEX_PRODUCT
from .errors import ConfigurationError

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class RingConfig:
    """Virtual node placement configuration"""
    replicas: int = REPLICAS
    spread_multiplier: int = MUL
    initial_replica_index: int = INIT_V_IDX

    def validate(self) -> List[str]:
        """Validate ring settings and return any errors"""
        errors = []

        for name in ('replicas', 'spread_multiplier', 'initial_replica_index'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                errors.append(f"{name} must be an integer, got {value!r}")
        if errors:
            return errors

        if self.replicas < 1:
            errors.append(f"replicas must be at least 1, got {self.replicas}")
        if self.spread_multiplier < 1:
            errors.append(f"spread_multiplier must be at least 1, got {self.spread_multiplier}")
        if self.initial_replica_index < 0:
            errors.append(f"initial_replica_index must not be negative, got {self.initial_replica_index}")

        if not errors:
            last_index = self.initial_replica_index + self.replicas - 1
            if last_index * self.spread_multiplier > MAX_INDEX_PRODUCT:
                errors.append(
                    f"replica index {last_index} * spread_multiplier {self.spread_multiplier} "
                    f"exceeds 32 bits"
                )

        return errors


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    log_file: Optional[str] = None
    format: str = DEFAULT_LOG_FORMAT

    def validate(self) -> List[str]:
        if not isinstance(self.level, str) or not isinstance(logging.getLevelName(self.level.upper()), int):
            return [f"Invalid log level: {self.level}"]
        return []


@dataclass
class HashRingConfig:
    """Main hashring configuration"""
    ring: RingConfig = field(default_factory=RingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, config_path: str) -> 'HashRingConfig':
        """Load configuration from YAML file"""
        config_path = Path(config_path)
        if not config_path.exists():
            return cls()

        with open(config_path, 'r') as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HashRingConfig':
        """Create config from dictionary"""
        config = cls()

        for key, value in data.items():
            if hasattr(config, key):
                attr = getattr(config, key)
                if hasattr(attr, '__dict__'):  # It's a dataclass
                    if isinstance(value, dict):
                        for sub_key, sub_value in value.items():
                            if hasattr(attr, sub_key):
                                setattr(attr, sub_key, sub_value)
                else:
                    setattr(config, key, value)

        return config

    @classmethod
    def from_env(cls) -> 'HashRingConfig':
        """Load configuration from environment variables"""
        config = cls()

        # Ring settings
        config.ring.replicas = int(os.getenv('HASHRING_REPLICAS', config.ring.replicas))
        config.ring.spread_multiplier = int(
            os.getenv('HASHRING_SPREAD_MULTIPLIER', config.ring.spread_multiplier))
        config.ring.initial_replica_index = int(
            os.getenv('HASHRING_INITIAL_REPLICA_INDEX', config.ring.initial_replica_index))

        # Logging settings
        config.logging.level = os.getenv('HASHRING_LOG_LEVEL', config.logging.level)
        config.logging.log_file = os.getenv('HASHRING_LOG_FILE', config.logging.log_file)

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary"""
        result = {}
        for key, value in self.__dict__.items():
            if hasattr(value, '__dict__'):  # It's a dataclass
                result[key] = {k: v for k, v in value.__dict__.items()}
            else:
                result[key] = value
        return result

    def save_to_file(self, config_path: str):
        """Save configuration to YAML file"""
        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, indent=2)

    def validate(self) -> List[str]:
        """Validate configuration and return any errors"""
        return self.ring.validate() + self.logging.validate()


def setup_logging(level: str = "INFO", log_file: Optional[str] = None,
                  fmt: str = DEFAULT_LOG_FORMAT) -> logging.Logger:
    """Set up logging for the hashring package"""

    errors = LoggingConfig(level=level, log_file=log_file, format=fmt).validate()
    if errors:
        raise ConfigurationError(errors)

    formatter = logging.Formatter(fmt)

    package_logger = logging.getLogger("hashring")
    package_logger.setLevel(getattr(logging, level.upper()))

    # Console handler
    if not any(type(h) is logging.StreamHandler and h.stream is sys.stdout
               for h in package_logger.handlers):
        package_logger.addHandler(logging.StreamHandler(sys.stdout))

    for handler in package_logger.handlers:
        handler.setFormatter(formatter)

    # File handler if specified
    if log_file:
        # Create log directory if it doesn't exist
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    return package_logger
