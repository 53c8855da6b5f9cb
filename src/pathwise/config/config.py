"""Configuration management for pathwise."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from pathwise.config.file_ops import write_text_file
from pathwise.config.paths import default_config_path
from pathwise.platform.logging import logger


HASH_CHUNK_SIZE_DEFAULT: int = 64 * 1024
GZIP_LEVEL_DEFAULT: int = 9
URL_TIMEOUT_DEFAULT: float = 30.0
SNIFF_BYTES_DEFAULT: int = 8192


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Runtime configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Bytes read per iteration when hashing files
    hash_chunk_size: int = HASH_CHUNK_SIZE_DEFAULT

    # Compression level used by gzip (0-9)
    gzip_level: int = GZIP_LEVEL_DEFAULT

    # Seconds to wait for remote reads
    url_timeout: float = URL_TIMEOUT_DEFAULT

    # Leading bytes handed to the magic sniffer
    sniff_bytes: int = SNIFF_BYTES_DEFAULT

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file and return the written location."""

        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        try:
            content = self._render_toml(config_dict)
            write_text_file(destination, content)
            logger.info("Configuration saved to %s", destination)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# pathwise configuration file")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/pathwise.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Bytes read per iteration when computing checksums")
        lines.append(f"hash_chunk_size = {self._format_toml_value(config['hash_chunk_size'])}")
        lines.append("")

        lines.append("# gzip compression level (0 = store, 9 = smallest)")
        lines.append(f"gzip_level = {self._format_toml_value(config['gzip_level'])}")
        lines.append("")

        lines.append("# Timeout in seconds for reading remote (URL) paths")
        lines.append(f"url_timeout = {self._format_toml_value(config['url_timeout'])}")
        lines.append("")

        lines.append("# Leading bytes inspected when sniffing a file's media type")
        lines.append(f"sniff_bytes = {self._format_toml_value(config['sniff_bytes'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""

        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls, source: Path | None = None) -> "Config":
        """Load configuration from file, falling back to defaults when absent."""

        if cls._instance is not None and source is None:
            return cls._instance

        config_file = source or default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning(
                        "Ignoring unknown configuration keys in %s: %s",
                        config_file,
                        ", ".join(unknown),
                    )
                config_dict = {k: v for k, v in config_dict.items() if k in known}

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)
            else:
                instance = cls()

            cls._instance = instance
            cls._loaded_from = config_file
            return instance

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


# Global configuration instance
config = Config.load()
