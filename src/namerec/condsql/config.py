"""Builder configuration."""

from dataclasses import dataclass
from dataclasses import field

from namerec.condsql.dialects import get_quoter
from namerec.condsql.types import IdentifierQuoter


@dataclass(frozen=True)
class BuilderConfig:
    """
    Configuration for WHERE clause builders.

    dialect selects identifier quoting through sqlglot. None leaves column
    names exactly as they appear in the condition set.
    """

    dialect: str | None = None
    quoter: IdentifierQuoter = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Resolves the dialect eagerly so a typo fails at configuration time
        object.__setattr__(self, 'quoter', get_quoter(self.dialect))


# Global state (changed by set_default_config)
_default_config: BuilderConfig = BuilderConfig()


def set_default_config(config: BuilderConfig) -> None:
    """
    Set configuration used by builders created without an explicit one.

    Args:
        config: New default configuration
    """
    global _default_config  # noqa: PLW0603
    _default_config = config


def get_default_config() -> BuilderConfig:
    """
    Get default builder configuration.

    Returns:
        Current default BuilderConfig
    """
    return _default_config


def reset_default_config() -> None:
    """Restore the default configuration (no identifier quoting)."""
    set_default_config(BuilderConfig())
