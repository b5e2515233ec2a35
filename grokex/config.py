"""Configuration classes for the grokex compiler."""

from dataclasses import dataclass


@dataclass
class CompilerConfig:
    """Configuration for placeholder expansion and final regex compilation."""

    # Expansion budget: distinct placeholders resolved per compile call
    max_recursion: int = 1024

    # Generated capture names are f"{capture_prefix}{index}"
    capture_prefix: str = "name"

    # Flags for re.compile on the fully expanded pattern
    regex_flags: int = 0

    def __post_init__(self) -> None:
        if self.max_recursion < 0:
            raise ValueError(
                f"max_recursion must be non-negative, got {self.max_recursion}"
            )
        if not self.capture_prefix.isidentifier():
            raise ValueError(
                f"capture_prefix must be a valid identifier, got {self.capture_prefix!r}"
            )

    def capture_name(self, index: int) -> str:
        """Return the generated capture-group name for an alias table slot."""
        return f"{self.capture_prefix}{index}"


# Global configuration instance
COMPILER_CONFIG = CompilerConfig()
