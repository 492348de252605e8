from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence


class ConfigError(ValueError):
    """Malformed or out-of-range run parameters. Raised before any generation."""


class Mode(Enum):
    COMPACT = "compact"
    COMPACT_STEPPED = "compact-stepped"
    VERBOSE = "verbose"
    LOG_TO_FILE = "log-to-file"

    @classmethod
    def parse(cls, value: str) -> "Mode":
        key = value.strip().lower()
        if key in MODE_ALIASES:
            return MODE_ALIASES[key]
        raise ConfigError(f"not a valid mode: {value!r}")


# Long names plus the short codes of the classic command line
MODE_ALIASES = {mode.value: mode for mode in Mode}
MODE_ALIASES.update({
    "c": Mode.COMPACT,
    "cs": Mode.COMPACT_STEPPED,
    "v": Mode.VERBOSE,
    "p": Mode.LOG_TO_FILE,
})

ALGORITHMS = ("scan", "union-find")
DEFAULT_LOG_FILE = "mazes.txt"


@dataclass
class MazeConfig:
    size: int
    count: int
    mode: Mode
    out: str = DEFAULT_LOG_FILE
    seed: Optional[int] = None
    algo: str = "scan"
    delay: Optional[float] = None

    def validate(self) -> "MazeConfig":
        if self.size <= 4:
            raise ConfigError("size must be greater than 4")
        if self.size & 1 != 1:
            raise ConfigError("size must be odd number")
        if self.count <= 0:
            raise ConfigError("must specify positive count")
        if not isinstance(self.mode, Mode):
            raise ConfigError(f"not a valid mode: {self.mode!r}")
        if self.algo not in ALGORITHMS:
            raise ConfigError(f"unknown algorithm: {self.algo!r}")
        if self.delay is not None and self.delay < 0:
            raise ConfigError("delay must not be negative")
        if self.mode == Mode.LOG_TO_FILE and not self.out:
            raise ConfigError("log-to-file mode needs an output path")
        return self

    @classmethod
    def from_args(cls, args: Sequence[str], **options) -> "MazeConfig":
        """
        Builds a config from positional strings: size, count, mode.
        Extra keyword options (out, seed, algo, delay) pass through.
        """
        if len(args) < 3:
            raise ConfigError("not enough arguments")

        size = _parse_int(args[0], "size")
        count = _parse_int(args[1], "count")
        mode = Mode.parse(args[2])
        return cls(size=size, count=count, mode=mode, **options).validate()


def _parse_int(value: str, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer, got {value!r}") from None
