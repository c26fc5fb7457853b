import yaml
from dataclasses import dataclass
from pathlib import Path

from meshmerge.utils.pathing import PROJECT_ROOT

CONFIG_PATH = PROJECT_ROOT / "config" / "meshmerge.yml"

DEFAULT_PRECISION = 1e-7
DEFAULT_DECIMALS = 6


@dataclass(frozen=True)
class MergeSettings:
    """
    Immutable settings threaded into the parsers, merger and serializer.

    Attributes:
        precision: Floats closer than this to zero are stored as +0.0, and
            the same tolerance is used when comparing records.
        decimals: Fixed-point places used when writing floats.
        add_header: Echo the retained header at the top of the output.
        quiet: Accepted from the command line; has no effect on output.
    """
    precision: float = DEFAULT_PRECISION
    decimals: int = DEFAULT_DECIMALS
    add_header: bool = False
    quiet: bool = False


class MMConfig:
    def __init__(self, data):
        self.merge = data.get("merge", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.debug = data.get("debug", False)

    def merge_settings(self) -> MergeSettings:
        return MergeSettings(
            precision=float(self.merge.get("precision", DEFAULT_PRECISION)),
            decimals=int(self.merge.get("decimals", DEFAULT_DECIMALS)),
            add_header=bool(self.merge.get("add_header", False)),
            quiet=bool(self.merge.get("quiet", False)),
        )


def load_config(path: Path = CONFIG_PATH) -> 'MMConfig':
    if not path.exists():
        # Installed without the repository config directory
        return MMConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return MMConfig(data)

_config_cache = None

def get_config() -> 'MMConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
