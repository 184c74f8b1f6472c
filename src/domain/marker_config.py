from dataclasses import dataclass
from pathlib import Path
import yaml

from .models import MarkerPolicy

_YAML_INT = "tag:yaml.org,2002:int"


class _ModeLoader(yaml.SafeLoader):
    """Leaves integer-looking scalars as strings, so 400 and 0400 both read as octal."""

    yaml_implicit_resolvers = {
        first: [(tag, regexp) for tag, regexp in resolvers if tag != _YAML_INT]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }


def _mode(value: str | None, default: int) -> int:
    if value is None:
        return default
    text = str(value).strip().lower().removeprefix("0o")
    return int(text, 8)


@dataclass(frozen=True)
class MarkerConfig:
    path: Path
    policy: MarkerPolicy

    @staticmethod
    def load(path: Path) -> "MarkerConfig":
        data = yaml.load(path.read_text(), Loader=_ModeLoader) or {}
        defaults = MarkerPolicy()
        return MarkerConfig(
            path=Path(data["path"]),
            policy=MarkerPolicy(
                create_mode=_mode(data.get("create_mode"), defaults.create_mode),
                rewrite_mode=_mode(data.get("rewrite_mode"), defaults.rewrite_mode),
                dir_mode=_mode(data.get("dir_mode"), defaults.dir_mode),
            ),
        )
