from dataclasses import dataclass, field
from pathlib import Path
from dotenv import load_dotenv
from returns.result import safe
import os

ENV_PREFIX = "PIDMARKER_"


@dataclass(frozen=True)
class Env:
    vars: dict[str, str | bool | int | float] = field(default_factory=dict)

    @safe
    def load(self, path_to_dotenv: str | Path = ".env") -> "Env":
        """Load PIDMARKER_* settings. Real environment wins over the dotenv file."""
        load_dotenv(dotenv_path=path_to_dotenv, override=False)
        loaded_vars = {
            k.removeprefix(ENV_PREFIX).lower(): self._parse_value(v)
            for k, v in os.environ.items()
            if k.startswith(ENV_PREFIX) and v
        }
        return Env(vars=loaded_vars)

    def get_path(self, key: str, default: Path) -> Path:
        value = self.vars.get(key)
        return Path(str(value)) if value not in (None, "") else default

    def get_int(self, key: str, default: int) -> int:
        value = self.vars.get(key, default)
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, int):
            return default
        return value

    @staticmethod
    def _parse_value(value: str) -> str | bool | int | float:
        if value.lower() in {"true", "false"}:
            return value.lower() == "true"
        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            return value
