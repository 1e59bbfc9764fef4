import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class SimulationConfig:
    """Default scenario plus the size limits the HTTP service enforces."""

    __slots__ = ("rows", "cols", "ant_row", "ant_col", "direction", "steps", "max_cells", "max_steps")

    def __init__(self, rows=3, cols=4, ant_row=1, ant_col=1, direction="<", steps=7,
                 max_cells=1_000_000, max_steps=1_000_000):
        self.rows = rows
        self.cols = cols
        self.ant_row = ant_row
        self.ant_col = ant_col
        self.direction = direction
        self.steps = steps
        self.max_cells = max_cells
        self.max_steps = max_steps

    def scenario(self):
        return {"rows": self.rows, "cols": self.cols, "ant_row": self.ant_row,
                "ant_col": self.ant_col, "direction": self.direction, "steps": self.steps}


class ServerConfig:
    __slots__ = ("host", "port")

    def __init__(self, host="127.0.0.1", port=8080):
        self.host = host
        self.port = port


class LoggingConfig:
    __slots__ = ("level",)

    def __init__(self, level="INFO"):
        self.level = level


class Config:
    __slots__ = ("simulation", "server", "logging")

    def __init__(self, simulation=None, server=None, logging=None):
        self.simulation = simulation or SimulationConfig()
        self.server = server or ServerConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            SimulationConfig(**d.get("simulation", {})),
            ServerConfig(**d.get("server", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
