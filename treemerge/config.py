import copy
import json
from pathlib import Path

from .errors import InvalidArgument

DEFAULTS = {
    'merge_strategy': 'drain',
    'log_level': 'WARNING',
}

MERGE_STRATEGIES = ('drain', 'concat')

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class Config(dict):
    """
    Settings of treemerge, the defaults overlaid by an optional JSON file.
    """

    def __init__(self, dct=None, path=None):
        super().__init__(copy.deepcopy(DEFAULTS))
        self.path = None if path is None else Path(path)
        if dct is not None:
            self.update(dct)

    @classmethod
    def load(cls, path):
        path = Path(path)
        with path.open('r') as f:
            dct = json.load(f)
        if not isinstance(dct, dict):
            raise InvalidArgument(
                f"Config file {path} should hold a JSON object, "
                f"not {type(dct).__name__}.")
        return cls(dct, path=path)

    def reload(self):
        if self.path is None:
            return
        with self.path.open('r') as f:
            dct = json.load(f)
        self.clear()
        super().update(copy.deepcopy(DEFAULTS))
        self.update(dct)

    def update(self, other):
        merged = dict(self)
        for k, v in other.items():
            if k not in DEFAULTS:
                raise InvalidArgument(f"Unknown config key {k!r}.")
            merged[k] = v
        check_merge_strategy(merged['merge_strategy'])
        if str(merged['log_level']).upper() not in LOG_LEVELS:
            raise InvalidArgument(
                f"Unknown log level {merged['log_level']!r}, "
                f"should be one of {', '.join(LOG_LEVELS)}.")
        super().update(merged)

    def reset(self):
        self.clear()
        super().update(copy.deepcopy(DEFAULTS))
        self.path = None


config = Config()


def check_merge_strategy(strategy: str) -> str:
    if strategy not in MERGE_STRATEGIES:
        raise InvalidArgument(
            f"Unknown merge strategy {strategy!r}, "
            f"should be one of {', '.join(MERGE_STRATEGIES)}.")
    return strategy


def get_merge_strategy(strategy=None) -> str:
    """
    Resolve the merge strategy, an explicit argument wins over the
    configured default.
    """
    if strategy is None:
        strategy = config['merge_strategy']
    return check_merge_strategy(strategy)
