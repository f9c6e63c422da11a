"""
Diff Config Module
Holds the normalization settings used when comparing HTML fragments.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Union

# Always pruned, whatever the config says
ALWAYS_IGNORED_TAGS = frozenset({'script', 'style'})

_KEY_ALIASES = {
    'ignored_tags': 'ignored_tags',
    'ignoredTags': 'ignored_tags',
}


def normalize_tag_names(tags: Optional[Iterable[str]]) -> FrozenSet[str]:
    if tags is None:
        return frozenset()
    if isinstance(tags, str):
        raise TypeError("ignored_tags must be a sequence of tag names, not a string")
    return frozenset(str(tag).strip().lower() for tag in tags if str(tag).strip())


@dataclass(frozen=True)
class DiffConfig:
    ignored_tags: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, 'ignored_tags', normalize_tag_names(self.ignored_tags))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'DiffConfig':
        """Build a config from a mapping, accepting camelCase keys as well."""
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            if key not in _KEY_ALIASES:
                raise ValueError(f"Unknown diff config option: {key}")
            kwargs[_KEY_ALIASES[key]] = value
        return cls(**kwargs)


def load_config(config_path: Union[str, Path]) -> DiffConfig:
    """Read a JSON config file, e.g. {"ignored_tags": ["svg"]}."""
    path = Path(config_path)
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Diff config in {path} must be a JSON object")
    return DiffConfig.from_dict(data)


def resolve_config(config: Union[DiffConfig, Mapping[str, Any], None]) -> DiffConfig:
    if config is None:
        return DiffConfig()
    if isinstance(config, DiffConfig):
        return config
    if isinstance(config, Mapping):
        return DiffConfig.from_dict(config)
    raise TypeError(f"Unsupported diff config type: {type(config).__name__}")
