"""Network presets and configuration loading for tinymlp."""

from __future__ import annotations

import hashlib
import json
import logging
from copy import deepcopy
from pathlib import Path
from typing import Dict, Mapping

from .core.network import Network

logger = logging.getLogger(__name__)

_PRESETS: Dict[str, Mapping[str, object]] = {
    "sigmoid-2-3-1": {
        "network": {
            "layer_dims": [2, 3, 1],
            "min_weight": -1.0,
            "max_weight": 1.0,
            "activation": "sigmoid",
            "seed": 0,
        },
    },
    "identity-4-3-3-2": {
        "network": {
            "layer_dims": [4, 3, 3, 2],
            "min_weight": -1.0,
            "max_weight": 1.0,
            "activation": "identity",
            "seed": 0,
        },
    },
    "tanh-8-16-16-4": {
        "network": {
            "layer_dims": [8, 16, 16, 4],
            "min_weight": -0.5,
            "max_weight": 0.5,
            "activation": "tanh",
            "seed": 7,
        },
    },
    "passthrough-3": {
        "network": {"layer_dims": [3], "seed": 0},
    },
}

_NETWORK_DEFAULTS: Mapping[str, object] = {
    "min_weight": -1.0,
    "max_weight": 1.0,
    "activation": "sigmoid",
    "seed": None,
}


def presets() -> Mapping[str, Mapping[str, object]]:
    return {name: deepcopy(cfg) for name, cfg in _PRESETS.items()}


def load_preset(name: str) -> Dict[str, object]:
    try:
        return deepcopy(dict(_PRESETS[name]))
    except KeyError as exc:
        available = ", ".join(sorted(_PRESETS))
        raise KeyError(f"Unknown preset: {name}. Available presets: {available}") from exc


def load_config(path: str | Path) -> Dict[str, object]:
    """Read a JSON or YAML config file into a mapping."""

    path = Path(path)
    text = path.read_text()
    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        try:
            import yaml  # type: ignore
        except ImportError as exc:  # pragma: no cover - optional dependency
            raise RuntimeError("PyYAML is required to load YAML configs") from exc
        data = yaml.safe_load(text) or {}
    elif suffix == ".json":
        data = json.loads(text or "{}")
    else:
        raise ValueError(f"Unsupported config file type: {path.suffix}")

    if not isinstance(data, Mapping):
        raise TypeError(f"Config {path.name} must decode to a mapping")
    return dict(data)


def merge(base: Dict[str, object], override: Mapping[str, object]) -> Dict[str, object]:
    """Recursively merge ``override`` into ``base`` and return ``base``."""

    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), Mapping):
            base[key] = merge(dict(base[key]), value)  # type: ignore[arg-type]
        else:
            base[key] = value
    return base


def _normalise(value):
    if isinstance(value, Mapping):
        return {str(k): _normalise(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalise(v) for v in value]
    if isinstance(value, Path):
        return str(value)
    return value


def config_hash(config: Mapping[str, object]) -> str:
    """Return a stable 12-character hash for ``config``."""

    canonical = json.dumps(_normalise(config), sort_keys=True, separators=(",", ":"))
    digest = hashlib.sha256(canonical.encode("utf-8")).hexdigest()
    return digest[:12]


def network_section(config: Mapping[str, object]) -> Dict[str, object]:
    """Return the ``network`` section with defaults filled in."""

    section = config.get("network")
    if not isinstance(section, Mapping):
        raise KeyError("Config is missing the 'network' section")
    if "layer_dims" not in section:
        raise KeyError("Config 'network' section is missing 'layer_dims'")
    resolved = dict(_NETWORK_DEFAULTS)
    resolved.update(section)
    return resolved


def build_network(config: Mapping[str, object]) -> Network:
    """Generate a network from a config mapping."""

    section = network_section(config)
    logger.debug("Building network from config %s", section)
    return Network.generate(
        list(section["layer_dims"]),  # type: ignore[arg-type]
        float(section["min_weight"]),  # type: ignore[arg-type]
        float(section["max_weight"]),  # type: ignore[arg-type]
        section["activation"],  # type: ignore[arg-type]
        rng=section["seed"],  # type: ignore[arg-type]
    )


__all__ = [
    "build_network",
    "config_hash",
    "load_config",
    "load_preset",
    "merge",
    "network_section",
    "presets",
]
