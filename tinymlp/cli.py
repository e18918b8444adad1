"""Command line entry point for generating and evaluating tinymlp networks."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Iterable, List

import numpy as np

from .core import activations
from .core.errors import TinyMlpError
from .presets import build_network, config_hash, load_config, load_preset, merge, presets

logger = logging.getLogger(__name__)


def _parse_floats(text: str) -> List[float]:
    try:
        return [float(part) for part in text.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected comma separated numbers, got {text!r}") from exc


def _parse_ints(text: str) -> List[int]:
    try:
        return [int(part) for part in text.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected comma separated integers, got {text!r}") from exc


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--preset",
        choices=sorted(presets().keys()),
        default="sigmoid-2-3-1",
        help="Preset network configuration",
    )
    parser.add_argument("--config", type=Path, help="Optional JSON/YAML config override")
    parser.add_argument(
        "--layers",
        type=_parse_ints,
        help="Comma separated layer sizes, input dimension first (e.g. 4,3,2)",
    )
    parser.add_argument("--min-weight", type=float, help="Lowest generated weight")
    parser.add_argument("--max-weight", type=float, help="Highest generated weight")
    parser.add_argument(
        "--activation",
        choices=list(activations.REGISTRY.names()),
        help="Activation function of every unit",
    )
    parser.add_argument("--seed", type=int, help="Seed used for weight generation")
    parser.add_argument(
        "--input",
        type=_parse_floats,
        help="Comma separated input vector (defaults to zeros)",
    )
    parser.add_argument(
        "--list-presets", action="store_true", help="List available presets and exit"
    )
    parser.add_argument(
        "--list-activations",
        action="store_true",
        help="List registered activation functions and exit",
    )
    parser.add_argument(
        "--dump-config", type=Path, help="Dump the resolved config to a JSON file"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    return parser.parse_args(argv)


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def resolve_config(args: argparse.Namespace) -> dict:
    config = load_preset(args.preset)
    source = f"preset {args.preset}"

    if args.config:
        override = load_config(args.config)
        config = merge(config, override)
        source = f"config {args.config}"

    section = config.setdefault("network", {})
    overrides = {
        "layer_dims": args.layers,
        "min_weight": args.min_weight,
        "max_weight": args.max_weight,
        "activation": args.activation,
        "seed": args.seed,
    }
    section.update({key: value for key, value in overrides.items() if value is not None})
    logger.info("Resolved network config from %s: %s", source, section)
    return json.loads(json.dumps(config))


def main(argv: Iterable[str] | None = None) -> None:
    args = parse_args(argv)
    _configure_logging(args.verbose)

    if args.list_presets:
        for name in sorted(presets().keys()):
            print(name)
        raise SystemExit(0)

    if args.list_activations:
        for name in activations.REGISTRY.names():
            print(name)
        raise SystemExit(0)

    try:
        config = resolve_config(args)
        if args.dump_config:
            args.dump_config.parent.mkdir(parents=True, exist_ok=True)
            args.dump_config.write_text(json.dumps(config, indent=2))
        network = build_network(config)
        inputs = args.input if args.input is not None else np.zeros(network.input_dimension)
        output = network.evaluate(inputs)
    except (TinyMlpError, KeyError, TypeError, ValueError, RuntimeError, OSError) as exc:
        raise SystemExit(f"error: {exc}") from exc

    payload = {
        "config_id": config_hash(config),
        "layer_dims": network.describe().layer_dims,
        "input": [float(value) for value in inputs],
        "output": [float(value) for value in output],
    }
    print(json.dumps(payload, sort_keys=True))


if __name__ == "__main__":
    main()
