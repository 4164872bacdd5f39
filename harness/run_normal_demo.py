#!/usr/bin/env python3
"""
Normal-distribution demo runner.

With no flags, prints ten newline-separated samples from an unseeded
Normal(0, 1) generator to stdout and exits 0.

Optional:
- --config PATH: JSON object with any of {"count", "mean", "std_dev", "seed"}
- --count/--mean/--std-dev/--seed: override config values
- --summary: log sample mean/std as a metrics line after the values
- --verbose: DEBUG logging

Logs (including the header line) go to stderr; stdout carries values only.
"""

from __future__ import annotations
import argparse
import logging
from typing import List, Optional

from distributions.errors import RandgenError
from distributions.stats import summarize
from sampler.config import DemoConfig, load_demo_config
from sampler.generator import RandomGenerator
from utils.logging import get_logger, log_metrics


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Print samples from a normal distribution")
    ap.add_argument("--config", default=None, help="Path to demo config JSON")
    ap.add_argument("--count", type=int, default=None, help="Number of samples (default 10)")
    ap.add_argument("--mean", type=float, default=None, help="Distribution mean (default 0.0)")
    ap.add_argument("--std-dev", dest="std_dev", type=float, default=None, help="Standard deviation, > 0 (default 1.0)")
    ap.add_argument("--seed", type=int, default=None, help="Integer seed; OS entropy when omitted")
    ap.add_argument("--summary", action="store_true", help="Log sample mean and std after the values")
    ap.add_argument("--verbose", action="store_true", help="Enable DEBUG logging")
    return ap


def _resolve_config(args: argparse.Namespace) -> DemoConfig:
    cfg = load_demo_config(args.config) if args.config else DemoConfig()
    for key in ("count", "mean", "std_dev", "seed"):
        val = getattr(args, key)
        if val is not None:
            setattr(cfg, key, val)
    cfg.validate()
    return cfg


def _make_generator(cfg: DemoConfig) -> RandomGenerator:
    if cfg.seed is None:
        return RandomGenerator.unseeded(factory=cfg.distribution)
    return RandomGenerator.from_seed(cfg.seed, factory=cfg.distribution)


def main(argv: Optional[List[str]] = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    log = get_logger("randgen", level)
    for name in ("sampler", "distributions"):
        get_logger(name, level)

    try:
        cfg = _resolve_config(args)
    except RandgenError as e:
        ap.error(str(e))
    log.debug("demo config: %s", cfg.as_dict())

    gen = _make_generator(cfg)
    log.info(f"Sample values from Normal Distribution (mean={cfg.mean:g}, stdDev={cfg.std_dev:g}):")
    values = []
    for _ in range(cfg.count):
        v = gen.next()
        values.append(v)
        print(v)

    if args.summary and values:
        s = summarize(values)
        log_metrics({"count": s.count, "mean": s.mean, "std": s.std}, logger=log)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
