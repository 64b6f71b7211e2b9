#!/usr/bin/env python3
"""Entry point for the aboutinfo CLI."""

from __future__ import annotations

import argparse
import json
import sys
import time
from collections import deque
from pathlib import Path
from textwrap import dedent
from typing import Any

import yaml

from aboutinfo import __version__
from aboutinfo.adapters.fs_feature_registry import DirectoryFeatureRegistry, FeatureManifestError
from aboutinfo.adapters.telemetry_reporter import FAILURE_EVENT, TelemetryFailureReporter
from aboutinfo.app.about import AboutInfoService
from aboutinfo.domain.about import AboutInfo
from aboutinfo.settings import SETTINGS
from aboutinfo.utils.telemetry import clear as telemetry_clear
from aboutinfo.utils.telemetry import iter_events as telemetry_iter
from aboutinfo.utils.telemetry import record_structured_event
from aboutinfo.utils.telemetry import summarize as telemetry_summarize

HELP_OVERVIEW = dedent(
    """
    Inspect the about information of installed features.

      aboutinfo features                 - list installed features
      aboutinfo show FEATURE_ID          - resolve about.ini for a feature
      aboutinfo checksum FEATURE_ID      - CRC-32 of the feature image
      aboutinfo failures                 - recent about file failures
      aboutinfo failures --summary       - event counts by name and level

    Environment:
      ABOUTINFO_HOME=<dir>     settings root (features/, logs/)
      ABOUTINFO_NL=<locale>    national language, e.g. de_CH
      ABOUTINFO_TELEMETRY=0    disable the telemetry log
    """
)

SHOW_LABELS = (
    ("product_name", "product"),
    ("provider_name", "provider"),
    ("version", "version"),
    ("app_name", "app name"),
    ("about_text", "about text"),
    ("window_image", "window image"),
    ("about_image", "about image"),
    ("feature_image", "feature image"),
    ("feature_image_crc", "feature image crc"),
    ("welcome_page", "welcome page"),
)


def _registry(args: argparse.Namespace) -> DirectoryFeatureRegistry:
    root = Path(args.root) if getattr(args, "root", None) else SETTINGS.features_dir
    nl = getattr(args, "nl", None) or SETTINGS.nl
    return DirectoryFeatureRegistry(root, nl=nl)


def _load_about(args: argparse.Namespace) -> tuple[AboutInfo | None, int]:
    registry = _registry(args)
    try:
        descriptor = registry.get_descriptor(args.feature_id)
    except FeatureManifestError as exc:
        print(f"invalid feature manifest: {exc}", file=sys.stderr)
        return None, 1
    if descriptor is None:
        print(f"Feature {args.feature_id} not found under {registry.root}", file=sys.stderr)
        return None, 1
    version = getattr(args, "feature_version", None) or descriptor.version
    service = AboutInfoService(registry, TelemetryFailureReporter(SETTINGS))
    return service.load_descriptor(args.feature_id, descriptor, version), 0


def _show_cmd(args: argparse.Namespace) -> int:
    event_context = {"feature": args.feature_id}
    record_structured_event(SETTINGS, "about.show", status="start", component="cli", payload=event_context)
    start = time.perf_counter()
    about, code = _load_about(args)
    if about is None:
        return code

    payload = about.to_dict(include_checksum=not args.no_checksum)
    if args.format == "json":
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    elif args.format == "yaml":
        print(yaml.safe_dump(payload, sort_keys=False, allow_unicode=True), end="")
    else:
        _print_about_summary(payload)

    duration = (time.perf_counter() - start) * 1000
    record_structured_event(
        SETTINGS,
        "about.show",
        status="success",
        component="cli",
        duration_ms=duration,
        payload=event_context | {"fields": sorted(key for key, value in payload.items() if value is not None)},
    )
    return 0


def _print_about_summary(payload: dict[str, Any]) -> None:
    print(f"feature: {payload.get('feature_id')}")
    for key, label in SHOW_LABELS:
        if key not in payload:
            continue
        value = payload[key]
        if value is None:
            continue
        if isinstance(value, str) and "\n" in value:
            print(f"{label}:")
            for line in value.splitlines():
                print(f"  {line}")
        else:
            print(f"{label}: {value}")


def _checksum_cmd(args: argparse.Namespace) -> int:
    about, code = _load_about(args)
    if about is None:
        return code
    crc = about.feature_image_crc
    if crc is None:
        print(f"No feature image checksum for {args.feature_id}", file=sys.stderr)
        return 1
    print(f"{crc:08x}\t{about.feature_image_name}")
    return 0


def _features_cmd(args: argparse.Namespace) -> int:
    registry = _registry(args)
    try:
        descriptors = registry.list()
    except FeatureManifestError as exc:
        print(f"invalid feature manifest: {exc}", file=sys.stderr)
        return 1
    if args.json:
        print(json.dumps([descriptor.to_dict() for descriptor in descriptors], ensure_ascii=False, indent=2))
        return 0
    if not descriptors:
        print(f"No features installed under {registry.root}")
        return 0
    for descriptor in descriptors:
        print(f"{descriptor.feature_id}\t{descriptor.version or '-'}\t{descriptor.label or ''}")
    return 0


def _failures_cmd(args: argparse.Namespace) -> int:
    if args.clear:
        telemetry_clear(SETTINGS)
        print("Failure log cleared")
        return 0
    if args.summary:
        print(json.dumps(telemetry_summarize(telemetry_iter(SETTINGS)), ensure_ascii=False, indent=2))
        return 0
    window: deque[dict[str, Any]] = deque(maxlen=args.limit)
    for evt in telemetry_iter(SETTINGS):
        if evt.get("event") == FAILURE_EVENT:
            window.append(evt)
    for evt in window:
        print(json.dumps(evt, ensure_ascii=False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aboutinfo",
        description=HELP_OVERVIEW,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"aboutinfo {__version__}")

    sub = parser.add_subparsers(dest="command", required=True)

    def _feature_arguments(cmd: argparse.ArgumentParser) -> None:
        cmd.add_argument("feature_id", help="Feature identifier")
        cmd.add_argument("--root", help="Features directory (default: $ABOUTINFO_HOME/features)")
        cmd.add_argument("--nl", help="National language locale, e.g. de_CH")
        cmd.add_argument("--feature-version", help="Version reported for the feature (default: manifest version)")

    show_cmd = sub.add_parser("show", help="Show about information for a feature")
    _feature_arguments(show_cmd)
    show_cmd.add_argument("--format", choices=("text", "json", "yaml"), default="text")
    show_cmd.add_argument("--no-checksum", action="store_true", help="Skip the feature image checksum")
    show_cmd.set_defaults(func=_show_cmd)

    checksum_cmd = sub.add_parser("checksum", help="Print the CRC-32 of the feature image")
    _feature_arguments(checksum_cmd)
    checksum_cmd.set_defaults(func=_checksum_cmd)

    features_cmd = sub.add_parser("features", help="List installed features")
    features_cmd.add_argument("--root", help="Features directory (default: $ABOUTINFO_HOME/features)")
    features_cmd.add_argument("--json", action="store_true", help="Emit machine-readable JSON")
    features_cmd.set_defaults(func=_features_cmd)

    failures_cmd = sub.add_parser("failures", help="Show reported about file failures")
    failures_cmd.add_argument("--limit", type=int, default=20)
    failures_cmd.add_argument("--clear", action="store_true", help="Clear the telemetry log")
    failures_cmd.add_argument("--summary", action="store_true", help="Count logged events by name and level")
    failures_cmd.set_defaults(func=_failures_cmd)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
