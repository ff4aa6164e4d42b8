#!/usr/bin/env python3
"""
Generate a Playwright test from a natural-language scenario and run it.

Usage:
  python scripts/run_scenario.py "<scenario description>" [--url <url>] [options]
  python scripts/run_scenario.py --scenario-file <path.yaml|path.json> [options]

Examples:
  python scripts/run_scenario.py "Log in and check that the dashboard is shown" --url https://example.com/login
  python scripts/run_scenario.py --scenario-file scenarios/login.yaml --browser firefox --headed --timeout 60000
  AI_PROVIDER=local LOCAL_LLM_BASE_URL=http://localhost:1234 python scripts/run_scenario.py "..." --no-run
"""
from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from application.exceptions import ScenarioTestError
from application.executor.playwright_runner import PlaywrightTestRunner
from application.ports.config_provider import ConfigProviderPort
from application.ports.logger import LoggerPort
from application.ports.requests_client import RequestsHttpClient
from application.services.pipeline_deps import PipelineDeps
from application.services.result_formatter import format_test_result
from application.services.scenario_pipeline import ScenarioPipeline
from domain.exceptions import ValidationError
from domain.scenario import (
    BROWSERS,
    DEFAULT_HEADLESS,
    DEFAULT_SCREENSHOT,
    DEFAULT_TIMEOUT_MS,
    Scenario,
    ScenarioOptions,
)
from infrastructure.artifacts.file_artifact_store import FileArtifactStore
from infrastructure.config.env_config_provider import EnvConfigProvider
from infrastructure.logging.console_logger import ConsoleLogger
from infrastructure.logging.log_setup import setup_console_logging
from infrastructure.logging.loguru_logger import LoguruLogger
from infrastructure.process.subprocess_runner import SubprocessRunner
from infrastructure.providers.provider_factory import build_generation_provider
from infrastructure.scenario.base_loader import ScenarioLoadError
from infrastructure.scenario.loader_registry import ScenarioLoaderRegistry


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {raw}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {raw}")
    return value


def _on_off(flag: bool) -> str:
    return "enabled" if flag else "disabled"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scenario-test",
        description="Generate a Playwright E2E test from a natural-language scenario and run it",
    )
    parser.add_argument("description", nargs="?", help="Test scenario in natural language")
    parser.add_argument("--scenario-file", type=str, help="YAML/JSON scenario file")
    parser.add_argument("--url", type=str, help="Target URL (falls back to BASE_URL)")
    parser.add_argument("--browser", type=str, choices=list(BROWSERS))

    headless = parser.add_mutually_exclusive_group()
    headless.add_argument(
        "--headless", dest="headless", action="store_true", default=None,
        help=f"Run without a browser window (default: {_on_off(DEFAULT_HEADLESS)})",
    )
    headless.add_argument("--headed", dest="headless", action="store_false")

    screenshot = parser.add_mutually_exclusive_group()
    screenshot.add_argument(
        "--screenshot", dest="screenshot", action="store_true", default=None,
        help=f"Ask the generated test to take screenshots (default: {_on_off(DEFAULT_SCREENSHOT)})",
    )
    screenshot.add_argument("--no-screenshot", dest="screenshot", action="store_false")

    parser.add_argument(
        "--timeout", type=_positive_int,
        help=f"Test timeout in milliseconds (default: {DEFAULT_TIMEOUT_MS})",
    )
    parser.add_argument("--filename", type=str, default="", help="Test file name (default: test-<ms>.spec.ts)")
    parser.add_argument("--no-run", action="store_true", help="Only generate; do not save or run the test")
    parser.add_argument("--log-level", type=str, default="INFO")
    parser.add_argument("--json-logs", action="store_true", help="Emit one JSON line per log event")
    return parser


def _options_from_args(args: argparse.Namespace, base: Optional[ScenarioOptions]) -> Optional[ScenarioOptions]:
    options = base or ScenarioOptions()
    overrides = {
        name: getattr(args, name)
        for name in ("browser", "headless", "screenshot", "timeout")
        if getattr(args, name) is not None
    }
    if overrides:
        options = replace(options, **overrides)
    return None if options.is_empty() else options


def _load_scenario(args: argparse.Namespace) -> Scenario:
    if args.scenario_file:
        path = Path(args.scenario_file)
        scenario = ScenarioLoaderRegistry().get_loader(path).load_from_file(path)
        if args.description:
            scenario = replace(scenario, description=args.description)
    elif args.description:
        scenario = Scenario(description=args.description)
    else:
        raise ValueError("a scenario description or --scenario-file is required")

    if args.url:
        scenario = replace(scenario, url=args.url)
    return replace(scenario, options=_options_from_args(args, scenario.options))


def _build_logger(args: argparse.Namespace) -> LoggerPort:
    if args.json_logs:
        return ConsoleLogger()
    setup_console_logging(level=args.log_level)
    return LoguruLogger()


def build_pipeline(config_provider: ConfigProviderPort, logger: LoggerPort) -> ScenarioPipeline:
    provider = build_generation_provider(config_provider, RequestsHttpClient(), logger)
    return ScenarioPipeline(
        provider=provider,
        artifact_store=FileArtifactStore(logger),
        runner=PlaywrightTestRunner(SubprocessRunner(), logger),
        deps=PipelineDeps(config_provider=config_provider, logger=logger),
    )


def _run(args: argparse.Namespace) -> int:
    scenario = _load_scenario(args)
    logger = _build_logger(args)
    pipeline = build_pipeline(EnvConfigProvider(), logger)

    print("Generating test code...")
    test = pipeline.generate(scenario, filename=args.filename)

    print("\n=== Generated test code ===")
    print(test.code)
    print("\n=== Explanation ===")
    print(test.explanation or "")

    if not test.code:
        print("\nNo typescript code block found in the response; nothing to run.")
        return 1

    if args.no_run:
        print("\nSkipping test execution.")
        return 0

    result = pipeline.run(test, scenario.options)

    print("\n=== Test result ===")
    print(format_test_result(result))
    return 0 if result.success else 1


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        exit_code = _run(args)
    except (ValueError, ValidationError, ScenarioLoadError) as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)
    except ScenarioTestError as exc:
        print(f"ERROR: {type(exc).__name__}: {exc}")
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
