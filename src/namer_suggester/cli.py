"""CLI entry point — ``namer-suggester analyze`` and ``namer-suggester configure``."""

from __future__ import annotations

# Phase 1: singleton logging, before any transitive litellm imports
from namer_suggester.logging_config import setup_logging

setup_logging()

import argparse  # noqa: E402
import asyncio  # noqa: E402
import sys  # noqa: E402
from pathlib import Path  # noqa: E402
from typing import NoReturn  # noqa: E402

from namer_suggester import __version__  # noqa: E402
from namer_suggester.analysis.schemas import Identifier  # noqa: E402
from namer_suggester.config import (  # noqa: E402
    ProviderConfig,
    Settings,
    load_ai_config,
    load_saved_ai_config,
    save_ai_config,
)
from namer_suggester.constants import (  # noqa: E402
    LARGE_SCAN_THRESHOLD,
    ProviderName,
    SuggestionPolicy,
)
from namer_suggester.errors import ConfigError  # noqa: E402
from namer_suggester.logging_config import (  # noqa: E402
    cleanup_third_party_handlers,
    set_level,
)

# Phase 2: Clear litellm's duplicate handlers after all imports
cleanup_third_party_handlers()

PROVIDER_CHOICES = [str(p) for p in SuggestionPolicy] + [
    str(p) for p in ProviderName
]


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"namer-suggester {__version__}")
        return

    if args.command == "analyze":
        _run_analyze(args)
    elif args.command == "configure":
        _run_configure(args)
    else:
        parser.print_help()


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="namer-suggester",
        description=(
            "Scan JavaScript/TypeScript files and suggest better names "
            "for functions, variables, methods and properties."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )

    sub = parser.add_subparsers(dest="command")

    analyze = sub.add_parser(
        "analyze",
        help="Review identifiers in a file or directory",
    )
    analyze.add_argument(
        "path",
        type=str,
        help="File or directory to analyze",
    )
    analyze.add_argument(
        "--provider",
        "-p",
        choices=PROVIDER_CHOICES,
        default=None,
        help="Override the configured suggestion engine",
    )
    analyze.add_argument(
        "--yes",
        "-y",
        action="store_true",
        help="Accept the first suggestion without prompting",
    )
    analyze.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Decision log path (default: ./namer-suggester.log)",
    )
    analyze.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )

    configure = sub.add_parser(
        "configure",
        help="Write the AI provider configuration file",
    )
    configure.add_argument(
        "--provider",
        "-p",
        choices=PROVIDER_CHOICES,
        required=True,
        help="Suggestion engine: auto, rules, or one provider",
    )
    for name in ("openai", "anthropic", "gemini"):
        configure.add_argument(
            f"--{name}-key", default=None, help=f"{name} API key"
        )
        configure.add_argument(
            f"--{name}-model", default=None, help=f"{name} model name"
        )
    configure.add_argument(
        "--ollama-endpoint", default=None, help="Ollama generate endpoint"
    )
    configure.add_argument(
        "--ollama-model", default=None, help="Ollama model name"
    )
    configure.add_argument(
        "--location",
        choices=["project", "global"],
        default="project",
        help="Save to ./.ai-config.json or the home directory",
    )

    return parser


def _describe_provider(provider: str) -> str:
    if provider == SuggestionPolicy.AUTO:
        return "automatic (tries every available provider)"
    if provider == SuggestionPolicy.RULES:
        return "predefined rules (no AI)"
    return provider.upper()


def _run_analyze(args: argparse.Namespace) -> None:
    """Execute the analyze command."""
    from namer_suggester.ingestion import (
        detect_project_type,
        find_source_files,
    )
    from namer_suggester.logger import SuggestionLogger
    from namer_suggester.services.review_service import (
        ReviewEvent,
        keep_first_suggestion,
        review_files,
    )
    from namer_suggester.suggestions import SuggestionOrchestrator

    target = Path(args.path).resolve()
    if not target.exists():
        print(f"Error: {target} does not exist", file=sys.stderr)
        sys.exit(1)

    settings = Settings()
    set_level("INFO" if args.verbose else settings.log_level)

    config = load_ai_config(settings)
    if args.provider:
        config = config.model_copy(update={"provider": args.provider})

    project = detect_project_type()
    print(f"Project: {project.project_type}", end="")
    if project.framework != "unknown":
        print(f" ({project.framework})", end="")
    print()
    print(f"Suggestion engine: {_describe_provider(config.provider)}")

    files = find_source_files(
        target,
        skip_dirs=set(settings.skip_directories),
        max_depth=settings.max_scan_depth,
    )
    if not files:
        print(f"No JavaScript/TypeScript files found in: {target}")
        return
    if len(files) > LARGE_SCAN_THRESHOLD and not args.yes:
        try:
            proceed = _confirm(f"Found {len(files)} files. Continue?")
        except (KeyboardInterrupt, EOFError):
            _abort()
        if not proceed:
            print("Cancelled.")
            return

    log_file = args.log_file or settings.suggestion_log_file
    suggestion_logger = SuggestionLogger(
        [Path(log_file)] if log_file else None
    )

    def on_progress(event: ReviewEvent) -> None:
        if event.identifiers is None:
            print(
                f"\n[{event.completed + 1}/{event.total}] "
                f"{event.file_path.name}"
            )
        elif args.verbose:
            print(
                f"  {event.identifiers} identifiers "
                f"({event.percent:.0f}% of files done)"
            )

    choose = keep_first_suggestion if args.yes else _prompt_choice
    orchestrator = SuggestionOrchestrator(config)

    try:
        stats = asyncio.run(
            review_files(
                files,
                orchestrator,
                choose=choose,
                suggestion_logger=suggestion_logger,
                on_progress=on_progress,
            )
        )
    except (KeyboardInterrupt, EOFError):
        _abort()

    print("\nSummary")
    print(f"  Files analyzed:      {stats.total_files}")
    print(f"  Identifiers found:   {stats.total_items}")
    print(f"  Identifiers renamed: {stats.changed_items}")
    if suggestion_logger.last_written is not None:
        print(f"  Decision log:        {suggestion_logger.last_written}")


def _abort() -> NoReturn:
    print("\nAborted.", file=sys.stderr)
    sys.exit(130)


def _confirm(question: str) -> bool:
    answer = input(f"{question} [Y/n] ").strip().lower()
    return answer in ("", "y", "yes")


def _prompt_choice(identifier: Identifier, suggestions: list[str]) -> str:
    """Numbered menu; 0 keeps the current name."""
    line = identifier.line if identifier.line is not None else "N/A"
    print(f'\n{identifier.kind} "{identifier.name}" (line {line})')
    options = [identifier.name, *suggestions]
    print(f"  0) {identifier.name} (keep)")
    for number, name in enumerate(suggestions, 1):
        print(f"  {number}) {name}")

    while True:
        raw = input(f"Select [0-{len(suggestions)}] (default 0): ").strip()
        if not raw:
            return identifier.name
        if raw.isdigit() and int(raw) < len(options):
            return options[int(raw)]
        print("Invalid choice.")


def _run_configure(args: argparse.Namespace) -> None:
    """Merge CLI values over the saved config file and write it back."""
    current = load_saved_ai_config(args.location)
    updates: dict[str, object] = {"provider": args.provider}
    for name in ("openai", "anthropic", "gemini"):
        updates[name] = _merge_section(
            current.provider_config(ProviderName(name)),
            api_key=getattr(args, f"{name}_key"),
            model=getattr(args, f"{name}_model"),
        )
    updates["ollama"] = _merge_section(
        current.ollama,
        endpoint=args.ollama_endpoint,
        model=args.ollama_model,
    )
    config = current.model_copy(update=updates)

    try:
        path = save_ai_config(config, args.location)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"Configuration saved to {path}")


def _merge_section(
    section: ProviderConfig, **values: str | None
) -> ProviderConfig:
    changes = {k: v for k, v in values.items() if v is not None}
    return section.model_copy(update=changes)


if __name__ == "__main__":
    main()
