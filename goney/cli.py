"""goney command-line interface.

Usage::

    goney new shop
    goney generate crud users
    goney g crud products --global
    goney generate controller orders
    goney start
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from pydantic import ValidationError

from . import __version__
from .config import Config
from .runner import DevServer, DevServerError
from .scaffolder import (
    FileEmitter,
    GenerationContext,
    GenerationKind,
    GenerationRequest,
    LegacyGenerator,
    ModuleOrchestrator,
    OptionSet,
    ProjectConfig,
    ProjectGenerator,
    Strategy,
    TemplateRenderer,
)
from .utils import print_error, print_success, read_go_module_name

MICROSERVICE_TYPES = {"grpc": "gRPC", "nats": "NATS", "tcp": "TCP"}


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goney",
        description="goney -- NestJS-style project scaffolding for Go",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  goney new shop\n"
            "  goney generate crud users\n"
            "  goney g crud products --global\n"
            "  goney start\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"goney {__version__}")
    commands = parser.add_subparsers(dest="command", metavar="<command>", required=True)

    new = commands.add_parser("new", help="Create a new goney project")
    new.add_argument("project_name", help="Project directory and Go module name")

    commands.add_parser("start", help="Tidy, build and run the project in the current directory")

    generate = commands.add_parser("generate", aliases=["g"], help="Generate components")
    kinds = generate.add_subparsers(dest="kind", metavar="<kind>", required=True)

    for kind, help_text in (
        ("controller", "Generate a controller and its DTO"),
        ("service", "Generate a service and its model"),
        ("repository", "Generate a repository"),
        ("guard", "Generate a guard"),
        ("interceptor", "Generate an interceptor"),
    ):
        sub = kinds.add_parser(kind, help=help_text)
        sub.add_argument("name")

    micro = kinds.add_parser("microservice", help="Generate a microservice (grpc, nats, tcp)")
    micro.add_argument("type", help="One of: grpc, nats, tcp")
    micro.add_argument("name")

    crud = kinds.add_parser("crud", help="Generate a complete CRUD module with tests")
    crud.add_argument("name", help="Module name")
    crud.add_argument(
        "--global",
        dest="global_mode",
        action="store_true",
        help="Use the shared DTOs and models (no module-specific DTO/model files)",
    )
    crud.add_argument("--no-dto", action="store_true", help="Do not generate a module DTO")
    crud.add_argument("--no-model", action="store_true", help="Do not generate a module model")
    crud.add_argument(
        "--flat",
        action="store_true",
        help="Write into the top-level controllers/, services/ ... directories",
    )

    return parser


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _context(config: Config) -> GenerationContext:
    root = config.project_root
    return GenerationContext(root=root, go_module=read_go_module_name(root, config.default_go_module))


def _renderer(config: Config) -> TemplateRenderer:
    return TemplateRenderer(emitter=FileEmitter(dir_mode=config.dir_mode))


async def _generate(args: argparse.Namespace, config: Config) -> None:
    kind = args.kind

    if kind == "microservice":
        label = MICROSERVICE_TYPES.get(args.type)
        if label is None:
            print_error(f"Invalid microservice type: {args.type}. Use: grpc, nats, tcp")
            return
        print_success(f"{label} microservice {args.name} generated")
        return
    if kind == "guard":
        print_success(f"Guard {args.name} generated")
        return
    if kind == "interceptor":
        print_success(f"Interceptor {args.name} generated")
        return

    if kind == "crud":
        request = GenerationRequest(
            kind=GenerationKind.MODULE,
            raw_name=args.name,
            options=OptionSet(
                global_mode=args.global_mode,
                no_dto=args.no_dto,
                no_model=args.no_model,
                crud=True,
            ),
            strategy=Strategy.LEGACY_FLAT if args.flat else Strategy.FLAT_MODULE,
        )
    else:
        request = GenerationRequest(
            kind=GenerationKind(kind), raw_name=args.name, strategy=Strategy.LEGACY_FLAT
        )

    context = _context(config)
    renderer = _renderer(config)

    if request.kind is GenerationKind.MODULE:
        if request.strategy is Strategy.LEGACY_FLAT:
            await LegacyGenerator(context, renderer).generate_crud(request.raw_name, request.options)
        else:
            await ModuleOrchestrator(context, renderer).generate(request.raw_name, request.options)
        return

    legacy = LegacyGenerator(context, renderer)
    if request.kind is GenerationKind.CONTROLLER:
        await legacy.generate_controller(request.raw_name)
    elif request.kind is GenerationKind.SERVICE:
        await legacy.generate_service(request.raw_name)
    elif request.kind is GenerationKind.REPOSITORY:
        await legacy.generate_repository(request.raw_name)


async def _new(args: argparse.Namespace, config: Config) -> None:
    project = ProjectConfig(
        name=args.project_name,
        port=config.default_port,
        go_version=config.go_version,
    )
    await ProjectGenerator(project, _renderer(config)).generate(config.project_root)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``goney`` and ``python -m goney``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = Config.from_env()

    try:
        if args.command == "new":
            asyncio.run(_new(args, config))
        elif args.command in ("generate", "g"):
            asyncio.run(_generate(args, config))
    except ValidationError as exc:
        parser.error(f"invalid argument: {exc.errors()[0]['msg']}")

    if args.command == "start":
        try:
            asyncio.run(DevServer(config).start())
        except DevServerError as exc:
            print_error(f"Error: {exc}")
            sys.exit(1)
        except KeyboardInterrupt:
            sys.exit(130)


if __name__ == "__main__":
    main()
