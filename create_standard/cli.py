#!/usr/bin/env python3
"""create-standard CLI - scaffold a frontend project with shared tooling."""
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from create_standard.cli_support import detect_package_manager, handle_cli_error, print_next_steps
from create_standard.core.catalog import load_catalog
from create_standard.core.config import ScaffoldConfig
from create_standard.core.generator import GeneratorRunner
from create_standard.core.logger import get_logger, set_verbose, setup_file_logging
from create_standard.core.orchestrator import OperationCancelled, ScaffoldOrchestrator
from create_standard.prompts import TyperPrompter

app = typer.Typer(
    name="create-standard",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)


@app.command()
def create(
    target_dir: Optional[str] = typer.Argument(None, help="Project directory (also the default package name)"),
    template: Optional[str] = typer.Option(None, "--template", "-t", help="Template id, e.g. vue-ts or react-ts"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output and tracebacks"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file"),
):
    """Scaffold a frontend project with shared lint and commit tooling.

    Generates the base template in TARGET_DIR with 'npm create vite', then adds
    eslint, stylelint, commitlint and husky configuration on top.

    Quick start: create-standard my-app --template vue-ts
    """
    config = ScaffoldConfig.from_env()
    if log_file or config.log_file:
        setup_file_logging(log_file=log_file or config.log_file, verbose=verbose)
    set_verbose(verbose)

    cwd = Path.cwd()
    try:
        orchestrator = ScaffoldOrchestrator(
            catalog=load_catalog(config.catalog_file),
            generator=GeneratorRunner(config.generator_command),
            prompter=TyperPrompter(console),
            overlay_dir=config.overlay_dir,
            cwd=cwd,
            default_project_name=config.default_project_name,
        )
        target = orchestrator.run(target_dir, template)
    except OperationCancelled as e:
        console.print(f"[red]{e}[/red]")
        return
    except Exception as e:
        logger.debug("Scaffolding failed", exc_info=True)
        handle_cli_error(e, console, verbose=verbose)

    console.print()
    print_next_steps(console, target.root_path, cwd.resolve(), detect_package_manager())


def main():
    app()


if __name__ == "__main__":
    main()
