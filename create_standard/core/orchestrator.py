"""End-to-end scaffolding flow.

The flow is a fixed sequence of states, each with its own entry condition:

1. project name     - skipped when a target directory was given
2. overwrite check  - only asked when the target exists and is not empty
3. package name     - skipped when the target is already a valid package name
4. template         - skipped when ``--template`` names a known template
5. materialize      - clear or create the target directory
6. generate         - run the external generator
7. overlay          - copy the common tree, then the template tree
8. manifest merge   - merge scripts and devDependencies into package.json

States 1-4 only ask questions; nothing touches the filesystem until all of
them have passed, so a cancellation there leaves no trace.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Protocol, Sequence, Tuple, Union

from create_standard.core.catalog import TemplateCatalog
from create_standard.core.config import DEFAULT_PROJECT_NAME
from create_standard.core.generator import GeneratorRunner
from create_standard.core.logger import get_logger
from create_standard.core.manifest import compose_manifest
from create_standard.core.materializer import clear_dir, copy_tree, is_empty_dir
from create_standard.core.naming import is_valid_package_name, to_valid_package_name

logger = get_logger(__name__)

COMMON_OVERLAY = "common"
CANCELLED_MESSAGE = "✖ Operation cancelled"

Validator = Callable[[str], Union[bool, str]]


class OperationCancelled(Exception):
    """Raised when the user declines to continue or interrupts a prompt."""

    def __init__(self, message: str = CANCELLED_MESSAGE):
        super().__init__(message)


@dataclass(frozen=True)
class Choice:
    """One entry of a selection prompt."""

    title: str
    value: str
    style: str = "white"


class Prompter(Protocol):
    """Interactive questions asked during scaffolding.

    Implementations raise ``OperationCancelled`` when the user interrupts.
    """

    def text(self, message: str, default: str, validate: Optional[Validator] = None) -> str:
        ...

    def confirm(self, message: str) -> bool:
        ...

    def select(self, message: str, choices: Sequence[Choice], default: int = 0) -> str:
        ...


@dataclass(frozen=True)
class ResolvedTarget:
    """Validated answers for one run."""

    root_path: Path
    package_name: str
    template_id: str


class ScaffoldOrchestrator:
    """Drives a scaffolding run from questions to the merged manifest."""

    def __init__(
        self,
        catalog: TemplateCatalog,
        generator: GeneratorRunner,
        prompter: Prompter,
        overlay_dir: Path,
        cwd: Optional[Path] = None,
        default_project_name: str = DEFAULT_PROJECT_NAME,
    ):
        self.catalog = catalog
        self.generator = generator
        self.prompter = prompter
        self.overlay_dir = overlay_dir
        self.cwd = cwd or Path.cwd()
        self.default_project_name = default_project_name

    def run(self, target_dir: Optional[str] = None, template: Optional[str] = None) -> ResolvedTarget:
        """Ask, validate and scaffold.

        Raises:
            OperationCancelled: If the user cancels before anything is written
        """
        target, overwrite = self.resolve(target_dir, template)

        logger.info(f"Scaffolding project in {target.root_path}...")
        self.materialize(target, overwrite)
        self.generate(target)
        self.apply_overlays(target)
        self.merge_manifest(target)
        return target

    def resolve(
        self, target_dir: Optional[str] = None, template: Optional[str] = None
    ) -> Tuple[ResolvedTarget, bool]:
        """Run the question states and return the target plus the overwrite decision."""
        target_dir = self.collect_project_name(target_dir)
        overwrite = self.check_overwrite(target_dir)
        package_name = self.collect_package_name(target_dir)
        template_id = self.resolve_template(template)

        target = ResolvedTarget(
            root_path=(self.cwd / target_dir).resolve(),
            package_name=package_name,
            template_id=template_id,
        )
        return target, overwrite

    def collect_project_name(self, target_dir: Optional[str]) -> str:
        if target_dir:
            return target_dir
        answer = self.prompter.text("Project name:", default=self.default_project_name)
        return answer.strip() or self.default_project_name

    def check_overwrite(self, target_dir: str) -> bool:
        """Return True when an existing non-empty target may be emptied.

        Raises:
            OperationCancelled: If the user declines
            NotADirectoryError: If the target exists but is not a directory
        """
        root = self.cwd / target_dir
        if root.exists() and not root.is_dir():
            raise NotADirectoryError(f"Target path {root} exists and is not a directory")
        if not root.exists() or is_empty_dir(root):
            return False

        location = "Current directory" if target_dir == "." else f'Target directory "{target_dir}"'
        if not self.prompter.confirm(f"{location} is not empty. Remove existing files and continue?"):
            raise OperationCancelled()
        return True

    def collect_package_name(self, target_dir: str) -> str:
        if is_valid_package_name(target_dir):
            return target_dir
        return self.prompter.text(
            "Package name:",
            default=to_valid_package_name(target_dir),
            validate=lambda name: is_valid_package_name(name) or "Invalid package.json name",
        )

    def resolve_template(self, template: Optional[str]) -> str:
        """Use ``template`` if the catalog knows it, otherwise ask.

        An unknown value is reported in the framework question, not raised.
        """
        if self.catalog.is_known_template(template):
            return template

        if template:
            logger.debug(f"Unknown template '{template}', falling back to selection")
            message = f'"{template}" isn\'t a valid template. Please choose from below: '
        else:
            message = "Select a framework:"

        frameworks = {framework.name: framework for framework in self.catalog.list_frameworks()}
        choices = [
            Choice(title=framework.name, value=framework.name, style=framework.display_color)
            for framework in frameworks.values()
        ]
        framework = frameworks[self.prompter.select(message, choices, default=0)]

        if not framework.variants:
            return framework.name

        variant_choices = [
            Choice(title=variant.name, value=variant.name, style=variant.display_color)
            for variant in framework.variants
        ]
        return self.prompter.select("Select a variant:", variant_choices, default=0)

    def materialize(self, target: ResolvedTarget, overwrite: bool) -> None:
        if overwrite:
            clear_dir(target.root_path)
        elif not target.root_path.exists():
            target.root_path.mkdir(parents=True)

    def generate(self, target: ResolvedTarget) -> None:
        """Run the generator from the parent directory so it fills ``root_path``."""
        self.generator.run(
            target.root_path.name, target.template_id, cwd=target.root_path.parent
        )

    def apply_overlays(self, target: ResolvedTarget) -> List[Path]:
        """Copy the common overlay tree, then the template's own tree if present."""
        applied = []
        for name in (COMMON_OVERLAY, target.template_id):
            overlay = self.overlay_dir / name
            if overlay.is_dir():
                copy_tree(overlay, target.root_path)
                applied.append(overlay)
                logger.info(f"Applied overlay '{name}'")
        return applied

    def merge_manifest(self, target: ResolvedTarget) -> Path:
        return compose_manifest(
            target.root_path,
            self.catalog.common,
            self.catalog.resolve_overlay(target.template_id),
            package_name=target.package_name,
        )
