"""Runtime configuration for create-standard."""
import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

PACKAGE_DIR = Path(__file__).parent.parent

DEFAULT_GENERATOR = "npm create vite"
DEFAULT_PROJECT_NAME = "project-starter"
DEFAULT_OVERLAY_DIR = PACKAGE_DIR / "standard"
DEFAULT_CATALOG_FILE = PACKAGE_DIR / "templates" / "catalog.yml"


@dataclass
class ScaffoldConfig:
    """Runtime configuration for a scaffolding run.

    Attributes:
        generator_command: Base command of the external template generator
        overlay_dir: Root of the overlay trees (``common/`` plus one per template id)
        catalog_file: YAML document declaring frameworks and the common overlay
        default_project_name: Placeholder offered when no target is given
        log_file: Optional log file for the run
    """

    generator_command: List[str] = field(
        default_factory=lambda: shlex.split(DEFAULT_GENERATOR)
    )
    overlay_dir: Path = DEFAULT_OVERLAY_DIR
    catalog_file: Path = DEFAULT_CATALOG_FILE
    default_project_name: str = DEFAULT_PROJECT_NAME
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Create config from environment variables.

        Environment variables:
            CREATE_STANDARD_GENERATOR: Generator command line (default: npm create vite)
            CREATE_STANDARD_OVERLAY_DIR: Overlay root directory
            CREATE_STANDARD_CATALOG: Catalog YAML file
            CREATE_STANDARD_DEFAULT_NAME: Default project name
            CREATE_STANDARD_LOG_FILE: Log file path

        Returns:
            ScaffoldConfig instance with values from environment or defaults
        """
        return cls(
            generator_command=shlex.split(
                os.getenv("CREATE_STANDARD_GENERATOR", DEFAULT_GENERATOR)
            ),
            overlay_dir=Path(
                os.getenv("CREATE_STANDARD_OVERLAY_DIR", str(DEFAULT_OVERLAY_DIR))
            ),
            catalog_file=Path(
                os.getenv("CREATE_STANDARD_CATALOG", str(DEFAULT_CATALOG_FILE))
            ),
            default_project_name=os.getenv(
                "CREATE_STANDARD_DEFAULT_NAME", DEFAULT_PROJECT_NAME
            ),
            log_file=os.getenv("CREATE_STANDARD_LOG_FILE") or None,
        )
